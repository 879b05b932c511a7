"""Command-line entry point: `apl-format [PATH] [--debug] [--indent N] [--gui]`"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import load_config
from .grouper import render_report


log = logging.getLogger("apl_formatter.cli")


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the command-line tool"""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apl-format",
        description="Group and pretty-print an action priority list script.",
    )
    parser.add_argument("path", nargs="?", help="script file (default: stdin)")
    parser.add_argument("--indent", type=int, default=None, help="spaces per indent level")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--gui", action="store_true", help="open the interactive viewer")
    return parser


def read_script(path: Optional[str]) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.debug)

    try:
        config = load_config(indent_width=args.indent)
    except ValidationError as e:
        log.error("Invalid configuration: %s", e)
        return 2

    try:
        # The viewer starts empty rather than waiting on stdin
        script = "" if args.gui and args.path is None else read_script(args.path)
    except (OSError, UnicodeDecodeError) as e:
        log.error("Cannot read %s: %s", args.path or "<stdin>", e)
        return 1

    if args.gui:
        from .viewer import run_viewer
        return run_viewer(script, config)

    report = render_report(script, config)
    if report:
        print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
