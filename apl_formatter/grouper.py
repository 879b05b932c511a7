"""Script Grouper - Groups formatted action entries by trigger key

`group_script` is the core contract: keys in lexicographic order, entries
in line order. `ActionGroup` and `render_report` cover the presentation
step (numbered entries separated by a blank line) consumed by the CLI and
the viewer.
"""

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel

from .config import DEFAULT_CONFIG, FormatterConfig
from .processor import process_line
from .transformer import ConditionTransformer


log = logging.getLogger("apl_formatter.grouper")


class ActionGroup(BaseModel):
    """One display panel: a trigger key and its entries in line order"""
    key: str
    entries: List[str]

    def numbered_entries(self) -> List[str]:
        return [f"({i}) {entry}" for i, entry in enumerate(self.entries, 1)]

    def body(self, separator: str = "\n\n") -> str:
        return separator.join(self.numbered_entries())


def group_script(script: str, config: Optional[FormatterConfig] = None) -> Dict[str, List[str]]:
    """Group every action line of script by key, keys sorted"""
    config = config or DEFAULT_CONFIG
    transformer = ConditionTransformer(config)
    groups: Dict[str, List[str]] = {}

    # Only \n ends a line; a trailing \r is removed by strip()
    for line in script.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith(config.comment_prefix):
            log.debug("Skipping line: %r", line)
            continue

        result = process_line(stripped, transformer)
        if result is None:
            continue
        key, entry = result
        groups.setdefault(key, []).append(entry)

    log.debug("Grouped script into %d keys", len(groups))
    return {key: groups[key] for key in sorted(groups)}


def build_groups(script: str, config: Optional[FormatterConfig] = None) -> List[ActionGroup]:
    """Group a script into ActionGroup models, ordered by key"""
    return [ActionGroup(key=key, entries=entries)
            for key, entries in group_script(script, config).items()]


def format_group_body(entries: List[str], separator: str = "\n\n") -> str:
    """Number entries `(1) ...` and join them with separator"""
    return ActionGroup(key="", entries=entries).body(separator)


def render_report(script: str, config: Optional[FormatterConfig] = None) -> str:
    """Plain-text report: key header followed by its numbered entries"""
    config = config or DEFAULT_CONFIG
    sections = []
    for group in build_groups(script, config):
        sections.append(f"[{group.key}]\n{group.body(config.entry_separator)}")
    return "\n\n".join(sections)
