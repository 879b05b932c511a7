"""
Tests for cli.py
"""
import io

from apl_formatter.cli import build_arg_parser, main


class TestMain:
    """Command-line entry point"""

    def test_file_input(self, tmp_path, capsys, sample_script):
        path = tmp_path / "mage.simc"
        path.write_text(sample_script, encoding="utf-8")

        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("[actions]\n(1) fireball:\n")
        assert "[precombat]\n(1) snapshot_stats" in out

    def test_stdin_input(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("actions.st=fireball\n"))
        assert main([]) == 0
        assert capsys.readouterr().out == "[st]\n(1) fireball\n"

    def test_indent_option(self, tmp_path, capsys):
        path = tmp_path / "apl.simc"
        path.write_text("actions=a,if=b|c\n", encoding="utf-8")
        assert main([str(path), "--indent", "2"]) == 0
        assert capsys.readouterr().out == "[actions]\n(1) a:\n  b\n  OR c\n"

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.simc")]) == 1

    def test_invalid_indent(self, tmp_path):
        assert main([str(tmp_path / "any.simc"), "--indent", "0"]) == 2

    def test_parser_defaults(self):
        args = build_arg_parser().parse_args([])
        assert args.path is None
        assert not args.gui
        assert not args.debug

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.simc"
        path.write_bytes(b"actions=a\xff\xfe\n")
        assert main([str(path)]) == 1

    def test_gui_missing_file(self, tmp_path):
        """The file is read before the viewer is imported"""
        assert main([str(tmp_path / "missing.simc"), "--gui"]) == 1
