"""
Tests for config.py
"""
import pytest
from pydantic import ValidationError

from apl_formatter.config import FormatterConfig, load_config


class TestFormatterConfig:
    """Defaults and validation"""

    def test_defaults(self):
        config = FormatterConfig()
        assert config.indent_width == 4
        assert config.base_indent == 1
        assert config.comment_prefix == "#"
        assert config.entry_separator == "\n\n"

    def test_invalid_indent(self):
        with pytest.raises(ValidationError):
            FormatterConfig(indent_width=0)

    def test_empty_comment_prefix(self):
        with pytest.raises(ValidationError):
            FormatterConfig(comment_prefix="")

    def test_frozen(self):
        config = FormatterConfig()
        with pytest.raises(ValidationError):
            config.indent_width = 8


class TestLoadConfig:
    """Environment and override handling"""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("APL_FORMATTER_INDENT_WIDTH", "2")
        monkeypatch.setenv("APL_FORMATTER_COMMENT_PREFIX", ";")
        config = load_config()
        assert config.indent_width == 2
        assert config.comment_prefix == ";"

    def test_override_wins(self, monkeypatch):
        monkeypatch.setenv("APL_FORMATTER_INDENT_WIDTH", "2")
        assert load_config(indent_width=8).indent_width == 8

    def test_none_override_ignored(self):
        assert load_config(indent_width=None).indent_width == 4

    def test_invalid_env(self, monkeypatch):
        monkeypatch.setenv("APL_FORMATTER_BASE_INDENT", "deep")
        with pytest.raises(ValidationError):
            load_config()
