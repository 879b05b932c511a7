"""
pytest configuration

Shared fixtures for the formatter tests
"""
import pytest

from apl_formatter.ast_nodes import atom, and_, or_
from apl_formatter.config import FormatterConfig
from apl_formatter.parser import ConditionParser
from apl_formatter.printer import PrettyPrinter
from apl_formatter.transformer import ConditionTransformer


@pytest.fixture
def parser():
    """ConditionParser instance"""
    return ConditionParser()


@pytest.fixture
def printer():
    """PrettyPrinter with the default four-space indent"""
    return PrettyPrinter()


@pytest.fixture
def transformer():
    """ConditionTransformer with default config"""
    return ConditionTransformer()


@pytest.fixture
def nested_expr():
    """a | b & (c | d)"""
    return or_(atom("a"), and_(atom("b"), or_(atom("c"), atom("d"))))


@pytest.fixture
def sample_script():
    """Three-line script mixing `=` and `+=/` lines"""
    return (
        "actions.precombat=snapshot_stats\n"
        "actions+=/fireball,if=talent.pyromania&!debuff.burning\n"
        "actions+=/frostbolt,if=mana>50|talent.icy_veins\n"
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep APL_FORMATTER_* variables from leaking into tests"""
    for name in ("INDENT_WIDTH", "BASE_INDENT", "COMMENT_PREFIX"):
        monkeypatch.delenv(f"APL_FORMATTER_{name}", raising=False)


@pytest.fixture
def narrow_config():
    """Two-space indent config"""
    return FormatterConfig(indent_width=2)
