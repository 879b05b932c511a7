"""APL Formatter

Turns a SimulationCraft-style action priority list into a grouped,
human-readable report.

This module provides:
- Condition tokenizing and parsing into AND/OR expression trees
- Indented pretty-printing with OR-below-AND precedence
- Line splitting into trigger key and action entry
- Grouping of entries by trigger key

Usage:
    from apl_formatter import APLFormatter

    formatter = APLFormatter()
    groups = formatter.group(apl_text)
    print(formatter.report(apl_text))
"""

from typing import Dict, List, Optional

from .lexer import APLLexer, TokenKind, classify_token, tokenize_condition
from .ast_nodes import AndNode, AtomNode, ExprNode, NodeType, OrNode
from .parser import ConditionParser, parse_tokens
from .printer import PrettyPrinter, render_expression
from .transformer import ConditionTransformer, transform_condition
from .processor import process_line
from .grouper import ActionGroup, build_groups, group_script, render_report
from .config import FormatterConfig, load_config

__version__ = "1.0.0"

__all__ = [
    'APLFormatter',
    'APLLexer',
    'TokenKind',
    'classify_token',
    'tokenize_condition',
    'ConditionParser',
    'parse_tokens',
    'PrettyPrinter',
    'render_expression',
    'ConditionTransformer',
    'transform_condition',
    'process_line',
    'ActionGroup',
    'build_groups',
    'group_script',
    'render_report',
    'FormatterConfig',
    'load_config',
    # AST nodes
    'ExprNode',
    'AtomNode',
    'AndNode',
    'OrNode',
    'NodeType',
]


class APLFormatter:
    """Main formatter - combines all components for easy usage"""

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or load_config()
        self.transformer = ConditionTransformer(self.config)

    def format_condition(self, raw: str) -> str:
        """Format the text following `,if=`"""
        return self.transformer.transform(raw)

    def format_line(self, line: str):
        """(key, entry) for one action line, or None"""
        return process_line(line, self.transformer)

    def group(self, script: str) -> Dict[str, List[str]]:
        """Group a whole script by trigger key"""
        return group_script(script, self.config)

    def report(self, script: str) -> str:
        """Plain-text grouped report"""
        return render_report(script, self.config)
