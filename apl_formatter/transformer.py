"""Condition Transformer - Turns raw `if=` text into a readable condition

Pipeline for one condition string:
1. `!talent.x` -> `x not talented`, then `talent.x` -> `x talented`
2. tokenize
3. `&` -> and, `|` -> or, `!` -> not; `debuff.` / `buff.` removed from
   every other token
4. parse into an expression tree
5. pretty-print at the configured base indent
"""

import logging
import re
from typing import List, Optional

from .ast_nodes import AtomNode
from .config import DEFAULT_CONFIG, FormatterConfig
from .lexer import APLLexer
from .parser import ConditionParser
from .printer import PrettyPrinter


log = logging.getLogger("apl_formatter.transformer")

NOT_TALENT_RE = re.compile(r"!talent\.([a-zA-Z0-9_.]+)")
TALENT_RE = re.compile(r"talent\.([a-zA-Z0-9_.]+)")

TOKEN_WORDS = {
    '&': 'and',
    '|': 'or',
    '!': 'not',
}


def rewrite_talents(text: str) -> str:
    """Replace talent checks with natural-language suffixes"""
    text = NOT_TALENT_RE.sub(r"\1 not talented", text)
    return TALENT_RE.sub(r"\1 talented", text)


def map_token(token: str) -> str:
    """Translate operator symbols to words and strip aura prefixes"""
    if token in TOKEN_WORDS:
        return TOKEN_WORDS[token]
    return token.replace("debuff.", "").replace("buff.", "")


class ConditionTransformer:
    """Drives rewrite, tokenize, parse and render for condition strings"""

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.lexer = APLLexer()
        self.parser = ConditionParser()
        self.printer = PrettyPrinter(self.config.indent_width)

    def prepare_tokens(self, raw: str) -> List[str]:
        """Rewrite and tokenize raw condition text into parser keywords"""
        tokens = self.lexer.tokenize(rewrite_talents(raw))
        return [map_token(token) for token in tokens]

    def transform(self, raw: str) -> str:
        """Format raw condition text as an indented multi-line string"""
        tokens = self.prepare_tokens(raw)
        try:
            expr = self.parser.parse(tokens)
            log.debug("Parsed condition %r -> %s", raw, expr)
            return self.printer.render(expr, self.config.base_indent)
        except RecursionError:
            # Too deeply nested to format; keep the text as a single atom
            log.debug("Condition nested too deeply, rendering as atom: %r", raw)
            return self.printer.render(AtomNode(" ".join(tokens)), self.config.base_indent)


def transform_condition(raw: str, config: Optional[FormatterConfig] = None) -> str:
    """Convenience function to format one condition string"""
    return ConditionTransformer(config).transform(raw)
