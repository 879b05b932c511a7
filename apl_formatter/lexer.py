"""APL Condition Lexer - Splits condition text into flat string tokens

Tokens are plain strings classified by their shape only:
- Comparison operators (<=, >=, <, >, =), longest match first
- Logical operators (& and |)
- Grouping parentheses
- Identifier runs (anything else up to whitespace or an operator)

The lexer never fails: unknown characters simply become part of an
identifier run and whitespace is dropped.
"""

import re
from enum import Enum
from typing import List


# Two-character operators come before their one-character prefixes
TOKEN_RE = re.compile(r"(<=|>=|<|>|=|&|\||\(|\)|[^<>=&|()\s]+)")


class TokenKind(Enum):
    """Shape of a condition token"""
    COMPARISON = "COMPARISON"  # <= >= < > =
    AND = "AND"                # &
    OR = "OR"                  # |
    LPAREN = "LPAREN"          # (
    RPAREN = "RPAREN"          # )
    IDENTIFIER = "IDENTIFIER"  # everything else


OPERATOR_KINDS = {
    '<=': TokenKind.COMPARISON,
    '>=': TokenKind.COMPARISON,
    '<': TokenKind.COMPARISON,
    '>': TokenKind.COMPARISON,
    '=': TokenKind.COMPARISON,
    '&': TokenKind.AND,
    '|': TokenKind.OR,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
}


def classify_token(token: str) -> TokenKind:
    """Return the kind of a token produced by the lexer"""
    return OPERATOR_KINDS.get(token, TokenKind.IDENTIFIER)


class APLLexer:
    """Condition lexer - converts condition text into string tokens"""

    def tokenize(self, text: str) -> List[str]:
        """Tokenize text left to right; empty input yields no tokens"""
        return TOKEN_RE.findall(text)


def tokenize_condition(text: str) -> List[str]:
    """Convenience function to tokenize a condition string"""
    return APLLexer().tokenize(text)
