"""APL Condition Parser - Converts a token list into a logical expression tree

Recursive descent over token spans rather than a token cursor:

  expression := or_split | and_split | group | atom
  or_split   := span ('or' span)+        (split at depth 0 only)
  and_split  := span ('and' span)+       (split at depth 0 only)
  group      := '(' expression ')'       (single outermost matched pair)
  atom       := any remaining span, rejoined with single spaces

`or` is tried before `and`, so OR always ends up outermost and AND binds
tighter. Parenthesis balance is not validated beyond the group check:
malformed spans fall through to an atom that keeps the stray parentheses.
"""

from typing import List, Optional, Sequence

from .ast_nodes import AtomNode, ExprNode, NodeType, from_parts
from .lexer import TokenKind, classify_token


OR_KEYWORD = "or"
AND_KEYWORD = "and"


def split_top_level(tokens: Sequence[str], keyword: str) -> Optional[List[Sequence[str]]]:
    """Split tokens on depth-0 occurrences of keyword.

    Returns None when the keyword never occurs outside parentheses,
    otherwise the spans between the split points in order. Spans may be
    empty when the keyword is leading, trailing or doubled.
    """
    parts = []
    depth = 0
    last = 0
    for i, token in enumerate(tokens):
        kind = classify_token(token)
        if kind is TokenKind.LPAREN:
            depth += 1
        elif kind is TokenKind.RPAREN:
            depth -= 1
        elif depth == 0 and token == keyword:
            parts.append(tokens[last:i])
            last = i + 1

    if not parts:
        return None
    parts.append(tokens[last:])
    return parts


def is_wrapped_group(tokens: Sequence[str]) -> bool:
    """Check whether the whole span is one redundant, matched parenthesis pair"""
    if len(tokens) < 2:
        return False
    if classify_token(tokens[0]) is not TokenKind.LPAREN or classify_token(tokens[-1]) is not TokenKind.RPAREN:
        return False

    depth = 0
    for token in tokens[1:-1]:
        kind = classify_token(token)
        if kind is TokenKind.LPAREN:
            depth += 1
        elif kind is TokenKind.RPAREN:
            depth -= 1
        if depth < 0:
            return False
    return depth == 0


class ConditionParser:
    """Recursive descent parser for mapped condition tokens"""

    def parse(self, tokens: Sequence[str]) -> ExprNode:
        """Parse a token span into an expression tree"""
        for keyword, node_type in ((OR_KEYWORD, NodeType.OR), (AND_KEYWORD, NodeType.AND)):
            parts = split_top_level(tokens, keyword)
            if parts is not None:
                return from_parts(node_type, (self.parse(part) for part in parts))

        if is_wrapped_group(tokens):
            return self.parse(tokens[1:-1])

        return AtomNode(" ".join(tokens))


def parse_tokens(tokens: Sequence[str]) -> ExprNode:
    """Convenience function to parse a token list"""
    return ConditionParser().parse(tokens)
