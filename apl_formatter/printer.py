"""Pretty Printer - Renders condition trees as indented, multi-line text

Formatting rules (one indent level = indent_width spaces):
- Atom: indentation followed by its text
- AND: operands on one line joined by " AND "; an operand that is a
  multi-operand OR becomes a parenthesized block indented one level deeper
- OR: one operand per visual block at the same level, every operand after
  the first starting with "OR "
- AND/OR with a single operand render as that operand
"""

from typing import List

from .ast_nodes import AndNode, AtomNode, ExprNode, OrNode


class PrettyPrinter:
    """Indentation-aware renderer for AtomNode / AndNode / OrNode trees"""

    def __init__(self, indent_width: int = 4):
        self.indent_width = indent_width

    def indent(self, level: int) -> str:
        """Whitespace prefix for the given indent level"""
        return " " * (self.indent_width * level)

    def render(self, expr: ExprNode, level: int = 0) -> str:
        """Render expr with its first line indented to level"""
        if isinstance(expr, AtomNode):
            return self.indent(level) + expr.text
        if isinstance(expr, AndNode):
            return self._render_and(expr, level)
        if isinstance(expr, OrNode):
            return self._render_or(expr, level)
        raise TypeError(f"Unknown expression node: {type(expr).__name__}")

    def _render_and(self, expr: AndNode, level: int) -> str:
        if not expr.children:
            return ""
        if len(expr.children) == 1:
            return self.render(expr.children[0], level)

        prefix = self.indent(level)
        fragments: List[str] = []
        for child in expr.children:
            if isinstance(child, OrNode) and len(child.children) > 1:
                block = self.render(child, level + 1)
                fragments.append(f"(\n{block}\n{prefix})")
            else:
                fragments.append(self.render(child, level).lstrip())
        return prefix + " AND ".join(fragments)

    def _render_or(self, expr: OrNode, level: int) -> str:
        if not expr.children:
            return ""
        if len(expr.children) == 1:
            return self.render(expr.children[0], level)

        prefix = self.indent(level)
        blocks = [self.render(expr.children[0], level)]
        for child in expr.children[1:]:
            rendered = self.render(child, level)
            # Operands are rendered at this level, so only the first line
            # needs the OR marker slotted in after its indentation
            blocks.append(f"{prefix}OR {rendered.lstrip()}")
        return "\n".join(blocks)


def render_expression(expr: ExprNode, level: int = 0, indent_width: int = 4) -> str:
    """Convenience function to render an expression tree"""
    return PrettyPrinter(indent_width).render(expr, level)
