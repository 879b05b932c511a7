"""AST Nodes - Logical expression tree for APL conditions

A condition parses into one of three immutable node shapes:
- AtomNode: an indivisible predicate, kept as its rejoined token text
- AndNode: operands joined by a top-level `and`
- OrNode: operands joined by a top-level `or`

Children are stored as tuples so a tree can never be mutated or shared
after construction.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Tuple, Union


class NodeType(Enum):
    """Types of AST nodes"""
    ATOM = "ATOM"
    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class AtomNode:
    """Leaf predicate such as `mana > 50` or `pyromania talented`"""
    text: str

    node_type: ClassVar[NodeType] = NodeType.ATOM

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class AndNode:
    """Conjunction of operands at the same nesting level"""
    children: Tuple["ExprNode", ...]

    node_type: ClassVar[NodeType] = NodeType.AND

    def __str__(self) -> str:
        return "(" + " & ".join(str(child) for child in self.children) + ")"


@dataclass(frozen=True)
class OrNode:
    """Disjunction of operands; binds looser than AndNode"""
    children: Tuple["ExprNode", ...]

    node_type: ClassVar[NodeType] = NodeType.OR

    def __str__(self) -> str:
        return "(" + " | ".join(str(child) for child in self.children) + ")"


ExprNode = Union[AtomNode, AndNode, OrNode]


# Utility functions for creating nodes
def atom(text: str) -> AtomNode:
    """Create an atom node"""
    return AtomNode(text)


def and_(*children: ExprNode) -> AndNode:
    """Create a conjunction node"""
    return AndNode(tuple(children))


def or_(*children: ExprNode) -> OrNode:
    """Create a disjunction node"""
    return OrNode(tuple(children))


def from_parts(node_type: NodeType, parts: Iterable[ExprNode]) -> ExprNode:
    """Build an AND or OR node from already parsed operands"""
    if node_type is NodeType.AND:
        return AndNode(tuple(parts))
    if node_type is NodeType.OR:
        return OrNode(tuple(parts))
    raise ValueError(f"Cannot build composite node of type {node_type.value}")
