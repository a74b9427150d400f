"""Syntax tree nodes built from lexer tokens."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

from minilisp.lexer import Token, TokenType


class NodeType(enum.Enum):
    """Kinds of node in the syntax tree."""

    PROGRAM = 0
    INVALID = 1
    LPAREN = 2
    RPAREN = 3
    SYMBOL = 4
    KEYWORD = 5
    STRING = 6
    NUMERIC = 7
    COMMENT = 8
    LIST = 9
    ATOM = 10


@dataclass
class AtomNode:
    """A leaf node wrapping a single token."""

    token: Token

    @property
    def type(self) -> NodeType:
        return NodeType.ATOM


@dataclass
class ListNode:
    """A parenthesised list holding child nodes in order."""

    children: list[Node] = field(default_factory=list)

    @property
    def type(self) -> NodeType:
        return NodeType.LIST

    def append(self, child: Node) -> None:
        """Add ``child`` at the end of the list."""
        if not isinstance(child, (AtomNode, ListNode)):
            raise TypeError("child must be an AtomNode or a ListNode")
        self.children.append(child)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)


Node = Union[AtomNode, ListNode]


def node_create(token: Token) -> Node:
    """Create an empty list node for an opening paren, else an atom node."""
    if token.type is TokenType.LPAREN:
        return ListNode()
    return AtomNode(token)