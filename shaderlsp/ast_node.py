"""Typed views over syntax nodes and helpers for finding their children."""

from __future__ import annotations

from typing import ClassVar, Hashable, Iterator, Optional, TypeVar

from shaderlsp.syntax_tree import GreenToken, SyntaxNode, SyntaxToken

N = TypeVar("N", bound="AstNode")


class AstNode:
    """A syntax node viewed as a particular kind of AST node.

    Subclasses set ``KINDS`` to the syntax kinds they accept; the base class
    accepts every kind.
    """

    KINDS: ClassVar[Optional[frozenset]] = None

    __slots__ = ("syntax",)

    def __init__(self, syntax: SyntaxNode):
        self.syntax = syntax

    @classmethod
    def can_cast(cls, kind: Hashable) -> bool:
        return cls.KINDS is None or kind in cls.KINDS

    @classmethod
    def cast(cls: type[N], syntax: SyntaxNode) -> Optional[N]:
        return cls(syntax) if cls.can_cast(syntax.kind) else None

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.syntax == other.syntax

    def __hash__(self) -> int:
        return hash((type(self), self.syntax))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.syntax!r})"


def cast_first(syntax: SyntaxNode, *args: type) -> Optional[AstNode]:
    """Cast ``syntax`` to the first of the given node types that accepts it."""
    for node_type in args:
        node = node_type.cast(syntax)
        if node is not None:
            return node
    return None


def child(parent: SyntaxNode, node_type: type[N]) -> Optional[N]:
    return next(children(parent, node_type), None)


def children(parent: SyntaxNode, node_type: type[N]) -> Iterator[N]:
    for node in parent.children():
        cast = node_type.cast(node)
        if cast is not None:
            yield cast


def child_syntax(parent: SyntaxNode, kind: Hashable) -> Optional[SyntaxNode]:
    return next((n for n in parent.children() if n.kind == kind), None)


def token(parent: SyntaxNode, kind: Hashable) -> Optional[SyntaxToken]:
    return next(
        (
            element
            for element in parent.children_with_tokens()
            if isinstance(element, SyntaxToken) and element.kind == kind
        ),
        None,
    )


def text_of_first_token(node: SyntaxNode) -> str:
    """Text of the node's first child if that child is a token, else ``""``."""
    first = next(iter(node.green.children), None)
    return first.text if isinstance(first, GreenToken) else ""