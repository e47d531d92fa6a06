"""Pointers that identify a syntax node by its kind and range."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Optional, TypeVar

from shaderlsp.ast_node import AstNode
from shaderlsp.syntax_tree import SyntaxNode, TextRange

N = TypeVar("N", bound=AstNode)
U = TypeVar("U", bound=AstNode)


@dataclass(frozen=True)
class SyntaxNodePtr:
    """Remembers a node across reparses of the same text."""

    range: TextRange
    kind: Hashable

    @classmethod
    def from_node(cls, node: SyntaxNode) -> "SyntaxNodePtr":
        return cls(node.text_range(), node.kind)

    def to_node(self, root: SyntaxNode) -> SyntaxNode:
        """Find the node in ``root``, which must be a tree root built from the same text."""
        if root.parent() is not None:
            raise ValueError("to_node requires the root of a tree")
        node: Optional[SyntaxNode] = root
        while node is not None:
            if node.text_range() == self.range and node.kind == self.kind:
                return node
            found = node.child_or_token_at_range(self.range)
            node = found if isinstance(found, SyntaxNode) else None
        raise LookupError(f"can't resolve local ptr to SyntaxNode: {self!r}")

    def cast(self, node_type: type[N]) -> Optional["AstPtr[N]"]:
        if not node_type.can_cast(self.kind):
            return None
        return AstPtr(self, node_type)


@dataclass(frozen=True)
class AstPtr(Generic[N]):
    """Like ``SyntaxNodePtr`` but remembers the AST type of the node."""

    raw: SyntaxNodePtr
    node_type: type

    @classmethod
    def from_node(cls, node: N) -> "AstPtr[N]":
        return cls(SyntaxNodePtr.from_node(node.syntax), type(node))

    def to_node(self, root: SyntaxNode) -> N:
        node = self.node_type.cast(self.raw.to_node(root))
        if node is None:
            raise LookupError(f"node at {self.raw.range} is not a {self.node_type.__name__}")
        return node

    def syntax_node_ptr(self) -> SyntaxNodePtr:
        return self.raw

    def cast(self, node_type: type[U]) -> Optional["AstPtr[U]"]:
        return self.raw.cast(node_type)