"""Tree searches and navigation over syntax trees."""

from __future__ import annotations

import heapq
from typing import Callable, Hashable, Iterator, Optional, TypeVar

from shaderlsp.ast_node import AstNode
from shaderlsp.syntax_tree import (
    Direction,
    SyntaxElement,
    SyntaxNode,
    SyntaxToken,
    TextRange,
)

N = TypeVar("N", bound=AstNode)


def _range_len(node: SyntaxNode) -> int:
    return node.text_range().length


def ancestors_at_offset(node: SyntaxNode, offset: int) -> Iterator[SyntaxNode]:
    """Ancestors of the tokens at ``offset``, shortest first."""
    chains = [tok.parent_ancestors() for tok in node.token_at_offset(offset)]
    return heapq.merge(*chains, key=_range_len)


def _first_cast(nodes: Iterator[SyntaxNode], node_type: type[N]) -> Optional[N]:
    for node in nodes:
        cast = node_type.cast(node)
        if cast is not None:
            return cast
    return None


def find_node_at_offset(syntax: SyntaxNode, offset: int, node_type: type[N]) -> Optional[N]:
    """The shortest node of ``node_type`` around ``offset``."""
    return _first_cast(ancestors_at_offset(syntax, offset), node_type)


def find_node_at_range(syntax: SyntaxNode, range: TextRange, node_type: type[N]) -> Optional[N]:
    element = syntax.covering_element(range)
    ancestors = element.parent_ancestors() if isinstance(element, SyntaxToken) else element.ancestors()
    return _first_cast(ancestors, node_type)


def _step(token: SyntaxToken, direction: Direction) -> Optional[SyntaxToken]:
    return token.next_token() if direction is Direction.NEXT else token.prev_token()


def skip_trivia_token(
    token: SyntaxToken, direction: Direction, is_trivia: Callable[[Hashable], bool]
) -> Optional[SyntaxToken]:
    """Move in ``direction`` until a non-trivia token is reached."""
    current: Optional[SyntaxToken] = token
    while current is not None and is_trivia(current.kind):
        current = _step(current, direction)
    return current


def skip_whitespace_token(
    token: SyntaxToken, direction: Direction, whitespace_kind: Hashable
) -> Optional[SyntaxToken]:
    """Move in ``direction`` until a non-whitespace token is reached."""
    current: Optional[SyntaxToken] = token
    while current is not None and current.kind == whitespace_kind:
        current = _step(current, direction)
    return current


def non_trivia_sibling(
    element: SyntaxElement, direction: Direction, is_trivia: Callable[[Hashable], bool]
) -> Optional[SyntaxElement]:
    """The first sibling in ``direction`` that is a node or a non-trivia token."""
    siblings = element.siblings_with_tokens(direction)
    next(siblings, None)
    for sibling in siblings:
        if isinstance(sibling, SyntaxNode) or not is_trivia(sibling.kind):
            return sibling
    return None


def least_common_ancestor(u: SyntaxNode, v: SyntaxNode) -> Optional[SyntaxNode]:
    if u == v:
        return u
    u_chain = list(u.ancestors())
    v_chain = list(v.ancestors())
    keep = min(len(u_chain), len(v_chain))
    for x, y in zip(u_chain[len(u_chain) - keep:], v_chain[len(v_chain) - keep:]):
        if x == y:
            return x
    return None


def neighbor(me: N, direction: Direction) -> Optional[N]:
    """The nearest sibling in ``direction`` of the same AST type as ``me``."""
    siblings = me.syntax.siblings(direction)
    next(siblings, None)
    return _first_cast(siblings, type(me))


def has_errors(node: SyntaxNode, error_kind: Hashable) -> bool:
    return any(c.kind == error_kind for c in node.children())