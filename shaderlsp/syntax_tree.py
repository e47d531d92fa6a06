"""Immutable green trees and positioned syntax nodes built on top of them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Hashable, Iterator, Optional, Union


def _kind_name(kind: Any) -> str:
    name = getattr(kind, "name", None)
    return name if isinstance(name, str) else repr(kind)


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


@dataclass(frozen=True, order=True)
class TextRange:
    """A half-open range of offsets into a text."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"invalid text range {self.start}..{self.end}")

    @classmethod
    def at(cls, offset: int, length: int) -> "TextRange":
        return cls(offset, offset + length)

    @classmethod
    def empty(cls, offset: int) -> "TextRange":
        return cls(offset, offset)

    @property
    def length(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def contains_inclusive(self, offset: int) -> bool:
        return self.start <= offset <= self.end

    def contains_range(self, other: "TextRange") -> bool:
        return self.start <= other.start and other.end <= self.end

    def intersect(self, other: "TextRange") -> Optional["TextRange"]:
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if start > end:
            return None
        return TextRange(start, end)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


class Direction(enum.Enum):
    NEXT = "next"
    PREV = "prev"


@dataclass(frozen=True)
class GreenToken:
    kind: Hashable
    text: str

    @property
    def text_len(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class GreenNode:
    kind: Hashable
    children: tuple

    @property
    def text_len(self) -> int:
        return sum(child.text_len for child in self.children)


class GreenNodeBuilder:
    """Builds a green tree from a flat sequence of start/token/finish calls."""

    def __init__(self) -> None:
        self._parents: list[tuple[Hashable, int]] = []
        self._children: list[Union[GreenNode, GreenToken]] = []

    def start_node(self, kind: Hashable) -> None:
        self._parents.append((kind, len(self._children)))

    def token(self, kind: Hashable, text: str) -> None:
        self._children.append(GreenToken(kind, text))

    def finish_node(self) -> None:
        if not self._parents:
            raise ValueError("finish_node called without a matching start_node")
        kind, first = self._parents.pop()
        children = tuple(self._children[first:])
        del self._children[first:]
        self._children.append(GreenNode(kind, children))

    def finish(self) -> GreenNode:
        if self._parents:
            raise ValueError("unfinished nodes remain in the builder")
        if len(self._children) != 1 or not isinstance(self._children[0], GreenNode):
            raise ValueError("the builder must hold exactly one root node")
        return self._children[0]


def _siblings(element: "SyntaxElement", direction: Direction) -> Iterator["SyntaxElement"]:
    parent = element.parent()
    if parent is None:
        yield element
        return
    elements = list(parent.children_with_tokens())
    if direction is Direction.NEXT:
        yield from elements[element._index:]
    else:
        yield from reversed(elements[: element._index + 1])


class SyntaxNode:
    """A node of a green tree together with its position and parent."""

    __slots__ = ("green", "_parent", "_index", "_offset")

    def __init__(self, green: GreenNode, parent: Optional["SyntaxNode"], index: int, offset: int):
        self.green = green
        self._parent = parent
        self._index = index
        self._offset = offset

    @classmethod
    def new_root(cls, green: GreenNode) -> "SyntaxNode":
        return cls(green, None, 0, 0)

    @property
    def kind(self) -> Hashable:
        return self.green.kind

    def text_range(self) -> TextRange:
        return TextRange.at(self._offset, self.green.text_len)

    def parent(self) -> Optional["SyntaxNode"]:
        return self._parent

    def children_with_tokens(self) -> Iterator["SyntaxElement"]:
        offset = self._offset
        for index, child in enumerate(self.green.children):
            if isinstance(child, GreenNode):
                yield SyntaxNode(child, self, index, offset)
            else:
                yield SyntaxToken(child, self, index, offset)
            offset += child.text_len

    def children(self) -> Iterator["SyntaxNode"]:
        return (c for c in self.children_with_tokens() if isinstance(c, SyntaxNode))

    def ancestors(self) -> Iterator["SyntaxNode"]:
        node: Optional[SyntaxNode] = self
        while node is not None:
            yield node
            node = node._parent

    def siblings(self, direction: Direction) -> Iterator["SyntaxNode"]:
        return (s for s in _siblings(self, direction) if isinstance(s, SyntaxNode))

    def siblings_with_tokens(self, direction: Direction) -> Iterator["SyntaxElement"]:
        return _siblings(self, direction)

    def descendant_tokens(self) -> Iterator["SyntaxToken"]:
        for child in self.children_with_tokens():
            if isinstance(child, SyntaxNode):
                yield from child.descendant_tokens()
            else:
                yield child

    def token_at_offset(self, offset: int) -> tuple["SyntaxToken", ...]:
        """Tokens touching ``offset``: none, one, or the two on either side of it."""
        if not self.text_range().contains_inclusive(offset):
            raise ValueError(f"offset {offset} is outside {self.text_range()}")
        left: Optional[SyntaxToken] = None
        right: Optional[SyntaxToken] = None
        for tok in self.descendant_tokens():
            rng = tok.text_range()
            if rng.start < offset < rng.end:
                return (tok,)
            if rng.end == offset and rng.start < offset:
                left = tok
            elif rng.start == offset and rng.end > offset and right is None:
                right = tok
        return tuple(t for t in (left, right) if t is not None)

    def child_or_token_at_range(self, range: TextRange) -> Optional["SyntaxElement"]:
        for child in self.children_with_tokens():
            if child.text_range().contains_range(range):
                return child
        return None

    def covering_element(self, range: TextRange) -> "SyntaxElement":
        if not self.text_range().contains_range(range):
            raise ValueError(f"range {range} is outside {self.text_range()}")
        node = self
        while True:
            child = node.child_or_token_at_range(range)
            if child is None:
                return node
            if isinstance(child, SyntaxToken):
                return child
            node = child

    def text(self) -> str:
        return "".join(tok.text for tok in self.descendant_tokens())

    def debug_string(self) -> str:
        """An indented dump of the tree, one element per line, ending in a newline."""
        lines: list[str] = []

        def walk(element: SyntaxElement, depth: int) -> None:
            indent = "  " * depth
            head = f"{indent}{_kind_name(element.kind)}@{element.text_range()}"
            if isinstance(element, SyntaxNode):
                lines.append(head)
                for child in element.children_with_tokens():
                    walk(child, depth + 1)
            else:
                lines.append(f"{head} {_quote(element.text)}")

        walk(self, 0)
        return "\n".join(lines) + "\n"

    def _key(self) -> tuple:
        return (id(self.green), self._offset)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SyntaxNode) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.text()

    def __repr__(self) -> str:
        return f"{_kind_name(self.kind)}@{self.text_range()}"


class SyntaxToken:
    """A token leaf with its position and parent node."""

    __slots__ = ("green", "_parent", "_index", "_offset")

    def __init__(self, green: GreenToken, parent: SyntaxNode, index: int, offset: int):
        self.green = green
        self._parent = parent
        self._index = index
        self._offset = offset

    @property
    def kind(self) -> Hashable:
        return self.green.kind

    @property
    def text(self) -> str:
        return self.green.text

    def text_range(self) -> TextRange:
        return TextRange.at(self._offset, self.green.text_len)

    def parent(self) -> SyntaxNode:
        return self._parent

    def parent_ancestors(self) -> Iterator[SyntaxNode]:
        return self._parent.ancestors()

    def _all_tokens(self) -> list["SyntaxToken"]:
        root = list(self._parent.ancestors())[-1]
        return list(root.descendant_tokens())

    def next_token(self) -> Optional["SyntaxToken"]:
        tokens = self._all_tokens()
        position = tokens.index(self)
        return tokens[position + 1] if position + 1 < len(tokens) else None

    def prev_token(self) -> Optional["SyntaxToken"]:
        tokens = self._all_tokens()
        position = tokens.index(self)
        return tokens[position - 1] if position > 0 else None

    def siblings_with_tokens(self, direction: Direction) -> Iterator["SyntaxElement"]:
        return _siblings(self, direction)

    def _key(self) -> tuple:
        return (id(self.green), self._offset)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SyntaxToken) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"{_kind_name(self.kind)}@{self.text_range()} {_quote(self.text)}"


SyntaxElement = Union[SyntaxNode, SyntaxToken]