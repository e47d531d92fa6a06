"""Text edits made of non-overlapping insert/delete operations, and text diffing."""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import Iterable, Iterator

from shaderlsp.syntax_tree import TextRange


@dataclass(frozen=True)
class Indel:
    """Replaces the text in ``delete`` with ``insert``."""

    insert: str
    delete: TextRange

    @classmethod
    def replace(cls, range: TextRange, text: str) -> "Indel":
        return cls(text, range)

    @classmethod
    def insert_at(cls, offset: int, text: str) -> "Indel":
        return cls(text, TextRange.empty(offset))

    @classmethod
    def delete_range(cls, range: TextRange) -> "Indel":
        return cls("", range)

    def apply(self, text: str) -> str:
        if self.delete.end > len(text):
            raise ValueError(f"range {self.delete} is outside a text of length {len(text)}")
        return text[: self.delete.start] + self.insert + text[self.delete.end:]


def _sorted_disjoint(indels: Iterable[Indel]) -> tuple[Indel, ...]:
    ordered = sorted(indels, key=lambda indel: (indel.delete.start, indel.delete.end))
    for left, right in zip(ordered, ordered[1:]):
        if left.delete.end > right.delete.start:
            raise ValueError(f"overlapping edits at {left.delete} and {right.delete}")
    return tuple(ordered)


class TextEdit:
    """An ordered set of disjoint indels applied together."""

    __slots__ = ("_indels",)

    def __init__(self, indels: Iterable[Indel] = ()):
        self._indels = _sorted_disjoint(indels)

    @classmethod
    def replace(cls, range: TextRange, text: str) -> "TextEdit":
        return cls([Indel.replace(range, text)])

    @classmethod
    def builder(cls) -> "TextEditBuilder":
        return TextEditBuilder()

    def __iter__(self) -> Iterator[Indel]:
        return iter(self._indels)

    def __len__(self) -> int:
        return len(self._indels)

    def is_empty(self) -> bool:
        return not self._indels

    def apply(self, text: str) -> str:
        """Apply every indel to ``text`` and return the result."""
        for indel in reversed(self._indels):
            text = indel.apply(text)
        return text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TextEdit) and self._indels == other._indels

    def __hash__(self) -> int:
        return hash(self._indels)

    def __repr__(self) -> str:
        return f"TextEdit({list(self._indels)!r})"


class TextEditBuilder:
    def __init__(self) -> None:
        self._indels: list[Indel] = []

    def replace(self, range: TextRange, text: str) -> None:
        self._indels.append(Indel.replace(range, text))

    def delete(self, range: TextRange) -> None:
        self._indels.append(Indel.delete_range(range))

    def insert(self, offset: int, text: str) -> None:
        self._indels.append(Indel.insert_at(offset, text))

    def finish(self) -> TextEdit:
        return TextEdit(self._indels)


def _chunks(left: str, right: str) -> Iterator[tuple[str, str]]:
    matcher = difflib.SequenceMatcher(None, left, right, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            yield "equal", left[i1:i2]
        elif tag == "delete":
            yield "delete", left[i1:i2]
        elif tag == "insert":
            yield "insert", right[j1:j2]
        else:
            yield "delete", left[i1:i2]
            yield "insert", right[j1:j2]


def diff(left: str, right: str) -> TextEdit:
    """A minimal edit that turns ``left`` into ``right``."""
    builder = TextEdit.builder()
    pos = 0
    chunks = list(_chunks(left, right))
    index = 0
    while index < len(chunks):
        tag, text = chunks[index]
        following = chunks[index + 1] if index + 1 < len(chunks) else None
        if tag == "delete" and following is not None and following[0] == "insert":
            builder.replace(TextRange.at(pos, len(text)), following[1])
            pos += len(text)
            index += 2
            continue
        if tag == "equal":
            pos += len(text)
        elif tag == "delete":
            builder.delete(TextRange.at(pos, len(text)))
            pos += len(text)
        else:
            builder.insert(pos, text)
        index += 1
    return builder.finish()