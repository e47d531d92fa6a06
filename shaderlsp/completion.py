"""Completion items, their relevance, and the accumulator collecting them."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union

from shaderlsp.syntax_tree import TextRange
from shaderlsp.text_edit import TextEdit

_log = logging.getLogger(__name__)

_U32_MAX = 2**32 - 1


class CompletionItemKind(enum.Enum):
    FIELD = "field"
    FUNCTION = "function"
    VARIABLE = "variable"
    KEYWORD = "keyword"
    SNIPPET = "snippet"
    CONSTANT = "constant"
    STRUCT = "struct"
    MODULE = "module"
    TYPE_ALIAS = "type_alias"


class CompletionRelevanceTypeMatch(enum.Enum):
    COULD_UNIFY = "could_unify"
    EXACT = "exact"


@dataclass(frozen=True)
class CompletionRelevance:
    """Facts used to order completions; only partially ordered, see ``score``."""

    exact_name_match: bool = False
    type_match: Optional[CompletionRelevanceTypeMatch] = None
    is_local: bool = False
    exact_postfix_snippet_match: bool = False
    is_builtin: bool = False
    swizzle_index: Optional[int] = None

    def score(self) -> int:
        """A score for relative ordering only; its absolute value means nothing."""
        score = _U32_MAX // 2
        if self.exact_name_match:
            score -= 200
        if self.type_match is CompletionRelevanceTypeMatch.EXACT:
            score -= 400
        elif self.type_match is CompletionRelevanceTypeMatch.COULD_UNIFY:
            score -= 300
        if self.is_local:
            score -= 100
        if self.exact_postfix_snippet_match:
            score -= 10000
        if self.swizzle_index is not None:
            score += self.swizzle_index + 10
        if self.is_builtin:
            score += 100
        return score


@dataclass(frozen=True)
class CompletionItem:
    """A single completion variant shown in the editor pop-up."""

    label: str
    source_range: TextRange
    text_edit: TextEdit
    kind: CompletionItemKind
    is_snippet: bool = False
    detail: Optional[str] = None
    relevance: CompletionRelevance = field(default_factory=CompletionRelevance)
    lookup_override: Optional[str] = None

    @classmethod
    def new(
        cls, kind: CompletionItemKind, source_range: TextRange, label: str
    ) -> "CompletionItemBuilder":
        return CompletionItemBuilder(kind, source_range, str(label))

    def lookup(self) -> str:
        """The string used for filtering."""
        return self.lookup_override if self.lookup_override is not None else self.label


class CompletionItemBuilder:
    """Collects the properties of a completion item before building it."""

    def __init__(self, kind: CompletionItemKind, source_range: TextRange, label: str):
        self._kind = kind
        self._source_range = source_range
        self._label = label
        self._insert_text: Optional[str] = None
        self._is_snippet = False
        self._detail: Optional[str] = None
        self._lookup: Optional[str] = None
        self._text_edit: Optional[TextEdit] = None
        self._relevance = CompletionRelevance()

    def build(self) -> CompletionItem:
        text_edit = self._text_edit
        if text_edit is None:
            insert = self._insert_text if self._insert_text is not None else self._label
            text_edit = TextEdit.replace(self._source_range, insert)
        return CompletionItem(
            label=self._label,
            source_range=self._source_range,
            text_edit=text_edit,
            kind=self._kind,
            is_snippet=self._is_snippet,
            detail=self._detail,
            relevance=self._relevance,
            lookup_override=self._lookup,
        )

    def lookup_by(self, lookup: str) -> "CompletionItemBuilder":
        self._lookup = str(lookup)
        return self

    def label(self, label: str) -> "CompletionItemBuilder":
        self._label = str(label)
        return self

    def insert_text(self, text: str) -> "CompletionItemBuilder":
        self._insert_text = str(text)
        return self

    def text_edit(self, edit: TextEdit) -> "CompletionItemBuilder":
        self._text_edit = edit
        return self

    def detail(self, detail: str) -> "CompletionItemBuilder":
        return self.set_detail(detail)

    def set_detail(self, detail: Optional[str]) -> "CompletionItemBuilder":
        """Set a one-line detail; a multi-line detail is cut at its first line."""
        self._detail = None if detail is None else str(detail)
        if self._detail is not None and "\n" in self._detail:
            _log.error("multiline detail:\n%s", self._detail)
            self._detail = self._detail.split("\n", 1)[0]
        return self

    def set_relevance(self, relevance: CompletionRelevance) -> "CompletionItemBuilder":
        self._relevance = relevance
        return self

    def with_relevance(self, relevance: CompletionRelevance) -> "CompletionItemBuilder":
        return self.set_relevance(relevance)

    def add_to(self, acc: "Completions") -> None:
        """Build the item and add it to ``acc``."""
        acc.add(self.build())


class Completions:
    """Accumulates completion items in the order they are added."""

    def __init__(self) -> None:
        self._items: list[CompletionItem] = []

    def add(self, item: CompletionItem) -> None:
        self._items.append(item)

    def add_opt(self, item: Optional[CompletionItem]) -> None:
        if item is not None:
            self._items.append(item)

    def add_all(self, items: Iterable[Union[CompletionItem, CompletionItemBuilder]]) -> None:
        for item in items:
            self.add(item.build() if isinstance(item, CompletionItemBuilder) else item)

    def __iter__(self) -> Iterator[CompletionItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)