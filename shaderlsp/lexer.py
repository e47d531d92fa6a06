"""Token definitions and a longest-match lexer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Hashable, Iterable, Iterator, Mapping, Optional

from shaderlsp.syntax_tree import TextRange


class ParserDefinition:
    """Describes a language: token patterns, trivia and kind conversions."""

    def __init__(
        self,
        token_patterns: Iterable[tuple[Hashable, str]],
        error_kind: Hashable,
        trivia: Iterable[Hashable] = (),
        syntax_kinds: Optional[Mapping[Hashable, Hashable]] = None,
        recovery_set: Iterable[Hashable] = (),
    ):
        self.token_patterns = tuple((kind, re.compile(p)) for kind, p in token_patterns)
        self.error_kind = error_kind
        self.trivia = frozenset(trivia)
        self.syntax_kinds = dict(syntax_kinds or {})
        self.recovery_set = tuple(recovery_set)

    def is_trivia(self, kind: Hashable) -> bool:
        return kind in self.trivia

    def to_syntax_kind(self, kind: Hashable) -> Hashable:
        return self.syntax_kinds.get(kind, kind)


@dataclass(frozen=True)
class Token:
    kind: Hashable
    text: str
    range: TextRange


class Lexer:
    """Iterates over the tokens of ``text``; unmatched characters become error tokens."""

    def __init__(self, definition: ParserDefinition, text: str):
        self.definition = definition
        self.text = text

    def __iter__(self) -> Iterator[Token]:
        text = self.text
        pos = 0
        while pos < len(text):
            best_kind: Hashable = self.definition.error_kind
            best_end = pos + 1
            best_len = 0
            for kind, pattern in self.definition.token_patterns:
                match = pattern.match(text, pos)
                if match and match.end() - pos > best_len:
                    best_kind, best_end, best_len = kind, match.end(), match.end() - pos
            yield Token(best_kind, text[pos:best_end], TextRange(pos, best_end))
            pos = best_end