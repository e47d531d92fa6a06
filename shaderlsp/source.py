"""A cursor over tokens that skips trivia."""

from __future__ import annotations

from typing import Hashable, Optional, Sequence

from shaderlsp.lexer import ParserDefinition, Token
from shaderlsp.syntax_tree import TextRange


class Source:
    def __init__(self, tokens: Sequence[Token], definition: ParserDefinition):
        self.tokens = tokens
        self.definition = definition
        self.cursor = 0

    def next_token(self) -> Optional[Token]:
        self._eat_trivia()
        tok = self._peek_token_raw()
        if tok is None:
            return None
        self.cursor += 1
        return tok

    def peek_kind(self) -> Optional[Hashable]:
        self._eat_trivia()
        tok = self._peek_token_raw()
        return None if tok is None else tok.kind

    def peek_kind_compound(self) -> Optional[tuple[Hashable, Hashable]]:
        self._eat_trivia()
        if self.cursor + 1 >= len(self.tokens):
            return None
        return self.tokens[self.cursor].kind, self.tokens[self.cursor + 1].kind

    def peek_token(self) -> Optional[Token]:
        self._eat_trivia()
        return self._peek_token_raw()

    def location(self) -> int:
        return self.cursor

    def last_token_range(self) -> Optional[TextRange]:
        return self.tokens[-1].range if self.tokens else None

    def _eat_trivia(self) -> None:
        while (tok := self._peek_token_raw()) is not None and self.definition.is_trivia(tok.kind):
            self.cursor += 1

    def _peek_token_raw(self) -> Optional[Token]:
        return self.tokens[self.cursor] if self.cursor < len(self.tokens) else None