"""The event-based recursive-descent parser driver."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Optional

from shaderlsp.events import AddToken, ErrorEvent, Event, FinishNode, Placeholder, StartNode
from shaderlsp.lexer import Lexer, ParserDefinition
from shaderlsp.parse_error import ParseError
from shaderlsp.sink import Parse, Sink
from shaderlsp.source import Source


class Marker:
    """An open node started by ``Parser.start``; must be completed."""

    def __init__(self, pos: int):
        self.pos = pos
        self.completed = False

    def complete(self, parser: "Parser", kind: Hashable) -> "CompletedMarker":
        if self.completed:
            raise RuntimeError("marker already completed")
        if parser.events[self.pos] != Placeholder():
            raise RuntimeError("marker position does not hold a placeholder")
        parser.events[self.pos] = StartNode(kind)
        parser.events.append(FinishNode())
        self.completed = True
        return CompletedMarker(self.pos)


class CompletedMarker:
    def __init__(self, pos: int):
        self.pos = pos

    def precede(self, parser: "Parser") -> Marker:
        """Start a new node that will become the parent of this one."""
        new_marker = parser.start()
        event = parser.events[self.pos]
        if not isinstance(event, StartNode):
            raise RuntimeError("completed marker does not point to a node start")
        event.forward_parent = new_marker.pos - self.pos
        return new_marker


class Parser:
    def __init__(self, source: Source, definition: ParserDefinition):
        self.source = source
        self.definition = definition
        self.events: list[Event] = []
        self.expected_kinds: list[Hashable] = []

    def run(self, entry: Callable[["Parser"], None]) -> list[Event]:
        entry(self)
        return self.events

    def start(self) -> Marker:
        pos = len(self.events)
        self.events.append(Placeholder())
        return Marker(pos)

    def expect(self, kind: Hashable) -> None:
        if self.at(kind):
            self.bump()
        else:
            self.error()

    def expect_no_bump(self, kind: Hashable) -> None:
        if self.at(kind):
            self.bump()
        else:
            self.error_no_bump([])

    def expect_recover(self, kind: Hashable, recovery: Iterable[Hashable]) -> bool:
        if self.at(kind):
            self.bump()
            return True
        self.error_recovery(recovery)
        return False

    def eat(self, kind: Hashable) -> bool:
        if self.at(kind):
            self.bump()
            return True
        return False

    def eat_set(self, kinds: Iterable[Hashable]) -> None:
        if self.at_set(kinds):
            self.bump()

    def error(self) -> None:
        self._error_inner(None, [], False)

    def error_expected(self, expected: Iterable[Hashable]) -> None:
        self._error_inner(None, list(expected), False)

    def error_expected_no_bump(self, expected: Iterable[Hashable]) -> None:
        self._error_inner(None, list(expected), True)

    def error_recovery(self, recovery: Iterable[Hashable]) -> None:
        self._error_inner(list(recovery), [], False)

    def error_no_bump(self, expected: Iterable[Hashable]) -> None:
        self._error_inner(None, list(expected), True)

    def _error_inner(self, recovery: Optional[list], expected: list, no_bump: bool) -> None:
        current = self.source.peek_token()
        if current is not None:
            found, rng = current.kind, current.range
        else:
            rng = self.source.last_token_range()
            if rng is None:
                raise RuntimeError("cannot report an error in empty input")
            found = None
        if not expected:
            expected, self.expected_kinds = self.expected_kinds, []
        self.events.append(ErrorEvent(ParseError(list(expected), found, rng)))

        at_recovery = recovery is not None and self.at_set(recovery)
        if not at_recovery and not self.at_end():
            marker = self.start()
            if not no_bump:
                self.bump()
            marker.complete(self, self.definition.to_syntax_kind(self.definition.error_kind))

    def bump(self) -> Hashable:
        self.expected_kinds.clear()
        tok = self.source.next_token()
        if tok is None:
            raise RuntimeError("bump at end of input")
        self.events.append(AddToken())
        return tok.kind

    def bump_compound(self, kind: Hashable) -> None:
        self.expected_kinds.clear()
        marker = self.start()
        for _ in range(2):
            if self.source.next_token() is None:
                raise RuntimeError("bump at end of input")
            self.events.append(AddToken())
        marker.complete(self, kind)

    def at(self, kind: Hashable) -> bool:
        if kind not in self.expected_kinds:
            self.expected_kinds.append(kind)
        return self.peek() == kind

    def at_compound(self, first: Hashable, second: Hashable) -> bool:
        if first not in self.expected_kinds:
            self.expected_kinds.append(first)
        return self.peek_compound() == (first, second)

    def at_or_end(self, kind: Hashable) -> bool:
        self.expected_kinds.append(kind)
        current = self.peek()
        return current is None or current == kind

    def at_set(self, kinds: Iterable[Hashable]) -> bool:
        current = self.peek()
        return current is not None and current in list(kinds)

    def at_end(self) -> bool:
        return self.peek() is None

    def peek(self) -> Optional[Hashable]:
        return self.source.peek_kind()

    def peek_compound(self) -> Optional[tuple[Hashable, Hashable]]:
        return self.source.peek_kind_compound()

    def set_expected(self, expected: Iterable[Hashable]) -> None:
        self.expected_kinds = list(expected)

    def location(self) -> int:
        return self.source.location()


def parse(definition: ParserDefinition, text: str, entry: Callable[[Parser], None]) -> Parse:
    """Lex ``text``, run ``entry`` on a parser over it and build the tree."""
    tokens = list(Lexer(definition, text))
    parser = Parser(Source(tokens, definition), definition)
    events = parser.run(entry)
    return Sink(tokens, events, definition).finish()