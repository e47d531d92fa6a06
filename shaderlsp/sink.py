"""Turns parser events into a syntax tree."""

from __future__ import annotations

from typing import Sequence

from shaderlsp.events import AddToken, ErrorEvent, Event, FinishNode, Placeholder, StartNode
from shaderlsp.lexer import ParserDefinition, Token
from shaderlsp.parse_error import ParseError
from shaderlsp.syntax_tree import GreenNode, GreenNodeBuilder, SyntaxNode


class Parse:
    """The result of a parse: a green tree and the errors found."""

    def __init__(self, green_node: GreenNode, errors: list[ParseError]):
        self.green_node = green_node
        self.errors = errors

    def syntax(self) -> SyntaxNode:
        return SyntaxNode.new_root(self.green_node)

    def debug_tree(self) -> str:
        out = self.syntax().debug_string()[:-1]
        if self.errors:
            out += "\n"
        for error in self.errors:
            out += f"\n{error}"
        return out

    def into_parts(self) -> tuple[GreenNode, list[ParseError]]:
        return self.green_node, self.errors

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Parse) and self.green_node == other.green_node

    def __hash__(self) -> int:
        return hash(self.green_node)

    def __repr__(self) -> str:
        return f"Parse(green_node={self.green_node!r}, errors={self.errors!r})"


class Sink:
    def __init__(self, tokens: Sequence[Token], events: Sequence[Event], definition: ParserDefinition):
        self.tokens = tokens
        self.events = list(events)
        self.definition = definition
        self._builder = GreenNodeBuilder()
        self._cursor = 0
        self._errors: list[ParseError] = []

    def finish(self) -> Parse:
        events = self.events
        for idx in range(len(events)):
            event = events[idx]
            events[idx] = Placeholder()
            if isinstance(event, StartNode):
                kinds = [event.kind]
                position = idx
                forward_parent = event.forward_parent
                while forward_parent is not None:
                    position += forward_parent
                    parent = events[position]
                    events[position] = Placeholder()
                    if not isinstance(parent, StartNode):
                        raise RuntimeError("forward parent does not point to a node start")
                    kinds.append(parent.kind)
                    forward_parent = parent.forward_parent
                for kind in reversed(kinds):
                    self._builder.start_node(kind)
            elif isinstance(event, AddToken):
                self._token()
            elif isinstance(event, FinishNode):
                self._builder.finish_node()
            elif isinstance(event, ErrorEvent):
                self._errors.append(event.error)
            self._eat_trivia()
        return Parse(self._builder.finish(), self._errors)

    def _eat_trivia(self) -> None:
        while self._cursor < len(self.tokens) and self.definition.is_trivia(self.tokens[self._cursor].kind):
            self._token()

    def _token(self) -> None:
        tok = self.tokens[self._cursor]
        self._builder.token(self.definition.to_syntax_kind(tok.kind), tok.text)
        self._cursor += 1