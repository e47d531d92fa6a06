"""Errors reported by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional

from shaderlsp.syntax_tree import TextRange


def _debug_name(kind: Any) -> str:
    name = getattr(kind, "name", None)
    return name if isinstance(name, str) else repr(kind)


@dataclass
class ParseError:
    expected: list = field(default_factory=list)
    found: Optional[Hashable] = None
    range: TextRange = TextRange(0, 0)

    def _expected_text(self) -> str:
        names = [_debug_name(k) for k in self.expected]
        if len(names) <= 1:
            listed = "".join(names)
        else:
            listed = ", ".join(names[:-1]) + " or " + names[-1]
        text = "expected " + listed
        if self.found is not None:
            text += f", but found {_debug_name(self.found)}"
        return text

    def message(self) -> str:
        return self._expected_text()

    def __str__(self) -> str:
        return f"error at {self.range.start}..{self.range.end}: {self._expected_text()}"