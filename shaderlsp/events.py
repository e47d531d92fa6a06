"""Events recorded by the parser and replayed by the sink."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional, Union

from shaderlsp.parse_error import ParseError


@dataclass
class StartNode:
    kind: Hashable
    forward_parent: Optional[int] = None


@dataclass(frozen=True)
class AddToken:
    pass


@dataclass(frozen=True)
class FinishNode:
    pass


@dataclass
class ErrorEvent:
    error: ParseError


@dataclass(frozen=True)
class Placeholder:
    pass


Event = Union[StartNode, AddToken, FinishNode, ErrorEvent, Placeholder]