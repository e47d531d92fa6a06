"""Book keeping for keeping diagnostics in sync with the client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterator, Optional


@dataclass
class Diagnostic:
    """A protocol diagnostic; ``range`` holds the client-facing range."""

    range: Any
    message: str
    severity: Optional[int] = None
    source: Optional[str] = None
    code: Optional[Any] = None
    code_description: Optional[Any] = None
    related_information: Optional[list] = None
    tags: Optional[list] = None
    data: Optional[Any] = None

    def to_json(self) -> dict:
        names = {
            "range": self.range,
            "severity": self.severity,
            "code": self.code,
            "codeDescription": self.code_description,
            "source": self.source,
            "message": self.message,
            "relatedInformation": self.related_information,
            "tags": self.tags,
            "data": self.data,
        }
        return {key: value for key, value in names.items() if value is not None}


def are_diagnostics_equal(left: Diagnostic, right: Diagnostic) -> bool:
    return (
        left.source == right.source
        and left.severity == right.severity
        and left.range == right.range
        and left.message == right.message
    )


class DiagnosticCollection:
    """Diagnostics per file, plus the set of files whose diagnostics changed."""

    def __init__(self) -> None:
        self.native: dict[Hashable, list[Diagnostic]] = {}
        self._changes: set[Hashable] = set()

    def set_native_diagnostics(self, file_id: Hashable, diagnostics: list[Diagnostic]) -> None:
        existing = self.native.get(file_id)
        if (
            existing is not None
            and len(existing) == len(diagnostics)
            and all(are_diagnostics_equal(new, old) for new, old in zip(diagnostics, existing))
        ):
            return
        self.native[file_id] = list(diagnostics)
        self._changes.add(file_id)

    def diagnostics_for(self, file_id: Hashable) -> Iterator[Diagnostic]:
        return iter(self.native.get(file_id, ()))

    def take_changes(self) -> Optional[set]:
        """The files changed since the last call, or ``None`` if there are none."""
        if not self._changes:
            return None
        changes, self._changes = self._changes, set()
        return changes

    def make_updated(self, file_id: Hashable) -> None:
        self._changes.add(file_id)