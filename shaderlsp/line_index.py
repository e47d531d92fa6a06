"""Line/column conversion for protocol positions and line-ending detection.

All text handled internally uses ``\\n`` as the line separator; the detected
line endings allow converting back to ``\\r\\n`` on the way out.
"""

from __future__ import annotations

import bisect
import enum
from dataclasses import dataclass, field


class OffsetEncoding(enum.Enum):
    UTF8 = "utf-8"
    UTF16 = "utf-16"


class LineEndings(enum.Enum):
    UNIX = "unix"
    DOS = "dos"

    @classmethod
    def normalize(cls, text: str) -> tuple[str, "LineEndings"]:
        """Replace ``\\r\\n`` with ``\\n``; any ``\\r`` in the input marks it as DOS."""
        if "\r" not in text:
            return text, cls.UNIX
        return text.replace("\r\n", "\n"), cls.DOS


def _width(char: str, encoding: OffsetEncoding) -> int:
    if encoding is OffsetEncoding.UTF8:
        return len(char.encode("utf-8"))
    return 2 if ord(char) > 0xFFFF else 1


@dataclass
class LineIndex:
    """Maps character offsets in ``text`` to (line, column) pairs and back.

    Columns are counted in the units of ``encoding``.
    """

    text: str
    endings: LineEndings = LineEndings.UNIX
    encoding: OffsetEncoding = OffsetEncoding.UTF8
    _line_starts: list = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = [0]
        starts.extend(i + 1 for i, char in enumerate(self.text) if char == "\n")
        self._line_starts = starts

    def _line_end(self, line: int) -> int:
        if line + 1 < len(self._line_starts):
            return self._line_starts[line + 1] - 1
        return len(self.text)

    def line_col(self, offset: int) -> tuple[int, int]:
        if not 0 <= offset <= len(self.text):
            raise ValueError(f"offset {offset} is outside a text of length {len(self.text)}")
        line = bisect.bisect_right(self._line_starts, offset) - 1
        start = self._line_starts[line]
        col = sum(_width(char, self.encoding) for char in self.text[start:offset])
        return line, col

    def offset(self, line: int, col: int) -> int:
        if not 0 <= line < len(self._line_starts) or col < 0:
            raise ValueError("Invalid offset")
        position = self._line_starts[line]
        end = self._line_end(line)
        consumed = 0
        while consumed < col:
            if position >= end:
                raise ValueError("Invalid offset")
            consumed += _width(self.text[position], self.encoding)
            position += 1
        if consumed != col:
            raise ValueError("Invalid offset")
        return position