"""Immutable text + selection snapshot shared by every engine call."""
from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Optional


def clamp(offset: int, length: int) -> int:
    """Clamp an offset into [0, length]."""
    return max(0, min(length, int(offset)))


def utf16_positions(text: str) -> list[int]:
    """Return the UTF-16 code-unit offset of every string index (plus the end).

    Qt reports cursor positions in UTF-16 code units, so characters outside
    the BMP occupy two positions there but only one index in a Python str.
    """
    positions = [0] * (len(text) + 1)
    pos = 0
    for idx, ch in enumerate(text):
        positions[idx] = pos
        pos += 2 if ord(ch) > 0xFFFF else 1
    positions[len(text)] = pos
    return positions


def to_utf16_offset(text: str, index: int) -> int:
    index = clamp(index, len(text))
    return index + sum(1 for ch in text[:index] if ord(ch) > 0xFFFF)


def from_utf16_offset(text: str, offset: int) -> int:
    """Map a UTF-16 offset back to a str index.

    An offset pointing between the halves of a surrogate pair resolves to the
    character that owns it.
    """
    positions = utf16_positions(text)
    offset = clamp(offset, positions[-1])
    return bisect_right(positions, offset) - 1


def line_start(text: str, offset: int) -> int:
    offset = clamp(offset, len(text))
    return text.rfind("\n", 0, offset) + 1


def line_end(text: str, offset: int) -> int:
    offset = clamp(offset, len(text))
    nl = text.find("\n", offset)
    return len(text) if nl == -1 else nl


def current_line(text: str, offset: int) -> str:
    """Return the line containing offset, without its newline."""
    return text[line_start(text, offset) : line_end(text, offset)]


@dataclass(frozen=True)
class Buffer:
    """Text plus a selection range.

    ``end=None`` denotes a collapsed cursor at ``start``. Offsets are clamped
    into the text and sorted on construction, so every Buffer satisfies
    ``0 <= start <= end <= len(text)``.
    """

    text: str = ""
    start: int = 0
    end: Optional[int] = field(default=None)

    def __post_init__(self) -> None:
        text = self.text or ""
        length = len(text)
        start = clamp(self.start, length)
        end = start if self.end is None else clamp(self.end, length)
        if end < start:
            start, end = end, start
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @classmethod
    def from_utf16(cls, text: str, start: int, end: Optional[int] = None) -> "Buffer":
        text = text or ""
        sel_end = None if end is None else from_utf16_offset(text, end)
        return cls(text, from_utf16_offset(text, start), sel_end)

    def utf16_selection(self) -> tuple[int, int]:
        positions = utf16_positions(self.text)
        return positions[self.start], positions[self.end]

    @property
    def is_collapsed(self) -> bool:
        return self.start == self.end

    @property
    def cursor(self) -> int:
        return self.start

    @property
    def selected_text(self) -> str:
        return self.text[self.start : self.end]

    def line_bounds(self) -> tuple[int, int]:
        return line_start(self.text, self.start), line_end(self.text, self.start)

    def current_line(self) -> str:
        return current_line(self.text, self.start)

    def replace(
        self,
        start: int,
        end: int,
        insertion: str,
        sel_start: int,
        sel_end: Optional[int] = None,
    ) -> "Buffer":
        """Splice ``insertion`` over ``text[start:end]`` and move the selection.

        The new selection is given in offsets of the resulting text and is
        clamped by the constructor.
        """
        text = self.text[:start] + insertion + self.text[end:]
        return Buffer(text, sel_start, sel_end)

    def with_selection(self, start: int, end: Optional[int] = None) -> "Buffer":
        return Buffer(self.text, start, end)


__all__ = [
    "Buffer",
    "clamp",
    "current_line",
    "from_utf16_offset",
    "line_end",
    "line_start",
    "to_utf16_offset",
    "utf16_positions",
]
