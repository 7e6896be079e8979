"""Detect which Markdown constructs are active at a buffer's selection."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .buffer import Buffer, clamp, line_end, line_start
from .patterns import (
    BLOCKQUOTE_PATTERN,
    BOLD,
    BULLET_PATTERN,
    FENCE,
    HEADING_PATTERN,
    INLINE_CODE,
    ITALIC,
    NUMBERED_PATTERN,
)


@dataclass(frozen=True)
class FormatState:
    is_bold: bool = False
    is_italic: bool = False
    is_inline_code: bool = False
    is_code_block: bool = False
    is_bullet_list: bool = False
    is_numbered_list: bool = False
    is_blockquote: bool = False
    heading_level: int = 0  # 0 = plain line


def is_wrapped_with(text: str, start: int, end: int, marker: str) -> bool:
    """True when ``marker`` sits immediately on both sides of text[start:end]."""
    before = start - len(marker)
    after = end + len(marker)
    if before < 0 or after > len(text):
        return False
    return text[before:start] == marker and text[end:after] == marker


def is_wrapped_with_single(text: str, start: int, end: int, marker: str) -> bool:
    """Like :func:`is_wrapped_with` but rejects a single-character match that
    is really part of a doubled marker (``*`` inside ``**``)."""
    if len(marker) != 1:
        return is_wrapped_with(text, start, end, marker)
    if not is_wrapped_with(text, start, end, marker):
        return False
    before = start - 1
    after = end + 1
    doubled_before = before > 0 and text[before - 1] == marker
    doubled_after = after < len(text) and text[after] == marker
    return not doubled_before and not doubled_after


def _delimiter_runs(line: str, char: str, widths: tuple[int, ...]) -> list[tuple[int, int]]:
    """Runs of ``char`` whose length is in ``widths``, as (start, end) columns."""
    runs: list[tuple[int, int]] = []
    idx = 0
    while idx < len(line):
        if line[idx] != char:
            idx += 1
            continue
        run_end = idx
        while run_end < len(line) and line[run_end] == char:
            run_end += 1
        if run_end - idx in widths:
            runs.append((idx, run_end))
        idx = run_end
    return runs


def is_inside_span(text: str, start: int, end: int, char: str, widths: tuple[int, ...]) -> bool:
    """True when [start, end] lies between a pair of delimiters on one line.

    Delimiters pair up left to right; a run of three ``*`` opens both a bold
    and an italic span.
    """
    first = line_start(text, start)
    last = line_end(text, start)
    if end > last:
        return False
    line = text[first:last]
    runs = _delimiter_runs(line, char, widths)
    bullet = BULLET_PATTERN.match(line)
    if bullet and bullet.group("bullet") == char:
        runs = [run for run in runs if run[0] != bullet.start("bullet")]
    col_start, col_end = start - first, end - first
    for (_, open_end), (close_start, _) in zip(runs[::2], runs[1::2]):
        if open_end <= col_start and col_end <= close_start:
            return True
    return False


def is_inside_code_block(text: str, offset: int) -> bool:
    """Parity scan over the lines preceding ``offset``.

    Every line whose stripped form opens with a fence flips the state; an odd
    count means the offset sits inside a fenced block.
    """
    offset = clamp(offset, len(text))
    inside = False
    for line in text[:offset].split("\n"):
        if line.strip().startswith(FENCE):
            inside = not inside
    return inside


class FenceIndex:
    """Caches fence line offsets for one text so repeated lookups stay cheap.

    Answers are identical to :func:`is_inside_code_block`.
    """

    def __init__(self) -> None:
        self._text: Optional[str] = None
        self._fences: list[tuple[int, int]] = []

    def _rebuild(self, text: str) -> None:
        fences: list[tuple[int, int]] = []
        pos = 0
        for line in text.split("\n"):
            stripped = line.strip()
            if stripped.startswith(FENCE):
                # (line start, offset just past the fence token)
                lead = len(line) - len(line.lstrip())
                fences.append((pos, pos + lead + len(FENCE)))
            pos += len(line) + 1
        self._text = text
        self._fences = fences

    def is_inside(self, text: str, offset: int) -> bool:
        if text is not self._text and text != self._text:
            self._rebuild(text)
        offset = clamp(offset, len(text))
        count = 0
        for line_pos, fence_end in self._fences:
            if line_pos >= offset:
                break
            if fence_end <= offset or _prefix_is_fence(text, line_pos, offset):
                count += 1
        return count % 2 == 1


def _prefix_is_fence(text: str, line_pos: int, offset: int) -> bool:
    # cursor sits inside a fence line: only the part before it counts
    return text[line_pos:offset].strip().startswith(FENCE)


def detect_format_state(buffer: Buffer, fences: Optional[FenceIndex] = None) -> FormatState:
    text = buffer.text
    if not text:
        return FormatState()
    start, end = buffer.start, buffer.end
    line = buffer.current_line()
    heading = HEADING_PATTERN.match(line)
    if fences is not None:
        in_code = fences.is_inside(text, start)
    else:
        in_code = is_inside_code_block(text, start)
    return FormatState(
        is_bold=is_wrapped_with(text, start, end, BOLD) or is_inside_span(text, start, end, "*", (2, 3)),
        is_italic=is_wrapped_with_single(text, start, end, ITALIC) or is_inside_span(text, start, end, "*", (1, 3)),
        is_inline_code=is_wrapped_with(text, start, end, INLINE_CODE) or is_inside_span(text, start, end, "`", (1,)),
        is_code_block=in_code,
        is_bullet_list=BULLET_PATTERN.match(line) is not None,
        is_numbered_list=NUMBERED_PATTERN.match(line) is not None,
        is_blockquote=BLOCKQUOTE_PATTERN.match(line) is not None,
        heading_level=len(heading.group("hashes")) if heading else 0,
    )


__all__ = [
    "FenceIndex",
    "FormatState",
    "detect_format_state",
    "is_inside_code_block",
    "is_inside_span",
    "is_wrapped_with",
    "is_wrapped_with_single",
]
