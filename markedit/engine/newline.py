"""Enter-key handling: list and blockquote continuation."""
from __future__ import annotations

import logging

from .buffer import Buffer
from .patterns import BLOCKQUOTE_PATTERN, BULLET_PATTERN, NUMBERED_PATTERN, QUOTE_PREFIX

logger = logging.getLogger(__name__)


def continuation_prefix(line: str) -> tuple[str, str] | None:
    """Return ``(matched_marker, next_prefix)`` for a list/quote line, else None.

    Checked in order: bullet, numbered, blockquote.
    """
    bullet = BULLET_PATTERN.match(line)
    if bullet:
        return bullet.group(0), f"{bullet.group('indent')}{bullet.group('bullet')} "
    numbered = NUMBERED_PATTERN.match(line)
    if numbered:
        number = int(numbered.group("number")) + 1
        return numbered.group(0), f"{numbered.group('indent')}{number}. "
    quote = BLOCKQUOTE_PATTERN.match(line)
    if quote:
        return quote.group(0), QUOTE_PREFIX
    return None


def handle_newline(buffer: Buffer) -> tuple[Buffer, bool]:
    """Apply smart newline behavior.

    Returns ``(new_buffer, handled)``. When ``handled`` is False the buffer is
    returned untouched and the caller inserts its own newline.
    """
    if not buffer.is_collapsed:
        return buffer, False

    line = buffer.current_line()
    match = continuation_prefix(line)
    if match is None:
        return buffer, False
    marker, prefix = match

    if line.rstrip() == marker.rstrip():
        # Enter on an empty item ends the list: drop the whole line.
        start, end = buffer.line_bounds()
        logger.debug("terminating list item %r", line)
        return buffer.replace(start, end, "", start), True

    cursor = buffer.cursor
    insertion = "\n" + prefix
    return buffer.replace(cursor, cursor, insertion, cursor + len(insertion)), True


__all__ = ["continuation_prefix", "handle_newline"]
