"""Pure Buffer -> Buffer formatting commands."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from .buffer import Buffer
from .flags import debug_enabled
from .inspector import is_wrapped_with_single
from .patterns import (
    BOLD,
    BULLET_PREFIX,
    DEFAULT_PLACEHOLDERS,
    DEFAULT_TEXT_PLACEHOLDER,
    DEFAULT_URL_PLACEHOLDER,
    FENCE,
    HEADING_MAX_LEVEL,
    HEADING_PREFIXES,
    HORIZONTAL_RULE,
    INLINE_CODE,
    ITALIC,
    NUMBERED_PREFIX,
    QUOTE_PREFIX,
)

logger = logging.getLogger(__name__)

_DEBUG_EDITOR = debug_enabled("MARKEDIT_DEBUG_EDITOR")


def wrap_toggle(buffer: Buffer, marker: str, placeholder: Optional[str] = None) -> Buffer:
    """Toggle symmetric ``marker`` around the selection.

    An already wrapped selection is unwrapped. An empty selection receives
    ``marker + placeholder + marker`` with the placeholder selected so typing
    replaces it.
    """
    text = buffer.text
    start, end = buffer.start, buffer.end
    selected = buffer.selected_text
    size = len(marker)

    if is_wrapped_with_single(text, start, end, marker):
        if _DEBUG_EDITOR:
            logger.debug("unwrap %r at %d..%d", marker, start, end)
        return buffer.replace(start - size, end + size, selected, start - size, end - size)

    if not selected:
        if placeholder is None:
            placeholder = DEFAULT_PLACEHOLDERS.get(marker, DEFAULT_TEXT_PLACEHOLDER)
        insertion = f"{marker}{placeholder}{marker}"
        return buffer.replace(start, end, insertion, start + size, start + size + len(placeholder))

    if _DEBUG_EDITOR:
        logger.debug("wrap %r at %d..%d", marker, start, end)
    return buffer.replace(start, end, f"{marker}{selected}{marker}", start + size, end + size)


def toggle_bold(buffer: Buffer, placeholder: Optional[str] = None) -> Buffer:
    return wrap_toggle(buffer, BOLD, placeholder)


def toggle_italic(buffer: Buffer, placeholder: Optional[str] = None) -> Buffer:
    return wrap_toggle(buffer, ITALIC, placeholder)


def toggle_inline_code(buffer: Buffer, placeholder: Optional[str] = None) -> Buffer:
    return wrap_toggle(buffer, INLINE_CODE, placeholder)


def line_prefix_toggle(
    buffer: Buffer,
    prefix: str,
    exclusive_group: Optional[Sequence[str]] = None,
) -> Buffer:
    """Toggle ``prefix`` at the start of the cursor's line.

    With ``exclusive_group`` any other member already on the line is swapped
    for ``prefix`` in one step, so heading levels never stack.
    """
    text = buffer.text
    cursor = buffer.start
    start, end = buffer.line_bounds()
    line = text[start:end]

    if line.startswith(prefix):
        new_line = line[len(prefix) :]
        new_cursor = max(start, cursor - len(prefix))
    else:
        existing = ""
        if exclusive_group:
            matches = [p for p in exclusive_group if line.startswith(p)]
            if matches:
                existing = max(matches, key=len)
        new_line = prefix + line[len(existing) :]
        new_cursor = cursor + len(prefix) - len(existing)
        new_cursor = max(start, new_cursor)

    if _DEBUG_EDITOR:
        logger.debug("line prefix %r: %r -> %r", prefix, line, new_line)
    return buffer.replace(start, end, new_line, new_cursor)


def toggle_heading(buffer: Buffer, level: int) -> Buffer:
    if not 1 <= level <= HEADING_MAX_LEVEL:
        raise ValueError(f"Heading level must be 1-{HEADING_MAX_LEVEL}, got {level}")
    return line_prefix_toggle(buffer, HEADING_PREFIXES[level - 1], HEADING_PREFIXES)


def toggle_bullet_list(buffer: Buffer) -> Buffer:
    return line_prefix_toggle(buffer, BULLET_PREFIX)


def toggle_numbered_list(buffer: Buffer) -> Buffer:
    return line_prefix_toggle(buffer, NUMBERED_PREFIX)


def toggle_blockquote(buffer: Buffer) -> Buffer:
    return line_prefix_toggle(buffer, QUOTE_PREFIX)


def insert_code_block(buffer: Buffer) -> Buffer:
    """Wrap the selection in a fenced block, or insert an empty one."""
    start, end = buffer.start, buffer.end
    insertion = f"{FENCE}\n{buffer.selected_text}\n{FENCE}"
    return buffer.replace(start, end, insertion, start + len(FENCE) + 1)


def insert_link(
    buffer: Buffer,
    url_placeholder: str = DEFAULT_URL_PLACEHOLDER,
    text_placeholder: Optional[str] = None,
) -> Buffer:
    """Insert ``[text](url)``.

    With a selection, the selection becomes the link text and the url
    placeholder is selected; otherwise the link text placeholder is selected.
    """
    start, end = buffer.start, buffer.end
    selected = buffer.selected_text
    if selected:
        insertion = f"[{selected}]({url_placeholder})"
        url_start = start + len(selected) + 3
        return buffer.replace(start, end, insertion, url_start, url_start + len(url_placeholder))
    if text_placeholder is None:
        text_placeholder = DEFAULT_TEXT_PLACEHOLDER
    insertion = f"[{text_placeholder}]({url_placeholder})"
    return buffer.replace(start, end, insertion, start + 1, start + 1 + len(text_placeholder))


def insert_horizontal_rule(buffer: Buffer) -> Buffer:
    """Insert a rule on its own line below the cursor's line."""
    _, end = buffer.line_bounds()
    insertion = f"\n\n{HORIZONTAL_RULE}\n\n"
    return buffer.replace(end, end, insertion, end + len(HORIZONTAL_RULE) + 3)


__all__ = [
    "insert_code_block",
    "insert_horizontal_rule",
    "insert_link",
    "line_prefix_toggle",
    "toggle_blockquote",
    "toggle_bold",
    "toggle_bullet_list",
    "toggle_heading",
    "toggle_inline_code",
    "toggle_italic",
    "toggle_numbered_list",
    "wrap_toggle",
]
