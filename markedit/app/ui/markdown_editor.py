from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFontDatabase, QKeyEvent, QTextCursor
from PySide6.QtWidgets import QTextEdit, QWidget

from markedit.engine.buffer import Buffer, utf16_positions
from markedit.engine.commands import apply_command
from markedit.engine.flags import debug_enabled
from markedit.engine.inspector import FenceIndex, FormatState, detect_format_state
from markedit.engine.mutators import toggle_heading
from markedit.engine.newline import handle_newline
from markedit.app import i18n


logger = logging.getLogger(__name__)

_DEBUG_EDITOR = debug_enabled("MARKEDIT_DEBUG_EDITOR")

_SHORTCUTS = {
    Qt.Key_B: "bold",
    Qt.Key_I: "italic",
    Qt.Key_E: "inline_code",
    Qt.Key_K: "link",
    Qt.Key_1: "h1",
    Qt.Key_2: "h2",
    Qt.Key_3: "h3",
}


def _changed_span(old: str, new: str) -> tuple[int, int, int]:
    """Return (start, old_end, new_end) of the differing region between two strings."""
    limit = min(len(old), len(new))
    start = 0
    while start < limit and old[start] == new[start]:
        start += 1
    old_end, new_end = len(old), len(new)
    while old_end > start and new_end > start and old[old_end - 1] == new[new_end - 1]:
        old_end -= 1
        new_end -= 1
    return start, old_end, new_end


class MarkdownEditor(QTextEdit):
    """Plain-text markdown editing surface driven by the formatting engine.

    Every command snapshots the document into a Buffer, runs the engine and
    writes the changed span back inside one edit block, so each command is a
    single undo step on the document's own undo stack.
    """

    formatStateChanged = Signal(object)

    def __init__(self, parent: Optional[QWidget] = None, locale: Optional[str] = None) -> None:
        super().__init__(parent)
        self.setAcceptRichText(False)
        self.setTabChangesFocus(False)
        self.setFont(QFontDatabase.systemFont(QFontDatabase.FixedFont))
        self._locale = locale
        self._fences = FenceIndex()
        self._format_state = FormatState()
        self.textChanged.connect(self._refresh_format_state)
        self.cursorPositionChanged.connect(self._refresh_format_state)

    # --- Snapshot plumbing ---

    def buffer(self) -> Buffer:
        cursor = self.textCursor()
        return Buffer.from_utf16(self.toPlainText(), cursor.selectionStart(), cursor.selectionEnd())

    def set_buffer(self, buffer: Buffer) -> None:
        """Adopt ``buffer`` as the document contents and selection."""
        old_text = self.toPlainText()
        new_text = buffer.text
        cursor = self.textCursor()
        cursor.beginEditBlock()
        if old_text != new_text:
            start, old_end, new_end = _changed_span(old_text, new_text)
            old_pos = utf16_positions(old_text)
            cursor.setPosition(old_pos[start])
            cursor.setPosition(old_pos[old_end], QTextCursor.KeepAnchor)
            cursor.insertText(new_text[start:new_end])
        sel_start, sel_end = buffer.utf16_selection()
        cursor.setPosition(sel_start)
        cursor.setPosition(sel_end, QTextCursor.KeepAnchor)
        cursor.endEditBlock()
        self.setTextCursor(cursor)
        self._refresh_format_state()

    def set_markdown(self, content: str) -> None:
        self.setPlainText(content or "")
        self._refresh_format_state()

    def to_markdown(self) -> str:
        return self.toPlainText()

    # --- Format state ---

    def format_state(self) -> FormatState:
        return self._format_state

    def _refresh_format_state(self) -> None:
        state = detect_format_state(self.buffer(), self._fences)
        if state != self._format_state:
            self._format_state = state
            self.formatStateChanged.emit(state)

    # --- Commands ---

    def apply_command(self, command_id: str) -> None:
        before = self.buffer()
        after = apply_command(before, command_id, i18n.placeholders(self._locale))
        if _DEBUG_EDITOR:
            logger.debug("command %s: %d..%d -> %d..%d", command_id, before.start, before.end, after.start, after.end)
        self.set_buffer(after)

    def toggle_bold(self) -> None:
        self.apply_command("bold")

    def toggle_italic(self) -> None:
        self.apply_command("italic")

    def toggle_inline_code(self) -> None:
        self.apply_command("inline_code")

    def toggle_heading(self, level: int) -> None:
        self.set_buffer(toggle_heading(self.buffer(), level))

    def toggle_bullet_list(self) -> None:
        self.apply_command("bullet_list")

    def toggle_numbered_list(self) -> None:
        self.apply_command("numbered_list")

    def toggle_blockquote(self) -> None:
        self.apply_command("blockquote")

    def insert_code_block(self) -> None:
        self.apply_command("code_block")

    def insert_link(self) -> None:
        self.apply_command("link")

    def insert_horizontal_rule(self) -> None:
        self.apply_command("horizontal_rule")

    def handle_newline(self) -> bool:
        """Run list continuation; True when the engine consumed the Enter key."""
        result, handled = handle_newline(self.buffer())
        if handled:
            self.set_buffer(result)
        return handled

    # --- Events ---

    def keyPressEvent(self, event: QKeyEvent) -> None:  # type: ignore[override]
        modifiers = event.modifiers() & ~Qt.KeypadModifier
        if modifiers == Qt.ControlModifier and event.key() in _SHORTCUTS:
            self.apply_command(_SHORTCUTS[event.key()])
            event.accept()
            return
        if event.key() in (Qt.Key_Return, Qt.Key_Enter) and modifiers == Qt.NoModifier:
            if self.handle_newline():
                event.accept()
                return
        super().keyPressEvent(event)
