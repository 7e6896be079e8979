from __future__ import annotations

import html
import logging
from typing import Optional

from markdown import markdown
from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QSplitter, QTextBrowser, QVBoxLayout, QWidget

from markedit.app.ui.editor_toolbar import EditorToolbar
from markedit.app.ui.markdown_editor import MarkdownEditor

logger = logging.getLogger(__name__)

PREVIEW_EXTENSIONS = ["fenced_code", "tables", "codehilite"]
PREVIEW_DELAY_MS = 250


def render_preview_html(text: str) -> str:
    """Render markdown for the preview pane; falls back to escaped plain text."""
    try:
        return markdown(
            text or "",
            extensions=PREVIEW_EXTENSIONS,
            extension_configs={"codehilite": {"guess_lang": False, "noclasses": True}},
        )
    except Exception as exc:
        logger.warning("Markdown preview failed: %s", exc)
        return f"<pre>{html.escape(text or '')}</pre>"


class DocumentEditor(QWidget):
    """Toolbar + markdown editor + optional rendered preview."""

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        locale: Optional[str] = None,
        preview: bool = False,
    ) -> None:
        super().__init__(parent)
        self.toolbar = EditorToolbar(self)
        self.editor = MarkdownEditor(self, locale=locale)
        self.preview = QTextBrowser(self)
        self.preview.setOpenExternalLinks(True)

        splitter = QSplitter(Qt.Horizontal, self)
        splitter.addWidget(self.editor)
        splitter.addWidget(self.preview)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.toolbar)
        layout.addWidget(splitter, 1)

        self._preview_timer = QTimer(self)
        self._preview_timer.setSingleShot(True)
        self._preview_timer.setInterval(PREVIEW_DELAY_MS)
        self._preview_timer.timeout.connect(self.refresh_preview)

        self.toolbar.commandTriggered.connect(self._on_command)
        self.toolbar.undoRequested.connect(self.editor.undo)
        self.toolbar.redoRequested.connect(self.editor.redo)
        self.editor.undoAvailable.connect(self.toolbar.undo_action.setEnabled)
        self.editor.redoAvailable.connect(self.toolbar.redo_action.setEnabled)
        self.editor.formatStateChanged.connect(self.toolbar.set_format_state)
        self.editor.textChanged.connect(self._schedule_preview)
        self.set_preview_visible(preview)

    def _on_command(self, command_id: str) -> None:
        self.editor.apply_command(command_id)
        # A checkable action flips itself on click; resync with the real state.
        self.toolbar.set_format_state(self.editor.format_state())
        self.editor.setFocus()

    def _schedule_preview(self) -> None:
        if self.preview.isVisibleTo(self):
            self._preview_timer.start()

    def refresh_preview(self) -> None:
        self.preview.setHtml(render_preview_html(self.editor.to_markdown()))

    def set_preview_visible(self, visible: bool) -> None:
        self.preview.setVisible(visible)
        if visible:
            self.refresh_preview()

    def is_preview_visible(self) -> bool:
        return self.preview.isVisibleTo(self)
