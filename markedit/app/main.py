from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QApplication, QMainWindow, QMessageBox

from markedit.app import config
from markedit.app.ui.document_editor import DocumentEditor
from markedit.engine.flags import debug_enabled


logger = logging.getLogger(__name__)


# MARKEDIT_DEBUG         - Verbose logging for the whole app
# MARKEDIT_DEBUG_EDITOR  - Per-command engine tracing (buffer offsets before/after)


def _qt_message_handler(mode: QtMsgType, context, message: str) -> None:
    """Route Qt messages into logging, dropping known harmless noise."""
    if "QTextCursor::setPosition" in message:
        return
    if mode == QtMsgType.QtDebugMsg:
        logger.debug("Qt: %s", message)
    elif mode == QtMsgType.QtWarningMsg:
        logger.warning("Qt: %s", message)
    elif mode == QtMsgType.QtCriticalMsg:
        logger.error("Qt: %s", message)
    elif mode == QtMsgType.QtFatalMsg:
        logger.critical("Qt: %s", message)
        sys.exit(1)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Markdown editor with formatting toolbar.")
    parser.add_argument("file", nargs="?", help="Markdown file to open.")
    parser.add_argument("--locale", help="Placeholder locale (en, ru). Saved for later runs.")
    parser.add_argument("--preview", action="store_true", help="Show the rendered preview pane.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


class EditorWindow(QMainWindow):
    def __init__(self, path: Optional[Path] = None, *, locale: Optional[str] = None, preview: bool = False) -> None:
        super().__init__()
        self.path = path
        self.document = DocumentEditor(self, locale=locale, preview=preview)
        self.setCentralWidget(self.document)
        self.resize(960, 720)
        if path is not None and path.exists():
            self.document.editor.set_markdown(path.read_text(encoding="utf-8"))
        self.document.editor.document().setModified(False)
        self._update_title()

        QShortcut(QKeySequence(QKeySequence.Save), self, activated=self.save)
        QShortcut(QKeySequence("Ctrl+Shift+P"), self, activated=self.toggle_preview)

    def _update_title(self) -> None:
        name = self.path.name if self.path else "Untitled"
        self.setWindowTitle(f"{name} - markedit")

    def save(self) -> bool:
        if self.path is None:
            logger.info("No file path; nothing saved")
            return False
        try:
            self.path.write_text(self.document.editor.to_markdown(), encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to save %s: %s", self.path, exc)
            QMessageBox.warning(self, "Save failed", f"Could not save {self.path}:\n{exc}")
            return False
        self.document.editor.document().setModified(False)
        config.save_last_file(str(self.path))
        return True

    def toggle_preview(self) -> None:
        visible = not self.document.is_preview_visible()
        self.document.set_preview_visible(visible)
        config.save_preview_enabled(visible)


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    debug = args.debug or debug_enabled("MARKEDIT_DEBUG")
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.locale:
        config.save_locale(args.locale)

    qInstallMessageHandler(_qt_message_handler)
    app = QApplication.instance() or QApplication(sys.argv[:1])
    path = Path(args.file).expanduser() if args.file else None
    if path is None:
        last = config.load_last_file()
        if last and Path(last).exists():
            path = Path(last)
    preview = args.preview or config.load_preview_enabled()
    window = EditorWindow(path, locale=args.locale, preview=preview)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
