from PySide6.QtGui import QTextCursor

from markedit.app import config
from markedit.app.main import EditorWindow, _parse_args


def test_parse_args_defaults() -> None:
    args = _parse_args([])
    assert args.file is None
    assert args.locale is None
    assert not args.preview


def test_parse_args_file_and_locale() -> None:
    args = _parse_args(["notes.md", "--locale", "ru", "--preview"])
    assert (args.file, args.locale, args.preview) == ("notes.md", "ru", True)


def test_window_loads_and_saves(app, tmp_path) -> None:
    path = tmp_path / "notes.md"
    path.write_text("- one", encoding="utf-8")
    window = EditorWindow(path, locale="en")
    editor = window.document.editor
    assert editor.to_markdown() == "- one"
    editor.moveCursor(QTextCursor.End)
    assert editor.handle_newline()
    assert window.save()
    assert path.read_text(encoding="utf-8") == "- one\n- "
    assert config.load_last_file() == str(path)


def test_save_without_path(app) -> None:
    window = EditorWindow(None)
    assert window.save() is False
    assert window.windowTitle() == "Untitled - markedit"
