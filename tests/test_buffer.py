import pytest

from markedit.engine.buffer import Buffer, current_line, line_end, line_start


def test_collapsed_by_default() -> None:
    buf = Buffer("hello", 3)
    assert buf.end == 3
    assert buf.is_collapsed
    assert buf.selected_text == ""


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (-5, None, (0, 0)),
        (99, None, (5, 5)),
        (4, 1, (1, 4)),
        (2, 100, (2, 5)),
    ],
)
def test_offsets_are_clamped_and_sorted(start, end, expected) -> None:
    buf = Buffer("hello", start, end)
    assert (buf.start, buf.end) == expected


def test_none_text_becomes_empty() -> None:
    buf = Buffer(None, 3)  # type: ignore[arg-type]
    assert buf.text == ""
    assert (buf.start, buf.end) == (0, 0)


@pytest.mark.parametrize(
    ("offset", "bounds", "line"),
    [
        (0, (0, 3), "one"),
        (3, (0, 3), "one"),
        (4, (4, 7), "two"),
        (6, (4, 7), "two"),
        (8, (8, 8), ""),
    ],
)
def test_line_helpers(offset, bounds, line) -> None:
    text = "one\ntwo\n"
    assert (line_start(text, offset), line_end(text, offset)) == bounds
    assert current_line(text, offset) == line


def test_line_helpers_on_empty_text() -> None:
    assert line_start("", 0) == 0
    assert line_end("", 0) == 0
    assert current_line("", 0) == ""


def test_replace_clamps_new_selection() -> None:
    buf = Buffer("abc", 1, 2)
    out = buf.replace(0, 3, "x", 10, 20)
    assert out == Buffer("x", 1, 1)
