import pytest

from markedit.engine.buffer import Buffer
from markedit.engine.newline import continuation_prefix, handle_newline


def test_numbered_continuation() -> None:
    out, handled = handle_newline(Buffer("3. foo", 6))
    assert handled
    assert out == Buffer("3. foo\n4. ", 10)


def test_numbered_uses_current_line_number_only() -> None:
    text = "1. a\n7. b"
    out, handled = handle_newline(Buffer(text, len(text)))
    assert handled
    assert out.text.endswith("\n8. ")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("- a", "- a\n- "),
        ("* a", "* a\n* "),
        ("+ a", "+ a\n+ "),
        ("    - nested", "    - nested\n    - "),
        ("  9. nine", "  9. nine\n  10. "),
        ("> said", "> said\n> "),
        (">said", ">said\n> "),
    ],
)
def test_continuation_at_end_of_line(line, expected) -> None:
    out, handled = handle_newline(Buffer(line, len(line)))
    assert handled
    assert out.text == expected
    assert out.start == len(expected)


def test_continuation_splits_line_at_cursor() -> None:
    out, handled = handle_newline(Buffer("- abcd", 4))
    assert handled
    assert out == Buffer("- ab\n- cd", 7)


@pytest.mark.parametrize("line", ["- ", "-  ", "1. ", "> ", ">", "  - "])
def test_empty_item_terminates_list(line) -> None:
    text = f"- keep\n{line}"
    out, handled = handle_newline(Buffer(text, len(text)))
    assert handled
    assert out == Buffer("- keep\n", 7)


def test_lone_bullet_line_is_deleted() -> None:
    out, handled = handle_newline(Buffer("- ", 2))
    assert handled
    assert out == Buffer("", 0)


def test_termination_keeps_following_lines() -> None:
    text = "- a\n- \nafter"
    out, handled = handle_newline(Buffer(text, 6))
    assert handled
    assert out == Buffer("- a\n\nafter", 4)


def test_plain_line_not_handled() -> None:
    buf = Buffer("plain text", 5)
    out, handled = handle_newline(buf)
    assert not handled
    assert out is buf


def test_selection_not_handled() -> None:
    buf = Buffer("- item", 2, 4)
    out, handled = handle_newline(buf)
    assert not handled
    assert out is buf


def test_empty_buffer_not_handled() -> None:
    _, handled = handle_newline(Buffer(""))
    assert not handled


def test_rule_and_emphasis_lines_are_not_lists() -> None:
    assert continuation_prefix("---") is None
    assert continuation_prefix("**bold**") is None
    assert continuation_prefix("1.5 apples") is None
