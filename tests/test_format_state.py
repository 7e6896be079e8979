import pytest

from markedit.engine.buffer import Buffer
from markedit.engine.inspector import (
    FenceIndex,
    FormatState,
    detect_format_state,
    is_inside_code_block,
)


def state(text: str, start: int, end=None) -> FormatState:
    return detect_format_state(Buffer(text, start, end))


def test_empty_text_has_default_state() -> None:
    assert state("", 0) == FormatState()


def test_bold_selection_is_not_italic() -> None:
    result = state("**bold**", 2, 6)
    assert result.is_bold
    assert not result.is_italic


def test_italic_selection_is_not_bold() -> None:
    result = state("*it*", 1, 3)
    assert result.is_italic
    assert not result.is_bold


def test_bold_italic_run_reports_both() -> None:
    result = state("***both***", 3, 7)
    assert result.is_bold
    assert result.is_italic


def test_collapsed_cursor_between_markers() -> None:
    assert state("****", 2).is_bold
    assert state("``", 1).is_inline_code


def test_cursor_inside_inline_code_span() -> None:
    text = "run `make test` now"
    assert state(text, text.index("test")).is_inline_code
    assert not state(text, text.index("now")).is_inline_code


def test_span_does_not_cross_lines() -> None:
    text = "**open\nclose**"
    assert not state(text, 3).is_bold
    assert not state(text, text.index("close")).is_bold


def test_star_bullet_is_not_italic() -> None:
    text = "* item *x*"
    assert not state(text, text.index("item") + 1).is_italic
    assert state(text, text.index("x")).is_italic


def test_code_fence_parity() -> None:
    text = "a\n```\ncode\n```\nb"
    assert state(text, text.index("code") + 1).is_code_block
    assert not state(text, text.index("b")).is_code_block
    assert not state(text, 0).is_code_block


def test_indented_fence_counts() -> None:
    text = "  ```python\nx = 1\n"
    assert is_inside_code_block(text, text.index("x"))


def test_unclosed_fence_keeps_code_block_open() -> None:
    text = "```\none\n\ntwo"
    assert is_inside_code_block(text, len(text))


@pytest.mark.parametrize(
    ("line", "attr"),
    [
        ("- item", "is_bullet_list"),
        ("  * item", "is_bullet_list"),
        ("+ item", "is_bullet_list"),
        ("1. item", "is_numbered_list"),
        ("   42. item", "is_numbered_list"),
        ("> quote", "is_blockquote"),
        (">quote", "is_blockquote"),
    ],
)
def test_line_patterns(line, attr) -> None:
    assert getattr(state(line, len(line)), attr)


@pytest.mark.parametrize(
    ("line", "level"),
    [("# a", 1), ("## a", 2), ("### a", 3), ("###### a", 6), ("####### a", 0), ("#a", 0), ("a", 0)],
)
def test_heading_level(line, level) -> None:
    assert state(line, 0).heading_level == level


def test_line_state_uses_cursor_line_only() -> None:
    text = "- item\nplain"
    assert not state(text, len(text)).is_bullet_list
    assert state(text, 2).is_bullet_list


def test_non_bmp_text_before_markers() -> None:
    text = "🔧 **ключ**"
    start = text.index("ключ")
    assert state(text, start, start + 4).is_bold


@pytest.mark.parametrize(
    "text",
    [
        "a\n```\ncode\n```\nb",
        "```\n```\n```\nx",
        "  ```\n x ``` \n```js\n",
        "no fences at all",
        "",
    ],
)
def test_fence_index_matches_scan(text) -> None:
    index = FenceIndex()
    for offset in range(len(text) + 1):
        assert index.is_inside(text, offset) == is_inside_code_block(text, offset)


def test_fence_index_rebuilds_on_new_text() -> None:
    index = FenceIndex()
    assert not index.is_inside("plain", 5)
    assert index.is_inside("```\nx", 5)
