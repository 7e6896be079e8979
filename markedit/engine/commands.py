"""Toolbar command table: ids, grouping, dispatch and active-state lookup."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .buffer import Buffer
from .inspector import FormatState
from . import mutators


@dataclass(frozen=True)
class Command:
    id: str
    group: str
    label: str
    tooltip: str
    shortcut: Optional[str] = None


COMMANDS: tuple[Command, ...] = (
    Command("bold", "inline", "B", "Bold", "Ctrl+B"),
    Command("italic", "inline", "I", "Italic", "Ctrl+I"),
    Command("h1", "heading", "H1", "Heading 1", "Ctrl+1"),
    Command("h2", "heading", "H2", "Heading 2", "Ctrl+2"),
    Command("h3", "heading", "H3", "Heading 3", "Ctrl+3"),
    Command("inline_code", "block", "</>", "Inline code", "Ctrl+E"),
    Command("code_block", "block", "```", "Code block"),
    Command("bullet_list", "block", "•", "Bulleted list"),
    Command("numbered_list", "block", "1.", "Numbered list"),
    Command("blockquote", "block", "❝", "Quote"),
    Command("link", "insert", "Link", "Insert link", "Ctrl+K"),
    Command("horizontal_rule", "insert", "—", "Horizontal rule"),
)

COMMANDS_BY_ID = {cmd.id: cmd for cmd in COMMANDS}


def _with_placeholder(fn: Callable[..., Buffer], key: str):
    def run(buffer: Buffer, placeholders=None) -> Buffer:
        placeholder = getattr(placeholders, key) if placeholders is not None else None
        return fn(buffer, placeholder)

    return run


def _link(buffer: Buffer, placeholders=None) -> Buffer:
    if placeholders is None:
        return mutators.insert_link(buffer)
    return mutators.insert_link(buffer, placeholders.link_url, placeholders.link_text)


_DISPATCH: dict[str, Callable[..., Buffer]] = {
    "bold": _with_placeholder(mutators.toggle_bold, "bold"),
    "italic": _with_placeholder(mutators.toggle_italic, "italic"),
    "inline_code": _with_placeholder(mutators.toggle_inline_code, "code"),
    "h1": lambda b, _p=None: mutators.toggle_heading(b, 1),
    "h2": lambda b, _p=None: mutators.toggle_heading(b, 2),
    "h3": lambda b, _p=None: mutators.toggle_heading(b, 3),
    "code_block": lambda b, _p=None: mutators.insert_code_block(b),
    "bullet_list": lambda b, _p=None: mutators.toggle_bullet_list(b),
    "numbered_list": lambda b, _p=None: mutators.toggle_numbered_list(b),
    "blockquote": lambda b, _p=None: mutators.toggle_blockquote(b),
    "link": _link,
    "horizontal_rule": lambda b, _p=None: mutators.insert_horizontal_rule(b),
}

_ACTIVE: dict[str, Callable[[FormatState], bool]] = {
    "bold": lambda s: s.is_bold,
    "italic": lambda s: s.is_italic,
    "inline_code": lambda s: s.is_inline_code,
    "code_block": lambda s: s.is_code_block,
    "h1": lambda s: s.heading_level == 1,
    "h2": lambda s: s.heading_level == 2,
    "h3": lambda s: s.heading_level == 3,
    "bullet_list": lambda s: s.is_bullet_list,
    "numbered_list": lambda s: s.is_numbered_list,
    "blockquote": lambda s: s.is_blockquote,
}


def apply_command(buffer: Buffer, command_id: str, placeholders=None) -> Buffer:
    """Run the toolbar command ``command_id``; unknown ids raise KeyError."""
    try:
        action = _DISPATCH[command_id]
    except KeyError:
        raise KeyError(f"Unknown editor command: {command_id!r}") from None
    return action(buffer, placeholders)


def is_command_active(state: FormatState, command_id: str) -> bool:
    check = _ACTIVE.get(command_id)
    return bool(check and check(state))


__all__ = ["COMMANDS", "COMMANDS_BY_ID", "Command", "apply_command", "is_command_active"]
