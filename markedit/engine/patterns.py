from __future__ import annotations

import re

BOLD = "**"
ITALIC = "*"
INLINE_CODE = "`"
FENCE = "```"
HORIZONTAL_RULE = "---"

HEADING_MAX_LEVEL = 3
HEADING_PREFIXES = tuple("#" * lvl + " " for lvl in range(1, HEADING_MAX_LEVEL + 1))
BULLET_PREFIX = "- "
NUMBERED_PREFIX = "1. "
QUOTE_PREFIX = "> "

# Current-line patterns; matched against a single line without its newline.
BULLET_PATTERN = re.compile(r"^(?P<indent>\s*)(?P<bullet>[-*+])\s")
NUMBERED_PATTERN = re.compile(r"^(?P<indent>\s*)(?P<number>\d+)\.\s")
BLOCKQUOTE_PATTERN = re.compile(r"^>\s?")
HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})\s")

# Placeholders used when the caller supplies none; localized strings come
# from the app layer and are passed in explicitly.
DEFAULT_PLACEHOLDERS = {
    BOLD: "bold text",
    ITALIC: "italic text",
    INLINE_CODE: "code",
}
DEFAULT_TEXT_PLACEHOLDER = "text"
DEFAULT_URL_PLACEHOLDER = "url"
