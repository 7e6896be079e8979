"""Localized placeholder strings inserted by the formatting commands."""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Optional

from markedit.app import config
from markedit.engine.patterns import (
    BOLD,
    DEFAULT_PLACEHOLDERS,
    DEFAULT_TEXT_PLACEHOLDER,
    DEFAULT_URL_PLACEHOLDER,
    INLINE_CODE,
    ITALIC,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placeholders:
    bold: str
    italic: str
    code: str
    text: str
    link_text: str
    link_url: str = DEFAULT_URL_PLACEHOLDER


LOCALES: dict[str, Placeholders] = {
    "en": Placeholders(
        bold=DEFAULT_PLACEHOLDERS[BOLD],
        italic=DEFAULT_PLACEHOLDERS[ITALIC],
        code=DEFAULT_PLACEHOLDERS[INLINE_CODE],
        text=DEFAULT_TEXT_PLACEHOLDER,
        link_text=DEFAULT_TEXT_PLACEHOLDER,
    ),
    "ru": Placeholders(
        bold="жирный текст",
        italic="курсивный текст",
        code="код",
        text="текст",
        link_text="текст",
    ),
}


def placeholders(locale: Optional[str] = None) -> Placeholders:
    """Return placeholders for ``locale`` (configured locale when None).

    Unknown locales fall back to English; region suffixes ("ru_RU") are
    reduced to the language.
    """
    if locale is None:
        locale = config.load_locale()
    code = (locale or "").replace("-", "_").split("_", 1)[0].lower()
    base = LOCALES.get(code)
    if base is None:
        logger.debug("No placeholders for locale %r; using English", locale)
        base = LOCALES[config.DEFAULT_LOCALE]
    overrides = config.load_placeholder_overrides()
    known = {f.name for f in fields(Placeholders)}
    overrides = {k: v for k, v in overrides.items() if k in known}
    return replace(base, **overrides) if overrides else base


def placeholder_for_marker(marker: str, locale: Optional[str] = None) -> str:
    strings = placeholders(locale)
    if marker == "**":
        return strings.bold
    if marker == "*":
        return strings.italic
    if marker == "`":
        return strings.code
    return strings.text
