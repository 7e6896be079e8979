from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

GLOBAL_CONFIG = Path(os.getenv("MARKEDIT_CONFIG") or (Path.home() / ".markedit_config.json"))

DEFAULT_LOCALE = "en"


def init_settings() -> None:
    GLOBAL_CONFIG.parent.mkdir(parents=True, exist_ok=True)


def _read_global_config() -> dict:
    """Return the parsed global config, or an empty dict on error/missing."""
    if not GLOBAL_CONFIG.exists():
        return {}
    try:
        payload = json.loads(GLOBAL_CONFIG.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return payload if isinstance(payload, dict) else {}


def _update_global_config(updates: dict) -> None:
    """Merge updates into global config file."""
    existing = _read_global_config()
    existing.update(updates)
    init_settings()
    GLOBAL_CONFIG.write_text(json.dumps(existing, indent=2, ensure_ascii=False), encoding="utf-8")


def load_locale(default: str = DEFAULT_LOCALE) -> str:
    """Locale used for editor placeholder strings (env MARKEDIT_LOCALE wins)."""
    env_locale = os.getenv("MARKEDIT_LOCALE")
    if env_locale and env_locale.strip():
        return env_locale.strip().lower()
    payload = _read_global_config()
    locale = payload.get("locale")
    if isinstance(locale, str) and locale.strip():
        return locale.strip().lower()
    return default


def save_locale(locale: str) -> None:
    _update_global_config({"locale": (locale or DEFAULT_LOCALE).strip().lower()})


def load_placeholder_overrides() -> dict[str, str]:
    """Per-key placeholder overrides, e.g. {"bold": "strong"}; non-strings are dropped."""
    payload = _read_global_config()
    raw = payload.get("placeholders")
    if not isinstance(raw, dict):
        return {}
    return {str(k): v for k, v in raw.items() if isinstance(v, str) and v}


def load_preview_enabled(default: bool = False) -> bool:
    payload = _read_global_config()
    val = payload.get("preview_enabled")
    if val is None:
        return default
    return bool(val)


def save_preview_enabled(enabled: bool) -> None:
    _update_global_config({"preview_enabled": bool(enabled)})


def load_last_file() -> Optional[str]:
    payload = _read_global_config()
    last = payload.get("last_file")
    return last if isinstance(last, str) else None


def save_last_file(path: str) -> None:
    _update_global_config({"last_file": path})
