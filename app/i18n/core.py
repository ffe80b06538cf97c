"""
i18n core: load_lang (cached JSON) and t(key, **kwargs).
The UI ships a single Arabic dictionary (ar.json); there is no language switch.
"""
from __future__ import annotations

import json
from pathlib import Path

_I18N_DIR = Path(__file__).resolve().parent
_CACHE: dict[str, dict[str, str]] = {}

DEFAULT_LANG = "AR"


def load_lang(lang: str = DEFAULT_LANG) -> dict[str, str]:
    """Load locale JSON for lang. Cached."""
    if lang not in _CACHE:
        path = _I18N_DIR / f"{lang.lower()}.json"
        if path.exists():
            with path.open(encoding="utf-8") as f:
                _CACHE[lang] = json.load(f)
        else:
            _CACHE[lang] = {}
    return _CACHE[lang]


def t(key: str, **kwargs) -> str:
    """
    Translate key using the Arabic dictionary.
    Supports .format(**kwargs). Fallback: return key if missing.
    """
    raw = load_lang(DEFAULT_LANG).get(key, key)
    if not kwargs:
        return raw
    try:
        return raw.format(**kwargs)
    except (KeyError, ValueError):
        return raw
