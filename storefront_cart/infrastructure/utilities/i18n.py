"""
Simple i18n helper for translating notification strings.

Usage
-----
from storefront_cart.infrastructure.utilities.i18n import tr
text = tr("STOCK_EXCEEDED", "en")

Strings are stored in JSON files under storefront_cart/locales/<lang>.json
Missing keys fall back to Brazilian Portuguese, then to the key name.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict

from storefront_cart.infrastructure.utilities.constants import DEFAULT_LOCALE

_LOCALES_DIR = Path(__file__).resolve().parent.parent.parent / "locales"


@lru_cache(maxsize=None)
def _load_locale(lang: str) -> Dict[str, str]:
    """Load language JSON and cache the result."""
    file_path = _LOCALES_DIR / f"{lang}.json"
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        # Unknown language, fall back to the default locale
        return {}


def tr(key: str, lang: str | None = None) -> str:
    """Translate *key* for *lang*, falling back to the default locale, then the key."""
    lang = lang or DEFAULT_LOCALE

    primary = _load_locale(lang)
    if key in primary:
        return primary[key]

    if lang != DEFAULT_LOCALE:
        default_data = _load_locale(DEFAULT_LOCALE)
        if key in default_data:
            return default_data[key]

    return key
