"""JSON message catalog localizer.

Implements the core Localizer port over ``locales/<locale>.json`` files with
nested keys, e.g. ``{"notifications": {"favorited_you": "favorited your status"}}``.
"""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, Optional, Sequence

LOGGER = logging.getLogger(__name__)

FALLBACK_LOCALE = "en"

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


def load_catalog(locales_dir: str, locale: str) -> dict:
    """Load one locale catalog, returning an empty catalog when missing."""

    path = os.path.join(locales_dir, f"{locale}.json")
    if not os.path.exists(path):
        LOGGER.warning("Locale catalog not found: %s", path)
        return {}
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _lookup(catalog: dict, key: str) -> Optional[str]:
    node: Any = catalog
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def _interpolate(message: str, args: Sequence[str]) -> str:
    def replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _PLACEHOLDER.sub(replace, message)


class CatalogLocalizer:
    """Callable localizer with a fallback chain: locale, then en, then the key."""

    def __init__(self, catalog: dict, fallback: Optional[dict] = None) -> None:
        self._catalog = catalog
        self._fallback = fallback or {}

    @classmethod
    def from_directory(cls, locales_dir: str, locale: str) -> "CatalogLocalizer":
        catalog = load_catalog(locales_dir, locale)
        fallback = catalog if locale == FALLBACK_LOCALE else load_catalog(locales_dir, FALLBACK_LOCALE)
        return cls(catalog, fallback)

    def __call__(self, key: str, args: Optional[Sequence[str]] = None) -> str:
        message = _lookup(self._catalog, key)
        if message is None:
            message = _lookup(self._fallback, key)
        if message is None:
            LOGGER.debug("Missing translation for %s", key)
            return key
        return _interpolate(message, args or [])
