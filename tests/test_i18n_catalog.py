from __future__ import annotations

import json

from adapters.i18n_catalog import CatalogLocalizer


def _write(path, data: dict) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def test_lookup_with_positional_args(tmp_path) -> None:
    _write(tmp_path / "en.json", {"notifications": {"reacted_with": "reacted with {0}"}})
    localize = CatalogLocalizer.from_directory(str(tmp_path), "en")
    assert localize("notifications.reacted_with", ["🎉"]) == "reacted with 🎉"


def test_falls_back_to_english_then_key(tmp_path) -> None:
    _write(tmp_path / "en.json", {"notifications": {"followed_you": "followed you"}})
    _write(tmp_path / "de.json", {"notifications": {"favorited_you": "hat favorisiert"}})
    localize = CatalogLocalizer.from_directory(str(tmp_path), "de")

    assert localize("notifications.favorited_you") == "hat favorisiert"
    assert localize("notifications.followed_you") == "followed you"
    assert localize("notifications.unknown") == "notifications.unknown"


def test_missing_catalog_returns_keys(tmp_path) -> None:
    localize = CatalogLocalizer.from_directory(str(tmp_path), "fr")
    assert localize("notifications.poll_ended") == "notifications.poll_ended"


def test_unknown_placeholder_is_left_untouched() -> None:
    localize = CatalogLocalizer({"a": {"b": "{0} and {1}"}})
    assert localize("a.b", ["x"]) == "x and {1}"
