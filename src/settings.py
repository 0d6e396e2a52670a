"""Static configuration for notifeed.

All user-editable settings (visibility, mute words, locale, desktop output,
logging) live in a single JSON file for quick edits without touching Python.
"""

import json
import os

from dotenv import load_dotenv

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# NOTIFEED_CONFIG may point at another config file, e.g. from a .env file.
load_dotenv()
CONFIG_PATH = os.getenv("NOTIFEED_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Curation settings use the backend's camelCase keys so a settings export can
# be pasted in as-is: notificationVisibility, muteWords, webPushHideIfCW.
CURATION = _CONFIG.get("curation", {})

# Message catalogs for desktop notification bodies.
LOCALE = _CONFIG.get("locale", "en")
LOCALES_DIR = os.path.join(PROJECT_ROOT, _CONFIG.get("locales_dir", "locales"))

# Desktop output: silence drops every popup, format is "plain" or "markup".
_desktop = _CONFIG.get("desktop", {})
DESKTOP_SILENCE = bool(_desktop.get("silence", False))
DESKTOP_FORMAT = _desktop.get("format", "plain")

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
