"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple


@dataclass(frozen=True)
class NotificationVisibility:
    """Per-type visibility switches. Anything not enabled is hidden."""

    likes: bool = False
    mentions: bool = False
    repeats: bool = False
    follows: bool = False
    follow_request: bool = False
    moves: bool = False
    emoji_reactions: bool = False
    polls: bool = False


@dataclass(frozen=True)
class CurationConfig:
    """Read-only snapshot of the user settings the pipeline depends on."""

    notification_visibility: NotificationVisibility = field(default_factory=NotificationVisibility)
    mute_words: Tuple[str, ...] = ()
    web_push_hide_if_cw: bool = False


# Backend (camelCase) keys mapped to NotificationVisibility fields.
_VISIBILITY_KEYS = {
    "likes": "likes",
    "mentions": "mentions",
    "repeats": "repeats",
    "follows": "follows",
    "followRequest": "follow_request",
    "moves": "moves",
    "emojiReactions": "emoji_reactions",
    "polls": "polls",
}


def build_curation_config(raw: Optional[Mapping[str, Any]]) -> CurationConfig:
    """Build a CurationConfig from the backend's camelCase settings mapping.

    Missing or null values are treated as disabled rather than as errors.
    """

    raw = raw or {}
    raw_visibility = raw.get("notificationVisibility") or {}
    visibility = NotificationVisibility(
        **{name: bool(raw_visibility.get(key)) for key, name in _VISIBILITY_KEYS.items()}
    )
    mute_words = tuple(str(word) for word in raw.get("muteWords") or [])
    return CurationConfig(
        notification_visibility=visibility,
        mute_words=mute_words,
        web_push_hide_if_cw=bool(raw.get("webPushHideIfCW")),
    )
