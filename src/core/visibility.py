"""Resolve which notification types the user wants to see."""

from __future__ import annotations

from typing import FrozenSet

from core.config import CurationConfig
from core.models import (
    BITE,
    EMOJI_REACTION,
    FOLLOW,
    FOLLOW_REQUEST,
    LIKE,
    MENTION,
    MOVE,
    POLL,
    REPEAT,
)


def resolve_visible_types(config: CurationConfig) -> FrozenSet[str]:
    """Return the set of notification types currently enabled.

    Bites are not configurable and are always visible.
    """

    visibility = config.notification_visibility
    switches = [
        (visibility.likes, LIKE),
        (visibility.mentions, MENTION),
        (visibility.repeats, REPEAT),
        (visibility.follows, FOLLOW),
        (visibility.follow_request, FOLLOW_REQUEST),
        (visibility.moves, MOVE),
        (visibility.emoji_reactions, EMOJI_REACTION),
        (visibility.polls, POLL),
    ]
    visible = {notification_type for enabled, notification_type in switches if enabled}
    visible.add(BITE)
    return frozenset(visible)
