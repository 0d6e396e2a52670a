"""Build the desktop display payload for a single notification."""

from __future__ import annotations

from typing import Optional

from core.config import CurationConfig
from core.models import (
    BITE,
    EMOJI_REACTION,
    FOLLOW,
    FOLLOW_REQUEST,
    LIKE,
    MOVE,
    POLL,
    REPEAT,
    DisplayPayload,
    Notification,
    Status,
    is_status_notification,
)
from core.ports import Localizer

# Message templates under the "notifications." namespace.
_TEMPLATES = {
    LIKE: "favorited_you",
    REPEAT: "repeated_you",
    FOLLOW: "followed_you",
    MOVE: "migrated_to",
    FOLLOW_REQUEST: "follow_request",
    POLL: "poll_ended",
}

# Bites are shown untranslated.
_BITE_BODY = "bit"


def _status_body(status: Status, config: CurationConfig) -> str:
    if status.summary:
        if config.web_push_hide_if_cw:
            return status.summary
        return f"{status.summary}:\n{status.text}"
    return status.text


def _resolve_body(
    notification: Notification,
    localize: Localizer,
    config: CurationConfig,
) -> Optional[str]:
    if notification.type == EMOJI_REACTION:
        return localize("notifications.reacted_with", [notification.emoji or ""])
    if notification.type == BITE:
        return _BITE_BODY
    template = _TEMPLATES.get(notification.type)
    if template:
        return localize(f"notifications.{template}")
    if is_status_notification(notification.type) and notification.status is not None:
        return _status_body(notification.status, config)
    return None


def _first_safe_image(status: Optional[Status]) -> Optional[str]:
    # Only the first attachment is considered.
    if status is None or not status.attachments or status.nsfw:
        return None
    first = status.attachments[0]
    if first.mimetype and first.mimetype.startswith("image/"):
        return first.url
    return None


def build_display_payload(
    notification: Notification,
    localize: Localizer,
    config: CurationConfig,
) -> DisplayPayload:
    """Return the payload handed to the desktop notifier.

    Missing optional data (profile, summary, attachments) simply leaves the
    matching payload field empty.
    """

    profile = notification.from_profile
    return DisplayPayload(
        tag=notification.id,
        title=profile.name if profile else None,
        icon=profile.profile_image_url if profile else None,
        body=_resolve_body(notification, localize, config),
        image=_first_safe_image(notification.status),
    )
