"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any backend-specific record layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

LIKE = "like"
MENTION = "mention"
REPEAT = "repeat"
FOLLOW = "follow"
FOLLOW_REQUEST = "follow_request"
MOVE = "move"
EMOJI_REACTION = "pleroma:emoji_reaction"
POLL = "poll"
BITE = "bite"

# Types that always refer to an underlying status (post or poll).
STATUS_NOTIFICATION_TYPES = frozenset({LIKE, MENTION, REPEAT, EMOJI_REACTION, POLL})


class InvalidNotificationError(ValueError):
    """Raised by the validating constructor for malformed notifications."""


def is_status_notification(notification_type: str) -> bool:
    return notification_type in STATUS_NOTIFICATION_TYPES


@dataclass(frozen=True)
class Attachment:
    """A single media attachment of a status."""

    url: str
    mimetype: Optional[str] = None


@dataclass(frozen=True)
class Status:
    """The subset of a status a notification needs for display and muting."""

    text: str = ""
    summary: str = ""
    attachments: Tuple[Attachment, ...] = ()
    nsfw: bool = False
    muted: bool = False


@dataclass(frozen=True)
class Profile:
    """Actor that triggered a notification."""

    name: str
    profile_image_url: Optional[str] = None


@dataclass(frozen=True)
class Notification:
    """One notification event as delivered by the backend.

    The plain constructor accepts whatever the store holds. Use
    ``Notification.validated`` when decoding records so that status
    notifications without a status are rejected up front.
    """

    id: str
    type: str
    seen: bool = False
    status: Optional[Status] = None
    from_profile: Optional[Profile] = None
    emoji: Optional[str] = None

    @classmethod
    def validated(
        cls,
        *,
        id: str,
        type: str,
        seen: bool = False,
        status: Optional[Status] = None,
        from_profile: Optional[Profile] = None,
        emoji: Optional[str] = None,
    ) -> "Notification":
        if is_status_notification(type) and status is None:
            raise InvalidNotificationError(f"{type} notification {id} has no status")
        return cls(
            id=id,
            type=type,
            seen=seen,
            status=status,
            from_profile=from_profile,
            emoji=emoji,
        )


@dataclass(frozen=True)
class DisplayPayload:
    """Everything the OS notifier needs to show one desktop notification."""

    tag: str
    title: Optional[str] = None
    icon: Optional[str] = None
    body: Optional[str] = None
    image: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return the payload with absent fields omitted."""

        fields = {
            "tag": self.tag,
            "title": self.title,
            "icon": self.icon,
            "body": self.body,
            "image": self.image,
        }
        return {key: value for key, value in fields.items() if value is not None}


@dataclass(frozen=True)
class DesktopContext:
    """State passed through to the desktop notifier on dispatch."""

    silence: bool = False
