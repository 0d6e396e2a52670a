"""Backend record to core notification mapping adapter.

This keeps backend field names and API aliases out of the core pipeline.
Records are expected to be already-decoded JSON objects.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from core.models import (
    LIKE,
    REPEAT,
    Attachment,
    InvalidNotificationError,
    Notification,
    Profile,
    Status,
)

LOGGER = logging.getLogger(__name__)

# Mastodon-compatible type names used by some servers.
_TYPE_ALIASES = {
    "favourite": LIKE,
    "reblog": REPEAT,
}


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def _map_attachment(raw: Mapping[str, Any]) -> Attachment:
    mimetype = _first(raw, "mimetype", "mime_type")
    if mimetype is None:
        pleroma = raw.get("pleroma") or {}
        mimetype = pleroma.get("mime_type")
    return Attachment(url=str(raw.get("url") or ""), mimetype=mimetype)


def _map_status(raw: Optional[Mapping[str, Any]]) -> Optional[Status]:
    if raw is None:
        return None
    attachments = _first(raw, "attachments", "media_attachments") or []
    return Status(
        text=_first(raw, "text", "content") or "",
        summary=_first(raw, "summary", "spoiler_text") or "",
        attachments=tuple(_map_attachment(item) for item in attachments),
        nsfw=bool(_first(raw, "nsfw", "sensitive")),
        muted=bool(raw.get("muted")),
    )


def _map_profile(raw: Optional[Mapping[str, Any]]) -> Optional[Profile]:
    if not raw:
        return None
    # Fallback: display names are optional, account handles are not
    name = _first(raw, "name", "display_name") or _first(raw, "screen_name", "acct", "username") or ""
    return Profile(
        name=str(name),
        profile_image_url=_first(raw, "profile_image_url", "avatar"),
    )


def _is_seen(record: Mapping[str, Any]) -> bool:
    if "seen" in record:
        return bool(record["seen"])
    pleroma = record.get("pleroma") or {}
    return bool(pleroma.get("is_seen"))


def map_notification(record: Mapping[str, Any]) -> Notification:
    """Build a validated core Notification from a decoded backend record.

    Raises InvalidNotificationError for status notifications without a status.
    """

    raw_type = str(record.get("type") or "")
    return Notification.validated(
        id=str(record.get("id", "")),
        type=_TYPE_ALIASES.get(raw_type, raw_type),
        seen=_is_seen(record),
        status=_map_status(record.get("status")),
        from_profile=_map_profile(_first(record, "from_profile", "account")),
        emoji=record.get("emoji"),
    )


def map_notifications(records: Iterable[Mapping[str, Any]]) -> List[Notification]:
    """Map a batch of records, skipping the malformed ones."""

    notifications: List[Notification] = []
    for record in records:
        try:
            notifications.append(map_notification(record))
        except InvalidNotificationError as exc:
            LOGGER.warning("Skipping invalid notification: %s", exc)
    return notifications
