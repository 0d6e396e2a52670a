"""Curation pipeline for the notification list and unread badges.

The pipeline enforces a strict order:
1) Copy the caller's collection (it is never mutated)
2) Drop malformed notifications
3) Order newest-first with unseen items grouped on top
4) Keep only visible types

Results are recomputed on every call; callers decide how often to curate.
"""

from __future__ import annotations

from typing import Collection, Iterable, List, Mapping, Optional, Union

from core.config import CurationConfig
from core.models import Notification
from core.ordering import sort_notifications
from core.validity import is_valid_notification
from core.visibility import resolve_visible_types

NotificationSource = Union[Iterable[Notification], Mapping[str, Notification]]


def _copy_notifications(notifications: NotificationSource) -> List[Notification]:
    # Stores often keep notifications keyed by id; ordering only needs the values.
    if isinstance(notifications, Mapping):
        return list(notifications.values())
    return list(notifications)


def curate(
    notifications: NotificationSource,
    config: CurationConfig,
    types: Optional[Collection[str]] = None,
) -> List[Notification]:
    """Return the ordered, filtered view of ``notifications``.

    ``types`` overrides the configured visibility when given, e.g. for a tab
    that only shows mentions.
    """

    allowed = frozenset(types) if types is not None else resolve_visible_types(config)
    candidates = [
        notification
        for notification in _copy_notifications(notifications)
        if is_valid_notification(notification)
    ]
    return [
        notification
        for notification in sort_notifications(candidates)
        if notification.type in allowed
    ]


def unseen(notifications: NotificationSource, config: CurationConfig) -> List[Notification]:
    """Curated notifications the user has not looked at yet."""

    return [notification for notification in curate(notifications, config) if not notification.seen]
