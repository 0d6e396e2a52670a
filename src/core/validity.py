"""Well-formedness checks for notifications coming out of the store."""

from __future__ import annotations

from core.models import Notification, is_status_notification


def is_valid_notification(notification: Notification) -> bool:
    """A status notification must carry its status; everything else is valid."""

    if is_status_notification(notification.type) and notification.status is None:
        return False
    return True
