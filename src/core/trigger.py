"""Decide whether a newly arrived notification deserves a desktop popup.

The decision is pure. Dispatching happens elsewhere (see core.processor).
"""

from __future__ import annotations

from core.config import CurationConfig
from core.models import MENTION, Notification
from core.ports import MuteMatcher
from core.validity import is_valid_notification
from core.visibility import resolve_visible_types


def is_muted_notification(
    notification: Notification,
    config: CurationConfig,
    mute_matcher: MuteMatcher,
) -> bool:
    """True when the status is muted or hits one of the configured mute words."""

    status = notification.status
    if status is None:
        return False
    if status.muted:
        return True
    return len(mute_matcher(status, config.mute_words)) > 0


def should_notify(
    notification: Notification,
    config: CurationConfig,
    mute_matcher: MuteMatcher,
) -> bool:
    """Return True if a desktop notification should fire for ``notification``.

    Checks run in order and stop at the first failure:
    - malformed notifications never fire
    - already seen notifications never fire
    - hidden types never fire
    - muted mentions never fire
    """

    if not is_valid_notification(notification):
        return False
    if notification.seen:
        return False
    if notification.type not in resolve_visible_types(config):
        return False
    # Only mentions are muted; likes or repeats of a muted post still notify.
    if notification.type == MENTION and is_muted_notification(notification, config, mute_matcher):
        return False
    return True
