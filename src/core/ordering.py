"""Newest-first ordering of notifications (core domain)."""

from __future__ import annotations

from functools import cmp_to_key
import re
from typing import Iterable, List, Optional

from core.models import Notification

# Integer ids only; decimal or exponent forms such as "1.5" and "1e3" are opaque.
_NUMERIC_ID = re.compile(r"[+-]?[0-9]+")


def _parse_sequence(notification_id: str) -> Optional[int]:
    candidate = notification_id.strip()
    if not _NUMERIC_ID.fullmatch(candidate):
        return None
    return int(candidate)


def compare_by_id(a: Notification, b: Notification) -> int:
    """Compare two notifications so that newer ones sort first.

    Ordering rules:
    - Two numeric ids compare by value, larger (newer) first.
    - A numeric id always sorts before an opaque one.
    - Two opaque ids compare as strings, descending.

    Mixing numeric and opaque ids is only a heuristic; there is no shared
    timestamp between the two kinds.
    """

    seq_a = _parse_sequence(a.id)
    seq_b = _parse_sequence(b.id)

    if seq_a is not None and seq_b is not None:
        if seq_a == seq_b:
            return 0
        return -1 if seq_a > seq_b else 1
    if seq_a is not None:
        return -1
    if seq_b is not None:
        return 1
    if a.id == b.id:
        return 0
    return -1 if a.id > b.id else 1


def sort_notifications(notifications: Iterable[Notification]) -> List[Notification]:
    """Return a new list ordered by id, with unseen items grouped first.

    Both passes rely on ``sorted`` being stable, so the seen grouping keeps
    the id order inside each group.
    """

    by_id = sorted(notifications, key=cmp_to_key(compare_by_id))
    return sorted(by_id, key=lambda notification: bool(notification.seen))
