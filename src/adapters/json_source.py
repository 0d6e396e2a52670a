"""JSON snapshot notification source.

Reads notification records exported by the backend or the client store. The
file may hold a list of records or an object keyed by notification id.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping

from adapters.notification_mapper import map_notifications
from core.models import Notification

LOGGER = logging.getLogger(__name__)


def _records_from_payload(payload: Any) -> List[Mapping[str, Any]]:
    if isinstance(payload, list):
        records = payload
    elif isinstance(payload, dict):
        # Keyed snapshots may omit the id inside each record.
        records = [
            {"id": key, **record} if isinstance(record, Mapping) else record
            for key, record in payload.items()
        ]
    else:
        raise ValueError("Notification snapshot must be a JSON list or object")

    for record in records:
        if not isinstance(record, Mapping):
            raise ValueError("Notification record must be a JSON object")
    return records


class JsonNotificationSource:
    """Loads notifications from a JSON file on disk."""

    def __init__(self, path: str) -> None:
        self._path = path

    def load(self) -> List[Notification]:
        with open(self._path, "r", encoding="utf-8") as handle:
            payload = json.load(handle)
        records = _records_from_payload(payload)
        notifications = map_notifications(records)
        LOGGER.info("Loaded %s of %s notifications from %s", len(notifications), len(records), self._path)
        return notifications
