"""Core desktop notification processing.

This module is integration-agnostic. It only relies on ports for mute
matching, localization and delivery, enabling other notifiers or message
catalogs without changes here.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.config import CurationConfig
from core.display import build_display_payload
from core.models import DesktopContext, DisplayPayload, Notification
from core.ports import DesktopNotifierPort, Localizer, MuteMatcher
from core.trigger import should_notify

LOGGER = logging.getLogger(__name__)


class NotificationProcessor:
    """Composes the trigger decision, payload construction and dispatch."""

    def __init__(
        self,
        config: CurationConfig,
        mute_matcher: MuteMatcher,
        localize: Localizer,
        notifier: DesktopNotifierPort,
        context: Optional[DesktopContext] = None,
    ) -> None:
        self._config = config
        self._mute_matcher = mute_matcher
        self._localize = localize
        self._notifier = notifier
        self._context = context or DesktopContext()
        self.dispatched = 0

    def handle(self, notification: Notification) -> Optional[DisplayPayload]:
        """Process one newly observed notification.

        Returns the dispatched payload, or None when the notification was
        suppressed. Delivery is fire-and-forget; the notifier's outcome is
        never inspected.
        """

        if not should_notify(notification, self._config, self._mute_matcher):
            LOGGER.debug("Suppressed notification %s (%s)", notification.id, notification.type)
            return None

        payload = build_display_payload(notification, self._localize, self._config)
        self._notifier.dispatch(self._context, payload)
        self.dispatched += 1
        LOGGER.info("Dispatched notification %s (%s)", notification.id, notification.type)
        return payload
