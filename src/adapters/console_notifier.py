"""Console desktop notification adapter.

Renders display payloads on a rich console, standing in for the OS
notification daemon on machines without one.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from adapters.notification_formatting import format_payload
from core.models import DesktopContext, DisplayPayload

LOGGER = logging.getLogger(__name__)


class ConsoleDesktopNotifier:
    """Notifier adapter that prints each payload as a panel."""

    def __init__(self, console: Optional[Console] = None, mode: str = "plain") -> None:
        self._console = console or Console()
        self._mode = mode

    def dispatch(self, context: DesktopContext, payload: DisplayPayload) -> None:
        """Show the payload unless desktop notifications are silenced."""

        if context.silence:
            LOGGER.debug("Desktop notifications silenced, dropping %s", payload.tag)
            return
        body = format_payload(payload, mode=self._mode)
        self._console.print(Panel(Text(body), title=Text(payload.title or payload.tag), expand=False))
