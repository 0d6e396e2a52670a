"""Shared notification formatting helpers.

Keeping formatting here prevents drift between adapters and keeps output
consistent regardless of where a payload or list is shown.
"""

from __future__ import annotations

import html
from typing import Iterable

from rich.table import Table
from rich.text import Text

from core.models import DisplayPayload, Notification


def _format_plain(payload: DisplayPayload) -> str:
    lines = []
    if payload.body:
        lines.append(payload.body)
    if payload.image:
        lines.extend(["", f"Image: {payload.image}"])
    if payload.icon:
        lines.append(f"Icon: {payload.icon}")
    return "\n".join(lines)


def _format_markup(payload: DisplayPayload) -> str:
    """Create the body used by notification daemons that accept basic markup."""

    parts = []
    if payload.body:
        parts.append(html.escape(payload.body))
    if payload.image:
        safe_image = html.escape(payload.image)
        parts.extend(["", f"<a href=\"{safe_image}\">{safe_image}</a>"])
    return "\n".join(parts)


def format_payload(payload: DisplayPayload, mode: str) -> str:
    """Return the payload body formatted for the requested mode."""

    if mode == "plain":
        return _format_plain(payload)
    if mode == "markup":
        return _format_markup(payload)
    raise ValueError(f"Unsupported notification format: {mode}")


def _summarize(notification: Notification) -> str:
    status = notification.status
    if notification.emoji:
        return notification.emoji
    if status is None:
        return ""
    # Content warnings stay folded in list view.
    if status.summary:
        return f"[CW] {status.summary}"
    return status.text.replace("\n", " ")[:80]


def build_notification_table(notifications: Iterable[Notification], title: str = "Notifications") -> Table:
    """Render curated notifications as a rich table, one row per item."""

    table = Table(title=title)
    table.add_column("ID", no_wrap=True)
    table.add_column("Type")
    table.add_column("From")
    table.add_column("Content")
    table.add_column("Seen", justify="center")

    for notification in notifications:
        actor = notification.from_profile.name if notification.from_profile else ""
        seen = Text("yes", style="dim") if notification.seen else Text("new", style="bold")
        table.add_row(
            Text(notification.id),
            Text(notification.type),
            Text(actor),
            Text(_summarize(notification)),
            seen,
        )
    return table
