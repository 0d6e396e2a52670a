"""Ports (interfaces) used by the core pipeline.

Ports define the minimal contracts for mute matching, localization and
desktop delivery so that the core can be reused with different backends.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from core.models import DesktopContext, DisplayPayload, Status


class MuteMatcher(Protocol):
    """Return the mute words that hit the given status."""

    def __call__(self, status: Status, mute_words: Sequence[str]) -> Sequence[str]:
        ...


class Localizer(Protocol):
    """Look up a translated message by dotted key."""

    def __call__(self, key: str, args: Optional[Sequence[str]] = None) -> str:
        ...


class DesktopNotifierPort(Protocol):
    """Desktop notification delivery required by the processor."""

    def dispatch(self, context: DesktopContext, payload: DisplayPayload) -> None:
        ...
