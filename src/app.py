"""Application entry point for notifeed."""

from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from rich.console import Console

import settings
from adapters.console_notifier import ConsoleDesktopNotifier
from adapters.i18n_catalog import CatalogLocalizer
from adapters.json_source import JsonNotificationSource
from adapters.mute_words import mute_word_hits
from adapters.notification_formatting import build_notification_table
from core.config import build_curation_config
from core.curation import curate, unseen
from core.models import DesktopContext
from core.processor import NotificationProcessor

NAME = "NOTIFEED"
FONT = "tarty-1"

# Log files rotate at 5 MB, keeping five backups.
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 5


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _file_handler(path: str) -> logging.Handler:
    if not os.path.isabs(path):
        path = os.path.join(settings.PROJECT_ROOT, path)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    return RotatingFileHandler(path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8")


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    handlers: list[logging.Handler] = []
    if config.get("console", True):
        handlers.append(logging.StreamHandler())
    if config.get("file"):
        handlers.append(_file_handler(config["file"]))
    if not handlers:
        return

    level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def _parse_types(raw: Optional[str]) -> Optional[set[str]]:
    if not raw:
        return None
    return {part.strip() for part in raw.split(",") if part.strip()}


def _list(path: str, types: Optional[set[str]]) -> None:
    config = build_curation_config(settings.CURATION)
    notifications = JsonNotificationSource(path).load()
    curated = curate(notifications, config, types)
    Console().print(build_notification_table(curated))


def _unseen(path: str) -> None:
    config = build_curation_config(settings.CURATION)
    notifications = JsonNotificationSource(path).load()
    pending = unseen(notifications, config)
    console = Console()
    console.print(f"{len(pending)} unseen notification(s)")
    if pending:
        console.print(build_notification_table(pending, title="Unseen"))


def _notify(path: str) -> None:
    logger = logging.getLogger(__name__)
    config = build_curation_config(settings.CURATION)
    localize = CatalogLocalizer.from_directory(settings.LOCALES_DIR, settings.LOCALE)
    if settings.DESKTOP_FORMAT not in {"plain", "markup"}:
        raise RuntimeError("desktop.format must be 'plain' or 'markup'")
    notifier = ConsoleDesktopNotifier(mode=settings.DESKTOP_FORMAT)
    processor = NotificationProcessor(
        config=config,
        mute_matcher=mute_word_hits,
        localize=localize,
        notifier=notifier,
        context=DesktopContext(silence=settings.DESKTOP_SILENCE),
    )

    # Every record in the file is treated as newly observed, oldest first.
    notifications = JsonNotificationSource(path).load()
    candidates = curate(notifications, config, types=None)
    for notification in reversed(candidates):
        try:
            processor.handle(notification)
        except Exception:
            logger.exception("Error while processing notification %s", notification.id)

    Console().print(f"{processor.dispatched} notification(s) dispatched")
    logger.info("Notify run complete: processed=%s, dispatched=%s", len(candidates), processor.dispatched)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="notifeed")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Show the curated notification list")
    list_parser.add_argument("path", help="JSON snapshot of notifications")
    list_parser.add_argument("--types", help="Comma separated types overriding visibility settings")

    unseen_parser = subparsers.add_parser("unseen", help="Show unseen notifications and their count")
    unseen_parser.add_argument("path", help="JSON snapshot of notifications")

    notify_parser = subparsers.add_parser("notify", help="Send desktop notifications for new items")
    notify_parser.add_argument("path", help="JSON snapshot of notifications")

    args = parser.parse_args(argv)
    _print_banner()
    _configure_logging()

    if args.command == "list":
        _list(args.path, _parse_types(args.types))
        return
    if args.command == "unseen":
        _unseen(args.path)
        return
    _notify(args.path)


if __name__ == "__main__":
    main()
