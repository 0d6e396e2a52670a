from __future__ import annotations

import pytest

from adapters.notification_mapper import map_notification, map_notifications
from core.models import Attachment, InvalidNotificationError


def test_maps_normalized_record() -> None:
    notification = map_notification(
        {
            "id": 17,
            "type": "mention",
            "seen": True,
            "status": {
                "text": "hi",
                "summary": "cw",
                "nsfw": True,
                "muted": False,
                "attachments": [{"mimetype": "image/jpeg", "url": "https://x/1.jpg"}],
            },
            "from_profile": {"name": "Alice", "profile_image_url": "https://x/a.png"},
        }
    )
    assert notification.id == "17"
    assert notification.seen is True
    assert notification.status.summary == "cw"
    assert notification.status.nsfw is True
    assert notification.status.attachments == (Attachment(url="https://x/1.jpg", mimetype="image/jpeg"),)
    assert notification.from_profile.name == "Alice"


def test_maps_mastodon_style_aliases() -> None:
    notification = map_notification(
        {
            "id": "9",
            "type": "favourite",
            "pleroma": {"is_seen": True},
            "status": {
                "content": "post",
                "spoiler_text": "",
                "sensitive": False,
                "media_attachments": [{"url": "u", "pleroma": {"mime_type": "image/png"}}],
            },
            "account": {"display_name": "", "acct": "bob@example.org", "avatar": "https://x/b.png"},
        }
    )
    assert notification.type == "like"
    assert notification.seen is True
    assert notification.status.text == "post"
    assert notification.status.attachments[0].mimetype == "image/png"
    assert notification.from_profile.name == "bob@example.org"
    assert notification.from_profile.profile_image_url == "https://x/b.png"


def test_status_notification_without_status_is_rejected() -> None:
    with pytest.raises(InvalidNotificationError):
        map_notification({"id": "1", "type": "like"})


def test_batch_mapping_skips_invalid_records() -> None:
    notifications = map_notifications(
        [
            {"id": "1", "type": "reblog"},
            {"id": "2", "type": "follow", "account": {"name": "Carol"}},
            {"id": "3", "type": "pleroma:emoji_reaction", "emoji": "👍", "status": {"text": "x"}},
        ]
    )
    assert [n.id for n in notifications] == ["2", "3"]
    assert notifications[1].emoji == "👍"


def test_empty_status_object_still_counts_as_present() -> None:
    notifications = map_notifications([{"id": "1", "type": "like", "status": {}}])
    assert [n.id for n in notifications] == ["1"]
    assert notifications[0].status.text == ""
