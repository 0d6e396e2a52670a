from __future__ import annotations

from core.config import CurationConfig, NotificationVisibility, build_curation_config
from core.visibility import resolve_visible_types


def test_default_visibility_only_includes_bite() -> None:
    config = build_curation_config({"notificationVisibility": {}})
    assert resolve_visible_types(config) == {"bite"}


def test_missing_visibility_block_is_treated_as_disabled() -> None:
    assert resolve_visible_types(build_curation_config({})) == {"bite"}
    assert resolve_visible_types(build_curation_config(None)) == {"bite"}


def test_all_switches_enabled() -> None:
    config = build_curation_config(
        {
            "notificationVisibility": {
                "likes": True,
                "mentions": True,
                "repeats": True,
                "follows": True,
                "followRequest": True,
                "moves": True,
                "emojiReactions": True,
                "polls": True,
            }
        }
    )
    assert resolve_visible_types(config) == {
        "like",
        "mention",
        "repeat",
        "follow",
        "follow_request",
        "move",
        "pleroma:emoji_reaction",
        "poll",
        "bite",
    }


def test_individual_switches() -> None:
    config = CurationConfig(
        notification_visibility=NotificationVisibility(mentions=True, emoji_reactions=True)
    )
    assert resolve_visible_types(config) == {"mention", "pleroma:emoji_reaction", "bite"}


def test_null_values_are_falsy() -> None:
    config = build_curation_config({"notificationVisibility": {"likes": None, "polls": True}})
    assert resolve_visible_types(config) == {"poll", "bite"}


def test_build_curation_config_reads_mute_words_and_cw_flag() -> None:
    config = build_curation_config({"muteWords": ["spoiler", "crypto"], "webPushHideIfCW": True})
    assert config.mute_words == ("spoiler", "crypto")
    assert config.web_push_hide_if_cw is True
