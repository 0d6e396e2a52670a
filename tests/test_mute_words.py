from __future__ import annotations

from adapters.mute_words import mute_word_hits
from core.models import Status


def test_hits_are_case_insensitive_over_text_and_summary() -> None:
    status = Status(text="Big SPOILERS ahead", summary="Movie talk")
    assert mute_word_hits(status, ["spoilers", "movie", "sports"]) == ["spoilers", "movie"]


def test_blank_words_never_match() -> None:
    assert mute_word_hits(Status(text="anything"), ["", "   "]) == []


def test_no_words_no_hits() -> None:
    assert mute_word_hits(Status(text="anything"), []) == []
