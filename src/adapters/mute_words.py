"""Mute word matching adapter.

Satisfies the core MuteMatcher port with plain case-insensitive substring
matching over a status' text and content warning.
"""

from __future__ import annotations

from typing import List, Sequence

from core.models import Status


def mute_word_hits(status: Status, mute_words: Sequence[str]) -> List[str]:
    """Return the configured mute words that appear in the status.

    Matching logic:
    - Both the text and the summary (content warning) are searched.
    - Comparison is case-insensitive.
    - Blank words never match anything.
    Hits are returned in configured order.
    """

    text = (status.text or "").lower()
    summary = (status.summary or "").lower()

    hits: List[str] = []
    for word in mute_words:
        needle = word.strip().lower()
        if not needle:
            continue
        if needle in text or needle in summary:
            hits.append(word)
    return hits
