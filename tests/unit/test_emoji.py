"""Tests for leading emoji detection."""

import pytest

from asyncstatus_doc.core.extract.emoji import EmojiSplit, extract_emoji

FIRE = "\U0001F525"
FAMILY = "\U0001F468\u200D\U0001F469\u200D\U0001F467\u200D\U0001F466"
US_FLAG = "\U0001F1FA\U0001F1F8"
THUMBS_UP_MEDIUM = "\U0001F44D\U0001F3FD"
KEYCAP_ONE = "1\uFE0F\u20E3"
RED_HEART = "\u2764\uFE0F"


def test_leading_emoji_is_split_off() -> None:
    assert extract_emoji(f"{FIRE} feeling great") == EmojiSplit(
        emoji=FIRE, remaining_text="feeling great"
    )


def test_text_without_emoji_is_stripped() -> None:
    assert extract_emoji("no emoji here") == EmojiSplit(emoji=None, remaining_text="no emoji here")
    assert extract_emoji("  padded  ") == EmojiSplit(emoji=None, remaining_text="padded")


@pytest.mark.parametrize(
    "emoji",
    [FAMILY, US_FLAG, THUMBS_UP_MEDIUM, KEYCAP_ONE, RED_HEART],
    ids=["zwj-family", "flag", "skin-tone", "keycap", "variation-selector"],
)
def test_compound_emoji_are_atomic(emoji: str) -> None:
    split = extract_emoji(f"{emoji} rest of it")
    assert split.emoji == emoji
    assert split.remaining_text == "rest of it"


def test_emoji_without_following_space() -> None:
    assert extract_emoji(f"{RED_HEART}love") == EmojiSplit(emoji=RED_HEART, remaining_text="love")


def test_emoji_only() -> None:
    assert extract_emoji(FIRE) == EmojiSplit(emoji=FIRE, remaining_text="")


def test_only_leading_emoji_counts() -> None:
    assert extract_emoji(f"great {FIRE}") == EmojiSplit(emoji=None, remaining_text=f"great {FIRE}")
    assert extract_emoji(f" {FIRE} late start").emoji is None


def test_plain_digits_are_not_emoji() -> None:
    assert extract_emoji("1 thing left") == EmojiSplit(emoji=None, remaining_text="1 thing left")


def test_empty_text() -> None:
    assert extract_emoji("") == EmojiSplit(emoji=None, remaining_text="")


@pytest.mark.parametrize(
    "symbol",
    ["\u2713", "\u2605", "\U0001F130"],
    ids=["check-mark", "black-star", "squared-latin-a"],
)
def test_non_emoji_symbols_are_text(symbol: str) -> None:
    assert extract_emoji(f"{symbol} done") == EmojiSplit(emoji=None, remaining_text=f"{symbol} done")


def test_emoji_neighbours_of_non_emoji_symbols() -> None:
    assert extract_emoji("\u2714 done").emoji == "\u2714"
    assert extract_emoji("\u2B50 done").emoji == "\u2B50"
    assert extract_emoji("\U0001F170 done").emoji == "\U0001F170"
