import pytest

from script_glossary.normalize.contractions import (
    CONTRACTIONS,
    count_contractions,
    expand_contractions,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Don't stop", "Do not stop"),
        ("DON'T STOP", "DO NOT STOP"),
        ("don't stop", "do not stop"),
    ],
)
def test_expand_contractions_preserves_casing_style(text: str, expected: str) -> None:
    assert expand_contractions(text) == expected


def test_expand_contractions_accepts_typographic_apostrophe() -> None:
    assert expand_contractions("We don’t know, they’re late.") == (
        "We do not know, they are late."
    )


def test_expand_contractions_handles_pronoun_forms() -> None:
    text = "I'm sure it's fine. I'LL call. She's here and let's go."
    assert expand_contractions(text) == (
        "I am sure it is fine. I WILL call. She is here and let us go."
    )


def test_expand_contractions_lowercases_lowercase_match() -> None:
    assert expand_contractions("ok i'm in") == "ok i am in"


def test_expand_contractions_only_matches_whole_words() -> None:
    text = "isn'tt dont won'tful"
    assert expand_contractions(text) == text


def test_expand_contractions_leaves_other_text_untouched() -> None:
    text = "  Hello,\tworld!  \nNothing to see here.\n"
    assert expand_contractions(text) == text
    assert expand_contractions("") == ""


def test_expand_contractions_is_idempotent() -> None:
    text = "Can't you see? That's what's wrong. There'll be time, WON'T there?"
    once = expand_contractions(text)
    assert once == "Cannot you see? That is what is wrong. There will be time, WILL NOT there?"
    assert expand_contractions(once) == once


def test_every_contraction_key_expands() -> None:
    for key, expansion in CONTRACTIONS.items():
        assert expand_contractions(key) == expansion.lower()


def test_count_contractions() -> None:
    assert count_contractions("Don't do it, it’s late and we're tired.") == 3
    assert count_contractions("do not do it") == 0


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("doeſn't", "does not"),
        ("it'ſ fine", "it is fine"),
        ("İ'm here", "I am here"),
    ],
)
def test_expand_contractions_accepts_case_folded_variants(text: str, expected: str) -> None:
    assert expand_contractions(text) == expected
