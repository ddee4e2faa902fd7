from __future__ import annotations

import re
from types import MappingProxyType

CONTRACTIONS = MappingProxyType(
    {
        "i'll": "I will",
        "we'll": "we will",
        "you'll": "you will",
        "he'll": "he will",
        "she'll": "she will",
        "they'll": "they will",
        "it'll": "it will",
        "who'll": "who will",
        "there'll": "there will",
        "i'm": "I am",
        "we're": "we are",
        "you're": "you are",
        "they're": "they are",
        "he's": "he is",
        "she's": "she is",
        "it's": "it is",
        "i've": "I have",
        "we've": "we have",
        "you've": "you have",
        "they've": "they have",
        "don't": "do not",
        "doesn't": "does not",
        "didn't": "did not",
        "can't": "cannot",
        "won't": "will not",
        "isn't": "is not",
        "aren't": "are not",
        "wasn't": "was not",
        "weren't": "were not",
        "shouldn't": "should not",
        "wouldn't": "would not",
        "couldn't": "could not",
        "let's": "let us",
        "what's": "what is",
        "that's": "that is",
        "there's": "there is",
    }
)

_RIGHT_SINGLE_QUOTE = "’"
_APOSTROPHES = f"['{_RIGHT_SINGLE_QUOTE}]"
_KEYS = tuple(CONTRACTIONS)


def _contraction_pattern(keys: tuple[str, ...]) -> re.Pattern[str]:
    # Group c<index> identifies the key, so lookups never depend on case folding.
    alternatives = []
    for index, key in enumerate(keys):
        escaped = re.escape(key).replace("'", _APOSTROPHES)
        alternatives.append(f"(?P<c{index}>{escaped})")
    return re.compile(rf"\b(?:{'|'.join(alternatives)})\b", flags=re.IGNORECASE)


_CONTRACTION_RE = _contraction_pattern(_KEYS)


def _match_casing(original: str, replacement: str) -> str:
    if original.isupper():
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement.lower()


def _expand_match(match: re.Match[str]) -> str:
    key = _KEYS[int(match.lastgroup[1:])]
    return _match_casing(match.group(0), CONTRACTIONS[key])


def expand_contractions(text: str) -> str:
    """Rewrite informal contractions ("don't", "it's") into their expanded forms.

    The casing of each replacement follows the matched text: ``DON'T`` becomes
    ``DO NOT``, ``Don't`` becomes ``Do not`` and ``don't`` becomes ``do not``.
    Both the ASCII apostrophe and U+2019 are accepted. Everything else in the
    text is returned untouched.
    """
    if not text:
        return text
    return _CONTRACTION_RE.sub(_expand_match, text)


def count_contractions(text: str) -> int:
    return sum(1 for _ in _CONTRACTION_RE.finditer(text))
