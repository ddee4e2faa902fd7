from __future__ import annotations

import re
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple

from loguru import logger

# Unicode \w covers letters, digits and underscore.
_LEFT_BOUNDARY = r"(?<!\w)"
_RIGHT_BOUNDARY = r"(?!\w)"


class InvalidGlossaryError(ValueError):
    """Raised when a glossary key cannot be turned into a match pattern."""


@dataclass(frozen=True)
class MatchHit:
    term: str
    position: int


class TermCount(NamedTuple):
    translation: str
    count: int


def _collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def _term_alternative(term: str) -> str:
    # Any whitespace run inside a phrase matches any whitespace run in the text.
    return r"\s+".join(re.escape(part) for part in term.split())


def _validate_terms(glossary: Mapping[str, str]) -> None:
    for term in glossary:
        if not isinstance(term, str) or not term.strip():
            raise InvalidGlossaryError(
                f"Glossary key must be a non-empty string, got {term!r}."
            )


def _group_name(index: int) -> str:
    return f"t{index}"


def build_glossary_pattern(terms: list[str]) -> re.Pattern[str]:
    """Compile one case-insensitive pattern matching any of ``terms``.

    Alternatives are ordered longest-first and wrapped in an atomic group, so at
    a given position the longest phrase that matches is committed to and never
    traded for a shorter one. Matches must not touch a letter, digit or
    underscore on either side. Each alternative is captured by the group
    ``t<index>``, where ``index`` is the term's position in ``terms``.
    """
    if not terms:
        raise InvalidGlossaryError("Cannot build a glossary pattern without terms.")
    alternatives = sorted(
        ((index, _term_alternative(term)) for index, term in enumerate(terms)),
        key=lambda item: len(item[1]),
        reverse=True,
    )
    body = "|".join(
        f"(?P<{_group_name(index)}>{alternative})" for index, alternative in alternatives
    )
    pattern = rf"{_LEFT_BOUNDARY}(?>{body}){_RIGHT_BOUNDARY}"
    try:
        return re.compile(pattern, flags=re.IGNORECASE)
    except re.error as exc:
        raise InvalidGlossaryError(f"Glossary pattern failed to compile: {exc}") from exc


def _exact_key_index(terms: list[str]) -> dict[str, str]:
    index: dict[str, str] = {}
    for term in terms:
        index.setdefault(_collapse_whitespace(term), term)
    return index


def _warn_case_duplicates(terms: list[str]) -> None:
    # casefold only buckets candidates; the regex decides equivalence.
    buckets: dict[str, list[str]] = {}
    for term in terms:
        buckets.setdefault(_collapse_whitespace(term).casefold(), []).append(term)
    for candidates in buckets.values():
        if len(candidates) < 2:
            continue
        first = re.compile(_term_alternative(candidates[0]), flags=re.IGNORECASE)
        duplicates = [
            term for term in candidates if first.fullmatch(_collapse_whitespace(term))
        ]
        if len(duplicates) > 1:
            logger.warning(
                "Glossary contains case-duplicate keys {}; exact-case matches win, "
                "otherwise the first key is used.",
                duplicates,
            )


class GlossaryMatcher:
    """Finds glossary terms in text using a pattern compiled once per glossary."""

    def __init__(self, glossary: Mapping[str, str]) -> None:
        _validate_terms(glossary)
        self._glossary = dict(glossary)
        self._terms = list(self._glossary)
        self._group_terms = {_group_name(index): term for index, term in enumerate(self._terms)}
        self._exact_keys = _exact_key_index(self._terms)
        _warn_case_duplicates(self._terms)
        self._pattern = build_glossary_pattern(self._terms) if self._terms else None
        logger.debug("Compiled glossary matcher for {} terms.", len(self._terms))

    def _resolve_term(self, match: re.Match[str]) -> str:
        exact = self._exact_keys.get(_collapse_whitespace(match.group(0)))
        if exact is not None:
            return exact
        return self._group_terms[match.lastgroup]

    def hits(self, text: str) -> list[MatchHit]:
        if self._pattern is None or not text.strip():
            return []
        return [
            MatchHit(term=self._resolve_term(match), position=match.start())
            for match in self._pattern.finditer(text)
        ]

    def distinct_terms(self, text: str) -> dict[str, str]:
        found: dict[str, str] = {}
        for hit in self.hits(text):
            found.setdefault(hit.term, self._glossary[hit.term])
        return found

    def terms_with_counts(self, text: str) -> dict[str, TermCount]:
        counts = Counter(hit.term for hit in self.hits(text))
        return {
            term: TermCount(translation=self._glossary[term], count=count)
            for term, count in counts.items()
        }


def find_term_hits(text: str, glossary: Mapping[str, str]) -> list[MatchHit]:
    if not glossary or not text.strip():
        return []
    return GlossaryMatcher(glossary).hits(text)


def find_distinct_terms(text: str, glossary: Mapping[str, str]) -> dict[str, str]:
    """Map each glossary term found in ``text`` to its translation."""
    if not glossary or not text.strip():
        return {}
    return GlossaryMatcher(glossary).distinct_terms(text)


def find_terms_with_counts(
    text: str, glossary: Mapping[str, str]
) -> dict[str, TermCount]:
    """Map each glossary term found in ``text`` to ``(translation, count)``."""
    if not glossary or not text.strip():
        return {}
    return GlossaryMatcher(glossary).terms_with_counts(text)
