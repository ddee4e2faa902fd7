from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any

from script_glossary.glossary.matcher import TermCount

_OUTPUT_LANGUAGE_CODES = {
    "french": "fr",
    "german": "de",
}


def output_language_code(target_language: str) -> str:
    normalized = target_language.strip().lower()
    return _OUTPUT_LANGUAGE_CODES.get(normalized, normalized)


@dataclass(frozen=True)
class TranslationChainRequest:
    schema_version: str
    stage: str
    generated_at_utc: str
    script_path: str
    input_language: str
    output_language: str
    target_language: str
    contractions_expanded: bool
    glossary: dict[str, str]
    text: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GlossaryTermCount:
    english_term: str
    translation: str
    count: int


@dataclass(frozen=True)
class GlossaryTermReport:
    schema_version: str
    stage: str
    generated_at_utc: str
    target_language: str
    term_count: int
    total_occurrences: int
    terms: list[GlossaryTermCount]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def build_translation_chain_request(
    *,
    script_path: str,
    text: str,
    target_language: str,
    glossary: dict[str, str],
    contractions_expanded: bool,
    input_language: str = "en",
) -> TranslationChainRequest:
    normalized_target = target_language.strip().lower()
    if not normalized_target:
        raise ValueError("Translation request requires a target language.")
    return TranslationChainRequest(
        schema_version="1.0",
        stage="translation_chain_request",
        generated_at_utc=datetime.now(tz=UTC).isoformat(),
        script_path=script_path,
        input_language=input_language,
        output_language=output_language_code(normalized_target),
        target_language=normalized_target,
        contractions_expanded=contractions_expanded,
        glossary=dict(glossary),
        text=text,
    )


def build_glossary_term_report(
    *,
    target_language: str,
    counted_terms: dict[str, TermCount],
) -> GlossaryTermReport:
    # Most frequent first, then alphabetical for a stable report.
    ordered = sorted(
        counted_terms.items(), key=lambda item: (-item[1].count, item[0].casefold())
    )
    terms = [
        GlossaryTermCount(english_term=term, translation=value.translation, count=value.count)
        for term, value in ordered
    ]
    return GlossaryTermReport(
        schema_version="1.0",
        stage="glossary_term_report",
        generated_at_utc=datetime.now(tz=UTC).isoformat(),
        target_language=target_language.strip().lower(),
        term_count=len(terms),
        total_occurrences=sum(term.count for term in terms),
        terms=terms,
    )
