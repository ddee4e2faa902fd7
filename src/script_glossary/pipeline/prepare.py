from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from time import perf_counter

from loguru import logger

from script_glossary.contracts import (
    build_glossary_term_report,
    build_translation_chain_request,
)
from script_glossary.glossary.matcher import GlossaryMatcher
from script_glossary.glossary.store import load_glossary_table
from script_glossary.io import read_script_text, write_json
from script_glossary.normalize.contractions import count_contractions, expand_contractions


@dataclass(frozen=True)
class PrepareArtifacts:
    request_json: Path
    term_report_json: Path
    run_manifest_json: Path
    glossary_term_count: int


def prepare_translation_request(
    *,
    script_path: Path,
    glossary_path: Path | None,
    target_language: str,
    output_json_path: Path,
    term_report_json_path: Path,
    run_manifest_json_path: Path,
    expand: bool = True,
    input_language: str = "en",
) -> PrepareArtifacts:
    pipeline_start = perf_counter()

    read_start = perf_counter()
    source_text = read_script_text(script_path)
    glossary = load_glossary_table(glossary_path, target_language)
    read_seconds = perf_counter() - read_start

    normalize_start = perf_counter()
    contraction_count = count_contractions(source_text) if expand else 0
    text = expand_contractions(source_text) if expand else source_text
    normalize_seconds = perf_counter() - normalize_start
    logger.info("Expanded {} contractions in {}", contraction_count, script_path.name)

    match_start = perf_counter()
    matcher = GlossaryMatcher(glossary)
    counted_terms = matcher.terms_with_counts(text)
    distinct_terms = {term: value.translation for term, value in counted_terms.items()}
    match_seconds = perf_counter() - match_start
    logger.info(
        "Found {} glossary terms for {} in {}",
        len(distinct_terms),
        target_language,
        script_path.name,
    )

    request = build_translation_chain_request(
        script_path=str(script_path),
        text=text,
        target_language=target_language,
        glossary=distinct_terms,
        contractions_expanded=expand,
        input_language=input_language,
    )
    report = build_glossary_term_report(
        target_language=target_language,
        counted_terms=counted_terms,
    )

    for path in (output_json_path, term_report_json_path, run_manifest_json_path):
        path.parent.mkdir(parents=True, exist_ok=True)
    write_start = perf_counter()
    write_json(output_json_path, request.to_dict())
    write_json(term_report_json_path, report.to_dict())
    write_seconds = perf_counter() - write_start
    total_seconds = perf_counter() - pipeline_start
    write_json(
        run_manifest_json_path,
        {
            "stage": "prepare",
            "target_language": request.target_language,
            "output_language": request.output_language,
            "inputs": {
                "script": str(script_path),
                "glossary": str(glossary_path) if glossary_path is not None else None,
            },
            "outputs": {
                "request_json": str(output_json_path),
                "term_report_json": str(term_report_json_path),
            },
            "stats": {
                "glossary_size": len(glossary),
                "contractions_expanded": contraction_count,
                "distinct_terms": report.term_count,
                "term_occurrences": report.total_occurrences,
            },
            "timings_seconds": {
                "read_inputs": read_seconds,
                "expand_contractions": normalize_seconds,
                "match_glossary": match_seconds,
                "write_outputs": write_seconds,
                "total_pipeline": total_seconds,
            },
        },
    )

    return PrepareArtifacts(
        request_json=output_json_path,
        term_report_json=term_report_json_path,
        run_manifest_json=run_manifest_json_path,
        glossary_term_count=len(distinct_terms),
    )
