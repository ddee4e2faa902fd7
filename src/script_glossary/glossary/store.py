from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger


@dataclass(frozen=True)
class GlossaryEntry:
    english_term: str
    target_term: str
    target_language: str


def normalize_language(language: str) -> str:
    return str(language).strip().lower()


def _entry_from_record(raw: object) -> GlossaryEntry | None:
    if not isinstance(raw, dict):
        raise ValueError("Each glossary entry must be an object.")
    english = str(raw.get("english_term", "")).strip()
    target = str(raw.get("target_term", "")).strip()
    language = normalize_language(raw.get("target_language", ""))
    if not language:
        raise ValueError(f"Glossary entry for '{english}' is missing target_language.")
    if not english or not target:
        return None
    return GlossaryEntry(english_term=english, target_term=target, target_language=language)


def _entries_from_language_tables(payload: dict[str, Any]) -> list[GlossaryEntry | None]:
    entries: list[GlossaryEntry | None] = []
    for language, table in payload.items():
        if not isinstance(table, dict):
            raise ValueError(
                f"Glossary table for language '{language}' must be an object of "
                "english->target terms."
            )
        for english, target in table.items():
            entries.append(
                _entry_from_record(
                    {
                        "english_term": english,
                        "target_term": target,
                        "target_language": language,
                    }
                )
            )
    return entries


def parse_glossary_payload(payload: object) -> list[GlossaryEntry]:
    """Parse a glossary JSON payload into entries.

    Two layouts are accepted: ``{"entries": [{"english_term", "target_term",
    "target_language"}, ...]}`` or ``{"<language>": {"<english>": "<target>"}}``.
    Records with a blank english or target term are skipped.
    """
    if not isinstance(payload, dict):
        raise ValueError("Glossary JSON must be an object.")

    if "entries" in payload:
        records = payload["entries"]
        if not isinstance(records, list):
            raise ValueError("Glossary field 'entries' must be a list.")
        parsed = [_entry_from_record(raw) for raw in records]
    else:
        parsed = _entries_from_language_tables(payload)

    entries = [entry for entry in parsed if entry is not None]
    skipped = len(parsed) - len(entries)
    if skipped:
        logger.warning("Skipped {} glossary records with blank terms.", skipped)
    return entries


def load_glossary_entries(glossary_path: Path | None) -> list[GlossaryEntry]:
    if glossary_path is None:
        return []
    if not glossary_path.exists():
        raise FileNotFoundError(f"Glossary file not found: {glossary_path}")

    payload = json.loads(glossary_path.read_text(encoding="utf-8"))
    entries = parse_glossary_payload(payload)
    logger.info("Loaded {} glossary entries from {}", len(entries), glossary_path)
    return entries


def glossary_for_language(
    entries: Iterable[GlossaryEntry], target_language: str
) -> dict[str, str]:
    language = normalize_language(target_language)
    glossary: dict[str, str] = {}
    for entry in entries:
        if entry.target_language == language:
            glossary[entry.english_term] = entry.target_term
    return glossary


def load_glossary_table(glossary_path: Path | None, target_language: str) -> dict[str, str]:
    glossary = glossary_for_language(load_glossary_entries(glossary_path), target_language)
    if not glossary:
        logger.info("No glossary terms available for target language '{}'.", target_language)
    return glossary
