import pytest

from script_glossary.contracts import (
    GlossaryTermCount,
    build_glossary_term_report,
    build_translation_chain_request,
    output_language_code,
)
from script_glossary.glossary.matcher import TermCount


def test_output_language_code_maps_known_languages() -> None:
    assert output_language_code("French") == "fr"
    assert output_language_code(" german ") == "de"
    assert output_language_code("Spanish") == "spanish"


def test_build_translation_chain_request() -> None:
    request = build_translation_chain_request(
        script_path="scripts/episode_01.txt",
        text="Do not stop the machine learning demo.",
        target_language="French",
        glossary={"machine learning": "apprentissage automatique"},
        contractions_expanded=True,
    )

    payload = request.to_dict()
    assert payload["stage"] == "translation_chain_request"
    assert payload["input_language"] == "en"
    assert payload["output_language"] == "fr"
    assert payload["target_language"] == "french"
    assert payload["contractions_expanded"] is True
    assert payload["glossary"] == {"machine learning": "apprentissage automatique"}


def test_build_translation_chain_request_requires_target_language() -> None:
    with pytest.raises(ValueError, match="target language"):
        build_translation_chain_request(
            script_path="a.txt",
            text="text",
            target_language="  ",
            glossary={},
            contractions_expanded=False,
        )


def test_build_glossary_term_report_orders_by_count_then_term() -> None:
    report = build_glossary_term_report(
        target_language="German",
        counted_terms={
            "open source": TermCount("Open Source", 1),
            "API": TermCount("API", 1),
            "machine learning": TermCount("maschinelles Lernen", 3),
        },
    )

    assert report.target_language == "german"
    assert report.term_count == 3
    assert report.total_occurrences == 5
    assert report.terms == [
        GlossaryTermCount("machine learning", "maschinelles Lernen", 3),
        GlossaryTermCount("API", "API", 1),
        GlossaryTermCount("open source", "Open Source", 1),
    ]
    assert report.to_dict()["terms"][0] == {
        "english_term": "machine learning",
        "translation": "maschinelles Lernen",
        "count": 3,
    }
