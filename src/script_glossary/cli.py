from __future__ import annotations

from pathlib import Path

import typer

from script_glossary.config import load_config
from script_glossary.contracts import build_glossary_term_report
from script_glossary.glossary.matcher import find_terms_with_counts
from script_glossary.glossary.store import load_glossary_table
from script_glossary.io import create_run_paths, read_script_text
from script_glossary.logging_config import configure_logging
from script_glossary.normalize.contractions import expand_contractions
from script_glossary.pipeline.prepare import prepare_translation_request

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command("expand")
def expand(
    script: Path = typer.Argument(..., help="Plain-text script (.txt)."),
    output: Path | None = typer.Option(
        None, "--output", help="Write the expanded text here instead of stdout."
    ),
    config_path: Path | None = typer.Option(
        None, "--config", help="Optional TOML config file to override defaults."
    ),
) -> None:
    """Expand informal contractions in a script."""
    config = load_config(config_path)
    configure_logging(config.logging.level)
    try:
        text = read_script_text(script)
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=5) from exc
    except ValueError as exc:
        typer.echo(f"Invalid script: {exc}", err=True)
        raise typer.Exit(code=6) from exc

    expanded = expand_contractions(text)
    if output is None:
        typer.echo(expanded, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(expanded, encoding="utf-8")
    typer.echo(f"Expanded script: {output}")


@app.command("terms")
def terms(
    script: Path = typer.Argument(..., help="Plain-text script (.txt)."),
    glossary_path: Path | None = typer.Option(
        None, "--glossary", help="Glossary JSON file. Defaults to glossary.store_path."
    ),
    target_lang: str | None = typer.Option(
        None, "--target-lang", help="Target language, e.g. french or german."
    ),
    expand_first: bool = typer.Option(
        True, "--expand/--no-expand", help="Expand contractions before matching."
    ),
    config_path: Path | None = typer.Option(
        None, "--config", help="Optional TOML config file to override defaults."
    ),
) -> None:
    """List glossary terms found in a script with their occurrence counts."""
    config = load_config(config_path)
    configure_logging(config.logging.level)
    target_language = target_lang or config.glossary.default_target_language
    try:
        text = read_script_text(script)
        glossary = load_glossary_table(glossary_path or config.glossary.store_path, target_language)
        if expand_first:
            text = expand_contractions(text)
        report = build_glossary_term_report(
            target_language=target_language,
            counted_terms=find_terms_with_counts(text, glossary),
        )
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=5) from exc
    except ValueError as exc:
        typer.echo(f"Invalid input for glossary matching: {exc}", err=True)
        raise typer.Exit(code=6) from exc

    if not report.terms:
        typer.echo(f"No glossary terms found for {report.target_language}.")
        return
    for item in report.terms:
        typer.echo(f"{item.english_term}\t{item.translation}\t{item.count}")
    typer.echo(
        f"Total: {report.term_count} terms, {report.total_occurrences} occurrences."
    )


@app.command("prepare")
def prepare(
    script: Path = typer.Argument(..., help="Plain-text script (.txt)."),
    glossary_path: Path | None = typer.Option(
        None, "--glossary", help="Glossary JSON file. Defaults to glossary.store_path."
    ),
    target_lang: str | None = typer.Option(
        None, "--target-lang", help="Target language, e.g. french or german."
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        help="Directory for output JSON files. Defaults to a new run under pipeline.workspace_dir.",
    ),
    run_id: str | None = typer.Option(None, "--run-id", help="Optional run folder name."),
    no_expand: bool = typer.Option(
        False,
        "--no-expand",
        help="Skip contraction expansion even if pipeline.expand_contractions is enabled.",
    ),
    config_path: Path | None = typer.Option(
        None, "--config", help="Optional TOML config file to override defaults."
    ),
) -> None:
    """Build the translation request payload for a script."""
    config = load_config(config_path)
    configure_logging(config.logging.level)
    target_language = (target_lang or config.glossary.default_target_language).lower()
    expand_enabled = config.pipeline.expand_contractions and not no_expand

    try:
        if output_dir is None:
            paths = create_run_paths(config.pipeline.workspace_dir, run_id)
            request_dir = paths.output_request_dir
            report_dir = paths.output_report_dir
            manifest_path = paths.root / "run_manifest.json"
        else:
            request_dir = output_dir
            report_dir = output_dir
            manifest_path = output_dir / "run_manifest.json"
        artifacts = prepare_translation_request(
            script_path=script,
            glossary_path=glossary_path or config.glossary.store_path,
            target_language=target_language,
            output_json_path=request_dir / f"translation_request.{target_language}.json",
            term_report_json_path=report_dir / f"glossary_terms.{target_language}.json",
            run_manifest_json_path=manifest_path,
            expand=expand_enabled,
            input_language=config.pipeline.input_language,
        )
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=5) from exc
    except FileExistsError as exc:
        typer.echo(f"Run folder already exists: {exc.filename}", err=True)
        raise typer.Exit(code=6) from exc
    except ValueError as exc:
        typer.echo(f"Invalid input for translation request: {exc}", err=True)
        raise typer.Exit(code=6) from exc
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected prepare failure: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Translation request: {artifacts.request_json}")
    typer.echo(f"Glossary term report: {artifacts.term_report_json}")
    typer.echo(f"Run manifest: {artifacts.run_manifest_json}")
    typer.echo(f"Glossary terms attached: {artifacts.glossary_term_count}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
