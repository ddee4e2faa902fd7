from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomllib

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class GlossaryConfig:
    store_path: Path | None
    default_target_language: str


@dataclass(frozen=True)
class PipelineConfig:
    workspace_dir: Path
    input_language: str
    expand_contractions: bool


@dataclass(frozen=True)
class LoggingConfig:
    level: str


@dataclass(frozen=True)
class AppConfig:
    glossary: GlossaryConfig
    pipeline: PipelineConfig
    logging: LoggingConfig


def _required_non_empty_str(value: object, field: str) -> str:
    normalized = str(value).strip()
    if not normalized:
        raise ValueError(f"Config field '{field}' must be a non-empty string.")
    return normalized


def _required_log_level(value: object, field: str) -> str:
    level = _required_non_empty_str(value, field).upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"Config field '{field}' must be one of: {', '.join(_LOG_LEVELS)}."
        )
    return level


def _deep_merge(left: dict[str, Any], right: dict[str, Any]) -> dict[str, Any]:
    merged = dict(left)
    for key, value in right.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        data = tomllib.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a TOML table: {path}")
    return data


def load_config(config_path: Path | None = None) -> AppConfig:
    root = Path(__file__).resolve().parents[2]
    default_path = root / "configs" / "default.toml"
    data = _read_toml(default_path)

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        override = _read_toml(config_path)
        data = _deep_merge(data, override)

    glossary_table = data.get("glossary", {})
    pipeline_table = data.get("pipeline", {})
    logging_table = data.get("logging", {})

    store_raw = glossary_table.get("store_path", None)
    store_path: Path | None
    if store_raw is None:
        store_path = None
    else:
        store_text = str(store_raw).strip()
        store_path = Path(store_text) if store_text else None
    if store_path is not None and not store_path.is_absolute():
        store_path = root / store_path
    default_target_language = _required_non_empty_str(
        glossary_table.get("default_target_language", "french"),
        "glossary.default_target_language",
    ).lower()

    workspace_dir = _required_non_empty_str(
        pipeline_table.get("workspace_dir", "runs"), "pipeline.workspace_dir"
    )
    input_language = _required_non_empty_str(
        pipeline_table.get("input_language", "en"), "pipeline.input_language"
    )
    level = _required_log_level(logging_table.get("level", "INFO"), "logging.level")

    return AppConfig(
        glossary=GlossaryConfig(
            store_path=store_path,
            default_target_language=default_target_language,
        ),
        pipeline=PipelineConfig(
            workspace_dir=Path(workspace_dir),
            input_language=input_language,
            expand_contractions=bool(pipeline_table.get("expand_contractions", True)),
        ),
        logging=LoggingConfig(level=level),
    )
