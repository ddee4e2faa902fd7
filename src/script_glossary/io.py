from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RunPaths:
    root: Path
    output_request_dir: Path
    output_report_dir: Path


def create_run_paths(workspace_dir: Path, run_id: str | None) -> RunPaths:
    timestamp = datetime.now(tz=UTC).strftime("%Y%m%d_%H%M%S")
    selected_run_id = run_id or f"prepare_{timestamp}"
    root = workspace_dir / selected_run_id
    paths = RunPaths(
        root=root,
        output_request_dir=root / "output" / "request",
        output_report_dir=root / "output" / "report",
    )
    for directory in (paths.root, paths.output_request_dir, paths.output_report_dir):
        directory.mkdir(parents=True, exist_ok=False)
    return paths


def read_script_text(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"Script file not found: {path}")
    if path.suffix.lower() != ".txt":
        raise ValueError(f"Only .txt scripts are supported: {path}")
    return path.read_text(encoding="utf-8-sig")


def write_json(path: Path, payload: dict[str, Any]) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
