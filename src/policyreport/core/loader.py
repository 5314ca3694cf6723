"""Report document loading and serialization.

Documents are YAML or JSON, chosen by file suffix.
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models.report import Report

DOCUMENT_SUFFIXES = (".yaml", ".yml", ".json")


class ReportLoadError(ValueError):
    """A report document could not be read or failed validation."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    loc = ".".join(str(part) for part in first["loc"]) or "report"
    return f"{loc}: {first['msg']}"


def parse_report(data: dict, path: Path | None = None) -> Report:
    """Validate a wire document into a Report."""
    if not isinstance(data, dict):
        raise ReportLoadError("Report document must be a mapping", path)
    try:
        return Report.model_validate(data)
    except ValidationError as e:
        raise ReportLoadError(f"Invalid report: {_describe(e)}", path) from e


def load_report(path: Path) -> Report:
    """Load a single report from a YAML or JSON file."""
    try:
        content = path.read_text(encoding="utf-8-sig")
        if path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ReportLoadError(f"Cannot read {path.name}: {e}", path) from e
    return parse_report(data, path)


def find_report_files(directory: Path) -> list[Path]:
    return sorted(
        p for p in directory.rglob("*")
        if p.is_file() and p.suffix.lower() in DOCUMENT_SUFFIXES
    )


def load_reports(directory: Path) -> list[Report]:
    """Load every report document under a directory, in path order."""
    if not directory.exists():
        return []
    return [load_report(p) for p in find_report_files(directory)]


def dump_report(report: Report) -> dict:
    """Serialize a report to its wire document.

    Unset optional fields are omitted; summary counts are always present.
    """
    return report.model_dump(mode="json", by_alias=True, exclude_none=True)


def export_report_json(report: Report, output_path: Path) -> Path:
    """Write a report to a JSON file (UTF-8, no BOM)."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(dump_report(report), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return output_path
