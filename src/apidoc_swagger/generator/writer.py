"""Render a Swagger document as JSON or YAML."""

import json
from pathlib import Path

import yaml

YAML_SUFFIXES = (".yaml", ".yml")


def detect_output_format(file_path: Path) -> str:
    return "yaml" if file_path.suffix.lower() in YAML_SUFFIXES else "json"


def render_document(document: dict, fmt: str = "json") -> str:
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def write_document(document: dict, file_path: Path, fmt: str = "auto") -> str:
    """Write the document and return the format used."""
    if fmt == "auto":
        fmt = detect_output_format(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(render_document(document, fmt), encoding="utf-8")
    return fmt
