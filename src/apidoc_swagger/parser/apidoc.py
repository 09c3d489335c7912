"""apiDoc output parser.

Parses ``api_data.json`` and ``api_project.json`` into the models in
:mod:`apidoc_swagger.parser.base`.
"""

import json
from pathlib import Path

from .base import ApiDocEndpoint, ProjectInfo


class ApidocFormatError(ValueError):
    """Raised when a file is not apiDoc output of the expected shape."""


def parse_api_data(file_path: Path) -> list[ApiDocEndpoint]:
    """Parse an api_data.json file into a list of ApiDocEndpoint."""
    data = _load_json(file_path)
    if not isinstance(data, list):
        raise ApidocFormatError(f"{file_path}: expected a JSON array of endpoints")
    return parse_endpoints(data)


def parse_endpoints(records: list[dict]) -> list[ApiDocEndpoint]:
    """Validate raw endpoint records, skipping anything that is not an endpoint."""
    return [ApiDocEndpoint(**record) for record in records if _is_endpoint(record)]


def parse_project(file_path: Path) -> ProjectInfo:
    """Parse an api_project.json file into ProjectInfo."""
    data = _load_json(file_path)
    if not isinstance(data, dict):
        raise ApidocFormatError(f"{file_path}: expected a JSON object")
    return ProjectInfo(**data)


def _load_json(file_path: Path):
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ApidocFormatError(f"{file_path}: not UTF-8 text ({e.reason} at byte {e.start})") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ApidocFormatError(f"{file_path}: invalid JSON ({e.msg}, line {e.lineno})") from e


def _is_endpoint(record) -> bool:
    # apiDoc emits @apiDefine blocks without type/url alongside real endpoints
    return isinstance(record, dict) and bool(record.get("type")) and bool(record.get("url"))
