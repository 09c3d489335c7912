"""Auto-detect apiDoc output files."""

import json
from pathlib import Path

API_DATA = "api_data"
API_PROJECT = "api_project"
UNKNOWN = "unknown"


def detect_format(file_path: Path) -> str:
    """Detect which apiDoc output a file holds.

    Returns: 'api_data', 'api_project', or 'unknown'.
    """
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return UNKNOWN

    if isinstance(data, list):
        if all(isinstance(item, dict) and "url" in item and "type" in item for item in data):
            return API_DATA
    elif isinstance(data, dict):
        if "apidoc" in data or "sampleUrl" in data or ("name" in data and "version" in data):
            return API_PROJECT
    return UNKNOWN


def find_apidoc_files(directory: Path) -> tuple[Path | None, Path | None]:
    """Locate the api_data and api_project files in an apiDoc output directory."""
    data_file = None
    project_file = None
    for candidate in sorted(directory.glob("*.json")):
        fmt = detect_format(candidate)
        if fmt == API_DATA and data_file is None:
            data_file = candidate
        elif fmt == API_PROJECT and project_file is None:
            project_file = candidate
    return data_file, project_file
