"""Read and rewrite the copied ``package.json``."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class ManifestError(ValueError):
    """Raised when the manifest cannot be read, parsed, or written."""


def read_manifest(path: str | Path) -> dict[str, Any]:
    """Load a JSON manifest that must contain a top-level object.

    Raises:
        ManifestError: If the file is missing, unreadable, not valid JSON, or
            its root is not an object.
    """
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"cannot read {file_path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"{file_path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(
            f"{file_path} must contain a JSON object, got {type(data).__name__}"
        )
    return data


def write_manifest(data: dict[str, Any], path: str | Path) -> Path:
    """Write *data* with 2-space indentation and a trailing newline."""
    file_path = Path(path)
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    try:
        file_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"cannot write {file_path}: {exc}") from exc
    return file_path


def set_manifest_name(path: str | Path, name: str) -> dict[str, Any]:
    """Overwrite the ``name`` field of the manifest at *path*.

    Key order of the rest of the document is preserved; a manifest without a
    ``name`` gets one appended.
    """
    data = read_manifest(path)
    data["name"] = name
    write_manifest(data, path)
    return data
