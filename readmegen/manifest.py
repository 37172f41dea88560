"""package.json loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from .models import ManifestFacts
from .scanner import read_json

MANIFEST_FILENAME = "package.json"


def manifest_path(directory: Path | str) -> Path:
    return Path(directory) / MANIFEST_FILENAME


def load_manifest(directory: Path | str) -> Optional[ManifestFacts]:
    """Return the manifest facts for ``directory``, or ``None`` if absent or unparsable."""
    data = read_json(manifest_path(directory))
    if not isinstance(data, dict):
        return None
    return ManifestFacts(
        name=_as_str(data.get("name")),
        version=_as_str(data.get("version")),
        description=_as_str(data.get("description")),
        scripts=_as_str_map(data.get("scripts")),
        dependencies=_as_str_map(data.get("dependencies")),
        dev_dependencies=_as_str_map(data.get("devDependencies")),
        license=_as_str(data.get("license")),
        engines=_as_str_map(data.get("engines")),
    )


def _as_str(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)


def _as_str_map(value: Any) -> Optional[Dict[str, str]]:
    if not isinstance(value, dict):
        return None
    return {str(key): str(item) for key, item in value.items()}


__all__ = ["MANIFEST_FILENAME", "load_manifest", "manifest_path"]
