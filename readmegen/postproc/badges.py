"""Shields.io badge line for generated README files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote

from ..models import ManifestFacts
from ..scanner import file_exists

LICENSE_FILENAMES = ("LICENSE", "LICENSE.md", "LICENSE.txt")
TYPESCRIPT_CONFIG = "tsconfig.json"
TYPESCRIPT_BADGE = "![TypeScript](https://img.shields.io/badge/TypeScript-ready-informational)"

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _encode(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


@dataclass(frozen=True)
class BadgeFacts:
    """Inputs for the badge line; ``None``/``False`` omits the matching badge."""

    license: Optional[str] = None
    node: Optional[str] = None
    typescript: bool = False

    @classmethod
    def from_directory(cls, directory: Path | str, manifest: ManifestFacts | None) -> "BadgeFacts":
        root = Path(directory)
        license_label = None
        if any(file_exists(root / name) for name in LICENSE_FILENAMES):
            license_label = (manifest.license if manifest else None) or "License"
        return cls(
            license=license_label,
            node=manifest.node_engine if manifest else None,
            typescript=file_exists(root / TYPESCRIPT_CONFIG),
        )


def build_badges(facts: BadgeFacts) -> str:
    """Return the space-joined license, runtime and typing badges."""
    parts: List[str] = []
    if facts.license:
        parts.append(
            f"[![License](https://img.shields.io/badge/License-{_encode(facts.license)}-blue.svg)](./LICENSE)"
        )
    if facts.node:
        parts.append(f"![Node](https://img.shields.io/badge/node-{_encode(facts.node)}-brightgreen)")
    if facts.typescript:
        parts.append(TYPESCRIPT_BADGE)
    return " ".join(parts)


__all__ = ["BadgeFacts", "build_badges", "LICENSE_FILENAMES"]
