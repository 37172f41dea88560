"""Environment variable key extraction."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Set

from ..scanner import file_exists, iter_source_files, read_text

ENV_SAMPLE_FILENAME = ".env.example"

SAMPLE_LINE_PATTERN = re.compile(r"^([A-Z0-9_]+)=")
ENV_ACCESS_PATTERN = re.compile(
    r"process\.env(?:\.([A-Z0-9_]+)|\[\s*[\"'`]([A-Z0-9_]+)[\"'`]\s*\])"
)


def parse_env_sample(text: str) -> List[str]:
    """Return the keys declared by ``KEY=`` lines of a sample environment file."""
    keys: List[str] = []
    for line in text.splitlines():
        match = SAMPLE_LINE_PATTERN.match(line)
        if match:
            keys.append(match.group(1))
    return keys


def extract_env_keys(text: str) -> List[str]:
    """Return every key read through ``process.env`` in ``text``."""
    return [dotted or bracketed for dotted, bracketed in ENV_ACCESS_PATTERN.findall(text)]


def collect_env_keys(root: Path | str, extra_exclude: Iterable[str] = ()) -> List[str]:
    """Merge keys from ``.env.example`` and source files into one sorted list."""
    root_path = Path(root)
    keys: Set[str] = set()

    sample_path = root_path / ENV_SAMPLE_FILENAME
    if file_exists(sample_path):
        sample = read_text(sample_path)
        if sample is not None:
            keys.update(parse_env_sample(sample))

    for relative in iter_source_files(root_path, extra_exclude):
        text = read_text(root_path / relative)
        if text is None:
            continue
        keys.update(extract_env_keys(text))

    return sorted(keys)


__all__ = [
    "ENV_SAMPLE_FILENAME",
    "collect_env_keys",
    "extract_env_keys",
    "parse_env_sample",
]
