"""Filesystem access and glob-filtered repository walking.

Reads are best-effort: every helper that touches file contents returns ``None``
(or ``False``) instead of raising, so scanners can treat an unreadable file as
"no data" without special casing.
"""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

from .logging import get_logger

SOURCE_INCLUDE: tuple[str, ...] = ("**/*.js", "**/*.ts", "**/*.mjs", "**/*.cjs")
SOURCE_EXCLUDE: tuple[str, ...] = (
    "node_modules/**",
    "dist/**",
    ".git/**",
    "**/*.d.ts",
    "**/*.min.js",
    "**/*.map",
)
TREE_EXCLUDE: tuple[str, ...] = (
    "node_modules/**",
    "dist/**",
    ".git/**",
    "coverage/**",
    "**/*.map",
)

_logger = get_logger("scanner")


def _compile_glob(pattern: str) -> re.Pattern[str]:
    """Translate a ``**``-aware glob into an anchored regular expression."""
    parts: List[str] = []
    index = 0
    length = len(pattern)
    while index < length:
        if pattern.startswith("**/", index):
            parts.append("(?:.*/)?")
            index += 3
        elif pattern.startswith("/**", index) and index + 3 == length:
            # ``dir/**`` also covers ``dir`` itself so the walker can prune it.
            parts.append("(?:/.*)?")
            index += 3
        elif pattern.startswith("**", index):
            parts.append(".*")
            index += 2
        elif pattern[index] == "*":
            parts.append("[^/]*")
            index += 1
        elif pattern[index] == "?":
            parts.append("[^/]")
            index += 1
        else:
            parts.append(re.escape(pattern[index]))
            index += 1
    return re.compile("".join(parts) + r"\Z")


@dataclass
class GlobSet:
    """Inclusion and exclusion patterns evaluated against POSIX relative paths."""

    include: Sequence[str] = ("**/*",)
    exclude: Sequence[str] = ()
    _include_re: List[re.Pattern[str]] = field(init=False, repr=False)
    _exclude_re: List[re.Pattern[str]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._include_re = [_compile_glob(pattern) for pattern in self.include]
        self._exclude_re = [_compile_glob(pattern) for pattern in self.exclude]

    def excludes(self, rel_path: str) -> bool:
        return any(pattern.match(rel_path) for pattern in self._exclude_re)

    def includes(self, rel_path: str) -> bool:
        return any(pattern.match(rel_path) for pattern in self._include_re)

    def matches(self, rel_path: str) -> bool:
        return self.includes(rel_path) and not self.excludes(rel_path)


def scan_paths(
    root: Path | str,
    include: Sequence[str] = ("**/*",),
    exclude: Sequence[str] = (),
    *,
    include_dirs: bool = False,
) -> List[str]:
    """Return sorted relative paths under ``root`` selected by the glob patterns.

    Hidden entries and symbolic links are skipped; excluded directories are
    pruned.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        return []

    globs = GlobSet(include=include, exclude=exclude)
    results: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root_path, followlinks=False):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root_path).as_posix() if current_dir != root_path else ""

        kept_dirs = []
        for name in dirnames:
            if name.startswith(".") or os.path.islink(os.path.join(dirpath, name)):
                continue
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            if globs.excludes(rel_path):
                continue
            kept_dirs.append(name)
            if include_dirs and globs.includes(rel_path):
                results.append(rel_path)
        dirnames[:] = kept_dirs

        for filename in filenames:
            if filename.startswith(".") or os.path.islink(os.path.join(dirpath, filename)):
                continue
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if globs.matches(rel_path):
                results.append(rel_path)

    return sorted(results)


def iter_source_files(root: Path | str, extra_exclude: Iterable[str] = ()) -> List[str]:
    """Return the source files scanned by the route and environment extractors."""
    return scan_paths(root, SOURCE_INCLUDE, (*SOURCE_EXCLUDE, *extra_exclude))


def file_exists(path: Path | str) -> bool:
    try:
        return Path(path).exists()
    except OSError:
        return False


def read_text(path: Path | str) -> Optional[str]:
    """Return UTF-8 file contents, or ``None`` when the file cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _logger.debug("Skipping unreadable file %s: %s", path, exc)
        return None


def read_json(path: Path | str) -> Optional[Any]:
    """Return parsed JSON from ``path``, or ``None`` when absent or invalid."""
    text = read_text(path)
    if text is None:
        return None
    try:
        return json.loads(text)
    except ValueError as exc:
        _logger.debug("Ignoring unparsable JSON in %s: %s", path, exc)
        return None


def write_text(path: Path | str, content: str) -> int:
    """Replace ``path`` with ``content``, creating parents; returns bytes written."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = content.encode("utf-8")
    target.write_bytes(payload)
    return len(payload)


__all__ = [
    "GlobSet",
    "SOURCE_EXCLUDE",
    "SOURCE_INCLUDE",
    "TREE_EXCLUDE",
    "file_exists",
    "iter_source_files",
    "read_json",
    "read_text",
    "scan_paths",
    "write_text",
]
