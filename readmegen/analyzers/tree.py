"""Depth-bounded directory listing."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from ..models import MAX_TREE_DEPTH, MIN_TREE_DEPTH
from ..scanner import TREE_EXCLUDE, scan_paths

CONNECTOR = "└─ "
INDENT = "  "


def truncate_paths(paths: Iterable[str], depth: int) -> List[str]:
    """Keep the first ``depth`` segments of each path, then dedupe and sort."""
    truncated = set()
    for path in paths:
        segments = path.replace("\\", "/").split("/")
        joined = "/".join(segments[:depth])
        if joined:
            truncated.add(joined)
    return sorted(truncated)


def render_tree(paths: Sequence[str]) -> str:
    """Render each path segment on its own line, indented by its position.

    Every path is drawn from its first segment, so a directory that is also an
    ancestor of later entries shows up once as its own entry and again above
    each of its children.
    """
    lines: List[str] = []
    for path in paths:
        for index, name in enumerate(path.split("/")):
            if index == 0:
                lines.append(name)
            else:
                lines.append(f"{INDENT * index}{CONNECTOR}{name}")
    return "\n".join(lines)


def build_tree(root: Path | str, depth: int = 2, extra_exclude: Iterable[str] = ()) -> str:
    """Return the rendered listing of ``root`` down to ``depth`` levels."""
    if not MIN_TREE_DEPTH <= depth <= MAX_TREE_DEPTH:
        raise ValueError(f"depth must be between {MIN_TREE_DEPTH} and {MAX_TREE_DEPTH}")
    entries = scan_paths(root, ("**/*",), (*TREE_EXCLUDE, *extra_exclude), include_dirs=True)
    return render_tree(truncate_paths(entries, depth))


__all__ = ["build_tree", "render_tree", "truncate_paths"]
