"""Express-style HTTP route extraction.

The grammar is intentionally shallow: a conventional receiver (``app`` or
``router``), one of the HTTP verb helpers and a quoted literal path. Anything
built dynamically is missed, and matches inside comments are kept.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Set

from ..logging import get_logger
from ..scanner import iter_source_files, read_text

MAX_ROUTES = 20

ROUTE_PATTERN = re.compile(
    r"\b(app|router)\.(get|post|put|delete|patch|options|head)\s*\(\s*[\"'`]([^\"'`]+)[\"'`]"
)

_logger = get_logger("analyzers.routes")


def extract_routes(text: str) -> List[str]:
    """Return ``"<METHOD> <path>"`` entries for every route call in ``text``."""
    return [
        f"{match.group(2).upper()} {match.group(3)}" for match in ROUTE_PATTERN.finditer(text)
    ]


def collect_routes(root: Path | str, extra_exclude: Iterable[str] = ()) -> List[str]:
    """Scan the source files under ``root`` and return at most ``MAX_ROUTES`` sorted routes."""
    root_path = Path(root)
    routes: Set[str] = set()
    for relative in iter_source_files(root_path, extra_exclude):
        text = read_text(root_path / relative)
        if text is None:
            continue
        routes.update(extract_routes(text))
    ordered = sorted(routes)
    if len(ordered) > MAX_ROUTES:
        _logger.debug("Truncating %d routes to %d", len(ordered), MAX_ROUTES)
    return ordered[:MAX_ROUTES]


__all__ = ["MAX_ROUTES", "ROUTE_PATTERN", "collect_routes", "extract_routes"]
