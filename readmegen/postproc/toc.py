"""Table-of-contents anchors for generated README headings."""

from __future__ import annotations

import re
from typing import Dict, List, Sequence


def slugify(title: str) -> str:
    """Return the GitHub anchor for ``title``; CJK characters are preserved."""
    slug = title.strip().lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    return re.sub(r"\s", "-", slug)


def build_toc_entries(titles: Sequence[str]) -> List[Dict[str, str]]:
    """Return ``{"title", "anchor"}`` pairs, suffixing repeated anchors like GitHub."""
    seen: Dict[str, int] = {}
    entries: List[Dict[str, str]] = []
    for title in titles:
        anchor = slugify(title)
        count = seen.get(anchor, 0)
        seen[anchor] = count + 1
        if count:
            anchor = f"{anchor}-{count}"
        entries.append({"title": title, "anchor": anchor})
    return entries


__all__ = ["build_toc_entries", "slugify"]
