"""Whitespace normalisation for rendered markdown."""

from __future__ import annotations

import re
from typing import List, Optional

_FENCE = re.compile(r"^(`{3,}|~{3,})")


class MarkdownLinter:
    """Tidies blank lines around template output without touching code fences.

    Outside fences: trailing whitespace is stripped, leading blank lines are
    dropped, runs of blank lines collapse to one and every heading is preceded
    by a blank line. Inside fences only trailing whitespace is stripped. A
    fence closes on a marker of the same character at least as long as the
    opener, so a ```` ``` ```` inside a ``~~~`` block is plain content.
    """

    def lint(self, markdown: str) -> str:
        normalized = markdown.replace("\r\n", "\n").replace("\r", "\n")
        cleaned: List[str] = []
        fence: Optional[str] = None

        for raw in normalized.split("\n"):
            line = raw.rstrip()
            marker = _FENCE.match(line)

            if fence is not None:
                cleaned.append(line)
                if marker and marker.group(1)[0] == fence[0] and len(marker.group(1)) >= len(fence):
                    fence = None
                continue

            if marker:
                fence = marker.group(1)
                cleaned.append(line)
                continue

            if not line:
                if cleaned and cleaned[-1] != "":
                    cleaned.append("")
                continue

            if line.startswith("#") and cleaned and cleaned[-1] != "":
                cleaned.append("")
            cleaned.append(line)

        while cleaned and cleaned[-1] == "":
            cleaned.pop()

        return "\n".join(cleaned) + "\n"


__all__ = ["MarkdownLinter"]
