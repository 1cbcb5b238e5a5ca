"""Text utilities for inline emphasis and tag stripping.

Provides:
- ``Run``: a span of text with bold/italic flags.
- ``tokenize_inline(text)``: split a line into runs on ``**bold**``,
  ``*italic*`` and ``***bold italic***`` markers. Markers that are not
  closed, or that do not hug their content, stay in the text literally.
- ``plain_text(runs)``: concatenate run text.
- ``strip_tags(html)``: drop markup and unescape entities.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import List

_TAG_RE = re.compile(r"<[^>]+>")


@dataclass(frozen=True)
class Run:
    text: str
    bold: bool = False
    italic: bool = False

    @property
    def style(self) -> str:
        if self.bold and self.italic:
            return "bold_italic"
        if self.bold:
            return "bold"
        if self.italic:
            return "italic"
        return "plain"


def _is_lone_star(text: str, j: int) -> bool:
    before = text[j - 1] if j > 0 else ""
    after = text[j + 1] if j + 1 < len(text) else ""
    return before != "*" and after != "*"


def _find_closing(text: str, start: int, marker: str) -> int:
    """Index of the closing ``marker`` for content starting at ``start``, or -1.

    Content must be non-empty and must not begin or end with whitespace.
    """
    if start >= len(text) or text[start].isspace():
        return -1
    j = text.find(marker, start)
    while j != -1:
        if j > start and not text[j - 1].isspace():
            if marker != "*" or _is_lone_star(text, j):
                return j
        j = text.find(marker, j + 1)
    return -1


def _scan(text: str, bold: bool, italic: bool, out: List[Run]) -> None:
    buf: List[str] = []

    def flush() -> None:
        if buf:
            out.append(Run("".join(buf), bold=bold, italic=italic))
            buf.clear()

    i = 0
    n = len(text)
    while i < n:
        if text.startswith("***", i):
            end = _find_closing(text, i + 3, "***")
            if end != -1:
                flush()
                _scan(text[i + 3:end], True, True, out)
                i = end + 3
                continue
        if text.startswith("**", i):
            end = _find_closing(text, i + 2, "**")
            if end != -1:
                flush()
                _scan(text[i + 2:end], True, italic, out)
                i = end + 2
                continue
            buf.append("**")
            i += 2
            continue
        if text[i] == "*":
            end = _find_closing(text, i + 1, "*")
            if end != -1:
                flush()
                _scan(text[i + 1:end], bold, True, out)
                i = end + 1
                continue
        buf.append(text[i])
        i += 1
    flush()


def tokenize_inline(text: str) -> List[Run]:
    """Split ``text`` into styled runs, preserving order.

    Adjacent runs with the same style are merged, so
    ``"**bold** and *italic*"`` yields ``[bold("bold"), plain(" and "),
    italic("italic")]``. Never raises on unbalanced markers.
    """
    raw: List[Run] = []
    _scan(text or "", False, False, raw)

    merged: List[Run] = []
    for run in raw:
        if not run.text:
            continue
        if merged and merged[-1].style == run.style:
            prev = merged.pop()
            run = Run(prev.text + run.text, bold=run.bold, italic=run.italic)
        merged.append(run)
    return merged


def plain_text(runs: List[Run]) -> str:
    return "".join(r.text for r in runs)


def strip_tags(markup: str) -> str:
    """Remove tags from an HTML string and unescape entities."""
    return html.unescape(_TAG_RE.sub("", markup or ""))
