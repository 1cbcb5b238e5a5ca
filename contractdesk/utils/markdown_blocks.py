"""Line-oriented markdown parser producing a small block model.

Each line is classified once (blank, heading, rule, bullet item, numbered
item, table row, table separator, paragraph); inline emphasis is then
tokenized into runs. Consecutive list items of the same kind form one
list block, and a header row followed immediately by a separator row
starts a table block that absorbs the table rows after it.

Block types:
- ``Heading(level, runs)``
- ``Paragraph(runs)``
- ``ListBlock(ordered, items, start)``
- ``Table(header, rows)``
- ``Rule()``

Malformed input never raises: anything that does not fit a block shape
becomes a paragraph with its markers left as literal text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from contractdesk.utils.text import Run, plain_text, tokenize_inline

BLANK = "blank"
HEADING = "heading"
RULE = "rule"
BULLET = "bullet"
NUMBERED = "numbered"
TABLE_ROW = "table_row"
TABLE_SEPARATOR = "table_separator"
PARAGRAPH = "paragraph"

_HEADING_RE = re.compile(r"^(#{1,6})\s+(\S.*)$")
_RULE_RE = re.compile(r"^\s{0,3}(?:-{3,}|\*{3,})\s*$")
_BULLET_RE = re.compile(r"^\s*[-*+]\s+(\S.*)$")
_NUMBERED_RE = re.compile(r"^\s*(\d+)[.)]\s+(\S.*)$")
_SEPARATOR_CELL_RE = re.compile(r"^:?-+:?$")


@dataclass
class Heading:
    level: int
    runs: List[Run]


@dataclass
class Paragraph:
    runs: List[Run]


@dataclass
class ListBlock:
    ordered: bool
    items: List[List[Run]] = field(default_factory=list)
    start: int = 1


@dataclass
class Table:
    header: List[List[Run]]
    rows: List[List[List[Run]]] = field(default_factory=list)


@dataclass
class Rule:
    pass


Block = Union[Heading, Paragraph, ListBlock, Table, Rule]


def split_row(line: str) -> List[str]:
    """Split a pipe-table row into stripped cell strings."""
    s = line.strip()
    if s.startswith("|"):
        s = s[1:]
    if s.endswith("|"):
        s = s[:-1]
    return [c.strip() for c in s.split("|")]


def _is_separator(line: str) -> bool:
    s = line.strip()
    if "|" not in s:
        return False
    cells = split_row(s)
    return bool(cells) and all(_SEPARATOR_CELL_RE.match(c) for c in cells)


def classify_line(line: str) -> str:
    s = (line or "").rstrip()
    if not s.strip():
        return BLANK
    if _HEADING_RE.match(s):
        return HEADING
    if _RULE_RE.match(s):
        return RULE
    if _is_separator(s):
        return TABLE_SEPARATOR
    stripped = s.strip()
    if stripped.startswith("|") and stripped.count("|") >= 2:
        return TABLE_ROW
    if _BULLET_RE.match(s):
        return BULLET
    if _NUMBERED_RE.match(s):
        return NUMBERED
    return PARAGRAPH


def _list_item(line: str, kind: str) -> Tuple[Optional[int], str]:
    if kind == NUMBERED:
        m = _NUMBERED_RE.match(line)
        return int(m.group(1)), m.group(2).strip()
    m = _BULLET_RE.match(line)
    return None, m.group(1).strip()


def _fit(cells: List[str], width: int) -> List[str]:
    if len(cells) < width:
        return cells + [""] * (width - len(cells))
    return cells[:width]


def parse_markdown(text: str) -> List[Block]:
    lines = (text or "").replace("\r\n", "\n").replace("\r", "\n").split("\n")
    kinds = [classify_line(ln) for ln in lines]
    blocks: List[Block] = []

    i = 0
    while i < len(lines):
        line = lines[i].rstrip()
        kind = kinds[i]

        if kind == BLANK:
            i += 1
            continue

        if kind == TABLE_ROW and i + 1 < len(lines) and kinds[i + 1] == TABLE_SEPARATOR:
            header = split_row(line)
            width = len(header)
            body: List[List[List[Run]]] = []
            i += 2
            while i < len(lines) and kinds[i] == TABLE_ROW:
                cells = _fit(split_row(lines[i]), width)
                body.append([tokenize_inline(c) for c in cells])
                i += 1
            blocks.append(Table(header=[tokenize_inline(c) for c in header], rows=body))
            continue

        if kind in (BULLET, NUMBERED):
            ordered = kind == NUMBERED
            number, _ = _list_item(line, kind)
            block = ListBlock(ordered=ordered, start=number or 1)
            while i < len(lines) and kinds[i] == kind:
                _, content = _list_item(lines[i].rstrip(), kind)
                block.items.append(tokenize_inline(content))
                i += 1
            blocks.append(block)
            continue

        if kind == HEADING:
            m = _HEADING_RE.match(line)
            blocks.append(Heading(level=len(m.group(1)), runs=tokenize_inline(m.group(2).strip())))
        elif kind == RULE:
            blocks.append(Rule())
        else:
            # stray table rows and separators without a header land here too
            blocks.append(Paragraph(runs=tokenize_inline(line.strip())))
        i += 1

    return blocks


def block_text(block: Block) -> str:
    """Plain text of a block, one line per paragraph, item or table row."""
    if isinstance(block, (Heading, Paragraph)):
        return plain_text(block.runs)
    if isinstance(block, ListBlock):
        return "\n".join(plain_text(item) for item in block.items)
    if isinstance(block, Table):
        rows = [block.header] + block.rows
        return "\n".join(" ".join(plain_text(c) for c in row) for row in rows)
    return ""
