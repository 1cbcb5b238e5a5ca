"""DOCX building and parsing helpers using python-docx.

Functions:
- ``build_docx(blocks, title)``: write a block model (see
  ``markdown_blocks``) to DOCX bytes.
- ``extract_docx_blocks(source)``: returns a list of paragraph blocks with
  heading levels when available.
- ``extract_docx_tables(source)``: returns table cell text, row by row.

Block schema returned by ``extract_docx_blocks``:
- ``text``: paragraph text
- ``level``: int heading level if style indicates a heading, else None
- ``style``: paragraph style name
"""

from __future__ import annotations

import io
import os
from typing import IO, Any, Dict, List, Optional, Union

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor

from contractdesk.config import Config
from contractdesk.utils.markdown_blocks import (
    Block,
    Heading,
    ListBlock,
    Paragraph,
    Rule,
    Table,
)
from contractdesk.utils.text import Run

HEADING_SIZES = {1: 18, 2: 16, 3: 14}

Source = Union[str, os.PathLike, bytes, IO[bytes]]


def _apply_base_styles(doc, cfg: Config) -> None:
    normal = doc.styles["Normal"]
    normal.font.name = cfg.DOCX_FONT
    normal.font.size = Pt(cfg.DOCX_FONT_SIZE)
    # East Asian font slot, otherwise Word falls back to its theme font
    rpr = normal.element.get_or_add_rPr()
    fonts = rpr.find(qn("w:rFonts"))
    if fonts is None:
        fonts = OxmlElement("w:rFonts")
        rpr.append(fonts)
    fonts.set(qn("w:eastAsia"), cfg.DOCX_FONT)

    for level in range(1, 7):
        try:
            style = doc.styles[f"Heading {level}"]
        except KeyError:
            continue
        style.font.name = cfg.DOCX_FONT
        style.font.size = Pt(HEADING_SIZES.get(level, 12))
        style.font.bold = True
        style.font.color.rgb = RGBColor(0, 0, 0)


def _add_runs(paragraph, runs: List[Run]) -> None:
    for r in runs:
        run = paragraph.add_run(r.text)
        run.bold = r.bold or None
        run.italic = r.italic or None


def _add_rule(doc) -> None:
    p = doc.add_paragraph()
    ppr = p._p.get_or_add_pPr()
    border = OxmlElement("w:pBdr")
    bottom = OxmlElement("w:bottom")
    bottom.set(qn("w:val"), "single")
    bottom.set(qn("w:sz"), "6")
    bottom.set(qn("w:space"), "1")
    bottom.set(qn("w:color"), "000000")
    border.append(bottom)
    ppr.append(border)


def _add_table(doc, block: Table) -> None:
    width = len(block.header)
    table = doc.add_table(rows=1 + len(block.rows), cols=width)
    table.style = "Table Grid"
    for col, cell_runs in enumerate(block.header):
        cell = table.rows[0].cells[col]
        para = cell.paragraphs[0]
        for r in cell_runs:
            run = para.add_run(r.text)
            run.bold = True
            run.italic = r.italic or None
    for row_idx, row in enumerate(block.rows, start=1):
        for col, cell_runs in enumerate(row[:width]):
            _add_runs(table.rows[row_idx].cells[col].paragraphs[0], cell_runs)


def build_docx(blocks: List[Block], title: Optional[str] = None, cfg: Config = Config) -> bytes:
    """Render a block model to DOCX bytes.

    Numbered lists are written as indented paragraphs with a literal
    ``N.`` prefix so each list restarts at its own first number.
    """
    doc = Document()
    _apply_base_styles(doc, cfg)
    if title:
        doc.core_properties.title = title

    for block in blocks:
        if isinstance(block, Heading):
            heading = doc.add_heading("", level=min(max(block.level, 1), 6))
            _add_runs(heading, block.runs)
        elif isinstance(block, Paragraph):
            para = doc.add_paragraph()
            para.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
            _add_runs(para, block.runs)
        elif isinstance(block, ListBlock):
            for idx, item in enumerate(block.items):
                if block.ordered:
                    para = doc.add_paragraph()
                    para.paragraph_format.left_indent = Inches(0.5)
                    para.paragraph_format.first_line_indent = Inches(-0.25)
                    para.add_run(f"{block.start + idx}. ")
                else:
                    para = doc.add_paragraph(style="List Bullet")
                _add_runs(para, item)
        elif isinstance(block, Table):
            _add_table(doc, block)
        elif isinstance(block, Rule):
            _add_rule(doc)

    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def _open(source: Source):
    if isinstance(source, bytes):
        return Document(io.BytesIO(source))
    if isinstance(source, (str, os.PathLike)):
        return Document(os.fspath(source))
    return Document(source)


def _heading_level(style_name: Optional[str]) -> Optional[int]:
    if not style_name:
        return None
    name = style_name.strip().lower()
    if name == "title":
        return 0
    if name.startswith("heading "):
        try:
            return int(name.split(" ", 1)[1])
        except ValueError:
            return 1
    return None


def extract_docx_blocks(source: Source) -> List[Dict[str, Any]]:
    """Extract non-empty paragraphs and heading levels from a DOCX file.

    ``source`` may be a path, raw bytes or a file-like object. Table
    contents are not included; see ``extract_docx_tables``.
    """
    doc = _open(source)
    blocks: List[Dict[str, Any]] = []
    for p in doc.paragraphs:
        text = p.text.strip()
        if not text:
            continue
        style_name = getattr(p.style, "name", None)
        blocks.append({"text": text, "level": _heading_level(style_name), "style": style_name})
    return blocks


def extract_docx_tables(source: Source) -> List[List[List[str]]]:
    doc = _open(source)
    return [[[cell.text for cell in row.cells] for row in table.rows] for table in doc.tables]
