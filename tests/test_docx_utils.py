"""Tests for DOCX building and reading with python-docx."""
from __future__ import annotations

import io
from pathlib import Path

from docx import Document

from contractdesk.utils.docx_utils import build_docx, extract_docx_blocks, extract_docx_tables
from contractdesk.utils.markdown_blocks import parse_markdown

SAMPLE = """# PRODUCER AGREEMENT

Royalty of **3%** payable *quarterly*.

---

- Bullet one
- Bullet two

2. Second
3. Third

| Masters | Credit |
|---|---|
| "Song" | Produced by X |
"""


def _build() -> bytes:
    return build_docx(parse_markdown(SAMPLE), title="Producer Agreement")


class TestBuildDocx:
    def test_returns_docx_bytes(self) -> None:
        data = _build()
        assert isinstance(data, bytes)
        assert data[:2] == b"PK"

    def test_heading_and_paragraph_blocks(self) -> None:
        blocks = extract_docx_blocks(_build())
        assert blocks[0] == {"text": "PRODUCER AGREEMENT", "level": 1, "style": "Heading 1"}
        assert blocks[1]["text"] == "Royalty of 3% payable quarterly."
        assert blocks[1]["level"] is None

    def test_inline_runs_keep_emphasis(self) -> None:
        doc = Document(io.BytesIO(_build()))
        para = next(p for p in doc.paragraphs if p.text.startswith("Royalty"))
        styled = {r.text: (bool(r.bold), bool(r.italic)) for r in para.runs}
        assert styled["3%"] == (True, False)
        assert styled["quarterly"] == (False, True)

    def test_lists(self) -> None:
        blocks = extract_docx_blocks(_build())
        bullets = [b for b in blocks if b["style"] == "List Bullet"]
        assert [b["text"] for b in bullets] == ["Bullet one", "Bullet two"]
        texts = [b["text"] for b in blocks]
        assert "2. Second" in texts
        assert "3. Third" in texts

    def test_rule_is_bordered_empty_paragraph(self) -> None:
        doc = Document(io.BytesIO(_build()))
        ruled = [p for p in doc.paragraphs if "w:pBdr" in p._p.xml]
        assert len(ruled) == 1
        assert ruled[0].text == ""

    def test_table(self) -> None:
        tables = extract_docx_tables(_build())
        assert tables == [[["Masters", "Credit"], ['"Song"', "Produced by X"]]]
        doc = Document(io.BytesIO(_build()))
        assert doc.tables[0].style.name == "Table Grid"
        header_run = doc.tables[0].rows[0].cells[0].paragraphs[0].runs[0]
        assert header_run.bold

    def test_base_font_and_title(self) -> None:
        doc = Document(io.BytesIO(_build()))
        assert doc.styles["Normal"].font.name == "Times New Roman"
        assert doc.core_properties.title == "Producer Agreement"

    def test_empty_block_list(self) -> None:
        assert extract_docx_blocks(build_docx([])) == []


class TestExtractDocx:
    def test_reads_from_path(self, tmp_path: Path) -> None:
        path = tmp_path / "out.docx"
        path.write_bytes(_build())
        blocks = extract_docx_blocks(str(path))
        assert blocks[0]["level"] == 1

    def test_reads_from_pathlib_path(self, tmp_path: Path) -> None:
        path = tmp_path / "out.docx"
        path.write_bytes(_build())
        assert extract_docx_blocks(path)[0]["level"] == 1

    def test_reads_from_file_object(self) -> None:
        blocks = extract_docx_blocks(io.BytesIO(build_docx(parse_markdown("# T\n\nbody"))))
        assert [b["text"] for b in blocks] == ["T", "body"]
        assert blocks[0]["level"] == 1
