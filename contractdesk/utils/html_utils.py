"""HTML emitters for the markdown block model.

Functions:
- ``markdown_to_html(text)``: HTML fragment for on-screen preview.
- ``to_word_html(text, title)``: standalone HTML document with inline
  styling that word processors open as a formatted document.
- ``looks_like_html(text)``: detect input that is already converted, so
  converting twice is a no-op.
"""

from __future__ import annotations

import html
import re
from typing import List

from contractdesk.config import Config
from contractdesk.utils.markdown_blocks import (
    Block,
    Heading,
    ListBlock,
    Paragraph,
    Rule,
    Table,
    parse_markdown,
)
from contractdesk.utils.text import Run

_HTML_START_RE = re.compile(r"^<(?:h[1-6]|p|ul|ol|li|table|hr|div|br)\b", re.IGNORECASE)

WORD_STYLES = """
    body {
      font-family: '%(font)s', serif;
      font-size: %(size)dpt;
      line-height: 1.6;
      margin: 1in;
      color: #000;
    }
    h1 { font-size: 18pt; font-weight: bold; margin-top: 12pt; margin-bottom: 6pt; }
    h2 { font-size: 16pt; font-weight: bold; margin-top: 12pt; margin-bottom: 6pt; }
    h3 { font-size: 14pt; font-weight: bold; margin-top: 12pt; margin-bottom: 6pt; }
    h4, h5, h6 { font-size: 12pt; font-weight: bold; margin-top: 12pt; margin-bottom: 6pt; }
    p { margin-bottom: 6pt; text-align: justify; }
    strong { font-weight: bold; }
    em { font-style: italic; }
    ul, ol { margin-left: 0.5in; margin-bottom: 6pt; }
    li { margin-bottom: 3pt; }
    ul li { list-style-type: disc; }
    ol li { list-style-type: decimal; }
    hr { border: none; border-top: 1pt solid #000; margin: 12pt 0; }
    table { border-collapse: collapse; width: 100%%; margin-bottom: 6pt; }
    th, td { border: 1pt solid #000; padding: 4pt; vertical-align: top; }
    th { font-weight: bold; }
"""


def looks_like_html(text: str) -> bool:
    s = (text or "").lstrip()
    low = s[:16].lower()
    if low.startswith("<!doctype") or low.startswith("<html"):
        return True
    return bool(_HTML_START_RE.match(s))


def runs_to_html(runs: List[Run]) -> str:
    parts: List[str] = []
    for run in runs:
        chunk = html.escape(run.text, quote=False)
        if run.italic:
            chunk = f"<em>{chunk}</em>"
        if run.bold:
            chunk = f"<strong>{chunk}</strong>"
        parts.append(chunk)
    return "".join(parts)


def block_to_html(block: Block) -> str:
    if isinstance(block, Heading):
        return f"<h{block.level}>{runs_to_html(block.runs)}</h{block.level}>"
    if isinstance(block, Paragraph):
        return f"<p>{runs_to_html(block.runs)}</p>"
    if isinstance(block, Rule):
        return "<hr>"
    if isinstance(block, ListBlock):
        if block.ordered:
            tag = "ol"
            open_tag = "<ol>" if block.start == 1 else f'<ol start="{block.start}">'
        else:
            tag = "ul"
            open_tag = "<ul>"
        items = "\n".join(f"<li>{runs_to_html(item)}</li>" for item in block.items)
        return f"{open_tag}\n{items}\n</{tag}>"
    if isinstance(block, Table):
        head = "\n".join(f"<th>{runs_to_html(c)}</th>" for c in block.header)
        out = ["<table>", "<thead>", "<tr>", head, "</tr>", "</thead>", "<tbody>"]
        for row in block.rows:
            out.append("<tr>")
            out.append("\n".join(f"<td>{runs_to_html(c)}</td>" for c in row))
            out.append("</tr>")
        out.extend(["</tbody>", "</table>"])
        return "\n".join(out)
    return ""


def blocks_to_html(blocks: List[Block]) -> str:
    return "\n".join(block_to_html(b) for b in blocks)


def markdown_to_html(text: str) -> str:
    """Convert markdown-like text to an HTML fragment.

    Input that is already HTML is returned unchanged.
    """
    if looks_like_html(text):
        return text
    return blocks_to_html(parse_markdown(text))


def to_word_html(text: str, title: str = "Contract", cfg: Config = Config) -> str:
    """Wrap converted text in a Word-compatible HTML document."""
    stripped = (text or "").lstrip()[:16].lower()
    if stripped.startswith("<!doctype") or stripped.startswith("<html"):
        return text
    body = markdown_to_html(text)
    styles = WORD_STYLES % {"font": cfg.DOCX_FONT, "size": cfg.DOCX_FONT_SIZE}
    return (
        "<!DOCTYPE html>\n"
        '<html xmlns:o="urn:schemas-microsoft-com:office:office" '
        'xmlns:w="urn:schemas-microsoft-com:office:word" '
        'xmlns="http://www.w3.org/TR/REC-html40">\n'
        "<head>\n"
        '  <meta charset="utf-8">\n'
        '  <meta name="ProgId" content="Word.Document">\n'
        f"  <title>{html.escape(title)}</title>\n"
        f"  <style>{styles}  </style>\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )
