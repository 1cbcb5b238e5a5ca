"""Tests for the HTML and Word-HTML emitters."""
from __future__ import annotations

import re

import pytest

from contractdesk.services.assembly_service import AssemblyService
from contractdesk.services.catalog_service import TemplateKey
from contractdesk.utils.html_utils import looks_like_html, markdown_to_html, to_word_html
from contractdesk.utils.text import strip_tags

SAMPLE = """# AGREEMENT

Between **Manager** and *Artist* & friends <ltd>.

---

## 1. TERMS

- First point
- Second **point**

3. Third
4. Fourth

| Name | Share |
|---|---|
| Writer A | 50% |
"""


_RULE_LINE = re.compile(r"^\s*(?:-{3,}|\*{3,})\s*$")
_TABLE_SEPARATOR_LINE = re.compile(r"^\s*\|[\s:|-]*-[\s:|-]*$")
_HEADING_MARK = re.compile(r"^#{1,6}\s+")
_LIST_MARK = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+")
_EMPHASIS = re.compile(r"(\*{1,3})(?=\S)(.+?)(?<=\S)\1")


def _words(text: str) -> list:
    return text.split()


def _without_markup(text: str) -> str:
    """Source text minus markdown syntax: heading hashes, list markers,
    table pipes and separator rows, rule lines and paired emphasis stars."""
    lines = []
    for line in text.splitlines():
        if _RULE_LINE.match(line) or _TABLE_SEPARATOR_LINE.match(line):
            continue
        if _HEADING_MARK.match(line):
            line = _HEADING_MARK.sub("", line)
        elif line.strip().startswith("|"):
            line = " ".join(line.strip().strip("|").split("|"))
        else:
            line = _LIST_MARK.sub("", line)
        previous = None
        while previous != line:
            previous, line = line, _EMPHASIS.sub(r"\2", line)
        lines.append(line)
    return "\n".join(lines)


class TestMarkdownToHtml:
    def test_heading(self) -> None:
        assert markdown_to_html("# Title") == "<h1>Title</h1>"

    def test_inline_emphasis_and_escaping(self) -> None:
        html = markdown_to_html("**b** & <x>")
        assert html == "<p><strong>b</strong> &amp; &lt;x&gt;</p>"

    def test_bold_italic_nesting(self) -> None:
        assert markdown_to_html("***x***") == "<p><strong><em>x</em></strong></p>"

    def test_lists(self) -> None:
        html = markdown_to_html("- a\n- b")
        assert html == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>"

    def test_ordered_list_start(self) -> None:
        assert '<ol start="3">' in markdown_to_html("3. a\n4. b")
        assert markdown_to_html("1. a").startswith("<ol>\n")

    def test_rule_and_table(self) -> None:
        html = markdown_to_html("---\n\n| A | B |\n|---|---|\n| 1 | 2 |")
        assert html.startswith("<hr>")
        assert "<th>A</th>" in html
        assert "<td>2</td>" in html

    def test_strip_tags_recovers_plain_text(self) -> None:
        html = markdown_to_html(SAMPLE)
        assert _words(strip_tags(html)) == _words(_without_markup(SAMPLE))

    @pytest.mark.parametrize("key", [k.value for k in TemplateKey])
    def test_strip_tags_recovers_rendered_contract(self, key: str, producer_values, fixed_today) -> None:
        text = AssemblyService().render_text(key, producer_values, today=fixed_today)
        html = markdown_to_html(text)
        assert _words(strip_tags(html)) == _words(_without_markup(text))

    def test_converting_html_again_is_noop(self) -> None:
        html = markdown_to_html(SAMPLE)
        assert markdown_to_html(html) == html

    def test_empty_input(self) -> None:
        assert markdown_to_html("") == ""


class TestWordHtml:
    def test_document_wrapper(self) -> None:
        doc = to_word_html("# Title\n\nBody", title="Deal & Co")
        assert doc.startswith("<!DOCTYPE html>")
        assert 'content="Word.Document"' in doc
        assert "Times New Roman" in doc
        assert "text-align: justify" in doc
        assert "<title>Deal &amp; Co</title>" in doc
        assert "<h1>Title</h1>" in doc

    def test_idempotent(self) -> None:
        once = to_word_html(SAMPLE)
        assert to_word_html(once) == once


class TestLooksLikeHtml:
    def test_detection(self) -> None:
        assert looks_like_html("<p>x</p>")
        assert looks_like_html("  <!DOCTYPE html><html></html>")
        assert looks_like_html("<h2>x</h2>")
        assert not looks_like_html("# heading")
        assert not looks_like_html("<not-a-block>")
        assert not looks_like_html("")
