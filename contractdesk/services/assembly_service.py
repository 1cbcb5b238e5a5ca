"""Assemble drafts from templates and export them as text, HTML or DOCX.

Pipeline per request:
    values -> resolve_variables -> render -> markdown text
           -> markdown_to_html / to_word_html | parse_markdown -> build_docx

The template identifier is checked before anything is rendered.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from contractdesk.config import Config
from contractdesk.services.catalog_service import Template, TemplateKey, get_template
from contractdesk.services.render_service import render
from contractdesk.services.resolver_service import resolve_variables
from contractdesk.utils.docx_utils import build_docx
from contractdesk.utils.html_utils import markdown_to_html, to_word_html
from contractdesk.utils.ids import new_id
from contractdesk.utils.markdown_blocks import parse_markdown

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("text", "html", "docx")

TemplateRef = Union[str, TemplateKey, Template]


@dataclass(frozen=True)
class RenderedDraft:
    id: str
    template: TemplateKey
    title: str
    text: str
    variables: Mapping[str, str]


class AssemblyService:
    def __init__(self, cfg: Config = Config):
        self.cfg = cfg

    def draft(
        self,
        template_id: TemplateRef,
        values: Optional[Mapping[str, Any]] = None,
        today: Optional[dt.date] = None,
    ) -> RenderedDraft:
        tpl = get_template(template_id)
        variables = resolve_variables(tpl, values, today=today, cfg=self.cfg)
        text = render(tpl, variables, cfg=self.cfg)
        draft = RenderedDraft(
            id=new_id("draft"),
            template=tpl.key,
            title=tpl.name,
            text=text,
            variables=variables,
        )
        logger.info(f"[assembly] rendered {tpl.key.value} as {draft.id} ({len(text)} chars)")
        return draft

    def render_text(
        self,
        template_id: TemplateRef,
        values: Optional[Mapping[str, Any]] = None,
        today: Optional[dt.date] = None,
    ) -> str:
        return self.draft(template_id, values, today=today).text

    def render_html(
        self,
        template_id: TemplateRef,
        values: Optional[Mapping[str, Any]] = None,
        today: Optional[dt.date] = None,
    ) -> str:
        return markdown_to_html(self.render_text(template_id, values, today=today))

    def render_word_html(
        self,
        template_id: TemplateRef,
        values: Optional[Mapping[str, Any]] = None,
        today: Optional[dt.date] = None,
    ) -> str:
        draft = self.draft(template_id, values, today=today)
        return to_word_html(draft.text, title=draft.title, cfg=self.cfg)

    def render_docx(
        self,
        template_id: TemplateRef,
        values: Optional[Mapping[str, Any]] = None,
        today: Optional[dt.date] = None,
    ) -> bytes:
        draft = self.draft(template_id, values, today=today)
        return build_docx(parse_markdown(draft.text), title=draft.title, cfg=self.cfg)

    def export(
        self,
        template_id: TemplateRef,
        values: Optional[Mapping[str, Any]] = None,
        fmt: str = "text",
        today: Optional[dt.date] = None,
    ) -> Union[str, bytes]:
        """Render and convert in one step.

        ``fmt`` is one of ``text``, ``html`` (Word-compatible document) or
        ``docx`` (bytes). Raises ValueError for any other format.
        """
        fmt = (fmt or "").lower()
        if fmt not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported format '{fmt}'. Choose one of: {', '.join(EXPORT_FORMATS)}")
        # fail on unknown template before picking a renderer
        tpl = get_template(template_id)
        if fmt == "html":
            return self.render_word_html(tpl, values, today=today)
        if fmt == "docx":
            return self.render_docx(tpl, values, today=today)
        return self.render_text(tpl, values, today=today)
