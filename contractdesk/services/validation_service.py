"""Submission checks run before a draft is rendered.

Mirrors the drafting form: a few business fields are required per
template and email fields must look like addresses. The resolver never
consults this; callers opt in (the CLI does with ``--strict``).
"""

from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Optional, Union

from contractdesk.services.catalog_service import EMAIL, Template, TemplateKey, get_template

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_MESSAGES: Dict[str, str] = {
    "date": "Agreement date is required",
    "artist": "Artist name is required",
    "producer": "Producer/Manager name is required",
    "compositionTitle": "Composition/Song title is required",
    "advance": "Advance amount is required",
    "royaltyRate": "Royalty rate is required",
    "commissionRate": "Commission rate is required",
    "termYears": "Term duration is required",
}


def _text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def validate_submission(
    template_id: Union[str, TemplateKey, Template],
    values: Optional[Mapping[str, Any]] = None,
) -> Dict[str, str]:
    """Return ``{field: message}`` for each problem; empty when valid.

    Raises UnknownTemplateError for an unknown template identifier.
    """
    tpl = get_template(template_id)
    values = values or {}
    errors: Dict[str, str] = {}

    for field in tpl.fields:
        text = _text(values.get(field.name))
        if field.required and not text:
            errors[field.name] = REQUIRED_MESSAGES.get(field.name, f"{field.label} is required")
        elif field.kind == EMAIL and text and not _EMAIL_RE.match(text):
            errors[field.name] = "Please enter a valid email address"
    return errors
