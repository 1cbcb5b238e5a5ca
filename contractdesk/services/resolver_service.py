"""Variable resolution: merge user values with per-template defaults.

``resolve_variables(template, values)`` returns a read-only mapping that
covers every field of the template. The user value wins; missing, blank,
``None`` or nested (dict/list) values fall back to the field default, and
fields without a default fall back to ``Config.PLACEHOLDER_TEXT``. Keys the
template does not declare are ignored.

Kind-specific normalisation:
- ``percent``: purely numeric input gets a ``%`` suffix (``"20"`` -> ``"20%"``)
- ``flag``: normalised to ``yes`` / ``no``
- ``date``: with no value and no default, today's date as ``Month D, YYYY``
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from contractdesk.config import Config
from contractdesk.services.catalog_service import (
    DATE,
    FLAG,
    PERCENT,
    FieldDef,
    Template,
    TemplateKey,
    get_template,
)

logger = logging.getLogger(__name__)

_NUMERIC_RE = re.compile(r"^\d+(?:\.\d+)?$")
_TRUTHY = {"yes", "y", "true", "1", "on", "include", "included"}


def format_long_date(day: dt.date) -> str:
    """Format a date as ``January 5, 2025``."""
    return f"{day.strftime('%B')} {day.day}, {day.year}"


def _as_text(value: Any) -> Optional[str]:
    """Stringify a scalar value; None for missing, blank or nested values."""
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return None
    if isinstance(value, bool):
        text = "yes" if value else "no"
    else:
        text = str(value)
    text = text.strip()
    return text or None


def _normalise(field: FieldDef, text: str) -> str:
    if field.kind == PERCENT and _NUMERIC_RE.match(text):
        return f"{text}%"
    if field.kind == FLAG:
        return "yes" if text.lower() in _TRUTHY else "no"
    return text


def resolve_value(
    field: FieldDef,
    raw: Any,
    today: Optional[dt.date] = None,
    cfg: Config = Config,
) -> str:
    text = _as_text(raw)
    if text is None:
        text = field.default
    if text is None and field.kind == DATE:
        text = format_long_date(today or dt.date.today())
    if text is None:
        return cfg.PLACEHOLDER_TEXT
    return _normalise(field, text)


def resolve_variables(
    template: Union[str, TemplateKey, Template],
    values: Optional[Mapping[str, Any]] = None,
    today: Optional[dt.date] = None,
    cfg: Config = Config,
) -> Mapping[str, str]:
    """Build the complete, read-only variable map for a template.

    Raises UnknownTemplateError for an unknown template identifier; never
    raises for missing values.
    """
    tpl = get_template(template)
    values = values or {}

    unknown = [k for k in values if tpl.field(k) is None]
    if unknown:
        logger.debug("Ignoring %d unknown keys for %s: %s", len(unknown), tpl.key.value, sorted(map(str, unknown)))

    resolved: Dict[str, str] = {}
    for field in tpl.fields:
        resolved[field.name] = resolve_value(field, values.get(field.name), today=today, cfg=cfg)
    return MappingProxyType(resolved)
