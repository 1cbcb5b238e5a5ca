"""Render templates by substituting ``${name}`` placeholders.

Substitution is a single regex pass: each placeholder is replaced by its
value verbatim, so placeholder-like text inside a value is never expanded
again. A placeholder with no entry in the map renders as the visible
placeholder text.
"""

from __future__ import annotations

import logging
import re
from typing import List, Mapping

from contractdesk.config import Config
from contractdesk.services.catalog_service import FLAG, Template

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

ATTACHMENT_SEPARATOR = "\n\n---\n\n"


def placeholders(text: str) -> List[str]:
    """Placeholder names in order of first appearance."""
    seen: List[str] = []
    for m in _PLACEHOLDER_RE.finditer(text or ""):
        name = m.group(1)
        if name not in seen:
            seen.append(name)
    return seen


def substitute(text: str, variables: Mapping[str, str], cfg: Config = Config) -> str:
    missing: List[str] = []

    def repl(m: re.Match) -> str:
        name = m.group(1)
        if name in variables:
            return str(variables[name])
        missing.append(name)
        return cfg.PLACEHOLDER_TEXT

    out = _PLACEHOLDER_RE.sub(repl, text or "")
    if missing:
        logger.debug("No value for placeholders %s; used placeholder text", sorted(set(missing)))
    return out


def _flag_on(value: str) -> bool:
    return (value or "").strip().lower() == "yes"


def compose(template: Template, variables: Mapping[str, str]) -> str:
    """Join the body with every attachment whose flag is on."""
    parts = [template.body]
    for att in template.attachments:
        if att.include_when is not None:
            field = template.field(att.include_when)
            if field is None or field.kind != FLAG or not _flag_on(variables.get(att.include_when, "")):
                continue
        parts.append(att.body)
    return ATTACHMENT_SEPARATOR.join(parts)


def render(template: Template, variables: Mapping[str, str], cfg: Config = Config) -> str:
    """Render the full document text for a resolved variable map."""
    return substitute(compose(template, variables), variables, cfg=cfg)
