"""ID and filename helpers for drafts and exports.

Provides:
- ``new_id(prefix)``: returns a time-sortable ID string with the given prefix
  (e.g., ``draft_0001695400000-3f2a...``). Not a true ULID but stable and sortable.
- ``export_filename(template_id, ext, today)``: download name for an export,
  e.g. ``management-agreement-2025-01-15.docx``.
"""

from __future__ import annotations

import datetime as dt
import time
import uuid
from typing import Optional


def new_id(prefix: str) -> str:
    """Generate a time-sortable unique ID with the given prefix.

    Format: ``{prefix}_{millis}-{uuid16}``
    """
    millis = int(time.time() * 1000)
    rand = uuid.uuid4().hex[:16]
    return f"{prefix}_{millis:013d}-{rand}"


def export_filename(template_id: str, ext: str, today: Optional[dt.date] = None) -> str:
    day = today or dt.date.today()
    return f"{template_id}-{day.isoformat()}.{ext.lstrip('.')}"
