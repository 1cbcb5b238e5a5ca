"""Configuration for environment variables and runtime knobs.

Provides a simple config object with workflow endpoints, timeouts and
document export settings. This keeps the rest of the codebase decoupled
from direct env access.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env for local dev if available
load_dotenv()


class Config:
    # Base
    CONTRACTDESK_ENV = os.getenv("CONTRACTDESK_ENV", "dev")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Visible fallback for any variable the user did not supply
    PLACEHOLDER_TEXT = os.getenv("PLACEHOLDER_TEXT", "To be provided")

    # External drafting/review workflow (webhook base + per-workflow paths).
    # Leaving the base URL empty switches the client to canned mock responses.
    WORKFLOW_BASE_URL = os.getenv("WORKFLOW_BASE_URL", "")
    WORKFLOW_DRAFT_PATH = os.getenv("WORKFLOW_DRAFT_PATH", "/webhook/draft-contract")
    WORKFLOW_REVIEW_PATH = os.getenv("WORKFLOW_REVIEW_PATH", "/webhook/review-contract")
    WORKFLOW_DRAFT_TIMEOUT = float(os.getenv("WORKFLOW_DRAFT_TIMEOUT", "60"))
    WORKFLOW_REVIEW_TIMEOUT = float(os.getenv("WORKFLOW_REVIEW_TIMEOUT", "180"))

    # Upload limits and whitelist for contracts sent to review
    MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "50"))
    ALLOWED_REVIEW_EXTS = {".pdf", ".docx", ".txt"}

    # DOCX export styling
    DOCX_FONT = os.getenv("DOCX_FONT", "Times New Roman")
    DOCX_FONT_SIZE = int(os.getenv("DOCX_FONT_SIZE", "12"))


def workflow_configured(cfg: Config = Config) -> bool:
    """Return True when a workflow base URL is set."""
    return bool((cfg.WORKFLOW_BASE_URL or "").strip())
