"""Client for the external drafting/review workflow service.

The service is an opaque webhook endpoint: drafting posts JSON parameters
and gets back a draft string with matched precedent contracts; review posts
a base64-encoded contract file and gets back a risk report.

Calls use a caller-supplied timeout and are never retried. Every failure
(timeout, connection error, non-2xx status, non-JSON body, schema mismatch)
surfaces as a single ``WorkflowError`` chained to its cause. When no base
URL is configured the client returns canned mock responses instead.
"""

from __future__ import annotations

import base64
import logging
import mimetypes
import os
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

import requests
from pydantic import BaseModel, ValidationError

from contractdesk.config import Config, workflow_configured
from contractdesk.schemas import DraftParameters, DraftResponse, ReviewReport
from contractdesk.services import mock_responses

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class WorkflowError(RuntimeError):
    """Raised for any failed call to the workflow service."""


def check_upload(file_name: str, data: bytes, cfg: Config = Config) -> str:
    """Validate a contract upload; returns the lowercased extension.

    Raises ValueError for an empty file, a disallowed extension or a file
    over ``MAX_UPLOAD_MB``.
    """
    ext = os.path.splitext(file_name or "")[1].lower()
    if ext not in cfg.ALLOWED_REVIEW_EXTS:
        allowed = ", ".join(sorted(cfg.ALLOWED_REVIEW_EXTS))
        raise ValueError(f"Unsupported file type '{ext or file_name}'. Allowed: {allowed}")
    if not data:
        raise ValueError("Uploaded file is empty")
    limit = cfg.MAX_UPLOAD_MB * 1024 * 1024
    if len(data) > limit:
        raise ValueError(f"File too large ({len(data)} bytes). Limit is {cfg.MAX_UPLOAD_MB} MB")
    return ext


class WorkflowClient:
    def __init__(self, cfg: Config = Config, session: Optional[requests.Session] = None):
        self.cfg = cfg
        self.session = session or requests.Session()

    @property
    def mock_mode(self) -> bool:
        return not workflow_configured(self.cfg)

    def _url(self, path: str) -> str:
        return self.cfg.WORKFLOW_BASE_URL.rstrip("/") + "/" + path.lstrip("/")

    def _post(self, path: str, payload: Dict[str, Any], timeout: float) -> Any:
        url = self._url(path)
        try:
            resp = self.session.post(url, json=payload, timeout=timeout)
        except requests.Timeout as exc:
            logger.exception("Workflow call to %s timed out after %ss", url, timeout)
            raise WorkflowError(f"Workflow request timed out after {timeout:g}s: {url}") from exc
        except requests.RequestException as exc:
            logger.exception("Workflow call to %s failed", url)
            raise WorkflowError(f"Workflow request failed: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            body = (resp.text or "")[:200]
            raise WorkflowError(f"Workflow returned HTTP {resp.status_code}: {body}")
        try:
            return resp.json()
        except ValueError as exc:
            raise WorkflowError(f"Workflow returned a non-JSON body from {url}") from exc

    def _parse(self, model: Type[M], data: Any) -> M:
        # n8n-style webhooks sometimes wrap the payload in a one-item list
        if isinstance(data, list) and len(data) == 1:
            data = data[0]
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise WorkflowError(f"Workflow response did not match {model.__name__}: {exc}") from exc

    def request_draft(
        self,
        params: Union[DraftParameters, Mapping[str, Any]],
        timeout: Optional[float] = None,
    ) -> DraftResponse:
        """Ask the workflow to draft a contract from the given parameters.

        ``params`` requires ``clientName`` and ``contractType``; a mapping
        missing either raises pydantic's ValidationError before any call.
        """
        if not isinstance(params, DraftParameters):
            params = DraftParameters.model_validate(dict(params))
        payload = params.to_payload()

        if self.mock_mode:
            logger.info("Workflow not configured, returning mock draft")
            return DraftResponse.model_validate(mock_responses.mock_draft(payload))

        timeout = timeout if timeout is not None else self.cfg.WORKFLOW_DRAFT_TIMEOUT
        logger.info(f"[workflow] draft request for {params.client_name} ({params.contract_type})")
        data = self._post(self.cfg.WORKFLOW_DRAFT_PATH, payload, timeout)
        return self._parse(DraftResponse, data)

    def request_review(
        self,
        file_name: str,
        data: bytes,
        mime: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> ReviewReport:
        """Send a contract file for risk review.

        Raises ValueError if the upload is rejected locally and
        WorkflowError if the service call fails.
        """
        check_upload(file_name, data, self.cfg)

        if self.mock_mode:
            logger.info("Workflow not configured, returning mock review")
            return ReviewReport.model_validate(mock_responses.mock_review())

        mime = mime or mimetypes.guess_type(file_name)[0] or "application/octet-stream"
        payload = {
            "fileName": os.path.basename(file_name),
            "fileType": mime,
            "fileData": base64.b64encode(data).decode("ascii"),
        }
        timeout = timeout if timeout is not None else self.cfg.WORKFLOW_REVIEW_TIMEOUT
        logger.info(f"[workflow] review request for {payload['fileName']} ({len(data)} bytes)")
        result = self._post(self.cfg.WORKFLOW_REVIEW_PATH, payload, timeout)
        return self._parse(ReviewReport, result)
