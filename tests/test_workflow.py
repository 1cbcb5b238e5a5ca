"""Tests for the workflow client, its schemas and mock mode."""
from __future__ import annotations

import base64

import pytest
import requests
from pydantic import ValidationError

from contractdesk.config import Config
from contractdesk.schemas import DraftParameters, ReviewReport
from contractdesk.services.workflow_service import WorkflowClient, WorkflowError, check_upload

DRAFT_PARAMS = {"clientName": "Acme Music", "contractType": "Mutual NDA", "party1": "Acme", "term": "2"}

REVIEW_JSON = {
    "overallRisk": "medium",
    "topConcerns": [
        {"severity": "High", "title": "Audit window", "section": "6.3", "description": "d", "recommendation": "r"},
        {"severity": "low", "title": "Notices", "section": "9"},
    ],
    "report": "# Report",
    "id": "rev-1",
    "checklist_status": [{"category": "Financial Terms", "status": "Warning", "issues": ["x"]}],
}


class TestCheckUpload:
    def test_allowed(self) -> None:
        assert check_upload("Deal.PDF", b"%PDF") == ".pdf"

    @pytest.mark.parametrize("name", ["deal.exe", "deal", "deal.doc"])
    def test_rejects_extension(self, name: str) -> None:
        with pytest.raises(ValueError):
            check_upload(name, b"data")

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError):
            check_upload("deal.txt", b"")

    def test_rejects_oversize(self) -> None:
        class Small(Config):
            MAX_UPLOAD_MB = 1

        with pytest.raises(ValueError, match="too large"):
            check_upload("deal.txt", b"x" * (1024 * 1024 + 1), Small)


class TestMockMode:
    def test_review(self, offline_cfg, make_session) -> None:
        session = make_session()
        client = WorkflowClient(offline_cfg, session=session)
        assert client.mock_mode
        report = client.request_review("deal.pdf", b"%PDF-1.4")
        assert report.overall_risk == "HIGH"
        assert len(report.top_concerns) == 3
        assert len(report.checklist_status) == 10
        assert report.severity_counts() == {"critical": 1, "high": 2, "medium": 4, "low": 0}
        assert report.id.startswith("mock-review-")
        assert session.calls == []

    def test_review_still_validates_upload(self, offline_cfg) -> None:
        with pytest.raises(ValueError):
            WorkflowClient(offline_cfg).request_review("deal.exe", b"x")

    def test_draft(self, offline_cfg, make_session) -> None:
        session = make_session()
        result = WorkflowClient(offline_cfg, session=session).request_draft(DRAFT_PARAMS)
        assert "MUTUAL NON-DISCLOSURE AGREEMENT" in result.draft
        assert "Acme and Second Party" in result.draft
        assert "period of 2 years" in result.draft
        assert [m.client for m in result.matched_contracts] == ["Drake", "Beyoncé", "The Weeknd"]
        assert result.id.startswith("mock-draft-")
        assert result.format == "markdown"
        assert session.calls == []

    def test_draft_requires_client_and_type(self, offline_cfg) -> None:
        with pytest.raises(ValidationError):
            WorkflowClient(offline_cfg).request_draft({"clientName": "Acme"})
        with pytest.raises(ValidationError):
            WorkflowClient(offline_cfg).request_draft({"clientName": "  ", "contractType": "NDA"})


class TestLiveCalls:
    def test_draft_posts_json(self, live_cfg, make_session) -> None:
        session = make_session(json_data={"draft": "# Draft", "matched_contracts": [], "id": "d1"})
        result = WorkflowClient(live_cfg, session=session).request_draft(DRAFT_PARAMS)
        assert result.draft == "# Draft"
        call = session.calls[0]
        assert call["url"] == "https://workflow.example.test/webhook/draft-contract"
        assert call["timeout"] == 60.0
        assert call["json"]["clientName"] == "Acme Music"
        assert call["json"]["contractType"] == "Mutual NDA"
        assert call["json"]["purpose"] == ""

    def test_review_posts_base64(self, live_cfg, make_session) -> None:
        session = make_session(json_data=REVIEW_JSON)
        report = WorkflowClient(live_cfg, session=session).request_review("dir/deal.pdf", b"%PDF-1.4")
        call = session.calls[0]
        assert call["url"] == "https://workflow.example.test/webhook/review-contract"
        assert call["timeout"] == 180.0
        assert call["json"]["fileName"] == "deal.pdf"
        assert call["json"]["fileType"] == "application/pdf"
        assert base64.b64decode(call["json"]["fileData"]) == b"%PDF-1.4"
        assert report.overall_risk == "MEDIUM"
        assert [c.severity for c in report.top_concerns] == ["high", "low"]
        assert report.checklist_status[0].status == "warning"

    def test_caller_timeout_wins(self, live_cfg, make_session) -> None:
        session = make_session(json_data={"draft": "x"})
        WorkflowClient(live_cfg, session=session).request_draft(DRAFT_PARAMS, timeout=5)
        assert session.calls[0]["timeout"] == 5

    def test_list_wrapped_response(self, live_cfg, make_session) -> None:
        session = make_session(json_data=[{"draft": "x"}])
        assert WorkflowClient(live_cfg, session=session).request_draft(DRAFT_PARAMS).draft == "x"

    def test_no_retry(self, live_cfg, make_session) -> None:
        session = make_session(exc=requests.ConnectionError("refused"))
        with pytest.raises(WorkflowError):
            WorkflowClient(live_cfg, session=session).request_draft(DRAFT_PARAMS)
        assert len(session.calls) == 1


class TestLiveFailures:
    def test_timeout(self, live_cfg, make_session) -> None:
        exc = requests.Timeout("slow")
        session = make_session(exc=exc)
        with pytest.raises(WorkflowError, match="timed out") as info:
            WorkflowClient(live_cfg, session=session).request_review("deal.txt", b"text")
        assert info.value.__cause__ is exc

    def test_connection_error(self, live_cfg, make_session) -> None:
        session = make_session(exc=requests.ConnectionError("refused"))
        with pytest.raises(WorkflowError, match="failed"):
            WorkflowClient(live_cfg, session=session).request_draft(DRAFT_PARAMS)

    def test_http_error(self, live_cfg, make_session) -> None:
        session = make_session(status_code=502, text="bad gateway")
        with pytest.raises(WorkflowError, match="502"):
            WorkflowClient(live_cfg, session=session).request_draft(DRAFT_PARAMS)

    def test_non_json(self, live_cfg, make_session) -> None:
        session = make_session(status_code=200, json_data=None, text="<html>")
        with pytest.raises(WorkflowError, match="non-JSON"):
            WorkflowClient(live_cfg, session=session).request_draft(DRAFT_PARAMS)

    def test_schema_mismatch(self, live_cfg, make_session) -> None:
        session = make_session(json_data={"unexpected": True})
        with pytest.raises(WorkflowError) as info:
            WorkflowClient(live_cfg, session=session).request_review("deal.docx", b"PK")
        assert isinstance(info.value.__cause__, ValidationError)


class TestSchemas:
    def test_review_accepts_snake_case(self) -> None:
        report = ReviewReport.model_validate({"overall_risk": "low", "top_concerns": []})
        assert report.overall_risk == "LOW"

    def test_severity_counts_fallback(self) -> None:
        report = ReviewReport.model_validate(REVIEW_JSON)
        assert report.issues_count is None
        assert report.severity_counts() == {"critical": 0, "high": 1, "medium": 0, "low": 1}

    def test_bad_severity(self) -> None:
        with pytest.raises(ValidationError):
            ReviewReport.model_validate({"overallRisk": "HIGH", "topConcerns": [{"severity": "extreme", "title": "x"}]})

    def test_draft_parameters_payload(self) -> None:
        params = DraftParameters(clientName="Acme", contractType="NDA", party2="Bo")
        assert params.to_payload() == {
            "clientName": "Acme",
            "contractType": "NDA",
            "industry": "",
            "purpose": "",
            "party1": "",
            "party2": "Bo",
            "term": "",
        }
