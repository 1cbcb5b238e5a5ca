"""Shared pytest fixtures for the contractdesk test suite."""
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional

import pytest

from contractdesk.config import Config


@pytest.fixture()
def fixed_today() -> dt.date:
    return dt.date(2025, 1, 15)


@pytest.fixture()
def management_values() -> Dict[str, str]:
    """Complete-enough management agreement submission."""
    return {
        "date": "January 15, 2025",
        "artist": "Taylor Martinez",
        "producer": "Management Company",
        "commissionRate": "20%",
        "termYears": "4",
        "producerAddress": "123 Management Ave, Los Angeles, CA 90210",
        "producerContact": "Manager Name",
        "producerEmail": "manager@management.com",
        "artistEmail": "taylor@artist.com",
    }


@pytest.fixture()
def producer_values() -> Dict[str, str]:
    return {
        "date": "January 15, 2025",
        "artist": "Taylor Martinez",
        "producer": "Taylor Martinez Productions",
        "company": "Republic Records",
        "companyAddress": "1755 Broadway, New York, NY 10019",
        "companyEmail": "contracts@republicrecords.com",
        "compositionTitle": "New Hit Single",
        "advance": "$25,000",
        "royaltyRate": "3%",
    }


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data: Any = None, text: str = ""):
        self.status_code = status_code
        self._json = json_data
        self.text = text

    def json(self) -> Any:
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json


class FakeSession:
    """Stand-in for requests.Session that records posts.

    ``response`` is returned for every call; ``exc`` is raised instead when set.
    """

    def __init__(self, response: Optional[FakeResponse] = None, exc: Optional[Exception] = None):
        self.response = response or FakeResponse(json_data={})
        self.exc = exc
        self.calls: List[Dict[str, Any]] = []

    def post(self, url: str, json: Any = None, timeout: Optional[float] = None, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


class LiveConfig(Config):
    WORKFLOW_BASE_URL = "https://workflow.example.test"


class OfflineConfig(Config):
    WORKFLOW_BASE_URL = ""


@pytest.fixture()
def live_cfg():
    return LiveConfig


@pytest.fixture()
def offline_cfg():
    return OfflineConfig


@pytest.fixture()
def make_session():
    """Factory for FakeSession: ``make_session(status, json_data, text, exc)``."""

    def _make(status_code: int = 200, json_data: Any = None, text: str = "", exc: Optional[Exception] = None):
        return FakeSession(FakeResponse(status_code, json_data, text), exc=exc)

    return _make
