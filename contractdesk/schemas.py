"""Request/response schemas for the drafting and review workflow.

Holds Pydantic models that validate payloads sent to, and returned by, the
external workflow service (draft requests, drafts with matched precedent
contracts, and contract review reports). This keeps the wire contract
explicit and centralized.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

Severity = Literal["critical", "high", "medium", "low"]
ChecklistState = Literal["pass", "warning", "critical", "pending"]


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Concern(_Model):
    severity: Severity
    title: str
    section: str = ""
    description: str = ""
    recommendation: str = ""

    @field_validator("severity", mode="before")
    @classmethod
    def _lower_severity(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class ChecklistItem(_Model):
    category: str
    status: ChecklistState
    details: Optional[str] = None
    issues: List[str] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _lower_status(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class IssuesCount(_Model):
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0


class ReviewReport(_Model):
    """Risk report returned by the review workflow.

    Accepts both camelCase (``overallRisk``, ``topConcerns``) and
    snake_case keys from the service.
    """

    overall_risk: str = Field(validation_alias=AliasChoices("overallRisk", "overall_risk"))
    top_concerns: List[Concern] = Field(
        default_factory=list, validation_alias=AliasChoices("topConcerns", "top_concerns")
    )
    report: str = ""
    id: str = ""
    issues_count: Optional[IssuesCount] = Field(
        default=None, validation_alias=AliasChoices("issues_count", "issuesCount")
    )
    checklist_status: List[ChecklistItem] = Field(
        default_factory=list, validation_alias=AliasChoices("checklist_status", "checklistStatus")
    )

    @field_validator("overall_risk", mode="before")
    @classmethod
    def _upper_risk(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    def severity_counts(self) -> Dict[str, int]:
        """Issue counts by severity, falling back to counting top concerns."""
        if self.issues_count is not None:
            return self.issues_count.model_dump()
        counts = IssuesCount().model_dump()
        for concern in self.top_concerns:
            counts[concern.severity] += 1
        return counts


class DraftParameters(_Model):
    client_name: str = Field(alias="clientName", min_length=1)
    contract_type: str = Field(alias="contractType", min_length=1)
    industry: str = ""
    purpose: str = ""
    party1: str = ""
    party2: str = ""
    term: str = ""

    @field_validator("client_name", "contract_type", mode="before")
    @classmethod
    def _strip_required(cls, v):
        return v.strip() if isinstance(v, str) else v

    def to_payload(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


class MatchedContract(_Model):
    client: str
    type: str
    match_reason: str = Field(default="", validation_alias=AliasChoices("match_reason", "matchReason"))
    id: Optional[str] = None
    score: Optional[float] = None


class DraftResponse(_Model):
    draft: str
    matched_contracts: List[MatchedContract] = Field(
        default_factory=list, validation_alias=AliasChoices("matched_contracts", "matchedContracts")
    )
    id: str = ""
    format: str = "markdown"
