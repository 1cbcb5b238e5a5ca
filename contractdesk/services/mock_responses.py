"""Canned workflow responses used when no workflow service is configured.

These let the CLI and tests exercise the full draft/review flow offline.
Both builders return raw JSON-shaped dicts, validated by the same schemas
as live responses.
"""

from __future__ import annotations

import datetime as dt
import time
from typing import Any, Dict, Optional

REVIEW_REPORT_MD = """# Contract Review Report

## Executive Summary

**Overall Risk Level: HIGH**

This contract contains several critical issues that require immediate attention before execution.

## Top Concerns

### 1. Unlimited Liability (CRITICAL)

**Section:** 7.2

**Issue:** Contract requires indemnification for "any and all claims" with no cap on liability exposure.

**Recommendation:** Add liability cap equal to fees paid in the preceding 12 months. Exclude vendor negligence and willful misconduct from indemnification.

### 2. Broad Termination Rights (HIGH)

**Section:** 4.1

**Issue:** Either party can terminate without cause on 15 days notice, creating significant business continuity risk.

**Recommendation:** Increase notice period to 90 days or require cause for termination. Add wind-down obligations.

### 3. IP Ownership Ambiguity (HIGH)

**Section:** 6.3

**Issue:** Unclear ownership of work product created during the engagement term.

**Recommendation:** Clarify that all work product is owned by [Client]. Add explicit assignment language.

## Next Steps

1. Address critical liability issues
2. Clarify IP ownership terms
3. Revise termination provisions
4. Review financial terms for fairness"""


def _stamp() -> int:
    return int(time.time() * 1000)


def mock_review() -> Dict[str, Any]:
    return {
        "overallRisk": "HIGH",
        "topConcerns": [
            {
                "severity": "critical",
                "title": "Unlimited Liability",
                "section": "Section 7.2",
                "description": 'Contract requires indemnification for "any and all claims" with no cap on liability exposure.',
                "recommendation": "Add liability cap equal to fees paid in the preceding 12 months. Exclude vendor negligence and willful misconduct from indemnification.",
            },
            {
                "severity": "high",
                "title": "Broad Termination Rights",
                "section": "Section 4.1",
                "description": "Either party can terminate without cause on 15 days notice, creating significant business continuity risk.",
                "recommendation": "Increase notice period to 90 days or require cause for termination. Add wind-down obligations.",
            },
            {
                "severity": "high",
                "title": "IP Ownership Ambiguity",
                "section": "Section 6.3",
                "description": "Unclear ownership of work product created during the engagement term.",
                "recommendation": "Clarify that all work product is owned by [Client]. Add explicit assignment language.",
            },
        ],
        "report": REVIEW_REPORT_MD,
        "id": f"mock-review-{_stamp()}",
        "issues_count": {"critical": 1, "high": 2, "medium": 4},
        "checklist_status": [
            {"category": "Party Identification", "status": "pass"},
            {"category": "Financial Terms", "status": "warning"},
            {"category": "Liability & Indemnification", "status": "critical"},
            {"category": "Termination Rights", "status": "warning"},
            {"category": "Intellectual Property", "status": "critical"},
            {"category": "Confidentiality", "status": "pass"},
            {"category": "Regulatory Compliance", "status": "pass"},
            {"category": "Dispute Resolution", "status": "warning"},
            {"category": "Material Adverse Changes", "status": "pass"},
            {"category": "Conflicts of Interest", "status": "pass"},
        ],
    }


def mock_draft(params: Dict[str, str], today: Optional[dt.date] = None) -> Dict[str, Any]:
    day = (today or dt.date.today()).strftime("%m/%d/%Y")
    party1 = params.get("party1") or "First Party"
    party2 = params.get("party2") or "Second Party"
    term = params.get("term") or "3"
    draft = f"""# MUTUAL NON-DISCLOSURE AGREEMENT

This Mutual Non-Disclosure Agreement ("Agreement") is entered into as of {day} by and between {party1} and {party2}.

WHEREAS, the parties desire to disclose to each other certain confidential and proprietary information and wish to protect the confidentiality of such information;

NOW, THEREFORE, in consideration of the mutual covenants and agreements contained herein, the parties agree as follows:

## 1. DEFINITION OF CONFIDENTIAL INFORMATION

"Confidential Information" means any and all information, whether written, oral, electronic, or visual, disclosed by one party ("Disclosing Party") to the other party ("Receiving Party") that is marked as confidential or that reasonably should be understood to be confidential.

## 2. OBLIGATIONS OF RECEIVING PARTY

The Receiving Party agrees to:

- Maintain the confidentiality of all Confidential Information;
- Limit access to Confidential Information to employees and contractors with a legitimate need to know;
- Protect Confidential Information using no less than reasonable care;
- Not disclose Confidential Information to third parties without prior written consent.

## 3. TERM AND DURATION

This Agreement shall commence on the Effective Date and continue for a period of {term} years, unless earlier terminated by either party upon thirty (30) days' written notice.

## 4. RETURN OF CONFIDENTIAL INFORMATION

Upon termination of this Agreement or upon request by the Disclosing Party, the Receiving Party shall return or destroy all Confidential Information and certify such return or destruction in writing.

## 5. LIMITATION OF LIABILITY

IN NO EVENT SHALL EITHER PARTY BE LIABLE FOR ANY INDIRECT, INCIDENTAL, SPECIAL, CONSEQUENTIAL, OR PUNITIVE DAMAGES ARISING OUT OF OR RELATED TO THIS AGREEMENT.

## 6. GOVERNING LAW

This Agreement shall be governed by and construed in accordance with the laws of the State of New York, without regard to its conflict of law principles.

**IN WITNESS WHEREOF**, the parties have executed this Agreement as of the Effective Date.

**{party1.upper()}**

By: _________________________________

**{party2.upper()}**

By: _________________________________"""
    return {
        "draft": draft,
        "matched_contracts": [
            {"client": "Drake", "type": "Mutual NDA", "match_reason": "Same industry: Music"},
            {"client": "Beyoncé", "type": "Mutual NDA", "match_reason": "Same industry: Music"},
            {"client": "The Weeknd", "type": "Service Agreement", "match_reason": "Similar contract type and industry"},
        ],
        "id": f"mock-draft-{_stamp()}",
        "format": "markdown",
    }
