from __future__ import annotations

from datetime import datetime, timezone

import pytest

from courtdesk.config import Settings
from courtdesk.models import (
    CaseLookup,
    CaseSummary,
    CourtCode,
    DisplayBoardState,
    FirmCaseRecord,
    FirmSyncResult,
    FirmSyncStatus,
    SourceCitation,
)

SUMMARY_REPLY = (
    "CASE_SUMMARY_START\n"
    "Case Number: WP 99/2024\n"
    "Current Status: Pending\n"
    "Next Hearing Date: 12-05-2024\n"
    "Judge: X\n"
    "Court: Y\n"
    "Stage: Z\n"
    "CASE_SUMMARY_END\n"
    "Extra notes here."
)


def firm_block(case_number: str, *, link: str | None = "https://services.ecourts.gov.in/x") -> str:
    lines = [
        "CASE_ITEM_START",
        f"CaseNumber: {case_number}",
        "Advocate: N DURGA PRASAD (NDP)",
        "Parties: Rao vs State",
        "Status: Adjourned",
        "NextDate: 02-07-2024",
        "Location: APHC",
        "TodayUpdate: Counter filed, list after two weeks.",
    ]
    if link is not None:
        lines.append(f"Link: {link}")
    lines.append("CASE_ITEM_END")
    return "\n".join(lines)


class FakeGateway:
    """Records calls and returns canned values without touching the network."""

    def __init__(self) -> None:
        self.case_queries: list[str] = []
        self.firm_calls: list[list[str]] = []
        self.board_calls: list[CourtCode] = []

    def fetch_case_updates(self, query: str) -> CaseLookup:
        self.case_queries.append(query)
        return CaseLookup(
            query=query,
            text=SUMMARY_REPLY,
            sources=[SourceCitation(title="e-Courts", uri="https://services.ecourts.gov.in/")],
            is_error=False,
            summary=CaseSummary(case_number="WP 99/2024", status="Pending", next_hearing_date="12-05-2024"),
            body="Extra notes here.",
        )

    def fetch_firm_case_list(self, names) -> FirmSyncResult:
        self.firm_calls.append(list(names))
        return FirmSyncResult(
            status=FirmSyncStatus.OK,
            cases=[FirmCaseRecord(case_number="OS 45/2023", status="Disposed")],
            raw_briefing=firm_block("OS 45/2023"),
        )

    def get_live_court_board(self, court) -> DisplayBoardState:
        court = CourtCode(court)
        self.board_calls.append(court)
        return DisplayBoardState(
            court=court,
            text=f"CH 5 | Justice S. Rao | Serial 11 ({court.value})",
            sources=[],
            is_error=False,
            fetched_at=datetime.now(timezone.utc),
        )


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        GEMINI_API_KEY="test-key",
        GEMINI_API_URL="https://gemini.test/v1beta",
        FAST_MODEL="gemini-fast",
        DEEP_MODEL="gemini-deep",
        BOARD_REFRESH_SECONDS=3600,
        FIRM_NAME="Test Chambers",
        FIRM_ADVOCATES=["A KUMAR", "B REDDY"],
    )
