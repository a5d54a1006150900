"""
Scrape delimiter blocks and labelled fields out of free-text model replies.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping

from courtdesk.models import (
    NOT_AVAILABLE,
    CaseSummary,
    FieldMatch,
    FieldState,
    FirmCaseRecord,
    StatusTone,
)
from courtdesk.prompts.builder import ITEM_END, ITEM_START, SUMMARY_END, SUMMARY_START

SUMMARY_BLOCK_RE = re.compile(rf"{SUMMARY_START}([\s\S]*?){SUMMARY_END}")
ITEM_BLOCK_RE = re.compile(rf"{ITEM_START}([\s\S]*?){ITEM_END}")

# field name -> label as written in the prompt template
CASE_SUMMARY_LABELS: Mapping[str, str] = {
    "case_number": "Case Number",
    "status": "Current Status",
    "next_hearing_date": "Next Hearing Date",
    "judge": "Judge",
    "court": "Court",
    "stage": "Stage",
}
FIRM_CASE_LABELS: Mapping[str, str] = {
    "case_number": "CaseNumber",
    "advocate": "Advocate",
    "parties": "Parties",
    "status": "Status",
    "next_date": "NextDate",
    "court_location": "Location",
    "today_update": "TodayUpdate",
    "portal_link": "Link",
}
SUMMARY_PLACEHOLDERS = frozenset(
    {
        "[Number]",
        "[Status]",
        '[Date or "Not Fixed"]',
        "[Date]",
        "[Name]",
        "[Stage]",
    }
)

CLOSED_MARKERS = ("disposed", "closed", "dismissed")
PENDING_MARKERS = ("pending", "adjourned", "awaiting")


def _label_pattern(label: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(label)}:[ \t]*(.*)", re.IGNORECASE)


def extract_field(block: str, label: str, placeholders: Iterable[str] = ()) -> FieldMatch:
    """Look up ``<label>:`` in ``block`` and classify what follows it."""
    match = _label_pattern(label).search(block)
    if match is None:
        return FieldMatch(FieldState.MISSING)
    value = match.group(1).strip()
    if not value:
        return FieldMatch(FieldState.EMPTY)
    if value in placeholders:
        return FieldMatch(FieldState.PLACEHOLDER, value)
    return FieldMatch(FieldState.FOUND, value)


def extract_fields(
    block: str,
    labels: Mapping[str, str],
    placeholders: Iterable[str] = (),
) -> dict[str, FieldMatch]:
    placeholders = frozenset(placeholders)
    return {name: extract_field(block, label, placeholders) for name, label in labels.items()}


def parse_case_summary(text: str) -> CaseSummary:
    """Parse the first summary block; anything not found is None."""
    match = SUMMARY_BLOCK_RE.search(text or "")
    if not match:
        return CaseSummary()
    fields = extract_fields(match.group(1), CASE_SUMMARY_LABELS, SUMMARY_PLACEHOLDERS)
    return CaseSummary(
        **{
            name: found.value if found.state is FieldState.FOUND else None
            for name, found in fields.items()
        }
    )


def strip_summary_block(text: str) -> str:
    """Narrative left over once the summary block is cut out."""
    return SUMMARY_BLOCK_RE.sub("", text or "", count=1).strip()


def parse_firm_cases(text: str) -> list[FirmCaseRecord]:
    records: list[FirmCaseRecord] = []
    for match in ITEM_BLOCK_RE.finditer(text or ""):
        fields = extract_fields(match.group(1), FIRM_CASE_LABELS)
        records.append(
            FirmCaseRecord(
                **{
                    name: found.value if found.state is FieldState.FOUND else NOT_AVAILABLE
                    for name, found in fields.items()
                }
            )
        )
    return records


def status_tone(status: str | None) -> StatusTone:
    lowered = (status or "").lower()
    if any(marker in lowered for marker in CLOSED_MARKERS):
        return StatusTone.CLOSED
    if any(marker in lowered for marker in PENDING_MARKERS):
        return StatusTone.PENDING
    return StatusTone.ACTIVE
