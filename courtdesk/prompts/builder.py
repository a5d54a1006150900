"""
Prompt templates for the three lookup use cases.
"""

from __future__ import annotations

from typing import Iterable

from courtdesk.models import CourtCode, PromptRequest, UseCase

SUMMARY_START = "CASE_SUMMARY_START"
SUMMARY_END = "CASE_SUMMARY_END"
ITEM_START = "CASE_ITEM_START"
ITEM_END = "CASE_ITEM_END"

SUMMARY_TEMPLATE = (
    f"{SUMMARY_START}\n"
    "Case Number: [Number]\n"
    "Current Status: [Status]\n"
    'Next Hearing Date: [Date or "Not Fixed"]\n'
    "Judge: [Name]\n"
    "Court: [Name]\n"
    "Stage: [Stage]\n"
    f"{SUMMARY_END}"
)

FIRM_ITEM_TEMPLATE = (
    f"{ITEM_START}\n"
    "CaseNumber: [Case No/Year]\n"
    "Advocate: [Name]\n"
    "Parties: [P vs R]\n"
    "Status: [Status]\n"
    "NextDate: [Date]\n"
    "Location: [Guntur/APHC/TSHC]\n"
    "TodayUpdate: [What is written in the orders/proceedings today?]\n"
    "Link: [Direct Link to file in e-Courts]\n"
    f"{ITEM_END}"
)


def build_single_case_prompt(query: str) -> str:
    return (
        "Search e-Courts (services.ecourts.gov.in), aphc.gov.in, and tshc.gov.in "
        f"for the specific case: {query}.\n\n"
        "Look for:\n"
        "1. What was written in the 'Daily Order' or 'Proceedings' today.\n"
        "2. The current status (Pending/Adjourned/Disposed).\n"
        "3. The next hearing date.\n\n"
        "Format exactly:\n"
        f"{SUMMARY_TEMPLATE}"
    )


def build_firm_list_prompt(names: Iterable[str]) -> str:
    names_query = ", ".join(names)
    return (
        "Perform a deep search of Guntur District Courts, Andhra Pradesh High Court, "
        f"and Telangana High Court for all cases handled by: {names_query}.\n\n"
        "I need to know the EXACT status today.\n"
        "For every case found, provide:\n"
        f"{FIRM_ITEM_TEMPLATE}"
    )


def build_live_board_prompt(court: CourtCode | str) -> str:
    host = CourtCode(court).portal_host
    return (
        f"Get the LIVE Display Board for {host}. "
        "I need CH Number, Judge, and currently running Serial Number."
    )


def build_prompt(request: PromptRequest) -> str:
    """Dispatch a :class:`PromptRequest` to its builder."""
    if request.use_case is UseCase.SINGLE_CASE:
        return build_single_case_prompt(request.query or "")
    if request.use_case is UseCase.FIRM_LIST:
        return build_firm_list_prompt(request.names)
    if request.use_case is UseCase.LIVE_BOARD:
        if request.court is None:
            raise ValueError("live-board prompt requires a court code")
        return build_live_board_prompt(request.court)
    raise ValueError(f"Unsupported use case: {request.use_case}")
