"""
Use-case calls against the grounded model.

Every public method returns a well-formed value; backend faults are logged and
converted into the fixed fallback for that call site.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable

from courtdesk.config import Settings
from courtdesk.gateway.client import GeminiClient, GeminiConfig
from courtdesk.models import (
    DEFAULT_SOURCE_TITLE,
    CaseLookup,
    CaseSummary,
    CourtCode,
    DisplayBoardState,
    FirmSyncResult,
    FirmSyncStatus,
    PromptRequest,
    SourceCitation,
)
from courtdesk.parsing import parse_case_summary, parse_firm_cases, strip_summary_block
from courtdesk.prompts import build_prompt

logger = logging.getLogger(__name__)

CASE_NO_TEXT = "Status not yet updated in e-Courts for today."
CASE_FALLBACK = "Connection to e-Courts is delayed. Try again shortly."
FIRM_FALLBACK = "Network error during firm sync."
FIRM_NO_NAMES = "No advocate names are configured for the firm."
FIRM_NO_TEXT = "No firm briefing was returned for today."
BOARD_NO_TEXT = "Display board stream unavailable."
BOARD_FALLBACK = "Error connecting to Live Board."


def extract_sources(chunks: Iterable[dict[str, Any]]) -> list[SourceCitation]:
    """Build citations from grounding chunks, dropping any without a URI."""
    sources: list[SourceCitation] = []
    for chunk in chunks:
        web = chunk.get("web") or {}
        uri = web.get("uri") or ""
        if not uri:
            continue
        sources.append(SourceCitation(title=web.get("title") or DEFAULT_SOURCE_TITLE, uri=uri))
    return sources


class CourtGateway:
    """Coordinates prompt construction, the model call, and reply parsing."""

    def __init__(self, client: GeminiClient, *, fast_model: str, deep_model: str) -> None:
        self.client = client
        self.fast_model = fast_model
        self.deep_model = deep_model

    @classmethod
    def from_settings(cls, settings: Settings) -> "CourtGateway":
        client = GeminiClient(
            GeminiConfig(
                api_url=settings.gemini_api_url,
                api_key=settings.gemini_api_key,
                timeout=settings.gateway_timeout,
            )
        )
        return cls(client, fast_model=settings.fast_model, deep_model=settings.deep_model)

    def fetch_case_updates(self, query: str) -> CaseLookup:
        prompt = build_prompt(PromptRequest.single_case(query))
        try:
            response = self.client.generate(self.fast_model, prompt)
            text = response.text or CASE_NO_TEXT
            sources = extract_sources(response.grounding_chunks)
        except Exception as exc:
            logger.warning("Case lookup failed for %r: %s", query, exc)
            return CaseLookup(
                query=query,
                text=CASE_FALLBACK,
                sources=[],
                is_error=True,
                summary=CaseSummary(),
                body="",
            )

        return CaseLookup(
            query=query,
            text=text,
            sources=sources,
            is_error=False,
            summary=parse_case_summary(text),
            body=strip_summary_block(text),
        )

    def fetch_firm_case_list(self, names: Iterable[str]) -> FirmSyncResult:
        names = [name.strip() for name in names if name and name.strip()]
        if not names:
            logger.info("Firm sync skipped: no advocate names configured.")
            return FirmSyncResult(status=FirmSyncStatus.EMPTY, cases=[], raw_briefing=FIRM_NO_NAMES)

        prompt = build_prompt(PromptRequest.firm_list(names))
        try:
            response = self.client.generate(self.deep_model, prompt)
            text = response.text or ""
            cases = parse_firm_cases(text)
        except Exception as exc:
            logger.warning("Firm sync failed for %d advocate(s): %s", len(names), exc)
            return FirmSyncResult(status=FirmSyncStatus.FAILED, cases=[], raw_briefing=FIRM_FALLBACK)

        logger.info("Firm sync complete: advocates=%d, cases=%d", len(names), len(cases))
        return FirmSyncResult(
            status=FirmSyncStatus.OK if cases else FirmSyncStatus.EMPTY,
            cases=cases,
            raw_briefing=text or FIRM_NO_TEXT,
        )

    def get_live_court_board(self, court: CourtCode | str) -> DisplayBoardState:
        court = CourtCode(court)
        prompt = build_prompt(PromptRequest.live_board(court))
        fetched_at = datetime.now(timezone.utc)
        try:
            response = self.client.generate(self.fast_model, prompt)
            text = response.text or BOARD_NO_TEXT
            sources = extract_sources(response.grounding_chunks)
        except Exception as exc:
            logger.warning("Live board fetch failed for %s: %s", court.value, exc)
            return DisplayBoardState(
                court=court, text=BOARD_FALLBACK, sources=[], is_error=True, fetched_at=fetched_at
            )
        return DisplayBoardState(
            court=court, text=text, sources=sources, is_error=False, fetched_at=fetched_at
        )
