"""
Dataclasses and enums shared by the prompt, gateway, and parsing layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

NOT_AVAILABLE = "N/A"
DEFAULT_SOURCE_TITLE = "Legal Portal"


class UseCase(str, Enum):
    SINGLE_CASE = "single-case"
    FIRM_LIST = "firm-list"
    LIVE_BOARD = "live-board"


class CourtCode(str, Enum):
    TG = "TG"
    AP = "AP"

    @property
    def portal_host(self) -> str:
        return COURT_PORTALS[self]


COURT_PORTALS = {
    CourtCode.TG: "tshc.gov.in",
    CourtCode.AP: "aphc.gov.in",
}


class FieldState(str, Enum):
    FOUND = "found"
    PLACEHOLDER = "placeholder"
    EMPTY = "empty"
    MISSING = "missing"


class FirmSyncStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


class StatusTone(str, Enum):
    CLOSED = "closed"
    PENDING = "pending"
    ACTIVE = "active"


@dataclass(frozen=True, slots=True)
class PromptRequest:
    """A single prompt to build; construct through the per-use-case helpers."""

    use_case: UseCase
    query: str | None = None
    names: tuple[str, ...] = ()
    court: CourtCode | None = None

    @classmethod
    def single_case(cls, query: str) -> "PromptRequest":
        return cls(use_case=UseCase.SINGLE_CASE, query=query)

    @classmethod
    def firm_list(cls, names: Iterable[str]) -> "PromptRequest":
        return cls(use_case=UseCase.FIRM_LIST, names=tuple(names))

    @classmethod
    def live_board(cls, court: CourtCode | str) -> "PromptRequest":
        return cls(use_case=UseCase.LIVE_BOARD, court=CourtCode(court))


@dataclass(slots=True)
class SourceCitation:
    title: str
    uri: str


@dataclass(slots=True)
class ModelReply:
    text: str
    sources: list[SourceCitation] = field(default_factory=list)
    is_error: bool = False


@dataclass(frozen=True, slots=True)
class FieldMatch:
    state: FieldState
    value: Optional[str] = None


@dataclass(slots=True)
class CaseSummary:
    case_number: Optional[str] = None
    status: Optional[str] = None
    next_hearing_date: Optional[str] = None
    judge: Optional[str] = None
    court: Optional[str] = None
    stage: Optional[str] = None


@dataclass(slots=True)
class FirmCaseRecord:
    case_number: str = NOT_AVAILABLE
    advocate: str = NOT_AVAILABLE
    parties: str = NOT_AVAILABLE
    status: str = NOT_AVAILABLE
    next_date: str = NOT_AVAILABLE
    court_location: str = NOT_AVAILABLE
    today_update: str = NOT_AVAILABLE
    portal_link: str = NOT_AVAILABLE


@dataclass(slots=True)
class CaseLookup:
    """Single-case result: the reply plus what was parsed out of it."""

    query: str
    text: str
    sources: list[SourceCitation]
    is_error: bool
    summary: CaseSummary
    body: str


@dataclass(slots=True)
class FirmSyncResult:
    status: FirmSyncStatus
    cases: list[FirmCaseRecord]
    raw_briefing: str


@dataclass(slots=True)
class DisplayBoardState:
    court: CourtCode
    text: str
    sources: list[SourceCitation]
    is_error: bool
    fetched_at: datetime


@dataclass(slots=True)
class FirmProfile:
    firm_name: str
    names: list[str]

    def __post_init__(self) -> None:
        self.names = [name.strip() for name in self.names if name and name.strip()]
