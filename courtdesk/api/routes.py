"""
FastAPI routes for the case tracker, firm dashboard, and live display board.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from courtdesk.models import CourtCode, FirmProfile
from courtdesk.parsing import status_tone
from courtdesk.validation import QueryValidationError, require_query, validate_query

router = APIRouter()
tracker_router = APIRouter(prefix="/tracker", tags=["tracker"])
firm_router = APIRouter(prefix="/firm", tags=["firm"])
board_router = APIRouter(prefix="/board", tags=["board"])


def get_app_state(request: Request):
    return request.app.state


class QueryRequest(BaseModel):
    query: str = Field("", description="CNR, case number, or party name.")


class ProfileRequest(BaseModel):
    firm_name: str
    names: List[str] = Field(default_factory=list)


class WatchRequest(BaseModel):
    court: CourtCode


@tracker_router.post("/validate")
async def validate(payload: QueryRequest):
    message = validate_query(payload.query)
    return {"valid": message is None, "message": message}


@tracker_router.post("/search")
async def search_case(payload: QueryRequest, state=Depends(get_app_state)):
    try:
        query = require_query(payload.query)
    except QueryValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    lookup = await run_in_threadpool(state.gateway.fetch_case_updates, query)
    result = asdict(lookup)
    result["status_tone"] = None if lookup.is_error else status_tone(lookup.summary.status)
    return result


@firm_router.get("/cases")
async def firm_cases(state=Depends(get_app_state)):
    profile: FirmProfile = state.firm_profile
    sync = await run_in_threadpool(state.gateway.fetch_firm_case_list, list(profile.names))
    result = asdict(sync)
    result["firm_name"] = profile.firm_name
    for case in result["cases"]:
        case["status_tone"] = status_tone(case["status"])
    return result


@firm_router.get("/profile")
async def get_profile(state=Depends(get_app_state)):
    return asdict(state.firm_profile)


@firm_router.put("/profile")
async def update_profile(payload: ProfileRequest, state=Depends(get_app_state)):
    if not payload.firm_name.strip():
        raise HTTPException(status_code=422, detail="Firm name must not be blank.")
    state.firm_profile = FirmProfile(firm_name=payload.firm_name.strip(), names=payload.names)
    return asdict(state.firm_profile)


@board_router.get("")
async def board_status(state=Depends(get_app_state)):
    watcher = state.board_watcher
    return {
        "court": watcher.court,
        "loading": watcher.loading,
        "latest": asdict(watcher.latest) if watcher.latest else None,
    }


@board_router.post("/watch")
async def watch_board(payload: WatchRequest, state=Depends(get_app_state)):
    court = await state.board_watcher.watch(payload.court)
    return {"court": court, "interval": state.board_watcher.interval}


@board_router.delete("/watch")
async def stop_board(state=Depends(get_app_state)):
    await state.board_watcher.stop()
    return {"court": None}


@board_router.post("/refresh")
async def refresh_board(state=Depends(get_app_state)):
    watcher = state.board_watcher
    if watcher.court is None:
        raise HTTPException(status_code=409, detail="No display board is being watched.")
    board = await watcher.refresh()
    if board is None:
        raise HTTPException(status_code=409, detail="Court selection changed during refresh.")
    return asdict(board)


router.include_router(tracker_router)
router.include_router(firm_router)
router.include_router(board_router)
