"""
FastAPI entrypoint for CourtDesk.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from courtdesk.api import router
from courtdesk.board import DisplayBoardWatcher
from courtdesk.config import Settings, get_settings
from courtdesk.gateway import CourtGateway
from courtdesk.models import FirmProfile


def create_app(settings: Settings | None = None, gateway: CourtGateway | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    gateway = gateway or CourtGateway.from_settings(settings)
    board_watcher = DisplayBoardWatcher(gateway, interval=settings.board_refresh_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await board_watcher.stop()

    app = FastAPI(title="CourtDesk", version="0.1.0", lifespan=lifespan)
    app.include_router(router)
    app.state.settings = settings
    app.state.gateway = gateway
    app.state.board_watcher = board_watcher
    app.state.firm_profile = FirmProfile(firm_name=settings.firm_name, names=list(settings.firm_advocates))
    return app


app = create_app()
