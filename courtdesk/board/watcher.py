"""
Periodic refresh of the live display board.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Optional

from courtdesk.models import CourtCode, DisplayBoardState

logger = logging.getLogger(__name__)


class DisplayBoardWatcher:
    """Keeps at most one polling task alive for the selected jurisdiction.

    Switching courts or stopping cancels the running task before anything new
    is scheduled, so two polls never overlap. A fetch that completes after the
    selection moved on is dropped instead of overwriting ``latest``.
    """

    def __init__(self, gateway, interval: float = 60.0) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.gateway = gateway
        self.interval = interval
        self.court: Optional[CourtCode] = None
        self.latest: Optional[DisplayBoardState] = None
        self._task: Optional[asyncio.Task] = None
        self._in_flight = 0
        self._lock = asyncio.Lock()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    async def watch(self, court: CourtCode | str) -> CourtCode:
        court = CourtCode(court)
        # serialised so overlapping requests apply in call order
        async with self._lock:
            if court == self.court and self.running:
                return court
            await self._cancel()
            self.court = court
            self.latest = None
            self._task = asyncio.create_task(self._poll(court), name=f"display-board-{court.value}")
        logger.info("Watching display board for %s every %ss", court.value, self.interval)
        return court

    async def stop(self) -> None:
        """Cancel polling and clear the selection."""
        async with self._lock:
            await self._cancel()

    async def _cancel(self) -> None:
        task, self._task = self._task, None
        court, self.court = self.court, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Stopped display board polling for %s", court.value if court else "-")

    async def refresh(self) -> Optional[DisplayBoardState]:
        """Fetch the board for the selected court now."""
        court = self.court
        if court is None:
            return None
        self._in_flight += 1
        try:
            state = await asyncio.to_thread(self.gateway.get_live_court_board, court)
        finally:
            self._in_flight -= 1
        if court != self.court:
            logger.debug("Dropping stale board for %s", court.value)
            return None
        self.latest = state
        return state

    async def _poll(self, court: CourtCode) -> None:
        while self.court == court:
            try:
                await self.refresh()
            except Exception:
                logger.exception("Display board refresh failed for %s", court.value)
            await asyncio.sleep(self.interval)
