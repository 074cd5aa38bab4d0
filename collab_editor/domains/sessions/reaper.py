import asyncio
import logging
from typing import Optional

from collab_editor.domains.sessions.services import SessionService

logger = logging.getLogger(__name__)


class SessionReaper:
    """Фоновая задача, периодически завершающая неактивные сессии"""

    def __init__(self, service: SessionService, interval_seconds: float):
        self.service = service
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="session-reaper")
        logger.info(f"Session reaper started (every {self.interval_seconds}s)")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Session reaper stopped")

    async def run_once(self) -> int:
        return await self.service.reap_expired()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await self.run_once()
            except Exception as e:
                # следующий проход повторит попытку
                logger.exception(f"Session reaper pass failed: {e}")
