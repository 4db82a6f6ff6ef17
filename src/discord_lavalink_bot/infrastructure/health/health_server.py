"""Unauthenticated liveness endpoint for hosting platforms."""

from __future__ import annotations

import logging

from aiohttp import web

from ...domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

HEALTH_RESPONSE = "Bot is running."


async def handle_root(request: web.Request) -> web.Response:
    return web.Response(text=HEALTH_RESPONSE)


def build_app() -> web.Application:
    app = web.Application()
    app.router.add_get("/", handle_root)
    return app


class HealthServer:
    """Serves ``GET /`` on its own aiohttp runner inside the bot's event loop."""

    def __init__(self, *, host: str = "0.0.0.0", port: int = 3000) -> None:
        self._host = host
        self._port = port
        self._runner: web.AppRunner | None = None

    @property
    def is_running(self) -> bool:
        return self._runner is not None

    async def start(self) -> None:
        if self._runner is not None:
            return
        runner = web.AppRunner(build_app(), access_log=None)
        await runner.setup()
        site = web.TCPSite(runner, self._host, self._port)
        try:
            await site.start()
        except OSError:
            await runner.cleanup()
            raise
        self._runner = runner
        logger.info(LogTemplates.HEALTH_LISTENING, self._host, self._port)

    async def stop(self) -> None:
        if self._runner is None:
            return
        await self._runner.cleanup()
        self._runner = None
        logger.info(LogTemplates.HEALTH_STOPPED)
