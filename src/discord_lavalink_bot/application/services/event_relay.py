"""Relay lifecycle notifications from the audio layer to chat channels."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

from ...domain.music.events import (
    LifecycleNotification,
    NodeConnected,
    NodeErrored,
    QueueEnded,
    TrackStarted,
)
from ...domain.shared.constants import LimitConstants
from ...domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ..interfaces.notifier import Notifier
    from .reply_formatter import ReplyFormatter
    from .session_manager import SessionManager

logger = logging.getLogger(__name__)


class EventRelay:
    """Consumes notifications from a bounded queue in a single task.

    Delivery is at most once: a full queue drops the notification, and a
    failure while handling one is logged and the loop moves on.
    """

    def __init__(
        self,
        *,
        session_manager: SessionManager,
        formatter: ReplyFormatter,
        notifier: Notifier,
        maxsize: int = LimitConstants.EVENT_RELAY_QUEUE_SIZE,
    ) -> None:
        self._sessions = session_manager
        self._formatter = formatter
        self._notifier = notifier
        self._queue: asyncio.Queue[LifecycleNotification] = asyncio.Queue(maxsize=maxsize)
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def publish(self, notification: LifecycleNotification) -> bool:
        """Queue a notification without waiting. Returns False when dropped."""
        try:
            self._queue.put_nowait(notification)
        except asyncio.QueueFull:
            logger.warning(LogTemplates.RELAY_DROPPED, type(notification).__name__)
            return False
        return True

    def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.create_task(self._run(), name="event-relay")
        logger.info(LogTemplates.RELAY_STARTED)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info(LogTemplates.RELAY_STOPPED)

    async def drain(self) -> None:
        """Handle everything currently queued, in order, without the background task."""
        while not self._queue.empty():
            notification = self._queue.get_nowait()
            try:
                await self._dispatch(notification)
            finally:
                self._queue.task_done()

    async def _run(self) -> None:
        while True:
            notification = await self._queue.get()
            try:
                await self._dispatch(notification)
            finally:
                self._queue.task_done()

    async def _dispatch(self, notification: LifecycleNotification) -> None:
        try:
            await self._handle(notification)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception(LogTemplates.RELAY_HANDLER_FAILED, type(notification).__name__)

    async def _handle(self, notification: LifecycleNotification) -> None:
        match notification:
            case NodeConnected():
                logger.info(LogTemplates.NODE_CONNECTED, notification.node_name, notification.resumed)
            case NodeErrored():
                logger.error(LogTemplates.NODE_ERROR, notification.node_name, notification.error)
            case TrackStarted():
                await self._on_track_started(notification)
            case QueueEnded():
                await self._on_queue_ended(notification)

    async def _on_track_started(self, event: TrackStarted) -> None:
        session = self._sessions.get(event.guild_id)
        if session is None:
            logger.debug(LogTemplates.RELAY_NO_CHANNEL, event.guild_id, "TrackStarted")
            return
        await self._notifier.send(session.text_channel_id, self._formatter.now_playing(event.track))

    async def _on_queue_ended(self, event: QueueEnded) -> None:
        session = self._sessions.get(event.guild_id)
        if session is None:
            logger.debug(LogTemplates.RELAY_QUEUE_END_NO_SESSION, event.guild_id)
            return

        # A play handled after the track ended may have restarted this session.
        if not session.is_idle or session.queue:
            logger.debug(LogTemplates.RELAY_QUEUE_END_STALE, event.guild_id)
            return

        channel_id = session.text_channel_id
        try:
            await self._sessions.destroy(event.guild_id)
        except Exception as exc:
            logger.warning(LogTemplates.SESSION_DESTROY_FAILED, event.guild_id, exc)
        await self._notifier.send(channel_id, self._formatter.queue_ended())
