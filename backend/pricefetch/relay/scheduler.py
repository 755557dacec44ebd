"""Cron-driven price broadcast to subscribed chats."""

from __future__ import annotations

import logging
from datetime import datetime

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
from telegram import Bot
from telegram.constants import ParseMode
from telegram.error import TelegramError

from .assets import ALL_CHAINS
from .config import DEFAULT_BROADCAST_CRON
from .errors import QuoteFetchError
from .fetcher import PriceFetcher
from .registry import SubscriberRegistry

logger = logging.getLogger(__name__)

JOB_ID = "price-broadcast"


class BroadcastScheduler:
    """Sends the full price list to every subscribed chat on a cron schedule.

    Each firing fetches ALL_CHAINS once and pushes the same message to the
    active sessions one after another. If the fetch fails nobody gets a
    message for that firing; there is no cached fallback.

    Lifecycle:
        scheduler = BroadcastScheduler(fetcher, registry, bot)
        scheduler.start()   # needs a running event loop
        # ... app runs ...
        scheduler.stop()
    """

    def __init__(
        self,
        fetcher: PriceFetcher,
        registry: SubscriberRegistry,
        bot: Bot,
        cron: str = DEFAULT_BROADCAST_CRON,
        timezone: str | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._registry = registry
        self._bot = bot
        self._trigger = CronTrigger.from_crontab(cron, timezone=timezone)
        self._scheduler = AsyncIOScheduler(timezone=timezone) if timezone else AsyncIOScheduler()
        self._firing = False

    @property
    def state(self) -> str:
        """'firing' while a broadcast is in progress, otherwise 'idle'."""
        return "firing" if self._firing else "idle"

    @property
    def running(self) -> bool:
        return self._scheduler.running

    def start(self) -> None:
        self._scheduler.add_job(
            self.broadcast,
            self._trigger,
            id=JOB_ID,
            replace_existing=True,
            coalesce=True,
            max_instances=1,
        )
        self._scheduler.start()
        logger.info("Broadcast scheduled: %s", self._trigger)

    def stop(self) -> None:
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
            logger.info("Broadcast scheduler stopped")

    def next_run_time(self) -> datetime | None:
        """Datetime of the next firing, or None if not started."""
        job = self._scheduler.get_job(JOB_ID)
        return job.next_run_time if job else None

    async def broadcast(self) -> int:
        """Run one firing. Returns the number of chats that received the message."""
        self._firing = True
        try:
            try:
                text = await self._fetcher.fetch(ALL_CHAINS)
            except QuoteFetchError:
                logger.exception("Broadcast skipped: price fetch failed")
                return 0

            sent = 0
            for chat_id in self._registry.active_sessions():
                try:
                    await self._bot.send_message(chat_id=chat_id, text=text, parse_mode=ParseMode.HTML)
                    sent += 1
                except TelegramError as e:
                    # Blocked bot, deleted chat, ... The other chats still get theirs.
                    logger.warning("Broadcast to chat %s failed: %s", chat_id, e)
            logger.info("Broadcast delivered to %d chats", sent)
            return sent
        finally:
            self._firing = False
