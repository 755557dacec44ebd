"""Wiring of the relay components into a python-telegram-bot Application."""

from __future__ import annotations

import logging

from telegram.ext import Application

from .assets import BOT_COMMANDS
from .coinmarketcap import CoinMarketCapQuoteSource
from .config import Settings
from .fetcher import PriceFetcher
from .registry import SubscriberRegistry
from .router import CommandRouter, error_handler
from .scheduler import BroadcastScheduler

logger = logging.getLogger(__name__)


def create_application(
    settings: Settings,
    registry: SubscriberRegistry | None = None,
) -> Application:
    """Build the bot application with its router, scheduler and quote source.

    The registry is created here unless one is injected, so the router and
    the scheduler always share the same instance. The scheduler is started in
    post_init (inside the running loop) and stopped in post_shutdown.
    """
    registry = registry if registry is not None else SubscriberRegistry()
    source = CoinMarketCapQuoteSource(api_key=settings.coinmarketcap_api_key, url=settings.quotes_url)
    fetcher = PriceFetcher(source)
    router = CommandRouter(registry, fetcher)

    async def post_init(application: Application) -> None:
        await application.bot.set_my_commands(BOT_COMMANDS)
        scheduler = BroadcastScheduler(
            fetcher,
            registry,
            application.bot,
            cron=settings.broadcast_cron,
            timezone=settings.broadcast_timezone,
        )
        scheduler.start()
        application.bot_data["scheduler"] = scheduler
        logger.info("Bot started and cron scheduled")

    async def post_shutdown(application: Application) -> None:
        scheduler = application.bot_data.pop("scheduler", None)
        if scheduler is not None:
            scheduler.stop()
        await source.close()

    application = (
        Application.builder()
        .token(settings.telegram_token)
        .post_init(post_init)
        .post_shutdown(post_shutdown)
        # A hung quote fetch must only stall its own update, not the whole bot.
        .concurrent_updates(True)
        .build()
    )
    application.add_handlers(router.handlers())
    application.add_error_handler(error_handler)
    return application
