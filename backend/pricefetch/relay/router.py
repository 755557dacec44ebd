"""Telegram command routing for the price relay."""

from __future__ import annotations

import logging
import re

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import BaseHandler, ContextTypes, MessageHandler, filters

from .assets import SELECT_CHAIN_TEXT, SUBSCRIBED_TEXT, SUPPORTED_CHAINS, UNSUBSCRIBED_TEXT, chain_keyboard
from .fetcher import PriceFetcher
from .registry import SubscriberRegistry

logger = logging.getLogger(__name__)

_CHAIN_ALTERNATION = "|".join(sorted(SUPPORTED_CHAINS))

START_PATTERN = re.compile(r"/start")
STOP_PATTERN = re.compile(r"/stop")
AVAX_PATTERN = re.compile(r"/avax")
PRICE_PATTERN = re.compile(rf"/price ({_CHAIN_ALTERNATION})")
PRICES_PATTERN = re.compile(r"/prices")
# Keyboard buttons come back as "Avalanche", "Bitcoin", ...
PLAIN_CHAIN_PATTERN = re.compile(rf"\A(?:{_CHAIN_ALTERNATION})\Z", re.IGNORECASE)


class CommandRouter:
    """Maps inbound chat messages to relay actions.

    Handlers are returned in priority order and are meant to live in a single
    handler group, so the first one whose pattern matches a message wins.
    Patterns are searched anywhere in the text. Messages without text never
    match and get no reply.
    """

    def __init__(self, registry: SubscriberRegistry, fetcher: PriceFetcher) -> None:
        self._registry = registry
        self._fetcher = fetcher

    def handlers(self) -> list[BaseHandler]:
        """Message handlers in match priority order."""
        new_messages = filters.UpdateType.MESSAGE
        return [
            MessageHandler(filters.Regex(START_PATTERN) & new_messages, self.start),
            MessageHandler(filters.Regex(STOP_PATTERN) & new_messages, self.stop),
            MessageHandler(filters.Regex(AVAX_PATTERN) & new_messages, self.avax),
            MessageHandler(filters.Regex(PRICE_PATTERN) & new_messages, self.price),
            MessageHandler(filters.Regex(PRICES_PATTERN) & new_messages, self.prices_menu),
            MessageHandler(filters.Regex(PLAIN_CHAIN_PATTERN) & new_messages, self.plain_text),
        ]

    # --- Handlers ---

    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        chat_id = update.effective_chat.id
        self._registry.subscribe(chat_id)
        logger.info("Chat %s subscribed", chat_id)
        await context.bot.send_message(chat_id=chat_id, text=SUBSCRIBED_TEXT)

    async def stop(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        chat_id = update.effective_chat.id
        self._registry.unsubscribe(chat_id)
        logger.info("Chat %s unsubscribed", chat_id)
        await context.bot.send_message(chat_id=chat_id, text=UNSUBSCRIBED_TEXT)

    async def avax(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._reply_prices(update, context, "avalanche")

    async def price(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """/price <chain>. The chain is the regex's first group."""
        chain = context.matches[0].group(1)
        await self._reply_prices(update, context, chain)

    async def prices_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await context.bot.send_message(
            chat_id=update.effective_chat.id,
            text=SELECT_CHAIN_TEXT,
            reply_markup=chain_keyboard(),
        )

    async def plain_text(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Bare chain name, in any letter case."""
        text = (update.effective_message.text or "").lower()
        if text not in SUPPORTED_CHAINS:
            return
        await self._reply_prices(update, context, text)

    async def _reply_prices(self, update: Update, context: ContextTypes.DEFAULT_TYPE, chain: str) -> None:
        # A QuoteFetchError propagates to error_handler and the chat gets no reply.
        text = await self._fetcher.fetch([chain])
        await context.bot.send_message(
            chat_id=update.effective_chat.id,
            text=text,
            parse_mode=ParseMode.HTML,
        )


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log exceptions raised by handlers. Nothing is sent back to the chat."""
    logger.error("Update %s caused error", update, exc_info=context.error)
