"""Turns a list of chains into a ready-to-send price message."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .formatting import format_prices
from .interface import QuoteSource

logger = logging.getLogger(__name__)


class PriceFetcher:
    """Fetch quotes from a QuoteSource and render them as HTML.

    Failures from the source (QuoteFetchError) propagate to the caller, which
    decides whether to drop the reply or skip a broadcast.
    """

    def __init__(self, source: QuoteSource) -> None:
        self._source = source

    async def fetch(self, chains: Sequence[str]) -> str:
        """Return the formatted price message for ``chains``.

        Duplicates are passed through to the source unchanged.
        """
        if not chains:
            raise ValueError("at least one chain is required")
        quotes = await self._source.get_quotes(chains)
        logger.debug("Fetched %d quotes for %s", len(quotes), ",".join(chains))
        return format_prices(quotes)
