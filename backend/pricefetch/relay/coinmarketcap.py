"""CoinMarketCap Pro API client for latest quotes."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import Any

import requests

from .errors import QuoteFetchError
from .interface import QuoteSource
from .models import Quote

logger = logging.getLogger(__name__)

QUOTES_URL = "https://pro-api.coinmarketcap.com/v2/cryptocurrency/quotes/latest"
API_KEY_HEADER = "X-CMC_PRO_API_KEY"


class CoinMarketCapQuoteSource(QuoteSource):
    """QuoteSource backed by GET /v2/cryptocurrency/quotes/latest.

    All requested chains go out in a single call as ``slug=a,b,c``. The
    response's ``data`` object is keyed by asset id; its values are the quote
    records, read in the order the JSON object lists them.
    """

    def __init__(
        self,
        api_key: str,
        url: str = QUOTES_URL,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self._api_key = api_key
        self._url = url
        self._session_factory = session_factory

    async def get_quotes(self, chains: Sequence[str]) -> list[Quote]:
        # requests is synchronous, so run it in a thread to keep the event loop free.
        payload = await asyncio.to_thread(self._fetch_latest, list(chains))
        return self._parse(payload, chains)

    async def close(self) -> None:
        # Sessions live for one request only; nothing is held between calls.
        return None

    # --- Internal ---

    def _fetch_latest(self, chains: list[str]) -> Any:
        """Synchronous call to the quotes endpoint. Runs in a thread.

        Concurrent fetches run in separate worker threads, and requests.Session
        is not thread-safe, so every call opens and closes its own session.
        """
        try:
            with self._session_factory() as session:
                resp = session.get(
                    self._url,
                    headers={API_KEY_HEADER: self._api_key},
                    params={"slug": ",".join(chains)},
                )
                resp.raise_for_status()
                return resp.json()
        except requests.RequestException as e:
            # HTTPError, ConnectionError and JSON decode errors all land here
            raise QuoteFetchError(f"Quote request for {','.join(chains)} failed: {e}") from e

    @staticmethod
    def _parse(payload: Any, chains: Sequence[str]) -> list[Quote]:
        try:
            records = payload["data"].values()
            quotes = [Quote.from_record(record) for record in records]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise QuoteFetchError(f"Unexpected quote payload: {e!r}") from e

        if len(quotes) < len(set(chains)):
            logger.debug("Quote API answered %d of %d requested chains", len(quotes), len(set(chains)))
        return quotes
