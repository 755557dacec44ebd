"""Fixtures for relay tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from pricefetch.relay.fetcher import PriceFetcher
from pricefetch.relay.interface import QuoteSource
from pricefetch.relay.models import Quote
from pricefetch.relay.registry import SubscriberRegistry

STATIC_QUOTES: dict[str, Quote] = {
    "avalanche": Quote(symbol="AVAX", price=35.129, percent_change_24h=2.5),
    "ethereum": Quote(symbol="ETH", price=3120.5, percent_change_24h=-0.456),
    "solana": Quote(symbol="SOL", price=145.0, percent_change_24h=4.0),
    "bitcoin": Quote(symbol="BTC", price=65432.1, percent_change_24h=-1.234),
}


class StaticQuoteSource(QuoteSource):
    """In-memory QuoteSource. Records every request it receives."""

    def __init__(self, quotes: dict[str, Quote] | None = None) -> None:
        self.quotes = dict(STATIC_QUOTES if quotes is None else quotes)
        self.requests: list[list[str]] = []
        self.closed = False

    async def get_quotes(self, chains: Sequence[str]) -> list[Quote]:
        self.requests.append(list(chains))
        return [self.quotes[c] for c in chains if c in self.quotes]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def quote_source() -> StaticQuoteSource:
    return StaticQuoteSource()


@pytest.fixture
def fetcher(quote_source: StaticQuoteSource) -> PriceFetcher:
    return PriceFetcher(quote_source)


@pytest.fixture
def registry() -> SubscriberRegistry:
    return SubscriberRegistry()


@pytest.fixture
def bitcoin_payload() -> dict:
    return {
        "data": {
            "bitcoin": {
                "symbol": "BTC",
                "quote": {"USD": {"price": 65432.1, "percent_change_24h": -1.234}},
            }
        }
    }
