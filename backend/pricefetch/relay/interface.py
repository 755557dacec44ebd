"""Abstract interface for quote providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .models import Quote


class QuoteSource(ABC):
    """Contract for price-quote providers.

    Sources are pulled on demand: a command handler or a scheduler firing
    asks for the chains it needs and formats whatever comes back. Nothing is
    cached between calls.

    Lifecycle:
        source = CoinMarketCapQuoteSource(api_key)
        quotes = await source.get_quotes(["bitcoin", "solana"])
        # ... app shutting down ...
        await source.close()
    """

    @abstractmethod
    async def get_quotes(self, chains: Sequence[str]) -> list[Quote]:
        """Fetch the latest quote for each requested chain in one request.

        Returns quotes in the order the provider lists them. Chains the
        provider does not answer for are left out rather than reported.

        Raises QuoteFetchError on network failure, non-2xx status or an
        unexpected payload. Never retries.
        """

    @abstractmethod
    async def close(self) -> None:
        """Release HTTP resources. Safe to call multiple times."""
