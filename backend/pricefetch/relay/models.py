"""Data models for price quotes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Quote:
    """Immutable USD quote for one asset. Built per request, never stored."""

    symbol: str
    price: float
    percent_change_24h: float

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Quote:
        """Build a Quote from one value of the API's ``data`` object.

        Expected shape::

            {"symbol": "BTC", "quote": {"USD": {"price": 1.0, "percent_change_24h": 0.5}}}

        Raises KeyError or TypeError when the record does not have that shape.
        """
        usd = record["quote"]["USD"]
        return cls(
            symbol=str(record["symbol"]),
            price=float(usd["price"]),
            percent_change_24h=float(usd["percent_change_24h"]),
        )

