"""HTML rendering of quotes for Telegram messages."""

from collections.abc import Iterable

from .models import Quote

HEADER = "<u><b>Prices:</b></u>\n\n"


def format_quote(quote: Quote) -> str:
    return f"<b>{quote.symbol}:</b> {quote.price:.2f} (24h change: {quote.percent_change_24h:.2f}%)\n"


def format_prices(quotes: Iterable[Quote]) -> str:
    """Header plus one line per quote. No quotes gives just the header."""
    return HEADER + "".join(format_quote(q) for q in quotes)
