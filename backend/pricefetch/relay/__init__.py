"""Price relay subsystem for CryptoPriceFetch.

Public API:
    Quote                 - Immutable USD quote dataclass
    SubscriberRegistry    - In-memory chat id -> subscribed flag map
    QuoteSource           - Abstract interface for quote providers
    CoinMarketCapQuoteSource - CoinMarketCap Pro API implementation
    PriceFetcher          - Fetch + format quotes into an HTML message
    format_prices         - HTML rendering of a list of quotes
    CommandRouter         - Telegram message handlers
    BroadcastScheduler    - Cron-driven broadcast to subscribed chats
    Settings, load_settings - Environment configuration
    create_application    - Factory wiring everything into a bot Application
"""

from .application import create_application
from .coinmarketcap import CoinMarketCapQuoteSource
from .config import Settings, load_settings
from .errors import ConfigurationError, MissingCredentialError, QuoteFetchError, RelayError
from .fetcher import PriceFetcher
from .formatting import format_prices
from .interface import QuoteSource
from .models import Quote
from .registry import SubscriberRegistry
from .router import CommandRouter
from .scheduler import BroadcastScheduler

__all__ = [
    "Quote",
    "SubscriberRegistry",
    "QuoteSource",
    "CoinMarketCapQuoteSource",
    "PriceFetcher",
    "format_prices",
    "CommandRouter",
    "BroadcastScheduler",
    "Settings",
    "load_settings",
    "create_application",
    "RelayError",
    "ConfigurationError",
    "MissingCredentialError",
    "QuoteFetchError",
]
