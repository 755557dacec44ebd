"""CryptoPriceFetch: Telegram relay for hourly crypto price notifications."""

__version__ = "0.1.0"
