"""Supported chains and the static chat-facing texts of the bot."""

from telegram import BotCommand, ReplyKeyboardMarkup

# Lookup slugs accepted by the quote API
SUPPORTED_CHAINS: frozenset[str] = frozenset({"avalanche", "ethereum", "solana", "bitcoin"})

# Broadcast set, in the order the hourly message requests them
ALL_CHAINS: tuple[str, ...] = ("avalanche", "solana", "bitcoin", "ethereum")

SUBSCRIBED_TEXT = "You have successfully subscribed to CryptoPriceFetch bot!"
UNSUBSCRIBED_TEXT = "You have successfully unsubscribed from CryptoPriceFetch bot!"
SELECT_CHAIN_TEXT = "Please select chain:"

# Two buttons per row; tapping one sends the label back as plain text
CHAIN_KEYBOARD_LAYOUT: list[list[str]] = [
    ["Avalanche", "Solana"],
    ["Bitcoin", "Ethereum"],
]


def chain_keyboard() -> ReplyKeyboardMarkup:
    """Reply keyboard offered by /prices."""
    return ReplyKeyboardMarkup(
        CHAIN_KEYBOARD_LAYOUT,
        resize_keyboard=True,
        one_time_keyboard=True,
    )


BOT_COMMANDS: list[BotCommand] = [
    BotCommand("start", "Subscribe to hourly prices notifications."),
    BotCommand("stop", "Stop receiving price notifications."),
    BotCommand("prices", "Choose from options which chain price you want to receive."),
    BotCommand(
        "price",
        "Type chain name and receive price (avalanche, solana, bitcoin, ethereum).",
    ),
]
