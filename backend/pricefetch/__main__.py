"""Entry point: ``python -m pricefetch`` or the ``pricefetch`` console script."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from .relay import ConfigurationError, create_application, load_settings

logger = logging.getLogger("pricefetch")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # python-telegram-bot logs every getUpdates poll through httpx at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main() -> int:
    load_dotenv()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Cannot start: %s", e)
        return 1

    configure_logging(settings.log_level)
    application = create_application(settings)
    application.run_polling()
    return 0


if __name__ == "__main__":
    sys.exit(main())
