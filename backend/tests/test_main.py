"""Tests for the command-line entry point."""

import logging
import os
from unittest.mock import MagicMock, patch

from pricefetch import __main__ as entry


class TestMain:
    """Tests for pricefetch.__main__.main."""

    def test_missing_credentials_exit_code(self, caplog):
        """Test that missing secrets stop startup before any bot is built."""
        with (
            patch.dict(os.environ, {}, clear=True),
            patch.object(entry, "load_dotenv"),
            patch.object(entry, "create_application") as mock_create,
            caplog.at_level(logging.ERROR, logger="pricefetch"),
        ):
            assert entry.main() == 1

        mock_create.assert_not_called()
        assert "TELEGRAM_API_KEY" in caplog.text

    def test_invalid_log_level_exit_code(self, caplog):
        """Test that a bad LOG_LEVEL stops startup cleanly instead of crashing."""
        env = {"TELEGRAM_API_KEY": "123456:abc", "COINMARKETCAP_API_KEY": "cmc-key", "LOG_LEVEL": "VERBOSE"}

        with (
            patch.dict(os.environ, env, clear=True),
            patch.object(entry, "load_dotenv"),
            patch.object(entry, "create_application") as mock_create,
            caplog.at_level(logging.ERROR, logger="pricefetch"),
        ):
            assert entry.main() == 1

        mock_create.assert_not_called()
        assert "LOG_LEVEL" in caplog.text

    def test_runs_polling(self):
        """Test that a configured process builds the app and starts polling."""
        application = MagicMock()
        env = {"TELEGRAM_API_KEY": "123456:abc", "COINMARKETCAP_API_KEY": "cmc-key"}

        with (
            patch.dict(os.environ, env, clear=True),
            patch.object(entry, "load_dotenv"),
            patch.object(entry, "configure_logging") as mock_logging,
            patch.object(entry, "create_application", return_value=application) as mock_create,
        ):
            assert entry.main() == 0

        mock_logging.assert_called_once_with("INFO")
        settings = mock_create.call_args.args[0]
        assert settings.telegram_token == "123456:abc"
        application.run_polling.assert_called_once_with()

    def test_configure_logging_quiets_httpx(self):
        """Test that the httpx poll logger is raised to WARNING."""
        with patch.object(logging, "basicConfig"):
            entry.configure_logging("DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
