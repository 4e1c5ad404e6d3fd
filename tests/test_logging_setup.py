"""
Test suite for logging configuration.
"""

from unittest.mock import patch

from txfeed.config import config
from txfeed.logging.setup import configure_logging


class TestConfigureLogging:
    """Sink level selection."""

    def test_level_defaults_to_configuration(self, monkeypatch):
        monkeypatch.setattr(config, "log_level", "warning")

        with patch("txfeed.logging.setup.logger") as mock_logger:
            configure_logging()

        assert mock_logger.add.call_args.kwargs["level"] == "WARNING"

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setattr(config, "log_level", "warning")

        with patch("txfeed.logging.setup.logger") as mock_logger:
            configure_logging("debug")

        assert mock_logger.add.call_args.kwargs["level"] == "DEBUG"
