"""Test suite for the logging utilities."""

import logging

from georegions.settings.base import settings
from georegions.utils.logging import setup_logging


class TestSetupLogging:
    """Test suite for the `setup_logging` function."""

    def test_dev_mode(self, mocker):
        """Test that dev mode configures the root logger."""
        mock_basic_config = mocker.patch("logging.basicConfig")
        logger = setup_logging("georegions.test_dev", "WARNING", dev_mode=True)

        mock_basic_config.assert_called_once_with(level="WARNING")
        assert logger.name == "georegions.test_dev"
        assert logger.level == logging.WARNING

    def test_debug_level(self, mocker):
        """Test that the debug level configures the root logger outside dev mode."""
        mock_basic_config = mocker.patch("logging.basicConfig")
        logger = setup_logging("georegions.test_debug", "DEBUG", dev_mode=False)

        mock_basic_config.assert_called_once_with(level="DEBUG")
        assert logger.level == logging.DEBUG

    def test_production_mode(self, mocker):
        """Test that noisy loggers are quietened outside dev mode."""
        mock_basic_config = mocker.patch("logging.basicConfig")
        logger = setup_logging("georegions.test_prod", "INFO", dev_mode=False)

        mock_basic_config.assert_not_called()
        assert logger.level == logging.INFO
        assert logging.getLogger("pycountry").level == logging.WARNING

    def test_defaults_from_settings(self, mocker, monkeypatch):
        """Test that the log level and dev mode default to the package settings."""
        monkeypatch.setattr(settings, "log_level", "ERROR")
        monkeypatch.setattr(settings, "dev_mode", True)
        mock_basic_config = mocker.patch("logging.basicConfig")
        logger = setup_logging("georegions.test_settings")

        mock_basic_config.assert_called_once_with(level="ERROR")
        assert logger.level == logging.ERROR

    def test_explicit_values_override_settings(self, mocker, monkeypatch):
        """Test that explicit arguments take precedence over the package settings."""
        monkeypatch.setattr(settings, "dev_mode", True)
        mock_basic_config = mocker.patch("logging.basicConfig")
        logger = setup_logging("georegions.test_override", "WARNING", dev_mode=False)

        mock_basic_config.assert_not_called()
        assert logger.level == logging.WARNING
