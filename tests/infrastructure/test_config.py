"""Tests for settings and logging setup."""

from unittest.mock import patch

import structlog

from catalog_console.infrastructure.config import Settings
from catalog_console.infrastructure.logging import configure_logging


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self) -> None:
        """Defaults serve the sample catalog with timestamp ids."""
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.product_backend_url is None
        assert settings.id_strategy == "timestamp"
        assert settings.validate_prices is True
        assert settings.category_placeholder_image == "/placeholder.svg"
        assert settings.draft_session_ttl_minutes == 120

    def test_environment_overrides(self) -> None:
        """Settings are read from environment variables."""
        env_vars = {
            "PRODUCT_BACKEND_URL": "http://backend:5000",
            "ID_STRATEGY": "sequential",
            "VALIDATE_PRICES": "false",
            "LOG_LEVEL": "debug",
        }
        with patch.dict("os.environ", env_vars, clear=False):
            settings = Settings(_env_file=None)

        assert settings.product_backend_url == "http://backend:5000"
        assert settings.id_strategy == "sequential"
        assert settings.validate_prices is False
        assert settings.log_level == "debug"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_output(self) -> None:
        """Loggers work after configuration."""
        configure_logging(level="debug", json_output=False)
        structlog.get_logger("test").info("configured", check=True)
        assert structlog.is_configured()

    def test_json_output(self) -> None:
        """JSON rendering is the default for deployments."""
        configure_logging(level="INFO", json_output=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
