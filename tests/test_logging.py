"""Tests for logging configuration."""

import json

import pytest
import structlog

from signal_connections.config import RegistryConfig
from signal_connections.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Test structlog setup."""

    def test_json_output(self, capsys):
        """JSON format renders one object per line with level and timestamp."""
        configure_logging(level="INFO", fmt="json")

        get_logger(__name__).info("connection_registered", watched=True)

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["event"] == "connection_registered"
        assert entry["watched"] is True
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_level_filtering(self, capsys):
        """Entries below the configured level are dropped."""
        configure_logging(level="WARNING", fmt="json")

        get_logger(__name__).info("hidden")
        get_logger(__name__).error("unsubscribe_failed")

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["event"] == "unsubscribe_failed"

    def test_defaults_from_config(self, capsys):
        """Level and format fall back to the given configuration."""
        configure_logging(cfg=RegistryConfig(log_level="ERROR", log_format="json"))

        get_logger(__name__).warning("hidden")

        assert capsys.readouterr().out == ""

    def test_unknown_level(self):
        """Unknown level names raise."""
        with pytest.raises(ValueError):
            configure_logging(level="LOUD")

    def test_unknown_format(self):
        """Unknown format names raise instead of falling back to console."""
        with pytest.raises(ValueError):
            configure_logging(level="INFO", fmt="xml")

    def test_bound_context(self, capsys):
        """get_logger binds extra context."""
        configure_logging(level="DEBUG", fmt="json")

        get_logger(__name__, component="connections").debug("connection_removed")

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["component"] == "connections"
