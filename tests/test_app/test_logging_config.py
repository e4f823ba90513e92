"""Tests for structlog configuration."""

import logging

import pytest
import structlog

from cygnus.logging_config import LOG_FORMATS, configure_logging


@pytest.fixture(autouse=True)
def restore_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    @pytest.mark.parametrize("log_format", LOG_FORMATS)
    def test_formats(self, log_format):
        """Both output formats configure cleanly."""
        configure_logging("INFO", log_format)
        assert structlog.is_configured()

    def test_level_is_case_insensitive(self):
        """Level names are matched regardless of case."""
        configure_logging("debug", "console")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level(self):
        """An unknown level is rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD", "console")

    def test_unknown_format(self):
        """An unknown format is rejected."""
        with pytest.raises(ValueError, match="Unknown log format"):
            configure_logging("INFO", "xml")

    def test_json_output(self, capsys):
        """JSON logs are written to stderr one object per line."""
        configure_logging("INFO", "json")
        structlog.get_logger("cygnus.test").info("sheet_rendered", character="Sigma")

        err = capsys.readouterr().err
        assert '"event": "sheet_rendered"' in err
        assert '"character": "Sigma"' in err
