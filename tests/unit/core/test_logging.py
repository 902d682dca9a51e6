"""Unit tests for logging configuration."""

import logging

from app.core.config import Settings
from app.core.logging import CorrelationIdFilter, correlation_id_ctx, get_logging_config


def make_record() -> logging.LogRecord:
    return logging.LogRecord("app.test", logging.INFO, __file__, 1, "hello", None, None)


class TestCorrelationIdFilter:
    def test_uses_context_value(self):
        token = correlation_id_ctx.set("req-1")
        try:
            record = make_record()
            CorrelationIdFilter().filter(record)
        finally:
            correlation_id_ctx.reset(token)

        assert record.correlation_id == "req-1"

    def test_outside_request(self):
        record = make_record()
        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "no-request-id"


class TestLoggingConfig:
    def test_json_format_selects_json_formatter(self):
        config = get_logging_config(Settings(_env_file=None, log_format="json"))

        assert config["handlers"]["console"]["formatter"] == "json"
        assert "file" not in config["handlers"]

    def test_file_handlers_added_when_enabled(self, tmp_path):
        config = get_logging_config(
            Settings(
                _env_file=None,
                log_file_enabled=True,
                log_file_path=str(tmp_path / "app.log"),
            )
        )

        assert config["handlers"]["file"]["filename"] == str(tmp_path / "app.log")
        assert config["handlers"]["error_file"]["level"] == "ERROR"
        assert "file" in config["root"]["handlers"]
