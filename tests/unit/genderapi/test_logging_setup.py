"""
Tests for logging configuration
"""
import json
import logging

import pytest

from genderapi.config import Settings
from genderapi.logging import ROOT_LOGGER_NAME, CustomJsonFormatter, LoggerAdapter, get_logger, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


class TestSetupLogging:
    def test_null_handler_installed_on_import(self):
        handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers

        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_text_format(self, package_logger):
        setup_logging(Settings(_env_file=None, log_level="DEBUG", log_format="text"))

        stream_handlers = [h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1
        assert not isinstance(stream_handlers[0].formatter, CustomJsonFormatter)
        assert package_logger.level == logging.DEBUG

    def test_json_format(self, package_logger):
        setup_logging(Settings(_env_file=None, log_format="json"))

        stream_handlers = [h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)]
        assert isinstance(stream_handlers[0].formatter, CustomJsonFormatter)

    def test_repeated_setup_does_not_stack_handlers(self, package_logger):
        settings = Settings(_env_file=None)

        setup_logging(settings)
        setup_logging(settings)

        stream_handlers = [h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1

    def test_root_logger_untouched(self, package_logger):
        root_handlers = logging.getLogger().handlers[:]

        setup_logging(Settings(_env_file=None))

        assert logging.getLogger().handlers == root_handlers


class TestJsonFormatter:
    def test_adds_custom_fields(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s", environment="staging")
        record = logging.LogRecord("genderapi.dispatcher", logging.INFO, __file__, 1, "sent", None, None)

        output = json.loads(formatter.format(record))

        assert output["message"] == "sent"
        assert output["level"] == "INFO"
        assert output["logger"] == "genderapi.dispatcher"
        assert output["app"] == "genderapi"
        assert output["environment"] == "staging"
        assert "timestamp" in output


class TestLoggerAdapter:
    def test_get_logger_returns_adapter_with_context(self):
        logger = get_logger("genderapi.test", endpoint="/api")

        assert isinstance(logger, LoggerAdapter)
        assert logger.extra == {"endpoint": "/api"}

    def test_with_context_extends_without_mutating(self):
        logger = get_logger("genderapi.test", endpoint="/api")

        child = logger.with_context(attempt=1)

        assert child.extra == {"endpoint": "/api", "attempt": 1}
        assert logger.extra == {"endpoint": "/api"}

    def test_context_reaches_records(self, caplog):
        logger = get_logger("genderapi.test", endpoint="/api/email")

        with caplog.at_level(logging.INFO, logger="genderapi"):
            logger.info("hello", extra={"status_code": 200})

        record = caplog.records[-1]
        assert record.endpoint == "/api/email"
        assert record.status_code == 200
