"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from alchemist.core.utils.logging import (
    DEFAULT_FORMAT,
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


def _record(msg: str = "Test message", level: int = logging.INFO) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.funcName = "test_function"
    return record


@pytest.fixture
def restore_root_logger():
    """Put the root logger back after a test reconfigures it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        data = json.loads(StructuredJSONFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "test.logger"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_extra_fields_in_context(self):
        record = _record()
        record.language = "Tiki"
        data = json.loads(StructuredJSONFormatter().format(record))
        assert data["context"]["language"] == "Tiki"

    def test_exception_info(self):
        try:
            raise ValueError("bad weights")
        except ValueError:
            record = logging.LogRecord(
                "test", logging.ERROR, __file__, 1, "failed", (), exc_info=sys.exc_info()
            )
        data = json.loads(StructuredJSONFormatter().format(record))
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "bad weights"
        assert "Traceback" in data["context"]["stack_trace"]


class TestConfigureLogging:
    def test_level_and_text_format(self, restore_root_logger):
        configure_logging(level="debug")
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == DEFAULT_FORMAT

    def test_structured_file_output(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "app.jsonl"
        configure_logging(level="INFO", filename=str(log_file), structured=True)
        logging.getLogger("alchemist.test").info("hello %s", "world")
        for handler in restore_root_logger.handlers:
            handler.flush()
        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["message"] == "hello world"


class TestGetLogger:
    def test_plain_logger(self):
        assert isinstance(get_logger("alchemist.x"), logging.Logger)

    def test_adapter_with_context(self):
        adapter = get_logger("alchemist.x", language="Tiki")
        assert isinstance(adapter, logging.LoggerAdapter)
        assert adapter.extra == {"language": "Tiki"}
