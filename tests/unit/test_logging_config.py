"""Unit tests for logging setup."""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from presenter_hub.utils.logging_config import JsonFormatter, get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("presenter_hub.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Tests for JSON log rendering."""

    def test_basic_fields(self):
        payload = json.loads(JsonFormatter().format(_record()))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "presenter_hub.test"
        assert payload["message"] == "hello world"
        assert "timestamp" in payload

    def test_extra_fields_included(self):
        payload = json.loads(JsonFormatter().format(_record(deck_id="d1", slide_count=3)))

        assert payload["deck_id"] == "d1"
        assert payload["slide_count"] == 3
        assert "args" not in payload

    def test_exception(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        payload = json.loads(JsonFormatter().format(record))
        assert "ValueError: bad" in payload["exception"]


class TestSetupLogging:
    """Tests for root logger configuration."""

    def test_console_only(self, restore_root_logger):
        setup_logging(level="debug", log_format="json")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)

    def test_rotating_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "app.log"

        setup_logging(level="INFO", log_file=str(log_file), max_file_size_mb=1, backup_count=2)
        get_logger("presenter_hub.test").info("written")
        for handler in restore_root_logger.handlers:
            handler.flush()

        file_handlers = [h for h in restore_root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].backupCount == 2
        assert "written" in log_file.read_text(encoding="utf-8")
