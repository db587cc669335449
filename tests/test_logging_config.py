"""Tests for devcon.logging_config — configure_logging."""
import json
import logging

import pytest

from devcon.logging_config import configure_logging


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    saved = (list(root.handlers), root.level)
    yield root
    root.handlers = saved[0]
    root.setLevel(saved[1])


class TestConfigureLogging:
    def test_text_format(self, restore_root):
        handler = configure_logging("info", "text")
        assert restore_root.level == logging.INFO
        assert restore_root.handlers == [handler]
        rec = logging.LogRecord("devcon", logging.INFO, __file__, 1, "hi %s", ("there",), None)
        assert "INFO devcon: hi there" in handler.format(rec)

    def test_json_format(self, restore_root):
        handler = configure_logging("DEBUG", "json")
        rec = logging.LogRecord("devcon.core", logging.WARNING, __file__, 1, "boom", (), None)
        data = json.loads(handler.format(rec))
        assert data["message"] == "boom"
        assert data["levelname"] == "WARNING"
        assert data["name"] == "devcon.core"

    def test_unknown_level_defaults(self, restore_root):
        configure_logging("chatty")
        assert restore_root.level == logging.WARNING

    def test_json_includes_thread(self, restore_root):
        handler = configure_logging("INFO", "json")
        rec = logging.LogRecord("devcon", logging.INFO, __file__, 1, "x", (), None)
        assert "threadName" in json.loads(handler.format(rec))

    def test_json_formatter_from_current_module(self, restore_root):
        handler = configure_logging("INFO", "json")
        assert type(handler.formatter).__module__.startswith("pythonjsonlogger.json")

    def test_httpx_quiet_unless_debug(self, restore_root):
        configure_logging("INFO")
        assert logging.getLogger("httpx").level == logging.WARNING
        configure_logging("DEBUG")
        assert logging.getLogger("httpx").level == logging.DEBUG
