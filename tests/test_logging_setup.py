"""Tests for logging configuration."""

import sys
import os
import logging
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from config.logging_setup import configure_logging


def _our_handlers():
    return [h for h in logging.getLogger().handlers if h.get_name() == "attendance-console"]


class TestConfigureLogging:
    def setup_method(self):
        self._root_level = logging.getLogger().level

    def teardown_method(self):
        for h in _our_handlers():
            logging.getLogger().removeHandler(h)
        logging.getLogger().setLevel(self._root_level)

    def test_idempotent(self):
        configure_logging("DEBUG")
        configure_logging("DEBUG")
        assert len(_our_handlers()) == 1

    def test_returns_root_logger(self):
        assert configure_logging("INFO") is logging.getLogger()

    def test_level_from_argument(self):
        configure_logging("WARNING")
        assert _our_handlers()[0].level == logging.WARNING

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("ATTENDANCE_LOG_LEVEL", "error")
        configure_logging()
        assert _our_handlers()[0].level == logging.ERROR


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
