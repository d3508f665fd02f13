"""Tests for logging setup and the structlog helpers."""

import json
import logging

import pytest

from adgen.core.logging import NOISY_LOGGERS, get_logger, setup_logging
from adgen.core.structlog_logger import StructlogMixin


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_level_by_name(self):
        setup_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_name_falls_back(self):
        setup_logging(level="chatty")

        assert logging.getLogger().level == logging.WARNING

    def test_single_console_handler(self):
        setup_logging(level=logging.INFO)
        setup_logging(level=logging.INFO)

        assert len(logging.getLogger().handlers) == 1

    def test_noisy_loggers_quiet_unless_debug(self):
        setup_logging(level=logging.INFO)
        assert all(
            logging.getLogger(name).level == logging.WARNING for name in NOISY_LOGGERS
        )

        setup_logging(level=logging.DEBUG)
        assert all(
            logging.getLogger(name).level == logging.DEBUG for name in NOISY_LOGGERS
        )

    def test_file_handler_writes_json(self, tmp_path):
        log_path = tmp_path / "logs" / "adgen.log"
        setup_logging(level=logging.INFO, log_file=log_path)

        get_logger("adgen.tests").info("preset_saved", name="mobile")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_path.read_text(encoding="utf-8").strip().splitlines()
        record = json.loads(lines[-1])
        assert record["event"] == "preset_saved"
        assert record["name"] == "mobile"
        assert record["level"] == "info"


class TestStructlogMixin:
    class Service(StructlogMixin):
        pass

    def test_logger_is_cached(self):
        service = self.Service()

        assert service.logger is service.logger

    def test_works_without_init(self):
        class Bare(StructlogMixin):
            def __init__(self):
                pass

        assert Bare().logger is not None
