# File: tests/test_logger.py
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from site_mapper.logger import LOGGER_NAME, init_logging


@pytest.fixture(autouse=True)
def clean_logger():
    yield
    lg = logging.getLogger(LOGGER_NAME)
    for handler in lg.handlers:
        handler.close()
    lg.handlers.clear()


def test_console_only_by_default():
    lg = init_logging("INFO")
    assert lg.name == LOGGER_NAME
    assert lg.level == logging.INFO
    assert lg.propagate is False
    assert len(lg.handlers) == 1
    assert lg.handlers[0].stream is sys.stderr


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / "mapper.log"
    lg = init_logging("DEBUG", log_file=log_file, log_format="%(levelname)s:%(message)s")

    lg.debug("страница %s", "/a")
    for handler in lg.handlers:
        handler.flush()

    assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)
    assert log_file.read_text(encoding="utf-8").strip() == "DEBUG:страница /a"


def test_reinit_replaces_handlers(tmp_path):
    init_logging("DEBUG", log_file=tmp_path / "first.log")
    lg = init_logging("WARNING")
    assert len(lg.handlers) == 1
    assert not any(isinstance(h, RotatingFileHandler) for h in lg.handlers)
    assert lg.level == logging.WARNING
