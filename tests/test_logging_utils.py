# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: test_logging_utils.py
# -----------------------------------------------------------------------------
import logging
import uuid
from logging.handlers import RotatingFileHandler

import pytest

from utility.logging_utils import BASE_LOGGER_NAME, get_class_logger, get_logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("W2V_LOG_TO_FILE", "W2V_LOG_FILE", "W2V_LOG_MAX_BYTES", "W2V_LOG_BACKUP_COUNT", "W2V_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def _fresh_name() -> str:
    return f"test_{uuid.uuid4().hex}"


def test_defaults_to_console_only_at_info():
    logger = get_logger(_fresh_name())

    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert not any(isinstance(h, RotatingFileHandler) for h in logger.handlers)


def test_level_read_from_env(monkeypatch):
    monkeypatch.setenv("W2V_LOG_LEVEL", " debug ")

    assert get_logger(_fresh_name()).level == logging.DEBUG


def test_rotating_file_handler_from_env(monkeypatch, tmp_path):
    log_path = tmp_path / "logs" / "w2v.log"
    monkeypatch.setenv("W2V_LOG_TO_FILE", "yes")
    monkeypatch.setenv("W2V_LOG_FILE", str(log_path))
    monkeypatch.setenv("W2V_LOG_BACKUP_COUNT", "2")

    logger = get_logger(_fresh_name())
    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    try:
        assert len(file_handlers) == 1
        assert file_handlers[0].backupCount == 2
        assert log_path.parent.is_dir()
    finally:
        for h in file_handlers:
            logger.removeHandler(h)
            h.close()


def test_malformed_file_logging_flag_raises(monkeypatch):
    monkeypatch.setenv("W2V_LOG_TO_FILE", "sometimes")

    with pytest.raises(RuntimeError, match="W2V_LOG_TO_FILE"):
        get_logger(_fresh_name())


def test_class_logger_name():
    class Widget:
        pass

    assert get_class_logger(Widget).name == f"{BASE_LOGGER_NAME}.{__name__}.Widget"
