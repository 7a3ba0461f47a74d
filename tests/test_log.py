import logging
from logging.handlers import RotatingFileHandler

from settle.log import setup_logging


def test_setup_is_idempotent_and_reads_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SETTLE_LOG_LEVEL", "warning")
    monkeypatch.setenv("SETTLE_LOG_FILE", str(tmp_path / "x.log"))
    name = "settle.test_setup"
    try:
        logger = setup_logging(name)
        assert logger.level == logging.WARNING
        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        n = len(logger.handlers)
        setup_logging(name)
        assert len(logger.handlers) == n
    finally:
        for h in list(logging.getLogger(name).handlers):
            h.close()
            logging.getLogger(name).removeHandler(h)


def test_empty_log_file_disables_file_handler(monkeypatch):
    monkeypatch.setenv("SETTLE_LOG_FILE", "")
    name = "settle.test_nofile"
    try:
        logger = setup_logging(name)
        assert not any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
    finally:
        for h in list(logging.getLogger(name).handlers):
            logging.getLogger(name).removeHandler(h)
