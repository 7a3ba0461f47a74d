# src/settle/log.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(name: str = "settle") -> logging.Logger:
    """
    Configure the package logger once: stdout plus a rotating file.
      SETTLE_LOG_LEVEL  level name (default INFO)
      SETTLE_LOG_FILE   log path (default settle.log, empty = no file)
    """
    level = getattr(logging, os.getenv("SETTLE_LOG_LEVEL", "INFO").upper(), logging.DEBUG)
    log_file = os.getenv("SETTLE_LOG_FILE", "settle.log")
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        fmt = logging.Formatter(FORMAT)
        ch = logging.StreamHandler(stream=sys.stdout); ch.setLevel(level); ch.setFormatter(fmt)
        logger.addHandler(ch)
        if log_file:
            fh = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
            fh.setLevel(level); fh.setFormatter(fmt)
            logger.addHandler(fh)
    return logger
