import logging
import sys

LOGGER_NAME = "multifetch"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger with a single stdout handler.
    Safe to call more than once: existing handlers are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
