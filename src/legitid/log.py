"""Logging setup shared by legitid modules."""

import logging
import os

LOG_LEVEL_ENV_VAR = "LEGITID_LOG_LEVEL"

_root_logger = logging.getLogger("legitid")


def _setup_logging():
    """Attach a stream handler to the package logger once."""
    if not _root_logger.handlers:
        handler = logging.StreamHandler()

        # An explicitly set level (tests, host application) wins over the env var.
        if _root_logger.level == logging.NOTSET:
            level_name = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").upper()
            _root_logger.setLevel(getattr(logging, level_name, logging.WARNING))

        formatter = logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        _root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``legitid`` namespace."""
    if not name.startswith("legitid"):
        name = f"legitid.{name}"
    return logging.getLogger(name)


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional ``key=value`` context."""
    _setup_logging()
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
