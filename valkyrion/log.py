"""Engine and client loggers, and the engine's assertion helper."""

from __future__ import annotations

import logging
import sys
import threading

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_LOGGER_NAME = "VALKYRION"
CLIENT_LOGGER_NAME = "APP"

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"

_lock = threading.Lock()
_initialized = False


class _StdoutHandler(logging.StreamHandler):
    """Writes each record to whatever sys.stdout is at that moment."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stdout
        super().emit(record)


def _configure(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not any(isinstance(handler, _StdoutHandler) for handler in logger.handlers):
        handler = _StdoutHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(TRACE)
    return logger


def init() -> None:
    """Set up the engine and client loggers; later calls do nothing."""
    global _initialized
    with _lock:
        if _initialized:
            return
        core = _configure(CORE_LOGGER_NAME)
        _configure(CLIENT_LOGGER_NAME)
        _initialized = True
    core.info("Logging system initialized")


def core_logger() -> logging.Logger:
    """Return the engine's logger, setting logging up if needed."""
    init()
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """Return the application's logger, setting logging up if needed."""
    init()
    return logging.getLogger(CLIENT_LOGGER_NAME)


def vk_assert(condition: object, message: str) -> None:
    """Log and raise AssertionError when the condition does not hold."""
    if not condition:
        client_logger().error("Assertion Failed: %s", message)
        raise AssertionError(message)