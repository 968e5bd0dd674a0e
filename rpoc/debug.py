#!/usr/bin/env python3
import inspect
import logging
from typing import Optional

from .config import Config, VariableStore, is_enabled

LOGGER_NAME = "rpoc.debug"

_logger: Optional[logging.Logger] = None


def get_calling_function_name(skip: int = 1) -> str:
    """Name of the function ``skip`` frames above the caller of this helper.

    With the default ``skip=1`` a helper that calls this gets the name of
    whoever called the helper.
    """
    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame is not None else None
        for _ in range(skip):
            if target is None:
                break
            target = target.f_back
        if target is None:
            return "<unknown>"
        return target.f_code.co_name
    finally:
        del frame


def get_debug_logger() -> logging.Logger:
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if not logger.handlers:
        Config.DEBUG_LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(Config.DEBUG_LOG_FILE, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            "%(asctime)s [%(caller)s] %(message)s (is_refreshing: %(refreshing)d)",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def reset_debug_logger() -> None:
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _logger = None


def debug_log(
    message: str,
    refreshing: bool = False,
    store: Optional[VariableStore] = None,
    caller: Optional[str] = None,
) -> None:
    if not is_enabled(Config.DEBUG, store):
        return

    caller = caller or get_calling_function_name()
    try:
        get_debug_logger().debug(
            message, extra={"caller": caller, "refreshing": 1 if refreshing else 0}
        )
    except OSError:
        pass
