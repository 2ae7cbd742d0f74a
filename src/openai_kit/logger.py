"""Request lifecycle logging with a global on/off switch."""

import logging

REQUEST_LOGGER_NAME = "openai_kit.request"

request_logger = logging.getLogger(REQUEST_LOGGER_NAME)

_debug = True


def set_debug(enabled: bool) -> None:
    """Turn lifecycle log lines on or off for the whole process."""
    global _debug
    _debug = bool(enabled)


def is_debug() -> bool:
    return _debug


def log_request_event(msg: str, *args: object) -> None:
    """Log one lifecycle line (start, cancel, complete) if enabled."""
    if _debug:
        request_logger.info(msg, *args)
