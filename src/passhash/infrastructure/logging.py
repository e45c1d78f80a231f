"""Logging configuration helpers for processes embedding the hashing layer."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_PACKAGE_LOGGER = "passhash"
_HANDLER_NAME = "passhash-stream"


def resolve_log_level(level: str) -> int:
    """Map a level name to its numeric value, defaulting to INFO."""

    normalized_level = level.strip().upper()
    return logging.getLevelNamesMapping().get(normalized_level, logging.INFO)


def configure_logging(*, level: str, attach_handler: bool = True) -> logging.Logger:
    """Set the package logger level and optionally attach one stream handler.

    Calling it again only updates the level; handlers are never duplicated.
    """

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(resolve_log_level(level))

    if attach_handler and not any(
        handler.get_name() == _HANDLER_NAME for handler in package_logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler.set_name(_HANDLER_NAME)
        package_logger.addHandler(handler)

    return package_logger
