"""Logging configuration helpers."""

import logging

PACKAGE_LOGGER = "max_protein"


def configure_logging(level: str = "INFO") -> None:
    """Set the package log level and attach a single stream handler.

    The level is applied on every call so each app instance follows its own
    settings; the handler is only added once.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
