"""Logging configuration helpers."""

import logging

_LOGGER_NAME = "recipe_browser"
_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> None:
    """Attach one stream handler to the package logger.

    The level is refreshed on every call; the handler is only added once.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
