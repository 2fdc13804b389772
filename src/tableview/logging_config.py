# SPDX-License-Identifier: MIT

"""Logging setup for the tableview namespace.

Modules log through ``logging.getLogger(__name__)``; this module only decides
where those records go and at which level.
"""

import logging

LOGGER_NAME = "tableview"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def level_from_name(level_name: str) -> int:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{level_name}'")
    return level


def configure_logging(
    level: int = logging.WARNING,
    format_string: str = DEFAULT_FORMAT,
    handler: logging.Handler | None = None,
) -> logging.Logger:
    """Configure the tableview logger.

    Calling this more than once replaces the level but never stacks handlers.

    Args:
        level: Log level for the tableview logger.
        format_string: Format string for log messages.
        handler: Optional handler to use instead of a stderr StreamHandler.

    Returns:
        The configured tableview logger.
    """
    logger = get_logger()
    logger.setLevel(level)

    if handler is None and logger.handlers:
        return logger

    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
