"""
SAFEFAO - Logging Setup

Configures the package logger from AppConfig.
"""

import logging

from safefao.config.settings import AppConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class SafeFaoStreamHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging."""

    pass


def configure_logging(config: AppConfig) -> logging.Logger:
    """
    Apply the configured log level to the safefao logger.

    Calling this more than once replaces the handler instead of adding another.

    Args:
        config: Configuration providing log_level

    Returns:
        The configured safefao logger

    Raises:
        ConfigurationError: If log_level is missing or unknown
    """
    config.validate()

    logger = logging.getLogger("safefao")
    logger.setLevel(config.log_level.upper())

    for handler in list(logger.handlers):
        if isinstance(handler, SafeFaoStreamHandler):
            logger.removeHandler(handler)

    handler = SafeFaoStreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
