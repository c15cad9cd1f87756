"""Logging configuration for the conversion pipeline."""

import logging
from typing import Optional

from acf_report_csv.config.settings import LoggingConfig

PACKAGE_LOGGER = "acf_report_csv"


def setup_logging(config: Optional[LoggingConfig] = None, verbose: bool = False) -> logging.Logger:
    """Configure the package logger.

    Args:
        config: Logging settings; defaults are used if None.
        verbose: If True, force DEBUG level.

    Returns:
        The configured package logger.
    """
    config = config or LoggingConfig()
    level = logging.DEBUG if verbose else getattr(logging, config.level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format, datefmt="%Y-%m-%d %H:%M:%S")
    handlers = []
    if config.console:
        handlers.append(logging.StreamHandler())
    if config.file:
        handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
