"""
Logging setup for satcommon.

Modules log through ``logging.getLogger(__name__)``; this module attaches
console and file handlers to the package logger.
"""

import logging
import os

from satcommon.config import SATCommonConfig, get_config

PACKAGE_LOGGER = "satcommon"


def configure_logging(
    level: int | str = logging.WARNING,
    fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    log_file: str | None = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Existing handlers are removed first, so calling this twice does not
    duplicate output.

    Args:
        level: Logging level, as a number or a name such as "DEBUG"
        fmt: Format string shared by all handlers
        log_file: Optional path of a file to also log to

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name}")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in package_logger.handlers[:]:
        handler.close()
        package_logger.removeHandler(handler)

    formatter = logging.Formatter(fmt)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger


def configure_logging_from_config(
    config: SATCommonConfig | None = None,
) -> logging.Logger:
    """Configure the package logger from the ``logging`` config section."""
    config = config or get_config()
    return configure_logging(
        level=config.get("logging.level", "WARNING"),
        fmt=config.get("logging.format"),
        log_file=config.get("logging.file"),
    )
