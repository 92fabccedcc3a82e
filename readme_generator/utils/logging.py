"""Logging for the readme-gen command line.

Every module logs through ``logging.getLogger(__name__)``, so one handler
set on the ``readme_generator`` logger covers the scanner, the prompt
builder and the chat clients. Console output goes to stderr, keeping
stdout free for ``scan`` JSON and ``--dry-run`` prompts.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "readme_generator"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _attach(
    logger: logging.Logger,
    handler: logging.Handler,
    level: int,
    formatter: logging.Formatter,
) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(
    level: str = "INFO",
    log_format: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Point the package logger at stderr and, optionally, a log file.

    Called once per CLI invocation with the ``logging`` section of
    config.yaml. Earlier handlers are removed first, so repeated calls do
    not duplicate lines. Unknown level names fall back to INFO.

    Args:
        level: Level name such as "DEBUG" or "WARNING".
        log_format: ``logging.Formatter`` format string.
        log_file: Also append records to this file when given.

    Returns:
        The ``readme_generator`` logger.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    package_logger.setLevel(numeric_level)
    formatter = logging.Formatter(log_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        _attach(package_logger, handler, numeric_level, formatter)

    package_logger.debug("Logging at %s to %d handler(s)", level, len(handlers))
    return package_logger
