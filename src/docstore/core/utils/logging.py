"""Loguru sink setup for the CLI.

Library code logs through ``loguru.logger`` directly and never configures
sinks; only the command line calls ``setup_logging``.
"""

import sys

from loguru import logger


CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Replace loguru's sinks with stderr and, optionally, a rotating file.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR), as in Settings.log_level.
        log_file: Settings.log_file; rotated at 10 MB, kept 7 days. None = stderr only.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)
    if log_file:
        logger.add(log_file, level=level, format=FILE_FORMAT, rotation="10 MB", retention="7 days")
