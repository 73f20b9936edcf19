"""
Logging setup for gacode_reader.

Modules log through logging.getLogger(__name__); nothing is configured on
import. Command-line tools call setup_logging with their -v count:
- 0: WARNING
- 1: INFO  (header sizes, directives read)
- 2+: DEBUG (every dispatched directive)
"""

import logging
import sys

LOGGER_NAME = "gacode_reader"


def setup_logging(verbosity: int = 0) -> logging.Logger:
    """Configure the gacode_reader logger with a stderr handler.

    Args:
        verbosity: Number of -v flags

    Returns:
        The configured gacode_reader logger
    """
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if verbosity >= 2:
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                                      datefmt="%H:%M:%S")
    else:
        formatter = logging.Formatter("[%(levelname)s] %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
