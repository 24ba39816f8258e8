"""
Logging configuration for the PEN parser

The parser logs through the "pen" logger; callers decide where it goes.
"""

import logging


def setup_logging(level=logging.INFO):
    """
    Configure logging for the parser

    Args:
        level: Logging level (default: INFO)

    Returns:
        logging.Logger: The configured "pen" logger
    """
    base_logger = logging.getLogger("pen")
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    # Console handler on stderr so command output stays clean
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)8s %(message)s"))

    base_logger.addHandler(handler)

    return base_logger


# Shared logger for the parser modules
logger = logging.getLogger("pen")
