"""Logging configuration for the checklist tools.

Configures the root logger to output to the terminal (stdout).
"""

import logging
import os
import sys


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger to output to stdout.

    Args:
        verbose: If True, sets log level to DEBUG for verbose output
    """
    logger = logging.getLogger()
    env_verbose = os.getenv("CHECKLIST_VERBOSE", "").lower() in ("1", "true", "yes")
    log_level = logging.DEBUG if (verbose or env_verbose) else logging.INFO
    logger.setLevel(log_level)

    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(console_handler)
    logging.debug("Logging initialized with VERBOSE mode (DEBUG level).")
