"""Logging setup for scripts and hosts embedding the parser."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure root logging with the package's standard format.

    Args:
        level: Root log level (e.g. logging.DEBUG for verbose runs)
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
