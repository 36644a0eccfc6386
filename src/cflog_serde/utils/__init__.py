"""Utility modules."""

from .logging_utils import LOG_FORMAT, setup_logging

__all__ = ["LOG_FORMAT", "setup_logging"]
