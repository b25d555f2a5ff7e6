"""Utility functions."""

from .logging import setup_logging, get_logger, ScanContextFormatter

__all__ = [
    "setup_logging",
    "get_logger",
    "ScanContextFormatter",
]
