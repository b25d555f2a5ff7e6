"""Logging for scans: stdout output with the lookup context of each record."""

import logging
import sys
from typing import Optional

# Record attributes filters attach through ``extra=``
CONTEXT_FIELDS = ("head", "pr_number", "reason")

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"


class ScanContextFormatter(logging.Formatter):
    """Appends ``key=value`` pairs for any scan context fields on the record."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        pairs = [
            f"{key}={getattr(record, key)}"
            for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        ]
        if pairs:
            text = f"{text} [{' '.join(pairs)}]"
        return text


def setup_logging(
    level: int = logging.INFO,
    format_str: Optional[str] = None
) -> logging.Logger:
    """
    Send pr_discovery logs to stdout.

    Lookup failures carry the pull request and reason as record fields;
    they are rendered after the message so a failed author lookup reads
    differently from a plain "no match".

    Args:
        level: Logging level (default: INFO)
        format_str: Custom format string

    Returns:
        The package logger
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ScanContextFormatter(format_str or DEFAULT_FORMAT))
    logging.basicConfig(level=level, handlers=[handler])

    logger = logging.getLogger("pr_discovery")
    logger.setLevel(level)

    # PyGithub is chatty at DEBUG
    logging.getLogger("github").setLevel(max(level, logging.INFO))

    return logger


def get_logger(name: str = "pr_discovery") -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
