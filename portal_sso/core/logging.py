"""
Logging utilities for the token generator and its command line helpers.

Provides a consistent logging format and configuration.
"""

import logging
import sys
from typing import Optional, TextIO

from portal_sso.core.errors import ConfigurationError


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure root logging with a sensible default format.

    Records go to stdout unless another ``stream`` is given.
    """
    level_name = level.strip().upper()
    if not isinstance(logging.getLevelName(level_name), int):
        raise ConfigurationError(f"Unknown log level {level!r}.")
    logging.basicConfig(
        level=level_name,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=stream or sys.stdout,
    )


__all__ = ["configure_logging"]
