"""Logging configuration

Applies the log level and format from Settings to the root logger.
"""

import logging
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

from authn.config.settings import Settings, get_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(settings: Optional[Settings] = None, stream: Optional[TextIO] = None) -> None:
    """Configure the root logger from settings.

    Replaces any existing root handlers with a single stream handler that
    writes text lines or one JSON object per record.

    Args:
        settings: Settings to apply (defaults to get_settings())
        stream: Output stream (defaults to sys.stdout)
    """
    settings = settings or get_settings()

    level = logging.getLevelName(settings.log_level.upper())
    unknown_level = not isinstance(level, int)
    if unknown_level:
        level = logging.INFO

    if settings.log_format.lower() == "json":
        formatter = JsonFormatter(JSON_FIELDS)
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]

    if unknown_level:
        logger.warning(f"Unknown log level {settings.log_level!r}, using INFO")
