"""
Logger configuration.

Configures the root logger once for CLI and API entry points.

Dependencies: logging (stdlib), docs_rag.configs
System role: Centralized logging configuration
"""

import logging
import sys

from docs_rag.configs import get_settings


def configure_logging(level: str | None = None) -> None:
    """
    Configure Python logging with ISO timestamp and a single console handler.

    Args:
        level: Root log level override (defaults to settings.log_level)
    """
    settings = get_settings()

    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(settings.log_format, datefmt="%Y-%m-%d %H:%M:%S")
    )

    root_logger.setLevel((level or settings.log_level).upper())
    root_logger.addHandler(handler)

    # Provider SDKs are chatty at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("google").setLevel(logging.WARNING)

