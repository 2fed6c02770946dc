"""
Logging configuration for the application.

Reads from Settings:
- LOG_LEVEL: root log level (default: INFO)
- LOG_FORMAT: structured or simple (default: structured)
"""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agentstudio.config import Settings


NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "openai",
    "googleapiclient.discovery_cache",
    "uvicorn.access",
)


class StructuredFormatter(logging.Formatter):
    """
    Structured log formatter for easy parsing.

    Format: timestamp | level | logger | message
    """

    def format(self, record: logging.LogRecord) -> str:
        logger_name = record.name
        if logger_name.startswith("agentstudio."):
            logger_name = logger_name[len("agentstudio.") :]

        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        message = (
            f"{timestamp} | "
            f"{record.levelname:8} | "
            f"{logger_name:22} | "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


def setup_logging(settings: "Settings") -> None:
    """
    Configure the root logger from settings.

    Args:
        settings: Application settings with log configuration
    """
    root_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "structured":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)

    # Remove existing handlers to avoid duplicates on app reload
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(root_level)
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
