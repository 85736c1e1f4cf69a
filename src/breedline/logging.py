"""Structlog-based logging for breedline.

Library code logs through ``get_logger``; never ``print()``.
"""
from __future__ import annotations

import logging
import os
from typing import Literal

import structlog

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: LogLevel | None = None) -> None:
    level = level or os.getenv("BREEDLINE_LOG_LEVEL", "INFO").upper()  # type: ignore[assignment]
    numeric = getattr(logging, str(level), logging.INFO)
    logging.basicConfig(format="%(message)s", level=numeric)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "breedline"):
    return structlog.get_logger(name)


# Initialize default config
configure_logging()
