"""
Logging Infrastructure

Root logger setup, JSON log formatting and operation timing.
"""

from .logging_config import (
    CartJsonFormatter,
    LoggingConfig,
    LoggingConfigOptions,
    PerformanceLogger,
    get_structured_logger,
    setup_logging,
)

__all__ = [
    "CartJsonFormatter",
    "LoggingConfig",
    "LoggingConfigOptions",
    "PerformanceLogger",
    "get_structured_logger",
    "setup_logging",
]
