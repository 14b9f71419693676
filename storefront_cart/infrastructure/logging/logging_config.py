"""
Logging configuration for the storefront cart

Console output for development, a rotating plain-text log, a rotating JSON log
for analysis, and structlog for structured call sites.
"""

import logging
import logging.handlers
import os
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from pythonjsonlogger import jsonlogger

from storefront_cart.infrastructure.utilities.constants import (
    FileSettings,
    LoggingSettings,
)


@dataclass
class LoggingConfigOptions:
    """Dataclass for logging configuration options"""

    log_level: str = "INFO"
    log_dir: str = "logs"
    enable_console: bool = True
    enable_file: bool = True
    enable_json: bool = True
    max_file_size: int = LoggingSettings.MAX_LOG_FILE_SIZE
    backup_count: int = LoggingSettings.MAIN_LOG_BACKUP_COUNT


class CartJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding the fields we filter on"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["process_id"] = os.getpid()

        if hasattr(record, "operation_time"):
            log_record["operation_time_ms"] = record.operation_time

        if hasattr(record, "product_id"):
            log_record["product_id"] = record.product_id


class LoggingConfig:
    """Root logger setup"""

    def __init__(self, options: LoggingConfigOptions):
        self.options = options

        if self.options.enable_file or self.options.enable_json:
            Path(self.options.log_dir).mkdir(parents=True, exist_ok=True)

        self._configure_structlog()

    def __repr__(self):
        return f"LoggingConfig(options={self.options})"

    def _configure_structlog(self):
        """Configure structlog for structured logging"""
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.JSONRenderer(),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    def setup_logging(self):
        """Attach handlers to the root logger"""
        level = getattr(logging, self.options.log_level.upper(), logging.INFO)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        if self.options.enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            root_logger.addHandler(console_handler)

        if self.options.enable_file:
            app_handler = logging.handlers.RotatingFileHandler(
                Path(self.options.log_dir) / FileSettings.MAIN_LOG_FILE,
                maxBytes=self.options.max_file_size,
                backupCount=self.options.backup_count,
                encoding="utf-8",
            )
            app_handler.setLevel(logging.INFO)
            app_handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            root_logger.addHandler(app_handler)

        if self.options.enable_json:
            json_handler = logging.handlers.RotatingFileHandler(
                Path(self.options.log_dir) / FileSettings.JSON_LOG_FILE,
                maxBytes=self.options.max_file_size,
                backupCount=self.options.backup_count,
                encoding="utf-8",
            )
            json_handler.setLevel(logging.INFO)
            json_handler.setFormatter(CartJsonFormatter())
            root_logger.addHandler(json_handler)

        logging.getLogger(__name__).info(
            "✅ Logging configured - Level: %s, Console: %s, File: %s, JSON: %s",
            self.options.log_level,
            self.options.enable_console,
            self.options.enable_file,
            self.options.enable_json,
        )


class PerformanceLogger:
    """Context manager timing one cart operation"""

    def __init__(
        self,
        operation_name: str,
        logger: Optional[logging.Logger] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.operation_name = operation_name
        self.logger = logger or logging.getLogger("performance")
        self.details = details or {}
        self.start_time = 0.0
        self.duration_ms = 0.0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration_ms = (time.perf_counter() - self.start_time) * 1000
        extra = {
            "operation": self.operation_name,
            "operation_time": self.duration_ms,
            "success": exc_type is None,
            **self.details,
        }

        if exc_type is not None:
            self.logger.error(
                "Failed operation: %s (%.1fms)",
                self.operation_name,
                self.duration_ms,
                extra=extra,
                exc_info=(exc_type, exc_val, exc_tb),
            )
        elif self.duration_ms > LoggingSettings.SLOW_OPERATION_SECONDS * 1000:
            self.logger.warning(
                "Slow operation: %s took %.1fms",
                self.operation_name,
                self.duration_ms,
                extra=extra,
            )
        else:
            self.logger.debug(
                "Completed operation: %s (%.1fms)",
                self.operation_name,
                self.duration_ms,
                extra=extra,
            )
        return False


def setup_logging(options: Optional[LoggingConfigOptions] = None) -> LoggingConfig:
    """Setup logging using the LoggingConfig class"""
    config = LoggingConfig(options or LoggingConfigOptions())
    config.setup_logging()
    return config


def get_structured_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
