"""
Application constants for the storefront cart

Centralizes magic numbers and message keys.
"""

from typing import Final


class LoggingSettings:
    """Logging file sizes and rotation settings"""

    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    MAIN_LOG_BACKUP_COUNT: Final[int] = 10
    SLOW_OPERATION_SECONDS: Final[float] = 2.0


class FileSettings:
    """Log file names"""

    MAIN_LOG_FILE: Final[str] = "storefront_cart.log"
    JSON_LOG_FILE: Final[str] = "storefront_cart.json.log"


class NotificationKeys:
    """Translation keys for user-facing cart notifications"""

    ADD_FAILED: Final[str] = "ADD_FAILED"
    STOCK_EXCEEDED: Final[str] = "STOCK_EXCEEDED"
    REMOVE_FAILED: Final[str] = "REMOVE_FAILED"
    UPDATE_FAILED: Final[str] = "UPDATE_FAILED"
    PERSIST_FAILED: Final[str] = "PERSIST_FAILED"


DEFAULT_LOCALE: Final[str] = "pt_BR"
