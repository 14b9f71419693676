"""
Notification service implementations
"""

from .notification_service import CallbackNotifier, LoggingNotifier

__all__ = ["CallbackNotifier", "LoggingNotifier"]
