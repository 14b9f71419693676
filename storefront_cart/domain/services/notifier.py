"""
Notifier interface

Fire-and-forget channel for user-facing errors and warnings.
"""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """User-facing notification channel"""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show an error message to the user"""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show a warning message to the user"""
