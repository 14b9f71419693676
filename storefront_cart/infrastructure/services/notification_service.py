"""
Notification Service

Delivers user-facing cart messages. Delivery never raises back into the cart
store: a failing channel is logged and the message dropped.
"""

import logging
from collections import deque
from typing import Callable, Deque, Tuple

from storefront_cart.domain.services.notifier import Notifier

NotificationCallback = Callable[[str, str], None]


class LoggingNotifier(Notifier):
    """Writes notifications to the log and keeps the most recent ones"""

    def __init__(self, history_size: int = 50):
        self._logger = logging.getLogger(self.__class__.__name__)
        self._history: Deque[Tuple[str, str]] = deque(maxlen=history_size)

    @property
    def history(self) -> Tuple[Tuple[str, str], ...]:
        """(level, message) pairs, oldest first"""
        return tuple(self._history)

    def error(self, message: str) -> None:
        self._history.append(("error", message))
        self._logger.error("🔔 USER ERROR: %s", message)

    def warning(self, message: str) -> None:
        self._history.append(("warning", message))
        self._logger.warning("🔔 USER WARNING: %s", message)


class CallbackNotifier(Notifier):
    """Forwards notifications to a callable supplied by the UI layer"""

    def __init__(self, callback: NotificationCallback):
        self._callback = callback
        self._logger = logging.getLogger(self.__class__.__name__)

    def _send(self, level: str, message: str) -> None:
        try:
            self._callback(level, message)
        except Exception as e:  # pylint: disable=broad-except
            self._logger.error(
                "❌ NOTIFICATION FAILED: %s %r, Error: %s", level, message, e
            )

    def error(self, message: str) -> None:
        self._send("error", message)

    def warning(self, message: str) -> None:
        self._send("warning", message)
