"""
Cart storage interface

Durable key/value store holding string blobs that survive restarts.
"""

from abc import ABC, abstractmethod
from typing import Optional


class CartStorage(ABC):
    """Key/value storage for serialized carts"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None when the key is absent"""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, raising CartPersistenceError on failure"""
