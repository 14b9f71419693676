"""
In-memory cart storage

Process-local key/value store; nothing survives a restart.
"""

from typing import Dict, Optional

from storefront_cart.domain.repositories.cart_storage import CartStorage


class InMemoryCartStorage(CartStorage):
    """Dictionary backed storage"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
