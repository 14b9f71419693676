"""
Repository implementations

Concrete storage and catalog adapters for the domain interfaces.
"""

from .in_memory_cart_storage import InMemoryCartStorage
from .json_catalog_repository import JsonCatalogRepository
from .json_file_cart_storage import JsonFileCartStorage

__all__ = [
    "InMemoryCartStorage",
    "JsonCatalogRepository",
    "JsonFileCartStorage",
]
