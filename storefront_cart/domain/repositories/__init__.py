"""
Domain repository interfaces

Contains abstract interfaces for the stock and catalog backends and for the
durable cart storage. Concrete implementations live in the infrastructure layer.
"""

from .cart_storage import CartStorage
from .catalog_repository import CatalogRepository
from .stock_repository import StockRepository

__all__ = [
    "CartStorage",
    "CatalogRepository",
    "StockRepository",
]
