"""
Stock repository interface

Defines the contract for looking up available stock.
"""

from abc import ABC, abstractmethod

from storefront_cart.domain.value_objects.product_id import ProductId
from storefront_cart.domain.value_objects.stock_info import StockInfo


class StockRepository(ABC):
    """Repository interface for stock lookups"""

    @abstractmethod
    async def get_stock(self, product_id: ProductId) -> StockInfo:
        """
        Fetch the current stock for a product

        Raises StockLookupError when the product is unknown or the backend
        cannot be reached.
        """
