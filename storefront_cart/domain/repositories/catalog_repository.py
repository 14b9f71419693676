"""
Catalog repository interface

Defines the contract for fetching product metadata.
"""

from abc import ABC, abstractmethod

from storefront_cart.domain.entities.product_entity import Product
from storefront_cart.domain.value_objects.product_id import ProductId


class CatalogRepository(ABC):
    """Repository interface for catalog lookups"""

    @abstractmethod
    async def get_product(self, product_id: ProductId) -> Product:
        """Fetch product metadata, raising CatalogLookupError on failure"""
