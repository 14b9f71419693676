"""
JSON catalog repository

Serves product metadata and stock from a local JSON document shaped like the
storefront's fake API:

    {"products": [{"id": 1, "title": ..., "price": ..., "image": ...}],
     "stock": [{"id": 1, "amount": 3}]}
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from storefront_cart.domain.entities.product_entity import Product
from storefront_cart.domain.repositories.catalog_repository import CatalogRepository
from storefront_cart.domain.repositories.stock_repository import StockRepository
from storefront_cart.domain.value_objects.product_id import ProductId
from storefront_cart.domain.value_objects.stock_info import StockInfo
from storefront_cart.infrastructure.utilities.exceptions import (
    CatalogLookupError,
    StockLookupError,
)


class JsonCatalogRepository(StockRepository, CatalogRepository):
    """Stock and catalog lookups against a JSON document"""

    def __init__(
        self,
        path: Union[str, Path, None] = None,
        document: Optional[Dict[str, Any]] = None,
    ):
        if path is None and document is None:
            raise ValueError("Either a path or a document is required")
        self._path = Path(path) if path is not None else None
        self._document = document
        self._products: Optional[Dict[int, Dict[str, Any]]] = None
        self._stock: Optional[Dict[int, Any]] = None
        self._logger = logging.getLogger(self.__class__.__name__)

    def _load(self) -> None:
        """Index the document by product id, reading the file on first use"""
        if self._products is not None:
            return

        document = self._document
        if document is None:
            with open(self._path, "r", encoding="utf-8") as f:
                document = json.load(f)

        products = {
            item["id"]: item for item in document.get("products", []) if "id" in item
        }
        stock = {
            item["id"]: item.get("amount")
            for item in document.get("stock", [])
            if "id" in item
        }
        self._products, self._stock = products, stock
        self._logger.info(
            "📋 CATALOG LOADED: %d products, %d stock records",
            len(self._products),
            len(self._stock),
        )

    async def get_stock(self, product_id: ProductId) -> StockInfo:
        pid = int(product_id)
        try:
            self._load()
        except (OSError, ValueError, TypeError, AttributeError) as e:
            raise StockLookupError(pid, f"catalog unavailable ({e})") from e

        if pid not in self._stock:
            raise StockLookupError(pid, "unknown product")

        try:
            return StockInfo(product_id=pid, amount=self._stock[pid])
        except ValueError as e:
            raise StockLookupError(pid, str(e)) from e

    async def get_product(self, product_id: ProductId) -> Product:
        pid = int(product_id)
        try:
            self._load()
        except (OSError, ValueError, TypeError, AttributeError) as e:
            raise CatalogLookupError(pid, f"catalog unavailable ({e})") from e

        record = self._products.get(pid)
        if record is None:
            raise CatalogLookupError(pid, "unknown product")

        try:
            return Product.from_dict(record)
        except (KeyError, ValueError) as e:
            raise CatalogLookupError(pid, str(e)) from e
