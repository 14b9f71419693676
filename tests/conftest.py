"""
Test configuration and fixtures for the storefront cart
"""

import asyncio
import os
from typing import Dict, List, Optional
from unittest.mock import patch

import pytest

from storefront_cart.application.use_cases.cart_store import CartStore
from storefront_cart.domain.entities.product_entity import Product
from storefront_cart.domain.repositories.cart_storage import CartStorage
from storefront_cart.domain.repositories.catalog_repository import CatalogRepository
from storefront_cart.domain.repositories.stock_repository import StockRepository
from storefront_cart.domain.services.notifier import Notifier
from storefront_cart.domain.value_objects.product_id import ProductId
from storefront_cart.domain.value_objects.stock_info import StockInfo
from storefront_cart.infrastructure.configuration.config import reset_config
from storefront_cart.infrastructure.utilities.exceptions import (
    CartPersistenceError,
    CatalogLookupError,
    StockLookupError,
)

STORAGE_KEY = "@RocketShoes:cart"

ADD_FAILED = "Erro na adição do produto"
STOCK_EXCEEDED = "Quantidade solicitada fora de estoque"
REMOVE_FAILED = "Erro na remoção do produto"
UPDATE_FAILED = "Erro na alteração de quantidade do produto"
PERSIST_FAILED = "Não foi possível salvar o carrinho"


@pytest.fixture(autouse=True)
def mock_env():
    """Mock environment variables for testing"""
    test_env = {
        "CART_ENVIRONMENT": "test",
        "CART_LOG_LEVEL": "DEBUG",
    }

    reset_config()
    with patch.dict(os.environ, test_env, clear=True):
        yield test_env
    reset_config()


class FakeStockRepository(StockRepository):
    """Stock backend answering from a dict; unknown ids fail like a 404"""

    def __init__(self, stock: Dict[int, int]):
        self.stock = dict(stock)
        self.calls: List[int] = []
        self.unreachable = False

    async def get_stock(self, product_id: ProductId) -> StockInfo:
        self.calls.append(int(product_id))
        # Yield so concurrent operations get a chance to interleave
        await asyncio.sleep(0)
        if self.unreachable:
            raise StockLookupError(int(product_id), "connection refused")
        if int(product_id) not in self.stock:
            raise StockLookupError(int(product_id), "unknown product")
        return StockInfo(product_id=int(product_id), amount=self.stock[int(product_id)])


class FakeCatalogRepository(CatalogRepository):
    """Catalog backend answering from a dict of products"""

    def __init__(self, products: Dict[int, Product]):
        self.products = dict(products)
        self.calls: List[int] = []

    async def get_product(self, product_id: ProductId) -> Product:
        self.calls.append(int(product_id))
        await asyncio.sleep(0)
        if int(product_id) not in self.products:
            raise CatalogLookupError(int(product_id), "unknown product")
        return self.products[int(product_id)]


class FakeCartStorage(CartStorage):
    """Dictionary storage that can be told to fail on write"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})
        self.writes = 0
        self.fail_writes = False

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise CartPersistenceError("disk full", key=key)
        self.writes += 1
        self.data[key] = value


class RecordingNotifier(Notifier):
    """Collects notifications for assertions"""

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)


@pytest.fixture
def sample_products() -> Dict[int, Product]:
    """Catalog entries for testing"""
    return {
        1: Product(id=1, title="Tênis de Caminhada Leve", price=179.9, image="tenis1.jpg"),
        2: Product(id=2, title="Tênis VR Caminhada", price=139.9, image="tenis2.jpg"),
        3: Product(id=3, title="Tênis Adidas Duramo Lite", price=219.9, image="tenis3.jpg"),
    }


@pytest.fixture
def stock_repository() -> FakeStockRepository:
    return FakeStockRepository({1: 5, 2: 2, 3: 1})


@pytest.fixture
def catalog_repository(sample_products) -> FakeCatalogRepository:
    return FakeCatalogRepository(sample_products)


@pytest.fixture
def storage() -> FakeCartStorage:
    return FakeCartStorage()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def cart_store(stock_repository, catalog_repository, storage, notifier) -> CartStore:
    """Fresh, restored cart store wired to fakes"""
    store = CartStore(
        stock_repository=stock_repository,
        catalog_repository=catalog_repository,
        storage=storage,
        notifier=notifier,
        storage_key=STORAGE_KEY,
    )
    store.restore()
    return store


@pytest.fixture
def catalog_document() -> dict:
    """Catalog/stock document in the local JSON format"""
    return {
        "products": [
            {"id": 1, "title": "Tênis de Caminhada Leve", "price": 179.9, "image": "tenis1.jpg"},
            {"id": 2, "title": "Tênis VR Caminhada", "price": 139.9, "image": "tenis2.jpg"},
        ],
        "stock": [
            {"id": 1, "amount": 3},
            {"id": 2, "amount": 0},
        ],
    }
