"""
Dependency Injection Container

Builds the cart store and its collaborators from the application settings.
"""

import logging
from typing import Any, Dict, Optional

from storefront_cart.application.use_cases.cart_store import CartStore
from storefront_cart.domain.repositories.cart_storage import CartStorage
from storefront_cart.domain.repositories.catalog_repository import CatalogRepository
from storefront_cart.domain.repositories.stock_repository import StockRepository
from storefront_cart.domain.services.notifier import Notifier
from storefront_cart.infrastructure.configuration.config import Settings, get_config
from storefront_cart.infrastructure.repositories.json_catalog_repository import (
    JsonCatalogRepository,
)
from storefront_cart.infrastructure.repositories.json_file_cart_storage import (
    JsonFileCartStorage,
)
from storefront_cart.infrastructure.services.notification_service import (
    LoggingNotifier,
)


class DependencyContainer:
    """
    Dependency injection container

    Manages the instantiation of:
    - Cart storage and the catalog/stock repository (Infrastructure layer)
    - The notifier
    - The cart store (Application layer)

    Any collaborator can be passed in to replace the default built from settings.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        storage: Optional[CartStorage] = None,
        stock_repository: Optional[StockRepository] = None,
        catalog_repository: Optional[CatalogRepository] = None,
        notifier: Optional[Notifier] = None,
    ):
        self._settings = settings or get_config()
        self._instances: Dict[str, Any] = {}
        self._logger = logging.getLogger(self.__class__.__name__)
        self._setup_dependencies(storage, stock_repository, catalog_repository, notifier)

    def _setup_dependencies(self, storage, stock_repository, catalog_repository, notifier):
        """Setup all dependencies and their relationships"""
        self._logger.info("Setting up dependency injection container...")

        if stock_repository is None or catalog_repository is None:
            catalog = JsonCatalogRepository(self._settings.catalog_path)
            stock_repository = stock_repository or catalog
            catalog_repository = catalog_repository or catalog

        self._instances["storage"] = storage or JsonFileCartStorage(
            self._settings.storage_path
        )
        self._instances["stock_repository"] = stock_repository
        self._instances["catalog_repository"] = catalog_repository
        self._instances["notifier"] = notifier or LoggingNotifier()

        self._instances["cart_store"] = CartStore(
            stock_repository=self.get_stock_repository(),
            catalog_repository=self.get_catalog_repository(),
            storage=self.get_storage(),
            notifier=self.get_notifier(),
            storage_key=self._settings.cart_storage_key,
            locale=self._settings.locale,
        )

        self._logger.info("Dependency injection container setup complete")

    def initialize(self) -> CartStore:
        """Restore the persisted cart; call once at startup"""
        store = self.get_cart_store()
        store.restore()
        return store

    def get_settings(self) -> Settings:
        return self._settings

    def get_storage(self) -> CartStorage:
        return self._instances["storage"]

    def get_stock_repository(self) -> StockRepository:
        return self._instances["stock_repository"]

    def get_catalog_repository(self) -> CatalogRepository:
        return self._instances["catalog_repository"]

    def get_notifier(self) -> Notifier:
        return self._instances["notifier"]

    def get_cart_store(self) -> CartStore:
        """Shared cart store for every consumer of this container"""
        return self._instances["cart_store"]
