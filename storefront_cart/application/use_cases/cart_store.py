"""
Cart store use case

Holds the shopping cart and applies the add / remove / set-quantity operations
against live stock, mirroring every successful change to durable storage.
"""

import asyncio
import logging
from typing import Optional, Tuple

from storefront_cart.application.dtos.cart_dtos import CartSummary, UpdateProductAmount
from storefront_cart.domain.entities.cart_entity import Cart, CartEntry
from storefront_cart.domain.repositories.cart_storage import CartStorage
from storefront_cart.domain.repositories.catalog_repository import CatalogRepository
from storefront_cart.domain.repositories.stock_repository import StockRepository
from storefront_cart.domain.services.notifier import Notifier
from storefront_cart.domain.value_objects.product_id import ProductId
from storefront_cart.infrastructure.logging.logging_config import (
    PerformanceLogger,
    get_structured_logger,
)
from storefront_cart.infrastructure.utilities.constants import (
    DEFAULT_LOCALE,
    NotificationKeys,
)
from storefront_cart.infrastructure.utilities.exceptions import (
    CartPersistenceError,
    CatalogLookupError,
    EntryNotFoundError,
    LookupFailedError,
    MalformedPersistedStateError,
    StockExceededError,
)
from storefront_cart.infrastructure.utilities.i18n import tr

DEFAULT_STORAGE_KEY = "@RocketShoes:cart"


class CartStore:
    """
    Owner of the current cart

    Each operation is a read-stock, validate, mutate, persist transaction.
    Operations run one at a time behind an asyncio lock, so an operation never
    sees a cart another operation is halfway through changing. Failed
    operations leave the cart untouched and report through the notifier;
    nothing is raised to the caller.
    """

    def __init__(
        self,
        stock_repository: StockRepository,
        catalog_repository: CatalogRepository,
        storage: CartStorage,
        notifier: Notifier,
        storage_key: str = DEFAULT_STORAGE_KEY,
        locale: Optional[str] = None,
    ):
        self._stock_repository = stock_repository
        self._catalog_repository = catalog_repository
        self._storage = storage
        self._notifier = notifier
        self._storage_key = storage_key
        self._locale = locale or DEFAULT_LOCALE
        self._cart = Cart()
        self._lock = asyncio.Lock()
        self._persistence_degraded = False
        self._logger = logging.getLogger(self.__class__.__name__)
        self._perf_logger = logging.getLogger("performance")
        self._audit_logger = get_structured_logger("cart.audit")

    @property
    def cart(self) -> Tuple[CartEntry, ...]:
        """Read-only snapshot of the current entries, in cart order"""
        return self._cart.entries

    @property
    def persistence_degraded(self) -> bool:
        """True while the last storage write failed"""
        return self._persistence_degraded

    def summary(self) -> CartSummary:
        return CartSummary.from_cart(self._cart)

    def restore(self) -> Tuple[CartEntry, ...]:
        """
        Load the persisted cart; absent or malformed data gives an empty cart

        Meant for startup. While an operation holds the lock the call is refused
        and the current cart is returned, since that operation will commit over
        whatever was loaded.
        """
        if self._lock.locked():
            self._logger.warning("⚠️ RESTORE SKIPPED: an operation is in progress")
            return self.cart

        try:
            blob = self._storage.get(self._storage_key)
        except (CartPersistenceError, OSError) as e:
            self._logger.warning("⚠️ RESTORE: storage unreadable, starting empty: %s", e)
            blob = None

        if blob is None:
            self._logger.info("📭 RESTORE: no stored cart under %s", self._storage_key)
            self._cart = Cart()
            return self.cart

        try:
            self._cart = Cart.from_json(blob)
        except MalformedPersistedStateError as e:
            self._logger.warning("⚠️ RESTORE: %s, starting empty", e)
            self._cart = Cart()
            return self.cart

        self._logger.info(
            "📦 RESTORE: %d entries, %d items", len(self._cart), self._cart.item_count
        )
        return self.cart

    async def add_product(self, product_id: int) -> None:
        """Add one unit of a product, inserting it at the end if absent"""
        self._logger.info("🛒 ADD PRODUCT: %s", product_id)

        async with self._lock:
            with PerformanceLogger(
                "add_product", self._perf_logger, {"product_id": product_id}
            ):
                try:
                    new_cart = await self._cart_with_added(product_id)
                except StockExceededError as e:
                    self._logger.warning("🚫 ADD REJECTED: %s", e)
                    self._notify_error(NotificationKeys.STOCK_EXCEEDED)
                    return
                except (LookupFailedError, ValueError) as e:
                    self._logger.error("💥 ADD FAILED: %s", e)
                    self._notify_error(NotificationKeys.ADD_FAILED)
                    return
                except Exception as e:
                    self._logger.error("💥 ADD FAILED: backend error: %s", e, exc_info=True)
                    self._notify_error(NotificationKeys.ADD_FAILED)
                    return

                self._commit(new_cart)

        self._logger.info("✅ ADD PRODUCT: %s now x%d", product_id, self._amount_of(product_id))

    async def _cart_with_added(self, product_id: int) -> Cart:
        pid = ProductId(product_id)
        existing = self._cart.find(pid.value)

        stock = await self._stock_repository.get_stock(pid)
        requested = (existing.amount if existing else 0) + 1
        if not stock.allows(requested):
            raise StockExceededError(pid.value, requested, stock.amount)

        if existing:
            return self._cart.with_amount(pid.value, requested)

        product = await self._catalog_repository.get_product(pid)
        if product.id != pid.value:
            raise CatalogLookupError(pid.value, f"catalog returned product {product.id}")
        return self._cart.with_entry_appended(CartEntry.from_product(product, amount=1))

    async def remove_product(self, product_id: int) -> None:
        """Delete the entry for a product"""
        self._logger.info("🗑️ REMOVE PRODUCT: %s", product_id)

        async with self._lock:
            with PerformanceLogger(
                "remove_product", self._perf_logger, {"product_id": product_id}
            ):
                if self._cart.index_of(product_id) < 0:
                    self._logger.warning(
                        "⚠️ REMOVE FAILED: %s", EntryNotFoundError(product_id)
                    )
                    self._notify_error(NotificationKeys.REMOVE_FAILED)
                    return

                self._commit(self._cart.without_product(product_id))

        self._logger.info("✅ REMOVE PRODUCT: %s, %d entries left", product_id, len(self._cart))

    async def update_product_amount(self, request: UpdateProductAmount) -> None:
        """Set an existing entry's quantity; zero or negative amounts are ignored"""
        if request.amount <= 0:
            self._logger.debug(
                "UPDATE AMOUNT ignored: product %s, amount %s",
                request.product_id,
                request.amount,
            )
            return

        self._logger.info(
            "🔄 UPDATE AMOUNT: product %s -> %s", request.product_id, request.amount
        )

        async with self._lock:
            with PerformanceLogger(
                "update_product_amount",
                self._perf_logger,
                {"product_id": request.product_id},
            ):
                try:
                    new_cart = await self._cart_with_amount(request)
                except StockExceededError as e:
                    self._logger.warning("🚫 UPDATE REJECTED: %s", e)
                    self._notify_error(NotificationKeys.STOCK_EXCEEDED)
                    return
                except (LookupFailedError, EntryNotFoundError, ValueError) as e:
                    self._logger.error("💥 UPDATE FAILED: %s", e)
                    self._notify_error(NotificationKeys.UPDATE_FAILED)
                    return
                except Exception as e:
                    self._logger.error(
                        "💥 UPDATE FAILED: backend error: %s", e, exc_info=True
                    )
                    self._notify_error(NotificationKeys.UPDATE_FAILED)
                    return

                self._commit(new_cart)

        self._logger.info("✅ UPDATE AMOUNT: product %s now x%d", request.product_id, request.amount)

    async def _cart_with_amount(self, request: UpdateProductAmount) -> Cart:
        pid = ProductId(request.product_id)

        stock = await self._stock_repository.get_stock(pid)
        if not stock.allows(request.amount):
            raise StockExceededError(pid.value, request.amount, stock.amount)

        if self._cart.find(pid.value) is None:
            raise EntryNotFoundError(pid.value)

        return self._cart.with_amount(pid.value, request.amount)

    def _commit(self, new_cart: Cart) -> None:
        """Swap in the new cart and mirror it to storage"""
        self._cart = new_cart

        try:
            self._storage.set(self._storage_key, new_cart.to_json())
        except (CartPersistenceError, OSError) as e:
            # The in-memory cart stays authoritative; the next full write heals storage
            self._logger.error("💾 PERSIST FAILED: %s", e)
            self._mark_degraded()
            return
        except Exception as e:
            self._logger.error("💾 PERSIST FAILED: storage error: %s", e, exc_info=True)
            self._mark_degraded()
            return

        if self._persistence_degraded:
            self._logger.info("💾 PERSIST RECOVERED: storage in sync again")
            self._persistence_degraded = False

        self._audit_logger.info(
            "cart_persisted",
            key=self._storage_key,
            entries=len(new_cart),
            items=new_cart.item_count,
            subtotal=round(new_cart.subtotal, 2),
        )

    def _mark_degraded(self) -> None:
        self._persistence_degraded = True
        self._notifier.warning(tr(NotificationKeys.PERSIST_FAILED, self._locale))

    def _notify_error(self, key: str) -> None:
        self._notifier.error(tr(key, self._locale))

    def _amount_of(self, product_id: int) -> int:
        entry = self._cart.find(product_id)
        return entry.amount if entry else 0
