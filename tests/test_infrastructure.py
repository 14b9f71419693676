"""
Infrastructure Tests - Notifications, Translations, Logging, Wiring
"""

import json
import logging
from unittest.mock import MagicMock

import pytest

from conftest import ADD_FAILED, STORAGE_KEY, FakeCartStorage, RecordingNotifier
from storefront_cart.application.use_cases.cart_store import CartStore
from storefront_cart.infrastructure.configuration.config import Settings
from storefront_cart.infrastructure.container.dependency_injection import (
    DependencyContainer,
)
from storefront_cart.infrastructure.logging.logging_config import (
    CartJsonFormatter,
    LoggingConfigOptions,
    PerformanceLogger,
    setup_logging,
)
from storefront_cart.infrastructure.repositories.json_catalog_repository import (
    JsonCatalogRepository,
)
from storefront_cart.infrastructure.repositories.json_file_cart_storage import (
    JsonFileCartStorage,
)
from storefront_cart.infrastructure.services.notification_service import (
    CallbackNotifier,
    LoggingNotifier,
)
from storefront_cart.infrastructure.utilities.constants import NotificationKeys
from storefront_cart.infrastructure.utilities.exceptions import (
    CartStoreError,
    EntryNotFoundError,
    StockExceededError,
    StockLookupError,
)
from storefront_cart.infrastructure.utilities.i18n import tr


class TestNotifiers:
    """Test notification channels"""

    def test_logging_notifier_history(self, caplog):
        notifier = LoggingNotifier(history_size=2)

        with caplog.at_level(logging.WARNING):
            notifier.error("one")
            notifier.warning("two")
            notifier.error("three")

        assert notifier.history == (("warning", "two"), ("error", "three"))
        assert "USER ERROR: three" in caplog.text

    def test_callback_notifier_forwards(self):
        callback = MagicMock()
        notifier = CallbackNotifier(callback)

        notifier.error("boom")
        notifier.warning("careful")

        assert callback.call_args_list[0].args == ("error", "boom")
        assert callback.call_args_list[1].args == ("warning", "careful")

    def test_callback_failure_is_contained(self, caplog):
        notifier = CallbackNotifier(MagicMock(side_effect=RuntimeError("ui gone")))

        with caplog.at_level(logging.ERROR):
            notifier.error("boom")

        assert "NOTIFICATION FAILED" in caplog.text


class TestTranslations:
    """Test i18n lookups"""

    def test_default_locale_messages(self):
        assert tr(NotificationKeys.ADD_FAILED) == "Erro na adição do produto"
        assert tr(NotificationKeys.STOCK_EXCEEDED) == "Quantidade solicitada fora de estoque"
        assert tr(NotificationKeys.REMOVE_FAILED) == "Erro na remoção do produto"
        assert tr(NotificationKeys.UPDATE_FAILED) == "Erro na alteração de quantidade do produto"

    def test_english_messages(self):
        assert tr(NotificationKeys.STOCK_EXCEEDED, "en") == "Requested quantity exceeds stock"

    def test_unknown_locale_falls_back(self):
        assert tr(NotificationKeys.ADD_FAILED, "xx") == "Erro na adição do produto"

    def test_unknown_key(self):
        assert tr("NO_SUCH_KEY", "en") == "NO_SUCH_KEY"

    @pytest.mark.asyncio
    async def test_store_uses_configured_locale(
        self, stock_repository, catalog_repository, storage
    ):
        notifier = RecordingNotifier()
        store = CartStore(
            stock_repository, catalog_repository, storage, notifier, locale="en"
        )

        await store.remove_product(1)

        assert notifier.errors == ["Could not remove the product"]


class TestExceptions:
    """Test the exception hierarchy"""

    def test_error_codes(self):
        assert StockLookupError(1).error_code == "LOOKUP_ERROR"
        assert StockExceededError(1, 4, 3).error_code == "STOCK_EXCEEDED"
        assert EntryNotFoundError(1).error_code == "ENTRY_NOT_FOUND"

    def test_stock_exceeded_details(self):
        error = StockExceededError(1, requested=4, available=3)
        assert isinstance(error, CartStoreError)
        assert (error.requested, error.available) == (4, 3)
        assert "only 3 in stock" in str(error)


class TestLogging:
    """Test logging setup"""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_setup_logging_writes_json(self, tmp_path):
        options = LoggingConfigOptions(
            log_level="DEBUG", log_dir=str(tmp_path), enable_console=False
        )
        setup_logging(options)

        logging.getLogger("cart-test").info("hello", extra={"product_id": 7})
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = (tmp_path / "storefront_cart.json.log").read_text(encoding="utf-8").splitlines()
        record = json.loads(lines[-1])
        assert record["message"] == "hello"
        assert record["level"] == "INFO"
        assert record["logger"] == "cart-test"
        assert record["product_id"] == 7
        assert (tmp_path / "storefront_cart.log").exists()

    def test_console_only(self, tmp_path):
        setup_logging(
            LoggingConfigOptions(
                log_dir=str(tmp_path / "unused"), enable_file=False, enable_json=False
            )
        )

        assert not (tmp_path / "unused").exists()
        assert len(logging.getLogger().handlers) == 1

    def test_json_formatter_fields(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg", None, None)
        record.operation_time = 12.5
        data = json.loads(CartJsonFormatter().format(record))

        assert data["operation_time_ms"] == 12.5
        assert data["level"] == "WARNING"


class TestPerformanceLogger:
    """Test operation timing"""

    def test_success_is_debug(self):
        logger = MagicMock()
        with PerformanceLogger("op", logger, {"product_id": 1}) as perf:
            pass

        assert perf.duration_ms >= 0
        logger.debug.assert_called_once()
        assert logger.debug.call_args.kwargs["extra"]["product_id"] == 1

    def test_failure_is_logged_and_propagates(self):
        logger = MagicMock()
        with pytest.raises(RuntimeError):
            with PerformanceLogger("op", logger):
                raise RuntimeError("boom")

        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["extra"]["success"] is False


class TestDependencyContainer:
    """Test wiring"""

    def test_defaults_from_settings(self, tmp_path):
        settings = Settings(
            storage_path=str(tmp_path / "storage.json"),
            catalog_path=str(tmp_path / "catalog.json"),
        )
        container = DependencyContainer(settings)

        assert isinstance(container.get_storage(), JsonFileCartStorage)
        assert isinstance(container.get_stock_repository(), JsonCatalogRepository)
        assert container.get_stock_repository() is container.get_catalog_repository()
        assert isinstance(container.get_notifier(), LoggingNotifier)
        assert container.get_cart_store() is container.get_cart_store()
        assert container.get_settings() is settings

    @pytest.mark.asyncio
    async def test_store_end_to_end(self, tmp_path, catalog_document):
        catalog_path = tmp_path / "catalog.json"
        catalog_path.write_text(json.dumps(catalog_document), encoding="utf-8")
        settings = Settings(
            storage_path=str(tmp_path / "storage.json"),
            catalog_path=str(catalog_path),
        )

        store = DependencyContainer(settings).initialize()
        await store.add_product(1)
        await store.add_product(1)

        restored = DependencyContainer(settings).initialize()
        assert [(e.product_id, e.amount) for e in restored.cart] == [(1, 2)]

    @pytest.mark.asyncio
    async def test_injected_collaborators(self, stock_repository, catalog_repository):
        storage = FakeCartStorage()
        notifier = RecordingNotifier()
        container = DependencyContainer(
            Settings(cart_storage_key=STORAGE_KEY),
            storage=storage,
            stock_repository=stock_repository,
            catalog_repository=catalog_repository,
            notifier=notifier,
        )
        store = container.initialize()

        await store.add_product(1)
        await store.add_product(99)

        assert STORAGE_KEY in storage.data
        assert notifier.errors == [ADD_FAILED]
