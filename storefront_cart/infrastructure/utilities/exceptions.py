"""
Custom exceptions for the storefront cart
"""


class CartStoreError(Exception):
    """Base exception for the cart store"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code or "GENERAL_ERROR"


class LookupFailedError(CartStoreError):
    """Stock or catalog backend could not answer for a product"""

    def __init__(self, message: str, product_id: int = None):
        super().__init__(message, error_code="LOOKUP_ERROR")
        self.product_id = product_id


class StockLookupError(LookupFailedError):
    """Stock backend unreachable or product unknown"""

    def __init__(self, product_id: int, reason: str = None):
        super().__init__(
            f"Stock lookup failed for product {product_id}: {reason or 'unknown error'}",
            product_id,
        )


class CatalogLookupError(LookupFailedError):
    """Catalog backend unreachable or product unknown"""

    def __init__(self, product_id: int, reason: str = None):
        super().__init__(
            f"Catalog lookup failed for product {product_id}: {reason or 'unknown error'}",
            product_id,
        )


class StockExceededError(CartStoreError):
    """Requested quantity is above the available stock"""

    def __init__(self, product_id: int, requested: int, available: int):
        super().__init__(
            f"Requested {requested} of product {product_id}, only {available} in stock",
            error_code="STOCK_EXCEEDED",
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class EntryNotFoundError(CartStoreError):
    """Cart has no entry for the product"""

    def __init__(self, product_id: int):
        super().__init__(
            f"No cart entry for product {product_id}", error_code="ENTRY_NOT_FOUND"
        )
        self.product_id = product_id


class MalformedPersistedStateError(CartStoreError):
    """Stored cart blob could not be decoded"""

    def __init__(self, reason: str):
        super().__init__(
            f"Malformed persisted cart: {reason}", error_code="MALFORMED_STATE"
        )


class CartPersistenceError(CartStoreError):
    """Writing the cart to durable storage failed"""

    def __init__(self, message: str, key: str = None):
        super().__init__(message, error_code="PERSISTENCE_ERROR")
        self.key = key
