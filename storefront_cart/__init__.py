"""
Storefront cart

In-memory shopping cart kept in sync with durable local storage and validated
against a stock/catalog backend.
"""

__version__ = "0.1.0"
