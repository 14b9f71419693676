"""
Domain value objects package

Contains immutable value objects that represent concepts in the business domain.
"""

from .product_id import ProductId
from .stock_info import StockInfo

__all__ = [
    "ProductId",
    "StockInfo",
]
