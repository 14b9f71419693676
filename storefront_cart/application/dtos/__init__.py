"""
Data Transfer Objects
"""

from .cart_dtos import CartSummary, UpdateProductAmount

__all__ = ["CartSummary", "UpdateProductAmount"]
