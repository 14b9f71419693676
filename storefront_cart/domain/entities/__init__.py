"""
Domain entities package

Contains the cart and the catalog product metadata copied into it.
"""

from .cart_entity import Cart, CartEntry
from .product_entity import Product

__all__ = ["Cart", "CartEntry", "Product"]
