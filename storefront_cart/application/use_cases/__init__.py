"""
Use Cases

Contains the business use cases of the application.
"""

from .cart_store import CartStore

__all__ = [
    'CartStore'
]
