"""
Dependency injection for the cart store.
"""

from .dependency_injection import DependencyContainer

__all__ = ["DependencyContainer"]
