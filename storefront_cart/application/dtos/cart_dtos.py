"""
Cart DTOs

Data Transfer Objects for cart-related operations.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from storefront_cart.domain.entities.cart_entity import Cart, CartEntry


@dataclass(frozen=True)
class UpdateProductAmount:
    """Request to set a cart entry's quantity"""
    product_id: int
    amount: int


@dataclass(frozen=True)
class CartSummary:
    """Cart summary information"""
    entries: Tuple[CartEntry, ...]
    amounts: Dict[int, int] = field(default_factory=dict)
    item_count: int = 0
    subtotal: float = 0.0

    @classmethod
    def from_cart(cls, cart: Cart) -> "CartSummary":
        return cls(
            entries=cart.entries,
            amounts={entry.product_id: entry.amount for entry in cart},
            item_count=cart.item_count,
            subtotal=cart.subtotal,
        )
