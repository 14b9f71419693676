"""
Cart Entity - ordered, id-unique sequence of cart entries

Carts are immutable: every mutation returns a new Cart, so a snapshot handed to
a caller never changes underneath it.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Optional, Tuple

from storefront_cart.domain.entities.product_entity import Product
from storefront_cart.infrastructure.utilities.exceptions import (
    MalformedPersistedStateError,
)


@dataclass(frozen=True)
class CartEntry:
    """One product and its requested quantity"""

    product_id: int
    amount: int
    title: str = ""
    price: float = 0.0
    image: str = ""

    def __post_init__(self):
        if not isinstance(self.product_id, int) or isinstance(self.product_id, bool):
            raise ValueError("Cart entry product id must be an integer")
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValueError("Cart entry amount must be an integer")
        if self.amount < 1:
            raise ValueError("Cart entry amount must be at least 1")

    @classmethod
    def from_product(cls, product: Product, amount: int = 1) -> "CartEntry":
        """Create an entry by copying the product metadata"""
        return cls(
            product_id=product.id,
            amount=amount,
            title=product.title,
            price=product.price,
            image=product.image,
        )

    @property
    def subtotal(self) -> float:
        return self.price * self.amount

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the storefront's stored cart layout"""
        return {
            "id": self.product_id,
            "title": self.title,
            "price": self.price,
            "image": self.image,
            "amount": self.amount,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartEntry":
        """Create from dictionary"""
        price = data["price"]
        if not isinstance(price, (int, float)) or isinstance(price, bool):
            raise ValueError("Cart entry price must be a number")
        title = data["title"]
        image = data.get("image", "")
        if not isinstance(title, str) or not isinstance(image, str):
            raise ValueError("Cart entry title and image must be strings")
        return cls(
            product_id=data["id"],
            amount=data["amount"],
            title=title,
            price=price,
            image=image,
        )


@dataclass(frozen=True)
class Cart:
    """Ordered sequence of entries, unique by product id"""

    entries: Tuple[CartEntry, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable but always hold a tuple
        object.__setattr__(self, "entries", tuple(self.entries))
        seen = set()
        for entry in self.entries:
            if entry.product_id in seen:
                raise ValueError(f"Duplicate cart entry for product {entry.product_id}")
            seen.add(entry.product_id)

    def __iter__(self) -> Iterator[CartEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def find(self, product_id: int) -> Optional[CartEntry]:
        """Return the entry for *product_id* or None"""
        return next(
            (entry for entry in self.entries if entry.product_id == product_id), None
        )

    def index_of(self, product_id: int) -> int:
        """Position of the entry for *product_id*, -1 if absent"""
        for index, entry in enumerate(self.entries):
            if entry.product_id == product_id:
                return index
        return -1

    def with_entry_appended(self, entry: CartEntry) -> "Cart":
        return Cart(self.entries + (entry,))

    def with_amount(self, product_id: int, amount: int) -> "Cart":
        """Copy of the cart with one entry's amount replaced, position preserved"""
        index = self.index_of(product_id)
        if index < 0:
            raise KeyError(product_id)
        entries = list(self.entries)
        entries[index] = replace(entries[index], amount=amount)
        return Cart(entries)

    def without_product(self, product_id: int) -> "Cart":
        index = self.index_of(product_id)
        if index < 0:
            raise KeyError(product_id)
        return Cart(self.entries[:index] + self.entries[index + 1:])

    @property
    def item_count(self) -> int:
        return sum(entry.amount for entry in self.entries)

    @property
    def subtotal(self) -> float:
        return sum(entry.subtotal for entry in self.entries)

    def to_list(self) -> List[Dict[str, Any]]:
        return [entry.to_dict() for entry in self.entries]

    def to_json(self) -> str:
        """Serialize the whole cart for durable storage"""
        return json.dumps(self.to_list(), ensure_ascii=False)

    @classmethod
    def from_json(cls, blob: str) -> "Cart":
        """
        Decode a stored cart blob

        Raises MalformedPersistedStateError when the blob is not valid JSON,
        is not an array of entries, or breaks the cart invariants.
        """
        try:
            data = json.loads(blob)
        except (TypeError, ValueError) as e:
            raise MalformedPersistedStateError(f"invalid JSON ({e})") from e

        if not isinstance(data, list):
            raise MalformedPersistedStateError("stored cart is not an array")

        try:
            entries = [CartEntry.from_dict(item) for item in data]
            return cls(entries)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise MalformedPersistedStateError(f"invalid cart entry ({e})") from e
