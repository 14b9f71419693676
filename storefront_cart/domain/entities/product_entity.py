"""
Product Entity - catalog metadata copied into the cart
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Product:
    """Catalog metadata for a product, without any cart quantity"""

    id: int
    title: str
    price: float
    image: str = ""

    def __post_init__(self):
        """Validate the product after initialization"""
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise ValueError("Product id must be an integer")

        if not isinstance(self.title, str):
            raise ValueError("Product title must be a string")

        if not isinstance(self.price, (int, float)) or isinstance(self.price, bool):
            raise ValueError("Product price must be a number")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """Build a product from a catalog record; unknown keys are ignored"""
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            price=data.get("price", 0.0),
            image=data.get("image", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "image": self.image,
        }
