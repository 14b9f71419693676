"""Stock info value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StockInfo:
    """Available quantity of a product, as reported by the stock backend"""

    product_id: int
    amount: int

    def __post_init__(self):
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValueError("Stock amount must be an integer")
        if self.amount < 0:
            raise ValueError("Stock amount cannot be negative")

    def allows(self, requested: int) -> bool:
        """Whether *requested* units fit in the available stock"""
        return requested <= self.amount
