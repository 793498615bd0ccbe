"""Inventory items and their stock state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_MINIMUM_STOCK = 5
UNSAVED_ID = -1
AVERAGE_STOCK_MARGIN = 5


class StockLevel(Enum):
    """How an item's quantity compares with its minimum stock."""

    LOW = "low"
    AVERAGE = "average"
    OK = "ok"


@dataclass
class Item:
    """A product kept in the store's inventory."""

    name: str
    quantity: int
    image_file_path: str
    brand: str
    size: int
    category: str
    deposit: str
    minimum_stock: int = DEFAULT_MINIMUM_STOCK
    id: int = UNSAVED_ID

    def is_low_stock(self) -> bool:
        """True when the quantity has fallen to the minimum stock or below."""
        return self.quantity <= self.minimum_stock

    def stock_level(self) -> StockLevel:
        """Classify the quantity as low, average or fine."""
        if self.is_low_stock():
            return StockLevel.LOW
        if self.quantity <= self.minimum_stock + AVERAGE_STOCK_MARGIN:
            return StockLevel.AVERAGE
        return StockLevel.OK