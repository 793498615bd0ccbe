"""The product list shown to a signed-in user, kept in step with the database."""

from __future__ import annotations

from typing import Iterator, Optional, Union

from .database import DatabaseManager
from .item import Item, StockLevel
from .users import Role

LOW_STOCK_MARK = " ⚠️ LOW STOCK"
DEFAULT_TITLE = "Inventory System"
LOW_STOCK_TITLE = "Inventory system - ⚠️ LOW STOCK ({count} products)"
LOW_STOCK_HEADER = "The following products are in low stock:\n\n"
LOW_STOCK_LINE = "{name} (Cantidad: {quantity}, Mínimo: {minimum})"

STATUS_TEXT = {
    StockLevel.LOW: "⚠️ LOW STOCK",
    StockLevel.AVERAGE: "⚠️ AVERAGE STOCK",
    StockLevel.OK: "✅ STOCK OK",
}


def display_text(item: Item) -> str:
    """The line under which an item appears in the product list."""
    if item.is_low_stock():
        return item.name + LOW_STOCK_MARK
    return item.name


def describe(item: Item) -> dict[str, str]:
    """The labelled fields shown for a selected item, with its stock status."""
    return {
        "Name": item.name,
        "Quantity": str(item.quantity),
        "Brand": item.brand,
        "Size": str(item.size),
        "Category": item.category,
        "Deposit": item.deposit,
        "Minimum stock": str(item.minimum_stock),
        "Status": STATUS_TEXT[item.stock_level()],
        "Image": item.image_file_path,
    }


class Inventory:
    """Items loaded from the database, in the order they are listed."""

    def __init__(self, db: DatabaseManager, role: Union[Role, str]) -> None:
        self.db = db
        self.role = Role(role)
        self.items: list[Item] = []
        self.db.initialize()
        self.reload()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[self._check_index(index)]

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self.items):
            raise IndexError(f"no product at position {index}")
        return index

    def reload(self) -> list[Item]:
        """Replace the list with what the database currently holds."""
        self.items = self.db.get_all_items()
        return self.items

    def add(self, item: Item) -> Item:
        """Store a new item and append it to the list."""
        self.db.insert_item(item)
        self.items.append(item)
        return item

    def remove(self, index: int) -> Item:
        """Delete the item at ``index`` from the database and the list."""
        item = self.items[self._check_index(index)]
        self.db.delete_item(item.id)
        del self.items[index]
        return item

    def update(self, index: int) -> Item:
        """Write the item at ``index`` back to the database."""
        item = self.items[self._check_index(index)]
        self.db.update_item(item)
        return item

    def low_stock_items(self) -> list[Item]:
        """Items whose quantity is at or below their minimum stock."""
        return [item for item in self.items if item.is_low_stock()]

    def low_stock_report(self) -> Optional[str]:
        """The low-stock alert text, or None when nothing is low."""
        low = self.low_stock_items()
        if not low:
            return None
        lines = (
            LOW_STOCK_LINE.format(
                name=item.name, quantity=item.quantity, minimum=item.minimum_stock
            )
            for item in low
        )
        return LOW_STOCK_HEADER + "\n".join(lines)

    def window_title(self) -> str:
        """The title, carrying a low-stock count when there is one."""
        low = self.low_stock_items()
        if low:
            return LOW_STOCK_TITLE.format(count=len(low))
        return DEFAULT_TITLE

    def can_manage_users(self) -> bool:
        """Only administrators may create user accounts."""
        return self.role is Role.ADMIN