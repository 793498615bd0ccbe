"""Validation and construction of items entered through the add and edit forms."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from .item import Item

DEFAULT_IMAGE = "none.png"
DEFAULT_IMAGES_DIR = "images"
MAX_SIZE = 10000
MINIMUM_STOCK_RANGE = range(0, 1001)


class ValidationError(ValueError):
    """Raised when form input cannot be accepted."""


def parse_size(text: Union[str, int]) -> int:
    """Read a size field; text that is not a number counts as 0, negatives are rejected."""
    if isinstance(text, int):
        size = text
    else:
        try:
            size = int(text.strip())
        except ValueError:
            size = 0
    if size < 0:
        raise ValidationError("Size cannot be negative.")
    return size


def _check_minimum_stock(minimum_stock: int) -> int:
    if minimum_stock not in MINIMUM_STOCK_RANGE:
        raise ValidationError(
            f"Minimum stock must be between {MINIMUM_STOCK_RANGE.start} "
            f"and {MINIMUM_STOCK_RANGE.stop - 1}."
        )
    return minimum_stock


def new_item(
    name: str,
    quantity: int,
    image_file_path: Optional[str],
    brand: str,
    size: Union[str, int],
    category: str,
    deposit: str,
    minimum_stock: int = 5,
) -> Item:
    """Build a new, unsaved item from the add form's fields."""
    if not name.strip() or quantity < 1:
        raise ValidationError("Must have a valid name and add at least 1 item")
    parsed_size = parse_size(size)
    if parsed_size > MAX_SIZE:
        raise ValidationError(f"Size cannot be greater than {MAX_SIZE}.")
    return Item(
        name=name,
        quantity=quantity,
        image_file_path=image_file_path or DEFAULT_IMAGE,
        brand=brand,
        size=parsed_size,
        category=category,
        deposit=deposit,
        minimum_stock=_check_minimum_stock(minimum_stock),
    )


def apply_update(
    item: Item,
    name: str,
    quantity: int,
    image_file_path: str,
    brand: str,
    size: Union[str, int],
    category: str,
    deposit: str,
    minimum_stock: int,
) -> Item:
    """Overwrite the item's fields with the edit form's values; nothing changes if any is invalid."""
    parsed_size = parse_size(size)
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative.")
    checked_minimum = _check_minimum_stock(minimum_stock)
    item.name = name
    item.quantity = quantity
    item.image_file_path = image_file_path
    item.brand = brand
    item.size = parsed_size
    item.category = category
    item.deposit = deposit
    item.minimum_stock = checked_minimum
    return item


def import_image(
    source: Union[str, os.PathLike],
    images_dir: Union[str, os.PathLike] = DEFAULT_IMAGES_DIR,
) -> str:
    """Copy an image into the local images directory and return its local path.

    A file already present under the same name is kept as it is.
    """
    if not str(source):
        raise ValidationError("No image selected.")
    source_path = Path(source)
    target_dir = Path(images_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    local_path = target_dir / source_path.name

    if not local_path.exists():
        try:
            shutil.copyfile(source_path, local_path)
        except OSError as exc:
            raise ValidationError("Could not copy image.") from exc

    try:
        with Image.open(local_path) as image:
            image.load()
    except (OSError, ValueError, UnidentifiedImageError) as exc:
        raise ValidationError("The selected image could not be loaded.") from exc
    return str(local_path)


def low_stock_warning(item: Item) -> Optional[str]:
    """Return the warning shown for an item that is already low on stock, else None."""
    if not item.is_low_stock():
        return None
    return (
        f"ATTENTION! Product '{item.name}' is in low stock.\n"
        f"Current amount: {item.quantity}\n"
        f"Minimum stock: {item.minimum_stock}"
    )