"""SQLite storage for inventory items and user accounts."""

from __future__ import annotations

import io
import logging
import os
import sqlite3
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from .item import Item

log = logging.getLogger(__name__)

DEFAULT_DATABASE = "inventario.db"

DEFAULT_USERS = (
    ("admin", "password", "admin"),
    ("user", "password", "user"),
)

_PRODUCTS_TABLE = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    quantity INTEGER NOT NULL,
    image_path TEXT,
    image_data BLOB,
    brand TEXT,
    size INTEGER,
    category TEXT,
    deposit TEXT,
    minimum_stock INTEGER DEFAULT 5,
    created_at TEXT DEFAULT (datetime('now')),
    updated_at TEXT DEFAULT (datetime('now'))
)
"""

_USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT UNIQUE NOT NULL,
    password TEXT NOT NULL,
    role TEXT NOT NULL
)
"""

_SELECT_ITEMS = (
    "SELECT id, name, quantity, image_path, image_data, brand, size, "
    "category, deposit, minimum_stock FROM products"
)


class DatabaseError(Exception):
    """Raised when the inventory database cannot do what was asked."""


def image_to_png_bytes(path: Union[str, os.PathLike, None]) -> Optional[bytes]:
    """Load the image at ``path`` and return it encoded as PNG, or None if it cannot be loaded."""
    if not path:
        return None
    try:
        with Image.open(path) as image:
            image.load()
            buffer = io.BytesIO()
            image.save(buffer, "PNG")
    except (OSError, ValueError, UnidentifiedImageError):
        return None
    return buffer.getvalue()


def _row_to_item(row: sqlite3.Row) -> Item:
    return Item(
        name=row["name"] or "",
        quantity=int(row["quantity"] or 0),
        image_file_path=row["image_path"] or "",
        brand=row["brand"] or "",
        size=int(row["size"] or 0),
        category=row["category"] or "",
        deposit=row["deposit"] or "",
        minimum_stock=int(row["minimum_stock"] or 0),
        id=int(row["id"]),
    )


def _item_params(item: Item) -> dict:
    return {
        "name": item.name,
        "quantity": item.quantity,
        "image_path": item.image_file_path,
        "image_data": image_to_png_bytes(item.image_file_path),
        "brand": item.brand,
        "size": item.size,
        "category": item.category,
        "deposit": item.deposit,
        "minimum_stock": item.minimum_stock,
    }


class DatabaseManager:
    """Owns the connection to the inventory database."""

    def __init__(self, path: Union[str, os.PathLike] = DEFAULT_DATABASE) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseError("database is not open")
        return self._conn

    def _execute(self, sql: str, params=(), action: str = "query") -> sqlite3.Cursor:
        try:
            return self._connection().execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Error {action}: {exc}") from exc

    def initialize(self) -> None:
        """Open the database and make sure its tables and default users exist."""
        if self._conn is None:
            try:
                conn = sqlite3.connect(self.path, isolation_level=None)
            except sqlite3.Error as exc:
                raise DatabaseError(f"Error connecting to SQLite: {exc}") from exc
            conn.row_factory = sqlite3.Row
            self._conn = conn
            log.debug("Successful connection to SQLite")
        self.create_tables()
        self.create_default_users()

    def create_tables(self) -> None:
        """Create the products table if it is missing."""
        self._execute(_PRODUCTS_TABLE, action="creating table")

    def create_default_users(self) -> None:
        """Create the users table and the default accounts if they are missing."""
        self._execute(_USERS_TABLE, action="creating users table")
        for username, password, role in DEFAULT_USERS:
            try:
                self._execute(
                    "INSERT OR IGNORE INTO users (username, password, role) VALUES (?, ?, ?)",
                    (username, password, role),
                    action=f"inserting {username}",
                )
            except DatabaseError as exc:
                log.warning("%s", exc)

    def insert_item(self, item: Item) -> int:
        """Store a new item and give it the id the database generated."""
        cursor = self._execute(
            """
            INSERT INTO products (name, quantity, image_path, image_data, brand, size,
                                  category, deposit, minimum_stock)
            VALUES (:name, :quantity, :image_path, :image_data, :brand, :size,
                    :category, :deposit, :minimum_stock)
            """,
            _item_params(item),
            action="inserting item",
        )
        item.id = int(cursor.lastrowid)
        return item.id

    def update_item(self, item: Item) -> None:
        """Write every field of ``item`` over the row with its id."""
        params = _item_params(item)
        params["id"] = item.id
        self._execute(
            """
            UPDATE products SET
                name = :name,
                quantity = :quantity,
                image_path = :image_path,
                image_data = :image_data,
                brand = :brand,
                size = :size,
                category = :category,
                deposit = :deposit,
                minimum_stock = :minimum_stock
            WHERE id = :id
            """,
            params,
            action="updating item",
        )

    def delete_item(self, item_id: int) -> None:
        """Remove the item with the given id."""
        self._execute("DELETE FROM products WHERE id = ?", (item_id,), action="deleting item")

    def get_all_items(self) -> list[Item]:
        """Return every stored item in table order."""
        rows = self._execute(_SELECT_ITEMS, action="reading items").fetchall()
        return [_row_to_item(row) for row in rows]

    def get_item_by_id(self, item_id: int) -> Optional[Item]:
        """Return the item with the given id, or None if there is none."""
        row = self._execute(
            _SELECT_ITEMS + " WHERE id = ?", (item_id,), action="reading item"
        ).fetchone()
        return _row_to_item(row) if row is not None else None

    def add_user(self, username: str, password: str, role: str) -> None:
        """Create a user account."""
        self._execute(
            "INSERT INTO users (username, password, role) VALUES (?, ?, ?)",
            (username, password, role),
            action="creating user",
        )

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "DatabaseManager":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()