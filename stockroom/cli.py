"""Command line front end for the store inventory."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .database import DEFAULT_DATABASE, DatabaseError, DatabaseManager
from .forms import (
    DEFAULT_IMAGES_DIR,
    ValidationError,
    apply_update,
    import_image,
    low_stock_warning,
    new_item,
)
from .inventory import Inventory, describe, display_text
from .item import DEFAULT_MINIMUM_STOCK
from .users import Role, create_user


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stockroom", description="Manage a store inventory.")
    parser.add_argument("--db", default=DEFAULT_DATABASE, help="database file")
    parser.add_argument(
        "--role", default=Role.USER.value, choices=[role.value for role in Role]
    )
    parser.add_argument("--images-dir", default=DEFAULT_IMAGES_DIR)
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="list products")

    show = commands.add_parser("show", help="show one product")
    show.add_argument("index", type=int)

    add = commands.add_parser("add", help="add a product")
    add.add_argument("name")
    add.add_argument("quantity", type=int)
    add.add_argument("--brand", default="")
    add.add_argument("--size", default="0")
    add.add_argument("--category", default="")
    add.add_argument("--deposit", default="")
    add.add_argument("--image")
    add.add_argument("--minimum-stock", type=int, default=DEFAULT_MINIMUM_STOCK)

    edit = commands.add_parser("edit", help="change a product")
    edit.add_argument("index", type=int)
    edit.add_argument("--name")
    edit.add_argument("--quantity", type=int)
    edit.add_argument("--brand")
    edit.add_argument("--size")
    edit.add_argument("--category")
    edit.add_argument("--deposit")
    edit.add_argument("--image")
    edit.add_argument("--minimum-stock", type=int)

    remove = commands.add_parser("remove", help="remove a product")
    remove.add_argument("index", type=int)

    commands.add_parser("report", help="show the low stock alert")

    add_user = commands.add_parser("add-user", help="create a user account")
    add_user.add_argument("username")
    add_user.add_argument("password")
    add_user.add_argument(
        "--user-role", default=Role.USER.value, choices=[role.value for role in Role]
    )
    return parser


def _pick(value, fallback):
    return fallback if value is None else value


def _run(args: argparse.Namespace, inventory: Inventory) -> None:
    command = args.command
    if command == "list":
        print(inventory.window_title())
        for index, item in enumerate(inventory):
            print(f"{index}: {display_text(item)}")
    elif command == "show":
        for label, value in describe(inventory[args.index]).items():
            print(f"{label}: {value}")
    elif command == "add":
        image = import_image(args.image, args.images_dir) if args.image else None
        item = new_item(
            args.name,
            args.quantity,
            image,
            args.brand,
            args.size,
            args.category,
            args.deposit,
            args.minimum_stock,
        )
        inventory.add(item)
        warning = low_stock_warning(item)
        if warning:
            print(warning)
        print("Product added successfully")
    elif command == "edit":
        item = inventory[args.index]
        image = (
            import_image(args.image, args.images_dir) if args.image else item.image_file_path
        )
        apply_update(
            item,
            _pick(args.name, item.name),
            _pick(args.quantity, item.quantity),
            image,
            _pick(args.brand, item.brand),
            _pick(args.size, item.size),
            _pick(args.category, item.category),
            _pick(args.deposit, item.deposit),
            _pick(args.minimum_stock, item.minimum_stock),
        )
        inventory.update(args.index)
        print("Product updated successfully")
    elif command == "remove":
        inventory.remove(args.index)
        print("Product successfully removed")
    elif command == "report":
        print(inventory.low_stock_report() or "No products in low stock")
    elif command == "add-user":
        if not inventory.can_manage_users():
            raise PermissionError("Only an admin can manage users.")
        create_user(inventory.db, args.username, args.password, args.user_role)
        print("User created successfully.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one inventory command and return the exit status."""
    args = _parser().parse_args(argv)
    try:
        with DatabaseManager(args.db) as db:
            _run(args, Inventory(db, args.role))
    except (ValidationError, DatabaseError, IndexError, PermissionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())