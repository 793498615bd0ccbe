# stockroom

stockroom keeps a small shop's product inventory in a local SQLite file.
Each product has a name, a quantity, a brand, a size, a category, a deposit
(storage location), an image path and a minimum stock level.

- A product is **low stock** when its quantity is at or below its minimum.
- It is **average stock** when its quantity is at most five above the minimum.
- Otherwise its stock is **OK**.

## Installing

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## The command

The `stockroom` command runs one subcommand against the database and
then exits. Before it does, it opens the database file, which is
`inventario.db` by default. It creates the `products` and `users` tables
if they are missing. It also creates the default `admin` and `user`
accounts if they are missing.

```
stockroom [--db FILE] [--role {user,admin}] [--images-dir DIR] COMMAND ...
```

The global options must come before the subcommand:

- `--db` sets the database file.
- `--role` sets the role to act with. It defaults to `user`.
- `--images-dir` sets the folder that images are copied into. It defaults
  to `images`.

Subcommands:

| Command | What it does |
| --- | --- |
| `list` | Prints the window title, then each product as `INDEX: NAME`. Low-stock products get the mark ` ⚠️ LOW STOCK`. The title carries a count when any product is low. |
| `show INDEX` | Prints the fields of one product and its stock status. |
| `add NAME QUANTITY [--brand B] [--size S] [--category C] [--deposit D] [--image PATH] [--minimum-stock N]` | Adds a product. It prints a warning if the new product is already low on stock. |
| `edit INDEX [--name ...] [--quantity ...] [--brand ...] [--size ...] [--category ...] [--deposit ...] [--image PATH] [--minimum-stock N]` | Changes the fields given and keeps the others. |
| `remove INDEX` | Deletes a product. |
| `report` | Prints the low-stock alert, or `No products in low stock`. |
| `add-user USERNAME PASSWORD [--user-role {user,admin}]` | Creates an account. This only works with `--role admin`. |

Examples:

```
stockroom add "Sparkling water" 3 --brand Fontana --size 500 --minimum-stock 5
stockroom list
stockroom show 0
stockroom edit 0 --quantity 20
stockroom report
stockroom --role admin add-user clerk password
```

The command exits with status 0 on success. On an error it prints
`Error: ...` to standard error and exits with status 1. Errors include
invalid input, a database error, an index that does not exist, or
`add-user` without the admin role.

### Input rules

- A new product needs a name that is not blank and a quantity of at least 1.
- An edited product may have a quantity of 0, but not a negative one.
- Size must be a whole number. Text that is not a number counts as 0, and
  a negative size is rejected. A new product's size may not exceed 10000.
- Minimum stock must be between 0 and 1000. It defaults to 5.
- `--image` copies the picture into the images folder under its own file
  name. If a file with that name is already there, the existing file is
  kept. The picture must open as an image. A product added without an
  image gets the path `none.png`.
- When a product is saved, its image is also stored in the database as
  PNG data if the image can be loaded.

## Using it as a library

```python
from stockroom.database import DatabaseManager
from stockroom.forms import new_item, low_stock_warning
from stockroom.inventory import Inventory, describe

with DatabaseManager("inventario.db") as db:
    inventory = Inventory(db, "admin")

    item = new_item(
        "Sparkling water", 3, None, "Fontana", "500", "Drinks", "Back room", 5
    )
    inventory.add(item)

    print(low_stock_warning(item))
    print(describe(item))
    print(inventory.window_title())
    print(inventory.low_stock_report())
```

Modules:

- `stockroom.item` defines `Item`, a dataclass for one product. Its
  `is_low_stock()` and `stock_level()` methods report its state, which is
  a `StockLevel` of `LOW`, `AVERAGE` or `OK`.
- `stockroom.database` defines `DatabaseManager`, which stores products
  and users. Using it in a `with` block opens the database and closes it
  at the end. It provides `initialize`, `create_tables`,
  `create_default_users`, `insert_item`, `update_item`, `delete_item`,
  `get_all_items`, `get_item_by_id`, `add_user` and `close`. Failures
  raise `DatabaseError`. The module also defines `image_to_png_bytes(path)`,
  which returns an image encoded as PNG, or `None` if the image cannot be
  loaded.
- `stockroom.forms` defines `new_item`, `apply_update` and `parse_size`.
  They check input by the rules above and raise `ValidationError`, a
  subclass of `ValueError`. `apply_update` changes nothing if any field is
  invalid. The module also defines `import_image(source, images_dir)` and
  `low_stock_warning(item)`.
- `stockroom.users` defines `create_user(db, username, password, role)`.
  It trims the username, rejects empty fields and roles that are not a
  `Role` (`USER` or `ADMIN`), and stores the account.
- `stockroom.inventory` defines `Inventory`, the list of products kept in
  step with the database. It provides `reload`, `add`, `remove(index)`,
  `update(index)`, `low_stock_items`, `low_stock_report`, `window_title`
  and `can_manage_users`. The module also defines `display_text(item)` and
  `describe(item)`, which give the text of list lines and detail views.

## What it does not do

- There is no graphical window and no periodic low-stock pop-up. The
  alert is available on demand through `report` or
  `Inventory.low_stock_report()`.
- There is no sign-in. The default accounts `admin` and `user` are created
  with the password `password`, and `add-user` stores further accounts.
  Stored passwords are kept as plain text and are never checked. The role
  comes from the `--role` option, or from the `role` given to
  `Inventory`.
- Stored image data is only written, never read back. Products are shown
  by their image path.