import pytest

from stockroom.database import DatabaseManager
from stockroom.inventory import Inventory, describe, display_text
from stockroom.item import Item
from stockroom.users import Role


def make_item(name="Soap", quantity=20, minimum_stock=5):
    return Item(
        name=name,
        quantity=quantity,
        image_file_path="none.png",
        brand="Acme",
        size=250,
        category="Cleaning",
        deposit="North",
        minimum_stock=minimum_stock,
    )


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(tmp_path / "inventory.db")
    manager.initialize()
    yield manager
    manager.close()


def test_reload_loads_existing_items(db):
    db.insert_item(make_item("Soap"))
    db.insert_item(make_item("Brush"))
    inventory = Inventory(db, "user")
    assert [item.name for item in inventory] == ["Soap", "Brush"]
    assert len(inventory) == 2


def test_add_persists_and_assigns_id(db):
    inventory = Inventory(db, Role.USER)
    item = inventory.add(make_item("Towel"))
    assert item.id >= 1
    assert db.get_item_by_id(item.id) == item
    assert inventory[0] is item


def test_remove_deletes_from_list_and_database(db):
    inventory = Inventory(db, "user")
    first = inventory.add(make_item("A"))
    second = inventory.add(make_item("B"))
    removed = inventory.remove(0)
    assert removed is first
    assert [item.name for item in inventory] == ["B"]
    assert db.get_item_by_id(first.id) is None
    assert db.get_item_by_id(second.id) == second


@pytest.mark.parametrize("index", [-1, 0, 3])
def test_remove_rejects_bad_index(db, index):
    inventory = Inventory(db, "user")
    with pytest.raises(IndexError):
        inventory.remove(index)


def test_update_writes_changes(db):
    inventory = Inventory(db, "user")
    item = inventory.add(make_item("Soap", quantity=20))
    item.quantity = 2
    item.name = "Liquid soap"
    inventory.update(0)
    stored = db.get_item_by_id(item.id)
    assert stored.quantity == 2
    assert stored.name == "Liquid soap"


def test_reload_discards_unsaved_changes(db):
    inventory = Inventory(db, "user")
    inventory.add(make_item("Soap", quantity=20))
    inventory[0].quantity = 99
    inventory.reload()
    assert inventory[0].quantity == 20


def test_display_text_marks_low_stock():
    assert display_text(make_item("Soap", quantity=5)) == "Soap ⚠️ LOW STOCK"
    assert display_text(make_item("Soap", quantity=20)) == "Soap"


@pytest.mark.parametrize(
    "quantity, status",
    [(3, "⚠️ LOW STOCK"), (10, "⚠️ AVERAGE STOCK"), (11, "✅ STOCK OK")],
)
def test_describe_status(quantity, status):
    details = describe(make_item(quantity=quantity))
    assert details["Status"] == status
    assert details["Quantity"] == str(quantity)
    assert details["Name"] == "Soap"


def test_low_stock_items_and_report(db):
    inventory = Inventory(db, "user")
    inventory.add(make_item("Soap", quantity=1))
    inventory.add(make_item("Brush", quantity=50))
    assert [item.name for item in inventory.low_stock_items()] == ["Soap"]
    report = inventory.low_stock_report()
    assert report.startswith("The following products are in low stock:\n\n")
    assert "Soap (Cantidad: 1, Mínimo: 5)" in report
    assert "Brush" not in report


def test_report_and_title_without_low_stock(db):
    inventory = Inventory(db, "user")
    inventory.add(make_item("Brush", quantity=50))
    assert inventory.low_stock_report() is None
    assert inventory.window_title() == "Inventory System"


def test_window_title_counts_low_stock(db):
    inventory = Inventory(db, "user")
    inventory.add(make_item("A", quantity=0))
    inventory.add(make_item("B", quantity=2))
    assert inventory.window_title() == "Inventory system - ⚠️ LOW STOCK (2 products)"


def test_can_manage_users_by_role(db):
    assert Inventory(db, "admin").can_manage_users() is True
    assert Inventory(db, Role.ADMIN).can_manage_users() is True
    assert Inventory(db, "user").can_manage_users() is False


def test_unknown_role_rejected(db):
    with pytest.raises(ValueError):
        Inventory(db, "guest")