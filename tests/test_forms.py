from pathlib import Path

import pytest
from PIL import Image

from stockroom.forms import (
    ValidationError,
    apply_update,
    import_image,
    low_stock_warning,
    new_item,
    parse_size,
)
from stockroom.item import Item


def _make_png(path: Path, color=(255, 0, 0)) -> Path:
    Image.new("RGB", (4, 4), color).save(path, "PNG")
    return path


def _item(quantity=20, minimum_stock=5):
    return Item("Soap", quantity, "none.png", "Acme", 250, "Hygiene", "North", minimum_stock, 3)


@pytest.mark.parametrize("text, expected", [("250", 250), (" 40 ", 40), ("", 0), ("abc", 0), (7, 7)])
def test_parse_size_reads_numbers(text, expected):
    assert parse_size(text) == expected


@pytest.mark.parametrize("text", ["-1", -3])
def test_parse_size_rejects_negative(text):
    with pytest.raises(ValidationError, match="Size cannot be negative."):
        parse_size(text)


def test_new_item_keeps_fields():
    item = new_item("Soap", 12, "images/soap.png", "Acme", "250", "Hygiene", "North", 4)
    assert item.name == "Soap"
    assert item.quantity == 12
    assert item.image_file_path == "images/soap.png"
    assert item.size == 250
    assert item.minimum_stock == 4
    assert item.id == -1


def test_new_item_defaults_image_to_none_png():
    item = new_item("Soap", 12, "", "Acme", 1, "Hygiene", "North", 5)
    assert item.image_file_path == "none.png"


@pytest.mark.parametrize("name, quantity", [("   ", 3), ("", 3), ("Soap", 0)])
def test_new_item_rejects_blank_name_or_zero_quantity(name, quantity):
    with pytest.raises(ValidationError, match="at least 1 item"):
        new_item(name, quantity, "none.png", "Acme", 1, "Hygiene", "North", 5)


def test_new_item_rejects_size_over_limit():
    with pytest.raises(ValidationError):
        new_item("Soap", 3, "none.png", "Acme", 10001, "Hygiene", "North", 5)


def test_new_item_rejects_minimum_stock_out_of_range():
    with pytest.raises(ValidationError):
        new_item("Soap", 3, "none.png", "Acme", 1, "Hygiene", "North", 1001)


def test_apply_update_overwrites_fields_and_keeps_id():
    item = _item()
    result = apply_update(item, "Shampoo", 0, "images/s.png", "Other", "500", "Care", "South", 2)
    assert result is item
    assert (item.name, item.quantity, item.size, item.minimum_stock) == ("Shampoo", 0, 500, 2)
    assert item.brand == "Other"
    assert item.deposit == "South"
    assert item.id == 3


def test_apply_update_negative_size_leaves_item_unchanged():
    item = _item()
    with pytest.raises(ValidationError, match="Size cannot be negative."):
        apply_update(item, "Shampoo", 9, "x.png", "Other", "-5", "Care", "South", 2)
    assert item == _item()


def test_apply_update_negative_quantity_rejected():
    item = _item()
    with pytest.raises(ValidationError):
        apply_update(item, "Shampoo", -1, "x.png", "Other", "5", "Care", "South", 2)
    assert item.quantity == 20


def test_import_image_copies_into_images_dir(tmp_path):
    source = _make_png(tmp_path / "photo.png")
    images = tmp_path / "images"
    local = import_image(source, images)
    assert Path(local) == images / "photo.png"
    assert Path(local).read_bytes() == source.read_bytes()


def test_import_image_keeps_existing_copy(tmp_path):
    images = tmp_path / "images"
    images.mkdir()
    existing = _make_png(images / "photo.png", (0, 0, 255))
    before = existing.read_bytes()
    source_dir = tmp_path / "src"
    source_dir.mkdir()
    source = _make_png(source_dir / "photo.png", (0, 255, 0))
    local = import_image(source, images)
    assert Path(local).read_bytes() == before


def test_import_image_rejects_non_image(tmp_path):
    source = tmp_path / "notes.png"
    source.write_text("not an image")
    with pytest.raises(ValidationError, match="could not be loaded"):
        import_image(source, tmp_path / "images")


def test_import_image_missing_source(tmp_path):
    with pytest.raises(ValidationError, match="Could not copy image."):
        import_image(tmp_path / "missing.png", tmp_path / "images")


def test_low_stock_warning_for_low_item():
    message = low_stock_warning(_item(quantity=5, minimum_stock=5))
    assert message.startswith("ATTENTION! Product 'Soap' is in low stock.")
    assert "Current amount: 5" in message


def test_low_stock_warning_none_when_stock_is_fine():
    assert low_stock_warning(_item(quantity=6, minimum_stock=5)) is None