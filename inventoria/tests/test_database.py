"""Tests du classeur servant de base"""

from openpyxl import load_workbook

from inventoria.models import CATEGORIES, PRODUCTS, STORAGE_LOCATIONS


def test_initialize_creates_sheets_with_headers(store):
    workbook = load_workbook(store.path)

    assert workbook.sheetnames == ["Products", "Categories", "Storage"]
    header = [cell.value for cell in workbook["Storage"][1]]
    assert header == list(STORAGE_LOCATIONS.columns)


def test_read_unknown_sheet_returns_empty(store):
    assert store.read_collection("Suppliers") == []


def test_corrupt_file_fails_soft(store):
    """Un fichier illisible ne lève jamais d'exception"""
    store.path.write_bytes(b"this is not a workbook")

    assert store.read_collection(PRODUCTS) == []
    assert store.append_record(PRODUCTS, {"id": "p1", "name": "Lamp"}) is False
    assert store.get_record_by_id(PRODUCTS, "p1") is None
    assert store.update_record(PRODUCTS, "p1", {"name": "Desk lamp"}) is None
    assert store.delete_record(PRODUCTS, "p1") is False


def test_append_and_get_by_id(store):
    store.append_record(CATEGORIES, {"id": "c1", "name": "Tools"})
    store.append_record(CATEGORIES, {"id": "c2", "name": "Garden"})

    assert [c["name"] for c in store.read_collection(CATEGORIES)] == ["Tools", "Garden"]
    assert store.get_record_by_id(CATEGORIES, "c2")["name"] == "Garden"
    assert store.get_record_by_id(CATEGORIES, "missing") is None


def test_update_record_stamps_updated_at(store):
    store.append_record(
        CATEGORIES,
        {"id": "c1", "name": "Tools", "updatedAt": "2000-01-01T00:00:00.000Z"},
    )

    updated = store.update_record(CATEGORIES, "c1", {"name": "Hand tools"})

    assert updated["name"] == "Hand tools"
    assert updated["updatedAt"] != "2000-01-01T00:00:00.000Z"
    assert store.get_record_by_id(CATEGORIES, "c1") == updated


def test_update_record_writes_zero_and_skips_none(store):
    store.append_record(PRODUCTS, {"id": "p1", "name": "Lamp", "stock": 5, "sku": "L"})

    store.update_record(PRODUCTS, "p1", {"stock": 0, "sku": None})

    product = store.get_record_by_id(PRODUCTS, "p1")
    assert product["stock"] == 0
    assert product["sku"] == "L"


def test_update_record_with_empty_patch_keeps_fields(store):
    store.append_record(PRODUCTS, {"id": "p1", "name": "Lamp", "stock": 5})

    updated = store.update_record(PRODUCTS, "p1", {})

    assert updated["name"] == "Lamp"
    assert updated["stock"] == 5


def test_update_unknown_record_has_no_effect(store):
    store.append_record(PRODUCTS, {"id": "p1", "name": "Lamp"})

    assert store.update_record(PRODUCTS, "nope", {"name": "Other"}) is None
    assert store.read_collection(PRODUCTS) == [{"id": "p1", "name": "Lamp"}]


def test_empty_string_clears_a_value(store):
    store.append_record(PRODUCTS, {"id": "p1", "name": "Lamp", "description": "Old"})

    store.update_record(PRODUCTS, "p1", {"description": ""}, touch=False)

    assert "description" not in store.get_record_by_id(PRODUCTS, "p1")


def test_delete_record(store):
    store.append_record(CATEGORIES, {"id": "c1", "name": "Tools"})
    store.append_record(CATEGORIES, {"id": "c2", "name": "Garden"})

    assert store.delete_record(CATEGORIES, "c1") is True
    assert store.delete_record(CATEGORIES, "c1") is False
    assert [c["id"] for c in store.read_collection(CATEGORIES)] == ["c2"]


def test_write_collection_keeps_other_sheets(store):
    store.append_record(CATEGORIES, {"id": "c1", "name": "Tools"})

    store.write_collection(PRODUCTS, [{"id": "p1", "name": "Hammer", "price": 12.5}])

    assert store.read_collection(CATEGORIES) == [{"id": "c1", "name": "Tools"}]
    assert store.read_collection(PRODUCTS) == [{"id": "p1", "name": "Hammer", "price": 12.5}]


def test_extra_columns_are_kept(store):
    store.append_record(CATEGORIES, {"id": "c1", "name": "Tools", "colour": "red"})

    assert store.get_record_by_id(CATEGORIES, "c1")["colour"] == "red"
    header = [cell.value for cell in load_workbook(store.path)["Categories"][1]]
    assert header == list(CATEGORIES.columns) + ["colour"]


def test_text_starting_with_equals_is_not_a_formula(store):
    store.append_record(PRODUCTS, {"id": "p1", "name": "=SUM(A1:A3)"})

    assert store.get_record_by_id(PRODUCTS, "p1")["name"] == "=SUM(A1:A3)"


def test_missing_file_is_recreated(store):
    store.path.unlink()

    assert store.read_collection(PRODUCTS) == []
    assert store.path.exists()
