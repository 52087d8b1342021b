"""Tests for catalog loading, validation and lookup."""

import json

import pytest

from jscart.catalog import PRODUCTS, Catalog, Product, load_catalog, load_catalog_file
from jscart.errors import MalformedCatalogEntry, UnknownProduct


def test_get_returns_product_and_accepts_string_ids(catalog):
    assert catalog.get(1).name == "Monkey"
    assert catalog.get("1").name == "Monkey"
    assert catalog.get(2).price == 699


def test_get_unknown_id_raises(catalog):
    with pytest.raises(UnknownProduct) as exc_info:
        catalog.get(999)
    assert exc_info.value.product_id == 999


def test_all_keeps_load_order(catalog):
    assert [p.id for p in catalog.all()] == [1, 2]
    assert len(catalog) == 2
    assert 2 in catalog
    assert "2" in catalog
    assert 3 not in catalog


def test_string_prices_are_major_units():
    catalog = load_catalog([{"id": "a", "name": "Penguin", "price": "3.99", "stock": 1}])
    assert catalog.get("a").price == 399


def test_float_prices_are_major_units():
    catalog = load_catalog([{"id": "a", "name": "Penguin", "price": 19.99, "stock": 1}])
    assert catalog.get("a").price == 1999


def test_search_matches_name_or_description(catalog):
    assert [p.name for p in catalog.search("monk")] == ["Monkey"]
    assert [p.name for p in catalog.search("SPOTTED")] == ["Giraffe"]
    assert catalog.search("") == list(catalog.all())
    assert catalog.search(None) == list(catalog.all())
    assert catalog.search("zebra") == []


def test_builtin_products_load():
    catalog = load_catalog(PRODUCTS)
    assert len(catalog) == len(PRODUCTS)
    assert catalog.get(1).price == 499


@pytest.mark.parametrize("record, reason", [
    ({"name": "X", "price": 1, "stock": 1}, "missing fields: id"),
    ({"id": 1, "price": 1, "stock": 1}, "missing fields: name"),
    ({"id": 1, "name": "X", "stock": 1}, "missing fields: price"),
    ({"id": 1, "name": "X", "price": 1}, "missing fields: stock"),
    ({"id": 1, "name": "X", "price": -1, "stock": 1}, "negative"),
    ({"id": 1, "name": "X", "price": "-0.50", "stock": 1}, "negative"),
    ({"id": 1, "name": "X", "price": "cheap", "stock": 1}, "bad price"),
    ({"id": 1, "name": "X", "price": "1.005", "stock": 1}, "bad price"),
    ({"id": 1, "name": "X", "price": "12345678901234567890123456789.011", "stock": 1}, "bad price"),
    ({"id": 1, "name": "X", "price": "1e999999", "stock": 1}, "bad price"),
    ({"id": 1, "name": "X", "price": True, "stock": 1}, "numeric"),
    ({"id": 1, "name": "X", "price": 1, "stock": -2}, "stock"),
    ({"id": 1, "name": "", "price": 1, "stock": 1}, "name"),
    ({"id": None, "name": "X", "price": 1, "stock": 1}, "bad id"),
])
def test_malformed_records_fail_fast(record, reason):
    with pytest.raises(MalformedCatalogEntry) as exc_info:
        load_catalog([record])
    assert reason in exc_info.value.reason
    assert exc_info.value.index == 0


def test_duplicate_ids_rejected_including_string_form():
    with pytest.raises(MalformedCatalogEntry) as exc_info:
        load_catalog([
            {"id": 1, "name": "A", "price": 1, "stock": 1},
            {"id": "1", "name": "B", "price": 2, "stock": 1},
        ])
    assert exc_info.value.index == 1
    assert "duplicate" in exc_info.value.reason


def test_bad_record_after_good_ones_still_fails():
    with pytest.raises(MalformedCatalogEntry) as exc_info:
        load_catalog([
            {"id": 1, "name": "A", "price": 1, "stock": 1},
            {"id": 2, "name": "B", "price": "x", "stock": 1},
        ])
    assert exc_info.value.index == 1


def test_load_catalog_file(tmp_path, records):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    catalog = load_catalog_file(str(path))
    assert [p.name for p in catalog] == ["Monkey", "Giraffe"]


def test_load_catalog_file_requires_array(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"id": 1}), encoding="utf-8")
    with pytest.raises(MalformedCatalogEntry):
        load_catalog_file(str(path))


def test_catalog_constructor_rejects_duplicate_ids():
    with pytest.raises(MalformedCatalogEntry) as exc_info:
        Catalog([Product(1, "A", 100, 1), Product("1", "B", 200, 1)])
    assert exc_info.value.index == 1
