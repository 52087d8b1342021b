"""Shared fixtures: a small catalog and a controller over it."""

import pytest

from jscart.catalog import load_catalog
from jscart.controller import CartController


@pytest.fixture
def records():
    return [
        {"id": 1, "name": "Monkey", "price": 499, "stock": 5},
        {"id": 2, "name": "Giraffe", "price": 699, "stock": 3, "description": "Tall and spotted"},
    ]


@pytest.fixture
def catalog(records):
    return load_catalog(records)


@pytest.fixture
def controller(catalog):
    return CartController(catalog)
