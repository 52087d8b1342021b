import json
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Union

from .errors import MalformedCatalogEntry, UnknownProduct
from .money import to_minor_units

logger = logging.getLogger(__name__)

ProductId = Union[int, str]

REQUIRED_FIELDS = ("id", "name", "price", "stock")

# Built-in products; prices in cents
PRODUCTS = [
    {"id": 1, "name": "Monkey", "price": 499, "stock": 5, "description": "Plush monkey with long arms"},
    {"id": 2, "name": "Giraffe", "price": 699, "stock": 3, "description": "Tall plush giraffe"},
    {"id": 3, "name": "Penguin", "price": 399, "stock": 8, "description": "Small plush penguin"},
    {"id": 4, "name": "Elephant", "price": 1299, "stock": 2, "description": "Big grey plush elephant"},
]


@dataclass(frozen=True)
class Product:
    id: ProductId
    name: str
    price: int
    stock: int
    description: str = ""


class Catalog:
    """Read-only product list, kept in load order.

    Lookups accept either form of an id (``1`` or ``"1"``), since ids arriving
    over HTTP are always strings.
    """

    def __init__(self, products: Iterable[Product]):
        self._products = tuple(products)
        self._index: dict[str, Product] = {}
        for index, product in enumerate(self._products):
            key = str(product.id)
            if key in self._index:
                raise MalformedCatalogEntry(index, f"duplicate id {product.id!r}")
            self._index[key] = product

    def get(self, product_id: ProductId) -> Product:
        product = self._index.get(str(product_id))
        if product is None:
            raise UnknownProduct(product_id)
        return product

    def all(self) -> tuple[Product, ...]:
        return self._products

    def search(self, query: str | None) -> list[Product]:
        if not query:
            return list(self._products)
        q = query.lower()
        return [p for p in self._products if q in p.name.lower() or q in p.description.lower()]

    def __contains__(self, product_id) -> bool:
        return str(product_id) in self._index

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)


# =====================================================
# Loading
# =====================================================

def _parse_price(index: int, raw) -> int:
    # int -> already cents; str / float / Decimal -> major units ("4.99")
    if isinstance(raw, bool):
        raise MalformedCatalogEntry(index, f"price must be numeric, got {raw!r}")
    if isinstance(raw, int):
        price = raw
    else:
        try:
            price = to_minor_units(raw)
        except ValueError as e:
            raise MalformedCatalogEntry(index, f"bad price: {e}") from None
    if price < 0:
        raise MalformedCatalogEntry(index, f"price must not be negative, got {raw!r}")
    return price


def parse_product(index: int, record: Mapping) -> Product:
    """Validate one catalog record and turn it into a Product."""
    if not isinstance(record, Mapping):
        raise MalformedCatalogEntry(index, "record must be an object")
    missing = [f for f in REQUIRED_FIELDS if f not in record]
    if missing:
        raise MalformedCatalogEntry(index, f"missing fields: {', '.join(missing)}")

    pid = record["id"]
    if isinstance(pid, bool) or not isinstance(pid, (int, str)) or pid == "":
        raise MalformedCatalogEntry(index, f"bad id {pid!r}")

    name = record["name"]
    if not isinstance(name, str) or not name.strip():
        raise MalformedCatalogEntry(index, "name must be a non-empty string")

    stock = record["stock"]
    if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
        raise MalformedCatalogEntry(index, f"stock must be a non-negative integer, got {stock!r}")

    description = record.get("description") or ""

    return Product(
        id=pid,
        name=name,
        price=_parse_price(index, record["price"]),
        stock=stock,
        description=str(description),
    )


def load_catalog(records: Iterable[Mapping]) -> Catalog:
    """Build a Catalog; fails on the first bad record so a partial catalog is never used."""
    products = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        product = parse_product(index, record)
        key = str(product.id)
        if key in seen:
            raise MalformedCatalogEntry(index, f"duplicate id {product.id!r}")
        seen.add(key)
        products.append(product)

    logger.info(f"Catalog loaded with {len(products)} products")
    return Catalog(products)


def load_catalog_file(path: str) -> Catalog:
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise MalformedCatalogEntry(0, f"{path} must contain a JSON array")
    return load_catalog(records)
