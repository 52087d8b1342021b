from dataclasses import dataclass

from .catalog import Catalog, ProductId


@dataclass(frozen=True)
class CartLine:
    product_id: ProductId
    quantity: int


class CartStore:
    """Selected quantities per product, in first-added order.

    Keys are the catalog's own ids, so ``increment("1")`` and ``increment(1)``
    land on the same line. Only positive quantities are stored.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._quantities: dict[ProductId, int] = {}

    def increment(self, product_id: ProductId) -> CartLine:
        # raises UnknownProduct before anything is touched
        product = self.catalog.get(product_id)
        qty = self._quantities.get(product.id, 0) + 1
        self._quantities[product.id] = qty
        return CartLine(product.id, qty)

    def quantity(self, product_id: ProductId) -> int:
        if product_id not in self.catalog:
            return 0
        return self._quantities.get(self.catalog.get(product_id).id, 0)

    def lines(self) -> tuple[CartLine, ...]:
        return tuple(CartLine(pid, qty) for pid, qty in self._quantities.items())

    def clear(self):
        self._quantities.clear()

    def __len__(self) -> int:
        return len(self._quantities)
