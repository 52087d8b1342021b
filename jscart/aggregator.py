"""Cart totals derived from a catalog and a snapshot of cart lines.

Both totals come out of the same pass over the same snapshot, so the item
count and the amount shown to the user always describe the same cart.
Everything is integer cents; formatting belongs to the presenter.
"""

from dataclasses import dataclass
from typing import Iterable

from .cart import CartLine
from .catalog import Catalog, Product


@dataclass(frozen=True)
class SummaryLine:
    product: Product
    quantity: int

    @property
    def unit_price(self) -> int:
        return self.product.price

    @property
    def subtotal(self) -> int:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class CartSummary:
    lines: tuple[SummaryLine, ...] = ()
    total_quantity: int = 0
    total_price: int = 0

    @property
    def is_empty(self) -> bool:
        return self.total_quantity == 0


def total_quantity(lines: Iterable[CartLine]) -> int:
    return sum(line.quantity for line in lines)


def total_price(catalog: Catalog, lines: Iterable[CartLine]) -> int:
    return sum(line.quantity * catalog.get(line.product_id).price for line in lines)


def summarize(catalog: Catalog, lines: Iterable[CartLine]) -> CartSummary:
    summary_lines = tuple(
        SummaryLine(catalog.get(line.product_id), line.quantity)
        for line in lines
        if line.quantity > 0
    )
    return CartSummary(
        lines=summary_lines,
        total_quantity=sum(line.quantity for line in summary_lines),
        total_price=sum(line.subtotal for line in summary_lines),
    )
