import logging
from typing import Callable

from .aggregator import CartSummary, summarize
from .cart import CartStore
from .catalog import Catalog, ProductId
from .errors import UnknownProduct

logger = logging.getLogger(__name__)

Listener = Callable[[CartSummary], None]


class CartController:
    """The only writer of the cart store.

    Each action mutates the store once, then builds one CartSummary and hands
    it to every subscriber. Subscribers never see the count without the price.
    """

    def __init__(self, catalog: Catalog, store: CartStore | None = None):
        if store is not None and store.catalog is not catalog:
            raise ValueError("store is bound to a different catalog")
        self.catalog = catalog
        self.store = store if store is not None else CartStore(catalog)
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a cart-changed listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def summary(self) -> CartSummary:
        return summarize(self.catalog, self.store.lines())

    def add_to_cart(self, product_id: ProductId) -> CartSummary:
        try:
            line = self.store.increment(product_id)
        except UnknownProduct as e:
            logger.warning(
                f"Add to cart rejected: {e.message}",
                extra={"product_id": str(product_id), "error_code": e.code},
            )
            raise

        summary = self.summary()
        logger.info(
            "Added to cart",
            extra={
                "product_id": str(line.product_id),
                "quantity": line.quantity,
                "total_quantity": summary.total_quantity,
                "total_price": summary.total_price,
            },
        )
        self._notify(summary)
        return summary

    def reset(self) -> CartSummary:
        self.store.clear()
        summary = self.summary()
        logger.info("Cart cleared")
        self._notify(summary)
        return summary

    def _notify(self, summary: CartSummary):
        for listener in list(self._listeners):
            listener(summary)
