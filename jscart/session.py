# The single in-process shopping session: one catalog, one cart.
from .catalog import PRODUCTS, Catalog, load_catalog, load_catalog_file
from .config import CATALOG_PATH
from .controller import CartController


def build_catalog(path: str = CATALOG_PATH) -> Catalog:
    if path:
        return load_catalog_file(path)
    return load_catalog(PRODUCTS)


CATALOG = build_catalog()
CART = CartController(CATALOG)
