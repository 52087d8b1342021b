"""Cart errors.

Every error carries a short ``code`` and the HTTP status the API answers with,
so the FastAPI handler and the MCP tools can report failures the same way.
"""

from typing import Any


class CartError(Exception):
    """Base exception for catalog and cart failures."""

    code = "CART_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def details(self) -> dict[str, Any]:
        return {}

    def to_response(self) -> dict:
        """Convert to the JSON error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                **self.details(),
            }
        }


class UnknownProduct(CartError):
    """A product id that the catalog does not contain."""

    code = "UNKNOWN_PRODUCT"
    http_status = 404

    def __init__(self, product_id: Any):
        super().__init__(f"Product {product_id!r} not found")
        self.product_id = product_id

    def details(self) -> dict[str, Any]:
        return {"productId": self.product_id}


class MalformedCatalogEntry(CartError):
    """A catalog record with missing fields or invalid values."""

    code = "MALFORMED_CATALOG_ENTRY"
    http_status = 500

    def __init__(self, index: int, reason: str):
        super().__init__(f"Catalog entry #{index}: {reason}")
        self.index = index
        self.reason = reason

    def details(self) -> dict[str, Any]:
        return {"index": self.index, "reason": self.reason}
