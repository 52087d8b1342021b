from mcp.server.fastmcp import FastMCP

from .controller import CartController
from .errors import UnknownProduct
from .presenter import added_payload, cart_view_payload, cleared_payload, search_payload


def register_mcp(mcp: FastMCP, cart: CartController):
    """MCP tool registration"""

    @mcp.tool()
    async def search_products(query: str = "") -> dict:
        """Search the product catalog"""
        return search_payload(cart.catalog.search(query))

    @mcp.tool()
    async def add_to_cart(productId: str) -> dict:
        """Add one unit of a product to the cart"""
        try:
            summary = cart.add_to_cart(productId)
        except UnknownProduct as e:
            return {"success": False, "message": e.message}
        return added_payload(cart.catalog.get(productId), summary)

    @mcp.tool()
    async def get_cart() -> dict:
        """Show the cart"""
        return cart_view_payload(cart.summary())

    @mcp.tool()
    async def clear_cart() -> dict:
        """Remove everything from the cart"""
        return cleared_payload(cart.reset())

    return {
        "search_products": search_products,
        "add_to_cart": add_to_cart,
        "get_cart": get_cart,
        "clear_cart": clear_cart,
    }
