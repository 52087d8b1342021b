from .aggregator import CartSummary
from .catalog import Product
from .money import format_price


def product_payload(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": product.price,
        "priceFormatted": format_price(product.price),
        "stock": product.stock,
        "description": product.description,
    }


def cart_payload(summary: CartSummary) -> dict:
    """JSON-ready cart: amounts in cents plus their display strings."""
    items = []
    for line in summary.lines:
        items.append({
            "id": line.product.id,
            "name": line.product.name,
            "quantity": line.quantity,
            "unitPrice": line.unit_price,
            "unitPriceFormatted": format_price(line.unit_price),
            "subtotal": line.subtotal,
            "subtotalFormatted": format_price(line.subtotal),
        })

    return {
        "items": items,
        "totalAmount": summary.total_price,
        "totalAmountFormatted": format_price(summary.total_price),
        "totalQuantity": summary.total_quantity,
    }


def search_payload(products: list[Product]) -> dict:
    return {
        "products": [product_payload(p) for p in products],
        "count": len(products),
        "message": f"{len(products)} products found",
    }


def cart_view_payload(summary: CartSummary) -> dict:
    if summary.is_empty:
        return {
            "isEmpty": True,
            "message": "Your cart is empty",
            "cart": cart_payload(summary),
        }

    return {
        "isEmpty": False,
        "message": f"You have {summary.total_quantity} items in your cart",
        "cart": cart_payload(summary),
    }


def added_payload(product: Product, summary: CartSummary) -> dict:
    return {
        "success": True,
        "message": f"{product.name} added to cart",
        "cart": cart_payload(summary),
    }


def cleared_payload(summary: CartSummary) -> dict:
    return {
        "success": True,
        "message": "Cart cleared",
        "cart": cart_payload(summary),
    }
