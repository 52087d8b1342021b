import logging

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from .controller import CartController
from .errors import CartError
from .presenter import added_payload, cart_view_payload, cleared_payload, search_payload

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(CartError)
    async def cart_error_handler(request: Request, exc: CartError):
        logger.warning(
            f"CartError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status,
            content={"success": False, "message": exc.message, **exc.to_response()},
        )


def register_api_routes(app: FastAPI, cart: CartController):

    register_error_handlers(app)

    # ---------------------------------------------------
    # CART API ROUTES
    # ---------------------------------------------------
    router = APIRouter(prefix="/api", tags=["cart"])

    # 1) Product search
    @router.get("/products")
    async def search_products_endpoint(query: str = Query("", description="Search term")):
        return search_payload(cart.catalog.search(query))

    # 2) Add to cart (one click = one increment)
    @router.post("/cart/add")
    async def add_to_cart_endpoint(productId: str):
        summary = cart.add_to_cart(productId)
        return added_payload(cart.catalog.get(productId), summary)

    # 3) View cart
    @router.get("/cart")
    async def get_cart_endpoint():
        return cart_view_payload(cart.summary())

    # 4) Clear cart
    @router.post("/cart/clear")
    async def clear_cart_endpoint():
        return cleared_payload(cart.reset())

    app.include_router(router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "products": len(cart.catalog)}
