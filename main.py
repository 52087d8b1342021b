import logging

from fastapi import FastAPI
from mcp.server.fastmcp import FastMCP

from jscart.config import BASE_URL, LOG_FORMAT, LOG_LEVEL, PORT
from jscart.mcp_handlers import register_mcp
from jscart.observability import setup_logging
from jscart.routes import register_api_routes
from jscart.session import CART

setup_logging(LOG_LEVEL, LOG_FORMAT)
logger = logging.getLogger(__name__)

# =====================================================
# 1) FastAPI app
# =====================================================
app = FastAPI(title="JSCart", version="1.0.0")

# =====================================================
# 2) MCP Server
# =====================================================
mcp = FastMCP(
    name="jscart-mcp",
    sse_path="/mcp/sse",
    message_path="/mcp/messages/",
)

register_mcp(mcp, CART)


@app.get("/mcp")
async def mcp_info_handler():
    """MCP server info"""
    return {
        "name": "jscart-mcp",
        "version": "1.0.0",
        "protocols": ["sse"],
        "endpoints": {
            "sse": f"{BASE_URL}/mcp/sse",
            "messages": f"{BASE_URL}/mcp/messages/",
        },
    }

# =====================================================
# 3) Cart API routes
# =====================================================
register_api_routes(app, CART)

# =====================================================
# 4) MCP SSE transport (mounted last so /api and /mcp win)
# =====================================================
app.mount("/", mcp.sse_app())

logger.info(f"JSCart ready with {len(CART.catalog)} products")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
