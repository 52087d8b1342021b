# jscart/config.py
import os

# Public address of the service (used by the MCP info endpoint)
BASE_URL = os.getenv("BASE_URL", "http://localhost:8000")

# JSON file with catalog records; empty means the built-in product list
CATALOG_PATH = os.getenv("CATALOG_PATH", "")

# Prefix used when prices are shown to the user
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")

PORT = int(os.getenv("PORT", "8000"))
