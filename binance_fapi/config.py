"""
Configuration Module for the Binance Futures REST client.

This module loads API credentials from environment variables (a .env file
is picked up automatically), names the REST base URLs, and defines the
defaults used when a Session is constructed. Nothing here is mutated at
runtime: the values are passed into the client at construction time.
"""

import os
from typing import Optional

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from .env file
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# API Credentials (loaded from environment, never hardcode these!)
# ---------------------------------------------------------------------------
BINANCE_API_KEY: str = os.getenv("BINANCE_API_KEY", "")
BINANCE_API_SECRET: str = os.getenv("BINANCE_API_SECRET", "")

# Toggle between testnet and production
USE_TESTNET: bool = os.getenv("USE_TESTNET", "False").lower() in ("true", "1", "yes")

# ---------------------------------------------------------------------------
# Binance Futures REST Endpoints
# ---------------------------------------------------------------------------

# Production endpoint (real money, use with extreme caution!)
FUTURES_BASE_URL: str = "https://fapi.binance.com"

# Testnet endpoint (safe for development and testing)
TESTNET_BASE_URL: str = "https://testnet.binancefuture.com"

# Select the default endpoint based on USE_TESTNET flag
BASE_URL: str = TESTNET_BASE_URL if USE_TESTNET else FUTURES_BASE_URL

# ---------------------------------------------------------------------------
# Session Defaults
# ---------------------------------------------------------------------------

# Seconds before an HTTP request is abandoned by requests
REQUEST_TIMEOUT: float = float(os.getenv("BINANCE_REQUEST_TIMEOUT", "10"))

# Default recvWindow (ms) attached to signed requests; 0 leaves it to the server
RECV_WINDOW: int = int(os.getenv("BINANCE_RECV_WINDOW", "0"))

# Binance rejects a recvWindow above one minute
MAX_RECV_WINDOW: int = 60000

# Header carrying the API key on signed requests
API_KEY_HEADER: str = "X-MBX-APIKEY"

# Response headers reporting used request weight and order counts
LIMIT_USAGE_HEADER_PREFIXES: tuple = ("x-mbx-used-weight", "x-mbx-order-count")

# ---------------------------------------------------------------------------
# Logging Configuration Constants
# ---------------------------------------------------------------------------
LOG_FILE: str = os.getenv("LOG_FILE", "")
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def mask_key(api_key: str) -> str:
    """Return the first four characters of a key followed by asterisks."""
    if not api_key:
        return "NOT SET"
    if len(api_key) <= 4:
        return "****"
    return api_key[:4] + "****"


# ---------------------------------------------------------------------------
# Helper function to display current configuration (without exposing secrets)
# ---------------------------------------------------------------------------
def print_config(base_url: Optional[str] = None) -> None:
    """
    Print the current configuration to the console (masks API keys).

    Args:
        base_url: The URL a client would actually use (e.g. after --testnet).
                  Defaults to BASE_URL from the environment.
    """
    base_url = base_url or BASE_URL
    if base_url == TESTNET_BASE_URL:
        env_mode = "TESTNET"
    elif base_url == FUTURES_BASE_URL:
        env_mode = "⚠️  PRODUCTION"
    else:
        env_mode = "CUSTOM"

    print("=" * 60)
    print("  Binance Futures REST Client: Configuration")
    print("=" * 60)
    print(f"  Environment : {env_mode}")
    print(f"  API Key     : {mask_key(BINANCE_API_KEY)}")
    print(f"  Base URL    : {base_url}")
    print(f"  Timeout     : {REQUEST_TIMEOUT}s")
    print(f"  recvWindow  : {RECV_WINDOW} ms")
    print(f"  Log File    : {LOG_FILE or 'disabled'}")
    print("=" * 60)


if __name__ == "__main__":
    # When run directly, display the current configuration
    print_config()
