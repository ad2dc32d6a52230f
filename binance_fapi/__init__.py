# Binance USDT-M Futures REST client
"""
Client library for the Binance USDT-M Futures REST API.

One method per documented endpoint, grouped into market, trade, account
and convert namespaces on BinanceFuturesClient.
"""

__version__ = "0.1.0"

from binance_fapi.client import BinanceFuturesClient  # noqa: E402
from binance_fapi.errors import (  # noqa: E402
    APIError,
    ClientError,
    MissingCredentialsError,
    ServerError,
)
from binance_fapi.session import Session  # noqa: E402

__all__ = [
    "APIError",
    "BinanceFuturesClient",
    "ClientError",
    "MissingCredentialsError",
    "ServerError",
    "Session",
]
