"""
Binance Futures REST Client.

This module provides BinanceFuturesClient, the single entry point of the
library. It builds one Session from the given (or environment) settings
and exposes the endpoint groups that share it:

    client.market   - public market data
    client.trade    - orders, positions, trade history (signed)
    client.account  - balances, configuration, income (signed)
    client.convert  - quote-based asset conversion (signed)

The client connects to production unless `testnet=True` (or
USE_TESTNET=true in .env) or an explicit `base_url` is given.

Usage:
    from binance_fapi.client import BinanceFuturesClient
    client = BinanceFuturesClient()
    client.market.order_book("BTCUSDT")

    with BinanceFuturesClient(api_key="...", api_secret="...") as client:
        client.trade.new_order("BTCUSDT", "BUY", "MARKET", quantity=0.001)
"""

from typing import Any, Dict, Optional, Type

from binance_fapi.account import Account
from binance_fapi.config import (
    BINANCE_API_KEY,
    BINANCE_API_SECRET,
    FUTURES_BASE_URL,
    RECV_WINDOW,
    TESTNET_BASE_URL,
    USE_TESTNET,
    mask_key,
)
from binance_fapi.convert import Convert
from binance_fapi.logger_setup import setup_logger
from binance_fapi.market import Market
from binance_fapi.session import Session
from binance_fapi.trade import Trade

# Module-level logger
logger = setup_logger(__name__)

# Endpoint groups exposed as attributes of the client, by attribute name
ENDPOINT_GROUPS: Dict[str, Type] = {
    "market": Market,
    "trade": Trade,
    "account": Account,
    "convert": Convert,
}


class BinanceFuturesClient:
    """
    Facade over the Binance USDT-M Futures REST API.

    Attributes:
        session: The Session shared by all endpoint groups.
        market:  Market instance (public endpoints).
        trade:   Trade instance (signed endpoints).
        account: Account instance (signed endpoints).
        convert: Convert instance (signed endpoints).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        testnet: Optional[bool] = None,
        **session_kwargs: Any,
    ) -> None:
        """
        Initialize the client and its Session.

        Args:
            api_key:    API key; None falls back to BINANCE_API_KEY.
            api_secret: API secret; None falls back to BINANCE_API_SECRET.
            base_url:   Explicit REST root; overrides `testnet`.
            testnet:    Use the testnet root; None falls back to USE_TESTNET.
            **session_kwargs: timeout, recv_window, proxies, show_limit_usage,
                        show_header or session, passed to Session.

        Raises:
            ValueError: If the Session settings are invalid.
        """
        if api_key is None:
            api_key = BINANCE_API_KEY
        if api_secret is None:
            api_secret = BINANCE_API_SECRET
        if testnet is None:
            testnet = USE_TESTNET
        if base_url is None:
            base_url = TESTNET_BASE_URL if testnet else FUTURES_BASE_URL
        if "recv_window" not in session_kwargs and RECV_WINDOW:
            session_kwargs["recv_window"] = RECV_WINDOW

        try:
            self.session = Session(
                api_key=api_key, api_secret=api_secret, base_url=base_url, **session_kwargs
            )
        except ValueError as e:
            logger.error(f"Invalid client configuration: {e}")
            raise

        self.market = Market(self.session)
        self.trade = Trade(self.session)
        self.account = Account(self.session)
        self.convert = Convert(self.session)

        if base_url == FUTURES_BASE_URL:
            logger.info("Using Binance Futures PRODUCTION endpoint")
        elif base_url == TESTNET_BASE_URL:
            logger.info("Using Binance Futures TESTNET endpoint")
        else:
            logger.info(f"Using Binance Futures endpoint {base_url}")

        logger.debug(
            f"BinanceFuturesClient initialized (API key: {mask_key(self.session.api_key)})"
        )

    @property
    def base_url(self) -> str:
        return self.session.base_url

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self.session.close()

    def __enter__(self) -> "BinanceFuturesClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
