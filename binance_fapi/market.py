"""
Market Data Endpoints for Binance USDT-M Futures.

Every endpoint in this module is public: it is sent through
Session.public_request, so no API key header or signature is attached
and the calls work without credentials.

Optional arguments left as None are not sent at all, which lets the
server apply its documented defaults (e.g. `limit` on the order book).

Usage:
    from binance_fapi.client import BinanceFuturesClient
    client = BinanceFuturesClient()
    book = client.market.order_book("BTCUSDT", limit=5)
    klines = client.market.kline_candlestick_data("BTCUSDT", "1h")
"""

from typing import Any, Optional

from binance_fapi.params import compact
from binance_fapi.session import Session


class Market:
    """
    Public market data endpoints (prices, order book, klines, statistics).

    Attributes:
        session: The Session shared with the other endpoint groups.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    # -------------------------------------------------------------------
    # General
    # -------------------------------------------------------------------

    def test_connectivity(self) -> Any:
        """Test connectivity to the REST API. Weight: 1"""
        return self.session.public_request("GET", "/fapi/v1/ping")

    def check_server_time(self) -> Any:
        """Test connectivity and get the current server time. Weight: 1"""
        return self.session.public_request("GET", "/fapi/v1/time")

    def exchange_information(self) -> Any:
        """Current exchange trading rules and symbol information. Weight: 1"""
        return self.session.public_request("GET", "/fapi/v1/exchangeInfo")

    # -------------------------------------------------------------------
    # Order Book & Trades
    # -------------------------------------------------------------------

    def order_book(self, symbol: str, *, limit: Optional[int] = None) -> Any:
        """
        Order book depth for a symbol.

        Args:
            symbol: Trading pair, e.g. "BTCUSDT".
            limit:  Depth (5, 10, 20, 50, 100, 500, 1000). Server default 500.

        Weight: adjusted based on the limit.
        """
        params = compact({"symbol": symbol, "limit": limit})
        return self.session.public_request("GET", "/fapi/v1/depth", params)

    def recent_trades_list(self, symbol: str, *, limit: Optional[int] = None) -> Any:
        """Recent market trades. Weight: 5"""
        params = compact({"symbol": symbol, "limit": limit})
        return self.session.public_request("GET", "/fapi/v1/trades", params)

    def old_trades_lookup(
        self, symbol: str, *, limit: Optional[int] = None, from_id: Optional[int] = None
    ) -> Any:
        """Older market trades, starting from `from_id`. Weight: 20"""
        params = compact({"symbol": symbol, "limit": limit, "fromId": from_id})
        return self.session.public_request("GET", "/fapi/v1/historicalTrades", params)

    def compressed_aggregate_trades_list(
        self,
        symbol: str,
        *,
        from_id: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """
        Compressed, aggregate market trades.

        Trades that fill at the same time, from the same order, with the
        same price have their quantity aggregated.

        Weight: 20
        """
        params = compact(
            {
                "symbol": symbol,
                "fromId": from_id,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
            }
        )
        return self.session.public_request("GET", "/fapi/v1/aggTrades", params)

    # -------------------------------------------------------------------
    # Klines
    # -------------------------------------------------------------------

    def kline_candlestick_data(
        self,
        symbol: str,
        interval: str,
        *,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """
        Kline/candlestick bars for a symbol.

        Args:
            symbol:     Trading pair, e.g. "BTCUSDT".
            interval:   Bar interval, e.g. "1m", "1h", "1d".
            start_time: Start of the range in ms.
            end_time:   End of the range in ms.
            limit:      Number of bars (max 1500). Server default 500.

        Returns:
            A list of bars; each bar is a list
            [openTime, open, high, low, close, volume, closeTime, ...].

        Weight: based on parameter LIMIT.
        """
        params = compact(
            {
                "symbol": symbol,
                "interval": interval,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
            }
        )
        return self.session.public_request("GET", "/fapi/v1/klines", params)

    def continuous_contract_kline_candlestick_data(
        self,
        pair: str,
        contract_type: str,
        interval: str,
        *,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """Kline bars for a specific contract type (PERPETUAL, CURRENT_QUARTER, ...)."""
        params = compact(
            {
                "pair": pair,
                "contractType": contract_type,
                "interval": interval,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
            }
        )
        return self.session.public_request("GET", "/fapi/v1/continuousKlines", params)

    def index_price_kline_candlestick_data(
        self,
        pair: str,
        interval: str,
        *,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """Kline bars of the index price for a pair."""
        params = compact(
            {
                "pair": pair,
                "interval": interval,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
            }
        )
        return self.session.public_request("GET", "/fapi/v1/indexPriceKlines", params)

    def mark_price_kline_candlestick_data(
        self,
        symbol: str,
        interval: str,
        *,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """Kline bars of the mark price for a symbol."""
        params = compact(
            {
                "symbol": symbol,
                "interval": interval,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
            }
        )
        return self.session.public_request("GET", "/fapi/v1/markPriceKlines", params)

    def premium_index_kline_data(
        self,
        symbol: str,
        interval: str,
        *,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """Premium index kline bars for a symbol."""
        params = compact(
            {
                "symbol": symbol,
                "interval": interval,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
            }
        )
        return self.session.public_request("GET", "/fapi/v1/premiumIndexKlines", params)

    def historical_blvt_nav_kline_candlestick(
        self,
        symbol: str,
        interval: str,
        *,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """Historical BLVT NAV kline bars. Weight: 1"""
        params = compact(
            {
                "symbol": symbol,
                "interval": interval,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
            }
        )
        return self.session.public_request("GET", "/fapi/v1/lvtKlines", params)

    # -------------------------------------------------------------------
    # Prices, Tickers & Funding
    # -------------------------------------------------------------------

    def mark_price(self, *, symbol: Optional[str] = None) -> Any:
        """Mark price and funding rate; all symbols when `symbol` is omitted. Weight: 1"""
        params = compact({"symbol": symbol})
        return self.session.public_request("GET", "/fapi/v1/premiumIndex", params)

    def get_funding_rate_history(
        self,
        *,
        symbol: Optional[str] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """Funding rate history. Shares a 500/5min/IP limit with fundingInfo."""
        params = compact(
            {
                "symbol": symbol,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
            }
        )
        return self.session.public_request("GET", "/fapi/v1/fundingRate", params)

    def get_funding_rate_info(self) -> Any:
        """Funding rate caps and intervals for symbols with adjustments."""
        return self.session.public_request("GET", "/fapi/v1/fundingInfo")

    def ticker_24hr_price_change_statistics(self, *, symbol: Optional[str] = None) -> Any:
        """24hr rolling window price change statistics. Weight: 1, or 40 without symbol"""
        params = compact({"symbol": symbol})
        return self.session.public_request("GET", "/fapi/v1/ticker/24hr", params)

    def symbol_price_ticker(self, *, symbol: Optional[str] = None) -> Any:
        """Latest price for one or all symbols. Weight: 1, or 2 without symbol"""
        params = compact({"symbol": symbol})
        return self.session.public_request("GET", "/fapi/v1/ticker/price", params)

    def symbol_price_ticker_v2(self, *, symbol: Optional[str] = None) -> Any:
        """Latest price for one or all symbols (v2). Weight: 1, or 2 without symbol"""
        params = compact({"symbol": symbol})
        return self.session.public_request("GET", "/fapi/v2/ticker/price", params)

    def symbol_order_book_ticker(self, *, symbol: Optional[str] = None) -> Any:
        """Best bid/ask price and quantity. Weight: 2, or 5 without symbol"""
        params = compact({"symbol": symbol})
        return self.session.public_request("GET", "/fapi/v1/ticker/bookTicker", params)

    def quarterly_contract_settlement_price(self, pair: str) -> Any:
        params = {"pair": pair}
        return self.session.public_request("GET", "/futures/data/delivery-price", params)

    # -------------------------------------------------------------------
    # Open Interest & Trader Statistics
    # -------------------------------------------------------------------

    def open_interest(self, symbol: str) -> Any:
        """Present open interest of a symbol. Weight: 1"""
        params = {"symbol": symbol}
        return self.session.public_request("GET", "/fapi/v1/openInterest", params)

    def open_interest_statistics(
        self,
        symbol: str,
        period: str,
        *,
        limit: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
    ) -> Any:
        """
        Open interest history.

        Args:
            symbol: Trading pair.
            period: "5m", "15m", "30m", "1h", "2h", "4h", "6h", "12h" or "1d".

        Only the latest 30 days are available.
        """
        params = compact(
            {
                "symbol": symbol,
                "period": period,
                "limit": limit,
                "startTime": start_time,
                "endTime": end_time,
            }
        )
        return self.session.public_request("GET", "/futures/data/openInterestHist", params)

    def top_trader_long_short_ratio_positions(
        self,
        symbol: str,
        period: str,
        *,
        limit: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
    ) -> Any:
        """Long/short position ratio of the top 20% users by margin balance."""
        params = compact(
            {
                "symbol": symbol,
                "period": period,
                "limit": limit,
                "startTime": start_time,
                "endTime": end_time,
            }
        )
        return self.session.public_request(
            "GET", "/futures/data/topLongShortPositionRatio", params
        )

    def top_trader_long_short_ratio_accounts(
        self,
        symbol: str,
        period: str,
        *,
        limit: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
    ) -> Any:
        """Long/short account ratio of the top 20% users by margin balance."""
        params = compact(
            {
                "symbol": symbol,
                "period": period,
                "limit": limit,
                "startTime": start_time,
                "endTime": end_time,
            }
        )
        return self.session.public_request(
            "GET", "/futures/data/topLongShortAccountRatio", params
        )

    def long_short_ratio(
        self,
        symbol: str,
        period: str,
        *,
        limit: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
    ) -> Any:
        """Global long/short account ratio."""
        params = compact(
            {
                "symbol": symbol,
                "period": period,
                "limit": limit,
                "startTime": start_time,
                "endTime": end_time,
            }
        )
        return self.session.public_request(
            "GET", "/futures/data/globalLongShortAccountRatio", params
        )

    def taker_buy_sell_volume(
        self,
        symbol: str,
        period: str,
        *,
        limit: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
    ) -> Any:
        """Taker buy/sell volume ratio."""
        params = compact(
            {
                "symbol": symbol,
                "period": period,
                "limit": limit,
                "startTime": start_time,
                "endTime": end_time,
            }
        )
        return self.session.public_request(
            "GET", "/futures/data/takerlongshortRatio", params
        )

    def basis(
        self,
        pair: str,
        contract_type: str,
        period: str,
        *,
        limit: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
    ) -> Any:
        """
        Futures basis.

        The most recent data is returned when neither start_time nor
        end_time is sent. Only the latest 30 days are available.
        """
        params = compact(
            {
                "pair": pair,
                "contractType": contract_type,
                "period": period,
                "limit": limit,
                "startTime": start_time,
                "endTime": end_time,
            }
        )
        return self.session.public_request("GET", "/futures/data/basis", params)

    # -------------------------------------------------------------------
    # Index Information
    # -------------------------------------------------------------------

    def composite_index_symbol_information(self, *, symbol: Optional[str] = None) -> Any:
        """Composite index symbol information (composite index symbols only)."""
        params = compact({"symbol": symbol})
        return self.session.public_request("GET", "/fapi/v1/indexInfo", params)

    def multi_assets_mode_asset_index(self, *, symbol: Optional[str] = None) -> Any:
        """Asset index for Multi-Assets mode. Weight: 1, or 10 without symbol"""
        params = compact({"symbol": symbol})
        return self.session.public_request("GET", "/fapi/v1/assetIndex", params)

    def query_index_price_constituents(self, symbol: str) -> Any:
        params = {"symbol": symbol}
        return self.session.public_request("GET", "/fapi/v1/constituents", params)

    def query_insurance_fund_balance_snapshot(self, *, symbol: Optional[str] = None) -> Any:
        params = compact({"symbol": symbol})
        return self.session.public_request("GET", "/fapi/v1/insuranceFund", params)
