"""
Account Endpoints for Binance USDT-M Futures.

Balances, account configuration, fee and rate-limit settings, income
history and the asynchronous history download endpoints. All of them are
signed.
"""

from typing import Any, Optional, Union

from binance_fapi.params import compact
from binance_fapi.session import Session


class Account:
    """Signed account information endpoints."""

    def __init__(self, session: Session) -> None:
        self.session = session

    # -------------------------------------------------------------------
    # Account & Balance
    # -------------------------------------------------------------------

    def account_information_v2(self, *, recv_window: Optional[int] = None) -> Any:
        """Current account information. Weight: 5"""
        params = compact({"recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v2/account", params)

    def account_information_v3(self, *, recv_window: Optional[int] = None) -> Any:
        """
        Current account information.

        Users in single-asset and multi-assets mode see different fields.
        Only symbols with a position or open order are listed.

        Weight: 5
        """
        params = compact({"recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v3/account", params)

    def futures_account_balance_v2(self, *, recv_window: Optional[int] = None) -> Any:
        params = compact({"recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v2/balance", params)

    def futures_account_balance_v3(self, *, recv_window: Optional[int] = None) -> Any:
        """Balance per asset: balance, availableBalance, crossUnPnl, ... Weight: 5"""
        params = compact({"recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v3/balance", params)

    def futures_account_configuration(self, *, recv_window: Optional[int] = None) -> Any:
        """Account configuration: fee tier, trade permissions, modes. Weight: 5"""
        params = compact({"recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/accountConfig", params)

    def symbol_configuration(
        self, *, symbol: Optional[str] = None, recv_window: Optional[int] = None
    ) -> Any:
        """Margin type, leverage and max notional per symbol. Weight: 5"""
        params = compact({"symbol": symbol, "recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/symbolConfig", params)

    def futures_trading_quantitative_rules_indicators(
        self, *, symbol: Optional[str] = None, recv_window: Optional[int] = None
    ) -> Any:
        """Quantitative trading rule indicators. Weight: 1, or 10 without symbol"""
        params = compact({"symbol": symbol, "recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/apiTradingStatus", params)

    # -------------------------------------------------------------------
    # Fee & Mode Settings
    # -------------------------------------------------------------------

    def get_bnb_burn_status(self, *, recv_window: Optional[int] = None) -> Any:
        """BNB fee discount status. Weight: 30"""
        params = compact({"recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/feeBurn", params)

    def toggle_bnb_burn_on_futures_trade(
        self, fee_burn: Union[bool, str], *, recv_window: Optional[int] = None
    ) -> Any:
        """Turn the BNB fee discount on (True) or off (False) on every symbol. Weight: 1"""
        params = compact({"feeBurn": fee_burn, "recvWindow": recv_window})
        return self.session.sign_request("POST", "/fapi/v1/feeBurn", params)

    def get_current_multi_assets_mode(self, *, recv_window: Optional[int] = None) -> Any:
        """Multi-Assets or Single-Asset mode on every symbol. Weight: 30"""
        params = compact({"recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/multiAssetsMargin", params)

    def get_current_position_mode(self, *, recv_window: Optional[int] = None) -> Any:
        """Hedge or One-way position mode on every symbol. Weight: 30"""
        params = compact({"recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/positionSide/dual", params)

    def user_commission_rate(self, symbol: str, *, recv_window: Optional[int] = None) -> Any:
        """Maker and taker commission rate for a symbol. Weight: 20"""
        params = compact({"symbol": symbol, "recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/commissionRate", params)

    def notional_and_leverage_brackets(
        self, *, symbol: Optional[str] = None, recv_window: Optional[int] = None
    ) -> Any:
        params = compact({"symbol": symbol, "recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/leverageBracket", params)

    def query_user_rate_limit(self, *, recv_window: Optional[int] = None) -> Any:
        """Order rate limits of the account. Weight: 1"""
        params = compact({"recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/rateLimit/order", params)

    # -------------------------------------------------------------------
    # Income & History Downloads
    # -------------------------------------------------------------------

    def get_income_history(
        self,
        *,
        symbol: Optional[str] = None,
        income_type: Optional[str] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """
        Income history (realized PnL, funding fees, commissions, ...).

        Args:
            income_type: TRANSFER, REALIZED_PNL, FUNDING_FEE, COMMISSION, ...
            page:        Page number for paging through results.
            limit:       Rows per page (max 1000). Server default 100.

        Weight: 30
        """
        params = compact(
            {
                "symbol": symbol,
                "incomeType": income_type,
                "startTime": start_time,
                "endTime": end_time,
                "page": page,
                "limit": limit,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("GET", "/fapi/v1/income", params)

    def get_download_id_for_futures_transaction_history(
        self, start_time: int, end_time: int, *, recv_window: Optional[int] = None
    ) -> Any:
        """
        Request a transaction history export; returns a download id.

        Limited to 5 requests per month. The range may not exceed one year.

        Weight: 1000
        """
        params = compact(
            {"startTime": start_time, "endTime": end_time, "recvWindow": recv_window}
        )
        return self.session.sign_request("GET", "/fapi/v1/income/asyn", params)

    def get_futures_transaction_history_download_link_by_id(
        self, download_id: str, *, recv_window: Optional[int] = None
    ) -> Any:
        """Download link for a transaction history export (expires after 24h). Weight: 10"""
        params = compact({"downloadId": download_id, "recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/income/asyn/id", params)

    def get_download_id_for_futures_order_history(
        self, start_time: int, end_time: int, *, recv_window: Optional[int] = None
    ) -> Any:
        """Request an order history export (10 per month). Weight: 1000"""
        params = compact(
            {"startTime": start_time, "endTime": end_time, "recvWindow": recv_window}
        )
        return self.session.sign_request("GET", "/fapi/v1/order/asyn", params)

    def get_futures_order_history_download_link_by_id(
        self, download_id: str, *, recv_window: Optional[int] = None
    ) -> Any:
        params = compact({"downloadId": download_id, "recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/order/asyn/id", params)

    def get_download_id_for_futures_trade_history(
        self, start_time: int, end_time: int, *, recv_window: Optional[int] = None
    ) -> Any:
        """Request a trade history export (5 per month). Weight: 1000"""
        params = compact(
            {"startTime": start_time, "endTime": end_time, "recvWindow": recv_window}
        )
        return self.session.sign_request("GET", "/fapi/v1/trade/asyn", params)

    def get_futures_trade_download_link_by_id(
        self, download_id: str, *, recv_window: Optional[int] = None
    ) -> Any:
        params = compact({"downloadId": download_id, "recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/trade/asyn/id", params)
