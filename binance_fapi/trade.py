"""
Trade Endpoints for Binance USDT-M Futures.

Order placement, modification and cancellation, position settings, and
order/trade history. Every endpoint here touches account state, so every
call goes through Session.sign_request and needs an API key and secret.

Order types supported by new_order():
    - LIMIT:                 price, quantity, time_in_force
    - MARKET:                quantity
    - STOP / TAKE_PROFIT:    quantity, price, stop_price
    - STOP_MARKET / TAKE_PROFIT_MARKET: stop_price (or close_position)
    - TRAILING_STOP_MARKET:  callback_rate, optional activation_price

Usage:
    from binance_fapi.client import BinanceFuturesClient
    client = BinanceFuturesClient(api_key="...", api_secret="...")
    order = client.trade.new_order(
        "BTCUSDT", "BUY", "LIMIT",
        quantity=0.001, price=50000, time_in_force="GTC",
    )
    client.trade.cancel_order("BTCUSDT", order_id=order["orderId"])
"""

from typing import Any, Dict, List, Optional, Union

from binance_fapi.params import compact
from binance_fapi.session import Session

Number = Union[int, float, str]


def _order_params(
    symbol: str,
    side: str,
    type: str,
    position_side: Optional[str],
    time_in_force: Optional[str],
    quantity: Optional[Number],
    reduce_only: Optional[Union[bool, str]],
    price: Optional[Number],
    new_client_order_id: Optional[str],
    stop_price: Optional[Number],
    close_position: Optional[Union[bool, str]],
    activation_price: Optional[Number],
    callback_rate: Optional[Number],
    working_type: Optional[str],
    price_protect: Optional[Union[bool, str]],
    new_order_resp_type: Optional[str],
    price_match: Optional[str],
    self_trade_prevention_mode: Optional[str],
    good_till_date: Optional[int],
    recv_window: Optional[int],
) -> Dict[str, Any]:
    """Wire mapping shared by new_order and test_order."""
    return compact(
        {
            "symbol": symbol,
            "side": side,
            "type": type,
            "positionSide": position_side,
            "timeInForce": time_in_force,
            "quantity": quantity,
            "reduceOnly": reduce_only,
            "price": price,
            "newClientOrderId": new_client_order_id,
            "stopPrice": stop_price,
            "closePosition": close_position,
            "activationPrice": activation_price,
            "callbackRate": callback_rate,
            "workingType": working_type,
            "priceProtect": price_protect,
            "newOrderRespType": new_order_resp_type,
            "priceMatch": price_match,
            "selfTradePreventionMode": self_trade_prevention_mode,
            "goodTillDate": good_till_date,
            "recvWindow": recv_window,
        }
    )


class Trade:
    """
    Signed trading endpoints.

    Attributes:
        session: The Session shared with the other endpoint groups.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    # -------------------------------------------------------------------
    # Order Placement
    # -------------------------------------------------------------------

    def new_order(
        self,
        symbol: str,
        side: str,
        type: str,
        *,
        position_side: Optional[str] = None,
        time_in_force: Optional[str] = None,
        quantity: Optional[Number] = None,
        reduce_only: Optional[Union[bool, str]] = None,
        price: Optional[Number] = None,
        new_client_order_id: Optional[str] = None,
        stop_price: Optional[Number] = None,
        close_position: Optional[Union[bool, str]] = None,
        activation_price: Optional[Number] = None,
        callback_rate: Optional[Number] = None,
        working_type: Optional[str] = None,
        price_protect: Optional[Union[bool, str]] = None,
        new_order_resp_type: Optional[str] = None,
        price_match: Optional[str] = None,
        self_trade_prevention_mode: Optional[str] = None,
        good_till_date: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """
        Place a new order.

        Only the arguments you pass are sent; for example a LIMIT order
        built from symbol, side, type, quantity and price never carries
        stopPrice or reduceOnly.

        Args:
            symbol:        Trading pair (e.g., "BTCUSDT").
            side:          "BUY" or "SELL".
            type:          LIMIT, MARKET, STOP, STOP_MARKET, TAKE_PROFIT,
                           TAKE_PROFIT_MARKET or TRAILING_STOP_MARKET.
            position_side: "BOTH" in one-way mode, "LONG"/"SHORT" in hedge mode.
            time_in_force: GTC, IOC, FOK, GTX or GTD.
            quantity:      Order quantity (not allowed with close_position).
            reduce_only:   True to only reduce a position (one-way mode).
            price:         Limit price.
            stop_price:    Trigger price for STOP/TAKE_PROFIT types.
            callback_rate: Trailing stop callback in percent (0.1 to 10).
            working_type:  Trigger source, "MARK_PRICE" or "CONTRACT_PRICE".
            good_till_date: Cancel time in ms when time_in_force is GTD.
            recv_window:   Override of the Session's recvWindow.

        Returns:
            The order response: orderId, status, origQty, executedQty, ...

        Weight: 1
        """
        params = _order_params(
            symbol, side, type, position_side, time_in_force, quantity,
            reduce_only, price, new_client_order_id, stop_price, close_position,
            activation_price, callback_rate, working_type, price_protect,
            new_order_resp_type, price_match, self_trade_prevention_mode,
            good_till_date, recv_window,
        )
        return self.session.sign_request("POST", "/fapi/v1/order", params)

    def test_order(
        self,
        symbol: str,
        side: str,
        type: str,
        *,
        position_side: Optional[str] = None,
        time_in_force: Optional[str] = None,
        quantity: Optional[Number] = None,
        reduce_only: Optional[Union[bool, str]] = None,
        price: Optional[Number] = None,
        new_client_order_id: Optional[str] = None,
        stop_price: Optional[Number] = None,
        close_position: Optional[Union[bool, str]] = None,
        activation_price: Optional[Number] = None,
        callback_rate: Optional[Number] = None,
        working_type: Optional[str] = None,
        price_protect: Optional[Union[bool, str]] = None,
        new_order_resp_type: Optional[str] = None,
        price_match: Optional[str] = None,
        self_trade_prevention_mode: Optional[str] = None,
        good_till_date: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """Validate an order like new_order() without sending it to the matching engine. Weight: 0"""
        params = _order_params(
            symbol, side, type, position_side, time_in_force, quantity,
            reduce_only, price, new_client_order_id, stop_price, close_position,
            activation_price, callback_rate, working_type, price_protect,
            new_order_resp_type, price_match, self_trade_prevention_mode,
            good_till_date, recv_window,
        )
        return self.session.sign_request("POST", "/fapi/v1/order/test", params)

    def place_multiple_orders(
        self, batch_orders: List[Dict[str, Any]], *, recv_window: Optional[int] = None
    ) -> Any:
        """
        Place up to 5 orders in one request.

        Args:
            batch_orders: List of order dicts using wire names, e.g.
                          [{"symbol": "BTCUSDT", "side": "BUY", "type": "MARKET",
                            "quantity": "0.001"}]. Sent as a JSON array.

        Weight: 5
        """
        params = compact({"batchOrders": batch_orders, "recvWindow": recv_window})
        return self.session.sign_request("POST", "/fapi/v1/batchOrders", params)

    # -------------------------------------------------------------------
    # Order Modification
    # -------------------------------------------------------------------

    def modify_order(
        self,
        symbol: str,
        side: str,
        quantity: Number,
        price: Number,
        *,
        order_id: Optional[int] = None,
        orig_client_order_id: Optional[str] = None,
        price_match: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """
        Modify the price and quantity of an open LIMIT order.

        Either order_id or orig_client_order_id must be sent; order_id
        wins when both are present.

        Weight: 1
        """
        params = compact(
            {
                "symbol": symbol,
                "side": side,
                "quantity": quantity,
                "price": price,
                "orderId": order_id,
                "origClientOrderId": orig_client_order_id,
                "priceMatch": price_match,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("PUT", "/fapi/v1/order", params)

    def modify_multiple_orders(
        self, batch_orders: List[Dict[str, Any]], *, recv_window: Optional[int] = None
    ) -> Any:
        """Modify up to 5 LIMIT orders in one request. Weight: 5"""
        params = compact({"batchOrders": batch_orders, "recvWindow": recv_window})
        return self.session.sign_request("PUT", "/fapi/v1/batchOrders", params)

    def get_order_modify_history(
        self,
        symbol: str,
        *,
        order_id: Optional[int] = None,
        orig_client_order_id: Optional[str] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """Order modification history. Weight: 1"""
        params = compact(
            {
                "symbol": symbol,
                "orderId": order_id,
                "origClientOrderId": orig_client_order_id,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("GET", "/fapi/v1/orderAmendment", params)

    # -------------------------------------------------------------------
    # Order Queries & Cancellation
    # -------------------------------------------------------------------

    def query_order(
        self,
        symbol: str,
        *,
        order_id: Optional[int] = None,
        orig_client_order_id: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """
        Check an order's status.

        Possible statuses: NEW, PARTIALLY_FILLED, FILLED, CANCELED,
        REJECTED, EXPIRED, EXPIRED_IN_MATCH.

        Weight: 1
        """
        params = compact(
            {
                "symbol": symbol,
                "orderId": order_id,
                "origClientOrderId": orig_client_order_id,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("GET", "/fapi/v1/order", params)

    def cancel_order(
        self,
        symbol: str,
        *,
        order_id: Optional[int] = None,
        orig_client_order_id: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """Cancel an active order. Weight: 1"""
        params = compact(
            {
                "symbol": symbol,
                "orderId": order_id,
                "origClientOrderId": orig_client_order_id,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("DELETE", "/fapi/v1/order", params)

    def cancel_all_open_orders(self, symbol: str, *, recv_window: Optional[int] = None) -> Any:
        """Cancel every open order on a symbol. Weight: 1"""
        params = compact({"symbol": symbol, "recvWindow": recv_window})
        return self.session.sign_request("DELETE", "/fapi/v1/allOpenOrders", params)

    def cancel_multiple_orders(
        self,
        symbol: str,
        *,
        order_id_list: Optional[List[int]] = None,
        orig_client_order_id_list: Optional[List[str]] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """Cancel up to 10 orders, given as a list of ids or client ids. Weight: 1"""
        params = compact(
            {
                "symbol": symbol,
                "orderIdList": order_id_list,
                "origClientOrderIdList": orig_client_order_id_list,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("DELETE", "/fapi/v1/batchOrders", params)

    def auto_cancel_all_open_orders(
        self, symbol: str, countdown_time: int, *, recv_window: Optional[int] = None
    ) -> Any:
        """
        Cancel all open orders of a symbol when a countdown expires.

        Args:
            countdown_time: Countdown in ms; 0 cancels the timer.

        Weight: 10
        """
        params = compact(
            {"symbol": symbol, "countdownTime": countdown_time, "recvWindow": recv_window}
        )
        return self.session.sign_request("POST", "/fapi/v1/countdownCancelAll", params)

    def query_current_open_order(
        self,
        symbol: str,
        *,
        order_id: Optional[int] = None,
        orig_client_order_id: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        params = compact(
            {
                "symbol": symbol,
                "orderId": order_id,
                "origClientOrderId": orig_client_order_id,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("GET", "/fapi/v1/openOrder", params)

    def current_all_open_orders(
        self, *, symbol: Optional[str] = None, recv_window: Optional[int] = None
    ) -> Any:
        """All open orders on a symbol, or on every symbol. Weight: 1, or 40 without symbol"""
        params = compact({"symbol": symbol, "recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/openOrders", params)

    def all_orders(
        self,
        symbol: str,
        *,
        order_id: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """All account orders: active, canceled, or filled. Weight: 5"""
        params = compact(
            {
                "symbol": symbol,
                "orderId": order_id,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("GET", "/fapi/v1/allOrders", params)

    # -------------------------------------------------------------------
    # Positions
    # -------------------------------------------------------------------

    def position_information_v2(
        self, *, symbol: Optional[str] = None, recv_window: Optional[int] = None
    ) -> Any:
        params = compact({"symbol": symbol, "recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v2/positionRisk", params)

    def position_information_v3(
        self, *, symbol: Optional[str] = None, recv_window: Optional[int] = None
    ) -> Any:
        """Current position information; only symbols with a position or open order. Weight: 5"""
        params = compact({"symbol": symbol, "recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v3/positionRisk", params)

    def account_trade_list(
        self,
        symbol: str,
        *,
        order_id: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        from_id: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """
        Trades for a specific account and symbol.

        Without start_time and end_time the last 7 days are returned; the
        range may not exceed 7 days. from_id cannot be combined with a
        time range. Only the past 6 months can be queried.

        Weight: 5
        """
        params = compact(
            {
                "symbol": symbol,
                "orderId": order_id,
                "startTime": start_time,
                "endTime": end_time,
                "fromId": from_id,
                "limit": limit,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("GET", "/fapi/v1/userTrades", params)

    def change_position_mode(
        self, dual_side_position: Union[bool, str], *, recv_window: Optional[int] = None
    ) -> Any:
        """Switch between Hedge Mode (True) and One-way Mode (False) on every symbol."""
        params = compact(
            {"dualSidePosition": dual_side_position, "recvWindow": recv_window}
        )
        return self.session.sign_request("POST", "/fapi/v1/positionSide/dual", params)

    def change_multi_assets_mode(
        self, multi_assets_margin: Union[bool, str], *, recv_window: Optional[int] = None
    ) -> Any:
        """Switch between Multi-Assets Mode (True) and Single-Asset Mode (False)."""
        params = compact(
            {"multiAssetsMargin": multi_assets_margin, "recvWindow": recv_window}
        )
        return self.session.sign_request("POST", "/fapi/v1/multiAssetsMargin", params)

    def change_initial_leverage(
        self, symbol: str, leverage: int, *, recv_window: Optional[int] = None
    ) -> Any:
        """Change initial leverage (1 to 125) of a symbol. Weight: 1"""
        params = compact({"symbol": symbol, "leverage": leverage, "recvWindow": recv_window})
        return self.session.sign_request("POST", "/fapi/v1/leverage", params)

    def change_margin_type(
        self, symbol: str, margin_type: str, *, recv_window: Optional[int] = None
    ) -> Any:
        """Change a symbol's margin type to "ISOLATED" or "CROSSED". Weight: 1"""
        params = compact(
            {"symbol": symbol, "marginType": margin_type, "recvWindow": recv_window}
        )
        return self.session.sign_request("POST", "/fapi/v1/marginType", params)

    def modify_isolated_position_margin(
        self,
        symbol: str,
        amount: Number,
        type: int,
        *,
        position_side: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """
        Add or reduce isolated position margin.

        Args:
            amount: Margin amount.
            type:   1 to add margin, 2 to reduce margin.

        Weight: 1
        """
        params = compact(
            {
                "symbol": symbol,
                "amount": amount,
                "type": type,
                "positionSide": position_side,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("POST", "/fapi/v1/positionMargin", params)

    def get_position_margin_change_history(
        self,
        symbol: str,
        *,
        type: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        params = compact(
            {
                "symbol": symbol,
                "type": type,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("GET", "/fapi/v1/positionMargin/history", params)

    def users_force_orders(
        self,
        *,
        symbol: Optional[str] = None,
        auto_close_type: Optional[str] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """User's liquidation ("LIQUIDATION") and ADL ("ADL") orders. Weight: 20, or 50 without symbol"""
        params = compact(
            {
                "symbol": symbol,
                "autoCloseType": auto_close_type,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("GET", "/fapi/v1/forceOrders", params)

    def position_adl_quantile_estimation(
        self, *, symbol: Optional[str] = None, recv_window: Optional[int] = None
    ) -> Any:
        """Position ADL quantile estimation. Weight: 5"""
        params = compact({"symbol": symbol, "recvWindow": recv_window})
        return self.session.sign_request("GET", "/fapi/v1/adlQuantile", params)
