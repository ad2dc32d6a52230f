"""
Convert Endpoints for Binance USDT-M Futures.

Quote-based asset conversion inside the futures wallet:

    1. send_quote_request()       -> quoteId (only if funds are sufficient)
    2. accept_the_offered_quote() -> orderId
    3. order_status()             -> PROCESS / ACCEPT_SUCCESS / SUCCESS / FAIL

All endpoints are signed.
"""

from typing import Any, Optional

from binance_fapi.params import compact
from binance_fapi.session import Session


class Convert:
    """Signed futures convert endpoints."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all_convert_pairs(
        self, *, from_asset: Optional[str] = None, to_asset: Optional[str] = None
    ) -> Any:
        """
        Convertible token pairs and their upper/lower limits.

        Supply either or both assets; with neither, only part of the
        pairs is returned. Weight: 20 (IP)
        """
        params = compact({"fromAsset": from_asset, "toAsset": to_asset})
        return self.session.sign_request("GET", "/fapi/v1/convert/exchangeInfo", params)

    def send_quote_request(
        self,
        from_asset: str,
        to_asset: str,
        *,
        from_amount: Optional[str] = None,
        to_amount: Optional[str] = None,
        valid_time: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> Any:
        """
        Request a quote for a token pair.

        Args:
            from_asset:  Asset to sell.
            to_asset:    Asset to buy.
            from_amount: Amount to sell; send either this or to_amount.
            to_amount:   Amount to buy.
            valid_time:  Quote validity, "10s" (default), "30s", "1m", "2m".

        Weight: 50 (IP)
        """
        params = compact(
            {
                "fromAsset": from_asset,
                "toAsset": to_asset,
                "fromAmount": from_amount,
                "toAmount": to_amount,
                "validTime": valid_time,
                "recvWindow": recv_window,
            }
        )
        return self.session.sign_request("POST", "/fapi/v1/convert/getQuote", params)

    def accept_the_offered_quote(self, quote_id: str, *, recv_window: Optional[int] = None) -> Any:
        """Accept an offered quote by quote id. Weight: 200 (IP)"""
        params = compact({"quoteId": quote_id, "recvWindow": recv_window})
        return self.session.sign_request("POST", "/fapi/v1/convert/acceptQuote", params)

    def order_status(
        self, *, order_id: Optional[str] = None, quote_id: Optional[str] = None
    ) -> Any:
        """Convert order status by order id or quote id. Weight: 50 (IP)"""
        params = compact({"orderId": order_id, "quoteId": quote_id})
        return self.session.sign_request("GET", "/fapi/v1/convert/orderStatus", params)
