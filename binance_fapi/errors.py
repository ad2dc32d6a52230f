"""
Exception types raised by the Binance Futures REST client.

The hierarchy sits on top of python-binance's exceptions so code that
already catches ``BinanceAPIException`` / ``BinanceRequestException``
keeps working:

    BinanceAPIException
        APIError
            ClientError         - HTTP 4xx with a Binance error body
            ServerError         - HTTP 5xx
    BinanceRequestException
        MissingCredentialsError - signed call without key/secret

Transport failures from ``requests`` (timeouts, connection errors) are
not wrapped and reach the caller unchanged.
"""

from binance.exceptions import BinanceAPIException, BinanceRequestException


class APIError(BinanceAPIException):
    """
    A non-2xx response from the API.

    Attributes:
        status_code: HTTP status of the response.
        code:        Binance error code from the body (e.g. -1121).
        message:     Binance error message from the body.
        headers:     Response headers, useful for 429/418 ban windows.
    """

    def __init__(self, response, status_code: int, text: str) -> None:
        super().__init__(response, status_code, text)
        self.headers = dict(getattr(response, "headers", None) or {})

    def __str__(self) -> str:
        return f"APIError(status={self.status_code}, code={self.code}): {self.message}"


class ClientError(APIError):
    """The API rejected the request (HTTP 4xx)."""


class ServerError(APIError):
    """Binance failed to process the request (HTTP 5xx)."""


class MissingCredentialsError(BinanceRequestException):
    """A signed endpoint was called without an API key and secret."""

    def __init__(self, message: str = "API key and secret are required for signed endpoints") -> None:
        super().__init__(message)
