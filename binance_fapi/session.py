"""
HTTP Session for the Binance Futures REST API.

The Session owns the base URL, the credentials and a pooled
``requests.Session``. It exposes exactly two operations that the endpoint
modules call:

    public_request(method, path, params)  - no key, no timestamp, no signature
    sign_request(method, path, params)    - X-MBX-APIKEY header plus an
                                            HMAC-SHA256 signature over the
                                            query string (timestamp included)

Parameters are sent in the query string for every verb, in the order the
endpoint built them. The decoded JSON body is returned verbatim unless
``show_limit_usage`` or ``show_header`` is enabled.

Usage:
    from binance_fapi.session import Session
    session = Session(api_key="...", api_secret="...")
    session.public_request("GET", "/fapi/v1/depth", {"symbol": "BTCUSDT"})
"""

import hashlib
import hmac
import time
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import requests
from binance.exceptions import BinanceRequestException

from binance_fapi import __version__
from binance_fapi.config import (
    API_KEY_HEADER,
    FUTURES_BASE_URL,
    LIMIT_USAGE_HEADER_PREFIXES,
    REQUEST_TIMEOUT,
)
from binance_fapi.errors import ClientError, MissingCredentialsError, ServerError
from binance_fapi.logger_setup import setup_logger
from binance_fapi.params import to_query_pairs
from binance_fapi.validators import validate_base_url, validate_recv_window, validate_timeout

# Module-level logger
logger = setup_logger(__name__)


class Session:
    """
    Signs and sends requests to one Binance Futures base URL.

    The only mutable piece is the underlying requests.Session connection
    pool; signing is computed per call, so one Session can be shared
    between threads.

    Attributes:
        base_url:         Root URL, e.g. "https://fapi.binance.com".
        timeout:          Seconds before requests gives up on a call.
        recv_window:      recvWindow added to signed calls that don't set one
                          (None leaves it to the server default).
        show_limit_usage: Wrap responses with the X-MBX-USED-WEIGHT and
                          X-MBX-ORDER-COUNT headers.
        show_header:      Wrap responses with all response headers.
    """

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        base_url: str = FUTURES_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        recv_window: Optional[int] = None,
        proxies: Optional[Dict[str, str]] = None,
        show_limit_usage: bool = False,
        show_header: bool = False,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the Session.

        Args:
            api_key:          Binance API key (only needed for signed calls).
            api_secret:       Binance API secret (only needed for signed calls).
            base_url:         REST root without trailing slash.
            timeout:          HTTP timeout in seconds.
            recv_window:      Default recvWindow in ms for signed calls.
            proxies:          requests-style proxies mapping.
            show_limit_usage: Return {"limit_usage": ..., "data": ...}.
            show_header:      Return {"header": ..., "data": ...}.
            session:          Pre-built requests.Session (mainly for tests).

        Raises:
            ValueError: If base_url, timeout or recv_window is invalid.
        """
        validate_base_url(base_url)
        validate_timeout(timeout)
        if recv_window is not None:
            validate_recv_window(recv_window)

        self.api_key = api_key or ""
        self._api_secret = api_secret or ""
        self.base_url = base_url
        self.timeout = float(timeout)
        self.recv_window = recv_window
        self.proxies = proxies
        self.show_limit_usage = show_limit_usage
        self.show_header = show_header

        self._owns_http = session is None
        self._http = session if session is not None else requests.Session()
        self._http.headers.update(
            {
                "Content-Type": "application/json;charset=utf-8",
                "User-Agent": f"binance-fapi-client/{__version__}",
            }
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self._api_secret)

    def close(self) -> None:
        """Release the connection pool if this Session created it."""
        if self._owns_http:
            self._http.close()

    # -------------------------------------------------------------------
    # Public API used by the endpoint modules
    # -------------------------------------------------------------------

    def public_request(
        self, method: str, path: str, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """Send an unauthenticated request and return the decoded body."""
        query = urlencode(to_query_pairs(params or {}))
        return self._send(method, path, query, headers={})

    def sign_request(
        self, method: str, path: str, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """
        Send a request authenticated with the API key and an HMAC signature.

        `timestamp` (ms) is appended to the caller's parameters, preceded by
        the Session's default recvWindow when the caller didn't pass one.
        The signature is HMAC-SHA256(secret, query string) in hex.

        Raises:
            MissingCredentialsError: If the key or secret is empty. Nothing
                is sent in that case.
        """
        if not self.has_credentials:
            logger.error(f"Refusing to send {method.upper()} {path}: credentials missing")
            raise MissingCredentialsError()

        payload: Dict[str, Any] = dict(params or {})
        if self.recv_window is not None and "recvWindow" not in payload:
            payload["recvWindow"] = self.recv_window
        payload["timestamp"] = int(time.time() * 1000)

        query = urlencode(to_query_pairs(payload))
        query = f"{query}&signature={self._sign(query)}"
        return self._send(method, path, query, headers={API_KEY_HEADER: self.api_key})

    # -------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------

    def _sign(self, query: str) -> str:
        return hmac.new(
            self._api_secret.encode("utf-8"), query.encode("utf-8"), hashlib.sha256
        ).hexdigest()

    def _send(self, method: str, path: str, query: str, headers: Dict[str, str]) -> Any:
        verb = method.upper()
        url = f"{self.base_url}{path}"
        if query:
            url = f"{url}?{query}"

        logger.debug(f"{verb} {path}")
        response = self._http.request(
            verb, url, headers=headers, timeout=self.timeout, proxies=self.proxies
        )
        return self._handle_response(verb, path, response)

    def _handle_response(self, verb: str, path: str, response: requests.Response) -> Any:
        status = response.status_code

        if 400 <= status < 500:
            error = ClientError(response, status, response.text)
            logger.error(
                f"API error on {verb} {path}: {error.message} "
                f"(Code: {error.code}, HTTP {status})"
            )
            raise error

        if status >= 500:
            error = ServerError(response, status, response.text)
            logger.error(f"Server error on {verb} {path}: HTTP {status}")
            raise error

        try:
            data = response.json()
        except ValueError:
            logger.error(f"Invalid JSON from {verb} {path}: {response.text[:200]}")
            raise BinanceRequestException(f"Invalid Response: {response.text}")

        if not (self.show_limit_usage or self.show_header):
            return data

        result: Dict[str, Any] = {}
        if self.show_limit_usage:
            result["limit_usage"] = {
                key: value
                for key, value in response.headers.items()
                if key.lower().startswith(LIMIT_USAGE_HEADER_PREFIXES)
            }
        if self.show_header:
            result["header"] = dict(response.headers)
        result["data"] = data
        return result
