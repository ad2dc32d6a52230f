"""
Input Validation Module for the Binance Futures REST client.

This module verifies Session settings and command-line parameters BEFORE
anything is sent to the Binance API. Each validate_* function raises a
ValueError with a clear message if the input is invalid, or returns True
if valid.

Endpoint arguments themselves are not validated here: required arguments
are enforced by the method signatures and values are passed to the API
exactly as supplied.

Usage:
    from binance_fapi.validators import validate_recv_window, parse_param
    validate_recv_window(5000)          # Returns True
    validate_recv_window(90000)         # Raises ValueError
    parse_param("limit=50")             # Returns ("limit", "50")
"""

import json
from typing import Any, Tuple
from urllib.parse import urlparse

from binance_fapi.config import MAX_RECV_WINDOW


def validate_recv_window(recv_window: int) -> bool:
    """
    Validate a recvWindow value in milliseconds.

    recvWindow tells the server how long after `timestamp` a signed
    request is still acceptable. Binance rejects values above 60000.

    Args:
        recv_window: Window in milliseconds (1..60000).

    Returns:
        True if the value is valid.

    Raises:
        ValueError: If the value is not an integer in range.
    """
    if isinstance(recv_window, bool) or not isinstance(recv_window, int):
        raise ValueError(
            f"recvWindow must be an integer number of milliseconds, "
            f"got {type(recv_window).__name__}"
        )

    if recv_window <= 0 or recv_window > MAX_RECV_WINDOW:
        raise ValueError(
            f"recvWindow must be between 1 and {MAX_RECV_WINDOW} ms. Got {recv_window}."
        )

    return True


def validate_timeout(timeout: float) -> bool:
    """
    Validate the HTTP timeout (seconds) handed to requests.

    Raises:
        ValueError: If the timeout is not a positive number.
    """
    try:
        timeout = float(timeout)
    except (TypeError, ValueError):
        raise ValueError(f"Timeout must be a number of seconds. Got '{timeout}'.")

    if timeout <= 0:
        raise ValueError(f"Timeout must be greater than 0. Got {timeout}.")

    return True


def validate_base_url(base_url: str) -> bool:
    """
    Validate that a base URL is an absolute http(s) URL without a path.

    Endpoint paths such as `/fapi/v1/order` are appended verbatim, so the
    base URL must not end with a slash or carry its own path.

    Raises:
        ValueError: If the URL is malformed.
    """
    if not isinstance(base_url, str) or not base_url:
        raise ValueError("Base URL must be a non-empty string, e.g. 'https://fapi.binance.com'.")

    parsed = urlparse(base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(
            f"Base URL must start with http:// or https://. Got '{base_url}'."
        )

    if parsed.path not in ("", "/") or base_url.endswith("/"):
        raise ValueError(
            f"Base URL must not contain a path or trailing slash. Got '{base_url}'."
        )

    return True


def coerce_value(raw: str) -> Any:
    """
    Turn a command-line string into the Python value it spells.

    - "true" / "false" become booleans
    - JSON arrays and objects are decoded ('[1,2]' -> [1, 2])
    - anything else stays the string as typed ("BTCUSDT", "0.00001234", "007")

    Numbers stay strings and are sent exactly as typed.
    """
    lowered = raw.lower()
    if lowered in ("true", "false"):
        return lowered == "true"

    if raw[:1] in ("[", "{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            raise ValueError(f"Could not decode JSON value: {raw}")

    return raw


def parse_param(token: str) -> Tuple[str, Any]:
    """
    Parse one `name=value` command-line token.

    Args:
        token: A string such as "symbol=BTCUSDT" or "limit=50".

    Returns:
        A (name, value) tuple with the value coerced by coerce_value().

    Raises:
        ValueError: If the token has no '=' or an empty name or value.
    """
    if "=" not in token:
        raise ValueError(
            f"Parameters must look like name=value. Got '{token}'. "
            f"Example: symbol=BTCUSDT"
        )

    name, raw = token.split("=", 1)
    name = name.strip().replace("-", "_")
    raw = raw.strip()

    if not name.isidentifier():
        raise ValueError(f"Invalid parameter name '{name}'.")

    if not raw:
        raise ValueError(f"Parameter '{name}' has no value.")

    return name, coerce_value(raw)
