"""
Wire parameter helpers shared by the endpoint modules.

Every endpoint builds a ``{wireName: value}`` dict from its arguments and
passes it through ``compact`` so unset optional fields never reach the
wire. Binance treats the presence of some fields as significant, so an
omitted argument must be absent rather than sent empty.
"""

import json
from typing import Any, Dict, List, Mapping, Optional, Tuple


def compact(params: Mapping[str, Optional[Any]]) -> Dict[str, Any]:
    """
    Drop every entry whose value is None, keeping insertion order.

    Falsy values that were actually supplied (False, 0, "") are kept.

    Example:
        >>> compact({"symbol": "BTCUSDT", "limit": None, "reduceOnly": False})
        {'symbol': 'BTCUSDT', 'reduceOnly': False}
    """
    return {key: value for key, value in params.items() if value is not None}


def encode_value(value: Any) -> str:
    """Render one parameter value the way the API expects it on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def to_query_pairs(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """Ordered (key, encoded value) pairs ready for urlencode."""
    return [(key, encode_value(value)) for key, value in params.items()]
