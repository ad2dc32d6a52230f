"""Tests for request signing, encoding and error mapping in Session."""

import hashlib
import hmac
from urllib.parse import parse_qsl, urlsplit

import pytest
import requests
from binance.exceptions import BinanceAPIException, BinanceRequestException

from binance_fapi.errors import APIError, ClientError, MissingCredentialsError, ServerError
from binance_fapi.session import Session


def make_session(fake_http, **kwargs):
    kwargs.setdefault("api_key", "test-key")
    kwargs.setdefault("api_secret", "test-secret")
    return Session(session=fake_http, **kwargs)


def query_of(url):
    return dict(parse_qsl(urlsplit(url).query))


# ---------------------------------------------------------------------------
# Public vs signed
# ---------------------------------------------------------------------------

def test_public_request_has_no_credentials(fake_http, fake_response):
    fake_http.respond(fake_response(200, {"bids": [], "asks": []}))
    session = make_session(fake_http)

    result = session.public_request("GET", "/fapi/v1/depth", {"symbol": "BTCUSDT"})

    assert result == {"bids": [], "asks": []}
    request = fake_http.last
    assert request["url"] == "https://fapi.binance.com/fapi/v1/depth?symbol=BTCUSDT"
    assert "X-MBX-APIKEY" not in request["headers"]
    assert "signature" not in request["url"]
    assert "timestamp" not in request["url"]


def test_public_request_without_params_has_no_query(fake_http):
    make_session(fake_http).public_request("GET", "/fapi/v1/ping")

    assert fake_http.last["url"] == "https://fapi.binance.com/fapi/v1/ping"


def test_public_request_works_without_credentials(fake_http):
    Session(session=fake_http).public_request("GET", "/fapi/v1/time")

    assert len(fake_http.requests) == 1


def test_signed_request_carries_key_timestamp_and_valid_signature(fake_http):
    session = make_session(fake_http)

    session.sign_request("DELETE", "/fapi/v1/order", {"symbol": "BTCUSDT", "orderId": 7})

    request = fake_http.last
    assert request["method"] == "DELETE"
    assert request["headers"]["X-MBX-APIKEY"] == "test-key"

    query = urlsplit(request["url"]).query
    unsigned, signature = query.rsplit("&signature=", 1)
    expected = hmac.new(b"test-secret", unsigned.encode(), hashlib.sha256).hexdigest()
    assert signature == expected

    params = query_of(request["url"])
    assert params["symbol"] == "BTCUSDT"
    assert params["orderId"] == "7"
    assert params["timestamp"].isdigit()
    assert "recvWindow" not in params


def test_signed_request_timestamp_is_milliseconds(fake_http, monkeypatch):
    monkeypatch.setattr("binance_fapi.session.time.time", lambda: 1700000000.5)

    make_session(fake_http).sign_request("GET", "/fapi/v2/account")

    assert query_of(fake_http.last["url"])["timestamp"] == "1700000000500"


def test_missing_credentials_raise_before_sending(fake_http):
    session = Session(api_key="key-only", session=fake_http)

    with pytest.raises(MissingCredentialsError):
        session.sign_request("GET", "/fapi/v2/account")

    assert fake_http.requests == []


def test_missing_credentials_is_a_request_exception():
    assert issubclass(MissingCredentialsError, BinanceRequestException)


# ---------------------------------------------------------------------------
# recvWindow
# ---------------------------------------------------------------------------

def test_default_recv_window_is_added(fake_http):
    make_session(fake_http, recv_window=5000).sign_request("GET", "/fapi/v2/account")

    assert query_of(fake_http.last["url"])["recvWindow"] == "5000"


def test_explicit_recv_window_wins(fake_http):
    session = make_session(fake_http, recv_window=5000)

    session.sign_request("GET", "/fapi/v2/account", {"recvWindow": 2000})

    assert query_of(fake_http.last["url"])["recvWindow"] == "2000"


def test_caller_params_are_not_mutated(fake_http):
    params = {"symbol": "BTCUSDT"}

    make_session(fake_http, recv_window=5000).sign_request("GET", "/fapi/v1/openOrders", params)

    assert params == {"symbol": "BTCUSDT"}


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def test_bool_and_list_values_are_encoded_for_the_wire(fake_http):
    session = make_session(fake_http)

    session.public_request(
        "GET", "/fapi/v1/test", {"flag": True, "off": False, "ids": [1, 2], "qty": 0.001}
    )

    assert urlsplit(fake_http.last["url"]).query == (
        "flag=true&off=false&ids=%5B1%2C2%5D&qty=0.001"
    )


def test_parameter_order_is_preserved(fake_http):
    make_session(fake_http).public_request(
        "GET", "/fapi/v1/klines", {"symbol": "BTCUSDT", "interval": "1m", "limit": 5}
    )

    assert fake_http.last["url"].endswith("?symbol=BTCUSDT&interval=1m&limit=5")


def test_timeout_and_proxies_are_forwarded(fake_http):
    proxies = {"https": "http://proxy:8080"}

    make_session(fake_http, timeout=3, proxies=proxies).public_request("GET", "/fapi/v1/ping")

    assert fake_http.last["timeout"] == 3.0
    assert fake_http.last["proxies"] == proxies


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------

def test_4xx_raises_client_error_with_code_and_message(fake_http, fake_response):
    fake_http.respond(
        fake_response(400, {"code": -1121, "msg": "Invalid symbol."},
                      headers={"X-MBX-USED-WEIGHT-1M": "3"})
    )

    with pytest.raises(ClientError) as excinfo:
        make_session(fake_http).public_request("GET", "/fapi/v1/depth", {"symbol": "NOPE"})

    error = excinfo.value
    assert error.status_code == 400
    assert error.code == -1121
    assert error.message == "Invalid symbol."
    assert error.headers["X-MBX-USED-WEIGHT-1M"] == "3"
    assert isinstance(error, BinanceAPIException)
    assert "-1121" in str(error)


def test_5xx_raises_server_error(fake_http, fake_response):
    fake_http.respond(fake_response(503, text="Service Unavailable"))

    with pytest.raises(ServerError) as excinfo:
        make_session(fake_http).public_request("GET", "/fapi/v1/time")

    assert excinfo.value.status_code == 503
    assert isinstance(excinfo.value, APIError)
    assert not isinstance(excinfo.value, ClientError)


def test_invalid_json_raises_request_exception(fake_http, fake_response):
    fake_http.respond(fake_response(200, text="<html>oops</html>"))

    with pytest.raises(BinanceRequestException):
        make_session(fake_http).public_request("GET", "/fapi/v1/time")


def test_transport_errors_propagate_unchanged(fake_http):
    fake_http.respond(requests.ConnectTimeout("timed out"))

    with pytest.raises(requests.ConnectTimeout):
        make_session(fake_http).sign_request("GET", "/fapi/v2/account")


# ---------------------------------------------------------------------------
# Response options
# ---------------------------------------------------------------------------

def test_show_limit_usage_wraps_response(fake_http, fake_response):
    fake_http.respond(
        fake_response(200, {"serverTime": 1}, headers={
            "X-MBX-USED-WEIGHT-1M": "10",
            "X-MBX-ORDER-COUNT-1M": "2",
            "Content-Type": "application/json",
        })
    )

    result = make_session(fake_http, show_limit_usage=True).public_request("GET", "/fapi/v1/time")

    assert result == {
        "limit_usage": {"X-MBX-USED-WEIGHT-1M": "10", "X-MBX-ORDER-COUNT-1M": "2"},
        "data": {"serverTime": 1},
    }


def test_show_header_wraps_response(fake_http, fake_response):
    fake_http.respond(fake_response(200, [], headers={"Content-Type": "application/json"}))

    result = make_session(fake_http, show_header=True).public_request("GET", "/fapi/v1/time")

    assert result == {"header": {"Content-Type": "application/json"}, "data": []}


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "kwargs",
    [
        {"base_url": "https://fapi.binance.com/"},
        {"base_url": "fapi.binance.com"},
        {"timeout": 0},
        {"recv_window": 60001},
        {"recv_window": 0},
    ],
)
def test_invalid_configuration_is_rejected(fake_http, kwargs):
    with pytest.raises(ValueError):
        Session(session=fake_http, **kwargs)


def test_user_agent_header_is_set(fake_http):
    Session(session=fake_http)

    assert fake_http.headers["User-Agent"].startswith("binance-fapi-client/")


def test_close_leaves_injected_session_open(fake_http):
    Session(session=fake_http).close()

    assert fake_http.closed is False
