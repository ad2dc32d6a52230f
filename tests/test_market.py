"""Tests for the public market data endpoints."""

import pytest

from binance_fapi.market import Market

TIME_RANGE = {"start_time": "startTime", "end_time": "endTime"}
KLINE_OPTIONAL = {**TIME_RANGE, "limit": "limit"}
STATS_OPTIONAL = {"limit": "limit", **TIME_RANGE}

# (method, path, required local -> wire, optional local -> wire); all GET
ENDPOINTS = [
    ("test_connectivity", "/fapi/v1/ping", {}, {}),
    ("check_server_time", "/fapi/v1/time", {}, {}),
    ("exchange_information", "/fapi/v1/exchangeInfo", {}, {}),
    ("order_book", "/fapi/v1/depth", {"symbol": "symbol"}, {"limit": "limit"}),
    ("recent_trades_list", "/fapi/v1/trades", {"symbol": "symbol"}, {"limit": "limit"}),
    ("old_trades_lookup", "/fapi/v1/historicalTrades", {"symbol": "symbol"},
     {"limit": "limit", "from_id": "fromId"}),
    ("compressed_aggregate_trades_list", "/fapi/v1/aggTrades", {"symbol": "symbol"},
     {"from_id": "fromId", **KLINE_OPTIONAL}),
    ("kline_candlestick_data", "/fapi/v1/klines",
     {"symbol": "symbol", "interval": "interval"}, KLINE_OPTIONAL),
    ("continuous_contract_kline_candlestick_data", "/fapi/v1/continuousKlines",
     {"pair": "pair", "contract_type": "contractType", "interval": "interval"}, KLINE_OPTIONAL),
    ("index_price_kline_candlestick_data", "/fapi/v1/indexPriceKlines",
     {"pair": "pair", "interval": "interval"}, KLINE_OPTIONAL),
    ("mark_price_kline_candlestick_data", "/fapi/v1/markPriceKlines",
     {"symbol": "symbol", "interval": "interval"}, KLINE_OPTIONAL),
    ("premium_index_kline_data", "/fapi/v1/premiumIndexKlines",
     {"symbol": "symbol", "interval": "interval"}, KLINE_OPTIONAL),
    ("historical_blvt_nav_kline_candlestick", "/fapi/v1/lvtKlines",
     {"symbol": "symbol", "interval": "interval"}, KLINE_OPTIONAL),
    ("mark_price", "/fapi/v1/premiumIndex", {}, {"symbol": "symbol"}),
    ("get_funding_rate_history", "/fapi/v1/fundingRate", {},
     {"symbol": "symbol", **KLINE_OPTIONAL}),
    ("get_funding_rate_info", "/fapi/v1/fundingInfo", {}, {}),
    ("ticker_24hr_price_change_statistics", "/fapi/v1/ticker/24hr", {}, {"symbol": "symbol"}),
    ("symbol_price_ticker", "/fapi/v1/ticker/price", {}, {"symbol": "symbol"}),
    ("symbol_price_ticker_v2", "/fapi/v2/ticker/price", {}, {"symbol": "symbol"}),
    ("symbol_order_book_ticker", "/fapi/v1/ticker/bookTicker", {}, {"symbol": "symbol"}),
    ("quarterly_contract_settlement_price", "/futures/data/delivery-price", {"pair": "pair"}, {}),
    ("open_interest", "/fapi/v1/openInterest", {"symbol": "symbol"}, {}),
    ("open_interest_statistics", "/futures/data/openInterestHist",
     {"symbol": "symbol", "period": "period"}, STATS_OPTIONAL),
    ("top_trader_long_short_ratio_positions", "/futures/data/topLongShortPositionRatio",
     {"symbol": "symbol", "period": "period"}, STATS_OPTIONAL),
    ("top_trader_long_short_ratio_accounts", "/futures/data/topLongShortAccountRatio",
     {"symbol": "symbol", "period": "period"}, STATS_OPTIONAL),
    ("long_short_ratio", "/futures/data/globalLongShortAccountRatio",
     {"symbol": "symbol", "period": "period"}, STATS_OPTIONAL),
    ("taker_buy_sell_volume", "/futures/data/takerlongshortRatio",
     {"symbol": "symbol", "period": "period"}, STATS_OPTIONAL),
    ("basis", "/futures/data/basis",
     {"pair": "pair", "contract_type": "contractType", "period": "period"}, STATS_OPTIONAL),
    ("composite_index_symbol_information", "/fapi/v1/indexInfo", {}, {"symbol": "symbol"}),
    ("multi_assets_mode_asset_index", "/fapi/v1/assetIndex", {}, {"symbol": "symbol"}),
    ("query_index_price_constituents", "/fapi/v1/constituents", {"symbol": "symbol"}, {}),
    ("query_insurance_fund_balance_snapshot", "/fapi/v1/insuranceFund", {},
     {"symbol": "symbol"}),
]

IDS = [entry[0] for entry in ENDPOINTS]


def values_for(mapping):
    return {local: f"<{local}>" for local in mapping}


def wire_for(mapping):
    return {wire: f"<{local}>" for local, wire in mapping.items()}


@pytest.mark.parametrize("name, path, required, optional", ENDPOINTS, ids=IDS)
def test_required_only_sends_required_params(recorder, name, path, required, optional):
    result = getattr(Market(recorder), name)(**values_for(required))

    assert result == recorder.response
    assert recorder.last.method == "GET"
    assert recorder.last.path == path
    assert recorder.last.params == wire_for(required)
    assert recorder.last.signed is False


@pytest.mark.parametrize("name, path, required, optional", ENDPOINTS, ids=IDS)
def test_optional_params_use_wire_names(recorder, name, path, required, optional):
    getattr(Market(recorder), name)(**values_for(required), **values_for(optional))

    assert recorder.last.params == {**wire_for(required), **wire_for(optional)}
    assert recorder.last.signed is False


def test_every_market_method_is_covered():
    defined = {name for name in vars(Market) if not name.startswith("_")}
    assert defined == set(IDS)


def test_order_book_without_limit_sends_symbol_only(recorder):
    Market(recorder).order_book(symbol="BTCUSDT")

    assert recorder.calls == [("GET", "/fapi/v1/depth", {"symbol": "BTCUSDT"}, False)]


def test_values_are_passed_through_untouched(recorder):
    Market(recorder).kline_candlestick_data("BTCUSDT", "1h", start_time=0, limit=1500)

    assert recorder.last.params == {
        "symbol": "BTCUSDT",
        "interval": "1h",
        "startTime": 0,
        "limit": 1500,
    }


def test_missing_required_argument_fails_before_any_request(recorder):
    with pytest.raises(TypeError):
        Market(recorder).kline_candlestick_data("BTCUSDT")

    assert recorder.calls == []
