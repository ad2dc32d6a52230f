"""Pytest configuration and shared fakes for the binance_fapi test suite."""

from __future__ import annotations

import json
import os
from typing import Any, NamedTuple

# Deterministic settings before binance_fapi.config reads the environment.
# load_dotenv() never overrides variables that are already set.
os.environ["LOG_FILE"] = ""
os.environ["BINANCE_API_KEY"] = ""
os.environ["BINANCE_API_SECRET"] = ""
os.environ["USE_TESTNET"] = "False"
os.environ["BINANCE_RECV_WINDOW"] = "0"

import pytest  # noqa: E402
from requests.structures import CaseInsensitiveDict  # noqa: E402


class Call(NamedTuple):
    method: str
    path: str
    params: dict
    signed: bool


class RecordingSession:
    """Stands in for Session and records what each endpoint asked for."""

    def __init__(self) -> None:
        self.calls: list[Call] = []
        self.response: Any = {"ok": True}

    def public_request(self, method, path, params=None):
        self.calls.append(Call(method, path, dict(params or {}), False))
        return self.response

    def sign_request(self, method, path, params=None):
        self.calls.append(Call(method, path, dict(params or {}), True))
        return self.response

    @property
    def last(self) -> Call:
        return self.calls[-1]


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, *, text: str | None = None,
                 headers: dict | None = None) -> None:
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(body if body is not None else {})
        self.headers = CaseInsensitiveDict(headers or {})
        self.request = None

    def json(self) -> Any:
        return json.loads(self.text)


class FakeHTTP:
    """Minimal requests.Session replacement that records outgoing requests."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.requests: list[dict[str, Any]] = []
        self.queue: list[Any] = []
        self.closed = False

    def respond(self, response: Any) -> None:
        self.queue.append(response)

    def request(self, method, url, headers=None, timeout=None, proxies=None):
        self.requests.append(
            {"method": method, "url": url, "headers": dict(headers or {}),
             "timeout": timeout, "proxies": proxies}
        )
        response = self.queue.pop(0) if self.queue else FakeResponse(200, {})
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> dict[str, Any]:
        return self.requests[-1]


@pytest.fixture
def recorder() -> RecordingSession:
    return RecordingSession()


@pytest.fixture
def fake_http() -> FakeHTTP:
    return FakeHTTP()


@pytest.fixture
def fake_response():
    return FakeResponse
