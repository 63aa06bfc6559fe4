from __future__ import annotations

import json
import logging
from datetime import date
from decimal import Decimal
from typing import List

import httpx
import pytest

from b2brouter.errors import ApiConnectionError
from b2brouter.http import HttpxTransport, RawResponse, RetryingTransport


def test_transport_returns_status_body_and_headers() -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"invoice": {"id": "inv_1"}}, headers={"X-Request-Id": "req_1"})

    with HttpxTransport(transport=httpx.MockTransport(handler)) as transport:
        response = transport.request(
            "post",
            "https://api.example.com/accounts/a/invoices",
            {"X-B2B-API-Key": "k", "Content-Type": "application/json"},
            {"invoice": {"number": "INV-1"}},
            10,
        )

    assert response.status == 201
    assert json.loads(response.body) == {"invoice": {"id": "inv_1"}}
    assert response.headers["X-Request-Id"] == "req_1"
    assert seen[0].method == "POST"
    assert seen[0].headers["X-B2B-API-Key"] == "k"
    assert json.loads(seen[0].content) == {"invoice": {"number": "INV-1"}}


def test_transport_sends_string_bodies_verbatim() -> None:
    bodies: List[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(request.content)
        return httpx.Response(200)

    transport = HttpxTransport(transport=httpx.MockTransport(handler))
    transport.request("PUT", "https://api.example.com/x", {}, '{"raw":1}', 10)
    assert bodies == [b'{"raw":1}']


@pytest.mark.parametrize("method", ["GET", "DELETE"])
def test_transport_never_sends_body_for_query_methods(method: str) -> None:
    bodies: List[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(request.content)
        return httpx.Response(200)

    transport = HttpxTransport(transport=httpx.MockTransport(handler))
    transport.request(method, "https://api.example.com/x", {}, {"ignored": True}, 10)
    assert bodies == [b""]


def test_transport_treats_server_errors_as_responses() -> None:
    transport = HttpxTransport(transport=httpx.MockTransport(lambda request: httpx.Response(500, text="boom")))
    response = transport.request("GET", "https://api.example.com/x", {}, None, 10)
    assert response == RawResponse(status=500, body="boom", headers=response.headers)


def test_repeated_headers_keep_last_value() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers=[("X-Trace", "one"), ("X-Trace", "two")])

    transport = HttpxTransport(transport=httpx.MockTransport(handler))
    assert transport.request("GET", "https://api.example.com/x", {}, None, 10).headers["X-Trace"] == "two"


@pytest.mark.parametrize(
    "exc_cls",
    [httpx.ConnectError, httpx.ReadTimeout, httpx.ConnectTimeout, httpx.RemoteProtocolError],
)
def test_transport_wraps_io_failures(exc_cls: type) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_cls("unreachable", request=request)

    transport = HttpxTransport(transport=httpx.MockTransport(handler))
    with pytest.raises(ApiConnectionError) as excinfo:
        transport.request("GET", "https://api.example.com/x", {}, None, 1)
    assert "unreachable" in excinfo.value.message
    assert isinstance(excinfo.value.__cause__, exc_cls)


def _ok() -> RawResponse:
    return RawResponse(status=200, body='{"ok":true}')


@pytest.mark.parametrize("failures", [0, 1, 2, 3])
def test_retry_recovers_after_connection_failures(fake_http, failures: int) -> None:
    inner = fake_http
    for _ in range(failures):
        inner.add(ApiConnectionError("refused"))
    inner.add(_ok())
    delays: List[float] = []

    retrying = RetryingTransport(inner, max_retries=3, retry_delay=1000, sleep=delays.append)
    response = retrying.request("GET", "https://api.example.com/x", {}, None, 80)

    assert response.status == 200
    assert len(inner.requests) == failures + 1
    assert delays == [1.0, 2.0, 4.0][:failures]


def test_retry_gives_up_after_max_retries(fake_http) -> None:
    inner = fake_http
    errors = [ApiConnectionError(f"attempt {n}") for n in range(1, 5)]
    for error in errors:
        inner.add(error)
    inner.add(_ok())
    delays: List[float] = []

    retrying = RetryingTransport(inner, max_retries=3, retry_delay=100, sleep=delays.append)
    with pytest.raises(ApiConnectionError) as excinfo:
        retrying.request("GET", "https://api.example.com/x", {}, None, 80)

    assert excinfo.value is errors[-1]
    assert len(inner.requests) == 4
    assert delays == [0.1, 0.2, 0.4]
    assert len(inner.outcomes) == 1


def test_retry_disabled_with_zero_retries(fake_http) -> None:
    inner = fake_http
    inner.add(ApiConnectionError("down"))
    retrying = RetryingTransport(inner, max_retries=0, sleep=lambda _: pytest.fail("should not sleep"))
    with pytest.raises(ApiConnectionError):
        retrying.request("GET", "https://api.example.com/x", {}, None, 80)
    assert len(inner.requests) == 1


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_http_error_statuses_are_not_retried(fake_http, status: int) -> None:
    inner = fake_http
    inner.respond(status, "boom")
    retrying = RetryingTransport(inner, sleep=lambda _: pytest.fail("should not sleep"))
    assert retrying.request("GET", "https://api.example.com/x", {}, None, 80).status == status
    assert len(inner.requests) == 1


def test_retry_logs_each_backoff(fake_http, caplog: pytest.LogCaptureFixture) -> None:
    inner = fake_http
    inner.add(ApiConnectionError("refused"))
    inner.add(_ok())
    retrying = RetryingTransport(inner, max_retries=2, retry_delay=0, sleep=lambda _: None)

    with caplog.at_level(logging.WARNING, logger="b2brouter.http"):
        retrying.request("GET", "https://api.example.com/x", {"X-B2B-API-Key": "secret"}, None, 80)

    assert "retry 1/2" in caplog.text
    assert "secret" not in caplog.text


def test_retry_over_httpx_transport() -> None:
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        if calls["count"] < 3:
            raise httpx.ConnectError("refused", request=request)
        return httpx.Response(200, json={"ok": True})

    retrying = RetryingTransport(
        HttpxTransport(transport=httpx.MockTransport(handler)),
        max_retries=3,
        retry_delay=0,
    )
    assert retrying.request("GET", "https://api.example.com/x", {}, None, 80).status == 200
    assert calls["count"] == 3
    retrying.close()


def test_transport_serializes_decimals_and_dates() -> None:
    bodies: List[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(request.content)
        return httpx.Response(201)

    transport = HttpxTransport(transport=httpx.MockTransport(handler))
    transport.request(
        "POST",
        "https://api.example.com/accounts/a/invoices",
        {},
        {"invoice": {"date": date(2025, 3, 1), "lines": [{"price": Decimal("19.99"), "quantity": 3}]}},
        10,
    )

    assert json.loads(bodies[0]) == {"invoice": {"date": "2025-03-01", "lines": [{"price": "19.99", "quantity": 3}]}}


def test_transport_rejects_unknown_body_types() -> None:
    transport = HttpxTransport(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    with pytest.raises(TypeError):
        transport.request("POST", "https://api.example.com/x", {}, {"value": object()}, 10)
