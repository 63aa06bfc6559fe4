from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Union

import pytest

from b2brouter import B2BRouterClient
from b2brouter.http import HttpClient, RawResponse

Outcome = Union[RawResponse, Exception, Callable[..., RawResponse]]


class FakeHttpClient(HttpClient):
    """Replays queued outcomes and records every request it receives."""

    def __init__(self) -> None:
        self.outcomes: List[Outcome] = []
        self.requests: List[Dict[str, Any]] = []

    def add(self, outcome: Outcome) -> None:
        self.outcomes.append(outcome)

    def respond(self, status: int, body: str = "", headers: Mapping[str, str] | None = None) -> None:
        self.add(RawResponse(status=status, body=body, headers=dict(headers or {})))

    def request(self, method, url, headers, body=None, timeout=80.0) -> RawResponse:
        self.requests.append(
            {"method": method, "url": url, "headers": dict(headers), "body": body, "timeout": timeout}
        )
        if not self.outcomes:
            raise AssertionError("no fake response queued")
        outcome = self.outcomes.pop(0)
        if callable(outcome) and not isinstance(outcome, RawResponse):
            outcome = outcome(method, url, headers, body, timeout)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def last(self) -> Dict[str, Any]:
        return self.requests[-1]


@pytest.fixture()
def fake_http() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture()
def client(fake_http: FakeHttpClient) -> B2BRouterClient:
    return B2BRouterClient("test-key", api_base="https://api.example.com", http_client=fake_http)
