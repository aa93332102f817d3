"""Global test configuration for honeybadger_api tests."""

import json
from collections.abc import Generator
from typing import Any

import httpx
import pytest
import structlog

from honeybadger_api import HoneybadgerApi

BASE_URL = "https://hb.example.com"
TOKEN = "test-token"


class FakeServer:
    """httpx.MockTransport handler replaying queued responses.

    Every request is recorded. Without a queued response the server answers
    200 with an empty JSON object.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def respond(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: bytes | None = None,
    ) -> None:
        if content is not None:
            self._responses.append(httpx.Response(status_code, content=content))
        elif json_body is not None:
            self._responses.append(httpx.Response(status_code, json=json_body))
        else:
            self._responses.append(httpx.Response(status_code))

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={})

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def api(server: FakeServer) -> Generator[HoneybadgerApi, None, None]:
    """HoneybadgerApi talking to the fake server."""
    client = HoneybadgerApi(
        token=TOKEN,
        base_url=BASE_URL,
        transport=httpx.MockTransport(server.handler),
    )
    yield client
    client.close()


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo structlog configuration done by a test."""
    yield
    structlog.reset_defaults()
