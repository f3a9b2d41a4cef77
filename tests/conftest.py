from __future__ import annotations

from io import StringIO
from typing import Any

import pytest
from httpx import MockTransport, Request, Response
from rich.console import Console

from mieli import Client, ClientConfig
from mieli._render import Renderer

BASE_URL = "http://127.0.0.1:7700"
INDEX = "movies"


class FakeServer:
    """Scripted stand-in for Meilisearch.

    Each route holds a queue of replies consumed in order, the last reply is repeated once the
    queue is down to one element. A reply is either a `(status_code, body)` tuple or an exception
    raised by the transport.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[Any]] = {}
        self.requests: list[Request] = []

    def add(self, method: str, path: str, *replies: Any) -> None:
        self.routes.setdefault((method, path), []).extend(replies)

    def calls(self, method: str, path: str) -> list[Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def handler(self, request: Request) -> Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return Response(404, json={"message": "not found", "code": "not_found"})

        reply = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(reply, Exception):
            raise reply

        status_code, body = reply
        if body is None:
            return Response(status_code)
        if isinstance(body, bytes):
            return Response(status_code, content=body)

        return Response(status_code, json=body)

    @property
    def transport(self) -> MockTransport:
        return MockTransport(self.handler)


class RecordingRenderer(Renderer):
    """Renderer writing to in-memory consoles and keeping every JSON document it printed."""

    def __init__(self, *, verbose: int = 0, terminal: bool = False) -> None:
        super().__init__(
            verbose=verbose,
            stdout=Console(file=StringIO(), force_terminal=terminal, width=100),
            stderr=Console(file=StringIO(), force_terminal=False, width=100),
        )
        self.rendered: list[Any] = []

    def write_json(self, value: Any) -> int:
        self.rendered.append(value)
        return super().write_json(value)

    @property
    def stdout_text(self) -> str:
        return self.stdout.file.getvalue()  # type: ignore[attr-defined]

    @property
    def stderr_text(self) -> str:
        return self.stderr.file.getvalue()  # type: ignore[attr-defined]


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def make_client(server, sleeps, renderer):
    def _make(**config_overrides):
        config = ClientConfig(**{"addr": BASE_URL, "index": INDEX, **config_overrides})
        return Client(config, renderer=renderer, transport=server.transport, sleep=sleeps.append)

    return _make


@pytest.fixture
def client(make_client):
    with make_client() as client:
        yield client
