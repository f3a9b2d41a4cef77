import json
import logging

import httpx
import pytest

from mieli._version import VERSION
from mieli.errors import MeilisearchCommunicationError


def test_default_headers(client, server):
    server.add("GET", "/version", (200, {"pkgVersion": "1.12.0"}))

    client.get_version()

    request = server.requests[0]
    assert request.headers["User-Agent"] == f"mieli/{VERSION}"
    assert "Authorization" not in request.headers


def test_key_and_custom_header(make_client, server):
    server.add("GET", "/health", (200, {"status": "available"}))

    with make_client(key="masterKey", custom_header="X-Meili-Client: ci", user_agent="robot") as client:
        client.health()

    request = server.requests[0]
    assert request.headers["Authorization"] == "Bearer masterKey"
    assert request.headers["X-Meili-Client"] == "ci"
    assert request.headers["User-Agent"] == "robot"


def test_json_body_is_encoded(client, server):
    server.add("POST", "/indexes/movies/search", (200, {"hits": []}))

    client.index().search({"q": "carol", "limit": 2})

    request = server.requests[0]
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"q": "carol", "limit": 2}


def test_raw_payload_is_sent_untouched(client, server):
    server.add("POST", "/indexes/movies/documents", (202, {"taskUid": 1, "status": "succeeded"}))
    payload = b"id,title\n1,Carol\n"

    client.index().add_documents(payload, content_type="text/csv")

    request = server.requests[0]
    assert request.headers["Content-Type"] == "text/csv"
    assert request.content == payload


def test_get_has_no_body(client, server):
    server.add("GET", "/stats", (200, {"databaseSize": 1}))

    client.get_all_stats()

    request = server.requests[0]
    assert request.content == b""
    assert "Content-Type" not in request.headers


def test_transport_error_is_mapped(client, server):
    server.add("GET", "/health", httpx.ConnectError("connection refused"))

    with pytest.raises(MeilisearchCommunicationError) as err:
        client.health()

    assert "connection refused" in str(err.value)


def test_timeout_is_mapped(client, server):
    server.add("GET", "/health", httpx.ReadTimeout("timed out"))

    with pytest.raises(MeilisearchCommunicationError):
        client.health()


def test_requests_are_logged(client, server, caplog):
    server.add("GET", "/health", (200, {"status": "available"}))

    with caplog.at_level(logging.DEBUG, logger="mieli"):
        client.health()

    assert "GET http://127.0.0.1:7700/health" in caplog.text


def test_addr_with_path_prefix(make_client, server):
    server.add("GET", "/meili/health", (200, {"status": "available"}))

    with make_client(addr="http://127.0.0.1:7700/meili/") as client:
        client.health()

    assert server.requests[0].url == "http://127.0.0.1:7700/meili/health"
