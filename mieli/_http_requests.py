from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from httpx import Client, Response, TransportError, codes

from mieli.errors import InvalidResponseBodyError, MeilisearchCommunicationError
from mieli.json_handler import JsonHandler
from mieli.types import JsonDict

logger = logging.getLogger(__name__)


class HttpRequests:
    def __init__(self, http_client: Client, json_handler: JsonHandler) -> None:
        self.http_client = http_client
        self.json_handler = json_handler

    def _build_content(
        self, body: Any | None, content_type: str
    ) -> tuple[str | bytes | None, dict[str, str] | None]:
        if body is None:
            return None, None

        headers = build_headers(content_type)
        if isinstance(body, (bytes, bytearray)):
            return bytes(body), headers
        if content_type == "application/json":
            return self.json_handler.dumps(body), headers

        return body, headers

    def _send_request(
        self,
        http_method: str,
        path: str,
        body: Any | None = None,
        content_type: str = "application/json",
        params: JsonDict | None = None,
    ) -> Response:
        content, headers = self._build_content(body, content_type)
        logger.debug("%s %s", http_method, self.http_client.base_url.join(path))

        try:
            return self.http_client.request(
                http_method, path, content=content, headers=headers, params=params
            )
        except TransportError as err:
            raise MeilisearchCommunicationError(str(err)) from err

    def get(self, path: str, params: JsonDict | None = None) -> Response:
        return self._send_request("GET", path, params=params)

    def patch(
        self,
        path: str,
        body: Any | None = None,
        content_type: str = "application/json",
        params: JsonDict | None = None,
    ) -> Response:
        return self._send_request("PATCH", path, body, content_type, params)

    def post(
        self,
        path: str,
        body: Any | None = None,
        content_type: str = "application/json",
        params: JsonDict | None = None,
    ) -> Response:
        return self._send_request("POST", path, body, content_type, params)

    def put(
        self,
        path: str,
        body: Any | None = None,
        content_type: str = "application/json",
        params: JsonDict | None = None,
    ) -> Response:
        return self._send_request("PUT", path, body, content_type, params)

    def delete(self, path: str, params: JsonDict | None = None) -> Response:
        return self._send_request("DELETE", path, params=params)

    @contextmanager
    def stream(self, http_method: str, path: str, body: Any | None = None) -> Iterator[Response]:
        """Send a request without reading the body up front.

        Transport errors raised while the body is being consumed are mapped the same way as
        for regular requests.
        """
        content, headers = self._build_content(body, "application/json")
        logger.debug("%s %s", http_method, self.http_client.base_url.join(path))

        try:
            with self.http_client.stream(
                http_method, path, content=content, headers=headers
            ) as response:
                yield response
        except TransportError as err:
            raise MeilisearchCommunicationError(str(err)) from err

    def json(self, response: Response) -> Any:
        return decode_json(response, self.json_handler)


def build_headers(content_type: str) -> dict[str, str]:
    return {"Content-Type": content_type}


def decode_json(response: Response, json_handler: JsonHandler) -> Any:
    """Parse the body of `response`.

    Returns None for `204 No Content` and for empty bodies.

    Raises:
        InvalidResponseBodyError: If the body is not valid JSON. The raw bytes are kept on the
            error.
    """
    if response.status_code == codes.NO_CONTENT:
        return None

    raw = response.read()
    if not raw:
        return None

    try:
        return json_handler.loads(raw)
    except ValueError as err:
        raise InvalidResponseBodyError(
            f"Could not parse the {response.status_code} response of {response.request.url} as json: {err}",
            raw,
        ) from err
