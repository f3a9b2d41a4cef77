from __future__ import annotations

from typing import TYPE_CHECKING, Any

from httpx import Response, codes

from mieli.types import JsonDict

if TYPE_CHECKING:  # pragma: no cover
    from mieli._client import Client


class Index:
    """Requests scoped to a single index.

    Every method sends the request and hands the response to the client's response handler,
    returning the parsed body. Document reads and searches never wait on a task: user documents
    may carry their own `updateId` or `uid` fields.
    """

    def __init__(self, client: Client, uid: str) -> None:
        self.uid = uid
        self._client = client
        self._http_requests = client._http_requests
        self._base_url = f"indexes/{uid}"
        self._documents_url = f"{self._base_url}/documents"
        self._settings_url = f"{self._base_url}/settings"

    def __repr__(self) -> str:
        return f"Index(uid={self.uid!r})"

    def _handle(self, response: Response, *, fire_and_forget: bool | None = None) -> Any:
        return self._client.handle_response(
            response, fire_and_forget=fire_and_forget, index=self.uid
        )

    def get(self) -> Any:
        return self._handle(self._http_requests.get(self._base_url))

    def create(self, primary_key: str | None = None) -> Any:
        body: JsonDict = {"uid": self.uid}
        if primary_key:
            body["primaryKey"] = primary_key

        return self._handle(self._http_requests.post("indexes", body))

    def update(self, primary_key: str | None = None) -> Any:
        body: JsonDict = {}
        if primary_key:
            body["primaryKey"] = primary_key

        response = self._http_requests.patch(self._base_url, body)
        if response.status_code == codes.METHOD_NOT_ALLOWED:
            # Servers before v0.30 update indexes with POST.
            response = self._http_requests.post(self._base_url, body)

        return self._handle(response)

    def delete(self) -> Any:
        return self._handle(self._http_requests.delete(self._base_url))

    def get_documents(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: list[str] | None = None,
    ) -> Any:
        params: JsonDict = {}
        if limit is not None:
            params["limit"] = limit
        if offset is not None:
            params["offset"] = offset
        if fields:
            params["fields"] = ",".join(fields)

        return self._handle(
            self._http_requests.get(self._documents_url, params=params or None),
            fire_and_forget=True,
        )

    def get_document(self, document_id: str, *, fields: list[str] | None = None) -> Any:
        params = {"fields": ",".join(fields)} if fields else None
        return self._handle(
            self._http_requests.get(f"{self._documents_url}/{document_id}", params=params),
            fire_and_forget=True,
        )

    def add_documents(
        self,
        payload: bytes,
        *,
        content_type: str = "application/json",
        primary_key: str | None = None,
        replace: bool = False,
    ) -> Any:
        """Send a raw document payload.

        Args:
            payload: The documents, already encoded in `content_type`.
            content_type: One of application/json, application/x-ndjson or text/csv.
            primary_key: The primary key of the documents. Ignored by the server if the index
                already has one.
            replace: When True the documents are sent with PUT, which replaces existing
                documents instead of merging fields into them.
        """
        params = {"primaryKey": primary_key} if primary_key else None
        send = self._http_requests.put if replace else self._http_requests.post
        response = send(self._documents_url, payload, content_type, params)

        return self._handle(response)

    def delete_documents(self, document_ids: list[str] | None = None) -> Any:
        if not document_ids:
            response = self._http_requests.delete(self._documents_url)
        elif len(document_ids) == 1:
            response = self._http_requests.delete(f"{self._documents_url}/{document_ids[0]}")
        else:
            response = self._http_requests.post(f"{self._documents_url}/delete-batch", document_ids)

        return self._handle(response)

    def delete_documents_by_filter(self, filter: str) -> Any:
        return self._handle(
            self._http_requests.post(f"{self._documents_url}/delete", {"filter": filter})
        )

    def search(self, query: JsonDict) -> Any:
        return self._handle(
            self._http_requests.post(f"{self._base_url}/search", query), fire_and_forget=True
        )

    def get_settings(self) -> Any:
        return self._handle(self._http_requests.get(self._settings_url), fire_and_forget=True)

    def update_settings(self, payload: bytes) -> Any:
        response = self._http_requests.patch(self._settings_url, payload)
        if response.status_code == codes.METHOD_NOT_ALLOWED:
            response = self._http_requests.post(self._settings_url, payload)

        return self._handle(response)

    def get_update(self, update_id: int, *, watch: bool = False) -> Any:
        """Fetch a legacy update, optionally waiting for it to be processed."""
        response = self._http_requests.get(f"{self._base_url}/updates/{update_id}")
        return self._handle(response, fire_and_forget=not watch)
