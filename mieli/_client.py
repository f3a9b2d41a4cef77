from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Callable

from httpx import BaseTransport, Response
from httpx import Client as HttpxClient

from mieli import _batch, _task
from mieli._http_requests import HttpRequests
from mieli._poller import TaskPoller
from mieli._render import Renderer
from mieli.errors import MeilisearchError
from mieli.index import Index
from mieli.json_handler import build_json_handler
from mieli.models.config import ClientConfig
from mieli.models.task import TaskFilter, TaskListParameters
from mieli.types import JsonDict

if TYPE_CHECKING:  # pragma: no cover
    import sys
    from types import TracebackType

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self

logger = logging.getLogger(__name__)

KEY_TEMPLATE: JsonDict = {
    "description": "Add documents key",
    "actions": ["documents.add"],
    "indexes": ["mieli"],
    "expiresAt": "2021-11-13T00:00:00Z",
}


class Client:
    """Client sending the requests of one mieli invocation and rendering the responses."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        renderer: Renderer | None = None,
        transport: BaseTransport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Class initializer.

        Args:
            config: The settings of the invocation.
            renderer: Where responses are written. Defaults to a Renderer on stdout/stderr.
            transport: An httpx transport to use instead of the network. Defaults to None.
            sleep: Called with the polling interval in seconds between two status checks.
        """
        self.config = config
        self.json_handler = build_json_handler(config.json_handler)
        self.http_client = HttpxClient(
            base_url=config.addr,
            timeout=config.timeout,
            headers=self._build_headers(config),
            transport=transport,
        )
        self._http_requests = HttpRequests(self.http_client, self.json_handler)
        self.renderer = (
            renderer
            if renderer
            else Renderer(verbose=config.verbose, json_handler=self.json_handler)
        )
        self._poller = TaskPoller(self._http_requests, config, self.renderer, sleep=sleep)

    @staticmethod
    def _build_headers(config: ClientConfig) -> dict[str, str]:
        headers = {"User-Agent": config.user_agent}
        if config.key:
            headers["Authorization"] = f"Bearer {config.key}"
        if config.custom_header:
            name, value = config.custom_header
            headers[name] = value

        return headers

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        et: type[BaseException] | None,
        ev: type[BaseException] | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self.http_client.close()

    def handle_response(
        self,
        response: Response,
        *,
        fire_and_forget: bool | None = None,
        index: str | None = None,
    ) -> Any:
        """Render `response` and wait for the operation it started, if any.

        Args:
            response: The response of the request that was just sent.
            fire_and_forget: Overrides the configured fire-and-forget flag when set.
            index: The index legacy updates belong to. Defaults to the configured index.

        Returns:
            The last payload rendered: the response body, or the final state of the task.

        Raises:
            InvalidResponseBodyError: If a body is not valid JSON.
            MeilisearchCommunicationError: If a status request fails.
            MeilisearchTaskFailedError: If the task failed and `fail_on_task_error` is set.
        """
        body = self.renderer.render_response(response)
        if body is None:
            return None

        return self._poller.watch(body, fire_and_forget=fire_and_forget, index=index)

    def index(self, uid: str | None = None) -> Index:
        """Create a local reference to an index, the configured one by default."""
        return Index(self, uid if uid else self.config.index)

    def get_indexes(self, *, offset: int | None = None, limit: int | None = None) -> Any:
        """Get all indexes.

        Args:
            offset: Number of indexes to skip. The server default is used when None.
            limit: Number of indexes to return. The server default is used when None.

        Returns:
            The page of indexes sent by the server.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
            InvalidResponseBodyError: If the server did not send valid JSON.
        """
        params: JsonDict = {}
        if offset is not None:
            params["offset"] = offset
        if limit is not None:
            params["limit"] = limit

        return self.handle_response(self._http_requests.get("indexes", params=params or None))

    def get_task(self, task_id: int) -> Any:
        """Get a single task, waiting for it if it is still enqueued or processing.

        Args:
            task_id: The uid of the task.

        Returns:
            The last state of the task that was rendered.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
            InvalidResponseBodyError: If the server did not send valid JSON.
            MeilisearchTaskFailedError: If the watched task failed and `fail_on_task_error` is set.
        """
        return self.handle_response(_task.get_task(self._http_requests, task_id))

    def get_tasks(self, parameters: TaskListParameters | None = None) -> Any:
        """Get the tasks of the queue, most recent first.

        Args:
            parameters: Filters and pagination. Only the values that are set are sent.

        Returns:
            The page of tasks sent by the server.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
            InvalidResponseBodyError: If the server did not send valid JSON.
        """
        parameters = parameters if parameters else TaskListParameters()
        return self.handle_response(_task.get_tasks(self._http_requests, parameters))

    def cancel_tasks(self, task_filter: TaskFilter) -> Any:
        """Cancel the enqueued and processing tasks matching `task_filter`.

        Args:
            task_filter: Selects the tasks to cancel.

        Returns:
            The final state of the cancelation task.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
            InvalidResponseBodyError: If the server did not send valid JSON.
            MeilisearchTaskFailedError: If the cancelation failed and `fail_on_task_error` is set.
        """
        return self.handle_response(_task.cancel_tasks(self._http_requests, task_filter))

    def delete_tasks(self, task_filter: TaskFilter) -> Any:
        """Delete the finished tasks matching `task_filter`.

        Args:
            task_filter: Selects the tasks to delete.

        Returns:
            The final state of the deletion task.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
            InvalidResponseBodyError: If the server did not send valid JSON.
            MeilisearchTaskFailedError: If the deletion failed and `fail_on_task_error` is set.
        """
        return self.handle_response(_task.delete_tasks(self._http_requests, task_filter))

    def get_batch(self, batch_uid: int) -> Any:
        """Get a single batch.

        Args:
            batch_uid: The uid of the batch.

        Returns:
            The batch sent by the server.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
            InvalidResponseBodyError: If the server did not send valid JSON.
        """
        return self.handle_response(_batch.get_batch(self._http_requests, batch_uid))

    def get_batches(self, parameters: TaskListParameters | None = None) -> Any:
        """Get the batches, most recent first.

        Args:
            parameters: Filters and pagination, the same as for tasks.

        Returns:
            The page of batches sent by the server.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
            InvalidResponseBodyError: If the server did not send valid JSON.
        """
        parameters = parameters if parameters else TaskListParameters()
        return self.handle_response(_batch.get_batches(self._http_requests, parameters))

    def create_dump(self) -> Any:
        """Trigger the creation of a dump and wait for it."""
        return self.handle_response(self._http_requests.post("dumps"))

    def create_snapshot(self) -> Any:
        """Trigger the creation of a snapshot and wait for it."""
        return self.handle_response(self._http_requests.post("snapshots"))

    def health(self) -> Any:
        return self.handle_response(self._http_requests.get("health"))

    def get_version(self) -> Any:
        return self.handle_response(self._http_requests.get("version"))

    def get_all_stats(self) -> Any:
        return self.handle_response(self._http_requests.get("stats"))

    def get_keys(self) -> Any:
        return self.handle_response(self._http_requests.get("keys"))

    def get_key(self, key: str) -> Any:
        """Get a single API key.

        Args:
            key: The key itself or its uid.

        Returns:
            The key sent by the server.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
            InvalidResponseBodyError: If the server did not send valid JSON.
        """
        return self.handle_response(self._http_requests.get(f"keys/{key}"))

    def create_key(self, key: JsonDict) -> Any:
        """Create an API key.

        Args:
            key: The description, actions, indexes and expiration of the key. See
                `key_template` for an example.

        Returns:
            The created key.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
            InvalidResponseBodyError: If the server did not send valid JSON.
        """
        return self.handle_response(self._http_requests.post("keys", key))

    def update_key(self, key: str, update: JsonDict) -> Any:
        """Update the name or description of an API key.

        Args:
            key: The key itself or its uid.
            update: The fields to update.

        Returns:
            The updated key.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
            InvalidResponseBodyError: If the server did not send valid JSON.
        """
        return self.handle_response(self._http_requests.patch(f"keys/{key}", update))

    def delete_key(self, key: str) -> Any:
        """Delete an API key.

        Args:
            key: The key itself or its uid.

        Returns:
            None, the server answers with `204 No Content`.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
        """
        return self.handle_response(self._http_requests.delete(f"keys/{key}"))

    def key_template(self) -> JsonDict:
        """Print an example of the json accepted when creating a key."""
        self.renderer.write_json(KEY_TEMPLATE)
        return KEY_TEMPLATE

    def get_experimental_features(self) -> Any:
        return self.handle_response(self._http_requests.get("experimental-features"))

    def update_experimental_features(self, features: JsonDict) -> Any:
        """Enable or disable experimental features.

        Args:
            features: A mapping of feature names to booleans. Features not listed are unchanged.

        Returns:
            The state of every experimental feature after the update.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
            InvalidResponseBodyError: If the server did not send valid JSON.
        """
        return self.handle_response(self._http_requests.patch("experimental-features", features))

    def stream_logs(self, *, mode: str = "human", target: str = "info") -> None:
        """Stream the server logs to stdout until the server closes the stream or Ctrl-C.

        The log listener is removed from the server once streaming stops.

        Args:
            mode: `human` or `json`.
            target: One or more comma separated `module=level` pairs. Defaults to `info`.

        Raises:
            MeilisearchCommunicationError: If the stream could not be opened.
        """
        with self._http_requests.stream(
            "POST", "logs/stream", {"mode": mode, "target": target}
        ) as response:
            if not response.is_success:
                response.read()
                self.handle_response(response)
                return

            self.renderer.write_headers(response)
            try:
                for chunk in response.iter_text():
                    self.renderer.write_text(chunk)
            except KeyboardInterrupt:
                logger.info("Interrupted")

        logger.info("Removing the log listener")
        try:
            self.remove_log_stream()
        except MeilisearchError:
            logger.warning(
                "Could not disable the log listener, you may need to remove it with `mieli log remove`"
            )

    def remove_log_stream(self) -> Any:
        return self.handle_response(self._http_requests.delete("logs/stream"))

    def update_log_target(self, target: str) -> Any:
        """Change the log target of the logs written on the server stderr.

        Args:
            target: One or more comma separated `module=level` pairs, eg. `milli=debug`.

        Raises:
            MeilisearchCommunicationError: If there was an error communicating with the server.
        """
        return self.handle_response(self._http_requests.post("logs/stderr", {"target": target}))
