from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Any, Callable

from mieli._http_requests import HttpRequests
from mieli._render import Renderer
from mieli.errors import MeilisearchError, MeilisearchTaskFailedError
from mieli.models.batch import BatchView
from mieli.models.config import ClientConfig
from mieli.models.task import (
    LegacyUpdateRef,
    OperationHandle,
    TaskRef,
    TaskView,
    extract_operation_handle,
    is_failure,
    is_terminal,
)
from mieli.types import JsonDict

logger = logging.getLogger(__name__)


class PollAction(Enum):
    STOP = "stop"
    POLL = "poll"
    WAIT_AND_POLL = "wait_and_poll"


def initial_action(
    handle: OperationHandle | None, status: str | None, *, fire_and_forget: bool
) -> PollAction:
    """Decide what to do right after the first response has been rendered."""
    if fire_and_forget or handle is None:
        return PollAction.STOP

    if status is None:
        # Legacy update responses do not carry a status, the update itself has to be fetched.
        return PollAction.POLL if isinstance(handle, LegacyUpdateRef) else PollAction.STOP

    if is_terminal(status):
        return PollAction.STOP

    return PollAction.WAIT_AND_POLL


def next_action(status: str | None) -> PollAction:
    """Decide what to do after a status poll has been rendered."""
    return PollAction.STOP if is_terminal(status) else PollAction.WAIT_AND_POLL


class TaskPoller:
    def __init__(
        self,
        http_requests: HttpRequests,
        config: ClientConfig,
        renderer: Renderer,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._http_requests = http_requests
        self._config = config
        self._renderer = renderer
        self._sleep = sleep

    def watch(
        self, body: Any, *, fire_and_forget: bool | None = None, index: str | None = None
    ) -> Any:
        """Poll the operation referenced by `body` until it reaches a terminal state.

        Args:
            body: The parsed body of the response that was just rendered.
            fire_and_forget: Overrides the configured fire-and-forget flag when set.
            index: The index legacy updates belong to. Defaults to the configured index.

        Returns:
            The last task or update payload seen, or `body` when nothing was polled.

        Raises:
            MeilisearchCommunicationError: If a status request fails.
            InvalidResponseBodyError: If a status response is not valid JSON.
            MeilisearchTaskFailedError: If the operation failed or was canceled and
                `fail_on_task_error` is set.
        """
        if fire_and_forget is None:
            fire_and_forget = self._config.fire_and_forget

        handle = extract_operation_handle(body)
        view = TaskView.from_body(body)
        action = initial_action(handle, view.status, fire_and_forget=fire_and_forget)
        if action is PollAction.STOP or handle is None:
            return body

        payload = body
        while action is not PollAction.STOP:
            if action is PollAction.WAIT_AND_POLL:
                self._sleep(self._config.interval_seconds)

            payload = self._fetch_status(handle, index or self._config.index)
            view = TaskView.from_body(payload)
            if isinstance(handle, TaskRef):
                self._renderer.redraw(payload, self._fetch_progress(view.batch_uid))
            else:
                self._renderer.redraw(payload)

            action = next_action(view.status)

        if self._config.fail_on_task_error and is_failure(view.status):
            raise MeilisearchTaskFailedError(f"{_describe(handle)} ended with status {view.status}")

        return payload

    def _fetch_status(self, handle: OperationHandle, index: str) -> Any:
        if isinstance(handle, TaskRef):
            path = handle.status_path
        else:
            path = handle.status_path(index)

        response = self._http_requests.get(path)
        return self._http_requests.json(response)

    def _fetch_progress(self, batch_uid: int | None) -> JsonDict | None:
        if batch_uid is None:
            return None

        try:
            response = self._http_requests.get(f"batches/{batch_uid}")
            return BatchView.from_body(self._http_requests.json(response)).progress
        except MeilisearchError as err:
            logger.debug("Could not retrieve the progress of batch %s: %s", batch_uid, err)
            return None


def _describe(handle: OperationHandle) -> str:
    if isinstance(handle, TaskRef):
        return f"Task {handle.uid}"

    return f"Update {handle.update_id}"
