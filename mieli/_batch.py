from __future__ import annotations

from httpx import Response

from mieli._http_requests import HttpRequests
from mieli.models.task import TaskListParameters


def get_batch(http_requests: HttpRequests, batch_uid: int) -> Response:
    return http_requests.get(f"batches/{batch_uid}")


def get_batches(http_requests: HttpRequests, parameters: TaskListParameters) -> Response:
    return http_requests.get("batches", params=parameters.to_params())
