from __future__ import annotations

from httpx import Response

from mieli._http_requests import HttpRequests
from mieli.models.task import TaskFilter, TaskListParameters


def get_task(http_requests: HttpRequests, task_id: int) -> Response:
    return http_requests.get(f"tasks/{task_id}")


def get_tasks(http_requests: HttpRequests, parameters: TaskListParameters) -> Response:
    """List the tasks of the queue, most recent first.

    Only the parameters that were provided are sent.
    """
    return http_requests.get("tasks", params=parameters.to_params())


def cancel_tasks(http_requests: HttpRequests, task_filter: TaskFilter) -> Response:
    """Cancel enqueued or processing tasks matching `task_filter`.

    Cancelation is atomic on the server side, either every matching task is canceled or none is.
    """
    return http_requests.post("tasks/cancel", params=task_filter.to_params())


def delete_tasks(http_requests: HttpRequests, task_filter: TaskFilter) -> Response:
    return http_requests.delete("tasks", params=task_filter.to_params())
