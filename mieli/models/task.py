from __future__ import annotations

from enum import Enum
from typing import Any, Union

from camel_converter.pydantic_base import CamelBase
from pydantic import (
    Field,
    StrictInt,
    StrictStr,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from mieli.types import JsonDict


class TaskState(str, Enum):
    ENQUEUED = "enqueued"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    PROCESSED = "processed"
    FAILED = "failed"
    CANCELED = "canceled"


TERMINAL_STATES = frozenset(
    {TaskState.SUCCEEDED, TaskState.PROCESSED, TaskState.FAILED, TaskState.CANCELED}
)
FAILED_STATES = frozenset({TaskState.FAILED, TaskState.CANCELED})


def is_terminal(status: str | None) -> bool:
    """A missing status is terminal, unknown status strings are not."""
    if status is None:
        return True

    return status in {state.value for state in TERMINAL_STATES}


def is_failure(status: str | None) -> bool:
    return status in {state.value for state in FAILED_STATES}


class TaskRef(CamelBase):
    """Asynchronous task tracked at `/tasks/{uid}`."""

    uid: StrictInt

    @property
    def status_path(self) -> str:
        return f"tasks/{self.uid}"


class LegacyUpdateRef(CamelBase):
    """Per-index update used by servers that predate the task queue."""

    update_id: StrictInt

    def status_path(self, index: str) -> str:
        return f"indexes/{index}/updates/{self.update_id}"


OperationHandle = Union[TaskRef, LegacyUpdateRef]


def _strict_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def extract_operation_handle(body: Any) -> OperationHandle | None:
    """Classify a response body by the asynchronous operation it refers to.

    `uid` is looked up first, then `taskUid`, then `updateId`. Only integer values count, so
    index and key objects whose `uid` is a string are never mistaken for tasks.
    """
    if not isinstance(body, dict):
        return None

    for field in ("uid", "taskUid"):
        if _strict_int(body.get(field)):
            return TaskRef(uid=body[field])

    if _strict_int(body.get("updateId")):
        return LegacyUpdateRef(update_id=body["updateId"])

    return None


class TaskView(CamelBase):
    status: StrictStr | None = None
    batch_uid: StrictInt | None = None

    @field_validator("status", "batch_uid", mode="wrap")
    @classmethod
    def drop_invalid(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(v)
        except ValidationError:
            return None

    @classmethod
    def from_body(cls, body: Any) -> TaskView:
        """Parse a task or update body, fields with an unexpected type are left unset."""
        try:
            return cls.model_validate(body)
        except ValidationError:
            return cls()


class TaskFilter(CamelBase):
    uids: str | None = None
    batch_uids: str | None = None
    statuses: str | None = None
    types: str | None = None
    index_uids: str | None = None
    canceled_by: str | None = None
    before_enqueued_at: str | None = None
    after_enqueued_at: str | None = None
    before_started_at: str | None = None
    after_started_at: str | None = None
    before_finished_at: str | None = None
    after_finished_at: str | None = None

    def to_params(self) -> JsonDict:
        return self.model_dump(by_alias=True, exclude_none=True)


class TaskListParameters(TaskFilter):
    limit: int | None = None
    from_: int | None = Field(None, alias="from")
    reverse: bool | None = None

    def to_params(self) -> JsonDict:
        params = super().to_params()
        if self.reverse is not None:
            params["reverse"] = "true" if self.reverse else "false"

        return params
