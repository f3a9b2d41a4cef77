from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mieli._version import VERSION
from mieli.json_handler import JsonHandlerName

logger = logging.getLogger(__name__)

DEFAULT_ADDR = "http://localhost:7700"
DEFAULT_INDEX = "mieli"
DEFAULT_INTERVAL_MS = 200


class ClientConfig(BaseModel):
    """Settings shared by every request of a single mieli invocation.

    Built once at start-up and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    addr: str = DEFAULT_ADDR
    index: str = DEFAULT_INDEX
    key: str | None = None
    verbose: int = Field(0, ge=0)
    fire_and_forget: bool = False
    interval_ms: int = Field(DEFAULT_INTERVAL_MS, ge=0)
    user_agent: str = f"mieli/{VERSION}"
    custom_header: tuple[str, str] | None = None
    timeout: float | None = None
    json_handler: JsonHandlerName = "builtin"
    fail_on_task_error: bool = False

    @field_validator("addr")
    @classmethod
    def validate_addr(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("custom_header", mode="before")
    @classmethod
    def validate_custom_header(cls, v: str | tuple[str, str] | None) -> tuple[str, str] | None:
        if v is None or isinstance(v, tuple):
            return v

        name, sep, value = v.partition(":")
        if not sep:
            logger.warning("Ignoring custom header %r, expected the `name: value` format", v)
            return None

        return name.strip(), value.strip()

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000
