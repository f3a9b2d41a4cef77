from __future__ import annotations

from typing import Any

from camel_converter.pydantic_base import CamelBase
from pydantic import ValidationError, ValidatorFunctionWrapHandler, field_validator

from mieli.types import JsonDict


class BatchView(CamelBase):
    progress: JsonDict | None = None

    @field_validator("progress", mode="wrap")
    @classmethod
    def drop_invalid(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(v)
        except ValidationError:
            return None

    @classmethod
    def from_body(cls, body: Any) -> BatchView:
        try:
            return cls.model_validate(body)
        except ValidationError:
            return cls()
