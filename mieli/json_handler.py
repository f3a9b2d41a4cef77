from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Literal

try:
    import orjson
except ImportError:  # pragma: nocover
    orjson = None  # type: ignore

try:
    import ujson
except ImportError:  # pragma: nocover
    ujson = None  # type: ignore

JsonHandlerName = Literal["builtin", "orjson", "ujson"]


class _JsonHandler(ABC):
    name: JsonHandlerName

    @staticmethod
    @abstractmethod
    def dumps(obj: Any) -> str: ...

    @staticmethod
    @abstractmethod
    def loads(json_string: str | bytes | bytearray) -> Any: ...


class BuiltinHandler(_JsonHandler):
    """Uses the json module from the Python standard library."""

    name: JsonHandlerName = "builtin"

    @staticmethod
    def dumps(obj: Any) -> str:
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)

    @staticmethod
    def loads(json_string: str | bytes | bytearray) -> Any:
        return json.loads(json_string)


class OrjsonHandler(_JsonHandler):
    name: JsonHandlerName = "orjson"

    def __init__(self) -> None:
        if orjson is None:  # pragma: no cover
            raise ValueError("orjson must be installed to use the OrjsonHandler")

    @staticmethod
    def dumps(obj: Any) -> str:
        return orjson.dumps(obj).decode("utf-8")

    @staticmethod
    def loads(json_string: str | bytes | bytearray) -> Any:
        return orjson.loads(json_string)


class UjsonHandler(_JsonHandler):
    name: JsonHandlerName = "ujson"

    def __init__(self) -> None:
        if ujson is None:  # pragma: no cover
            raise ValueError("ujson must be installed to use the UjsonHandler")

    @staticmethod
    def dumps(obj: Any) -> str:
        return ujson.dumps(obj, ensure_ascii=False)

    @staticmethod
    def loads(json_string: str | bytes | bytearray) -> Any:
        return ujson.loads(json_string)


JsonHandler = BuiltinHandler | OrjsonHandler | UjsonHandler


def build_json_handler(name: JsonHandlerName) -> JsonHandler:
    """Instantiate the JSON handler registered under `name`.

    Raises:
        ValueError: If the name is unknown or the matching library is not installed.
    """
    if name == "builtin":
        return BuiltinHandler()
    if name == "orjson":
        return OrjsonHandler()
    if name == "ujson":
        return UjsonHandler()

    raise ValueError(f"Unknown json handler: {name}")
