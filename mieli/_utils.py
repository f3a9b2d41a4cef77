from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from mieli.errors import MissingInputError
from mieli.json_handler import JsonHandler

CONTENT_TYPES = {
    ".csv": "text/csv",
    ".jsonl": "application/x-ndjson",
    ".ndjson": "application/x-ndjson",
    ".jsonlines": "application/x-ndjson",
}


def stdin_is_piped() -> bool:
    return not sys.stdin.isatty()


def read_stdin() -> bytes | None:
    """Read everything piped in the command, None if nothing was piped."""
    if not stdin_is_piped():
        return None

    raw = sys.stdin.buffer.read()
    return raw if raw.strip() else None


def infer_content_type(file_path: Path | None, content_type: str | None = None) -> str:
    """An explicit content type wins, otherwise it is guessed from the file extension."""
    if content_type:
        return content_type

    if file_path is None:
        return "application/json"

    return CONTENT_TYPES.get(file_path.suffix.lower(), "application/json")


def read_payload(file_path: Path | None) -> bytes:
    if file_path is not None:
        return file_path.read_bytes()

    raw = read_stdin()
    if raw is None:
        raise MissingInputError("Did you forget to pipe something in the command?")

    return raw


def read_stdin_json(json_handler: JsonHandler, error_message: str, *, required: bool = True) -> Any:
    raw = read_stdin()
    if raw is None:
        if required:
            raise MissingInputError(error_message)
        return None

    try:
        return json_handler.loads(raw)
    except ValueError as err:
        raise MissingInputError(f"Could not deserialize stdin as json: {err}") from err
