import io
from pathlib import Path

import pytest

from mieli import _utils
from mieli.errors import MissingInputError
from mieli.json_handler import BuiltinHandler


class FakeStdin(io.TextIOWrapper):
    def __init__(self, raw: bytes, tty: bool = False) -> None:
        super().__init__(io.BytesIO(raw), encoding="utf-8")
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


@pytest.mark.parametrize(
    "path, content_type, expected",
    [
        (None, None, "application/json"),
        (Path("movies.json"), None, "application/json"),
        (Path("movies.csv"), None, "text/csv"),
        (Path("MOVIES.CSV"), None, "text/csv"),
        (Path("movies.jsonl"), None, "application/x-ndjson"),
        (Path("movies.ndjson"), None, "application/x-ndjson"),
        (Path("movies.jsonlines"), None, "application/x-ndjson"),
        (Path("movies.txt"), None, "application/json"),
        (Path("movies.csv"), "application/json", "application/json"),
        (None, "text/csv", "text/csv"),
    ],
)
def test_infer_content_type(path, content_type, expected):
    assert _utils.infer_content_type(path, content_type) == expected


def test_read_payload_from_file(tmp_path):
    file_path = tmp_path / "movies.json"
    file_path.write_bytes(b'[{"id": 1}]')

    assert _utils.read_payload(file_path) == b'[{"id": 1}]'


def test_read_payload_from_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", FakeStdin(b'[{"id": 1}]'))

    assert _utils.read_payload(None) == b'[{"id": 1}]'


@pytest.mark.parametrize("stdin", [FakeStdin(b"", tty=False), FakeStdin(b"  \n"), FakeStdin(b"[]", tty=True)])
def test_read_payload_nothing_piped(monkeypatch, stdin):
    monkeypatch.setattr("sys.stdin", stdin)

    with pytest.raises(MissingInputError) as err:
        _utils.read_payload(None)

    assert "pipe" in str(err.value)


def test_read_stdin_json(monkeypatch):
    monkeypatch.setattr("sys.stdin", FakeStdin(b'{"q": "carol"}'))

    assert _utils.read_stdin_json(BuiltinHandler(), "missing") == {"q": "carol"}


def test_read_stdin_json_optional(monkeypatch):
    monkeypatch.setattr("sys.stdin", FakeStdin(b"", tty=True))

    assert _utils.read_stdin_json(BuiltinHandler(), "missing", required=False) is None


def test_read_stdin_json_required(monkeypatch):
    monkeypatch.setattr("sys.stdin", FakeStdin(b"", tty=True))

    with pytest.raises(MissingInputError, match="missing"):
        _utils.read_stdin_json(BuiltinHandler(), "missing")


def test_read_stdin_json_invalid(monkeypatch):
    monkeypatch.setattr("sys.stdin", FakeStdin(b"{nope"))

    with pytest.raises(MissingInputError, match="Could not deserialize"):
        _utils.read_stdin_json(BuiltinHandler(), "missing")
