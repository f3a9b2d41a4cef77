import pytest
from httpx import Request, Response

from mieli.errors import InvalidResponseBodyError
from tests.conftest import RecordingRenderer

URL = "http://127.0.0.1:7700/indexes/movies"


def make_response(status_code=200, **kwargs):
    return Response(status_code, request=Request("GET", URL), **kwargs)


def test_render_response_compact_json_when_piped():
    renderer = RecordingRenderer()

    body = renderer.render_response(make_response(json={"uid": "movies", "primaryKey": "id"}))

    assert body == {"uid": "movies", "primaryKey": "id"}
    assert renderer.stdout_text == '{"uid":"movies","primaryKey":"id"}\n'
    assert renderer.stderr_text == ""


def test_render_response_keeps_unicode():
    renderer = RecordingRenderer()

    renderer.render_response(make_response(json={"title": "Amélie"}))

    assert renderer.stdout_text == '{"title":"Amélie"}\n'


@pytest.mark.parametrize("response", [make_response(204), make_response(200, content=b"")])
def test_render_response_without_body(response):
    renderer = RecordingRenderer()

    assert renderer.render_response(response) is None
    assert renderer.rendered == []
    assert renderer.stdout_text == ""


def test_render_response_invalid_json():
    renderer = RecordingRenderer()

    with pytest.raises(InvalidResponseBodyError) as err:
        renderer.render_response(make_response(content=b"<html>oops</html>"))

    assert err.value.body == b"<html>oops</html>"
    assert "<html>oops</html>" in str(err.value)
    assert renderer.stdout_text == ""


def test_headers_hidden_on_success():
    renderer = RecordingRenderer()

    renderer.render_response(make_response(json={}, headers={"x-meili": "1"}))

    assert renderer.stderr_text == ""


def test_headers_shown_on_error():
    renderer = RecordingRenderer()

    renderer.render_response(make_response(404, json={"code": "index_not_found"}))

    lines = renderer.stderr_text.splitlines()
    assert lines[0] == "HTTP/1.1 404 Not Found"
    assert "content-type: application/json" in lines
    assert renderer.stdout_text == '{"code":"index_not_found"}\n'


def test_headers_shown_when_verbose_and_sorted():
    renderer = RecordingRenderer(verbose=1)

    renderer.render_response(
        make_response(json={}, headers={"x-zebra": "z", "date": "today", "x-alpha": "a"})
    )

    lines = renderer.stderr_text.splitlines()
    assert lines[0] == "HTTP/1.1 200 OK"
    headers = lines[1:]
    assert headers == sorted(headers)
    assert "x-alpha: a" in headers
    assert "x-zebra: z" in headers


def test_redraw_appends_when_piped():
    renderer = RecordingRenderer()

    renderer.render_response(make_response(json={"taskUid": 1, "status": "enqueued"}))
    renderer.redraw({"uid": 1, "status": "processing"}, {"percentage": 50.0})
    renderer.redraw({"uid": 1, "status": "succeeded"}, None)

    assert renderer.stdout_text.splitlines() == [
        '{"taskUid":1,"status":"enqueued"}',
        '{"uid":1,"status":"processing"}',
        '{"percentage":50.0}',
        '{"uid":1,"status":"succeeded"}',
    ]
    assert "\x1b[" not in renderer.stdout_text


def test_redraw_clears_previous_lines_on_terminal(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    renderer = RecordingRenderer(terminal=True)

    renderer.render_response(make_response(json={"taskUid": 1, "status": "enqueued"}))
    assert renderer.stdout_text.count("\x1b[1A") == 0

    renderer.redraw({"uid": 1, "status": "succeeded"})

    # The pretty printed document used four lines: the braces and two fields.
    assert renderer.stdout_text.count("\x1b[1A") == 4
    assert renderer.stdout_text.count("\x1b[2K") == 4


def test_write_text_is_not_altered():
    renderer = RecordingRenderer()

    renderer.write_text("2024-01-01T00:00:00Z INFO [actix] started\n")

    assert renderer.stdout_text == "2024-01-01T00:00:00Z INFO [actix] started\n"


def test_redraw_appends_when_debug_logs_are_shown(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    renderer = RecordingRenderer(verbose=2, terminal=True)

    renderer.render_response(make_response(json={"taskUid": 1, "status": "enqueued"}))
    renderer.redraw({"uid": 1, "status": "succeeded"})

    assert "\x1b[1A" not in renderer.stdout_text
    assert '"succeeded"' in renderer.stdout_text
