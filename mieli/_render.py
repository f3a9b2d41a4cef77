from __future__ import annotations

from typing import Any

from httpx import Response, codes
from rich.console import Console
from rich.control import Control
from rich.json import JSON
from rich.segment import ControlType

from mieli._http_requests import decode_json
from mieli.json_handler import BuiltinHandler, JsonHandler


class Renderer:
    """Writes responses to the terminal.

    Headers go to stderr so they never end up in piped JSON. Bodies go to stdout, pretty-printed
    and highlighted on a terminal, one compact JSON document per line otherwise.
    """

    def __init__(
        self,
        *,
        verbose: int = 0,
        json_handler: JsonHandler | None = None,
        stdout: Console | None = None,
        stderr: Console | None = None,
    ) -> None:
        self.verbose = verbose
        self.json_handler = json_handler if json_handler else BuiltinHandler()
        self.stdout = stdout if stdout else Console()
        self.stderr = stderr if stderr else Console(stderr=True)
        self._last_height = 0

    @property
    def interactive(self) -> bool:
        return self.stdout.is_terminal

    @property
    def redraws(self) -> bool:
        """Whether polls replace the previous render.

        Debug logs are interleaved with the renders from `-vv` on, so the renders are appended.
        """
        return self.interactive and self.verbose < 2

    def write_headers(self, response: Response) -> None:
        if self.verbose == 0 and response.is_success:
            return

        reason = codes.get_reason_phrase(response.status_code) or response.reason_phrase
        self.stderr.print(
            f"{response.http_version} {response.status_code} {reason}",
            style="cyan",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        for name, value in sorted(response.headers.multi_items()):
            self.stderr.print(
                f"{name}: {value}", style="cyan", markup=False, highlight=False, soft_wrap=True
            )

    def write_json(self, value: Any) -> int:
        """Print one JSON document and return the number of terminal lines it used."""
        if not self.interactive:
            self.stdout.out(self.json_handler.dumps(value), highlight=False)
            return 1

        renderable = JSON.from_data(value)
        height = len(self.stdout.render_lines(renderable, pad=False))
        self.stdout.print(renderable)
        return height

    def write_text(self, text: str) -> None:
        self.stdout.file.write(text)
        self.stdout.file.flush()

    def render_response(self, response: Response) -> Any:
        """Render headers and body of `response`, returning the parsed body.

        Returns None without printing a body for `204 No Content` and for empty bodies.
        """
        self.write_headers(response)
        if response.status_code == codes.NO_CONTENT:
            self._last_height = 0
            return None

        value = decode_json(response, self.json_handler)
        if value is None:
            self._last_height = 0
            return None

        self._last_height = self.write_json(value)
        return value

    def redraw(self, *values: Any) -> None:
        """Replace the previously printed documents with `values`.

        None values are skipped. Outside of a terminal, or when debug logs are shown, the documents
        are appended instead.
        """
        if self.redraws and self._last_height:
            self.stdout.control(self._clear_lines(self._last_height))

        self._last_height = sum(self.write_json(value) for value in values if value is not None)

    @staticmethod
    def _clear_lines(count: int) -> Control:
        return Control(
            ControlType.CARRIAGE_RETURN,
            *(((ControlType.CURSOR_UP, 1), (ControlType.ERASE_IN_LINE, 2)) * count),
        )
