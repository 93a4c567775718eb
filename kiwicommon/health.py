"""A WSGI health-check endpoint."""

from __future__ import annotations

from typing import Any, Callable, Iterable

_OK_MESSAGE = b"ok\n"


def handler(checks: Callable[[], None]) -> Callable[[dict, Callable], Iterable[bytes]]:
    """A WSGI app that runs `checks` on each request.

    Answers 200 `ok` when `checks` returns, or 500 with the error's message
    when it raises.
    """

    def app(environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
        try:
            checks()
        except Exception as err:  # any failure means unhealthy
            body = f"500 internal server error: service not healthy: {err}\n".encode()
            start_response(
                "500 Internal Server Error",
                [
                    ("Content-Type", "text/plain; charset=utf-8"),
                    ("X-Content-Type-Options", "nosniff"),
                ],
            )
            return [body]

        start_response(
            "200 OK",
            [
                ("Content-Type", "text/plain; charset=utf-8"),
                ("Content-Length", str(len(_OK_MESSAGE))),
            ],
        )
        return [_OK_MESSAGE]

    return app