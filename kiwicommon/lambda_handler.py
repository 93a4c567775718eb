"""JSON responses for API Gateway proxy Lambda handlers."""

from __future__ import annotations

import json
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Callable

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


@dataclass
class Response:
    """The JSON body of an error response."""

    status: int
    message: str = ""

    def to_dict(self) -> dict:
        """JSON-ready form; `message` is omitted when empty."""
        data: dict = {"status": self.status}
        if self.message:
            data["message"] = self.message
        return data


def _encode(value: Any) -> Any:
    if isinstance(value, Response):
        return value.to_dict()
    raise TypeError(f"json: unsupported type: {type(value).__name__}")


def _marshal(data: Any, sort_keys: bool) -> str:
    text = json.dumps(
        data,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        sort_keys=sort_keys,
        default=_encode,
    )
    return text.translate(_JSON_ESCAPES)


def send_error(status: int, err: BaseException | str) -> dict:
    """An error response; a status outside 100-599 becomes 500."""
    if status == 0 or status >= 600 or status < 100:
        status_code = int(HTTPStatus.INTERNAL_SERVER_ERROR)
    else:
        status_code = int(status)
    body = _marshal(Response(status_code, str(err)).to_dict(), sort_keys=False)
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": body,
    }


def send(request: dict, status_code: int, data: Any) -> dict:
    """A JSON response that allows credentials from the request's origin."""
    try:
        body = _marshal(data, sort_keys=True)
    except (TypeError, ValueError) as err:
        return send_error(
            HTTPStatus.INTERNAL_SERVER_ERROR, f"failed to marshal response body: {err}"
        )
    origin = (request.get("headers") or {}).get("origin", "")
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
        },
        "body": body,
    }


def error_handler(log: Any, internal_error: BaseException) -> Callable[..., dict]:
    """Log the error now and return a handler that always answers 500 with it."""
    log.error(str(internal_error))

    def handle(event: dict, context: Any = None) -> dict:
        return send_error(HTTPStatus.INTERNAL_SERVER_ERROR, internal_error)

    return handle