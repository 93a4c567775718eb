"""JSON HTTP responses, including mapping of errors onto status codes."""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

_log = logging.getLogger(__name__)

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_GENERIC_MESSAGE = "Something went wrong"


@dataclass
class HTTPResponse:
    """A status, headers and body ready to send."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


class StatusCodeError(Exception):
    """An error that carries the HTTP status to answer with."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class ValidationErrors(Exception):
    """Validation failures keyed by field name."""

    def __init__(self, errors: dict[str, BaseException]) -> None:
        super().__init__(errors)
        self.errors = dict(errors)

    def __str__(self) -> str:
        if not self.errors:
            return ""
        parts = []
        for key in sorted(self.errors):
            err = self.errors[key]
            if isinstance(err, ValidationErrors):
                parts.append(f"{key}: ({err})")
            else:
                parts.append(f"{key}: {err}")
        return "; ".join(parts) + "."


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"json: unsupported type: {type(value).__name__}")


def _root_cause(err: BaseException) -> BaseException:
    while err.__cause__ is not None:
        err = err.__cause__
    return err


def encode_response(status: int, payload: Any) -> HTTPResponse:
    """A JSON response with the given status; encoding failures are logged."""
    headers = {"Content-Type": "application/json"}
    try:
        text = json.dumps(
            payload,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            sort_keys=True,
            default=_default,
        )
    except (TypeError, ValueError) as err:
        _log.error("%s", err)
        return HTTPResponse(status, headers, b"")
    return HTTPResponse(status, headers, (text.translate(_JSON_ESCAPES) + "\n").encode("utf-8"))


def encode_ok_response(payload: Any) -> HTTPResponse:
    """A 200 JSON response."""
    return encode_response(HTTPStatus.OK, payload)


def encode_error_response(err: BaseException) -> HTTPResponse | None:
    """An `{"error": ...}` response for the error, or None for 204.

    Malformed JSON and validation errors give 400, errors with a
    `status_code` give that status, and anything else is logged and
    answered with 500 and a generic message.
    """
    cause = _root_cause(err)
    status_code = getattr(cause, "status_code", None)
    if isinstance(cause, (json.JSONDecodeError, ValidationErrors)):
        code = int(HTTPStatus.BAD_REQUEST)
        message = str(cause)
    elif isinstance(status_code, int) and not isinstance(status_code, bool):
        code = status_code
        message = str(cause)
    else:
        _log.error("%s", err, exc_info=err)
        code = int(HTTPStatus.INTERNAL_SERVER_ERROR)
        message = _GENERIC_MESSAGE
    if code == HTTPStatus.NO_CONTENT:
        return None
    return encode_response(code, {"error": message})