import json

import pytest

from kiwicommon.httpencode import (
    HTTPResponse,
    StatusCodeError,
    ValidationErrors,
    encode_error_response,
    encode_ok_response,
    encode_response,
)


def test_encode_ok_response():
    resp = encode_ok_response("test")
    assert resp.status == 200
    assert resp.headers["Content-Type"] == "application/json"
    assert resp.body == b'"test"\n'


def test_encode_response():
    resp = encode_response(300, "test")
    assert resp.status == 300
    assert resp.headers["Content-Type"] == "application/json"


def test_encode_error_response_default():
    resp = encode_error_response(Exception("Error !!!"))
    assert resp.status == 500
    assert resp.body == b'{"error":"Something went wrong"}\n'
    assert resp.headers["Content-Type"] == "application/json"


def test_encode_error_response_syntax_error():
    with pytest.raises(json.JSONDecodeError) as info:
        json.loads('{Username": "test"}')
    resp = encode_error_response(info.value)
    assert resp.status == 400
    assert json.loads(resp.body) == {"error": str(info.value)}
    assert resp.headers["Content-Type"] == "application/json"


def test_wrapped_syntax_error_uses_root_cause():
    with pytest.raises(json.JSONDecodeError) as info:
        json.loads("{")
    wrapped = RuntimeError("decoding request")
    wrapped.__cause__ = info.value
    resp = encode_error_response(wrapped)
    assert resp.status == 400
    assert json.loads(resp.body) == {"error": str(info.value)}


def test_status_code_error():
    resp = encode_error_response(StatusCodeError(404, "not found"))
    assert resp.status == 404
    assert json.loads(resp.body) == {"error": "not found"}


def test_no_content_gives_no_response():
    assert encode_error_response(StatusCodeError(204, "nothing")) is None


def test_validation_errors():
    err = ValidationErrors({"name": ValueError("cannot be blank"), "age": ValueError("too low")})
    assert str(err) == "age: too low; name: cannot be blank."
    resp = encode_error_response(err)
    assert resp.status == 400
    assert json.loads(resp.body) == {"error": "age: too low; name: cannot be blank."}


def test_nested_validation_errors():
    inner = ValidationErrors({"city": ValueError("cannot be blank")})
    outer = ValidationErrors({"address": inner})
    assert str(outer) == "address: (city: cannot be blank.)."


def test_html_characters_are_escaped():
    resp = encode_ok_response({"a": "<b>&"})
    assert resp.body == b'{"a":"\\u003cb\\u003e\\u0026"}\n'


def test_unencodable_payload_gives_empty_body():
    resp = encode_response(200, object())
    assert resp == HTTPResponse(200, {"Content-Type": "application/json"}, b"")