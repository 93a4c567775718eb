import json

import pytest

from kiwicommon.lambda_handler import Response, error_handler, send, send_error


class _RecordingLog:
    def __init__(self):
        self.errors = []

    def error(self, message):
        self.errors.append(message)


def test_send_error_body_and_headers():
    response = send_error(404, ValueError("not found"))
    assert response["statusCode"] == 404
    assert response["headers"] == {"Content-Type": "application/json"}
    assert response["body"] == '{"status":404,"message":"not found"}'


@pytest.mark.parametrize("status", [0, 99, 600, 1000, -5])
def test_send_error_out_of_range_status_becomes_500(status):
    response = send_error(status, RuntimeError("boom"))
    assert response["statusCode"] == 500
    assert json.loads(response["body"]) == {"status": 500, "message": "boom"}


@pytest.mark.parametrize("status", [100, 201, 599])
def test_send_error_keeps_valid_status(status):
    response = send_error(status, RuntimeError("boom"))
    assert response["statusCode"] == status
    assert json.loads(response["body"])["status"] == status


def test_response_omits_empty_message():
    assert Response(400).to_dict() == {"status": 400}
    assert Response(400, "bad").to_dict() == {"status": 400, "message": "bad"}


def test_send_round_trips_data_and_echoes_origin():
    request = {"headers": {"origin": "http://localhost:3000"}}
    data = {"b": [1, 2], "a": "x"}
    response = send(request, 201, data)
    assert response["statusCode"] == 201
    assert json.loads(response["body"]) == data
    assert response["headers"]["Access-Control-Allow-Origin"] == "http://localhost:3000"
    assert response["headers"]["Access-Control-Allow-Credentials"] == "true"
    assert response["headers"]["Content-Type"] == "application/json"


def test_send_sorts_keys_and_escapes_html():
    response = send({"headers": {}}, 200, {"z": "<a&b>", "a": 1})
    body = response["body"]
    assert "<" not in body and ">" not in body and "&" not in body
    assert body.index('"a"') < body.index('"z"')
    assert json.loads(body) == {"z": "<a&b>", "a": 1}


def test_send_without_origin_header():
    response = send({}, 200, [1])
    assert response["headers"]["Access-Control-Allow-Origin"] == ""


def test_send_unmarshalable_data_gives_500():
    response = send({"headers": {}}, 200, {"value": object()})
    assert response["statusCode"] == 500
    body = json.loads(response["body"])
    assert body["status"] == 500
    assert body["message"].startswith("failed to marshal response body")


def test_send_nan_gives_500():
    response = send({"headers": {}}, 200, float("nan"))
    assert response["statusCode"] == 500


def test_error_handler_logs_once_and_returns_500():
    log = _RecordingLog()
    handle = error_handler(log, RuntimeError("database down"))
    assert log.errors == ["database down"]
    response = handle({"headers": {}}, None)
    assert response["statusCode"] == 500
    assert json.loads(response["body"]) == {"status": 500, "message": "database down"}
    assert log.errors == ["database down"]