"""Tests for the FakeServer test double and its handler factories."""

import httpx
import pytest

from sforce_client.testing import (
    FAKE_INSTANCE_URL,
    MOCK_ACCESS_TOKEN,
    FakeServer,
    api_error_handler,
    json_response,
    login_handler,
    sequence_handler,
    static_json_handler,
    unauthorized_handler,
)


@pytest.mark.unit
def test_default_handler_says_hello():
    server = FakeServer()

    with server.client() as client:
        response = client.get(server.url)

    assert response.json() == {"message": "hello world"}


@pytest.mark.unit
def test_counts_and_records_requests():
    server = FakeServer(static_json_handler({"field1": "one", "field2": 2.0}, 201))

    with server.client() as client:
        response = client.post(f"{server.url}/things", json={"a": 1})
        client.get(f"{server.url}/things")

    assert response.status_code == 201
    assert response.json() == {"field1": "one", "field2": 2.0}
    assert server.request_count == 2
    assert server.requests[0].method == "POST"
    assert server.last_request.method == "GET"

    server.reset()

    assert server.request_count == 0
    assert server.last_request is None


@pytest.mark.unit
def test_handler_can_be_swapped():
    server = FakeServer()
    server.handler = static_json_handler(None, 204)

    with server.client() as client:
        response = client.delete(server.url)

    assert response.status_code == 204
    assert response.content == b""


@pytest.mark.unit
def test_login_handler():
    response = login_handler()(httpx.Request("POST", FAKE_INSTANCE_URL))

    assert response.json()["access_token"] == MOCK_ACCESS_TOKEN
    assert response.json()["instance_url"] == FAKE_INSTANCE_URL


@pytest.mark.unit
def test_error_handlers():
    request = httpx.Request("GET", FAKE_INSTANCE_URL)

    assert api_error_handler("GENERIC_ERROR", "Generic API error")(request).json() == [
        {"message": "Generic API error", "errorCode": "GENERIC_ERROR"}
    ]
    response = unauthorized_handler()(request)
    assert response.status_code == 401
    assert response.json()["errorCode"] == "INVALID_SESSION_ID"


@pytest.mark.unit
def test_sequence_handler_repeats_last():
    handler = sequence_handler(static_json_handler({"n": 1}), static_json_handler({"n": 2}))
    request = httpx.Request("GET", FAKE_INSTANCE_URL)

    assert [handler(request).json()["n"] for _ in range(4)] == [1, 2, 2, 2]


@pytest.mark.unit
def test_sequence_handler_needs_a_handler():
    with pytest.raises(ValueError):
        sequence_handler()


@pytest.mark.unit
def test_json_response_without_body():
    assert json_response(None, 204).content == b""
