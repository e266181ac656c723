"""Response and handler factories for FakeServer."""

from itertools import count
from typing import Any

import httpx

from sforce_client.errors.models import INVALID_SESSION_ID
from sforce_client.testing.server import FAKE_INSTANCE_URL, Handler

MOCK_ACCESS_TOKEN = "MOCK_TOKEN"


def json_response(body: Any, status_code: int = 200) -> httpx.Response:
    """A JSON response, or an empty one when ``body`` is None."""
    if body is None:
        return httpx.Response(status_code)
    return httpx.Response(status_code, json=body)


def static_json_handler(body: Any, status_code: int = 200) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return json_response(body, status_code)

    return handler


def login_handler(access_token: str = MOCK_ACCESS_TOKEN, instance_url: str = FAKE_INSTANCE_URL) -> Handler:
    """Answers like a token endpoint that accepted the credentials."""
    return static_json_handler({"access_token": access_token, "instance_url": instance_url, "token_type": "Bearer"})


def api_error_handler(
    error_code: str,
    message: str,
    status_code: int = 400,
    *,
    as_list: bool = True,
) -> Handler:
    """Answers with an API error body, as a list (the usual shape) or a bare object."""
    error = {"message": message, "errorCode": error_code}
    return static_json_handler([error] if as_list else error, status_code)


def unauthorized_handler(as_list: bool = False) -> Handler:
    return api_error_handler(INVALID_SESSION_ID, "Session expired or invalid", 401, as_list=as_list)


def sequence_handler(*handlers: Handler) -> Handler:
    """Delegates the n-th request to the n-th handler; the last one repeats."""
    if not handlers:
        raise ValueError("at least one handler is required")
    calls = count()

    def handler(request: httpx.Request) -> httpx.Response:
        index = min(next(calls), len(handlers) - 1)
        return handlers[index](request)

    return handler
