"""Testing utilities for code built on sforce-client.

Example:
    ```python
    from sforce_client.testing import FakeServer, login_handler, static_json_handler

    server = FakeServer(login_handler())
    session = Session(server.url, "v60.0", credentials, http_client=server.client())
    client = RestClient(session)

    server.handler = static_json_handler({"Id": "001", "Name": "Acme"})
    ```
"""

from sforce_client.testing.factories import (
    MOCK_ACCESS_TOKEN,
    api_error_handler,
    json_response,
    login_handler,
    sequence_handler,
    static_json_handler,
    unauthorized_handler,
)
from sforce_client.testing.server import FAKE_INSTANCE_URL, FakeServer, Handler

__all__ = [
    "FAKE_INSTANCE_URL",
    "FakeServer",
    "Handler",
    "MOCK_ACCESS_TOKEN",
    "api_error_handler",
    "json_response",
    "login_handler",
    "sequence_handler",
    "static_json_handler",
    "unauthorized_handler",
]
