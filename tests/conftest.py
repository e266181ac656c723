"""Pytest configuration and shared fixtures for sforce-client tests."""

import pytest

from sforce_client import Credentials, RestClient, Session
from sforce_client.testing import FakeServer, login_handler

API_VERSION = "mock"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear SFORCE_* and TEST_* environment variables before each test."""
    import os

    test_prefixes = ("SFORCE_", "TEST_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def credentials():
    return Credentials(client_id="cid", client_secret="csecret", username="user", password="pass")


@pytest.fixture
def server():
    return FakeServer(login_handler())


@pytest.fixture
def session(server, credentials):
    """A session that has not logged in yet."""
    with Session(server.url, API_VERSION, credentials, http_client=server.client()) as session:
        yield session


@pytest.fixture
def client(server, session):
    """A client whose session is already logged in, with the request counter reset."""
    session.login()
    assert server.request_count == 1
    server.reset()
    return RestClient(session)
