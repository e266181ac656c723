"""sforce-client - a small client for the sobjects REST API.

The library provides:
- A Session that logs in, caches the bearer token and instance URL, and
  logs in again once when a request is rejected as unauthorized
- A RestClient with create, get, upsert and delete operations addressed by
  record id or by external id
- A uniform exception hierarchy for validation, transport and API errors
- Testing utilities built on httpx.MockTransport

Example:
    ```python
    from sforce_client import Credentials, RestClient, Session

    credentials = Credentials(client_id="cid", client_secret="csecret", username="user", password="pass")
    session = Session("https://login.salesforce.com", "v60.0", credentials)

    with RestClient(session) as client:
        result = client.create_sobject("Account", {"Name": "Acme"})
        account = client.get_sobject("Account", result.id)
    ```
"""

from sforce_client.auth import CredentialResolver, Credentials
from sforce_client.client import RestClient
from sforce_client.errors import (
    APIError,
    APIErrorDetail,
    AuthorizationError,
    SforceError,
    SObject,
    TransportError,
    UpsertResult,
    ValidationError,
)
from sforce_client.session import AccessToken, Session

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "APIErrorDetail",
    "AccessToken",
    "AuthorizationError",
    "CredentialResolver",
    "Credentials",
    "RestClient",
    "SObject",
    "Session",
    "SforceError",
    "TransportError",
    "UpsertResult",
    "ValidationError",
    "__version__",
]
