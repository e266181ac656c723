"""Credentials and configuration resolution.

Example:
    ```python
    from sforce_client.auth import Credentials, CredentialResolver

    credentials = Credentials(client_id="cid", client_secret="csecret", username="user", password="pass")

    # or from SFORCE_* environment variables / .env
    credentials = CredentialResolver().resolve_credentials()
    ```
"""

from sforce_client.auth.credentials import CredentialResolver, Credentials
from sforce_client.auth.exceptions import (
    CredentialError,
    CredentialNotFoundError,
    InvalidCredentialsError,
)

__all__ = [
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
    "InvalidCredentialsError",
]
