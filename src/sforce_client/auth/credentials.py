"""Credentials and multi-source configuration resolution.

``Credentials`` is the immutable value handed to a ``Session``.
``CredentialResolver`` builds it (and the other session settings) from
several sources with priority ordering.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv)
4. Default value

Example:
    ```python
    from sforce_client.auth import CredentialResolver

    resolver = CredentialResolver()
    credentials = resolver.resolve_credentials()
    api_version = resolver.resolve(env_var_name="SFORCE_API_VERSION", default="v60.0")
    ```

Security Considerations:
    - Credentials are never logged in full (masked with ***)
    - Only source information is logged (env var name, etc.)
    - Thread-safe dotenv loading with lock
"""

import logging
import os
from dataclasses import dataclass, field, fields
from threading import Lock

from dotenv import load_dotenv

from sforce_client.auth.exceptions import CredentialNotFoundError, InvalidCredentialsError

logger = logging.getLogger(__name__)

ENV_CLIENT_ID = "SFORCE_CLIENT_ID"
ENV_CLIENT_SECRET = "SFORCE_CLIENT_SECRET"
ENV_USERNAME = "SFORCE_USERNAME"
ENV_PASSWORD = "SFORCE_PASSWORD"


@dataclass(frozen=True)
class Credentials:
    """OAuth client and resource-owner credentials.

    All four fields are required. Secrets are kept out of ``repr()``.
    """

    client_id: str
    client_secret: str = field(repr=False)
    username: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        for f in fields(self):
            if not getattr(self, f.name):
                raise InvalidCredentialsError(f"{f.name.replace('_', ' ')} is required", field_name=f.name)

    def as_form(self) -> dict[str, str]:
        """Form fields for the OAuth password grant."""
        return {
            "grant_type": "password",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "username": self.username,
            "password": self.password,
        }


class CredentialResolver:
    """Resolve settings from multiple sources with priority ordering.

    Explicitly provided values take precedence over environment variables,
    which take precedence over .env file values, which finally take
    precedence over defaults. Values from the .env file are loaded into the
    environment once, on construction.

    Example:
        ```python
        resolver = CredentialResolver(load_dotenv=False)
        login_url = resolver.resolve(env_var_name="SFORCE_LOGIN_URL", default="https://login.salesforce.com")
        ```
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            load_dotenv(dotenv_path=self._dotenv_path)
            self._dotenv_loaded = True
            logger.debug("Loaded .env file for credential resolution")

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single setting.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check.
            default: Default value if not found elsewhere.
            required: Raise CredentialNotFoundError when nothing resolves.
            mask_in_logs: Mask the resolved value in debug logs.

        Returns:
            Resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required=True and nothing resolves.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and os.environ.get(env_var_name):
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved setting from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_credentials(
        self,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> Credentials:
        """Build Credentials, filling any missing field from the environment.

        Raises:
            CredentialNotFoundError: If a field resolves from no source.
        """
        return Credentials(
            client_id=self.resolve(value=client_id, env_var_name=ENV_CLIENT_ID, required=True, mask_in_logs=False),
            client_secret=self.resolve(value=client_secret, env_var_name=ENV_CLIENT_SECRET, required=True),
            username=self.resolve(value=username, env_var_name=ENV_USERNAME, required=True, mask_in_logs=False),
            password=self.resolve(value=password, env_var_name=ENV_PASSWORD, required=True),
        )
