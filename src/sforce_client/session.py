"""Authenticated session for the sobjects REST API.

A ``Session`` logs in with the OAuth password grant, caches the issued
bearer token together with the instance URL, and sends authenticated
requests. When the service rejects a request as unauthorized the session
logs in again once and retries the request once.

Example:
    ```python
    from sforce_client import Credentials, Session

    credentials = Credentials(client_id="cid", client_secret="csecret", username="user", password="pass")
    with Session("https://login.salesforce.com", "v60.0", credentials) as session:
        response = session.send("GET", "/sobjects/Account/001000000000001")
    ```

A session may be shared between threads. Logins are serialized by a lock
and coalesced: a caller whose token was rejected only logs in again if no
other caller has already replaced that token.
"""

import enum
import logging
from threading import Lock
from typing import Any, NamedTuple

import httpx

from sforce_client.auth.credentials import Credentials, CredentialResolver
from sforce_client.errors.exceptions import TransportError
from sforce_client.errors.handler import is_auth_failure, raise_for_status

logger = logging.getLogger(__name__)

DEFAULT_LOGIN_URL = "https://login.salesforce.com"
DEFAULT_API_VERSION = "v60.0"
TOKEN_PATH = "/services/oauth2/token"

ENV_LOGIN_URL = "SFORCE_LOGIN_URL"
ENV_API_VERSION = "SFORCE_API_VERSION"


class AccessToken(NamedTuple):
    """Bearer token and the instance URL it was issued for.

    Always replaced as a whole, never field by field. Each login stores a new
    instance, so identity tells whether a refresh happened even when the
    server reissues the same token.
    """

    access_token: str
    instance_url: str

    def __repr__(self) -> str:
        return f"AccessToken(access_token='***', instance_url={self.instance_url!r})"


class _SendState(enum.Enum):
    NEED_LOGIN = "need_login"
    HAVE_TOKEN = "have_token"
    RETRYING_AFTER_AUTH_FAILURE = "retrying_after_auth_failure"


class Session:
    """Owns the login state and sends authenticated requests.

    Args:
        login_url: Base URL of the login server, e.g. ``https://login.salesforce.com``.
        api_version: REST API version segment, e.g. ``v60.0``.
        credentials: Credentials used for every login.
        http_client: HTTP client to send requests with. When omitted the
            session creates one and closes it in ``close()``.
    """

    def __init__(
        self,
        login_url: str,
        api_version: str,
        credentials: Credentials,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        if not login_url:
            raise ValueError("login_url must be provided")
        if not api_version:
            raise ValueError("api_version must be provided")

        self.login_url = login_url.rstrip("/")
        self.api_version = api_version
        self.credentials = credentials
        self._owns_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client()
        self._token: AccessToken | None = None
        self._login_lock = Lock()

    @classmethod
    def from_env(
        cls,
        resolver: CredentialResolver | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> "Session":
        """Build a session from ``SFORCE_*`` environment variables or a .env file."""
        resolver = resolver if resolver is not None else CredentialResolver()
        return cls(
            resolver.resolve(env_var_name=ENV_LOGIN_URL, default=DEFAULT_LOGIN_URL, mask_in_logs=False),
            resolver.resolve(env_var_name=ENV_API_VERSION, default=DEFAULT_API_VERSION, mask_in_logs=False),
            resolver.resolve_credentials(),
            http_client=http_client,
        )

    @property
    def token(self) -> AccessToken | None:
        """The cached token, or None before the first successful login."""
        return self._token

    @property
    def http_client(self) -> httpx.Client:
        """The HTTP client requests are sent with."""
        return self._http

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def login(self) -> AccessToken:
        """Log in and replace the cached token.

        Returns:
            The newly issued token.

        Raises:
            TransportError: The request failed or the response was malformed.
            APIError: The login server rejected the credentials. Any previously
                cached token is left in place.
        """
        with self._login_lock:
            return self._login_locked()

    def _login_locked(self) -> AccessToken:
        url = f"{self.login_url}{TOKEN_PATH}"
        logger.debug(f"Logging in to {url} as {self.credentials.username}")

        try:
            response = self._http.post(url, data=self.credentials.as_form(), headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            raise TransportError(f"login request to {url} failed: {e}") from e

        raise_for_status(response)
        token = _parse_token(response)
        self._token = token
        logger.debug(f"Logged in, instance URL is {token.instance_url}")
        return token

    def _acquire_token(self) -> AccessToken:
        token = self._token
        if token is not None:
            return token

        with self._login_lock:
            if self._token is not None:
                return self._token
            return self._login_locked()

    def _refresh(self, stale: AccessToken) -> AccessToken:
        with self._login_lock:
            current = self._token
            if current is not None and current is not stale:
                logger.debug("Token was already refreshed by another caller")
                return current
            return self._login_locked()

    def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> httpx.Response:
        """Send an authenticated request.

        Logs in first if the session has no token. If the request is rejected
        as unauthorized, logs in again and retries exactly once.

        Args:
            method: HTTP method.
            path: Path below ``/services/data/{api_version}``, starting with ``/``.
            body: JSON-serializable body, or None to send no body.
            timeout: Passed through to the HTTP client.

        Returns:
            The undecoded 2xx response.

        Raises:
            TransportError: Network failure or malformed login response.
            AuthorizationError: The request was still unauthorized after a re-login.
            APIError: Any other non-2xx response.
        """
        token = self._token
        state = _SendState.NEED_LOGIN if token is None else _SendState.HAVE_TOKEN

        while True:
            if state is _SendState.NEED_LOGIN:
                token = self._acquire_token()
                state = _SendState.HAVE_TOKEN

            response = self._execute(token, method, path, body, timeout)
            if not is_auth_failure(response):
                break
            if state is _SendState.RETRYING_AFTER_AUTH_FAILURE:
                logger.debug(f"{method} {path} still unauthorized after logging in again")
                break

            logger.debug(f"{method} {path} unauthorized, logging in again")
            token = self._refresh(token)
            state = _SendState.RETRYING_AFTER_AUTH_FAILURE

        raise_for_status(response)
        return response

    def _execute(self, token: AccessToken, method: str, path: str, body: Any, timeout: Any) -> httpx.Response:
        url = f"{token.instance_url.rstrip('/')}/services/data/{self.api_version}{path}"
        headers = {
            "Authorization": f"Bearer {token.access_token}",
            "Content-Type": "application/json",
        }
        request = self._http.build_request(method, url, headers=headers, json=body, timeout=timeout)
        logger.debug(f"{method} {url}")

        try:
            return self._http.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e


def _parse_token(response: httpx.Response) -> AccessToken:
    try:
        data = response.json()
    except ValueError as e:
        raise TransportError(f"malformed login response body: {e}") from e

    if not isinstance(data, dict) or not data.get("access_token") or not data.get("instance_url"):
        raise TransportError("malformed login response body: access_token and instance_url are required")

    return AccessToken(access_token=str(data["access_token"]), instance_url=str(data["instance_url"]))
