"""Exceptions for credential construction and resolution.

Example:
    ```python
    from sforce_client.auth.exceptions import CredentialNotFoundError

    if not client_id:
        raise CredentialNotFoundError("client id not found", env_var_name="SFORCE_CLIENT_ID")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required setting cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class InvalidCredentialsError(CredentialError):
    """Raised when a Credentials value is built with an empty field.

    Attributes:
        field_name: Name of the offending field.
    """

    def __init__(self, message: str, field_name: str):
        super().__init__(message)
        self.field_name = field_name
