"""Structured exceptions for sforce-client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from sforce_client.errors.models import APIErrorDetail


class SforceError(Exception):
    """Base exception for every error raised by this package."""

    pass


class ValidationError(SforceError):
    """Caller input failed a precondition; nothing was sent over the network."""

    pass


class TransportError(SforceError):
    """Network failure or a response body that could not be decoded."""

    pass


class APIError(SforceError):
    """Non-2xx response reported by the remote service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        errors: "list[APIErrorDetail] | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.errors = errors if errors is not None else []

    @property
    def error_code(self) -> str | None:
        """Error code of the first reported entry, if any."""
        if not self.errors:
            return None
        return self.errors[0].error_code


class ClientError(APIError):
    """4xx client errors, plus 300 Multiple Choices for an ambiguous external id."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class AuthorizationError(ClientError):
    """401 Unauthorized or an invalid/expired session that survived a re-login."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """300 Multiple Choices (ambiguous external id) or 409 Conflict."""

    pass


class ServerError(APIError):
    """5xx server errors."""

    pass
