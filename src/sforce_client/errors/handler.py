"""Error handling utilities for HTTP responses."""

import httpx

from sforce_client.errors.exceptions import (
    APIError,
    AuthorizationError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
)
from sforce_client.errors.models import INVALID_SESSION_ID, APIErrorDetail, decode_api_errors

_EXCEPTION_MAP: dict[int, type[APIError]] = {
    300: ConflictError,
    400: BadRequestError,
    401: AuthorizationError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
}


def is_auth_failure(response: httpx.Response) -> bool:
    """Return True if the response reports an invalid or expired session.

    A 401 always counts. Any other failed response counts when one of its
    error entries carries ``INVALID_SESSION_ID``.
    """
    if response.status_code == 401:
        return True
    if response.is_success:
        return False
    return any(error.error_code == INVALID_SESSION_ID for error in decode_api_errors(response))


def _build_message(status_code: int, errors: list[APIErrorDetail], response: httpx.Response) -> str:
    if errors:
        return f"HTTP {status_code}: " + "; ".join(str(error) for error in errors)

    response_text = response.text[:200]
    return f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"


def raise_for_status(response: httpx.Response) -> None:
    """Raise the appropriate APIError subclass for a failed response.

    The error body may be a single error object or an ordered list of them;
    both shapes are accepted and every entry is kept on the exception. The
    message always includes ``errorCode: message`` of each entry so callers
    can match on the error code.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code
    errors = decode_api_errors(response)

    if any(error.error_code == INVALID_SESSION_ID for error in errors):
        exc_class = AuthorizationError
    elif status_code in _EXCEPTION_MAP:
        exc_class = _EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    raise exc_class(
        message=_build_message(status_code, errors, response),
        status_code=status_code,
        response=response,
        errors=errors,
    )
