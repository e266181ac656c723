"""Error taxonomy and response decoding for sforce-client."""

from sforce_client.errors.exceptions import (
    APIError,
    AuthorizationError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    SforceError,
    TransportError,
    ValidationError,
)
from sforce_client.errors.handler import is_auth_failure, raise_for_status
from sforce_client.errors.models import APIErrorDetail, SObject, UpsertResult, decode_api_errors

__all__ = [
    "APIError",
    "APIErrorDetail",
    "AuthorizationError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "SObject",
    "ServerError",
    "SforceError",
    "TransportError",
    "UpsertResult",
    "ValidationError",
    "decode_api_errors",
    "is_auth_failure",
    "raise_for_status",
]
