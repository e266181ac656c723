"""Wire models for results and errors returned by the sobjects API."""

from dataclasses import dataclass, field
from typing import Any, TypeAlias

import httpx

JSONValue: TypeAlias = str | int | float | bool | None | dict[str, "JSONValue"] | list["JSONValue"]

# A generic remote record: field name to JSON value, no fixed schema.
SObject: TypeAlias = dict[str, JSONValue]

INVALID_SESSION_ID = "INVALID_SESSION_ID"


@dataclass
class APIErrorDetail:
    """A single error entry reported by the API.

    The service reports ``{"message": ..., "errorCode": ...}``, sometimes with a
    ``fields`` list naming the offending fields.
    """

    message: str
    error_code: str
    fields: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "APIErrorDetail":
        return cls(
            message=str(data.get("message", "")),
            error_code=str(data.get("errorCode", "")),
            fields=list(data.get("fields") or []),
        )

    def __str__(self) -> str:
        if self.error_code and self.message:
            return f"{self.error_code}: {self.message}"
        return self.error_code or self.message


def _looks_like_error(data: Any) -> bool:
    return isinstance(data, dict) and ("errorCode" in data or "message" in data)


def _decode_array(data: Any) -> list[APIErrorDetail] | None:
    if isinstance(data, list) and data and all(_looks_like_error(item) for item in data):
        return [APIErrorDetail.from_dict(item) for item in data]
    return None


def _decode_object(data: Any) -> list[APIErrorDetail] | None:
    if _looks_like_error(data):
        return [APIErrorDetail.from_dict(data)]
    return None


def _decode_oauth(data: Any) -> list[APIErrorDetail] | None:
    # Token endpoint failures use {"error": ..., "error_description": ...}
    if isinstance(data, dict) and "error" in data:
        return [
            APIErrorDetail(
                message=str(data.get("error_description", "")),
                error_code=str(data["error"]),
            )
        ]
    return None


_DECODERS = (_decode_array, _decode_object, _decode_oauth)


def decode_api_errors(response: httpx.Response) -> list[APIErrorDetail]:
    """Decode the error entries carried by a failed response.

    The remote API is inconsistent about the shape of error bodies, so each
    decoder is tried in order: a JSON array of error objects, a single error
    object, then the OAuth token endpoint shape.

    Args:
        response: HTTP response object

    Returns:
        The decoded entries, or an empty list if the body matches no shape.
    """
    try:
        data = response.json()
    except ValueError:
        return []

    for decoder in _DECODERS:
        errors = decoder(data)
        if errors is not None:
            return errors
    return []


@dataclass
class UpsertResult:
    """Result of a create or upsert operation."""

    id: str
    success: bool
    errors: list[Any] = field(default_factory=list)
    created: bool | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UpsertResult":
        return cls(
            id=str(data.get("id") or ""),
            success=bool(data.get("success", False)),
            errors=list(data.get("errors") or []),
            created=data.get("created"),
        )
