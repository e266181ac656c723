"""Pre-flight checks run before any request is built."""

from collections.abc import Mapping
from typing import Any

from sforce_client.errors.exceptions import ValidationError


def require_sobject_name(object_type: str) -> None:
    if not object_type:
        raise ValidationError("sobject name is required")


def require_external_id_field(external_id_field: str) -> None:
    if not external_id_field:
        raise ValidationError("external id field is required")


def require_sobject_id(object_id: str) -> None:
    if not object_id:
        raise ValidationError("sobject id is required")


def require_external_id(external_id: str) -> None:
    if not external_id:
        raise ValidationError("external id is required")


def require_sobject_value(sobject: Mapping[str, Any] | None) -> None:
    """The body of a create or upsert must be a non-empty mapping."""
    if sobject is None or not isinstance(sobject, Mapping) or not sobject:
        raise ValidationError("sobject value is required")
