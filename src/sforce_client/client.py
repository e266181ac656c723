"""CRUD operations on sobjects."""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from sforce_client.errors.exceptions import TransportError
from sforce_client.errors.models import SObject, UpsertResult
from sforce_client.session import Session
from sforce_client.validation import (
    require_external_id,
    require_external_id_field,
    require_sobject_id,
    require_sobject_name,
    require_sobject_value,
)

logger = logging.getLogger(__name__)


def _sobject_path(*segments: str) -> str:
    return "/sobjects/" + "/".join(quote(segment, safe="") for segment in segments)


def _decode_object(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as e:
        raise TransportError(f"malformed response body: {e}") from e

    if not isinstance(data, dict):
        raise TransportError(f"malformed response body: expected a JSON object, got {type(data).__name__}")
    return data


def _decode_optional_object(response: httpx.Response) -> dict[str, Any] | None:
    if not response.content.strip():
        return None
    return _decode_object(response)


class RestClient:
    """Create, read, upsert and delete sobjects through a Session.

    Every operation validates its inputs before touching the network, so a
    ValidationError means no request was sent. Every operation also accepts
    a ``timeout`` that is passed through to the HTTP call.

    Example:
        ```python
        client = RestClient(Session.from_env())
        result = client.create_sobject("Account", {"Name": "Acme"})
        account = client.get_sobject("Account", result.id)
        ```
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def create_sobject(
        self,
        object_type: str,
        sobject: Mapping[str, Any] | None,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> UpsertResult:
        """Create a record and return the id assigned by the server."""
        require_sobject_name(object_type)
        require_sobject_value(sobject)

        response = self.session.send("POST", _sobject_path(object_type), dict(sobject), timeout=timeout)
        result = UpsertResult.from_dict(_decode_object(response))
        logger.debug(f"Created {object_type} {result.id}")
        return result

    def get_sobject(self, object_type: str, object_id: str, *, timeout: Any = httpx.USE_CLIENT_DEFAULT) -> SObject:
        require_sobject_name(object_type)
        require_sobject_id(object_id)

        response = self.session.send("GET", _sobject_path(object_type, object_id), timeout=timeout)
        return _decode_object(response)

    def get_sobject_by_external_id(
        self,
        object_type: str,
        external_id_field: str,
        external_id: str,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> SObject:
        require_sobject_name(object_type)
        require_external_id_field(external_id_field)
        require_external_id(external_id)

        path = _sobject_path(object_type, external_id_field, external_id)
        response = self.session.send("GET", path, timeout=timeout)
        return _decode_object(response)

    def upsert_sobject(
        self,
        object_type: str,
        object_id: str,
        sobject: Mapping[str, Any] | None,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> UpsertResult:
        """Update the record with the given id.

        The service answers an update with 204 and no body, so the returned
        result always carries the caller's id.
        """
        require_sobject_name(object_type)
        require_sobject_id(object_id)
        require_sobject_value(sobject)

        response = self.session.send("PATCH", _sobject_path(object_type, object_id), dict(sobject), timeout=timeout)
        data = _decode_optional_object(response)
        if data is None:
            return UpsertResult(id=object_id, success=True)

        result = UpsertResult.from_dict(data)
        result.id = object_id
        return result

    def upsert_sobject_by_external_id(
        self,
        object_type: str,
        external_id_field: str,
        external_id: str,
        sobject: Mapping[str, Any] | None,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> UpsertResult:
        """Create or update the record whose external id field matches.

        A created record comes back with its new id and ``created=True``. An
        update is answered with 204 and no body, in which case the id is
        empty.
        """
        require_sobject_name(object_type)
        require_external_id_field(external_id_field)
        require_external_id(external_id)
        require_sobject_value(sobject)

        path = _sobject_path(object_type, external_id_field, external_id)
        response = self.session.send("PATCH", path, dict(sobject), timeout=timeout)
        data = _decode_optional_object(response)
        if data is None:
            return UpsertResult(id="", success=True)
        return UpsertResult.from_dict(data)

    def delete_sobject(self, object_type: str, object_id: str, *, timeout: Any = httpx.USE_CLIENT_DEFAULT) -> None:
        require_sobject_name(object_type)
        require_sobject_id(object_id)

        self.session.send("DELETE", _sobject_path(object_type, object_id), timeout=timeout)
        logger.debug(f"Deleted {object_type} {object_id}")
