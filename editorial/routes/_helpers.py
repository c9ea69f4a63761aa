"""Shared plumbing for the API routers."""

from typing import Any

import httpx

from editorial.exceptions import ResourceNotFoundError, StorageError, ValidationError
from editorial.repositories.results import FailureKind, MutationResult


def unwrap(result: MutationResult, resource_type: str, identifier: Any = None, operation: str | None = None) -> dict:
    """Response body of a successful write; the matching API error otherwise."""
    if result.success:
        return result.to_dict()
    if result.kind is FailureKind.NOT_FOUND:
        raise ResourceNotFoundError(resource_type, identifier)
    if result.kind is FailureKind.VALIDATION:
        raise ValidationError(result.error or "Invalid request")
    raise StorageError(operation=operation)


def require(value: Any, resource_type: str, identifier: Any = None) -> Any:
    if value is None:
        raise ResourceNotFoundError(resource_type, identifier)
    return value


def get_http_transport() -> httpx.AsyncBaseTransport | None:
    """Transport for outbound HTTP calls; None means the network."""
    return None
