"""
Caller-supplied identifiers for read routes.

Every identifier is classified exactly once, before any lookup:

    "new"                         → NEW       (no entity yet, never queried)
    8-4-4-4-12 hex (any case)     → UUID      (filter on ``id``)
    all digits (numeric_ids=True) → NUMERIC   (filter on integer ``id``)
    anything else                 → SLUG      (filter on ``slug``)
"""

from __future__ import annotations

import enum
import re
import uuid
from typing import Any

NEW_SENTINEL = "new"

UUID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)
NUMERIC_PATTERN = re.compile(r"^\d+$")


class IdentifierKind(str, enum.Enum):
    NEW = "new"
    UUID = "uuid"
    NUMERIC = "numeric"
    SLUG = "slug"


def classify_identifier(identifier: str, numeric_ids: bool = False) -> IdentifierKind:
    """Return the single kind of ``identifier``.

    ``numeric_ids`` is for integer-keyed tables (tags, types, ...), where an
    all-digit identifier is an id rather than a slug.
    """
    if identifier == NEW_SENTINEL:
        return IdentifierKind.NEW
    if numeric_ids:
        return IdentifierKind.NUMERIC if NUMERIC_PATTERN.match(identifier) else IdentifierKind.SLUG
    if UUID_PATTERN.match(identifier):
        return IdentifierKind.UUID
    return IdentifierKind.SLUG


def identifier_filter(model: Any, identifier: str, numeric_ids: bool = False):
    """Build the equality clause for ``identifier`` against ``model``.

    Returns None for the ``"new"`` sentinel; callers must not query then.
    """
    kind = classify_identifier(identifier, numeric_ids=numeric_ids)
    if kind is IdentifierKind.NEW:
        return None
    if kind is IdentifierKind.UUID:
        return model.id == uuid.UUID(identifier)
    if kind is IdentifierKind.NUMERIC:
        return model.id == int(identifier)
    return model.slug == identifier
