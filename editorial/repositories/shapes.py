"""
The two shapes a translation row can come back in.

``CentralizedShape``: the row belongs to a group and the group row was
joined; shared metadata comes from the group, field by field falling back
to the row's legacy inline copy when the group value is NULL.

``LegacyShape``: no group row; shared metadata is the row's inline copy.

The shape is decided once, at the repository boundary.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class CentralizedShape:
    group_id: uuid.UUID
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LegacyShape:
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def group_id(self) -> None:
        return None


GroupShape = Union[CentralizedShape, LegacyShape]


def coalesce_metadata(fields: Iterable[str], centralized: Any | None, legacy: Any) -> dict[str, Any]:
    """Per-field coalesce of ``centralized`` over ``legacy``.

    Either side may lack an attribute entirely, which counts as NULL.
    """
    resolved = {}
    for name in fields:
        value = getattr(centralized, name, None) if centralized is not None else None
        if value is None:
            value = getattr(legacy, name, None)
        resolved[name] = value
    return resolved


def is_published(status: str | None) -> bool:
    return (status or "").lower() == "published"
