"""
Structured outcome of a write.

Writes never raise storage errors to their caller; they report them here
and leave user-facing messaging to the route.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# PostgreSQL unique_violation
UNIQUE_VIOLATION_SQLSTATE = "23505"


class FailureKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    STORAGE = "storage"


@dataclass
class MutationResult:
    success: bool
    error: str | None = None
    kind: FailureKind | None = None
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, **data: Any) -> "MutationResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, kind: FailureKind = FailureKind.STORAGE) -> "MutationResult":
        return cls(success=False, error=error, kind=kind)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"success": self.success}
        if self.error is not None:
            body["error"] = self.error
        if self.data:
            body["data"] = self.data
        return body


def storage_error_message(exc: SQLAlchemyError) -> str:
    """The driver's message without SQLAlchemy's statement/parameter dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when ``exc`` is a unique-constraint violation on any supported driver."""
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == UNIQUE_VIOLATION_SQLSTATE:
        return True
    return "UNIQUE constraint failed" in str(orig if orig is not None else exc)
