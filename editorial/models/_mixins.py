"""
Columns shared by every per-language translation table.

One canonical group row + N translation rows per content item. Exactly one
translation per group carries ``is_original = True``.

Translation lifecycle: draft → published → draft, draft → archived.
``archived`` is terminal.
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, String


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TranslationStatus(str, enum.Enum):
    """Lifecycle status for a translation row."""

    draft = "draft"
    published = "published"
    archived = "archived"


STATUS_TRANSITIONS: dict[str, frozenset[str]] = {
    TranslationStatus.draft.value: frozenset({TranslationStatus.published.value, TranslationStatus.archived.value}),
    TranslationStatus.published.value: frozenset({TranslationStatus.draft.value}),
    TranslationStatus.archived.value: frozenset(),
}


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class TranslationColumnsMixin(TimestampMixin):
    language = Column(String(10), nullable=True, index=True)
    slug = Column(String, nullable=False, index=True)
    status = Column(String(20), nullable=True, default=TranslationStatus.draft.value)
    is_original = Column(Boolean, nullable=True, default=True)
