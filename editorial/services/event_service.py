"""
Event Service

Ordered article events of a theme or a timeline. Theme events can be
indented under another event, one level deep.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from editorial.config import settings
from editorial.models import (
    Article,
    ArticleTranslation,
    ThemeArticle,
    ThemeTranslation,
    TimelineArticle,
    TimelineTranslation,
)
from editorial.models._mixins import TranslationStatus
from editorial.repositories._statements import create_upsert_stmt
from editorial.repositories.results import FailureKind, MutationResult, storage_error_message
from editorial.utils.slugify import slugify

logger = logging.getLogger(__name__)

EVENT_ARTICLE_FIELDS = (
    "id",
    "title",
    "slug",
    "summary",
    "content",
    "content_json",
    "image_url",
    "event_date_hijri",
    "event_date_hijri_year",
    "event_date_gregorian",
    "event_date_precision",
    "language",
)

CUSTOM_FIELDS = ("custom_event_date_hijri", "custom_event_date_gregorian", "custom_title")


@dataclass(frozen=True)
class EventScope:
    name: str
    event_model: Any
    owner_model: Any
    owner_fk: str
    nested: bool


THEME_EVENTS = EventScope("theme", ThemeArticle, ThemeTranslation, "theme_id", nested=True)
TIMELINE_EVENTS = EventScope("timeline", TimelineArticle, TimelineTranslation, "timeline_id", nested=False)


def event_to_dict(event: Any, scope: EventScope) -> dict[str, Any]:
    data = {
        "id": event.id,
        scope.owner_fk: getattr(event, scope.owner_fk),
        "article_id": event.article_id,
        "display_order": event.display_order,
        "created_at": event.created_at,
        **{name: getattr(event, name) for name in CUSTOM_FIELDS},
    }
    if scope.nested:
        data["parent_id"] = event.parent_id
    article = event.article
    data["article"] = {name: getattr(article, name) for name in EVENT_ARTICLE_FIELDS} if article else None
    return data


def nest_events(events: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Two-level tree from a flat, ordered event list.

    Events whose parent is not in the list are treated as top level.
    """
    ids = {event["id"] for event in events}
    top_level = [
        {**event, "children": []} for event in events if not event.get("parent_id") or event["parent_id"] not in ids
    ]
    by_id = {event["id"]: event for event in top_level}
    for event in events:
        parent = by_id.get(event.get("parent_id"))
        if parent is not None:
            parent["children"].append(event)
    return top_level


class EventService:
    """Service for the events of one theme or timeline kind."""

    def __init__(self, db: AsyncSession, scope: EventScope):
        self.db = db
        self.scope = scope

    @property
    def _model(self):
        return self.scope.event_model

    def _owner_column(self):
        return getattr(self._model, self.scope.owner_fk)

    async def list_events(self, owner_id: uuid.UUID) -> list[dict[str, Any]]:
        stmt = (
            select(self._model)
            .where(self._owner_column() == owner_id)
            .order_by(self._model.display_order, self._model.created_at)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Error fetching %s events of %s: %s", self.scope.name, owner_id, storage_error_message(exc))
            return []
        return [event_to_dict(e, self.scope) for e in result.scalars().unique().all()]

    async def list_nested_events(self, owner_id: uuid.UUID) -> list[dict[str, Any]]:
        return nest_events(await self.list_events(owner_id))

    async def _next_display_order(self, owner_id: uuid.UUID) -> int:
        result = await self.db.execute(
            select(func.max(self._model.display_order)).where(self._owner_column() == owner_id)
        )
        return (result.scalar() or 0) + 1

    async def add_event(self, owner_id: uuid.UUID, article_id: uuid.UUID, **fields: Any) -> MutationResult:
        """Attach an article to the owner, or update the existing attachment."""
        values: dict[str, Any] = {
            "id": uuid.uuid4(),
            self.scope.owner_fk: owner_id,
            "article_id": article_id,
            **{name: fields.get(name) or None for name in CUSTOM_FIELDS},
        }
        update_cols = ["display_order", *CUSTOM_FIELDS]
        if self.scope.nested:
            parent_id = fields.get("parent_id")
            if parent_id is not None and await self._owned_event(owner_id, parent_id) is None:
                return MutationResult.fail("Could not verify parent event.", FailureKind.NOT_FOUND)
            values["parent_id"] = parent_id
            update_cols.append("parent_id")

        try:
            display_order = fields.get("display_order")
            values["display_order"] = display_order if display_order is not None else await self._next_display_order(owner_id)
            stmt = create_upsert_stmt(
                self.db.bind.dialect.name,
                self._model,
                [values],
                index_elements=[self.scope.owner_fk, "article_id"],
                update_cols=update_cols,
            )
            await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            message = storage_error_message(exc)
            logger.error("Error adding article %s to %s %s: %s", article_id, self.scope.name, owner_id, message)
            return MutationResult.fail(message)

        return MutationResult.ok(article_id=article_id, display_order=values["display_order"])

    async def remove_event(self, owner_id: uuid.UUID, article_id: uuid.UUID) -> MutationResult:
        result = await self.db.execute(
            select(self._model.id).where(self._owner_column() == owner_id, self._model.article_id == article_id)
        )
        event_id = result.scalar_one_or_none()
        if event_id is None:
            return MutationResult.fail(f"{self.scope.name} event not found", FailureKind.NOT_FOUND)

        try:
            if self.scope.nested:
                # Children move to the top level before their parent goes
                await self.db.execute(
                    update(self._model).where(self._model.parent_id == event_id).values(parent_id=None)
                )
            await self.db.execute(delete(self._model).where(self._model.id == event_id))
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            message = storage_error_message(exc)
            logger.error("Error removing %s event %s: %s", self.scope.name, event_id, message)
            return MutationResult.fail(message)

        return MutationResult.ok(id=event_id)

    async def _owned_event(self, owner_id: uuid.UUID, event_id: Any) -> Any | None:
        result = await self.db.execute(
            select(self._model)
            .where(self._model.id == event_id, self._owner_column() == owner_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def reorder(self, owner_id: uuid.UUID, items: list[dict[str, Any]]) -> MutationResult:
        """Apply ``[{"id": ..., "display_order": ...}, ...]`` in one commit.

        Every id must be an event of ``owner_id``; otherwise nothing is written.
        """
        ids = {item["id"] for item in items}
        if ids:
            result = await self.db.execute(
                select(self._model.id).where(self._model.id.in_(ids), self._owner_column() == owner_id)
            )
            if set(result.scalars().all()) != ids:
                return MutationResult.fail(f"{self.scope.name} event not found", FailureKind.NOT_FOUND)

        try:
            for item in items:
                await self.db.execute(
                    update(self._model)
                    .where(self._model.id == item["id"], self._owner_column() == owner_id)
                    .values(display_order=item["display_order"])
                )
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            message = storage_error_message(exc)
            logger.error("Error reordering %s events of %s: %s", self.scope.name, owner_id, message)
            return MutationResult.fail(message)
        return MutationResult.ok(count=len(items))

    async def set_parent(self, owner_id: uuid.UUID, event_id: uuid.UUID, parent_id: uuid.UUID | None) -> MutationResult:
        """Indent an event under ``parent_id``, or outdent it with ``None``.

        Both events must belong to ``owner_id``.
        """
        if not self.scope.nested:
            return MutationResult.fail(f"{self.scope.name} events cannot be nested", FailureKind.VALIDATION)

        event = await self._owned_event(owner_id, event_id)
        if event is None:
            return MutationResult.fail(f"{self.scope.name} event not found", FailureKind.NOT_FOUND)

        if parent_id is not None:
            if parent_id == event_id:
                return MutationResult.fail("An event cannot be its own parent.", FailureKind.VALIDATION)
            parent = await self._owned_event(owner_id, parent_id)
            if parent is None:
                return MutationResult.fail("Could not verify parent event.", FailureKind.NOT_FOUND)
            if parent.parent_id is not None:
                return MutationResult.fail("Cannot nest more than 2 levels deep.", FailureKind.VALIDATION)
            children = await self.db.execute(select(self._model.id).where(self._model.parent_id == event_id).limit(1))
            if children.first() is not None:
                return MutationResult.fail("Cannot make an event with children into a child.", FailureKind.VALIDATION)

        event.parent_id = parent_id
        try:
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            message = storage_error_message(exc)
            logger.error("Error setting parent of %s event %s: %s", self.scope.name, event_id, message)
            return MutationResult.fail(message)
        return MutationResult.ok(id=event_id, parent_id=parent_id)

    async def create_article(self, owner_id: uuid.UUID, data: dict[str, Any]) -> MutationResult:
        """Create a draft article and append it to the owner's events.

        Article group, original translation and event row commit together.
        """
        owner = await self.db.get(self.scope.owner_model, owner_id)
        if owner is None:
            return MutationResult.fail(f"{self.scope.name} not found", FailureKind.NOT_FOUND)
        if not (data.get("title") or "").strip():
            return MutationResult.fail("Title is required", FailureKind.VALIDATION)

        try:
            article = Article(author_id=data.get("author_id"), category_id=data.get("category_id"))
            self.db.add(article)
            await self.db.flush()

            translation = ArticleTranslation(
                article_id=article.id,
                title=data["title"],
                slug=data.get("slug") or slugify(data["title"], "article"),
                summary=data.get("summary"),
                content="",
                status=TranslationStatus.draft.value,
                language=data.get("language") or settings.primary_language,
                is_original=True,
                is_featured=False,
                event_date_hijri=data.get("event_date_hijri"),
                event_date_hijri_year=data.get("event_date_hijri_year"),
                event_date_gregorian=data.get("event_date_gregorian"),
            )
            self.db.add(translation)
            await self.db.flush()

            position = await self._next_display_order(owner_id)
            self.db.add(
                self._model(**{self.scope.owner_fk: owner_id}, article_id=translation.id, display_order=position)
            )
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            message = storage_error_message(exc)
            logger.error("Error creating article for %s %s: %s", self.scope.name, owner_id, message)
            return MutationResult.fail(message)

        logger.info("Created article %s for %s %s at %d", translation.id, self.scope.name, owner_id, position)
        return MutationResult.ok(id=translation.id, slug=translation.slug, group_id=article.id, display_order=position)


async def create_article_for_theme(db: AsyncSession, theme_id: uuid.UUID, data: dict[str, Any]) -> MutationResult:
    return await EventService(db, THEME_EVENTS).create_article(theme_id, data)


async def create_article_for_timeline(
    db: AsyncSession, timeline_id: uuid.UUID, data: dict[str, Any]
) -> MutationResult:
    return await EventService(db, TIMELINE_EVENTS).create_article(timeline_id, data)
