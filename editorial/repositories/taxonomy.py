"""
Integer-keyed reference data: tags, types, classifications, categories and
fatwa classifications.

Names are stored per language; the display name falls back from the
requested locale to the primary language to the entity's own name or slug.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, ClassVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from editorial.config import settings
from editorial.i18n import localized_name
from editorial.models import (
    Category,
    Classification,
    ClassificationTranslation,
    FatwaClassification,
    FatwaClassificationTranslation,
    Tag,
    TagTranslation,
    Type,
    TypeTranslation,
)
from editorial.models._mixins import utcnow
from editorial.repositories._base_repo import BaseRepository
from editorial.repositories._statements import create_upsert_stmt
from editorial.repositories.identifiers import identifier_filter
from editorial.repositories.results import FailureKind, MutationResult, is_unique_violation, storage_error_message

logger = logging.getLogger(__name__)


def clean_translation_entries(
    entries: Iterable[Mapping[str, Any]], extra_fields: Sequence[str] = ()
) -> list[dict[str, Any]]:
    """Trimmed ``{language, name}`` pairs, blank names dropped, last entry per language wins.

    ``extra_fields`` are carried along trimmed, blank ones as None.
    """
    cleaned: dict[str, dict[str, Any]] = {}
    for entry in entries:
        language = (entry.get("language") or "").strip()
        name = (entry.get("name") or "").strip()
        if language and name:
            cleaned[language] = {"language": language, "name": name}
            for field_name in extra_fields:
                cleaned[language][field_name] = (entry.get(field_name) or "").strip() or None
    return list(cleaned.values())


def nest_rows(rows: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Attach rows to their parent's ``children``; rows without a listed parent stay on top."""
    by_id = {row["id"]: {**row, "children": []} for row in rows}
    top_level = []
    for row in by_id.values():
        parent = by_id.get(row.get("parent_id"))
        if parent is not None:
            parent["children"].append(row)
        else:
            top_level.append(row)
    return top_level


class TaxonomyRepository(BaseRepository):
    entity_name: ClassVar[str]
    model: ClassVar[Any]
    translation_model: ClassVar[Any]
    translation_fk: ClassVar[str]
    translation_extra_fields: ClassVar[tuple[str, ...]] = ()
    order_columns: ClassVar[tuple[str, ...]] = ("slug",)

    def _fallback_name(self, row: Any) -> str:
        return getattr(row, "name", None) or row.slug

    def row_to_dict(self, row: Any, locale: str | None = None) -> dict[str, Any]:
        translations = [
            {
                "language": t.language,
                "name": t.name,
                **{field_name: getattr(t, field_name) for field_name in self.translation_extra_fields},
            }
            for t in row.translations
        ]
        return {
            "id": row.id,
            "slug": row.slug,
            "name": localized_name(translations, locale, settings.primary_language, self._fallback_name(row)),
            "translations": translations,
        }

    async def list_all(self, locale: str | None = None) -> list[dict[str, Any]]:
        order_by = [getattr(self.model, column) for column in self.order_columns]
        try:
            result = await self._session.execute(select(self.model).order_by(*order_by))
        except SQLAlchemyError as exc:
            logger.error("Error listing %s: %s", self.entity_name, storage_error_message(exc))
            return []
        return [self.row_to_dict(row, locale) for row in result.scalars().all()]

    async def list_tree(self, locale: str | None = None) -> list[dict[str, Any]]:
        return nest_rows(await self.list_all(locale))

    async def find_by_identifier(self, identifier: str) -> Any | None:
        clause = identifier_filter(self.model, identifier, numeric_ids=True)
        if clause is None:
            return None
        stmt = select(self.model).where(clause).execution_options(populate_existing=True)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Error fetching %s %r: %s", self.entity_name, identifier, storage_error_message(exc))
            return None
        row = result.scalars().first()
        if row is None:
            logger.info("%s %r not found", self.entity_name, identifier)
        return row

    async def get(self, identifier: str, locale: str | None = None) -> dict[str, Any] | None:
        row = await self.find_by_identifier(identifier)
        return self.row_to_dict(row, locale) if row is not None else None

    async def create(self, data: dict[str, Any]) -> MutationResult:
        columns = set(self.model.__table__.columns.keys()) - {"id"}
        row = self.model(**{k: v for k, v in data.items() if k in columns})
        try:
            self._session.add(row)
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            if is_unique_violation(exc):
                return MutationResult.fail(f"{self.entity_name} slug already exists", FailureKind.VALIDATION)
            message = storage_error_message(exc)
            logger.error("Error creating %s: %s", self.entity_name, message)
            return MutationResult.fail(message)

        logger.info("%s created: %s", self.entity_name, row.id)
        return MutationResult.ok(id=row.id, slug=row.slug)

    async def upsert_translations(self, entity_id: int, entries: Sequence[Mapping[str, Any]]) -> MutationResult:
        """Insert or replace the per-language names of one entity.

        Blank names are dropped first; nothing is written when none remain.
        """
        rows = [
            {self.translation_fk: entity_id, "updated_at": utcnow(), **entry}
            for entry in clean_translation_entries(entries, self.translation_extra_fields)
        ]
        if not rows:
            return MutationResult.fail("At least one non-empty translation name is required", FailureKind.VALIDATION)

        stmt = create_upsert_stmt(
            self._session.bind.dialect.name,
            self.translation_model,
            rows,
            index_elements=[self.translation_fk, "language"],
            update_cols=["name", *self.translation_extra_fields, "updated_at"],
        )
        try:
            await self._session.execute(stmt)
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error saving %s %s translations: %s", self.entity_name, entity_id, message)
            return MutationResult.fail(message)

        logger.info("%s %s translations saved: %s", self.entity_name, entity_id, [r["language"] for r in rows])
        return MutationResult.ok(id=entity_id, languages=[r["language"] for r in rows])

    async def delete(self, identifier: str) -> MutationResult:
        row = await self.find_by_identifier(identifier)
        if row is None:
            return MutationResult.fail(f"{self.entity_name} not found", FailureKind.NOT_FOUND)
        try:
            await self._session.delete(row)
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error deleting %s %s: %s", self.entity_name, identifier, message)
            return MutationResult.fail(message)
        return MutationResult.ok(id=row.id)


class TagRepository(TaxonomyRepository):
    entity_name = "tag"
    model = Tag
    translation_model = TagTranslation
    translation_fk = "tag_id"


class ClassificationRepository(TaxonomyRepository):
    entity_name = "classification"
    model = Classification
    translation_model = ClassificationTranslation
    translation_fk = "classification_id"


class TypeRepository(TaxonomyRepository):
    entity_name = "type"
    model = Type
    translation_model = TypeTranslation
    translation_fk = "type_id"

    def row_to_dict(self, row: Any, locale: str | None = None) -> dict[str, Any]:
        data = super().row_to_dict(row, locale)
        data["classification_id"] = row.classification_id
        return data


class CategoryRepository(BaseRepository):
    async def list_all(self) -> list[dict[str, Any]]:
        try:
            result = await self._session.execute(select(Category).order_by(Category.name))
        except SQLAlchemyError as exc:
            logger.error("Error listing categories: %s", storage_error_message(exc))
            return []
        return [{"id": c.id, "slug": c.slug, "name": c.name} for c in result.scalars().all()]


class FatwaClassificationRepository(TaxonomyRepository):
    """Books and their chapters.

    At most two levels deep; ``display_order`` counts from 0 within each
    parent and new rows go to the end of their siblings.
    """

    entity_name = "fatwa_classification"
    model = FatwaClassification
    translation_model = FatwaClassificationTranslation
    translation_fk = "classification_id"
    translation_extra_fields = ("description",)
    order_columns = ("display_order", "id")

    def row_to_dict(self, row: Any, locale: str | None = None) -> dict[str, Any]:
        data = super().row_to_dict(row, locale)
        data["parent_id"] = row.parent_id
        data["display_order"] = row.display_order
        return data

    def _sibling_filter(self, parent_id: int | None):
        if parent_id is None:
            return FatwaClassification.parent_id.is_(None)
        return FatwaClassification.parent_id == parent_id

    async def _next_display_order(self, parent_id: int | None) -> int:
        stmt = select(func.max(FatwaClassification.display_order)).where(self._sibling_filter(parent_id))
        current = (await self._session.execute(stmt)).scalar()
        return 0 if current is None else current + 1

    async def _check_parent(self, parent_id: int, child: FatwaClassification | None = None) -> MutationResult | None:
        """The failure that keeps ``child`` from going under ``parent_id``, if any."""
        if child is not None and child.id == parent_id:
            return MutationResult.fail("A classification cannot be its own parent", FailureKind.VALIDATION)
        parent = await self._session.get(FatwaClassification, parent_id, populate_existing=True)
        if parent is None:
            return MutationResult.fail("Parent classification not found", FailureKind.NOT_FOUND)
        if parent.parent_id is not None:
            return MutationResult.fail("Cannot nest more than 2 levels deep", FailureKind.VALIDATION)
        if child is not None:
            children = await self._session.execute(
                select(FatwaClassification.id).where(FatwaClassification.parent_id == child.id).limit(1)
            )
            if children.first() is not None:
                return MutationResult.fail(
                    "A classification with chapters cannot become a chapter", FailureKind.VALIDATION
                )
        return None

    async def create(self, data: dict[str, Any]) -> MutationResult:
        parent_id = data.get("parent_id")
        try:
            if parent_id is not None:
                failure = await self._check_parent(parent_id)
                if failure is not None:
                    return failure
            if data.get("display_order") is None:
                data = {**data, "display_order": await self._next_display_order(parent_id)}
        except SQLAlchemyError as exc:
            message = storage_error_message(exc)
            logger.error("Error creating fatwa classification: %s", message)
            return MutationResult.fail(message)

        result = await super().create(data)
        if result.success:
            result.data.update(parent_id=parent_id, display_order=data["display_order"])
        return result

    async def set_parent(self, identifier: str, parent_id: int | None) -> MutationResult:
        """Move a classification under ``parent_id`` (None for the top level), after its new siblings."""
        row = await self.find_by_identifier(identifier)
        if row is None:
            return MutationResult.fail("fatwa_classification not found", FailureKind.NOT_FOUND)
        if row.parent_id == parent_id:
            return MutationResult.ok(id=row.id, parent_id=parent_id, display_order=row.display_order)

        try:
            if parent_id is not None:
                failure = await self._check_parent(parent_id, child=row)
                if failure is not None:
                    return failure
            position = await self._next_display_order(parent_id)
            row.parent_id = parent_id
            row.display_order = position
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error moving fatwa classification %s: %s", identifier, message)
            return MutationResult.fail(message)

        logger.info("fatwa_classification %s moved under %s", row.id, parent_id)
        return MutationResult.ok(id=row.id, parent_id=parent_id, display_order=row.display_order)

    async def reorder(self, ordered_ids: Sequence[int]) -> MutationResult:
        """Set ``display_order`` to each id's position in ``ordered_ids``; all ids must share a parent."""
        try:
            result = await self._session.execute(
                select(FatwaClassification)
                .where(FatwaClassification.id.in_(list(ordered_ids)))
                .execution_options(populate_existing=True)
            )
            rows = {row.id: row for row in result.scalars().all()}
            missing = [i for i in ordered_ids if i not in rows]
            if missing:
                return MutationResult.fail(f"Unknown fatwa classifications: {missing}", FailureKind.NOT_FOUND)
            if len({row.parent_id for row in rows.values()}) > 1:
                return MutationResult.fail(
                    "Only classifications under the same parent can be reordered together", FailureKind.VALIDATION
                )
            for position, classification_id in enumerate(ordered_ids):
                rows[classification_id].display_order = position
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error reordering fatwa classifications: %s", message)
            return MutationResult.fail(message)
        return MutationResult.ok(order=list(ordered_ids))

    async def delete(self, identifier: str) -> MutationResult:
        """Delete a classification; its chapters move to the end of the top level."""
        row = await self.find_by_identifier(identifier)
        if row is None:
            return MutationResult.fail("fatwa_classification not found", FailureKind.NOT_FOUND)
        try:
            chapters = await self._session.execute(
                select(FatwaClassification)
                .where(FatwaClassification.parent_id == row.id)
                .order_by(FatwaClassification.display_order, FatwaClassification.id)
            )
            position = await self._next_display_order(None)
            for offset, chapter in enumerate(chapters.scalars().all()):
                chapter.parent_id = None
                chapter.display_order = position + offset
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error detaching chapters of fatwa classification %s: %s", identifier, message)
            return MutationResult.fail(message)
        return await super().delete(identifier)
