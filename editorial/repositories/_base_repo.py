"""
Generic repository for translation-grouped content.

Every content type (article, fatwa, individual, theme, timeline) is one
group row plus per-language translation rows. Subclasses only declare the
tables, the group foreign key, the shared metadata fields and the
associations; the resolution rules live here:

1. identifier → translation row (``"new"`` never reaches the database)
2. translation → group metadata (per-field coalesce over legacy columns)
3. translation → association ids (group scope, legacy scope only without a group)
4. group → sibling translations (original first)

Reads log and swallow storage failures, returning ``None``/``[]``.
Writes return a ``MutationResult``.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from editorial.config import settings
from editorial.models._mixins import STATUS_TRANSITIONS, TranslationStatus
from editorial.repositories.identifiers import identifier_filter
from editorial.repositories.results import FailureKind, MutationResult, storage_error_message
from editorial.repositories.shapes import CentralizedShape, GroupShape, LegacyShape, coalesce_metadata, is_published
from editorial.utils.slugify import slugify

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class BaseRepository:
    """Base class for all SQLAlchemy repositories."""

    def __init__(self, session: "AsyncSession"):
        self._session = session


@dataclass(frozen=True)
class AssociationSpec:
    """A many-to-many link read by ``resolve_associations``.

    ``group_model`` is scoped by the group id, ``legacy_model`` by the
    translation id. Either may be absent.
    """

    kind: str
    value_column: str
    group_model: Any = None
    group_fk: str | None = None
    legacy_model: Any = None
    legacy_fk: str | None = None
    order_column: str | None = None


class TranslationGroupRepository(BaseRepository):
    entity_name: ClassVar[str]
    group_model: ClassVar[Any]
    translation_model: ClassVar[Any]
    group_fk: ClassVar[str]
    title_field: ClassVar[str] = "title"
    metadata_fields: ClassVar[tuple[str, ...]] = ()
    associations: ClassVar[tuple[AssociationSpec, ...]] = ()

    _protected_fields: ClassVar[frozenset[str]] = frozenset({"id", "is_original", "status", "created_at", "updated_at"})

    # ── Translation lookup ───────────────────────────────────────────────────

    async def find_by_identifier(self, identifier: str) -> Any | None:
        """Fetch the single translation row for a UUID or slug, group joined.

        Zero rows and several rows are both treated as absence.
        """
        clause = identifier_filter(self.translation_model, identifier)
        if clause is None:
            return None

        stmt = (
            select(self.translation_model)
            .options(joinedload(self.translation_model.group))
            .where(clause)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.error("Error fetching %s %r: %s", self.entity_name, identifier, storage_error_message(exc))
            return None

        if len(rows) != 1:
            logger.info("%s %r not found (%d rows)", self.entity_name, identifier, len(rows))
            return None
        return rows[0]

    # ── Group resolution ─────────────────────────────────────────────────────

    def resolve_group(self, translation: Any) -> GroupShape:
        """Classify a looked-up translation as centralized or legacy."""
        group = translation.group
        if group is not None:
            return CentralizedShape(
                group_id=group.id,
                metadata=coalesce_metadata(self.metadata_fields, group, translation),
            )
        if getattr(translation, self.group_fk) is not None:
            logger.warning(
                "%s translation %s references missing group %s",
                self.entity_name,
                translation.id,
                getattr(translation, self.group_fk),
            )
        return LegacyShape(metadata=coalesce_metadata(self.metadata_fields, None, translation))

    async def get(self, identifier: str) -> dict[str, Any] | None:
        """Translation row merged with its resolved group metadata."""
        translation = await self.find_by_identifier(identifier)
        if translation is None:
            return None

        shape = self.resolve_group(translation)
        entity = self.row_to_dict(translation)
        entity.update(shape.metadata)
        entity[self.group_fk] = shape.group_id if shape.group_id is not None else entity.get(self.group_fk)
        entity["is_published"] = is_published(translation.status)
        entity["shape"] = "centralized" if isinstance(shape, CentralizedShape) else "legacy"
        return entity

    async def get_group_metadata(self, group_id: Any) -> dict[str, Any] | None:
        """Shared metadata of one group plus its group-scoped association ids."""
        if not group_id:
            return None

        try:
            group = await self._session.get(self.group_model, group_id)
        except SQLAlchemyError as exc:
            logger.error("Error fetching %s group %s: %s", self.entity_name, group_id, storage_error_message(exc))
            return None
        if group is None:
            logger.info("%s group %s not found", self.entity_name, group_id)
            return None

        metadata: dict[str, Any] = {"id": group.id}
        metadata.update({name: getattr(group, name) for name in self.metadata_fields})
        for spec in self.associations:
            if spec.group_model is not None:
                metadata[spec.kind] = await self._association_values(spec, spec.group_model, spec.group_fk, group.id)
        return metadata

    # ── Associations ─────────────────────────────────────────────────────────

    def association(self, kind: str) -> AssociationSpec:
        for spec in self.associations:
            if spec.kind == kind:
                return spec
        raise KeyError(f"{self.entity_name} has no association '{kind}'")

    def _association_scope(self, translation: Any, spec: AssociationSpec) -> tuple[Any, str, Any] | None:
        group_id = getattr(translation, self.group_fk)
        if group_id is not None and spec.group_model is not None:
            return spec.group_model, spec.group_fk, group_id
        if spec.legacy_model is not None:
            return spec.legacy_model, spec.legacy_fk, translation.id
        return None

    async def _association_values(self, spec: AssociationSpec, model: Any, fk: str, scope_id: Any) -> list[Any]:
        stmt = select(getattr(model, spec.value_column)).where(getattr(model, fk) == scope_id)
        if spec.order_column:
            stmt = stmt.order_by(getattr(model, spec.order_column))
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error(
                "Error fetching %s %s for %s: %s", self.entity_name, spec.kind, scope_id, storage_error_message(exc)
            )
            return []
        return list(result.scalars().all())

    async def resolve_associations(self, translation: Any, kind: str) -> list[Any]:
        """Association ids of ``kind`` for a looked-up translation.

        The group-scoped table is authoritative whenever the translation has
        a group, even when it holds no rows; the translation-scoped table is
        read only for rows without a group.
        """
        spec = self.association(kind)
        scope = self._association_scope(translation, spec)
        if scope is None:
            return []
        model, fk, scope_id = scope
        return await self._association_values(spec, model, fk, scope_id)

    async def get_associations(self, identifier: str, kind: str) -> list[Any]:
        translation = await self.find_by_identifier(identifier)
        if translation is None:
            return []
        return await self.resolve_associations(translation, kind)

    # ── Siblings ─────────────────────────────────────────────────────────────

    async def list_siblings(self, group_id: Any) -> list[dict[str, Any]]:
        """All translations of one group, the original first."""
        if not group_id:
            return []

        model = self.translation_model
        stmt = (
            select(
                model.id,
                getattr(model, self.title_field),
                model.slug,
                model.language,
                model.is_original,
                model.status,
            )
            .where(getattr(model, self.group_fk) == group_id)
            .order_by(model.language, model.id)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Error fetching %s translations of %s: %s", self.entity_name, group_id, storage_error_message(exc))
            return []

        siblings = [
            self.apply_boundary_defaults(
                {
                    "id": row[0],
                    "title": row[1],
                    "slug": row[2],
                    "language": row[3],
                    "is_original": row[4],
                    "status": row[5],
                }
            )
            for row in result.all()
        ]
        # Stable: originals first, storage order otherwise
        siblings.sort(key=lambda s: not s["is_original"])
        return siblings

    # ── Listing ──────────────────────────────────────────────────────────────

    async def list_all(self, language: str | None = None) -> list[dict[str, Any]]:
        model = self.translation_model
        stmt = select(model).order_by(getattr(model, self.title_field))
        if language:
            stmt = stmt.where(model.language == language)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Error listing %s: %s", self.entity_name, storage_error_message(exc))
            return []
        return [self.row_to_dict(row) for row in result.scalars().all()]

    # ── Writes ───────────────────────────────────────────────────────────────

    def _split_fields(self, data: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
        columns = set(self.translation_model.__table__.columns.keys())
        group_fields = {k: v for k, v in data.items() if k in self.metadata_fields}
        translation_fields = {
            k: v
            for k, v in data.items()
            if k in columns and k not in self.metadata_fields and k not in self._protected_fields and k != self.group_fk
        }
        return group_fields, translation_fields

    async def create(self, data: dict[str, Any]) -> MutationResult:
        """Create a new content item: group row plus its original translation."""
        group_fields, translation_fields = self._split_fields(data)
        translation_fields.setdefault("language", settings.primary_language)
        if not translation_fields.get("slug"):
            translation_fields["slug"] = slugify(translation_fields.get(self.title_field), self.entity_name)

        group = self.group_model(**group_fields)
        try:
            self._session.add(group)
            await self._session.flush()
            translation = self.translation_model(
                **translation_fields,
                **{self.group_fk: group.id},
                is_original=True,
                status=data.get("status") or TranslationStatus.draft.value,
            )
            self._session.add(translation)
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error creating %s: %s", self.entity_name, message)
            return MutationResult.fail(message)

        logger.info("%s created: group=%s translation=%s", self.entity_name, group.id, translation.id)
        return MutationResult.ok(id=translation.id, slug=translation.slug, group_id=group.id)

    async def translate_from(self, source_identifier: str, data: dict[str, Any]) -> MutationResult:
        """Add a translation in another language to the source's group."""
        source = await self.find_by_identifier(source_identifier)
        if source is None:
            return MutationResult.fail(f"{self.entity_name} not found", FailureKind.NOT_FOUND)

        group_id = getattr(source, self.group_fk)
        if group_id is None:
            return MutationResult.fail(
                f"{self.entity_name} has no translation group to translate from", FailureKind.VALIDATION
            )

        _, translation_fields = self._split_fields(data)
        language = translation_fields.get("language")
        if not language:
            return MutationResult.fail("A target language is required", FailureKind.VALIDATION)
        if not translation_fields.get("slug"):
            translation_fields["slug"] = slugify(translation_fields.get(self.title_field), self.entity_name)

        siblings = await self.list_siblings(group_id)
        if any(s["language"] == language for s in siblings):
            return MutationResult.fail(
                f"{self.entity_name} already has a '{language}' translation", FailureKind.VALIDATION
            )

        translation = self.translation_model(
            **translation_fields,
            **{self.group_fk: group_id},
            is_original=False,
            status=TranslationStatus.draft.value,
        )
        try:
            self._session.add(translation)
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error translating %s %s: %s", self.entity_name, source_identifier, message)
            return MutationResult.fail(message)

        logger.info("%s translated: group=%s language=%s", self.entity_name, group_id, language)
        return MutationResult.ok(id=translation.id, slug=translation.slug, group_id=group_id)

    async def update(self, identifier: str, data: dict[str, Any]) -> MutationResult:
        """Partial update. Shared metadata is written to the group when there is one."""
        translation = await self.find_by_identifier(identifier)
        if translation is None:
            return MutationResult.fail(f"{self.entity_name} not found", FailureKind.NOT_FOUND)

        group_fields, translation_fields = self._split_fields(data)
        required = {c.key for c in self.translation_model.__table__.columns if not c.nullable} | {"language"}
        translation_fields = {k: v for k, v in translation_fields.items() if v is not None or k not in required}

        language = translation_fields.get("language")
        group_id = getattr(translation, self.group_fk)
        if language and language != translation.language and group_id is not None:
            siblings = await self.list_siblings(group_id)
            if any(s["language"] == language and s["id"] != translation.id for s in siblings):
                return MutationResult.fail(
                    f"{self.entity_name} already has a '{language}' translation", FailureKind.VALIDATION
                )

        group = translation.group
        for key, value in group_fields.items():
            if group is not None:
                setattr(group, key, value)
            elif hasattr(self.translation_model, key):
                setattr(translation, key, value)
        for key, value in translation_fields.items():
            setattr(translation, key, value)

        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error updating %s %s: %s", self.entity_name, identifier, message)
            return MutationResult.fail(message)

        logger.info("%s updated: %s", self.entity_name, translation.id)
        return MutationResult.ok(id=translation.id, slug=translation.slug)

    async def change_status(self, identifier: str, target: str) -> MutationResult:
        translation = await self.find_by_identifier(identifier)
        if translation is None:
            return MutationResult.fail(f"{self.entity_name} not found", FailureKind.NOT_FOUND)

        current = (translation.status or TranslationStatus.draft.value).lower()
        target = target.lower()
        if target != current and target not in STATUS_TRANSITIONS.get(current, frozenset()):
            return MutationResult.fail(
                f"Cannot transition {self.entity_name} from '{current}' to '{target}'", FailureKind.VALIDATION
            )

        translation.status = target
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error changing %s %s status: %s", self.entity_name, identifier, message)
            return MutationResult.fail(message)

        logger.info("%s %s status: %s -> %s", self.entity_name, translation.id, current, target)
        return MutationResult.ok(id=translation.id, slug=translation.slug, status=target)

    async def delete(self, identifier: str) -> MutationResult:
        """Delete one translation. The group row is left in place."""
        translation = await self.find_by_identifier(identifier)
        if translation is None:
            return MutationResult.fail(f"{self.entity_name} not found", FailureKind.NOT_FOUND)

        group_id = getattr(translation, self.group_fk)
        slug = translation.slug
        try:
            await self._session.delete(translation)
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error deleting %s %s: %s", self.entity_name, identifier, message)
            return MutationResult.fail(message)

        if group_id is not None and not await self.list_siblings(group_id):
            logger.warning("%s group %s has no translations left", self.entity_name, group_id)
        logger.info("%s deleted: %s", self.entity_name, identifier)
        return MutationResult.ok(slug=slug, group_id=group_id)

    async def set_associations(self, identifier: str, kind: str, values: Sequence[Any]) -> MutationResult:
        """Replace the association ids of ``kind`` in the scope reads use."""
        translation = await self.find_by_identifier(identifier)
        if translation is None:
            return MutationResult.fail(f"{self.entity_name} not found", FailureKind.NOT_FOUND)

        spec = self.association(kind)
        scope = self._association_scope(translation, spec)
        if scope is None:
            return MutationResult.fail(f"{self.entity_name} cannot store {kind}", FailureKind.VALIDATION)
        model, fk, scope_id = scope
        try:
            values = _unique(_coerce(model.__table__.c[spec.value_column], values))
        except (TypeError, ValueError):
            return MutationResult.fail(f"Invalid {kind} ids", FailureKind.VALIDATION)

        try:
            await self._session.execute(delete(model).where(getattr(model, fk) == scope_id))
            for position, value in enumerate(values):
                row = {fk: scope_id, spec.value_column: value}
                if spec.order_column:
                    row[spec.order_column] = position
                self._session.add(model(**row))
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error saving %s %s for %s: %s", self.entity_name, kind, identifier, message)
            return MutationResult.fail(message)

        return MutationResult.ok(**{kind: values})

    # ── Serialization ────────────────────────────────────────────────────────

    @staticmethod
    def apply_boundary_defaults(row: dict[str, Any]) -> dict[str, Any]:
        """Defaults for partially migrated rows; applied on read, never stored."""
        if not row.get("language"):
            row["language"] = settings.primary_language
        if not row.get("status"):
            row["status"] = TranslationStatus.draft.value
        if row.get("is_original") is None:
            row["is_original"] = True
        return row

    def row_to_dict(self, translation: Any) -> dict[str, Any]:
        row = {column.key: getattr(translation, column.key) for column in self.translation_model.__table__.columns}
        return self.apply_boundary_defaults(row)


def _unique(values: Iterable[Any]) -> list[Any]:
    seen: list[Any] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


def _coerce(column: Any, values: Iterable[Any]) -> list[Any]:
    """Convert JSON ids (strings for UUIDs) to the column's Python type."""
    python_type = column.type.python_type
    if python_type is uuid.UUID:
        return [v if isinstance(v, uuid.UUID) else uuid.UUID(str(v)) for v in values]
    return [v if isinstance(v, python_type) else python_type(v) for v in values]
