"""
Content Routes

One router per translation-grouped content type (articles, fatawa,
individuals, themes, timelines), all built from the same endpoint set.
Themes and timelines additionally expose their ordered article events.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from editorial.database import get_db
from editorial.exceptions import ResourceNotFoundError
from editorial.repositories import (
    ArticleRepository,
    FatwaRepository,
    IndividualRepository,
    ThemeRepository,
    TimelineRepository,
)
from editorial.repositories._base_repo import TranslationGroupRepository
from editorial.routes._helpers import require, unwrap
from editorial.schemas.common import AssociationUpdate, StatusChange
from editorial.schemas.content import (
    ArticleCreate,
    ArticleUpdate,
    FatwaCreate,
    FatwaUpdate,
    IndividualCreate,
    IndividualUpdate,
    ThemeCreate,
    ThemeUpdate,
    TimelineCreate,
    TimelineUpdate,
)
from editorial.schemas.events import EventArticleCreate, EventCreate, EventParentUpdate, EventReorder
from editorial.services.event_service import THEME_EVENTS, TIMELINE_EVENTS, EventScope, EventService
from editorial.services.revalidation_service import revalidate_entity

logger = logging.getLogger(__name__)


def build_content_router(
    repository_class: type[TranslationGroupRepository],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    event_scope: EventScope | None = None,
) -> APIRouter:
    router = APIRouter()
    entity = repository_class.entity_name
    resource = entity.capitalize()

    def get_repository(db: AsyncSession = Depends(get_db)) -> TranslationGroupRepository:
        return repository_class(db)

    def check_kind(repo: TranslationGroupRepository, kind: str) -> None:
        if kind not in {spec.kind for spec in repo.associations}:
            raise ResourceNotFoundError(f"{resource} association", kind)

    # ============== Reads ==============

    @router.get("")
    async def list_items(
        language: Optional[str] = Query(None, description="Only translations in this language"),
        repo: TranslationGroupRepository = Depends(get_repository),
    ):
        return await repo.list_all(language)

    @router.get("/{identifier}")
    async def get_item(identifier: str, repo: TranslationGroupRepository = Depends(get_repository)):
        """Translation by UUID or slug, merged with its group metadata."""
        return require(await repo.get(identifier), resource, identifier)

    @router.get("/{identifier}/translations")
    async def list_translations(identifier: str, repo: TranslationGroupRepository = Depends(get_repository)):
        """All language versions in the item's group, the original first."""
        translation = require(await repo.find_by_identifier(identifier), resource, identifier)
        return await repo.list_siblings(getattr(translation, repo.group_fk))

    @router.get("/{identifier}/group")
    async def get_translation_group(identifier: str, repo: TranslationGroupRepository = Depends(get_repository)):
        translation = require(await repo.find_by_identifier(identifier), resource, identifier)
        group_id = getattr(translation, repo.group_fk)
        metadata = require(await repo.get_group_metadata(group_id), f"{resource} group", group_id)
        return {"group": metadata, "translations": await repo.list_siblings(group_id)}

    @router.get("/{identifier}/associations/{kind}")
    async def get_associations(identifier: str, kind: str, repo: TranslationGroupRepository = Depends(get_repository)):
        check_kind(repo, kind)
        translation = require(await repo.find_by_identifier(identifier), resource, identifier)
        return await repo.resolve_associations(translation, kind)

    # ============== Writes ==============

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_item(
        payload: create_schema,
        background_tasks: BackgroundTasks,
        repo: TranslationGroupRepository = Depends(get_repository),
    ):
        body = unwrap(await repo.create(payload.to_data()), resource, operation=f"create {entity}")
        background_tasks.add_task(revalidate_entity, entity, body["data"]["slug"])
        return body

    @router.post("/{identifier}/translations", status_code=status.HTTP_201_CREATED)
    async def translate_item(
        identifier: str,
        payload: create_schema,
        background_tasks: BackgroundTasks,
        repo: TranslationGroupRepository = Depends(get_repository),
    ):
        """Add a new language version to the identified item's group."""
        result = await repo.translate_from(identifier, payload.to_data())
        body = unwrap(result, resource, identifier, operation=f"translate {entity}")
        background_tasks.add_task(revalidate_entity, entity, body["data"]["slug"])
        return body

    @router.patch("/{identifier}")
    async def update_item(
        identifier: str,
        payload: update_schema,
        background_tasks: BackgroundTasks,
        repo: TranslationGroupRepository = Depends(get_repository),
    ):
        body = unwrap(await repo.update(identifier, payload.to_data()), resource, identifier, f"update {entity}")
        background_tasks.add_task(revalidate_entity, entity, body["data"]["slug"])
        return body

    @router.post("/{identifier}/status")
    async def change_status(
        identifier: str,
        payload: StatusChange,
        background_tasks: BackgroundTasks,
        repo: TranslationGroupRepository = Depends(get_repository),
    ):
        result = await repo.change_status(identifier, payload.status.value)
        body = unwrap(result, resource, identifier, f"change {entity} status")
        background_tasks.add_task(revalidate_entity, entity, body["data"]["slug"])
        return body

    @router.delete("/{identifier}")
    async def delete_item(
        identifier: str,
        background_tasks: BackgroundTasks,
        repo: TranslationGroupRepository = Depends(get_repository),
    ):
        body = unwrap(await repo.delete(identifier), resource, identifier, f"delete {entity}")
        background_tasks.add_task(revalidate_entity, entity, body["data"]["slug"])
        return body

    @router.put("/{identifier}/associations/{kind}")
    async def set_associations(
        identifier: str,
        kind: str,
        payload: AssociationUpdate,
        repo: TranslationGroupRepository = Depends(get_repository),
    ):
        check_kind(repo, kind)
        return unwrap(await repo.set_associations(identifier, kind, payload.ids), resource, identifier)

    if event_scope is not None:
        _add_event_routes(router, event_scope, resource, get_repository)

    return router


def _add_event_routes(router: APIRouter, scope: EventScope, resource: str, get_repository) -> None:
    async def owner_id(identifier: str, repo: TranslationGroupRepository) -> UUID:
        translation = require(await repo.find_by_identifier(identifier), resource, identifier)
        return translation.id

    def get_service(db: AsyncSession = Depends(get_db)) -> EventService:
        return EventService(db, scope)

    @router.get("/{identifier}/events")
    async def list_events(
        identifier: str,
        nested: bool = Query(False, description="Return a two-level tree instead of a flat list"),
        repo: TranslationGroupRepository = Depends(get_repository),
        service: EventService = Depends(get_service),
    ):
        owner = await owner_id(identifier, repo)
        if nested:
            return await service.list_nested_events(owner)
        return await service.list_events(owner)

    @router.post("/{identifier}/events", status_code=status.HTTP_201_CREATED)
    async def add_event(
        identifier: str,
        payload: EventCreate,
        repo: TranslationGroupRepository = Depends(get_repository),
        service: EventService = Depends(get_service),
    ):
        owner = await owner_id(identifier, repo)
        fields = payload.model_dump(exclude={"article_id"})
        return unwrap(await service.add_event(owner, payload.article_id, **fields), f"{resource} event")

    @router.post("/{identifier}/events/articles", status_code=status.HTTP_201_CREATED)
    async def create_event_article(
        identifier: str,
        payload: EventArticleCreate,
        background_tasks: BackgroundTasks,
        repo: TranslationGroupRepository = Depends(get_repository),
        service: EventService = Depends(get_service),
    ):
        """Create a draft article and append it to this item's events."""
        owner = await owner_id(identifier, repo)
        body = unwrap(await service.create_article(owner, payload.model_dump()), resource, identifier)
        background_tasks.add_task(revalidate_entity, "article", body["data"]["slug"])
        background_tasks.add_task(revalidate_entity, scope.name, identifier)
        return body

    @router.put("/{identifier}/events/order")
    async def reorder_events(
        identifier: str,
        payload: EventReorder,
        repo: TranslationGroupRepository = Depends(get_repository),
        service: EventService = Depends(get_service),
    ):
        owner = await owner_id(identifier, repo)
        items = [item.model_dump() for item in payload.items]
        return unwrap(await service.reorder(owner, items), f"{resource} event")

    @router.delete("/{identifier}/events/{article_id}")
    async def remove_event(
        identifier: str,
        article_id: UUID,
        repo: TranslationGroupRepository = Depends(get_repository),
        service: EventService = Depends(get_service),
    ):
        owner = await owner_id(identifier, repo)
        return unwrap(await service.remove_event(owner, article_id), f"{resource} event", article_id)

    if scope.nested:

        @router.patch("/{identifier}/events/{event_id}/parent")
        async def set_event_parent(
            identifier: str,
            event_id: UUID,
            payload: EventParentUpdate,
            repo: TranslationGroupRepository = Depends(get_repository),
            service: EventService = Depends(get_service),
        ):
            owner = await owner_id(identifier, repo)
            result = await service.set_parent(owner, event_id, payload.parent_id)
            return unwrap(result, f"{resource} event", event_id)


articles_router = build_content_router(ArticleRepository, ArticleCreate, ArticleUpdate)
fatawa_router = build_content_router(FatwaRepository, FatwaCreate, FatwaUpdate)
individuals_router = build_content_router(IndividualRepository, IndividualCreate, IndividualUpdate)
themes_router = build_content_router(ThemeRepository, ThemeCreate, ThemeUpdate, THEME_EVENTS)
timelines_router = build_content_router(TimelineRepository, TimelineCreate, TimelineUpdate, TIMELINE_EVENTS)
