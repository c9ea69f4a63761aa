"""
Taxonomy Routes

Tags, individual types, classifications, categories and fatwa
classifications.
"""

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from editorial.database import get_db
from editorial.repositories import (
    CategoryRepository,
    ClassificationRepository,
    FatwaClassificationRepository,
    TagRepository,
    TypeRepository,
)
from editorial.repositories.taxonomy import TaxonomyRepository
from editorial.routes._helpers import require, unwrap
from editorial.schemas.taxonomy import (
    ClassificationParent,
    ClassificationReorder,
    TaxonomyCreate,
    TranslationsUpsert,
)
from editorial.services.revalidation_service import revalidate_taxonomy


def build_taxonomy_router(repository_class: type[TaxonomyRepository]) -> APIRouter:
    router = APIRouter()
    kind = repository_class.entity_name
    resource = kind.replace("_", " ").capitalize()

    def get_repository(db: AsyncSession = Depends(get_db)) -> TaxonomyRepository:
        return repository_class(db)

    @router.get("")
    async def list_items(
        locale: Optional[str] = Query(None, description="Language for the display name"),
        nested: bool = Query(False, description="Nest children under their parent"),
        repo: TaxonomyRepository = Depends(get_repository),
    ):
        if nested:
            return await repo.list_tree(locale)
        return await repo.list_all(locale)

    @router.get("/{identifier}")
    async def get_item(
        identifier: str,
        locale: Optional[str] = Query(None),
        repo: TaxonomyRepository = Depends(get_repository),
    ):
        """Lookup by numeric id or slug."""
        return require(await repo.get(identifier, locale), resource, identifier)

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_item(
        payload: TaxonomyCreate,
        background_tasks: BackgroundTasks,
        repo: TaxonomyRepository = Depends(get_repository),
    ):
        """Create an entry, with its per-language names when any are given."""
        data = payload.model_dump(exclude_none=True, exclude={"translations"})
        result = await repo.create(data)
        body = unwrap(result, resource, operation=f"create {kind}")
        entries = [entry.model_dump() for entry in payload.translations if (entry.name or "").strip()]
        if entries:
            saved = unwrap(await repo.upsert_translations(result.data["id"], entries), resource, result.data["id"])
            body["data"]["languages"] = saved["data"]["languages"]
        background_tasks.add_task(revalidate_taxonomy, kind)
        return body

    @router.put("/{identifier}/translations")
    async def upsert_translations(
        identifier: str,
        payload: TranslationsUpsert,
        background_tasks: BackgroundTasks,
        repo: TaxonomyRepository = Depends(get_repository),
    ):
        row = require(await repo.find_by_identifier(identifier), resource, identifier)
        entries = [entry.model_dump() for entry in payload.translations]
        body = unwrap(await repo.upsert_translations(row.id, entries), resource, identifier)
        background_tasks.add_task(revalidate_taxonomy, kind)
        return body

    @router.delete("/{identifier}")
    async def delete_item(
        identifier: str,
        background_tasks: BackgroundTasks,
        repo: TaxonomyRepository = Depends(get_repository),
    ):
        body = unwrap(await repo.delete(identifier), resource, identifier, f"delete {kind}")
        background_tasks.add_task(revalidate_taxonomy, kind)
        return body

    return router


tags_router = build_taxonomy_router(TagRepository)
types_router = build_taxonomy_router(TypeRepository)
classifications_router = build_taxonomy_router(ClassificationRepository)
fatwa_classifications_router = build_taxonomy_router(FatwaClassificationRepository)

categories_router = APIRouter()


@categories_router.get("")
async def list_categories(db: AsyncSession = Depends(get_db)):
    return await CategoryRepository(db).list_all()


@fatwa_classifications_router.put("/order")
async def reorder_fatwa_classifications(
    payload: ClassificationReorder,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    """Reorder the chapters of one book, or the books themselves."""
    result = await FatwaClassificationRepository(db).reorder(payload.ids)
    body = unwrap(result, "Fatwa classification", operation="reorder fatwa classifications")
    background_tasks.add_task(revalidate_taxonomy, "fatwa_classification")
    return body


@fatwa_classifications_router.patch("/{identifier}/parent")
async def set_fatwa_classification_parent(
    identifier: str,
    payload: ClassificationParent,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    result = await FatwaClassificationRepository(db).set_parent(identifier, payload.parent_id)
    body = unwrap(result, "Fatwa classification", identifier, "move fatwa classification")
    background_tasks.add_task(revalidate_taxonomy, "fatwa_classification")
    return body
