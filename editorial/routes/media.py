from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from editorial.database import get_db
from editorial.repositories import MediaRepository
from editorial.routes._helpers import unwrap
from editorial.schemas.media import ArticleMediaLink, MediaCreate

router = APIRouter()


@router.get("")
async def list_media(db: AsyncSession = Depends(get_db)):
    return await MediaRepository(db).list_all()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_media(payload: MediaCreate, db: AsyncSession = Depends(get_db)):
    return unwrap(await MediaRepository(db).create(**payload.model_dump()), "Media", operation="create media")


@router.get("/articles/{article_id}")
async def list_article_media(article_id: UUID, db: AsyncSession = Depends(get_db)):
    return await MediaRepository(db).list_article_media(article_id)


@router.post("/articles/{article_id}")
async def add_article_media(article_id: UUID, payload: ArticleMediaLink, db: AsyncSession = Depends(get_db)):
    """Link media to an article translation; linking twice is not an error."""
    result = await MediaRepository(db).add_article_media(article_id, payload.media_id)
    return unwrap(result, "Article media", operation="link article media")


@router.delete("/articles/{article_id}/{media_id}")
async def remove_article_media(article_id: UUID, media_id: UUID, db: AsyncSession = Depends(get_db)):
    result = await MediaRepository(db).remove_article_media(article_id, media_id)
    return unwrap(result, "Article media", operation="unlink article media")
