"""Media rows and their links to article translations."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from editorial.models import ArticleMedia, Media
from editorial.repositories._base_repo import BaseRepository
from editorial.repositories.results import MutationResult, is_unique_violation, storage_error_message

logger = logging.getLogger(__name__)


def media_to_dict(media: Media) -> dict[str, Any]:
    return {
        "id": media.id,
        "url": media.url,
        "file_name": media.file_name,
        "mime_type": media.mime_type,
        "size_bytes": media.size_bytes,
        "created_at": media.created_at,
    }


class MediaRepository(BaseRepository):
    async def create(self, url: str, file_name: str, mime_type: str | None = None, size_bytes: int | None = None):
        media = Media(url=url, file_name=file_name, mime_type=mime_type, size_bytes=size_bytes)
        try:
            self._session.add(media)
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error creating media %s: %s", file_name, message)
            return MutationResult.fail(message)
        return MutationResult.ok(**media_to_dict(media))

    async def list_all(self) -> list[dict[str, Any]]:
        try:
            result = await self._session.execute(select(Media).order_by(Media.created_at.desc()))
        except SQLAlchemyError as exc:
            logger.error("Error listing media: %s", storage_error_message(exc))
            return []
        return [media_to_dict(m) for m in result.scalars().all()]

    async def add_article_media(self, article_id: uuid.UUID, media_id: uuid.UUID) -> MutationResult:
        """Link a media item to an article translation.

        Linking an already linked pair is a success.
        """
        try:
            self._session.add(ArticleMedia(article_id=article_id, media_id=media_id))
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            if is_unique_violation(exc):
                logger.debug("Media %s already linked to article %s", media_id, article_id)
                return MutationResult.ok(article_id=article_id, media_id=media_id)
            message = storage_error_message(exc)
            logger.error("Error linking media %s to article %s: %s", media_id, article_id, message)
            return MutationResult.fail(message)
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error linking media %s to article %s: %s", media_id, article_id, message)
            return MutationResult.fail(message)
        return MutationResult.ok(article_id=article_id, media_id=media_id)

    async def list_article_media(self, article_id: uuid.UUID) -> list[dict[str, Any]]:
        stmt = (
            select(Media)
            .join(ArticleMedia, ArticleMedia.media_id == Media.id)
            .where(ArticleMedia.article_id == article_id)
            .order_by(Media.created_at)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Error fetching media of article %s: %s", article_id, storage_error_message(exc))
            return []
        return [media_to_dict(m) for m in result.scalars().all()]

    async def remove_article_media(self, article_id: uuid.UUID, media_id: uuid.UUID) -> MutationResult:
        stmt = delete(ArticleMedia).where(ArticleMedia.article_id == article_id, ArticleMedia.media_id == media_id)
        try:
            await self._session.execute(stmt)
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            message = storage_error_message(exc)
            logger.error("Error unlinking media %s from article %s: %s", media_id, article_id, message)
            return MutationResult.fail(message)
        return MutationResult.ok(article_id=article_id, media_id=media_id)
