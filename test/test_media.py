"""
Tests for media rows and article media links
"""

import uuid
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from editorial.models import ArticleMedia
from editorial.repositories import MediaRepository
from editorial.repositories.results import is_unique_violation


def _integrity_error(orig):
    return IntegrityError("INSERT INTO article_media ...", {}, orig)


class TestUniqueViolation:
    """Test unique-violation detection across drivers"""

    def test_postgres_sqlstate(self):
        assert is_unique_violation(_integrity_error(SimpleNamespace(pgcode="23505"))) is True
        assert is_unique_violation(_integrity_error(SimpleNamespace(sqlstate="23505"))) is True

    def test_sqlite_message(self):
        orig = Exception("UNIQUE constraint failed: article_media.article_id, article_media.media_id")
        assert is_unique_violation(_integrity_error(orig)) is True

    def test_other_integrity_errors(self):
        assert is_unique_violation(_integrity_error(SimpleNamespace(pgcode="23503"))) is False
        assert is_unique_violation(_integrity_error(Exception("NOT NULL constraint failed: media.url"))) is False


class TestArticleMedia:
    """Test linking media to article translations"""

    async def _media(self, db, name="cover.png"):
        result = await MediaRepository(db).create(url=f"https://cdn.example.org/{name}", file_name=name)
        return result.data["id"]

    async def test_link_and_list(self, db, legacy_article):
        article = await legacy_article()
        media_id = await self._media(db)
        repo = MediaRepository(db)

        assert (await repo.add_article_media(article.id, media_id)).success is True

        media = await repo.list_article_media(article.id)
        assert [m["id"] for m in media] == [media_id]

    async def test_linking_twice_is_success(self, db, legacy_article):
        article = await legacy_article()
        media_id = await self._media(db)
        repo = MediaRepository(db)
        await repo.add_article_media(article.id, media_id)

        result = await repo.add_article_media(article.id, media_id)

        assert result.success is True
        links = await db.execute(select(ArticleMedia).where(ArticleMedia.article_id == article.id))
        assert len(links.scalars().all()) == 1

    async def test_postgres_duplicate_is_success(self):
        session = MagicMock()
        session.commit = AsyncMock(side_effect=_integrity_error(SimpleNamespace(pgcode="23505")))
        session.rollback = AsyncMock()

        result = await MediaRepository(session).add_article_media(uuid.uuid4(), uuid.uuid4())

        assert result.success is True
        session.rollback.assert_awaited_once()

    async def test_other_integrity_error_fails(self):
        session = MagicMock()
        session.commit = AsyncMock(side_effect=_integrity_error(SimpleNamespace(pgcode="23503")))
        session.rollback = AsyncMock()

        result = await MediaRepository(session).add_article_media(uuid.uuid4(), uuid.uuid4())

        assert result.success is False

    async def test_unlink(self, db, legacy_article):
        article = await legacy_article()
        media_id = await self._media(db)
        repo = MediaRepository(db)
        await repo.add_article_media(article.id, media_id)

        assert (await repo.remove_article_media(article.id, media_id)).success is True
        assert await repo.list_article_media(article.id) == []

    async def test_list_all(self, db):
        await self._media(db, "a.png")
        await self._media(db, "b.png")
        assert {m["file_name"] for m in await MediaRepository(db).list_all()} == {"a.png", "b.png"}
