"""
Tests for listing the translations of a group
"""

import uuid

from sqlalchemy import insert

from editorial.models import ArticleTranslation
from editorial.repositories import ArticleRepository, TimelineRepository


class TestListSiblings:
    """Test sibling listing and ordering"""

    async def test_no_group(self, db):
        repo = ArticleRepository(db)
        assert await repo.list_siblings(None) == []
        assert await repo.list_siblings("") == []

    async def test_original_first_then_language(self, db, article_group):
        group, _ = await article_group(
            [
                {"title": "Hijra", "slug": "hijra-en", "language": "en", "is_original": False},
                {"title": "Hégire", "slug": "hegire", "language": "fr", "is_original": True},
                {"title": "الهجرة", "slug": "al-hijra", "language": "ar", "is_original": False},
            ]
        )

        siblings = await ArticleRepository(db).list_siblings(group.id)

        assert [s["language"] for s in siblings] == ["fr", "ar", "en"]
        assert siblings[0]["is_original"] is True
        assert set(siblings[0]) == {"id", "title", "slug", "language", "is_original", "status"}

    async def test_boundary_defaults(self, db, article_group):
        """Partially migrated rows read with the primary language, draft, original"""
        group, _ = await article_group([{"title": "Typed", "slug": "typed", "language": "en", "is_original": False}])
        await db.execute(
            insert(ArticleTranslation).values(
                id=uuid.uuid4(),
                article_id=group.id,
                title="Untagged",
                slug="untagged",
                language=None,
                status=None,
                is_original=None,
            )
        )
        await db.commit()

        siblings = await ArticleRepository(db).list_siblings(group.id)

        untagged = siblings[0]
        assert untagged["slug"] == "untagged"
        assert untagged["language"] == "ar"
        assert untagged["status"] == "draft"
        assert untagged["is_original"] is True
        assert siblings[1]["slug"] == "typed"

    async def test_defaults_are_not_stored(self, db, article_group):
        group, _ = await article_group([{"title": "Stored", "slug": "stored"}])
        row_id = uuid.uuid4()
        await db.execute(
            insert(ArticleTranslation).values(id=row_id, article_id=group.id, title="Null", slug="null", language=None)
        )
        await db.commit()

        await ArticleRepository(db).list_siblings(group.id)

        result = await db.execute(
            ArticleTranslation.__table__.select().where(ArticleTranslation.__table__.c.id == row_id)
        )
        assert result.first().language is None

    async def test_other_groups_excluded(self, db):
        repo = TimelineRepository(db)
        first = await repo.create({"title": "Makkan period"})
        await repo.create({"title": "Madinan period"})

        siblings = await repo.list_siblings(first.data["group_id"])

        assert [s["title"] for s in siblings] == ["Makkan period"]
