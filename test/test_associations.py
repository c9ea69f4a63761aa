"""
Tests for association resolution

The group-scoped table is authoritative for grouped translations; the
per-translation table is only read for rows without a group.
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from editorial.models import ArticleGroupTag, ArticleTag, ArticleTranslator, FatwaTag, FatwaTranslation
from editorial.repositories import ArticleRepository, FatwaRepository, ThemeRepository


class TestResolveAssociations:
    """Test reading association ids"""

    async def test_group_table_authoritative_even_when_empty(self, db, article_group):
        _, rows = await article_group([{"title": "Badr", "slug": "badr"}])
        db.add_all([ArticleTag(article_id=rows[0].id, tag_id=1), ArticleTag(article_id=rows[0].id, tag_id=2)])
        await db.commit()

        assert await ArticleRepository(db).get_associations("badr", "tags") == []

    async def test_group_tags(self, db, article_group):
        group, _ = await article_group([{"title": "Badr", "slug": "badr"}])
        db.add_all([ArticleGroupTag(article_id=group.id, tag_id=4), ArticleGroupTag(article_id=group.id, tag_id=2)])
        await db.commit()

        tags = await ArticleRepository(db).get_associations("badr", "tags")

        assert sorted(tags) == [2, 4]

    async def test_legacy_row_uses_translation_table(self, db, legacy_article):
        row = await legacy_article(slug="old")
        db.add(ArticleTag(article_id=row.id, tag_id=8))
        await db.commit()

        assert await ArticleRepository(db).get_associations("old", "tags") == [8]

    async def test_translators_are_ordered(self, db, article_group):
        _, rows = await article_group([{"title": "Uhud", "slug": "uhud"}])
        ids = [uuid.uuid4(), uuid.uuid4(), uuid.uuid4()]
        db.add_all(
            [
                ArticleTranslator(article_id=rows[0].id, individual_id=ids[0], display_order=2),
                ArticleTranslator(article_id=rows[0].id, individual_id=ids[1], display_order=0),
                ArticleTranslator(article_id=rows[0].id, individual_id=ids[2], display_order=1),
            ]
        )
        await db.commit()

        translators = await ArticleRepository(db).get_associations("uhud", "translators")

        assert translators == [ids[1], ids[2], ids[0]]

    async def test_unknown_identifier(self, db):
        assert await ArticleRepository(db).get_associations("nope", "tags") == []

    async def test_unknown_kind_raises(self, db):
        with pytest.raises(KeyError):
            ArticleRepository(db).association("authors")

    def test_no_association_tables(self):
        assert ThemeRepository(AsyncMock()).associations == ()

    async def test_storage_error_is_empty(self):
        session = AsyncMock()
        session.execute.side_effect = OperationalError("SELECT", {}, Exception("timeout"))
        repo = FatwaRepository(session)
        translation = MagicMock(fatwa_id=None, id=uuid.uuid4())

        assert await repo.resolve_associations(translation, "tags") == []


class TestSetAssociations:
    """Test replacing association ids"""

    async def test_writes_group_scope(self, db, article_group):
        group, rows = await article_group([{"title": "Hunayn", "slug": "hunayn"}])
        db.add(ArticleGroupTag(article_id=group.id, tag_id=99))
        await db.commit()

        result = await ArticleRepository(db).set_associations("hunayn", "tags", [5, 6, 5])

        assert result.success is True
        assert result.data["tags"] == [5, 6]
        stored = await db.execute(select(ArticleGroupTag.tag_id).where(ArticleGroupTag.article_id == group.id))
        assert sorted(stored.scalars().all()) == [5, 6]
        legacy = await db.execute(select(ArticleTag).where(ArticleTag.article_id == rows[0].id))
        assert legacy.scalars().all() == []

    async def test_writes_legacy_scope_without_group(self, db):
        row = FatwaTranslation(title="Legacy fatwa", slug="legacy-fatwa")
        db.add(row)
        await db.commit()

        result = await FatwaRepository(db).set_associations("legacy-fatwa", "tags", [1])

        assert result.success is True
        stored = await db.execute(select(FatwaTag.tag_id).where(FatwaTag.fatwa_id == row.id))
        assert stored.scalars().all() == [1]

    async def test_translator_order_follows_positions(self, db, article_group):
        await article_group([{"title": "Mutah", "slug": "mutah"}])
        ids = [uuid.uuid4(), uuid.uuid4()]
        repo = ArticleRepository(db)

        await repo.set_associations("mutah", "translators", [ids[1], ids[0]])

        assert await repo.get_associations("mutah", "translators") == [ids[1], ids[0]]

    async def test_string_ids_converted_to_column_type(self, db, article_group):
        await article_group([{"title": "Mutah", "slug": "mutah"}])
        translator = uuid.uuid4()
        repo = ArticleRepository(db)

        translators = await repo.set_associations("mutah", "translators", [str(translator)])
        tags = await repo.set_associations("mutah", "tags", ["3"])

        assert translators.success is True
        assert await repo.get_associations("mutah", "translators") == [translator]
        assert await repo.get_associations("mutah", "tags") == [3]
        assert tags.data["tags"] == [3]

    async def test_malformed_ids_rejected(self, db, article_group):
        await article_group([{"title": "Mutah", "slug": "mutah"}])

        result = await ArticleRepository(db).set_associations("mutah", "translators", ["not-a-uuid"])

        assert result.success is False
        assert result.kind.value == "validation"

    async def test_missing_translation(self, db):
        result = await ArticleRepository(db).set_associations("missing", "tags", [1])
        assert result.success is False
        assert result.kind.value == "not_found"
