"""
Pytest configuration and fixtures for the editorial admin tests

Every test gets a fresh in-memory SQLite schema; PostgreSQL-only paths
(upserts, unique violations) are exercised through their SQLite twins.
"""

import os
import sys

import pytest
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

import editorial.models  # noqa: E402, F401  (registers every table on Base.metadata)
from editorial.database import Base, get_db  # noqa: E402
from editorial.exception_handlers import register_exception_handlers  # noqa: E402
from editorial.models import Article, ArticleTranslation  # noqa: E402

# Test database URL (SQLite in-memory for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)
TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function", autouse=True)
async def setup_test_database():
    """Create a fresh database for each test function"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db():
    """Session on the test database"""
    async with TestSessionLocal() as session:
        yield session


@pytest.fixture
def session_factory():
    """For assertions that must not see the test session's identity map"""
    return TestSessionLocal


@pytest.fixture
def make_app():
    """Build a minimal app around some routers, wired to the test database"""

    def _make(*routers):
        test_app = FastAPI()
        for router, prefix in routers:
            test_app.include_router(router, prefix=prefix)
        register_exception_handlers(test_app)

        async def override_get_db():
            async with TestSessionLocal() as session:
                yield session

        test_app.dependency_overrides[get_db] = override_get_db
        return test_app

    return _make


@pytest.fixture
def article_group(db):
    """Insert an article group with the given translation rows"""

    async def _create(translations, **group_fields):
        group = Article(**group_fields)
        db.add(group)
        await db.flush()
        rows = [ArticleTranslation(article_id=group.id, **fields) for fields in translations]
        db.add_all(rows)
        await db.commit()
        return group, rows

    return _create


@pytest.fixture
def legacy_article(db):
    """Insert an article translation that has no group"""

    async def _create(**fields):
        fields.setdefault("title", "Legacy article")
        fields.setdefault("slug", "legacy-article")
        row = ArticleTranslation(**fields)
        db.add(row)
        await db.commit()
        return row

    return _create
