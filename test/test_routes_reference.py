"""
Tests for taxonomy, media and image generator routes
"""

import pytest
from fastapi.testclient import TestClient

from editorial.routes import (
    categories_router,
    fatwa_classifications_router,
    images,
    media,
    tags_router,
    types_router,
)


@pytest.fixture(scope="function")
def client(make_app):
    test_app = make_app(
        (tags_router, "/api/v1/tags"),
        (types_router, "/api/v1/types"),
        (categories_router, "/api/v1/categories"),
        (fatwa_classifications_router, "/api/v1/fatwa-classifications"),
        (media.router, "/api/v1/media"),
        (images.router, "/api/v1/images"),
    )
    with TestClient(test_app) as client:
        yield client


class TestTagRoutes:
    """Test /api/v1/tags"""

    def test_create_translate_and_get(self, client):
        created = client.post("/api/v1/tags", json={"slug": "fiqh"})
        assert created.status_code == 201
        tag_id = created.json()["data"]["id"]

        upsert = client.put(
            f"/api/v1/tags/{tag_id}/translations",
            json={"translations": [{"language": "en", "name": " Jurisprudence "}, {"language": "ar", "name": "فقه"}]},
        )

        assert upsert.status_code == 200
        assert client.get("/api/v1/tags/fiqh?locale=en").json()["name"] == "Jurisprudence"
        assert client.get(f"/api/v1/tags/{tag_id}?locale=de").json()["name"] == "فقه"

    def test_blank_translations_rejected(self, client):
        tag_id = client.post("/api/v1/tags", json={"slug": "fiqh"}).json()["data"]["id"]

        response = client.put(f"/api/v1/tags/{tag_id}/translations", json={"translations": [{"language": "en", "name": ""}]})

        assert response.status_code == 400

    def test_duplicate_slug(self, client):
        client.post("/api/v1/tags", json={"slug": "fiqh"})
        assert client.post("/api/v1/tags", json={"slug": "fiqh"}).status_code == 400

    def test_missing(self, client):
        assert client.get("/api/v1/tags/404").status_code == 404
        assert client.delete("/api/v1/tags/nothing").status_code == 404

    def test_type_with_base_name(self, client):
        client.post("/api/v1/types", json={"slug": "scholar", "name": "Scholar"})
        assert client.get("/api/v1/types").json()[0]["name"] == "Scholar"


class TestFatwaClassificationRoutes:
    """Test /api/v1/fatwa-classifications"""

    def test_create_and_reorder(self, client):
        ids = [
            client.post("/api/v1/fatwa-classifications", json={"slug": s, "name": s.title()}).json()["data"]["id"]
            for s in ("worship", "family", "trade")
        ]

        response = client.put("/api/v1/fatwa-classifications/order", json={"ids": list(reversed(ids))})

        assert response.status_code == 200
        listed = client.get("/api/v1/fatwa-classifications").json()
        assert [c["slug"] for c in listed] == ["trade", "family", "worship"]

    def test_reorder_unknown(self, client):
        assert client.put("/api/v1/fatwa-classifications/order", json={"ids": [42]}).status_code == 404

    def test_create_with_translations_and_nested_list(self, client):
        book = client.post(
            "/api/v1/fatwa-classifications",
            json={
                "slug": "prayer",
                "translations": [
                    {"language": "ar", "name": "الصلاة", "description": "أحكام الصلاة"},
                    {"language": "en", "name": "Prayer"},
                ],
            },
        )
        book_id = book.json()["data"]["id"]
        chapter = client.post("/api/v1/fatwa-classifications", json={"slug": "times", "parent_id": book_id})

        assert book.status_code == 201
        assert book.json()["data"]["languages"] == ["ar", "en"]
        assert chapter.json()["data"]["parent_id"] == book_id
        tree = client.get("/api/v1/fatwa-classifications", params={"nested": True, "locale": "en"}).json()
        assert [(b["name"], [c["slug"] for c in b["children"]]) for b in tree] == [("Prayer", ["times"])]

    def test_three_levels_rejected(self, client):
        book_id = client.post("/api/v1/fatwa-classifications", json={"slug": "prayer"}).json()["data"]["id"]
        chapter_id = client.post(
            "/api/v1/fatwa-classifications", json={"slug": "times", "parent_id": book_id}
        ).json()["data"]["id"]

        response = client.post("/api/v1/fatwa-classifications", json={"slug": "fajr", "parent_id": chapter_id})

        assert response.status_code == 400

    def test_move_chapter(self, client):
        first = client.post("/api/v1/fatwa-classifications", json={"slug": "prayer"}).json()["data"]["id"]
        second = client.post("/api/v1/fatwa-classifications", json={"slug": "fasting"}).json()["data"]["id"]
        client.post("/api/v1/fatwa-classifications", json={"slug": "times", "parent_id": first})

        moved = client.patch("/api/v1/fatwa-classifications/times/parent", json={"parent_id": second})
        missing_parent = client.patch("/api/v1/fatwa-classifications/times/parent", json={"parent_id": 999})

        assert moved.status_code == 200
        assert client.get("/api/v1/fatwa-classifications/times").json()["parent_id"] == second
        assert missing_parent.status_code == 404

    def test_categories_empty(self, client):
        assert client.get("/api/v1/categories").json() == []


class TestMediaRoutes:
    """Test /api/v1/media"""

    def test_link_twice(self, client):
        media_id = client.post(
            "/api/v1/media", json={"url": "https://cdn.example.org/a.png", "file_name": "a.png"}
        ).json()["data"]["id"]
        article_id = "3f2b8c9e-1a4d-4e6f-9b2a-7c8d9e0f1a2b"

        first = client.post(f"/api/v1/media/articles/{article_id}", json={"media_id": media_id})
        second = client.post(f"/api/v1/media/articles/{article_id}", json={"media_id": media_id})

        assert first.status_code == 200
        assert second.status_code == 200
        assert len(client.get(f"/api/v1/media/articles/{article_id}").json()) == 1

        removed = client.delete(f"/api/v1/media/articles/{article_id}/{media_id}")
        assert removed.status_code == 200
        assert client.get(f"/api/v1/media/articles/{article_id}").json() == []


class TestImageRoutes:
    """Test /api/v1/images"""

    def test_options(self, client):
        body = client.get("/api/v1/images/options").json()
        assert len(body["models"]) == 4
        assert body["size_presets"][0]["name"] == "HD 16:9"

    def test_project_flow(self, client):
        project = client.post("/api/v1/images/projects", json={"name": "Banner", "width": 1600, "height": 900})
        assert project.status_code == 201
        project_id = project.json()["data"]["id"]

        saved = client.post(
            f"/api/v1/images/projects/{project_id}/generations",
            json={"image_url": "https://cdn.example.org/g1.png", "file_name": "g1.png", "prompt": "dunes", "model": "nano-banana"},
        )
        client.post(
            f"/api/v1/images/projects/{project_id}/generations",
            json={"image_url": "https://cdn.example.org/g2.png", "file_name": "g2.png", "prompt": "dunes", "model": "nano-banana"},
        )
        first_generation = saved.json()["data"]["generation_id"]

        selected = client.post(f"/api/v1/images/projects/{project_id}/select", json={"generation_id": first_generation})

        assert selected.status_code == 200
        assert client.get(f"/api/v1/images/projects/{project_id}").json()["background_image_url"].endswith("g1.png")
        assert len(client.get(f"/api/v1/images/projects/{project_id}/generations").json()) == 2

    def test_generations_of_missing_project(self, client):
        response = client.get("/api/v1/images/projects/3f2b8c9e-1a4d-4e6f-9b2a-7c8d9e0f1a2b/generations")
        assert response.status_code == 404
