"""
Tests for content routes

Tests the article and theme endpoints with database integration.
"""

import pytest
from fastapi.testclient import TestClient

from editorial.routes import articles_router, themes_router


@pytest.fixture(scope="function")
def client(make_app):
    """Create test client with database dependency override"""
    test_app = make_app((articles_router, "/api/v1/articles"), (themes_router, "/api/v1/themes"))
    with TestClient(test_app) as client:
        yield client


def _create_article(client, **fields):
    payload = {"title": "The Battle of Badr", "slug": "badr", **fields}
    response = client.post("/api/v1/articles", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


class TestArticleReads:
    """Test article read endpoints"""

    def test_get_missing(self, client):
        response = client.get("/api/v1/articles/missing")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["error_code"] == "RESOURCE_NOT_FOUND"
        assert error["message"] == "Article 'missing' not found"

    def test_get_new_is_404(self, client):
        assert client.get("/api/v1/articles/new").status_code == 404

    def test_create_and_get(self, client):
        created = _create_article(client, category_id=3, image_url="badr.png")

        by_slug = client.get("/api/v1/articles/badr").json()
        by_id = client.get(f"/api/v1/articles/{created['id'].upper()}").json()

        assert by_slug["id"] == created["id"]
        assert by_id["slug"] == "badr"
        assert by_slug["category_id"] == 3
        assert by_slug["image_url"] == "badr.png"
        assert by_slug["article_id"] == created["group_id"]
        assert by_slug["is_original"] is True
        assert by_slug["is_published"] is False

    def test_list(self, client):
        _create_article(client)
        _create_article(client, title="Uhud", slug="uhud", language="en")

        assert len(client.get("/api/v1/articles").json()) == 2
        assert [a["slug"] for a in client.get("/api/v1/articles?language=en").json()] == ["uhud"]

    def test_translations_and_group(self, client):
        created = _create_article(client, category_id=1)
        response = client.post(
            "/api/v1/articles/badr/translations", json={"title": "Bataille de Badr", "slug": "badr", "language": "fr"}
        )
        assert response.status_code == 201

        translations = client.get("/api/v1/articles/badr/translations")
        assert translations.status_code == 404  # "badr" is now ambiguous across languages

        siblings = client.get(f"/api/v1/articles/{created['id']}/translations").json()
        assert [s["language"] for s in siblings] == ["ar", "fr"]
        assert siblings[0]["is_original"] is True

        group = client.get(f"/api/v1/articles/{created['id']}/group").json()
        assert group["group"]["id"] == created["group_id"]
        assert group["group"]["category_id"] == 1
        assert group["group"]["tags"] == []
        assert len(group["translations"]) == 2

    def test_translate_duplicate_language(self, client):
        _create_article(client)

        response = client.post("/api/v1/articles/badr/translations", json={"title": "Again", "language": "ar"})

        assert response.status_code == 400
        assert response.json()["error"]["error_code"] == "VALIDATION_FAILED"


class TestArticleWrites:
    """Test article write endpoints"""

    def test_create_requires_title(self, client):
        response = client.post("/api/v1/articles", json={"slug": "x"})
        assert response.status_code == 422

    def test_update(self, client):
        _create_article(client)

        response = client.patch("/api/v1/articles/badr", json={"summary": "First battle", "category_id": 4})

        assert response.status_code == 200
        article = client.get("/api/v1/articles/badr").json()
        assert article["summary"] == "First battle"
        assert article["category_id"] == 4
        assert article["title"] == "The Battle of Badr"

    def test_status_transitions(self, client):
        _create_article(client)

        published = client.post("/api/v1/articles/badr/status", json={"status": "published"})
        archived = client.post("/api/v1/articles/badr/status", json={"status": "archived"})
        bogus = client.post("/api/v1/articles/badr/status", json={"status": "deleted"})

        assert published.status_code == 200
        assert client.get("/api/v1/articles/badr").json()["is_published"] is True
        assert archived.status_code == 400
        assert bogus.status_code == 422

    def test_delete(self, client):
        _create_article(client)

        response = client.delete("/api/v1/articles/badr")

        assert response.status_code == 200
        assert client.get("/api/v1/articles/badr").status_code == 404
        assert client.delete("/api/v1/articles/badr").status_code == 404

    def test_associations(self, client):
        _create_article(client)

        put = client.put("/api/v1/articles/badr/associations/tags", json={"ids": [2, 1]})
        tags = client.get("/api/v1/articles/badr/associations/tags").json()

        assert put.status_code == 200
        assert sorted(tags) == [1, 2]
        assert client.get("/api/v1/articles/badr/associations/authors").status_code == 404

    def test_translators(self, client):
        _create_article(client)
        translator = "0b6f2c1e-5d3a-4f8b-9c7e-2a1d4e6f8b0c"

        put = client.put("/api/v1/articles/badr/associations/translators", json={"ids": [translator]})

        assert put.status_code == 200
        assert put.json()["data"]["translators"] == [translator]
        assert client.get("/api/v1/articles/badr/associations/translators").json() == [translator]

    def test_translators_malformed(self, client):
        _create_article(client)

        response = client.put("/api/v1/articles/badr/associations/translators", json={"ids": ["nope"]})

        assert response.status_code == 400

    def test_update_null_title_keeps_value(self, client):
        _create_article(client)

        response = client.patch("/api/v1/articles/badr", json={"title": None, "slug": None})

        assert response.status_code == 200
        assert client.get("/api/v1/articles/badr").json()["title"] == "The Battle of Badr"


class TestThemeEvents:
    """Test theme event endpoints"""

    def _theme(self, client):
        response = client.post("/api/v1/themes", json={"title": "Patience", "slug": "patience"})
        assert response.status_code == 201
        return response.json()["data"]

    def test_create_article_into_theme(self, client):
        self._theme(client)

        first = client.post("/api/v1/themes/patience/events/articles", json={"title": "Job"})
        second = client.post("/api/v1/themes/patience/events/articles", json={"title": "Jacob"})

        assert first.status_code == 201
        assert [first.json()["data"]["display_order"], second.json()["data"]["display_order"]] == [1, 2]
        events = client.get("/api/v1/themes/patience/events").json()
        assert [e["article"]["title"] for e in events] == ["Job", "Jacob"]

    def test_nested_listing(self, client):
        self._theme(client)
        client.post("/api/v1/themes/patience/events/articles", json={"title": "Job"})
        client.post("/api/v1/themes/patience/events/articles", json={"title": "Jacob"})
        parent, child = client.get("/api/v1/themes/patience/events").json()

        response = client.patch(
            f"/api/v1/themes/patience/events/{child['id']}/parent", json={"parent_id": parent["id"]}
        )

        assert response.status_code == 200
        tree = client.get("/api/v1/themes/patience/events?nested=true").json()
        assert len(tree) == 1
        assert tree[0]["children"][0]["id"] == child["id"]

    def test_events_of_missing_theme(self, client):
        assert client.get("/api/v1/themes/missing/events").status_code == 404

    def test_articles_have_no_events(self, client):
        _create_article(client)
        assert client.get("/api/v1/articles/badr/events").status_code == 404
