"""
Tests for the honorifics catalogue and SVG loading
"""

from fastapi.testclient import TestClient

from editorial.routes import honorifics
from editorial.services.honorific_service import (
    HONORIFIC_CATEGORIES,
    HONORIFICS,
    HonorificAssets,
    get_honorifics_by_category,
    is_valid_honorific,
)

SVG = '<svg xmlns="http://www.w3.org/2000/svg"><text>ﷺ</text></svg>'


class TestCatalogue:
    """Test the fixed honorific set"""

    def test_twenty_one_keys(self):
        assert len(HONORIFICS) == 21

    def test_every_category_is_known(self):
        assert {h.category for h in HONORIFICS.values()} == set(HONORIFIC_CATEGORIES)

    def test_lookup(self):
        assert is_valid_honorific("sas") is True
        assert is_valid_honorific("../etc/passwd") is False
        assert [key for key, _ in get_honorifics_by_category("prophet")] == ["sas", "asws"]


class TestHonorificAssets:
    """Test SVG loading and caching"""

    def test_unknown_key_never_touches_disk(self, tmp_path):
        (tmp_path / "unknown.svg").write_text(SVG, encoding="utf-8")
        assets = HonorificAssets(tmp_path)

        assert assets.get_svg("unknown") is None
        assert len(assets) == 0

    def test_loads_and_caches(self, tmp_path):
        path = tmp_path / "sas.svg"
        path.write_text(SVG, encoding="utf-8")
        assets = HonorificAssets(tmp_path)

        assert assets.get_svg("sas") == SVG
        path.unlink()
        assert assets.get_svg("sas") == SVG
        assert len(assets) == 1

    def test_missing_file(self, tmp_path):
        assert HonorificAssets(tmp_path).get_svg("swt") is None

    def test_directory_in_place_of_file(self, tmp_path):
        (tmp_path / "swt.svg").mkdir()
        assert HonorificAssets(tmp_path).get_svg("swt") is None

    def test_undecodable_file(self, tmp_path):
        (tmp_path / "swt.svg").write_bytes(b"\xff\xfe<svg/>")
        assets = HonorificAssets(tmp_path)

        assert assets.get_svg("swt") is None
        assert len(assets) == 0

    def test_clear(self, tmp_path):
        (tmp_path / "as.svg").write_text(SVG, encoding="utf-8")
        assets = HonorificAssets(tmp_path)
        assets.get_svg("as")

        assets.clear()

        assert len(assets) == 0


class TestHonorificRoutes:
    """Test /api/honorifics"""

    def test_list(self, make_app):
        with TestClient(make_app((honorifics.router, "/api/honorifics"))) as client:
            response = client.get("/api/honorifics")

        assert response.status_code == 200
        assert len(response.json()["honorifics"]) == 21

    def test_svg(self, make_app, tmp_path, monkeypatch):
        (tmp_path / "radu.svg").write_text(SVG, encoding="utf-8")
        monkeypatch.setattr(honorifics, "honorific_assets", HonorificAssets(tmp_path))

        with TestClient(make_app((honorifics.router, "/api/honorifics"))) as client:
            response = client.get("/api/honorifics/radu")
            missing = client.get("/api/honorifics/nope")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text == SVG
        assert missing.status_code == 404
        assert missing.json()["error"]["error_code"] == "RESOURCE_NOT_FOUND"
