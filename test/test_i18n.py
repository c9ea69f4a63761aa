"""
Tests for locale helpers and the languages endpoint
"""

from fastapi.testclient import TestClient

from editorial.config import settings
from editorial.i18n import get_language_info, is_rtl_locale, language_with_flag, localized_name
from editorial.routes import i18n


class TestLocaleHelpers:
    """Test pure locale helpers"""

    def test_rtl(self):
        assert is_rtl_locale("ar") is True
        assert is_rtl_locale("ar-SA") is True
        assert is_rtl_locale("fr") is False

    def test_language_with_flag(self):
        assert language_with_flag("fr", "Français") == "🇫🇷 Français"
        assert language_with_flag("xx", "Unknown") == "Unknown"

    def test_language_info(self):
        info = get_language_info("ar")
        assert info["name"] == "العربية"
        assert info["is_rtl"] is True

    def test_unknown_language_info(self):
        assert get_language_info("sw")["name"] == "sw"


class TestLocalizedName:
    """Test the display-name fallback chain"""

    translations = [{"language": "ar", "name": "فقه"}, {"language": "en", "name": "Jurisprudence"}]

    def test_requested_locale(self):
        assert localized_name(self.translations, "en", "ar", "fiqh") == "Jurisprudence"

    def test_primary_language(self):
        assert localized_name(self.translations, "fr", "ar", "fiqh") == "فقه"

    def test_default(self):
        assert localized_name([], "fr", "ar", "fiqh") == "fiqh"

    def test_blank_names_skipped(self):
        assert localized_name([{"language": "en", "name": ""}], "en", "ar", "fiqh") == "fiqh"


class TestLanguagesRoute:
    """Test GET /api/v1/i18n/languages"""

    def test_primary_first(self, make_app, monkeypatch):
        monkeypatch.setattr(settings, "primary_language", "fr")
        monkeypatch.setattr(settings, "supported_languages", ["ar", "en", "fr"])

        with TestClient(make_app((i18n.router, "/api/v1/i18n"))) as client:
            response = client.get("/api/v1/i18n/languages")

        body = response.json()
        assert body["primary"] == "fr"
        assert [lang["code"] for lang in body["languages"]] == ["fr", "ar", "en"]
