"""
Locale helpers for the editorial platform

Pure functions for language codes: RTL detection, display names with
flags, and the localized-name fallback used by taxonomy listings.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

# ── Constants ─────────────────────────────────────────────────────────────────

RTL_LOCALES: frozenset[str] = frozenset({"ar", "fa", "ur", "he"})

LANGUAGE_NAMES: dict[str, str] = {
    "ar": "العربية",
    "en": "English",
    "fr": "Français",
    "de": "Deutsch",
    "es": "Español",
    "it": "Italiano",
    "pt": "Português",
    "tr": "Türkçe",
    "ur": "اردو",
    "id": "Bahasa Indonesia",
    "ms": "Bahasa Melayu",
}

LOCALE_FLAGS: dict[str, str] = {
    "ar": "🇸🇦",
    "en": "🇬🇧",
    "fr": "🇫🇷",
    "de": "🇩🇪",
    "es": "🇪🇸",
    "it": "🇮🇹",
    "pt": "🇵🇹",
    "tr": "🇹🇷",
    "ur": "🇵🇰",
    "id": "🇮🇩",
    "ms": "🇲🇾",
}


# ── Public helpers ────────────────────────────────────────────────────────────


def is_rtl_locale(locale: str) -> bool:
    """Return True when the base language of ``locale`` is written right-to-left."""
    base = locale.split("-")[0].lower()
    return base in RTL_LOCALES


def language_with_flag(code: str, name: str) -> str:
    """Prefix ``name`` with the flag for ``code`` when one is known."""
    flag = LOCALE_FLAGS.get(code)
    return f"{flag} {name}" if flag else name


def get_language_info(locale: str) -> dict[str, str | bool]:
    """Return ``code``, ``name``, ``label`` and ``is_rtl`` for a locale code."""
    name = LANGUAGE_NAMES.get(locale, locale)
    return {
        "code": locale,
        "name": name,
        "label": language_with_flag(locale, name),
        "is_rtl": is_rtl_locale(locale),
    }


def localized_name(
    translations: Iterable[Mapping[str, object]],
    locale: str | None,
    primary_language: str,
    default: str,
) -> str:
    """Pick a display name from per-language translation rows.

    Fallback order: requested locale, then the primary language, then
    ``default`` (usually the entity slug).
    """
    by_language = {t["language"]: t["name"] for t in translations if t.get("name")}
    if locale and locale in by_language:
        return str(by_language[locale])
    if primary_language in by_language:
        return str(by_language[primary_language])
    return default
