"""
i18n package

Language metadata, RTL detection and localized-name fallback for the
multilingual editorial content.
"""

from .locale import (
    LANGUAGE_NAMES,
    LOCALE_FLAGS,
    RTL_LOCALES,
    get_language_info,
    is_rtl_locale,
    language_with_flag,
    localized_name,
)

__all__ = [
    "LANGUAGE_NAMES",
    "LOCALE_FLAGS",
    "RTL_LOCALES",
    "get_language_info",
    "is_rtl_locale",
    "language_with_flag",
    "localized_name",
]
