"""
Honorific Service

Catalogue of the 21 Arabic honorifics the editor can insert, and their
calligraphy SVGs. The key set is fixed, so the SVG cache is bounded by it.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from cachetools import LRUCache

from editorial.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Honorific:
    arabic: str
    category: str
    label: str


HONORIFICS: dict[str, Honorific] = {
    # Allah
    "awj": Honorific("عز وجل", "allah", "Azza wa Jall"),
    "swt": Honorific("سبحانه وتعالى", "allah", "Subhanahu wa Ta'ala"),
    "twt": Honorific("تبارك وتعالى", "allah", "Tabaraka wa Ta'ala"),
    "jal": Honorific("جل جلاله", "allah", "Jalla Jalaluhu"),
    "jwa": Honorific("جل وعلا", "allah", "Jalla wa 'Ala"),
    # Prophet
    "sas": Honorific("صلى الله عليه وسلم", "prophet", "Sallallahu Alayhi wa Sallam"),
    "asws": Honorific("عليه الصلاة والسلام", "prophet", "Alayhi As-Salatu wa As-Salam"),
    # Prophets
    "as": Honorific("عليه السلام", "prophets", "Alayhi As-Salam (m)"),
    "ahas": Honorific("عليها السلام", "prophets", "Alayha As-Salam (f)"),
    "amas": Honorific("عليهما السلام", "prophets", "Alayhima As-Salam (dual)"),
    "amus": Honorific("عليهم السلام", "prophets", "Alayhim As-Salam (pl)"),
    # Companions
    "radu": Honorific("رضي الله عنه", "companions", "Radiyallahu Anhu (m)"),
    "rada": Honorific("رضي الله عنها", "companions", "Radiyallahu Anha (f)"),
    "radum": Honorific("رضي الله عنهم", "companions", "Radiyallahu Anhum (pl)"),
    "raduma": Honorific("رضي الله عنهما", "companions", "Radiyallahu Anhuma (dual)"),
    "radunna": Honorific("رضي الله عنهن", "companions", "Radiyallahu Anhunna (f-pl)"),
    # Scholars
    "rahimahu": Honorific("رحمه الله", "scholars", "Rahimahullah (m)"),
    "rahimaha": Honorific("رحمها الله", "scholars", "Rahimahallah (f)"),
    "rahimahum": Honorific("رحمهم الله", "scholars", "Rahimahumullah (pl)"),
    "rahimahuma": Honorific("رحمهما الله", "scholars", "Rahimahumallah (dual)"),
    "rahimahunna": Honorific("رحمهن الله", "scholars", "Rahimahunnallah (f-pl)"),
}

HONORIFIC_CATEGORIES: dict[str, dict[str, str]] = {
    "allah": {"label": "Allah", "label_fr": "Allah"},
    "prophet": {"label": "Prophet ﷺ", "label_fr": "Prophète ﷺ"},
    "prophets": {"label": "Prophets", "label_fr": "Prophètes"},
    "companions": {"label": "Companions", "label_fr": "Compagnons"},
    "scholars": {"label": "Scholars", "label_fr": "Savants"},
}


def is_valid_honorific(key: str) -> bool:
    return key in HONORIFICS


def get_honorifics_by_category(category: str) -> list[tuple[str, Honorific]]:
    return [(key, h) for key, h in HONORIFICS.items() if h.category == category]


class HonorificAssets:
    """SVG loader with a cache that can hold every honorific at once."""

    def __init__(self, directory: str | Path | None = None):
        self.directory = Path(directory or settings.honorifics_dir)
        self._cache: LRUCache[str, str] = LRUCache(maxsize=len(HONORIFICS))

    def get_svg(self, key: str) -> str | None:
        """SVG markup for ``key``, or None for unknown keys and unreadable files."""
        if not is_valid_honorific(key):
            return None
        svg = self._cache.get(key)
        if svg is not None:
            return svg

        path = self.directory / f"{key}.svg"
        try:
            svg = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("Honorific SVG missing: %s", path)
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read honorific SVG %s: %s", path, e)
            return None
        self._cache[key] = svg
        return svg

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


honorific_assets = HonorificAssets()
