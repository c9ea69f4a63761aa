from . import ai, honorifics, i18n, images, media
from .content import articles_router, fatawa_router, individuals_router, themes_router, timelines_router
from .taxonomy import (
    categories_router,
    classifications_router,
    fatwa_classifications_router,
    tags_router,
    types_router,
)

__all__ = [
    "ai",
    "honorifics",
    "i18n",
    "images",
    "media",
    "articles_router",
    "fatawa_router",
    "individuals_router",
    "themes_router",
    "timelines_router",
    "categories_router",
    "classifications_router",
    "fatwa_classifications_router",
    "tags_router",
    "types_router",
]
