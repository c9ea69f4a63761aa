"""
Revalidation Service

Invalidates cache tags on the public website after content changes. A
failed revalidation never fails the write that triggered it.
"""

import logging

import httpx

from editorial.config import settings

logger = logging.getLogger(__name__)

ARTICLE_LIST_TAGS = ["articles", "latest-articles", "top-articles", "featured-article"]


async def revalidate_frontend(tags: list[str], transport: httpx.AsyncBaseTransport | None = None) -> bool:
    """POST ``tags`` to the website's revalidation endpoint.

    Returns False when revalidation is not configured or did not succeed.
    """
    if not settings.frontend_revalidate_url or not settings.frontend_revalidate_token:
        logger.error("Missing FRONTEND_REVALIDATE_URL or FRONTEND_REVALIDATE_TOKEN")
        return False

    try:
        async with httpx.AsyncClient(transport=transport, timeout=settings.revalidate_timeout_seconds) as client:
            response = await client.post(
                settings.frontend_revalidate_url,
                json={"tags": tags},
                headers={"x-revalidate-token": settings.frontend_revalidate_token},
            )
    except httpx.HTTPError as e:
        logger.error("Error revalidating frontend: %s", e)
        return False

    if not response.is_success:
        logger.error("Failed to revalidate frontend (%d): %s", response.status_code, response.text[:500])
        return False

    logger.debug("Revalidated frontend tags: %s", tags)
    return True


def article_tags(slug: str | None = None) -> list[str]:
    return ARTICLE_LIST_TAGS + ([f"article-{slug}"] if slug else [])


def fatwa_tags(slug: str | None = None) -> list[str]:
    return ["fatawa"] + ([f"fatwa-{slug}"] if slug else [])


def individual_tags(slug: str | None = None) -> list[str]:
    return ["individuals"] + ([f"individual-{slug}"] if slug else [])


def theme_tags(slug: str | None = None) -> list[str]:
    return ["themes"] + ([f"theme-{slug}"] if slug else [])


def timeline_tags(slug: str | None = None) -> list[str]:
    return ["timelines"] + ([f"timeline-{slug}"] if slug else [])


# Reference data also shows up on the pages that display it
TAXONOMY_TAGS = {
    "tag": ["tags"],
    "type": ["types", "individuals"],
    "classification": ["classifications", "individuals"],
    "category": ["categories", "articles"],
    "fatwa_classification": ["fatwa-classifications", "fatawa"],
}

ENTITY_TAGS = {
    "article": article_tags,
    "fatwa": fatwa_tags,
    "individual": individual_tags,
    "theme": theme_tags,
    "timeline": timeline_tags,
}


async def revalidate_entity(entity_name: str, slug: str | None = None) -> bool:
    return await revalidate_frontend(ENTITY_TAGS[entity_name](slug))


async def revalidate_taxonomy(kind: str) -> bool:
    return await revalidate_frontend(TAXONOMY_TAGS[kind])

