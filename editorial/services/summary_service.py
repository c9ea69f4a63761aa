"""
Summary Service

Asks the DeepSeek chat-completions API for a short SEO summary of an
article. Upstream failures are reported by status code only.
"""

import logging

import httpx

from editorial.config import settings
from editorial.exceptions import ConfigurationError, EditorialError, UpstreamAPIError, ValidationError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an SEO specialist that generates article summaries used as meta descriptions and "
    "website previews. Always write in the same language as the article. Front-load the main topic "
    "and keywords within the first 155 characters, as search engines truncate after that point."
)
USER_PROMPT = "Generate an engaging summary of 300 characters or less for the following article:\n\n{content}"

MAX_TOKENS = 500
TEMPERATURE = 0.7


def build_payload(content: str, model: str) -> dict:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": USER_PROMPT.format(content=content)},
        ],
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
    }


async def generate_summary(content: str | None, transport: httpx.AsyncBaseTransport | None = None) -> str:
    """Return the generated summary for ``content``.

    Raises:
        ValidationError: ``content`` is empty
        ConfigurationError: no API key is configured; nothing is sent
        UpstreamAPIError: the API answered with a non-2xx status
        EditorialError: the request could not be completed
    """
    if not content:
        raise ValidationError("Content is required", field="content")
    if not settings.deepseek_api_key:
        raise ConfigurationError("DeepSeek API key not configured")

    headers = {"Authorization": f"Bearer {settings.deepseek_api_key}"}
    try:
        async with httpx.AsyncClient(transport=transport, timeout=settings.summary_timeout_seconds) as client:
            response = await client.post(
                settings.deepseek_api_url,
                json=build_payload(content, settings.deepseek_model),
                headers=headers,
            )
    except httpx.HTTPError as e:
        logger.error("Error generating summary: %s", e)
        raise EditorialError("Internal server error") from e

    if not response.is_success:
        logger.warning("Summary API returned %d: %s", response.status_code, response.text[:500])
        raise UpstreamAPIError("Failed to generate summary", upstream_status=response.status_code)

    try:
        return response.json()["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        logger.error("Unexpected summary API response: %s", e)
        raise EditorialError("Internal server error") from e
