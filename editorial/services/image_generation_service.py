"""
Image Generation Service

Sends a prompt to the image generation function, then uploads the returned
base64 image to the image host and hands back its public URL. Like the
summary service, upstream bodies are logged but never returned.
"""

import logging
from dataclasses import dataclass

import httpx

from editorial.config import settings
from editorial.exceptions import ConfigurationError, EditorialError, UpstreamAPIError, ValidationError
from editorial.services.image_generator_service import get_model_option

logger = logging.getLogger(__name__)

# (ratio name, width / height, tolerance), checked in order
ASPECT_RATIOS = (
    ("1:1", 1.0, 0.1),
    ("16:9", 16 / 9, 0.15),
    ("9:16", 9 / 16, 0.15),
    ("4:3", 4 / 3, 0.15),
    ("3:4", 3 / 4, 0.15),
)

MIME_EXTENSIONS = {"image/png": "png", "image/jpeg": "jpg", "image/webp": "webp"}


@dataclass(frozen=True)
class GeneratedImage:
    base64: str
    mime_type: str

    @property
    def extension(self) -> str:
        return MIME_EXTENSIONS.get(self.mime_type, "png")


def get_aspect_ratio(width: int, height: int) -> str:
    """Closest supported ratio; wide canvases fall back to 16:9, tall ones to 9:16."""
    ratio = width / height
    for name, target, tolerance in ASPECT_RATIOS:
        if abs(ratio - target) < tolerance:
            return name
    return "16:9" if ratio > 1 else "9:16"


def validate_request(prompt, model, width, height, reference_images=None) -> None:
    """Raise ValidationError for a request the generator cannot serve."""
    if not prompt or not prompt.strip():
        raise ValidationError("Prompt is required", field="prompt")
    option = get_model_option(model or "")
    if option is None:
        raise ValidationError("Invalid model specified", field="model")
    if not width or not height or width < 1 or height < 1:
        raise ValidationError("Valid width and height are required")
    if reference_images:
        if not option.supports_reference_images:
            raise ValidationError(f"Model {model} does not accept reference images", field="reference_images")
        if len(reference_images) > option.max_reference_images:
            raise ValidationError(
                f"Model {model} accepts at most {option.max_reference_images} reference images",
                field="reference_images",
            )


async def generate_image(
    prompt: str | None,
    model: str | None,
    width: int | None,
    height: int | None,
    reference_images: list[dict] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> GeneratedImage:
    """Generate one image.

    Raises:
        ValidationError: missing prompt, unknown model or bad canvas size
        ConfigurationError: the generation function is not configured; nothing is sent
        UpstreamAPIError: the function answered with a failure
        EditorialError: the request could not be completed
    """
    validate_request(prompt, model, width, height, reference_images)
    if not settings.image_generation_api_key or not settings.image_generation_url:
        raise ConfigurationError("Image generation API key not configured")

    payload = {
        "prompt": prompt,
        "model": model,
        "aspectRatio": get_aspect_ratio(width, height),
    }
    if reference_images:
        payload["referenceImages"] = reference_images

    headers = {"Authorization": f"Bearer {settings.image_generation_api_key}"}
    try:
        async with httpx.AsyncClient(
            transport=transport, timeout=settings.image_generation_timeout_seconds
        ) as client:
            response = await client.post(settings.image_generation_url, json=payload, headers=headers)
    except httpx.HTTPError as e:
        logger.error("Error generating image: %s", e)
        raise EditorialError("Internal server error") from e

    if not response.is_success:
        logger.warning("Image generation returned %d: %s", response.status_code, response.text[:500])
        raise UpstreamAPIError("Failed to generate image", upstream_status=response.status_code)

    try:
        body = response.json()
    except ValueError as e:
        logger.error("Unexpected image generation response: %s", e)
        raise EditorialError("Internal server error") from e
    if not body.get("success") or not body.get("base64"):
        logger.warning("Image generation failed: %s", body.get("error"))
        raise UpstreamAPIError("Failed to generate image", upstream_status=500)

    return GeneratedImage(base64=body["base64"], mime_type=body.get("mimeType") or "image/png")


async def upload_image(image: GeneratedImage, transport: httpx.AsyncBaseTransport | None = None) -> str:
    """Upload ``image`` to the image host and return its public URL."""
    if not settings.image_upload_url:
        raise ConfigurationError("Image upload URL not configured")

    form = {
        "file": f"data:{image.mime_type};base64,{image.base64}",
        "upload_preset": settings.image_upload_preset,
        "folder": settings.image_upload_folder,
    }
    try:
        async with httpx.AsyncClient(
            transport=transport, timeout=settings.image_generation_timeout_seconds
        ) as client:
            response = await client.post(settings.image_upload_url, data=form)
    except httpx.HTTPError as e:
        logger.error("Error uploading generated image: %s", e)
        raise EditorialError("Internal server error") from e

    if not response.is_success:
        logger.warning("Image upload returned %d: %s", response.status_code, response.text[:500])
        raise UpstreamAPIError("Failed to upload generated image", upstream_status=response.status_code)

    try:
        return response.json()["secure_url"]
    except (ValueError, KeyError, TypeError) as e:
        logger.error("Unexpected image upload response: %s", e)
        raise EditorialError("Internal server error") from e
