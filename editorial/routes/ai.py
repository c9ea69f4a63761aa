"""
AI Routes

Both endpoints answer with a bare body, ``{"summary": ...}`` or
``{"image_url": ...}`` on success and ``{"error": ...}`` otherwise, which is
what the editor's buttons read.
"""

import logging
import uuid

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from editorial.database import get_db
from editorial.exceptions import EditorialError, ResourceNotFoundError
from editorial.routes._helpers import get_http_transport
from editorial.schemas.ai import ImageGenerationRequest, SummaryRequest
from editorial.services.image_generation_service import generate_image, upload_image
from editorial.services.image_generator_service import ImageGeneratorService
from editorial.services.summary_service import generate_summary

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate-summary")
async def generate_article_summary(payload: SummaryRequest, transport=Depends(get_http_transport)):
    try:
        summary = await generate_summary(payload.content, transport=transport)
    except EditorialError as e:
        return JSONResponse({"error": e.message}, status_code=e.status_code)
    return {"summary": summary}


@router.post("/generate-image")
async def generate_ai_image(
    payload: ImageGenerationRequest,
    transport=Depends(get_http_transport),
    db: AsyncSession = Depends(get_db),
):
    """Generate an image, upload it, and optionally record it on a project."""
    service = ImageGeneratorService(db)
    reference_images = [
        {"base64": ref.base64, "mimeType": ref.mime_type, "description": ref.description}
        for ref in payload.reference_images
    ]
    try:
        if payload.project_id is not None and await service.get_project(payload.project_id) is None:
            raise ResourceNotFoundError("Project", payload.project_id)
        image = await generate_image(
            payload.prompt,
            payload.model,
            payload.width,
            payload.height,
            reference_images=reference_images,
            transport=transport,
        )
        image_url = await upload_image(image, transport=transport)
    except EditorialError as e:
        return JSONResponse({"error": e.message}, status_code=e.status_code)

    body = {"image_url": image_url}
    if payload.project_id is None:
        return body

    result = await service.save_generated_image(
        payload.project_id,
        image_url,
        file_name=f"generated-{uuid.uuid4().hex[:12]}.{image.extension}",
        prompt=payload.prompt,
        model=payload.model,
        mime_type=image.mime_type,
    )
    if not result.success:
        logger.error("Generated image %s not saved to project %s: %s", image_url, payload.project_id, result.error)
        return JSONResponse({"error": "Failed to save generated image"}, status_code=500)
    body["generation_id"] = str(result.data["generation_id"])
    body["media_id"] = str(result.data["media_id"])
    return body
