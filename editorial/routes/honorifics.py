from fastapi import APIRouter, Response

from editorial.exceptions import ResourceNotFoundError
from editorial.services.honorific_service import HONORIFIC_CATEGORIES, HONORIFICS, honorific_assets

router = APIRouter()


@router.get("")
async def list_honorifics():
    return {
        "categories": HONORIFIC_CATEGORIES,
        "honorifics": [
            {"key": key, "arabic": h.arabic, "category": h.category, "label": h.label} for key, h in HONORIFICS.items()
        ],
    }


@router.get("/{key}")
async def get_honorific_svg(key: str):
    svg = honorific_assets.get_svg(key)
    if svg is None:
        raise ResourceNotFoundError("Honorific", key)
    return Response(content=svg, media_type="image/svg+xml", headers={"Cache-Control": "public, max-age=86400"})
