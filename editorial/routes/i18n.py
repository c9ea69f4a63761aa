from fastapi import APIRouter

from editorial.config import settings
from editorial.i18n import get_language_info

router = APIRouter()


@router.get("/languages")
async def list_languages():
    """Languages content can be written in, the primary one first."""
    codes = [settings.primary_language] + [c for c in settings.supported_languages if c != settings.primary_language]
    return {"primary": settings.primary_language, "languages": [get_language_info(code) for code in codes]}
