from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class SummaryRequest(BaseModel):
    # Optional so that a missing body field is answered like an empty one
    content: Optional[str] = None


class GenerationReferenceImage(BaseModel):
    base64: str
    mime_type: str = "image/png"
    description: str = ""


class ImageGenerationRequest(BaseModel):
    # Optional so that missing fields get the same 400 as empty ones
    prompt: Optional[str] = None
    model: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    reference_images: List[GenerationReferenceImage] = Field(default_factory=list)
    project_id: Optional[UUID] = Field(None, description="Store the result as this project's selected generation.")
