from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from editorial.models.image_generator import AIGenerationModel, ImageSize, PersonGeneration


class ReferenceImage(BaseModel):
    id: str
    url: str
    description: str = ""
    mime_type: Optional[str] = None


class PresetCreate(BaseModel):
    name: str
    prompt_template: str
    style_reference_url: Optional[str] = None
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)


class PresetUpdate(BaseModel):
    name: Optional[str] = None
    prompt_template: Optional[str] = None
    style_reference_url: Optional[str] = None
    width: Optional[int] = Field(None, gt=0)
    height: Optional[int] = Field(None, gt=0)


class ProjectCreate(BaseModel):
    name: str
    preset_id: Optional[UUID] = None
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    generation_prompt: Optional[str] = None
    style_reference_url: Optional[str] = None
    aspect_ratio: Optional[str] = None
    person_generation: Optional[PersonGeneration] = None
    enhance_prompt: Optional[bool] = None
    seed: Optional[int] = None
    image_size: Optional[ImageSize] = None
    ai_model: Optional[AIGenerationModel] = None
    reference_images: Optional[List[ReferenceImage]] = None

    class Config:
        use_enum_values = True


class ProjectUpdate(ProjectCreate):
    name: Optional[str] = None
    width: Optional[int] = Field(None, gt=0)
    height: Optional[int] = Field(None, gt=0)


class GeneratedImageSave(BaseModel):
    image_url: str
    file_name: str
    prompt: str
    model: str
    mime_type: Optional[str] = None
    size_bytes: Optional[int] = None


class GenerationSelect(BaseModel):
    generation_id: UUID
