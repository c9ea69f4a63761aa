"""
Image-generation presets, projects and the generations of a project.

A project points at its chosen background through the denormalized
``background_image_url``; the matching generation has ``is_selected``.
"""

import enum
import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from editorial.database import Base
from editorial.models._mixins import TimestampMixin, utcnow


class AIGenerationModel(str, enum.Enum):
    NANO_BANANA = "nano-banana"
    NANO_BANANA_PRO = "nano-banana-pro"
    GEMINI_FLASH = "gemini-flash"
    GEMINI_PRO = "gemini-pro"


class PersonGeneration(str, enum.Enum):
    DONT_ALLOW = "dont_allow"
    ALLOW_ADULT = "allow_adult"
    ALLOW_ALL = "allow_all"


class ImageSize(str, enum.Enum):
    SIZE_1K = "1K"
    SIZE_2K = "2K"
    SIZE_4K = "4K"


class ImagePreset(TimestampMixin, Base):
    __tablename__ = "image_presets"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    prompt_template = Column(Text, nullable=False)
    style_reference_url = Column(String, nullable=True)
    width = Column(Integer, nullable=False)
    height = Column(Integer, nullable=False)
    created_by = Column(Uuid, nullable=True)


class ImageProject(TimestampMixin, Base):
    __tablename__ = "image_projects"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    preset_id = Column(Uuid, ForeignKey("image_presets.id", ondelete="SET NULL"), nullable=True)
    width = Column(Integer, nullable=False)
    height = Column(Integer, nullable=False)
    generation_prompt = Column(Text, nullable=True)
    style_reference_url = Column(String, nullable=True)
    background_image_url = Column(String, nullable=True)
    aspect_ratio = Column(String(10), nullable=True)
    person_generation = Column(String(20), nullable=False, default=PersonGeneration.DONT_ALLOW.value)
    enhance_prompt = Column(Boolean, nullable=False, default=True)
    seed = Column(Integer, nullable=True)
    image_size = Column(String(4), nullable=False, default=ImageSize.SIZE_1K.value)
    ai_model = Column(String(30), nullable=False, default=AIGenerationModel.NANO_BANANA.value)
    reference_images = Column(JSON, nullable=False, default=list)
    created_by = Column(Uuid, nullable=True)

    preset = relationship("ImagePreset", lazy="selectin")


class ImageProjectGeneration(Base):
    __tablename__ = "image_project_generations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id = Column(Uuid, ForeignKey("image_projects.id", ondelete="CASCADE"), nullable=False, index=True)
    media_id = Column(Uuid, ForeignKey("media.id", ondelete="SET NULL"), nullable=True)
    prompt = Column(Text, nullable=True)
    model = Column(String(30), nullable=True)
    is_selected = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    media = relationship("Media", lazy="joined")
