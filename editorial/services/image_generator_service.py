"""
Image Generator Service

Presets, projects and the generated backgrounds of a project. Image model
invocation happens elsewhere; this service only records its results.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from editorial.models import ImagePreset, ImageProject, ImageProjectGeneration, Media
from editorial.models.image_generator import AIGenerationModel, ImageSize, PersonGeneration
from editorial.repositories.results import FailureKind, MutationResult, storage_error_message

logger = logging.getLogger(__name__)

IMAGEN_ASPECT_RATIOS = ("1:1", "3:4", "4:3", "16:9", "9:16")
GEMINI_ASPECT_RATIOS = ("1:1", "2:3", "3:2", "3:4", "4:3", "4:5", "5:4", "9:16", "16:9", "21:9")


@dataclass(frozen=True)
class SizePreset:
    name: str
    width: int
    height: int


SIZE_PRESETS = (
    SizePreset("HD 16:9", 1600, 900),
    SizePreset("OG Image", 1200, 630),
    SizePreset("Twitter Card", 1200, 600),
    SizePreset("Instagram Post", 1080, 1080),
    SizePreset("Facebook Cover", 820, 312),
)


@dataclass(frozen=True)
class AIModelOption:
    value: AIGenerationModel
    label_key: str
    description_key: str
    supports_reference_images: bool
    max_reference_images: int
    estimated_cost: float
    supports_person_generation: bool
    supports_seed: bool
    supports_enhance_prompt: bool
    supports_image_size: bool
    aspect_ratio_options: tuple[str, ...]
    image_size_options: tuple[ImageSize, ...]


AI_MODEL_OPTIONS = (
    AIModelOption(
        AIGenerationModel.NANO_BANANA, "nanoBanana", "nanoBananaDesc",
        False, 0, 0.02, True, True, True, True,
        IMAGEN_ASPECT_RATIOS, (ImageSize.SIZE_1K, ImageSize.SIZE_2K),
    ),
    AIModelOption(
        AIGenerationModel.NANO_BANANA_PRO, "nanoBananaPro", "nanoBananaProDesc",
        False, 0, 0.04, True, True, True, True,
        IMAGEN_ASPECT_RATIOS, (ImageSize.SIZE_1K, ImageSize.SIZE_2K),
    ),
    AIModelOption(
        AIGenerationModel.GEMINI_FLASH, "geminiFlashImage", "geminiFlashImageDesc",
        True, 3, 0.04, False, False, False, True,
        GEMINI_ASPECT_RATIOS, (ImageSize.SIZE_1K,),
    ),
    AIModelOption(
        AIGenerationModel.GEMINI_PRO, "geminiProImage", "geminiProImageDesc",
        True, 14, 0.15, False, False, False, True,
        GEMINI_ASPECT_RATIOS, (ImageSize.SIZE_1K, ImageSize.SIZE_2K, ImageSize.SIZE_4K),
    ),
)


def get_model_option(model: str) -> AIModelOption | None:
    for option in AI_MODEL_OPTIONS:
        if option.value.value == model:
            return option
    return None


PROJECT_DEFAULTS: dict[str, Any] = {
    "person_generation": PersonGeneration.DONT_ALLOW.value,
    "enhance_prompt": True,
    "image_size": ImageSize.SIZE_1K.value,
    "ai_model": AIGenerationModel.NANO_BANANA.value,
}

PRESET_FIELDS = ("name", "prompt_template", "style_reference_url", "width", "height")
PROJECT_FIELDS = (
    "name",
    "preset_id",
    "width",
    "height",
    "generation_prompt",
    "style_reference_url",
    "aspect_ratio",
    "person_generation",
    "enhance_prompt",
    "seed",
    "image_size",
    "ai_model",
    "reference_images",
)


def _columns(row: Any) -> dict[str, Any]:
    return {column.key: getattr(row, column.key) for column in row.__table__.columns}


def generation_to_dict(generation: ImageProjectGeneration) -> dict[str, Any]:
    media = generation.media
    return {
        "id": generation.id,
        "prompt": generation.prompt,
        "model": generation.model,
        "is_selected": generation.is_selected,
        "created_at": generation.created_at,
        "media": {"id": media.id, "url": media.url, "file_name": media.file_name} if media is not None else None,
    }


class ImageGeneratorService:
    """Service for image presets, projects and generations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _commit(self, action: str) -> str | None:
        try:
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            message = storage_error_message(exc)
            logger.error("Error %s: %s", action, message)
            return message
        return None

    # ============== Presets ==============

    async def list_presets(self) -> list[dict[str, Any]]:
        try:
            result = await self.db.execute(select(ImagePreset).order_by(ImagePreset.name))
        except SQLAlchemyError as exc:
            logger.error("Error fetching image presets: %s", storage_error_message(exc))
            return []
        return [_columns(p) for p in result.scalars().all()]

    async def get_preset(self, preset_id: uuid.UUID) -> dict[str, Any] | None:
        try:
            preset = await self.db.get(ImagePreset, preset_id)
        except SQLAlchemyError as exc:
            logger.error("Error fetching image preset %s: %s", preset_id, storage_error_message(exc))
            return None
        return _columns(preset) if preset is not None else None

    async def create_preset(self, data: dict[str, Any], created_by: uuid.UUID | None = None) -> MutationResult:
        preset = ImagePreset(**{k: data.get(k) for k in PRESET_FIELDS}, created_by=created_by)
        self.db.add(preset)
        error = await self._commit("creating image preset")
        if error:
            return MutationResult.fail(error)
        logger.info("Created image preset %s", preset.id)
        return MutationResult.ok(id=preset.id)

    async def update_preset(self, preset_id: uuid.UUID, data: dict[str, Any]) -> MutationResult:
        preset = await self.db.get(ImagePreset, preset_id)
        if preset is None:
            return MutationResult.fail("Preset not found", FailureKind.NOT_FOUND)
        for key in PRESET_FIELDS:
            if key in data:
                setattr(preset, key, data[key])
        error = await self._commit(f"updating image preset {preset_id}")
        return MutationResult.fail(error) if error else MutationResult.ok(id=preset.id)

    async def delete_preset(self, preset_id: uuid.UUID) -> MutationResult:
        preset = await self.db.get(ImagePreset, preset_id)
        if preset is None:
            return MutationResult.fail("Preset not found", FailureKind.NOT_FOUND)
        await self.db.delete(preset)
        error = await self._commit(f"deleting image preset {preset_id}")
        return MutationResult.fail(error) if error else MutationResult.ok(id=preset_id)

    # ============== Projects ==============

    async def list_projects(self) -> list[dict[str, Any]]:
        try:
            result = await self.db.execute(
                select(ImageProject)
                .options(selectinload(ImageProject.preset))
                .order_by(ImageProject.updated_at.desc())
                .execution_options(populate_existing=True)
            )
        except SQLAlchemyError as exc:
            logger.error("Error fetching image projects: %s", storage_error_message(exc))
            return []
        return [self._project_to_dict(p) for p in result.scalars().all()]

    async def get_project(self, project_id: uuid.UUID) -> dict[str, Any] | None:
        try:
            result = await self.db.execute(
                select(ImageProject)
                .options(selectinload(ImageProject.preset))
                .where(ImageProject.id == project_id)
                .execution_options(populate_existing=True)
            )
            project = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.error("Error fetching image project %s: %s", project_id, storage_error_message(exc))
            return None
        return self._project_to_dict(project) if project is not None else None

    @staticmethod
    def _project_to_dict(project: ImageProject) -> dict[str, Any]:
        data = _columns(project)
        data["preset"] = _columns(project.preset) if project.preset is not None else None
        return data

    @staticmethod
    def _project_values(data: dict[str, Any]) -> dict[str, Any]:
        values = {k: data.get(k) for k in PROJECT_FIELDS}
        for key, default in PROJECT_DEFAULTS.items():
            if values.get(key) is None:
                values[key] = default
        if values.get("reference_images") is None:
            values["reference_images"] = []
        return values

    async def create_project(self, data: dict[str, Any], created_by: uuid.UUID | None = None) -> MutationResult:
        project = ImageProject(**self._project_values(data), created_by=created_by)
        self.db.add(project)
        error = await self._commit("creating image project")
        if error:
            return MutationResult.fail(error)
        logger.info("Created image project %s", project.id)
        return MutationResult.ok(id=project.id)

    async def update_project(self, project_id: uuid.UUID, data: dict[str, Any]) -> MutationResult:
        project = await self.db.get(ImageProject, project_id)
        if project is None:
            return MutationResult.fail("Project not found", FailureKind.NOT_FOUND)
        for key, value in self._project_values({**_columns(project), **data}).items():
            setattr(project, key, value)
        error = await self._commit(f"updating image project {project_id}")
        return MutationResult.fail(error) if error else MutationResult.ok(id=project.id)

    async def delete_project(self, project_id: uuid.UUID) -> MutationResult:
        project = await self.db.get(ImageProject, project_id)
        if project is None:
            return MutationResult.fail("Project not found", FailureKind.NOT_FOUND)
        await self.db.delete(project)
        error = await self._commit(f"deleting image project {project_id}")
        return MutationResult.fail(error) if error else MutationResult.ok(id=project_id)

    # ============== Generations ==============

    async def list_generations(self, project_id: uuid.UUID) -> list[dict[str, Any]]:
        """Generations of a project, newest first, with their media."""
        stmt = (
            select(ImageProjectGeneration)
            .options(joinedload(ImageProjectGeneration.media))
            .where(ImageProjectGeneration.project_id == project_id)
            .order_by(ImageProjectGeneration.created_at.desc())
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Error fetching generations of %s: %s", project_id, storage_error_message(exc))
            return []
        return [generation_to_dict(g) for g in result.scalars().unique().all()]

    async def save_generated_image(
        self,
        project_id: uuid.UUID,
        image_url: str,
        file_name: str,
        prompt: str,
        model: str,
        mime_type: str | None = None,
        size_bytes: int | None = None,
    ) -> MutationResult:
        """Record a generated image as media and make it the project's selected background."""
        if not image_url:
            return MutationResult.fail("Image URL is required", FailureKind.VALIDATION)
        project = await self.db.get(ImageProject, project_id)
        if project is None:
            return MutationResult.fail("Project not found", FailureKind.NOT_FOUND)

        media = Media(url=image_url, file_name=file_name, mime_type=mime_type, size_bytes=size_bytes)
        self.db.add(media)
        try:
            await self.db.flush()
            await self.db.execute(
                update(ImageProjectGeneration)
                .where(ImageProjectGeneration.project_id == project_id)
                .values(is_selected=False)
            )
            generation = ImageProjectGeneration(
                project_id=project_id, media_id=media.id, prompt=prompt, model=model, is_selected=True
            )
            self.db.add(generation)
            project.background_image_url = image_url
        except SQLAlchemyError as exc:
            await self.db.rollback()
            message = storage_error_message(exc)
            logger.error("Error saving generated image for %s: %s", project_id, message)
            return MutationResult.fail(message)

        error = await self._commit(f"saving generated image for {project_id}")
        if error:
            return MutationResult.fail(error)
        return MutationResult.ok(media_id=media.id, generation_id=generation.id, image_url=image_url)

    async def select_generation(self, project_id: uuid.UUID, generation_id: uuid.UUID) -> MutationResult:
        """Make one generation the project's background.

        Unselecting the others, selecting this one and updating the project's
        background URL commit together or not at all.
        """
        project = await self.db.get(ImageProject, project_id)
        if project is None:
            return MutationResult.fail("Project not found", FailureKind.NOT_FOUND)
        result = await self.db.execute(
            select(Media.url)
            .join(ImageProjectGeneration, ImageProjectGeneration.media_id == Media.id)
            .where(ImageProjectGeneration.id == generation_id, ImageProjectGeneration.project_id == project_id)
        )
        image_url = result.scalar_one_or_none()
        if image_url is None:
            return MutationResult.fail("Generation not found", FailureKind.NOT_FOUND)

        try:
            await self.db.execute(
                update(ImageProjectGeneration)
                .where(ImageProjectGeneration.project_id == project_id)
                .values(is_selected=False)
            )
            await self.db.execute(
                update(ImageProjectGeneration)
                .where(ImageProjectGeneration.id == generation_id)
                .values(is_selected=True)
            )
            await self.db.execute(
                update(ImageProject).where(ImageProject.id == project_id).values(background_image_url=image_url)
            )
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            message = storage_error_message(exc)
            logger.error("Error selecting generation %s of %s: %s", generation_id, project_id, message)
            return MutationResult.fail(message)

        logger.info("Project %s background set from generation %s", project_id, generation_id)
        return MutationResult.ok(image_url=image_url)
