"""
Image Generator Routes

Presets, projects, generation history and the catalogue of models and
canvas sizes the editor offers.
"""

from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from editorial.database import get_db
from editorial.routes._helpers import require, unwrap
from editorial.schemas.image_generator import (
    GeneratedImageSave,
    GenerationSelect,
    PresetCreate,
    PresetUpdate,
    ProjectCreate,
    ProjectUpdate,
)
from editorial.services.image_generator_service import AI_MODEL_OPTIONS, SIZE_PRESETS, ImageGeneratorService

router = APIRouter()


def get_service(db: AsyncSession = Depends(get_db)) -> ImageGeneratorService:
    return ImageGeneratorService(db)


@router.get("/options")
async def get_options():
    return {
        "models": [asdict(option) for option in AI_MODEL_OPTIONS],
        "size_presets": [asdict(preset) for preset in SIZE_PRESETS],
    }


# ============== Presets ==============


@router.get("/presets")
async def list_presets(service: ImageGeneratorService = Depends(get_service)):
    return await service.list_presets()


@router.get("/presets/{preset_id}")
async def get_preset(preset_id: UUID, service: ImageGeneratorService = Depends(get_service)):
    return require(await service.get_preset(preset_id), "Preset", preset_id)


@router.post("/presets", status_code=status.HTTP_201_CREATED)
async def create_preset(payload: PresetCreate, service: ImageGeneratorService = Depends(get_service)):
    return unwrap(await service.create_preset(payload.model_dump()), "Preset", operation="create preset")


@router.patch("/presets/{preset_id}")
async def update_preset(preset_id: UUID, payload: PresetUpdate, service: ImageGeneratorService = Depends(get_service)):
    result = await service.update_preset(preset_id, payload.model_dump(exclude_unset=True))
    return unwrap(result, "Preset", preset_id, "update preset")


@router.delete("/presets/{preset_id}")
async def delete_preset(preset_id: UUID, service: ImageGeneratorService = Depends(get_service)):
    return unwrap(await service.delete_preset(preset_id), "Preset", preset_id, "delete preset")


# ============== Projects ==============


@router.get("/projects")
async def list_projects(service: ImageGeneratorService = Depends(get_service)):
    return await service.list_projects()


@router.get("/projects/{project_id}")
async def get_project(project_id: UUID, service: ImageGeneratorService = Depends(get_service)):
    return require(await service.get_project(project_id), "Project", project_id)


@router.post("/projects", status_code=status.HTTP_201_CREATED)
async def create_project(payload: ProjectCreate, service: ImageGeneratorService = Depends(get_service)):
    return unwrap(await service.create_project(payload.model_dump()), "Project", operation="create project")


@router.patch("/projects/{project_id}")
async def update_project(
    project_id: UUID, payload: ProjectUpdate, service: ImageGeneratorService = Depends(get_service)
):
    result = await service.update_project(project_id, payload.model_dump(exclude_unset=True))
    return unwrap(result, "Project", project_id, "update project")


@router.delete("/projects/{project_id}")
async def delete_project(project_id: UUID, service: ImageGeneratorService = Depends(get_service)):
    return unwrap(await service.delete_project(project_id), "Project", project_id, "delete project")


# ============== Generations ==============


@router.get("/projects/{project_id}/generations")
async def list_generations(project_id: UUID, service: ImageGeneratorService = Depends(get_service)):
    require(await service.get_project(project_id), "Project", project_id)
    return await service.list_generations(project_id)


@router.post("/projects/{project_id}/generations", status_code=status.HTTP_201_CREATED)
async def save_generated_image(
    project_id: UUID, payload: GeneratedImageSave, service: ImageGeneratorService = Depends(get_service)
):
    result = await service.save_generated_image(project_id, **payload.model_dump())
    return unwrap(result, "Project", project_id, "save generated image")


@router.post("/projects/{project_id}/select")
async def select_generation(
    project_id: UUID, payload: GenerationSelect, service: ImageGeneratorService = Depends(get_service)
):
    """Make a previous generation the project's background."""
    result = await service.select_generation(project_id, payload.generation_id)
    return unwrap(result, "Generation", payload.generation_id, "select generation")
