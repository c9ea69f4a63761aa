"""
Tests for the image generator service
"""

from uuid import uuid4

from sqlalchemy.exc import OperationalError

from editorial.models import ImageProject, ImageProjectGeneration
from editorial.repositories.results import FailureKind
from editorial.services.image_generator_service import (
    AI_MODEL_OPTIONS,
    SIZE_PRESETS,
    ImageGeneratorService,
    get_model_option,
)


async def _project(service, **fields):
    data = {"name": "Badr banner", "width": 1600, "height": 900, **fields}
    result = await service.create_project(data)
    return result.data["id"]


async def _generation(service, project_id, name):
    result = await service.save_generated_image(
        project_id,
        image_url=f"https://cdn.example.org/{name}.png",
        file_name=f"{name}.png",
        prompt="desert at dawn",
        model="nano-banana",
    )
    return result.data["generation_id"]


class TestModelCatalogue:
    """Test the static model and size catalogue"""

    def test_models(self):
        assert [o.value.value for o in AI_MODEL_OPTIONS] == [
            "nano-banana",
            "nano-banana-pro",
            "gemini-flash",
            "gemini-pro",
        ]
        assert get_model_option("gemini-pro").max_reference_images == 14
        assert get_model_option("nano-banana").supports_reference_images is False
        assert get_model_option("dall-e") is None

    def test_size_presets(self):
        assert (SIZE_PRESETS[0].width, SIZE_PRESETS[0].height) == (1600, 900)
        assert len(SIZE_PRESETS) == 5


class TestProjects:
    """Test project CRUD"""

    async def test_create_applies_defaults(self, db):
        service = ImageGeneratorService(db)
        project_id = await _project(service)

        project = await service.get_project(project_id)

        assert project["person_generation"] == "dont_allow"
        assert project["enhance_prompt"] is True
        assert project["image_size"] == "1K"
        assert project["ai_model"] == "nano-banana"
        assert project["reference_images"] == []
        assert project["preset"] is None

    async def test_update_keeps_other_fields(self, db):
        service = ImageGeneratorService(db)
        project_id = await _project(service, ai_model="gemini-pro", seed=42)

        result = await service.update_project(project_id, {"name": "Uhud banner"})

        assert result.success is True
        project = await service.get_project(project_id)
        assert project["name"] == "Uhud banner"
        assert project["ai_model"] == "gemini-pro"
        assert project["seed"] == 42

    async def test_project_with_preset(self, db):
        service = ImageGeneratorService(db)
        preset = await service.create_preset(
            {"name": "OG", "prompt_template": "{title}", "width": 1200, "height": 630}
        )
        project_id = await _project(service, preset_id=preset.data["id"])

        project = await service.get_project(project_id)

        assert project["preset"]["name"] == "OG"

    async def test_missing_project(self, db):
        service = ImageGeneratorService(db)

        assert await service.get_project(uuid4()) is None
        assert (await service.delete_project(uuid4())).kind is FailureKind.NOT_FOUND


class TestGenerations:
    """Test generated image history and selection"""

    async def test_save_selects_newest(self, db, session_factory):
        service = ImageGeneratorService(db)
        project_id = await _project(service)
        first = await _generation(service, project_id, "first")
        second = await _generation(service, project_id, "second")

        async with session_factory() as fresh:
            project = await fresh.get(ImageProject, project_id)
            selected = {g: (await fresh.get(ImageProjectGeneration, g)).is_selected for g in (first, second)}
        assert project.background_image_url.endswith("second.png")
        assert selected == {first: False, second: True}

    async def test_save_requires_url(self, db):
        service = ImageGeneratorService(db)
        project_id = await _project(service)

        result = await service.save_generated_image(project_id, image_url="", file_name="x.png", prompt="", model="")

        assert result.kind is FailureKind.VALIDATION

    async def test_list_includes_media(self, db):
        service = ImageGeneratorService(db)
        project_id = await _project(service)
        await _generation(service, project_id, "only")

        generations = await service.list_generations(project_id)

        assert len(generations) == 1
        assert generations[0]["media"]["file_name"] == "only.png"

    async def test_select_previous_generation(self, db, session_factory):
        service = ImageGeneratorService(db)
        project_id = await _project(service)
        first = await _generation(service, project_id, "first")
        second = await _generation(service, project_id, "second")

        result = await service.select_generation(project_id, first)

        assert result.success is True
        assert result.data["image_url"].endswith("first.png")
        async with session_factory() as fresh:
            project = await fresh.get(ImageProject, project_id)
            selected = {g: (await fresh.get(ImageProjectGeneration, g)).is_selected for g in (first, second)}
        assert project.background_image_url.endswith("first.png")
        assert selected == {first: True, second: False}

    async def test_select_generation_of_other_project(self, db):
        service = ImageGeneratorService(db)
        project_a = await _project(service)
        project_b = await _project(service, name="Other")
        generation = await _generation(service, project_b, "b")

        result = await service.select_generation(project_a, generation)

        assert result.kind is FailureKind.NOT_FOUND

    async def test_select_rolls_back_on_failure(self, db, session_factory, monkeypatch):
        """A failure on the project update leaves every selection flag untouched"""
        service = ImageGeneratorService(db)
        project_id = await _project(service)
        first = await _generation(service, project_id, "first")
        second = await _generation(service, project_id, "second")

        original_execute = db.execute
        calls = []

        async def failing_execute(statement, *args, **kwargs):
            calls.append(statement)
            # lookup, unselect all, select one, then the project update fails
            if len(calls) == 4:
                raise OperationalError("UPDATE image_projects", {}, Exception("database is locked"))
            return await original_execute(statement, *args, **kwargs)

        monkeypatch.setattr(db, "execute", failing_execute)

        result = await service.select_generation(project_id, first)

        assert result.success is False
        assert result.error == "database is locked"
        async with session_factory() as fresh:
            project = await fresh.get(ImageProject, project_id)
            selected = {g: (await fresh.get(ImageProjectGeneration, g)).is_selected for g in (first, second)}
        assert project.background_image_url.endswith("second.png")
        assert selected == {first: False, second: True}
