from editorial.models import Theme, ThemeTranslation
from editorial.repositories._base_repo import TranslationGroupRepository


class ThemeRepository(TranslationGroupRepository):
    entity_name = "theme"
    group_model = Theme
    translation_model = ThemeTranslation
    group_fk = "theme_id"
    metadata_fields = ("category_id", "image_url")
