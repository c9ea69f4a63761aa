from editorial.models import Timeline, TimelineTranslation
from editorial.repositories._base_repo import TranslationGroupRepository


class TimelineRepository(TranslationGroupRepository):
    entity_name = "timeline"
    group_model = Timeline
    translation_model = TimelineTranslation
    group_fk = "timeline_id"
    metadata_fields = ("image_url",)
