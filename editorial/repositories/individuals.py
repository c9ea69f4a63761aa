from editorial.models import Individual, IndividualTranslation
from editorial.repositories._base_repo import TranslationGroupRepository


class IndividualRepository(TranslationGroupRepository):
    entity_name = "individual"
    group_model = Individual
    translation_model = IndividualTranslation
    group_fk = "individual_id"
    title_field = "name"
    metadata_fields = ("type_id", "original_name", "ranking")
