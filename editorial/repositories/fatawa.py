"""Fatwa repository."""

from editorial.models import Fatwa, FatwaGroupTag, FatwaTag, FatwaTranslation
from editorial.repositories._base_repo import AssociationSpec, TranslationGroupRepository


class FatwaRepository(TranslationGroupRepository):
    entity_name = "fatwa"
    group_model = Fatwa
    translation_model = FatwaTranslation
    group_fk = "fatwa_id"
    metadata_fields = ("author_id", "classification_id", "individual_id", "source", "source_url", "media_id")
    associations = (
        AssociationSpec(
            kind="tags",
            value_column="tag_id",
            group_model=FatwaGroupTag,
            group_fk="fatwa_id",
            legacy_model=FatwaTag,
            legacy_fk="fatwa_id",
        ),
    )
