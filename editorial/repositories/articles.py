"""Article repository."""

from editorial.models import Article, ArticleGroupTag, ArticleTag, ArticleTranslation, ArticleTranslator
from editorial.repositories._base_repo import AssociationSpec, TranslationGroupRepository


class ArticleRepository(TranslationGroupRepository):
    entity_name = "article"
    group_model = Article
    translation_model = ArticleTranslation
    group_fk = "article_id"
    metadata_fields = ("author_id", "category_id", "individual_id", "image_url")
    associations = (
        AssociationSpec(
            kind="tags",
            value_column="tag_id",
            group_model=ArticleGroupTag,
            group_fk="article_id",
            legacy_model=ArticleTag,
            legacy_fk="article_id",
        ),
        # Translators are credited per translation, never per group
        AssociationSpec(
            kind="translators",
            value_column="individual_id",
            legacy_model=ArticleTranslator,
            legacy_fk="article_id",
            order_column="display_order",
        ),
    )
