from ._mixins import STATUS_TRANSITIONS, TranslationStatus
from .article import Article, ArticleGroupTag, ArticleMedia, ArticleTag, ArticleTranslation, ArticleTranslator
from .fatwa import Fatwa, FatwaGroupTag, FatwaTag, FatwaTranslation
from .image_generator import ImagePreset, ImageProject, ImageProjectGeneration
from .individual import Individual, IndividualTranslation
from .media import Media
from .taxonomy import (
    Category,
    Classification,
    ClassificationTranslation,
    FatwaClassification,
    FatwaClassificationTranslation,
    Tag,
    TagTranslation,
    Type,
    TypeTranslation,
)
from .theme import Theme, ThemeArticle, ThemeTranslation
from .timeline import Timeline, TimelineArticle, TimelineTranslation

__all__ = [
    "STATUS_TRANSITIONS",
    "TranslationStatus",
    "Article",
    "ArticleGroupTag",
    "ArticleMedia",
    "ArticleTag",
    "ArticleTranslation",
    "ArticleTranslator",
    "Fatwa",
    "FatwaGroupTag",
    "FatwaTag",
    "FatwaTranslation",
    "ImagePreset",
    "ImageProject",
    "ImageProjectGeneration",
    "Individual",
    "IndividualTranslation",
    "Media",
    "Category",
    "Classification",
    "ClassificationTranslation",
    "FatwaClassification",
    "FatwaClassificationTranslation",
    "Tag",
    "TagTranslation",
    "Type",
    "TypeTranslation",
    "Theme",
    "ThemeArticle",
    "ThemeTranslation",
    "Timeline",
    "TimelineArticle",
    "TimelineTranslation",
]
