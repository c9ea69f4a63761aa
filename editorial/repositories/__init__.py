from .articles import ArticleRepository
from .fatawa import FatwaRepository
from .individuals import IndividualRepository
from .media import MediaRepository
from .taxonomy import (
    CategoryRepository,
    ClassificationRepository,
    FatwaClassificationRepository,
    TagRepository,
    TypeRepository,
)
from .themes import ThemeRepository
from .timelines import TimelineRepository

__all__ = [
    "ArticleRepository",
    "FatwaRepository",
    "IndividualRepository",
    "MediaRepository",
    "CategoryRepository",
    "ClassificationRepository",
    "FatwaClassificationRepository",
    "TagRepository",
    "TypeRepository",
    "ThemeRepository",
    "TimelineRepository",
]
