"""
Theme group, translations and the ordered article events of a theme.

Theme events nest at most two levels deep through ``parent_id``.
"""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship

from editorial.database import Base
from editorial.models._mixins import TimestampMixin, TranslationColumnsMixin, utcnow


class Theme(TimestampMixin, Base):
    __tablename__ = "themes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    image_url = Column(String, nullable=True)

    translations = relationship("ThemeTranslation", back_populates="group")


class ThemeTranslation(TranslationColumnsMixin, Base):
    __tablename__ = "theme_translations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    theme_id = Column(Uuid, ForeignKey("themes.id", ondelete="CASCADE"), nullable=True, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    # Legacy inline metadata
    category_id = Column(Integer, nullable=True)
    image_url = Column(String, nullable=True)

    group = relationship("Theme", back_populates="translations")

    __table_args__ = (UniqueConstraint("language", "slug", name="uq_theme_translation_slug"),)


class ThemeArticle(Base):
    __tablename__ = "theme_articles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    theme_id = Column(Uuid, ForeignKey("theme_translations.id", ondelete="CASCADE"), nullable=False, index=True)
    article_id = Column(Uuid, ForeignKey("article_translations.id", ondelete="CASCADE"), nullable=False)
    display_order = Column(Integer, nullable=False, default=0)
    custom_event_date_hijri = Column(String, nullable=True)
    custom_event_date_gregorian = Column(String, nullable=True)
    custom_title = Column(String, nullable=True)
    parent_id = Column(Uuid, ForeignKey("theme_articles.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    article = relationship("ArticleTranslation", lazy="joined")

    __table_args__ = (UniqueConstraint("theme_id", "article_id", name="uq_theme_article"),)
