"""
Article group + per-language translations.

``articles`` holds the language-independent metadata (author, category,
individual, cover image). Older ``article_translations`` rows still carry
inline copies of author/category/image and may have no ``article_id``.
"""

import uuid

from sqlalchemy import JSON, Boolean, Column, ForeignKey, Integer, String, Text, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship

from editorial.database import Base
from editorial.models._mixins import TimestampMixin, TranslationColumnsMixin


class Article(TimestampMixin, Base):
    __tablename__ = "articles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    author_id = Column(Uuid, nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    individual_id = Column(Uuid, ForeignKey("individuals.id", ondelete="SET NULL"), nullable=True)
    image_url = Column(String, nullable=True)

    translations = relationship("ArticleTranslation", back_populates="group")


class ArticleTranslation(TranslationColumnsMixin, Base):
    __tablename__ = "article_translations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    article_id = Column(Uuid, ForeignKey("articles.id", ondelete="CASCADE"), nullable=True, index=True)

    title = Column(String, nullable=False)
    summary = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    content_json = Column(JSON, nullable=True)
    is_featured = Column(Boolean, nullable=True, default=False)

    # Legacy inline metadata, superseded by the ``articles`` row
    author_id = Column(Uuid, nullable=True)
    category_id = Column(Integer, nullable=True)
    image_url = Column(String, nullable=True)

    event_date_hijri = Column(String, nullable=True)
    event_date_hijri_year = Column(Integer, nullable=True)
    event_date_gregorian = Column(String, nullable=True)
    event_date_precision = Column(String(20), nullable=True)

    group = relationship("Article", back_populates="translations")

    __table_args__ = (UniqueConstraint("language", "slug", name="uq_article_translation_slug"),)


class ArticleGroupTag(Base):
    """Tags attached to the whole article group."""

    __tablename__ = "article_group_tags"

    article_id = Column(Uuid, ForeignKey("articles.id", ondelete="CASCADE"), primary_key=True)
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True)


class ArticleTag(Base):
    """Legacy tags attached to a single translation."""

    __tablename__ = "article_tags"

    article_id = Column(Uuid, ForeignKey("article_translations.id", ondelete="CASCADE"), primary_key=True)
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True)


class ArticleTranslator(Base):
    __tablename__ = "article_translators"

    article_id = Column(Uuid, ForeignKey("article_translations.id", ondelete="CASCADE"), primary_key=True)
    individual_id = Column(Uuid, ForeignKey("individuals.id", ondelete="CASCADE"), primary_key=True)
    display_order = Column(Integer, nullable=False, default=0)


class ArticleMedia(Base):
    __tablename__ = "article_media"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    article_id = Column(Uuid, ForeignKey("article_translations.id", ondelete="CASCADE"), nullable=False)
    media_id = Column(Uuid, ForeignKey("media.id", ondelete="CASCADE"), nullable=False)

    __table_args__ = (UniqueConstraint("article_id", "media_id", name="uq_article_media"),)
