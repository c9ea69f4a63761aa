"""
Timeline group, translations and the ordered article events of a timeline.
"""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship

from editorial.database import Base
from editorial.models._mixins import TimestampMixin, TranslationColumnsMixin, utcnow


class Timeline(TimestampMixin, Base):
    __tablename__ = "timelines"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    image_url = Column(String, nullable=True)

    translations = relationship("TimelineTranslation", back_populates="group")


class TimelineTranslation(TranslationColumnsMixin, Base):
    __tablename__ = "timeline_translations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    timeline_id = Column(Uuid, ForeignKey("timelines.id", ondelete="CASCADE"), nullable=True, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    # Legacy inline metadata
    image_url = Column(String, nullable=True)

    group = relationship("Timeline", back_populates="translations")

    __table_args__ = (UniqueConstraint("language", "slug", name="uq_timeline_translation_slug"),)


class TimelineArticle(Base):
    __tablename__ = "timeline_articles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    timeline_id = Column(Uuid, ForeignKey("timeline_translations.id", ondelete="CASCADE"), nullable=False, index=True)
    article_id = Column(Uuid, ForeignKey("article_translations.id", ondelete="CASCADE"), nullable=False)
    display_order = Column(Integer, nullable=False, default=0)
    custom_event_date_hijri = Column(String, nullable=True)
    custom_event_date_gregorian = Column(String, nullable=True)
    custom_title = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    article = relationship("ArticleTranslation", lazy="joined")

    __table_args__ = (UniqueConstraint("timeline_id", "article_id", name="uq_timeline_article"),)
