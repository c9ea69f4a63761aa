"""
Fatwa group + per-language translations.
"""

import uuid

from sqlalchemy import Column, ForeignKey, Integer, String, Text, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship

from editorial.database import Base
from editorial.models._mixins import TimestampMixin, TranslationColumnsMixin


class Fatwa(TimestampMixin, Base):
    __tablename__ = "fatawa"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    author_id = Column(Uuid, nullable=True)
    classification_id = Column(Integer, ForeignKey("fatwa_classifications.id", ondelete="SET NULL"), nullable=True)
    individual_id = Column(Uuid, ForeignKey("individuals.id", ondelete="SET NULL"), nullable=True)
    source = Column(String, nullable=True)
    source_url = Column(String, nullable=True)
    media_id = Column(Uuid, ForeignKey("media.id", ondelete="SET NULL"), nullable=True)

    translations = relationship("FatwaTranslation", back_populates="group")


class FatwaTranslation(TranslationColumnsMixin, Base):
    __tablename__ = "fatwa_translations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    fatwa_id = Column(Uuid, ForeignKey("fatawa.id", ondelete="CASCADE"), nullable=True, index=True)

    title = Column(String, nullable=False)
    question = Column(Text, nullable=True)
    answer = Column(Text, nullable=True)
    summary = Column(Text, nullable=True)

    # Legacy inline metadata
    author_id = Column(Uuid, nullable=True)
    classification_id = Column(Integer, nullable=True)

    group = relationship("Fatwa", back_populates="translations")

    __table_args__ = (UniqueConstraint("language", "slug", name="uq_fatwa_translation_slug"),)


class FatwaGroupTag(Base):
    __tablename__ = "fatwa_group_tags"

    fatwa_id = Column(Uuid, ForeignKey("fatawa.id", ondelete="CASCADE"), primary_key=True)
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True)


class FatwaTag(Base):
    """Legacy tags attached to a single translation."""

    __tablename__ = "fatwa_tags"

    fatwa_id = Column(Uuid, ForeignKey("fatwa_translations.id", ondelete="CASCADE"), primary_key=True)
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True)
