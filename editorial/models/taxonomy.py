"""
Integer-keyed reference tables and their per-language names.

Each ``<entity>_translations`` table holds at most one name per language
(unique ``(<entity>_id, language)``), which is also the upsert conflict
target.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from editorial.database import Base
from editorial.models._mixins import utcnow


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, nullable=False)

    translations = relationship("TagTranslation", lazy="selectin", cascade="all, delete-orphan")


class TagTranslation(Base):
    __tablename__ = "tag_translations"

    id = Column(Integer, primary_key=True)
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False)
    language = Column(String(10), nullable=False)
    name = Column(String, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (UniqueConstraint("tag_id", "language", name="uq_tag_translation_language"),)


class Classification(Base):
    __tablename__ = "classifications"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, nullable=False)

    translations = relationship("ClassificationTranslation", lazy="selectin", cascade="all, delete-orphan")


class ClassificationTranslation(Base):
    __tablename__ = "classification_translations"

    id = Column(Integer, primary_key=True)
    classification_id = Column(Integer, ForeignKey("classifications.id", ondelete="CASCADE"), nullable=False)
    language = Column(String(10), nullable=False)
    name = Column(String, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        UniqueConstraint("classification_id", "language", name="uq_classification_translation_language"),
    )


class Type(Base):
    """Kind of individual (scholar, companion, ...), optionally grouped by classification."""

    __tablename__ = "types"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    classification_id = Column(Integer, ForeignKey("classifications.id", ondelete="SET NULL"), nullable=True)

    translations = relationship("TypeTranslation", lazy="selectin", cascade="all, delete-orphan")
    classification = relationship("Classification", lazy="selectin")


class TypeTranslation(Base):
    __tablename__ = "type_translations"

    id = Column(Integer, primary_key=True)
    type_id = Column(Integer, ForeignKey("types.id", ondelete="CASCADE"), nullable=False)
    language = Column(String(10), nullable=False)
    name = Column(String, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (UniqueConstraint("type_id", "language", name="uq_type_translation_language"),)


class FatwaClassification(Base):
    """Two-level tree: books at the top, chapters under them.

    ``display_order`` is relative to the siblings under the same parent.
    """

    __tablename__ = "fatwa_classifications"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=True)
    parent_id = Column(Integer, ForeignKey("fatwa_classifications.id", ondelete="SET NULL"), nullable=True, index=True)
    display_order = Column(Integer, nullable=False, default=0)

    translations = relationship("FatwaClassificationTranslation", lazy="selectin", cascade="all, delete-orphan")


class FatwaClassificationTranslation(Base):
    __tablename__ = "fatwa_classification_translations"

    id = Column(Integer, primary_key=True)
    classification_id = Column(Integer, ForeignKey("fatwa_classifications.id", ondelete="CASCADE"), nullable=False)
    language = Column(String(10), nullable=False)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        UniqueConstraint("classification_id", "language", name="uq_fatwa_classification_translation_language"),
    )
