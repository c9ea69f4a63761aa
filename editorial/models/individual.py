"""
Individual (biography) group + per-language translations.
"""

import uuid

from sqlalchemy import Column, ForeignKey, Integer, String, Text, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship

from editorial.database import Base
from editorial.models._mixins import TimestampMixin, TranslationColumnsMixin


class Individual(TimestampMixin, Base):
    __tablename__ = "individuals"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    type_id = Column(Integer, ForeignKey("types.id", ondelete="SET NULL"), nullable=True)
    original_name = Column(String, nullable=True)
    ranking = Column(String, nullable=True)

    translations = relationship("IndividualTranslation", back_populates="group")


class IndividualTranslation(TranslationColumnsMixin, Base):
    __tablename__ = "individual_translations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    individual_id = Column(Uuid, ForeignKey("individuals.id", ondelete="CASCADE"), nullable=True, index=True)

    name = Column(String, nullable=False)
    biography = Column(Text, nullable=True)
    birth_date_hijri = Column(String, nullable=True)
    death_date_hijri = Column(String, nullable=True)

    # Legacy inline metadata
    type_id = Column(Integer, nullable=True)

    group = relationship("Individual", back_populates="translations")

    __table_args__ = (UniqueConstraint("language", "slug", name="uq_individual_translation_slug"),)
