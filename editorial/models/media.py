import uuid

from sqlalchemy import Column, DateTime, Integer, String, Uuid

from editorial.database import Base
from editorial.models._mixins import utcnow


class Media(Base):
    __tablename__ = "media"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    url = Column(String, nullable=False)
    file_name = Column(String, nullable=False)
    mime_type = Column(String, nullable=True)
    size_bytes = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
