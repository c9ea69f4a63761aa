from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class MediaCreate(BaseModel):
    url: str
    file_name: str
    mime_type: Optional[str] = None
    size_bytes: Optional[int] = None


class ArticleMediaLink(BaseModel):
    media_id: UUID
