from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class EventCreate(BaseModel):
    article_id: UUID = Field(..., title="Article Translation ID")
    display_order: Optional[int] = Field(None, description="Position; appended at the end when omitted.")
    custom_event_date_hijri: Optional[str] = None
    custom_event_date_gregorian: Optional[str] = None
    custom_title: Optional[str] = None
    parent_id: Optional[UUID] = Field(None, description="Parent event (themes only).")


class EventOrderItem(BaseModel):
    id: UUID
    display_order: int


class EventReorder(BaseModel):
    items: List[EventOrderItem]


class EventParentUpdate(BaseModel):
    parent_id: Optional[UUID] = Field(None, description="New parent event, or null to move to the top level.")


class EventArticleCreate(BaseModel):
    title: str
    slug: Optional[str] = None
    summary: Optional[str] = None
    author_id: Optional[UUID] = None
    category_id: Optional[int] = None
    event_date_hijri: Optional[str] = None
    event_date_hijri_year: Optional[int] = None
    event_date_gregorian: Optional[str] = None
    language: Optional[str] = None
