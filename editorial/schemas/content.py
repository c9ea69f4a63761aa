"""Request bodies for the translation-grouped content types.

Every create body doubles as the body of "translate": ``language`` is then
required and the shared metadata fields are ignored.
"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from editorial.models._mixins import TranslationStatus


class TranslationFields(BaseModel):
    slug: Optional[str] = Field(None, title="Slug", description="URL slug, unique per language. Generated from the title when omitted.")
    language: Optional[str] = Field(None, title="Language", description="Language code of this translation.")
    status: Optional[TranslationStatus] = Field(None, title="Status", description="Initial status; only honoured on create.")

    def to_data(self) -> dict[str, Any]:
        data = self.model_dump(exclude_unset=True)
        if data.get("status") is not None:
            data["status"] = TranslationStatus(data["status"]).value
        return data


class ArticleCreate(TranslationFields):
    title: str = Field(..., title="Title")
    summary: Optional[str] = None
    content: Optional[str] = None
    content_json: Optional[dict] = None
    is_featured: Optional[bool] = None
    event_date_hijri: Optional[str] = Field(None, description="Millisecond timestamp string or legacy Hijri text.")
    event_date_hijri_year: Optional[int] = None
    event_date_gregorian: Optional[str] = None
    event_date_precision: Optional[str] = None
    author_id: Optional[UUID] = None
    category_id: Optional[int] = None
    individual_id: Optional[UUID] = None
    image_url: Optional[str] = None


class ArticleUpdate(ArticleCreate):
    title: Optional[str] = None


class FatwaCreate(TranslationFields):
    title: str = Field(..., title="Title")
    question: Optional[str] = None
    answer: Optional[str] = None
    summary: Optional[str] = None
    author_id: Optional[UUID] = None
    classification_id: Optional[int] = None
    individual_id: Optional[UUID] = None
    source: Optional[str] = None
    source_url: Optional[str] = None
    media_id: Optional[UUID] = None


class FatwaUpdate(FatwaCreate):
    title: Optional[str] = None


class IndividualCreate(TranslationFields):
    name: str = Field(..., title="Name")
    biography: Optional[str] = None
    birth_date_hijri: Optional[str] = None
    death_date_hijri: Optional[str] = None
    type_id: Optional[int] = None
    original_name: Optional[str] = None
    ranking: Optional[str] = None


class IndividualUpdate(IndividualCreate):
    name: Optional[str] = None


class ThemeCreate(TranslationFields):
    title: str = Field(..., title="Title")
    description: Optional[str] = None
    category_id: Optional[int] = None
    image_url: Optional[str] = None


class ThemeUpdate(ThemeCreate):
    title: Optional[str] = None


class TimelineCreate(TranslationFields):
    title: str = Field(..., title="Title")
    description: Optional[str] = None
    image_url: Optional[str] = None


class TimelineUpdate(TimelineCreate):
    title: Optional[str] = None
