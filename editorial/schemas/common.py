from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from editorial.models._mixins import TranslationStatus


class StatusChange(BaseModel):
    status: TranslationStatus = Field(..., title="Target Status", description="The status to move the translation to.")


class AssociationUpdate(BaseModel):
    ids: List[Any] = Field(default_factory=list, title="IDs", description="Full replacement list of associated ids.")


class TranslationSummary(BaseModel):
    id: UUID
    title: Optional[str] = None
    slug: str
    language: str
    is_original: bool
    status: str


class MutationResponse(BaseModel):
    success: bool
    error: Optional[str] = None
    data: dict = Field(default_factory=dict)
