from typing import List, Optional

from pydantic import BaseModel, Field


class TranslationEntry(BaseModel):
    language: str
    name: Optional[str] = None
    description: Optional[str] = Field(None, description="Fatwa classifications only; ignored elsewhere.")


class TaxonomyCreate(BaseModel):
    slug: str = Field(..., title="Slug")
    name: Optional[str] = Field(None, description="Base name (types and fatwa classifications).")
    classification_id: Optional[int] = Field(None, description="Owning classification (types only).")
    parent_id: Optional[int] = Field(None, description="Parent book (fatwa classifications only).")
    display_order: Optional[int] = Field(None, description="Position among siblings; defaults to the end.")
    translations: List[TranslationEntry] = Field(default_factory=list)


class TranslationsUpsert(BaseModel):
    translations: List[TranslationEntry]


class ClassificationReorder(BaseModel):
    ids: List[int] = Field(..., description="Classification ids in their new display order.")


class ClassificationParent(BaseModel):
    parent_id: Optional[int] = Field(None, description="New parent book; null moves to the top level.")
