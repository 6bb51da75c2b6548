# doc_catalog/schemas/doc.py
from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional
from datetime import datetime

from doc_catalog.core.slug_generator import SLUG_COLUMN_LENGTH
from doc_catalog.schemas.category import camel_config, CategorySummary, CategoryRef
from doc_catalog.schemas.code import CodeCreate, CodeResponse, CodeSnippet


class DocBase(BaseModel):
    """Base Pydantic model for Doc data"""
    ui_name: str = Field(..., description="Component name, e.g. Button")
    ui_subtitle: Optional[str] = Field(None, description="Short subtitle")
    docs: Optional[str] = Field(None, description="Long-form markup body")
    category_id: Optional[int] = Field(None, description="Owning category")

    model_config = camel_config


class DocCreate(DocBase):
    """
    Schema for creating a doc or a UI variant.

    ``codes`` that is missing or not a list creates a doc without snippets.
    Entries inside a list must carry both ``language`` and ``code``.
    """
    unique_slug: Optional[str] = Field(
        None, max_length=SLUG_COLUMN_LENGTH, description="Auto-generated when absent"
    )
    parent_id: Optional[int] = Field(None, description="Parent doc for UI variants")
    codes: List[CodeCreate] = Field(default_factory=list)

    @field_validator("codes", mode="before")
    @classmethod
    def ignore_non_list_codes(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return value


class DocUpdate(BaseModel):
    """Schema for updating a Doc. Only these fields are mutable; anything else is ignored."""
    ui_name: Optional[str] = None
    ui_subtitle: Optional[str] = None
    docs: Optional[str] = None
    category_id: Optional[int] = None

    model_config = camel_config


class DocInDB(DocBase):
    """Schema for Doc as stored in DB (includes DB fields)"""
    id: int
    unique_slug: str
    parent_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DocResponse(DocInDB):
    """Schema for API responses"""
    pass


class DocVariant(DocInDB):
    """UI variant as embedded in its parent, with its own snippets"""
    codes: List[CodeResponse] = []


class DocWithCodes(DocInDB):
    """Doc with snippets and category summary (shape returned by create operations)"""
    codes: List[CodeResponse] = []
    category: Optional[CategorySummary] = None


class DocDetail(DocWithCodes):
    """Fully loaded doc: snippets, category summary and variants"""
    ui_variants: List[DocVariant] = []


class DocSlugEntry(BaseModel):
    """Minimal doc projection used for navigation"""
    id: int
    ui_name: str
    unique_slug: str
    category_id: Optional[int] = None

    model_config = camel_config


class SlugGroup(BaseModel):
    """Docs of one category, in listing order"""
    category: CategoryRef
    children: List[DocSlugEntry] = []

    model_config = camel_config


class DocWithCodeSnippets(DocSlugEntry):
    """Main doc with its snippets restricted to one language"""
    category: Optional[CategoryRef] = None
    codes: List[CodeSnippet] = []


class MessageResponse(BaseModel):
    """Confirmation for operations that return no entity"""
    message: str
    id: Optional[int] = None
