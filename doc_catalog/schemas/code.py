# doc_catalog/schemas/code.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from doc_catalog.schemas.category import camel_config


class CodeBase(BaseModel):
    """Base Pydantic model for a code snippet"""
    language: str = Field(..., description="Free-text language tag, e.g. jsx, css, tailwind")
    code: str = Field(..., description="Source text, stored verbatim")

    model_config = camel_config


class CodeCreate(CodeBase):
    """Schema for a snippet supplied with a new doc"""
    pass


class CodeInDB(CodeBase):
    """Schema for a snippet as stored in DB"""
    id: int
    doc_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CodeResponse(CodeInDB):
    """Schema for API responses"""
    pass


class CodeSnippet(CodeBase):
    """Minimal snippet projection used by the filtered code listing"""
    id: int
