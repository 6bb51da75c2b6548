# doc_catalog/schemas/category.py
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, Union
from datetime import datetime

# camelCase on the wire, snake_case in Python
camel_config = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, from_attributes=True
)


class CategoryBase(BaseModel):
    """Base Pydantic model for Category data"""
    category_name: str = Field(..., description="Display name of the category")
    slug: str = Field(..., description="URL-safe unique identifier for the category")

    model_config = camel_config


class CategoryCreate(BaseModel):
    """Schema for creating a new Category (slug generated from the name when absent)"""
    category_name: str = Field(..., min_length=1)
    slug: Optional[str] = None

    model_config = camel_config


class CategoryUpdate(BaseModel):
    """Schema for updating a Category (all fields optional)"""
    category_name: Optional[str] = None
    slug: Optional[str] = None

    model_config = camel_config


class CategoryInDB(CategoryBase):
    """Schema for Category as stored in DB (includes DB fields)"""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryResponse(CategoryInDB):
    """Schema for API responses"""
    pass


class CategorySummary(CategoryBase):
    """Category as embedded in a doc: name and slug only"""
    pass


class CategoryRef(CategoryBase):
    """Category as embedded in slug listings. The id is "0" for the Uncategorized group."""
    id: Union[int, str]
