"""
Pydantic schemas for Category request/response validation.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from storefront.schemas.base import CamelModel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class CategoryRequest(CamelModel):
    """Payload for creating or replacing a category."""

    parent_category_uid: Optional[UUID] = None
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    icon: Optional[str] = Field(None, max_length=45)
    image_path: Optional[str] = Field(None, max_length=100)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class CategoryResponse(CamelModel):
    """Response model for category data."""

    uid: Optional[UUID] = None
    parent_category_uid: Optional[UUID] = None
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    image_path: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
