"""
Pydantic schemas for Product request/response validation.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from storefront.schemas.base import CamelModel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class ProductRequest(CamelModel):
    """Payload for creating a product or replacing all of its fields."""

    name: str = Field(..., min_length=1, max_length=45)
    sku: Optional[str] = Field(None, max_length=45)
    regular_price: Optional[float] = Field(None, ge=0)
    discount_price: Optional[float] = Field(None, ge=0)
    discount_price_end_date: Optional[datetime] = None
    lowest_price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = Field(None, max_length=4000)
    short_description: Optional[str] = Field(None, max_length=500)
    note: Optional[str] = Field(None, max_length=100)
    published: Optional[bool] = None
    quantity: Optional[int] = Field(None, ge=0)
    category_uids: list[UUID] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class ProductCategoryResponse(CamelModel):
    """Category summary embedded in a product."""

    uid: Optional[UUID] = None
    name: Optional[str] = None


class ProductResponse(CamelModel):
    """Response model for product data."""

    uid: Optional[UUID] = None
    name: Optional[str] = None
    sku: Optional[str] = None
    regular_price: Optional[float] = None
    discount_price: Optional[float] = None
    discount_price_end_date: Optional[datetime] = None
    lowest_price: Optional[float] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    note: Optional[str] = None
    published: Optional[bool] = None
    quantity: Optional[int] = None
    categories: list[ProductCategoryResponse] = Field(default_factory=list)


class PaginatedProductResponse(CamelModel):
    """One page of products plus the total number of pages."""

    products: list[ProductResponse]
    total_pages: int
