"""
Pydantic schemas for Order request/response validation.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from storefront.schemas.base import CamelModel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class AddressRequest(CamelModel):
    street: str = Field(..., min_length=1, max_length=200)
    city: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)


class OrderRequest(CamelModel):
    """Payload for placing an order."""

    delivery_method: str = Field(..., min_length=1, max_length=50)
    customer_email: EmailStr
    customer_phone: Optional[str] = Field(None, max_length=20)
    delivery_address: AddressRequest
    payment_method: str = Field(..., min_length=1, max_length=50)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class AddressResponse(CamelModel):
    street: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class OrderDetailsResponse(CamelModel):
    order_uid: Optional[UUID] = None
    delivery_method: Optional[str] = None
    customer_email: Optional[str] = None
    delivery_address: Optional[AddressResponse] = None
    payment_method: Optional[str] = None
    order_date: Optional[datetime] = None
    customer_phone: Optional[str] = None
