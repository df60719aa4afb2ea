"""
Pydantic schemas for User request/response validation.
"""
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from storefront.models.user import Role
from storefront.schemas.base import CamelModel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class SignupRequest(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=250)
    last_name: str = Field(..., min_length=1, max_length=250)
    username: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    uuid: Optional[UUID] = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class UserResponse(CamelModel):
    uuid: Optional[UUID] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    role: Optional[Role] = None
    is_enabled: bool = True
