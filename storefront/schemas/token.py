"""
Pydantic schemas for token responses.
Field names follow the OAuth2 token response, so no camelCase aliases here.
"""
from pydantic import BaseModel


class Token(BaseModel):
    """Response schema returned after a successful login."""
    access_token: str
    token_type: str = "bearer"
