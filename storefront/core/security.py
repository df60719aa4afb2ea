"""
Security utilities: password encoding and JWT creation/verification.
"""
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
import logging

from jose import jwt
from passlib.context import CryptContext

from storefront.core.config import settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Password encoding
# ---------------------------------------------------------------------------


class PasswordEncoder(ABC):
    """One-way password encoding capability injected into mappers and services."""

    @abstractmethod
    def encode(self, raw_password: str) -> str:
        ...

    @abstractmethod
    def matches(self, raw_password: str, encoded_password: str) -> bool:
        ...


class BcryptPasswordEncoder(PasswordEncoder):
    """PasswordEncoder backed by passlib's bcrypt scheme."""

    def __init__(self) -> None:
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto")

    def encode(self, raw_password: str) -> str:
        logger.trace("Hashing user password")
        return self._context.hash(raw_password)

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        logger.trace("Verifying password hash")
        return self._context.verify(raw_password, encoded_password)


password_encoder = BcryptPasswordEncoder()


# ---------------------------------------------------------------------------
# JWT helpers
# ---------------------------------------------------------------------------

def create_access_token(
    subject: str,
    role: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create and sign a short-lived access token for *subject* (a user UUID)."""
    now = datetime.now(tz=timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": subject,
        "role": role,
        "type": "access",
        "iat": now,
        "exp": now + expires_delta,
    }
    token = jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    logger.info("Issued access token for subject=%s", subject)
    return token


def decode_token(token: str) -> dict:
    """
    Decode and verify a JWT.

    Raises:
        jose.JWTError: if the token is invalid or expired.
    """
    logger.trace("Decoding JWT token")
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
