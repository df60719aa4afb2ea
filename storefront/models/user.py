"""
Domain model (plain Python dataclass) representing an APP_USER row from the DB.
This is the internal representation used across service and repository layers.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID
import logging

logger = logging.getLogger(__name__)


class Role(str, Enum):
    ROLE_USER = "ROLE_USER"
    ROLE_ADMIN = "ROLE_ADMIN"


@dataclass
class User:
    id: Optional[int] = None
    uid: Optional[UUID] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    role: Optional[Role] = None
    # Always the encoder's output, never plaintext.
    password: Optional[str] = field(default=None, repr=False)
    is_enabled: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row) -> "User":
        """Build a User from a sqlite3.Row object."""
        logger.trace("Hydrating User from database row")
        return cls(
            id=row["id"],
            uid=UUID(row["uid"]),
            first_name=row["first_name"],
            last_name=row["last_name"],
            username=row["username"],
            role=Role(row["role"]),
            password=row["password"],
            is_enabled=bool(row["is_enabled"]),
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
