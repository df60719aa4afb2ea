"""
Domain model representing a Category row from the DB.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID
import logging

logger = logging.getLogger(__name__)


@dataclass
class Category:
    id: Optional[int] = None
    uid: Optional[UUID] = None
    parent_id: Optional[int] = None
    parent_uid: Optional[UUID] = None
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    image_path: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row) -> "Category":
        """
        Build a Category from a sqlite3.Row object.
        The row may carry a ``parent_uid`` column when the query joins the parent.
        """
        logger.trace("Hydrating Category from database row")
        keys = row.keys()
        parent_uid = row["parent_uid"] if "parent_uid" in keys else None
        return cls(
            id=row["id"],
            uid=UUID(row["uid"]),
            parent_id=row["parent_id"],
            parent_uid=UUID(parent_uid) if parent_uid else None,
            name=row["name"],
            description=row["description"],
            icon=row["icon"],
            image_path=row["image_path"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
