"""
Domain model representing a Product row from the DB.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from storefront.models.category import Category


@dataclass
class Product:
    id: Optional[int] = None
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
    # Set semantics: callers must not rely on the order.
    categories: list[Category] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row, categories: Optional[list[Category]] = None) -> "Product":
        """Build a Product from a sqlite3.Row object and its already loaded categories."""
        end_date = row["discount_price_end_date"]
        published = row["published"]
        return cls(
            id=row["id"],
            uid=UUID(row["uid"]),
            name=row["name"],
            sku=row["sku"],
            regular_price=row["regular_price"],
            discount_price=row["discount_price"],
            discount_price_end_date=datetime.fromisoformat(end_date) if end_date else None,
            lowest_price=row["lowest_price"],
            description=row["description"],
            short_description=row["short_description"],
            note=row["note"],
            published=bool(published) if published is not None else None,
            quantity=row["quantity"],
            categories=categories or [],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
