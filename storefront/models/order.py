"""
Domain model representing an ORDERS row from the DB.
The delivery address is stored inline on the order row.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class Address:
    street: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


@dataclass
class Order:
    id: Optional[int] = None
    uid: Optional[UUID] = None
    delivery_method: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    delivery_address: Optional[Address] = None
    payment_method: Optional[str] = None
    order_date: Optional[datetime] = None

    @classmethod
    def from_row(cls, row) -> "Order":
        """Build an Order from a sqlite3.Row object."""
        return cls(
            id=row["id"],
            uid=UUID(row["uid"]),
            delivery_method=row["delivery_method"],
            customer_email=row["customer_email"],
            customer_phone=row["customer_phone"],
            delivery_address=Address(
                street=row["address_street"],
                city=row["address_city"],
                postal_code=row["address_postal_code"],
                country=row["address_country"],
            ),
            payment_method=row["payment_method"],
            order_date=datetime.fromisoformat(row["order_date"]),
        )
