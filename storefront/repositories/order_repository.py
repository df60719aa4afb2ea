"""
Repository layer for Order persistence.
All SQL for the `orders` table lives here.
"""
import sqlite3
from typing import Optional
from datetime import datetime, timezone
from uuid import UUID
import logging

from storefront.core.logging_config import log_db_timing
from storefront.models.order import Address, Order

logger = logging.getLogger(__name__)


class OrderRepository:
    def __init__(self, conn: sqlite3.Connection) -> None:
        logger.trace("Initializing OrderRepository")
        self._conn = conn

    @log_db_timing
    def get_by_id(self, order_id: int) -> Optional[Order]:
        row = self._conn.execute(
            "SELECT * FROM orders WHERE id = ?", (order_id,)
        ).fetchone()
        return Order.from_row(row) if row else None

    @log_db_timing
    def get_by_uid(self, uid: UUID) -> Optional[Order]:
        row = self._conn.execute(
            "SELECT * FROM orders WHERE uid = ?", (str(uid),)
        ).fetchone()
        return Order.from_row(row) if row else None

    @log_db_timing
    def list_all(self) -> list[Order]:
        rows = self._conn.execute(
            "SELECT * FROM orders ORDER BY order_date DESC, id DESC"
        ).fetchall()
        return [Order.from_row(r) for r in rows]

    @log_db_timing
    def create(self, order: Order) -> Order:
        """Insert *order*, stamping the order date, and return the stored row."""
        logger.info("Creating order record uid=%s", order.uid)
        address = order.delivery_address or Address()
        cursor = self._conn.execute(
            """
            INSERT INTO orders
                (uid, delivery_method, customer_email, customer_phone,
                 address_street, address_city, address_postal_code, address_country,
                 payment_method, order_date)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                str(order.uid),
                order.delivery_method,
                order.customer_email,
                order.customer_phone,
                address.street,
                address.city,
                address.postal_code,
                address.country,
                order.payment_method,
                datetime.now(tz=timezone.utc).isoformat(),
            ),
        )
        return self.get_by_id(cursor.lastrowid)  # type: ignore[return-value]
