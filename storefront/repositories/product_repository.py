"""
Repository layer for Product persistence.
All SQL for the `products` and `products_categories` tables lives here.
"""
import sqlite3
from typing import Optional
from datetime import datetime, timezone
from uuid import UUID
import logging

from storefront.core.logging_config import log_db_timing
from storefront.models.product import Product
from storefront.repositories.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class ProductRepository:
    """Data access layer for product records and their category links."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        logger.trace("Initializing ProductRepository")
        self._conn = conn
        self._categories = CategoryRepository(conn)

    def _hydrate(self, row) -> Product:
        return Product.from_row(row, self._categories.list_for_product(row["id"]))

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @log_db_timing
    def get_by_id(self, product_id: int) -> Optional[Product]:
        row = self._conn.execute(
            "SELECT * FROM products WHERE id = ?", (product_id,)
        ).fetchone()
        return self._hydrate(row) if row else None

    @log_db_timing
    def get_by_uid(self, uid: UUID) -> Optional[Product]:
        row = self._conn.execute(
            "SELECT * FROM products WHERE uid = ?", (str(uid),)
        ).fetchone()
        return self._hydrate(row) if row else None

    @log_db_timing
    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM products").fetchone()[0]

    @log_db_timing
    def list_page(self, offset: int, limit: int) -> list[Product]:
        """Return up to *limit* products starting at *offset*, in insertion order."""
        rows = self._conn.execute(
            "SELECT * FROM products ORDER BY id LIMIT ? OFFSET ?", (limit, offset)
        ).fetchall()
        return [self._hydrate(r) for r in rows]

    @log_db_timing
    def list_by_category_id(self, category_id: int) -> list[Product]:
        rows = self._conn.execute(
            """
            SELECT p.*
            FROM products p
            JOIN products_categories pc ON pc.products_id = p.id
            WHERE pc.categories_id = ?
            ORDER BY p.id
            """,
            (category_id,),
        ).fetchall()
        return [self._hydrate(r) for r in rows]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def _columns(self, product: Product) -> tuple:
        end_date = product.discount_price_end_date
        return (
            product.name,
            product.sku,
            product.regular_price,
            product.discount_price,
            end_date.isoformat() if end_date else None,
            product.lowest_price,
            product.description,
            product.short_description,
            product.note,
            int(product.published) if product.published is not None else None,
            product.quantity,
        )

    def _link_categories(self, product_id: int, product: Product) -> None:
        self._conn.execute(
            "DELETE FROM products_categories WHERE products_id = ?", (product_id,)
        )
        self._conn.executemany(
            "INSERT OR IGNORE INTO products_categories (products_id, categories_id) VALUES (?, ?)",
            [(product_id, category.id) for category in product.categories],
        )

    @log_db_timing
    def create(self, product: Product) -> Product:
        """Insert *product* with its (already resolved) categories."""
        logger.info("Creating product record uid=%s", product.uid)
        now = datetime.now(tz=timezone.utc).isoformat()
        cursor = self._conn.execute(
            """
            INSERT INTO products
                (name, sku, regular_price, discount_price, discount_price_end_date,
                 lowest_price, description, short_description, note, published,
                 quantity, uid, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            self._columns(product) + (str(product.uid), now, now),
        )
        product_id = cursor.lastrowid
        self._link_categories(product_id, product)
        return self.get_by_id(product_id)  # type: ignore[return-value]

    @log_db_timing
    def replace(self, product: Product) -> Product:
        """Overwrite every writable column and the category links of an existing product."""
        logger.info("Replacing product record id=%s", product.id)
        self._conn.execute(
            """
            UPDATE products
            SET name = ?, sku = ?, regular_price = ?, discount_price = ?,
                discount_price_end_date = ?, lowest_price = ?, description = ?,
                short_description = ?, note = ?, published = ?, quantity = ?,
                updated_at = ?
            WHERE id = ?
            """,
            self._columns(product)
            + (datetime.now(tz=timezone.utc).isoformat(), product.id),
        )
        self._link_categories(product.id, product)  # type: ignore[arg-type]
        return self.get_by_id(product.id)  # type: ignore[arg-type,return-value]

    @log_db_timing
    def delete(self, product_id: int) -> bool:
        """Delete a product; its category links cascade."""
        logger.info("Deleting product record id=%s", product_id)
        cursor = self._conn.execute(
            "DELETE FROM products WHERE id = ?", (product_id,)
        )
        logger.info("Product delete affected %s rows", cursor.rowcount)
        return cursor.rowcount > 0
