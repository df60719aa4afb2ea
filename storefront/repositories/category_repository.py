"""
Repository layer for Category persistence.
All SQL for the `categories` table lives here.
"""
import sqlite3
from typing import Iterable, Optional
from datetime import datetime, timezone
from uuid import UUID
import logging

from storefront.core.logging_config import log_db_timing
from storefront.models.category import Category

logger = logging.getLogger(__name__)

# Every read joins the parent so the entity carries the parent's public UUID.
SELECT_CATEGORIES = """
    SELECT c.*, p.uid AS parent_uid
    FROM categories c
    LEFT JOIN categories p ON p.id = c.parent_id
"""


class CategoryRepository:
    """Data access layer for category records."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        logger.trace("Initializing CategoryRepository")
        self._conn = conn

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @log_db_timing
    def get_by_id(self, category_id: int) -> Optional[Category]:
        row = self._conn.execute(
            f"{SELECT_CATEGORIES} WHERE c.id = ?", (category_id,)
        ).fetchone()
        return Category.from_row(row) if row else None

    @log_db_timing
    def get_by_uid(self, uid: UUID) -> Optional[Category]:
        row = self._conn.execute(
            f"{SELECT_CATEGORIES} WHERE c.uid = ?", (str(uid),)
        ).fetchone()
        return Category.from_row(row) if row else None

    @log_db_timing
    def get_by_uids(self, uids: Iterable[UUID]) -> list[Category]:
        """Return the categories matching *uids*; unknown UUIDs are simply absent."""
        uid_values = list(dict.fromkeys(str(uid) for uid in uids))
        if not uid_values:
            return []
        placeholders = ", ".join("?" for _ in uid_values)
        rows = self._conn.execute(
            f"{SELECT_CATEGORIES} WHERE c.uid IN ({placeholders}) ORDER BY c.id",
            uid_values,
        ).fetchall()
        return [Category.from_row(r) for r in rows]

    @log_db_timing
    def list_all(self) -> list[Category]:
        rows = self._conn.execute(f"{SELECT_CATEGORIES} ORDER BY c.id").fetchall()
        return [Category.from_row(r) for r in rows]

    @log_db_timing
    def list_children(self, parent_id: int) -> list[Category]:
        rows = self._conn.execute(
            f"{SELECT_CATEGORIES} WHERE c.parent_id = ? ORDER BY c.id", (parent_id,)
        ).fetchall()
        return [Category.from_row(r) for r in rows]

    @log_db_timing
    def list_for_product(self, product_id: int) -> list[Category]:
        rows = self._conn.execute(
            f"""
            {SELECT_CATEGORIES}
            JOIN products_categories pc ON pc.categories_id = c.id
            WHERE pc.products_id = ?
            ORDER BY c.id
            """,
            (product_id,),
        ).fetchall()
        return [Category.from_row(r) for r in rows]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    @log_db_timing
    def create(self, category: Category) -> Category:
        """Insert *category* (its parent_id already resolved) and return the stored row."""
        logger.info("Creating category record uid=%s", category.uid)
        now = datetime.now(tz=timezone.utc).isoformat()
        cursor = self._conn.execute(
            """
            INSERT INTO categories
                (uid, parent_id, name, description, icon, image_path, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                str(category.uid),
                category.parent_id,
                category.name,
                category.description,
                category.icon,
                category.image_path,
                now,
                now,
            ),
        )
        return self.get_by_id(cursor.lastrowid)  # type: ignore[return-value]

    @log_db_timing
    def replace(self, category: Category) -> Category:
        """Overwrite every writable column of an existing category."""
        logger.info("Replacing category record id=%s", category.id)
        self._conn.execute(
            """
            UPDATE categories
            SET parent_id = ?, name = ?, description = ?, icon = ?,
                image_path = ?, updated_at = ?
            WHERE id = ?
            """,
            (
                category.parent_id,
                category.name,
                category.description,
                category.icon,
                category.image_path,
                datetime.now(tz=timezone.utc).isoformat(),
                category.id,
            ),
        )
        return self.get_by_id(category.id)  # type: ignore[arg-type,return-value]

    @log_db_timing
    def delete(self, category_id: int) -> bool:
        """Delete a category; product links cascade and children are detached."""
        logger.info("Deleting category record id=%s", category_id)
        cursor = self._conn.execute(
            "DELETE FROM categories WHERE id = ?", (category_id,)
        )
        logger.info("Category delete affected %s rows", cursor.rowcount)
        return cursor.rowcount > 0
