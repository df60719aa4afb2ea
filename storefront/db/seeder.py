"""
Database seeder – creates a default admin account on first startup.

FOR DEVELOPMENT ONLY. Disable with SEED_ADMIN=false in production.
Credentials come from the ADMIN_USERNAME / ADMIN_PASSWORD settings.
"""
import logging
import sqlite3
import uuid

from storefront.core.config import settings
from storefront.core.security import PasswordEncoder
from storefront.models.user import Role, User
from storefront.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def seed_admin(conn: sqlite3.Connection, password_encoder: PasswordEncoder) -> None:
    """
    Insert the default admin user if it does not already exist.
    Safe to call on every startup – it is a no-op when the user is present.
    """
    repo = UserRepository(conn)
    if repo.get_by_username(settings.ADMIN_USERNAME):
        logger.info("Seeder: admin user '%s' already exists – skipping.", settings.ADMIN_USERNAME)
        return

    repo.create(
        User(
            uid=uuid.uuid4(),
            first_name="Default",
            last_name="Admin",
            username=settings.ADMIN_USERNAME,
            role=Role.ROLE_ADMIN,
            password=password_encoder.encode(settings.ADMIN_PASSWORD),
            is_enabled=True,
        )
    )
    conn.commit()
    logger.info("Seeder: created default admin user '%s'.", settings.ADMIN_USERNAME)
