"""
Shared fixtures: an in-memory database with the real schema, a fake password
encoder, and TestClient instances with dependency overrides.
"""
import os
import tempfile
import uuid

# Settings are read at import time, so the environment must be prepared first.
os.environ.setdefault("LOG_FILE_PATH", os.path.join(tempfile.gettempdir(), "storefront-tests.log"))
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SEED_ADMIN", "false")

import pytest
from fastapi.testclient import TestClient

from storefront.core.dependencies import (
    db_dependency,
    get_password_encoder,
    require_admin,
)
from storefront.core.security import PasswordEncoder
from storefront.db.database import get_connection
from storefront.db.schema import create_tables
from storefront.main import app
from storefront.models.user import Role, User


class FakePasswordEncoder(PasswordEncoder):
    """Deterministic, reversible-looking encoder so tests need no bcrypt round trips."""

    def encode(self, raw_password: str) -> str:
        return f"{{fake}}{raw_password[::-1]}"

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        return self.encode(raw_password) == encoded_password


@pytest.fixture
def password_encoder() -> FakePasswordEncoder:
    return FakePasswordEncoder()


@pytest.fixture
def conn():
    connection = get_connection(":memory:")
    create_tables(connection)
    yield connection
    connection.close()


@pytest.fixture
def admin_user() -> User:
    return User(
        id=1,
        uid=uuid.uuid4(),
        first_name="Ada",
        last_name="Admin",
        username="admin@example.com",
        role=Role.ROLE_ADMIN,
        password="{fake}x",
        is_enabled=True,
    )


@pytest.fixture
def client(conn, password_encoder):
    """Client backed by the in-memory database; admin guard left in place."""
    app.dependency_overrides[db_dependency] = lambda: conn
    app.dependency_overrides[get_password_encoder] = lambda: password_encoder
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client, admin_user):
    """Same as ``client`` but every admin-guarded endpoint sees ``admin_user``."""
    app.dependency_overrides[require_admin] = lambda: admin_user
    return client
