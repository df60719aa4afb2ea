"""
SQL DDL statements for all application tables.
Tables are created in dependency order so foreign keys resolve correctly.

UUIDs are stored as their canonical text form, timestamps as ISO-8601 text.
"""
import logging
import sqlite3

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# DDL
# ---------------------------------------------------------------------------

CREATE_CATEGORIES_TABLE = """
CREATE TABLE IF NOT EXISTS categories (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    uid         TEXT    NOT NULL UNIQUE,
    parent_id   INTEGER REFERENCES categories(id) ON DELETE SET NULL,
    name        TEXT,
    description TEXT,
    icon        TEXT,
    image_path  TEXT,
    created_at  TEXT    NOT NULL DEFAULT (datetime('now')),
    updated_at  TEXT    NOT NULL DEFAULT (datetime('now'))
);
"""

CREATE_PRODUCTS_TABLE = """
CREATE TABLE IF NOT EXISTS products (
    id                      INTEGER PRIMARY KEY AUTOINCREMENT,
    uid                     TEXT    NOT NULL UNIQUE,
    name                    TEXT,
    sku                     TEXT,
    regular_price           REAL,
    discount_price          REAL,
    discount_price_end_date TEXT,
    lowest_price            REAL,
    description             TEXT,
    short_description       TEXT,
    note                    TEXT,
    published               INTEGER,
    quantity                INTEGER,
    created_at              TEXT    NOT NULL DEFAULT (datetime('now')),
    updated_at              TEXT    NOT NULL DEFAULT (datetime('now'))
);
"""

CREATE_PRODUCTS_CATEGORIES_TABLE = """
CREATE TABLE IF NOT EXISTS products_categories (
    products_id   INTEGER NOT NULL REFERENCES products(id) ON DELETE CASCADE,
    categories_id INTEGER NOT NULL REFERENCES categories(id) ON DELETE CASCADE,
    PRIMARY KEY (products_id, categories_id)
);
"""

CREATE_APP_USER_TABLE = """
CREATE TABLE IF NOT EXISTS app_user (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    uid         TEXT    NOT NULL UNIQUE,
    first_name  TEXT    NOT NULL,
    last_name   TEXT    NOT NULL,
    username    TEXT    NOT NULL UNIQUE,
    role        TEXT    NOT NULL DEFAULT 'ROLE_USER'
                        CHECK(role IN ('ROLE_USER', 'ROLE_ADMIN')),
    password    TEXT,
    is_enabled  INTEGER NOT NULL DEFAULT 1,
    created_at  TEXT    NOT NULL DEFAULT (datetime('now')),
    updated_at  TEXT    NOT NULL DEFAULT (datetime('now'))
);
"""

CREATE_ORDERS_TABLE = """
CREATE TABLE IF NOT EXISTS orders (
    id                   INTEGER PRIMARY KEY AUTOINCREMENT,
    uid                  TEXT    NOT NULL UNIQUE,
    delivery_method      TEXT    NOT NULL,
    customer_email       TEXT    NOT NULL,
    customer_phone       TEXT,
    address_street       TEXT,
    address_city         TEXT,
    address_postal_code  TEXT,
    address_country      TEXT,
    payment_method       TEXT    NOT NULL,
    order_date           TEXT    NOT NULL
);
"""

CREATE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS ix_categories_parent_id ON categories(parent_id)",
    "CREATE INDEX IF NOT EXISTS ix_products_categories_categories_id "
    "ON products_categories(categories_id)",
]

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

ALL_TABLES = [
    CREATE_CATEGORIES_TABLE,
    CREATE_PRODUCTS_TABLE,
    CREATE_PRODUCTS_CATEGORIES_TABLE,
    CREATE_APP_USER_TABLE,
    CREATE_ORDERS_TABLE,
]


def create_tables(conn: sqlite3.Connection) -> None:
    """Create all tables and indexes, idempotently."""
    cursor = conn.cursor()

    for ddl in ALL_TABLES:
        cursor.execute(ddl)
    for ddl in CREATE_INDEXES:
        cursor.execute(ddl)

    conn.commit()
    logger.info("Database schema ready")
