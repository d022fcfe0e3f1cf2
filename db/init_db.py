"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db

The `universities` table is reference data loaded by whoever owns the
directory; CMC only reads from it.
"""

import psycopg2

from db.connection import get_connection, release_connection
from errors import StoreError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: every CMC account, admins included
CREATE TABLE IF NOT EXISTS users (
    username        VARCHAR(50) PRIMARY KEY,
    password        VARCHAR(100) NOT NULL,
    first_name      VARCHAR(100) NOT NULL,
    last_name       VARCHAR(100) NOT NULL,
    role            VARCHAR(10) NOT NULL DEFAULT 'standard' CHECK (role IN ('admin', 'standard')),
    active          BOOLEAN NOT NULL DEFAULT TRUE,
    created_at      TIMESTAMPTZ DEFAULT NOW()
);

-- Universities table: read-only school directory
CREATE TABLE IF NOT EXISTS universities (
    name            VARCHAR(255) PRIMARY KEY,
    state           VARCHAR(50) NOT NULL
);

-- Saved schools: which user saved which university.
-- No ON DELETE CASCADE: removing a user clears these rows explicitly first.
CREATE TABLE IF NOT EXISTS saved_schools (
    id              SERIAL PRIMARY KEY,
    username        VARCHAR(50) NOT NULL REFERENCES users(username),
    university_name VARCHAR(255) NOT NULL REFERENCES universities(name),
    saved_at        TIMESTAMPTZ DEFAULT NOW(),
    UNIQUE(username, university_name)
);

CREATE INDEX IF NOT EXISTS idx_universities_state ON universities(state);
CREATE INDEX IF NOT EXISTS idx_saved_schools_user ON saved_schools(username);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except psycopg2.Error as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise StoreError("Failed to initialize schema") from e
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("✅ Database schema created successfully.")
