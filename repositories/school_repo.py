"""
repositories/school_repo.py
----------------------------
Data access layer for the university directory and saved schools.
Reads from `universities` (reference data) and reads/writes `saved_schools`.
"""

import psycopg2

from db.connection import get_connection, release_connection
from errors import StoreError
from models.institution import Institution
from utils.logger import get_logger

logger = get_logger(__name__)


class SchoolRepository:
    """Repository for the universities and saved_schools tables."""

    # ── Universities (read-only) ──────────────────────────

    def get_all_universities(self) -> list[Institution]:
        """Return every university in the order the database yields them."""
        sql = "SELECT name, state FROM universities;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [Institution(name=r[0], state=r[1]) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to list universities: {e}")
            raise StoreError("Error reading schools from the DB") from e
        finally:
            release_connection(conn)

    # ── Saved schools ─────────────────────────────────────

    def save_school(self, username: str, school_name: str) -> int:
        """
        Link a university to a user.

        Returns:
            Number of rows inserted (1 on success).
        """
        sql = "INSERT INTO saved_schools (username, university_name) VALUES (%s, %s);"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (username, school_name))
                inserted = cur.rowcount
            conn.commit()
            logger.info(f"User '{username}' saved '{school_name}'")
            return inserted
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to save '{school_name}' for '{username}': {e}")
            raise StoreError("Error saving school to user in the DB") from e
        finally:
            release_connection(conn)

    def remove_school(self, username: str, school_name: str) -> int:
        """
        Unlink a university from a user.

        Returns:
            Number of rows deleted (0 if the pair was not saved).
        """
        sql = "DELETE FROM saved_schools WHERE username = %s AND university_name = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (username, school_name))
                deleted = cur.rowcount
            conn.commit()
            if deleted:
                logger.info(f"User '{username}' removed '{school_name}'")
            return deleted
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to remove '{school_name}' for '{username}': {e}")
            raise StoreError("Error removing school from user's saved list") from e
        finally:
            release_connection(conn)

    def get_saved_school_map(self) -> dict[str, list[str]]:
        """
        Return all saved schools grouped by username.

        Users with nothing saved are absent from the map.
        """
        sql = "SELECT username, university_name FROM saved_schools ORDER BY id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                result: dict[str, list[str]] = {}
                for username, school_name in cur.fetchall():
                    result.setdefault(username, []).append(school_name)
                return result
        except psycopg2.Error as e:
            logger.error(f"Failed to read saved schools: {e}")
            raise StoreError("Error reading saved schools from the DB") from e
        finally:
            release_connection(conn)
