"""
repositories/account_repo.py
-----------------------------
Data access layer for CMC accounts.
All SQL queries related to the `users` table live here.
"""

from typing import Optional

import psycopg2

from db.connection import get_connection, release_connection
from errors import StoreError
from models.account import Account
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "username, password, first_name, last_name, role, active, created_at"


class AccountRepository:
    """Repository for CRUD operations on the users table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, account: Account) -> Account:
        """
        Insert a new account.

        Args:
            account: The Account to persist.

        Returns:
            The same object with `created_at` populated.

        Raises:
            StoreError: If the insert fails (including a duplicate username).
        """
        sql = """
            INSERT INTO users (username, password, first_name, last_name, role, active)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING created_at;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    account.username, account.password, account.first_name,
                    account.last_name, account.role, account.active,
                ))
                account.created_at = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Added account '{account.username}' ({account.role})")
            return account
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to add account '{account.username}': {e}")
            raise StoreError("Error adding user to the DB") from e
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def get(self, username: str) -> Optional[Account]:
        """Fetch an account by username, or None if it does not exist."""
        sql = f"SELECT {_COLUMNS} FROM users WHERE username = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (username,))
                row = cur.fetchone()
                return self._row_to_account(row) if row else None
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch account '{username}': {e}")
            raise StoreError("Error reading user from the DB") from e
        finally:
            release_connection(conn)

    def get_all(self) -> list[Account]:
        """Return every account in the order the database yields them."""
        sql = f"SELECT {_COLUMNS} FROM users;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_account(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to list accounts: {e}")
            raise StoreError("Error reading users from the DB") from e
        finally:
            release_connection(conn)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, account: Account) -> bool:
        """
        Overwrite every field of an existing account.

        Returns:
            True if a row was updated, False if the username is unknown.
        """
        sql = """
            UPDATE users
            SET password = %s, first_name = %s, last_name = %s, role = %s, active = %s
            WHERE username = %s;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    account.password, account.first_name, account.last_name,
                    account.role, account.active, account.username,
                ))
                updated = cur.rowcount > 0
            conn.commit()
            if updated:
                logger.info(f"Updated account '{account.username}' (active={account.active})")
            return updated
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to update account '{account.username}': {e}")
            raise StoreError("Error editing user in the DB") from e
        finally:
            release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete_with_saved_schools(self, username: str) -> bool:
        """
        Delete an account and its saved schools in one transaction.

        Returns:
            True if exactly one account row was removed. Otherwise the
            transaction is rolled back and the saved schools are kept.
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM saved_schools WHERE username = %s;", (username,))
                schools_removed = cur.rowcount
                cur.execute("DELETE FROM users WHERE username = %s;", (username,))
                deleted = cur.rowcount == 1
            if not deleted:
                conn.rollback()
                return False
            conn.commit()
            logger.info(f"Deleted account '{username}' and {schools_removed} saved school(s)")
            return True
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to delete account '{username}': {e}")
            raise StoreError("Error removing user from the DB") from e
        finally:
            release_connection(conn)

    # ── Helpers ───────────────────────────────────────────

    @staticmethod
    def _row_to_account(row: tuple) -> Account:
        """Convert a database row tuple to an Account domain object."""
        return Account(
            username=row[0],
            password=row[1],
            first_name=row[2],
            last_name=row[3],
            role=row[4],
            active=bool(row[5]),
            created_at=row[6],
        )
