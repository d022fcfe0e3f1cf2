"""
services/account_service.py
----------------------------
Business logic for authentication and account administration.
Re-validates every input, then forwards to the AccountRepository.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from errors import CMCError, ErrorKind, Result, StoreError, ValidationError
from models.account import ROLE_ADMIN, ROLE_STANDARD, Account, require_text
from repositories.account_repo import AccountRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class AuthFailure(str, Enum):
    """Why an authentication attempt was refused."""
    MISSING_CREDENTIALS = "missing_credentials"
    NOT_FOUND = "not_found"
    DEACTIVATED = "deactivated"
    WRONG_PASSWORD = "wrong_password"
    STORE_UNAVAILABLE = "store_unavailable"


@dataclass(frozen=True)
class AuthResult:
    """Either an authenticated account or the reason there is none."""
    account: Optional[Account] = None
    failure: Optional[AuthFailure] = None

    def __bool__(self) -> bool:
        return self.account is not None


class AccountService:
    """
    Handles login checks and admin-only account management.

    Every mutating method returns a `Result`; store and validation errors
    are converted here and never reach the handlers as exceptions.
    """

    def __init__(self, repo: Optional[AccountRepository] = None):
        self.repo = repo or AccountRepository()

    # ── Lookups ───────────────────────────────────────────

    def get_account(self, username: str) -> Optional[Account]:
        """The account with that username; None if unknown or unreadable."""
        try:
            return self.repo.get(username)
        except CMCError as e:
            logger.error(f"Lookup of account '{username}' failed: {e}")
            return None

    def account_exists(self, username: str) -> bool:
        return self.get_account(username) is not None

    def is_account_active(self, username: str) -> bool:
        account = self.get_account(username)
        return account is not None and account.active

    def list_accounts(self) -> list[Account]:
        """All accounts in store order; empty when the store cannot be read."""
        try:
            return self.repo.get_all()
        except CMCError as e:
            logger.error(f"Listing accounts failed: {e}")
            return []

    # ── Authentication ────────────────────────────────────

    def authenticate(self, username: Optional[str], password: Optional[str]) -> AuthResult:
        """
        Check credentials.

        A deactivated account is refused before its password is compared.
        """
        if not username or not username.strip() or not password or not password.strip():
            return AuthResult(failure=AuthFailure.MISSING_CREDENTIALS)

        try:
            account = self.repo.get(username.strip())
        except CMCError as e:
            logger.error(f"Authentication of '{username}' failed: {e}")
            return AuthResult(failure=AuthFailure.STORE_UNAVAILABLE)
        if account is None:
            return AuthResult(failure=AuthFailure.NOT_FOUND)
        if not account.active:
            return AuthResult(failure=AuthFailure.DEACTIVATED)
        if account.password != password:
            return AuthResult(failure=AuthFailure.WRONG_PASSWORD)
        return AuthResult(account=account)

    # ── Administration ────────────────────────────────────

    def add_account(self, username: str, password: str, first_name: str,
                    last_name: str, role: str = ROLE_STANDARD) -> Result:
        """Create a new, always active, account."""
        try:
            account = Account(
                username=username,
                password=password,
                first_name=first_name,
                last_name=last_name,
                role=role,
                active=True,
            )
            if self.repo.get(account.username) is not None:
                return Result.fail("Error adding user: User already exists", ErrorKind.STORE)
            self.repo.add(account)
        except CMCError as e:
            logger.warning(f"Add account '{username}' failed: {e}")
            return Result.from_error(e, "Error adding user: ")
        return Result.ok(f"✅ User '{account.username}' added.")

    def remove_account(self, username: str) -> Result:
        """
        Delete an account together with every school it saved.

        Both deletions share one transaction, so a failed account delete
        leaves the saved schools in place.
        """
        try:
            username = require_text(username, "Username")
            if not self.repo.delete_with_saved_schools(username):
                raise StoreError("Error removing user from the DB")
        except CMCError as e:
            logger.warning(f"Remove account '{username}' failed: {e}")
            return Result.from_error(e, "Error removing user: ")
        logger.info(f"Removed account '{username}' and its saved schools")
        return Result.ok(f"🗑️ User '{username}' removed.")

    def deactivate_account(self, username: str) -> Result:
        """
        Mark an account inactive, keeping every other field.

        An unknown username is a soft failure: unsuccessful, but no error kind.
        """
        try:
            username = require_text(username, "Username")
            account = self.repo.get(username)
            if account is None:
                return Result.fail(f"⚠️ User '{username}' does not exist.")
            account.active = False
            if not self.repo.update(account):
                raise StoreError("Error deactivating user in the DB")
        except CMCError as e:
            logger.warning(f"Deactivate account '{username}' failed: {e}")
            return Result.from_error(e, "Error deactivating user: ")
        return Result.ok(f"✅ User '{username}' deactivated.")

    def edit_account(self, username: str, first_name: str, last_name: str,
                     password: str, role: str, active: bool) -> Result:
        """Overwrite every field of an existing account."""
        try:
            account = Account(
                username=username,
                password=password,
                first_name=first_name,
                last_name=last_name,
                role=role,
                active=active,
            )
            if not self.repo.update(account):
                raise StoreError("Error editing user in the DB")
        except CMCError as e:
            logger.warning(f"Edit account '{username}' failed: {e}")
            return Result.from_error(e, "Error editing user: ")
        return Result.ok(f"✏️ User '{account.username}' updated.")

    def ensure_admin(self, username: str, password: str) -> bool:
        """
        Create a bootstrap administrator if no account has that username.

        Returns:
            True if an account was created.
        """
        if self.repo.get(username) is not None:
            return False
        try:
            self.repo.add(Account(username, password, "System", "Administrator", ROLE_ADMIN))
        except ValidationError as e:
            logger.error(f"Bootstrap admin not created: {e}")
            return False
        logger.info(f"Bootstrap admin '{username}' created.")
        return True
