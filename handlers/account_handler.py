"""
handlers/account_handler.py
----------------------------
Admin-only account management. Every function is gated by the
administrator check before anything reaches the service.
"""

from errors import Result
from models.account import Account
from security.auth import admin_listing, requires_admin
from security.session import Session
from services.account_service import AccountService

account_service = AccountService()


@admin_listing
def list_accounts(session: Session) -> list[Account]:
    """All accounts in store order; empty for non-admins."""
    return account_service.list_accounts()


@requires_admin
def create_account(session: Session, username: str, password: str,
                   first_name: str, last_name: str, role: str) -> Result:
    return account_service.add_account(username, password, first_name, last_name, role)


@requires_admin
def remove_account(session: Session, username: str) -> Result:
    return account_service.remove_account(username)


@requires_admin
def deactivate_account(session: Session, username: str) -> Result:
    return account_service.deactivate_account(username)


@requires_admin
def edit_account(session: Session, username: str, first_name: str, last_name: str,
                 password: str, role: str, active: bool) -> Result:
    return account_service.edit_account(username, first_name, last_name, password, role, active)
