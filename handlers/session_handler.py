"""
handlers/session_handler.py
----------------------------
Handles login and logout for a console Session.
"""

from errors import ErrorKind, Result
from security.session import Session
from services.account_service import AccountService, AuthFailure
from utils.logger import get_logger

logger = get_logger(__name__)
account_service = AccountService()

_FAILURE_MESSAGES = {
    AuthFailure.MISSING_CREDENTIALS: "Login failed! Username and password are required.",
    AuthFailure.NOT_FOUND: "Login failed! User not found.",
    AuthFailure.DEACTIVATED: "Login failed! Account is deactivated.",
    AuthFailure.WRONG_PASSWORD: "Login failed! Incorrect password.",
    AuthFailure.STORE_UNAVAILABLE: "Login failed! The directory is unavailable right now.",
}


def login(session: Session, username: str, password: str) -> Result:
    """
    Authenticate and start the session.

    Any failed attempt clears the session, even if another account
    was logged in before.
    """
    outcome = account_service.authenticate(username, password)
    if outcome.account is None:
        session.clear()
        logger.warning(f"Failed login for {username!r}: {outcome.failure.value}")
        return Result.fail(_FAILURE_MESSAGES[outcome.failure], ErrorKind.AUTHORIZATION)

    session.start(outcome.account)
    logger.info(f"User {outcome.account.username!r} logged in.")
    return Result.ok("Login successful!")


def logout(session: Session) -> Result:
    """End the session. Fails when nobody is logged in."""
    if not session.is_active:
        return Result.fail("Nobody is logged in.")
    logger.info(f"User {session.username!r} logged out.")
    session.clear()
    return Result.ok("👋 Logged out.")
