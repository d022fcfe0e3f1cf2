"""
security/auth.py
-----------------
Authorization gate for handler functions.
Blocks a call before any side effect when the session does not qualify.
"""

from functools import wraps
from typing import Any, Callable

from errors import AuthorizationError, Result
from security.session import Session
from utils.logger import get_logger

logger = get_logger(__name__)

MSG_ADMIN_REQUIRED = "Error: Admin privileges required"
MSG_LOGIN_REQUIRED = "Error: Must be logged in"


def _guard(check: Callable[[Session], bool], denied: Callable[[], Any]):
    """
    Build a decorator for handlers whose first argument is the Session.

    On denial the wrapped function is not called: a warning is logged and
    ``denied()`` is returned instead (a failed Result, or an empty list for
    read-only handlers).
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(session: Session, *args, **kwargs):
            if not check(session):
                logger.warning(
                    f"🚫 {func.__name__} denied: user={session.username!r}, "
                    f"admin={session.is_admin}"
                )
                return denied()
            return func(session, *args, **kwargs)
        return wrapper
    return decorator


def _denied_result(message: str) -> Callable[[], Result]:
    return lambda: Result.from_error(AuthorizationError(message))


def requires_admin(func: Callable):
    """
    Decorator that restricts a handler to a logged-in administrator.

    Usage:
        @requires_admin
        def add_account(session, ...):
            ...
    """
    return _guard(lambda s: s.is_admin, _denied_result(MSG_ADMIN_REQUIRED))(func)


def requires_session(func: Callable):
    """Decorator that restricts a handler to any logged-in account."""
    return _guard(lambda s: s.is_active, _denied_result(MSG_LOGIN_REQUIRED))(func)


def admin_listing(func: Callable):
    """Like `requires_admin`, but a denied call returns an empty list."""
    return _guard(lambda s: s.is_admin, list)(func)


def session_listing(func: Callable):
    """Like `requires_session`, but a denied call returns an empty list."""
    return _guard(lambda s: s.is_active, list)(func)
