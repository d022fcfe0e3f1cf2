"""
errors.py
---------
Error kinds and the result type shared by every layer.

Faults travel as exceptions (raised by models and repositories) up to the
service layer, which turns them into a `Result`. Expected business outcomes
such as "already saved" never raise; they are returned as failed results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Which precondition or dependency caused a failed operation."""
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    STORE = "store"


class CMCError(Exception):
    """Base class for all application errors."""
    kind: ErrorKind = ErrorKind.STORE


class ValidationError(CMCError):
    """A required field is empty or has an unknown value."""
    kind = ErrorKind.VALIDATION


class AuthorizationError(CMCError):
    """The session does not satisfy a role or login precondition."""
    kind = ErrorKind.AUTHORIZATION


class StoreError(CMCError):
    """The database failed, or returned no row where one was required."""
    kind = ErrorKind.STORE


@dataclass(frozen=True)
class Result:
    """
    Outcome of a single requested operation.

    Attributes:
        success: Whether the operation took effect.
        message: Human-readable description for the console.
        error: Error kind for failures; None on success and on soft failures
            (e.g. deactivating an unknown account).
    """
    success: bool
    message: str = ""
    error: Optional[ErrorKind] = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, message: str = "") -> "Result":
        return cls(True, message)

    @classmethod
    def fail(cls, message: str, error: Optional[ErrorKind] = None) -> "Result":
        return cls(False, message, error)

    @classmethod
    def from_error(cls, exc: CMCError, prefix: str = "") -> "Result":
        """Build a failed result from a caught application error."""
        message = f"{prefix}{exc}" if prefix else str(exc)
        return cls(False, message, exc.kind)
