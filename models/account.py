"""
models/account.py
-----------------
Domain model for system accounts (administrators and standard users).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from errors import ValidationError

ROLE_ADMIN = "admin"
ROLE_STANDARD = "standard"
ROLES = (ROLE_ADMIN, ROLE_STANDARD)


def require_text(value: Optional[str], field_name: str, strip: bool = True) -> str:
    """
    Return ``value``, stripped of surrounding whitespace unless ``strip`` is False.

    Raises:
        ValidationError: If the value is None or blank.
    """
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} cannot be empty")
    return str(value).strip() if strip else str(value)


@dataclass
class Account:
    """
    Represents a single CMC account.

    Attributes:
        username: Unique login name (primary key, never changes).
        password: Opaque password, compared by exact match.
        first_name: Given name.
        last_name: Family name.
        role: Either 'admin' or 'standard'.
        active: False once an administrator deactivates the account.
        created_at: Timestamp when the record was created.
    """
    username: str
    password: str
    first_name: str
    last_name: str
    role: str = ROLE_STANDARD  # 'admin' | 'standard'
    active: bool = True
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        self.username = require_text(self.username, "Username")
        self.password = require_text(self.password, "Password", strip=False)
        self.first_name = require_text(self.first_name, "First name")
        self.last_name = require_text(self.last_name, "Last name")
        if self.role not in ROLES:
            raise ValidationError(f"Unknown role: {self.role!r}")

    def is_admin(self) -> bool:
        """Returns True if this account has administrator rights."""
        return self.role == ROLE_ADMIN

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return f"{self.username} | {self.full_name}"
