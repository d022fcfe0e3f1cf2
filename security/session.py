"""
security/session.py
-------------------
The current login of one console.

A Session is created by the presentation layer and passed into every
handler call. It is never a module-level global, so a front end serving
several consoles would simply hold one Session each.
"""

from dataclasses import dataclass
from typing import Optional

from models.account import Account


@dataclass
class Session:
    """Holds the authenticated account, or None when logged out."""
    account: Optional[Account] = None

    @property
    def is_active(self) -> bool:
        return self.account is not None

    @property
    def is_admin(self) -> bool:
        return self.account is not None and self.account.is_admin()

    @property
    def username(self) -> Optional[str]:
        return self.account.username if self.account else None

    def start(self, account: Account) -> None:
        self.account = account

    def clear(self) -> None:
        self.account = None
