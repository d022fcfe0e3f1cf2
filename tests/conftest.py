"""Pytest configuration and shared fixtures.

Provides in-memory stand-ins for the repositories so services, handlers
and the console can be tested without PostgreSQL.
"""

import os
import tempfile
from dataclasses import replace
from typing import Optional

os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "cmc-tests.log"))

import pytest  # noqa: E402

from errors import StoreError  # noqa: E402
from handlers import account_handler, school_handler, session_handler  # noqa: E402
from models.account import ROLE_ADMIN, ROLE_STANDARD, Account  # noqa: E402
from models.institution import Institution  # noqa: E402
from security.session import Session  # noqa: E402
from services.account_service import AccountService  # noqa: E402
from services.school_service import SchoolService  # noqa: E402

UNIVERSITIES = [
    Institution("YALE UNIVERSITY", "CONNECTICUT"),
    Institution("HARVARD UNIVERSITY", "MASSACHUSETTS"),
    Institution("BOSTON UNIVERSITY", "MASSACHUSETTS"),
    Institution("UNIVERSITY OF MINNESOTA", "MINNESOTA"),
]


class FakeAccountRepository:
    """AccountRepository kept in a dict; hands out copies like a real store."""

    def __init__(self, school_repo: Optional["FakeSchoolRepository"] = None):
        self.accounts: dict[str, Account] = {}
        self.school_repo = school_repo

    def add(self, account: Account) -> Account:
        if account.username in self.accounts:
            raise StoreError("Error adding user to the DB")
        self.accounts[account.username] = replace(account)
        return account

    def get(self, username: str) -> Optional[Account]:
        account = self.accounts.get(username)
        return replace(account) if account else None

    def get_all(self) -> list[Account]:
        return [replace(a) for a in self.accounts.values()]

    def update(self, account: Account) -> bool:
        if account.username not in self.accounts:
            return False
        self.accounts[account.username] = replace(account)
        return True

    def delete_with_saved_schools(self, username: str) -> bool:
        if self.accounts.pop(username, None) is None:
            return False
        if self.school_repo is not None:
            self.school_repo.saved = [p for p in self.school_repo.saved if p[0] != username]
        return True


class FakeSchoolRepository:
    """SchoolRepository over a fixed directory and a list of saved pairs."""

    def __init__(self, universities=None):
        self.universities = list(universities if universities is not None else UNIVERSITIES)
        self.saved: list[tuple[str, str]] = []

    def get_all_universities(self) -> list[Institution]:
        return list(self.universities)

    def save_school(self, username: str, school_name: str) -> int:
        self.saved.append((username, school_name))
        return 1

    def remove_school(self, username: str, school_name: str) -> int:
        if (username, school_name) not in self.saved:
            return 0
        self.saved.remove((username, school_name))
        return 1

    def get_saved_school_map(self) -> dict[str, list[str]]:
        result: dict[str, list[str]] = {}
        for username, school_name in self.saved:
            result.setdefault(username, []).append(school_name)
        return result


@pytest.fixture
def account_repo(school_repo):
    return FakeAccountRepository(school_repo)


@pytest.fixture
def school_repo():
    return FakeSchoolRepository()


@pytest.fixture
def account_service(account_repo):
    return AccountService(repo=account_repo)


@pytest.fixture
def school_service(school_repo):
    return SchoolService(repo=school_repo)


@pytest.fixture
def admin_account(account_repo):
    account = Account("admin", "adminpass", "Ada", "Admin", ROLE_ADMIN)
    account_repo.add(account)
    return account


@pytest.fixture
def alice_account(account_repo):
    account = Account("alice", "pw1", "Alice", "Smith", ROLE_STANDARD)
    account_repo.add(account)
    return account


@pytest.fixture
def wired(monkeypatch, account_service, school_service):
    """Point every handler module at the in-memory services."""
    monkeypatch.setattr(session_handler, "account_service", account_service)
    monkeypatch.setattr(account_handler, "account_service", account_service)
    monkeypatch.setattr(school_handler, "school_service", school_service)
    return account_service, school_service


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def admin_session(admin_account):
    return Session(account=admin_account)


@pytest.fixture
def alice_session(alice_account):
    return Session(account=alice_account)
