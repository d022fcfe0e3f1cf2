"""
services/school_service.py
---------------------------
Business logic for searching the university directory and
managing each user's saved schools.
"""

from typing import Optional

from errors import CMCError, ErrorKind, Result, StoreError
from models.account import require_text
from models.institution import Institution
from repositories.school_repo import SchoolRepository
from utils.logger import get_logger

logger = get_logger(__name__)

MSG_ALREADY_SAVED = "School already saved for this user"
MSG_UNKNOWN_SCHOOL = "School does not exist in the database"


class SchoolService:
    """Search and favorites on top of the SchoolRepository."""

    def __init__(self, repo: Optional[SchoolRepository] = None):
        self.repo = repo or SchoolRepository()

    def search(self, state: Optional[str] = None) -> list[Institution]:
        """
        Filter the directory by state.

        A blank or missing state returns the whole directory. Otherwise the
        match is exact and case-sensitive; no match is an empty list.
        An unreadable directory is also an empty list.
        """
        try:
            schools = self.repo.get_all_universities()
        except CMCError as e:
            logger.error(f"Search for state {state!r} failed: {e}")
            return []
        if state is None or not state.strip():
            return schools
        return [s for s in schools if s.state == state]

    def save_school(self, username: str, school_name: str) -> Result:
        """Add a school to the user's saved list if it exists and is not saved yet."""
        try:
            username = require_text(username, "Username")
            school_name = require_text(school_name, "School name")

            saved = self.repo.get_saved_school_map().get(username, [])
            if school_name in saved:
                return Result.fail(f"Error saving school: {MSG_ALREADY_SAVED}", ErrorKind.STORE)

            if not any(s.name == school_name for s in self.repo.get_all_universities()):
                return Result.fail(f"Error saving school: {MSG_UNKNOWN_SCHOOL}", ErrorKind.STORE)

            if self.repo.save_school(username, school_name) != 1:
                raise StoreError("Error saving school to user in the DB")
        except CMCError as e:
            logger.warning(f"Save school '{school_name}' for '{username}' failed: {e}")
            return Result.from_error(e, "Error saving school: ")
        return Result.ok(f"⭐ '{school_name}' added to your saved schools.")

    def remove_school(self, username: str, school_name: str) -> Result:
        """Remove a school from the user's saved list."""
        try:
            username = require_text(username, "Username")
            school_name = require_text(school_name, "School name")
            if self.repo.remove_school(username, school_name) != 1:
                raise StoreError("Error removing school from user's saved list")
        except CMCError as e:
            logger.warning(f"Remove school '{school_name}' for '{username}' failed: {e}")
            return Result.from_error(e, "Error removing saved school: ")
        return Result.ok(f"🗑️ '{school_name}' removed from your saved schools.")

    def get_saved_schools(self, username: Optional[str]) -> list[str]:
        """Names of the schools a user saved; never None."""
        if username is None or not username.strip():
            return []
        try:
            saved = self.repo.get_saved_school_map()
        except CMCError as e:
            logger.error(f"Reading saved schools for '{username}' failed: {e}")
            return []
        return list(saved.get(username, []))
