"""
handlers/school_handler.py
---------------------------
Directory search and the logged-in user's saved schools.
Saving, removing and listing act on the session's own account.
"""

from typing import Optional

from errors import Result
from models.institution import Institution
from security.auth import requires_session, session_listing
from security.session import Session
from services.school_service import SchoolService

school_service = SchoolService()


def search(session: Session, state: Optional[str]) -> list[Institution]:
    """Search the directory. Blank state lists every school."""
    return school_service.search(state)


@requires_session
def save_school(session: Session, school_name: str) -> Result:
    return school_service.save_school(session.username, school_name)


@requires_session
def remove_school(session: Session, school_name: str) -> Result:
    return school_service.remove_school(session.username, school_name)


@session_listing
def saved_schools(session: Session) -> list[str]:
    """Names of the schools saved by the logged-in user."""
    return school_service.get_saved_schools(session.username)
