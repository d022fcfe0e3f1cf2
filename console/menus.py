"""
console/menus.py
----------------
The CMC console: login prompt, role menus and their sub-menus.

Every menu is a numbered list. Anything other than a number in range
reprints the same menu; nothing changes until a valid choice is made.
"""

from typing import Callable, Optional

from errors import Result
from handlers import account_handler, school_handler, session_handler
from models.account import ROLE_ADMIN, ROLE_STANDARD
from security.session import Session
from utils.logger import get_logger

logger = get_logger(__name__)

INVALID_OPTION = "Invalid option. Please try again."


class ConsoleApp:
    """
    Text front end bound to one Session.

    Args:
        session: Login state for this console (a fresh one by default).
        input_func: Reads one line given a prompt; defaults to ``input``.
        output_func: Writes one line; defaults to ``print``.
    """

    def __init__(self, session: Optional[Session] = None,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print) -> None:
        self.session = session or Session()
        self._input = input_func
        self._output = output_func

    # ── Main loop ─────────────────────────────────────────

    def run(self) -> None:
        """Show the menu for the current role until input runs out."""
        self._output("CMC System Starting...")
        try:
            while True:
                self.step()
        except (EOFError, KeyboardInterrupt):
            self._output("\nGoodbye!")
            logger.info("Console closed.")

    def step(self) -> None:
        """Run one screen: login when logged out, else the role's menu."""
        if not self.session.is_active:
            self.login_screen()
        elif self.session.is_admin:
            self.admin_menu()
        else:
            self.user_menu()

    # ── Screens ───────────────────────────────────────────

    def login_screen(self) -> None:
        self._header("Welcome to Choose My College (CMC)!")
        self._output("Please log in.")
        username = ""
        while not username:
            username = self._read("Username: ")
        password = self._read_password("Password: ")

        result = session_handler.login(self.session, username, password)
        self._output(result.message)
        if not result:
            self._output("Login failed. Please try again.")

    def admin_menu(self) -> None:
        self._header("Admin Menu")
        choice = self._menu_option(["View List of Users", "Deactivate User", "Logout"])
        if choice == 1:
            self.admin_user_list_menu()
        elif choice == 2:
            username = self._read("Enter username to deactivate: ")
            result = account_handler.deactivate_account(self.session, username)
            self._report(result, "User successfully deactivated.", "Failed to deactivate user.")
        else:
            self._logout()

    def admin_user_list_menu(self) -> None:
        self._header("Admin User List")
        accounts = account_handler.list_accounts(self.session)
        if not accounts:
            self._output("No users found in the system.")
            return
        for account in accounts:
            status = "" if account.active else " (deactivated)"
            self._output(f"{account.username} | {account.full_name}{status}")
        self._output("")

        choice = self._menu_option(["Add User", "Edit User", "Remove User", "Go Back"])
        if choice == 1:
            self._add_user()
        elif choice == 2:
            self._edit_user()
        elif choice == 3:
            username = self._read("Username: ")
            result = account_handler.remove_account(self.session, username)
            self._report(result, None, "Failed to remove user. Username may be invalid.")

    def user_menu(self) -> None:
        self._header("User Menu")
        choice = self._menu_option(["Search Schools", "View Saved Schools", "Logout"])
        if choice == 1:
            state = self._read("State (leave blank to see all schools): ")
            self.search_results_menu(school_handler.search(self.session, state))
        elif choice == 2:
            self.saved_schools_menu()
        else:
            self._logout()

    def search_results_menu(self, results) -> None:
        self._header("Search Results")
        if not results:
            self._output("No matching schools found.")
            return
        for school in results:
            self._output(f"{school.name} | {school.state}")
        self._output("")

        if self._menu_option(["Save School", "Go Back"]) == 1:
            school_name = self._read("School Name: ")
            result = school_handler.save_school(self.session, school_name)
            self._report(result, None, "Failed to save school. It may already be in your saved list.")

    def saved_schools_menu(self) -> None:
        self._header("User Saved School List")
        schools = school_handler.saved_schools(self.session)
        if not schools:
            self._output("No saved schools found.")
            return
        for name in schools:
            self._output(name)
        self._output("")

        if self._menu_option(["Remove School", "Go Back"]) == 1:
            school_name = self._read("Enter school name to remove: ")
            result = school_handler.remove_school(self.session, school_name)
            self._report(result, "School successfully removed from saved list.",
                         "Failed to remove school.")

    # ── Forms ─────────────────────────────────────────────

    def _add_user(self) -> None:
        username = self._read("Username: ")
        password = self._read_password("Password: ")
        first_name = self._read("First Name: ")
        last_name = self._read("Last Name: ")
        role = ROLE_ADMIN if self._yes("Admin? (Y or N): ") else ROLE_STANDARD
        result = account_handler.create_account(
            self.session, username, password, first_name, last_name, role
        )
        self._report(result, None, "Failed to add new user. Username may already exist.")

    def _edit_user(self) -> None:
        username = self._read("Username: ")
        first_name = self._read("First Name: ")
        last_name = self._read("Last Name: ")
        password = self._read_password("Password: ")
        role = ROLE_ADMIN if self._yes("Admin? (Y or N): ") else ROLE_STANDARD
        active = self._yes("Active? (Y or N): ")
        result = account_handler.edit_account(
            self.session, username, first_name, last_name, password, role, active
        )
        self._report(result, None, "Failed to edit user.")

    def _logout(self) -> None:
        result = session_handler.logout(self.session)
        self._output(result.message)

    # ── Helpers ───────────────────────────────────────────

    def _menu_option(self, options: list[str]) -> int:
        """Print a numbered menu until a choice in [1, len(options)] is entered."""
        while True:
            self._output("\nChoose an option:")
            for i, option in enumerate(options, start=1):
                self._output(f"{i}: {option}")
            choice = self._parse_choice(self._read(""), len(options))
            if choice is not None:
                return choice
            self._output(INVALID_OPTION)

    @staticmethod
    def _parse_choice(text: str, max_choice: int) -> Optional[int]:
        try:
            choice = int(text.strip())
        except ValueError:
            return None
        return choice if 1 <= choice <= max_choice else None

    def _header(self, title: str) -> None:
        title = title or "Menu"
        separator = "-" * len(title)
        self._output(f"\n{separator}")
        self._output(title)
        self._output(separator)

    def _read(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _read_password(self, prompt: str) -> str:
        return self._input(prompt)

    def _yes(self, prompt: str) -> bool:
        return self._read(prompt).lower() == "y"

    def _report(self, result: Result, success_text: Optional[str], failure_text: str) -> None:
        """Show the handler's message, then the generic line for the outcome."""
        if result.message:
            self._output(result.message)
        if not result:
            self._output(failure_text)
        elif success_text:
            self._output(success_text)
