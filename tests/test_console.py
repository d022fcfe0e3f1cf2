"""Tests for the console menus driven by scripted input."""

from unittest.mock import MagicMock

import pytest

from console.menus import INVALID_OPTION, ConsoleApp
from errors import StoreError
from models.account import ROLE_STANDARD
from security.session import Session


class ScriptedConsole:
    """Feeds prepared lines to a ConsoleApp and records what it prints."""

    def __init__(self, lines, session=None):
        self._lines = iter(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []
        self.app = ConsoleApp(session=session or Session(),
                              input_func=self._input, output_func=self.output.append)

    def _input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.mark.usefixtures("wired")
class TestConsoleApp:
    """Test suite for ConsoleApp."""

    def test_invalid_option_reprompts_same_menu(self, alice_session):
        console = ScriptedConsole(["9", "abc", "0", "3"], session=alice_session)

        console.app.user_menu()

        assert console.output.count(INVALID_OPTION) == 3
        assert console.text.count("1: Search Schools") == 4
        assert alice_session.is_active is False

    def test_login_screen_reprompts_blank_username(self, alice_account):
        console = ScriptedConsole(["", "  ", "alice", "pw1"])

        console.app.login_screen()

        assert console.prompts.count("Username: ") == 3
        assert "Login successful!" in console.output
        assert console.app.session.username == "alice"

    def test_login_screen_failure(self, alice_account):
        console = ScriptedConsole(["alice", "nope"])

        console.app.login_screen()

        assert "Login failed! Incorrect password." in console.output
        assert "Login failed. Please try again." in console.output
        assert console.app.session.is_active is False

    def test_full_user_session(self, alice_account):
        console = ScriptedConsole([
            "alice", "pw1",                          # login
            "1", "CONNECTICUT", "1", "YALE UNIVERSITY",  # search and save
            "2", "2",                                # view saved, go back
            "3",                                     # logout
        ])

        console.app.run()

        assert "YALE UNIVERSITY | CONNECTICUT" in console.output
        assert "HARVARD UNIVERSITY | MASSACHUSETTS" not in console.output
        assert console.output.count("YALE UNIVERSITY") == 1
        assert console.app.session.is_active is False
        assert console.output[-1].endswith("Goodbye!")

    def test_search_without_results(self, alice_session):
        console = ScriptedConsole(["1", "ALASKA"], session=alice_session)

        console.app.user_menu()

        assert "No matching schools found." in console.output

    def test_save_duplicate_shows_generic_failure(self, alice_session, school_service):
        school_service.save_school("alice", "YALE UNIVERSITY")
        console = ScriptedConsole(["1", "YALE UNIVERSITY"], session=alice_session)

        console.app.search_results_menu(school_service.search("CONNECTICUT"))

        assert "Failed to save school. It may already be in your saved list." in console.output

    def test_remove_saved_school(self, alice_session, school_service):
        school_service.save_school("alice", "YALE UNIVERSITY")
        console = ScriptedConsole(["1", "YALE UNIVERSITY"], session=alice_session)

        console.app.saved_schools_menu()

        assert "School successfully removed from saved list." in console.output
        assert school_service.get_saved_schools("alice") == []

    def test_empty_saved_list(self, alice_session):
        console = ScriptedConsole([], session=alice_session)

        console.app.saved_schools_menu()

        assert "No saved schools found." in console.output

    def test_admin_adds_user(self, admin_session, account_repo):
        console = ScriptedConsole(
            ["1", "1", "bob", "pw", "Bob", "Jones", "n"], session=admin_session
        )

        console.app.admin_menu()

        assert "admin | Ada Admin" in console.output
        assert account_repo.accounts["bob"].role == ROLE_STANDARD
        assert account_repo.accounts["bob"].active is True

    def test_admin_add_duplicate_user(self, admin_session, alice_account):
        console = ScriptedConsole(
            ["1", "1", "alice", "pw", "A", "S", "y"], session=admin_session
        )

        console.app.admin_menu()

        assert "Failed to add new user. Username may already exist." in console.output

    def test_admin_deactivates_user(self, admin_session, alice_account, account_repo):
        console = ScriptedConsole(["2", "alice"], session=admin_session)

        console.app.admin_menu()

        assert "User successfully deactivated." in console.output
        assert account_repo.accounts["alice"].active is False

    def test_admin_deactivate_unknown_user(self, admin_session):
        console = ScriptedConsole(["2", "ghost"], session=admin_session)

        console.app.admin_menu()

        assert "Failed to deactivate user." in console.output

    def test_admin_edits_user(self, admin_session, alice_account, account_repo):
        console = ScriptedConsole(
            ["1", "2", "alice", "Alicia", "Smith", "pw9", "n", "y"], session=admin_session
        )

        console.app.admin_menu()

        assert account_repo.accounts["alice"].first_name == "Alicia"
        assert account_repo.accounts["alice"].password == "pw9"

    def test_admin_removes_user(self, admin_session, alice_account, account_repo):
        console = ScriptedConsole(["1", "3", "alice"], session=admin_session)

        console.app.admin_menu()

        assert "alice" not in account_repo.accounts

    def test_admin_added_password_with_spaces_logs_in(self, admin_session, account_repo):
        console = ScriptedConsole(
            ["1", "1", "bob", " pw ", "Bob", "Jones", "n"], session=admin_session
        )
        console.app.admin_menu()

        login = ScriptedConsole(["bob", " pw "])
        login.app.login_screen()

        assert account_repo.accounts["bob"].password == " pw "
        assert login.app.session.username == "bob"

    def test_search_with_unreadable_directory(self, alice_session, school_repo):
        school_repo.get_all_universities = MagicMock(
            side_effect=StoreError("Error reading universities from the DB"))
        console = ScriptedConsole(["1", ""], session=alice_session)

        console.app.user_menu()

        assert "No matching schools found." in console.output

    def test_saved_list_with_unreadable_store(self, alice_session, school_repo):
        school_repo.get_saved_school_map = MagicMock(
            side_effect=StoreError("Error reading saved schools from the DB"))
        console = ScriptedConsole(["2"], session=alice_session)

        console.app.user_menu()

        assert "No saved schools found." in console.output

    def test_login_with_unreadable_store(self, account_repo):
        account_repo.get = MagicMock(side_effect=StoreError("Error reading user from the DB"))
        console = ScriptedConsole(["alice", "pw1"])

        console.app.login_screen()

        assert "Login failed! The directory is unavailable right now." in console.output
        assert console.app.session.is_active is False

    def test_admin_user_list_with_unreadable_store(self, admin_session, account_repo):
        account_repo.get_all = MagicMock(side_effect=StoreError("Error reading users from the DB"))
        console = ScriptedConsole(["1"], session=admin_session)

        console.app.admin_menu()

        assert "No users found in the system." in console.output

    def test_run_routes_by_role(self, admin_session):
        console = ScriptedConsole(["3"], session=admin_session)

        console.app.run()

        assert "Admin Menu" in console.output
        assert "Welcome to Choose My College (CMC)!" in console.output
