"""
main.py
-------
Entry point for the Choose My College (CMC) console.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Create the bootstrap administrator when one is configured.
    - Run the console menus until the user quits.
"""

import sys

from config import ADMIN_PASSWORD, ADMIN_USERNAME
from console.menus import ConsoleApp
from db.connection import close_pool, init_pool
from db.init_db import create_tables
from errors import StoreError
from services.account_service import AccountService
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> int:
    """Start the CMC console. Returns the process exit code."""
    try:
        init_pool()
        create_tables()
        if ADMIN_USERNAME and ADMIN_PASSWORD:
            AccountService().ensure_admin(ADMIN_USERNAME, ADMIN_PASSWORD)
    except StoreError as e:
        logger.error(f"Startup failed: {e}")
        print(f"❌ Could not start CMC: {e}", file=sys.stderr)
        close_pool()
        return 1

    logger.info("CMC console starting.")
    try:
        ConsoleApp().run()
    finally:
        close_pool()
    return 0


if __name__ == "__main__":
    sys.exit(main())
