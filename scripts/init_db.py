#!/usr/bin/env python3
"""
Initialize the journal database.

Creates any missing tables and seeds the default motivational messages
into an empty store.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --database-url sqlite:///./cravey.db --no-seed
"""

import argparse
import logging
import sys
from pathlib import Path

# Add repo root to path for imports
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from db import DATABASE_URL, create_storage_context  # noqa: E402
from exceptions.repository_error import PersistenceError  # noqa: E402
from repositories.message_repository import MessageRepository  # noqa: E402
from utils.config_service import Config  # noqa: E402

logger = logging.getLogger("init_db")


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the init_db CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = argparse.ArgumentParser(description="Create the journal schema and seed default data")
    parser.add_argument(
        "--database-url",
        default=DATABASE_URL,
        help="SQLAlchemy database URL (defaults to CRAVEY_DATABASE_URL)"
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Skip seeding the default motivational messages"
    )
    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=Config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        context = create_storage_context(parsed.database_url)
    except Exception as e:
        logger.error(f"Could not open database {parsed.database_url}: {e}")
        return 1

    try:
        if parsed.no_seed:
            logger.info("Schema ready; seeding skipped")
            return 0
        inserted = MessageRepository(context).seed_default_messages_if_needed()
        logger.info(f"Schema ready; {inserted} default message(s) inserted")
        return 0
    except PersistenceError as e:
        logger.error(str(e))
        return 1
    finally:
        context.close()


if __name__ == "__main__":
    sys.exit(main())
