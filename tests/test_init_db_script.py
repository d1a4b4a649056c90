"""
Unit tests for scripts/init_db.py.
"""

import os
from unittest.mock import patch

import pytest

from db import create_storage_context
from repositories.message_repository import MessageRepository
from scripts.init_db import main


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'init.db'}"


@pytest.fixture(autouse=True)
def no_config():
    with patch.dict(os.environ, {"CRAVEY_CONFIG_PATH": ""}):
        yield


def count_messages(url: str) -> int:
    context = create_storage_context(url)
    try:
        return MessageRepository(context).count()
    finally:
        context.close()


class TestInitDbScript:
    """Tests for init_db main()"""

    def test_creates_schema_and_seeds(self, db_url):
        assert main(["--database-url", db_url]) == 0
        assert count_messages(db_url) == 6

    def test_running_twice_does_not_duplicate(self, db_url):
        main(["--database-url", db_url])
        assert main(["--database-url", db_url]) == 0
        assert count_messages(db_url) == 6

    def test_no_seed(self, db_url):
        assert main(["--database-url", db_url, "--no-seed"]) == 0
        assert count_messages(db_url) == 0

    def test_unopenable_database(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'missing_dir' / 'x.db'}"
        assert main(["--database-url", url]) == 1
