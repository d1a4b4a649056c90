"""
Shared fixtures for the journal test suite.

Each test gets its own in-memory SQLite database bound to a fresh
StorageContext, so repositories can be exercised against a real engine.
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

import pytest

from core.icraving_repository import ICravingRepository
from db import IN_MEMORY_URL, create_storage_context
from entities.craving import CravingEntity
from repositories.craving_repository import CravingRepository
from repositories.message_repository import MessageRepository
from repositories.recording_repository import RecordingRepository


@pytest.fixture
def storage_context():
    """Fresh in-memory database per test"""
    context = create_storage_context(IN_MEMORY_URL)
    yield context
    context.close()


@pytest.fixture
def craving_repository(storage_context):
    return CravingRepository(storage_context)


@pytest.fixture
def recording_repository(storage_context):
    return RecordingRepository(storage_context)


@pytest.fixture
def message_repository(storage_context):
    return MessageRepository(storage_context)


def at(day: int, hour: int = 12) -> datetime:
    """Aware UTC datetime in January 2026"""
    return datetime(2026, 1, day, hour, 0, tzinfo=timezone.utc)


class InMemoryCravingRepository(ICravingRepository):
    """List-backed craving repository for use case tests"""

    def __init__(self, cravings: Optional[List[CravingEntity]] = None):
        self.saved_cravings: List[CravingEntity] = list(cravings or [])

    def save(self, craving: CravingEntity) -> None:
        self.saved_cravings.append(craving)

    def fetch_all(self) -> List[CravingEntity]:
        return list(self.saved_cravings)

    def fetch(self, start: datetime, end: datetime) -> List[CravingEntity]:
        return [c for c in self.saved_cravings if start <= c.timestamp <= end]

    def get(self, craving_id: UUID) -> Optional[CravingEntity]:
        return next((c for c in self.saved_cravings if c.id == craving_id), None)

    def delete(self, craving_id: UUID) -> None:
        self.saved_cravings = [c for c in self.saved_cravings if c.id != craving_id]

    def update(self, craving: CravingEntity) -> None:
        self.saved_cravings = [craving if c.id == craving.id else c for c in self.saved_cravings]

    def count(self) -> int:
        return len(self.saved_cravings)
