"""
Tests for MessageRepository against an in-memory SQLite database.
"""

import uuid

import pytest

from conftest import at
from entities import MessageCategory, MotivationalMessageEntity, default_messages
from exceptions.repository_error import NotFoundError


class TestMessageRepositorySeeding:
    """Tests for seed_default_messages_if_needed"""

    def test_seeds_empty_store(self, message_repository):
        inserted = message_repository.seed_default_messages_if_needed()

        assert inserted == 6
        assert message_repository.count() == 6
        contents = {m.content for m in message_repository.fetch_all()}
        assert contents == {m.content for m in default_messages()}

    def test_seeding_is_once_only(self, message_repository):
        message_repository.seed_default_messages_if_needed()
        assert message_repository.seed_default_messages_if_needed() == 0
        assert message_repository.count() == 6

    def test_no_seed_when_user_messages_exist(self, message_repository):
        message_repository.save(MotivationalMessageEntity(
            category=MessageCategory.PERSONAL_REASON,
            content="For my kids",
            is_user_created=True,
        ))
        assert message_repository.seed_default_messages_if_needed() == 0
        assert message_repository.count() == 1


class TestMessageRepositoryQueries:
    """Tests for fetch_active / fetch_by_category"""

    def test_fetch_active_orders_by_priority(self, message_repository):
        message_repository.save(MotivationalMessageEntity(
            category=MessageCategory.SELF_COMPASSION, content="low", display_priority=1))
        message_repository.save(MotivationalMessageEntity(
            category=MessageCategory.SELF_COMPASSION, content="high", display_priority=10))
        message_repository.save(MotivationalMessageEntity(
            category=MessageCategory.SELF_COMPASSION, content="hidden", display_priority=10, is_active=False))

        assert [m.content for m in message_repository.fetch_active()] == ["high", "low"]

    def test_fetch_by_category(self, message_repository):
        message_repository.seed_default_messages_if_needed()

        urges = message_repository.fetch_by_category(MessageCategory.URGE_MANAGEMENT)

        assert len(urges) == 2
        assert all(m.category == MessageCategory.URGE_MANAGEMENT for m in urges)
        assert message_repository.fetch_by_category(MessageCategory.PERSONAL_REASON) == []

    def test_fetch_all_newest_first(self, message_repository):
        for day in (3, 1, 2):
            message_repository.save(MotivationalMessageEntity(
                category=MessageCategory.PROGRESS_REMINDER, content=f"day {day}", created_at=at(day)))

        assert [m.content for m in message_repository.fetch_all()] == ["day 3", "day 2", "day 1"]


class TestMessageRepositoryMutations:
    """Tests for update / delete"""

    def test_update_shown_and_feedback(self, message_repository):
        message = MotivationalMessageEntity(category=MessageCategory.COPING_STRATEGIES, content="Walk")
        message_repository.save(message)

        updated = message.mark_as_shown().with_feedback(True)
        message_repository.update(updated)

        stored = message_repository.get(message.id)
        assert stored.times_shown == 1
        assert stored.was_helpful is True
        assert stored == updated

    def test_update_missing_raises_not_found(self, message_repository):
        with pytest.raises(NotFoundError):
            message_repository.update(
                MotivationalMessageEntity(category=MessageCategory.COPING_STRATEGIES, content="Walk"))

    def test_delete(self, message_repository):
        message_repository.seed_default_messages_if_needed()
        target = message_repository.fetch_all()[0]

        message_repository.delete(target.id)
        message_repository.delete(uuid.uuid4())

        assert message_repository.count() == 5
        assert message_repository.get(target.id) is None
