"""
Repository for motivational messages.

Besides CRUD it seeds the built-in default messages the first time the
store is opened empty.
"""

import logging
from typing import List, Optional
from uuid import UUID

from core.imessage_repository import IMessageRepository
from db import StorageContext
from entities.motivational_message import (
    MessageCategory,
    MotivationalMessageEntity,
    default_messages,
)
from exceptions.repository_error import NotFoundError
from mappers import message_mapper
from models.motivational_message import MotivationalMessageModel

logger = logging.getLogger(__name__)


class MessageRepository(IMessageRepository):
    """Repository for motivational message CRUD operations."""

    def __init__(self, context: StorageContext):
        self.context = context

    def save(self, message: MotivationalMessageEntity) -> None:
        record = message_mapper.to_model(message)
        with self.context.transaction("save message") as session:
            session.add(record)

    def fetch_all(self) -> List[MotivationalMessageEntity]:
        with self.context.read("fetch messages") as session:
            records = (
                session.query(MotivationalMessageModel)
                .order_by(MotivationalMessageModel.created_at.desc())
                .all()
            )
            return [message_mapper.to_entity(record) for record in records]

    def fetch_active(self) -> List[MotivationalMessageEntity]:
        with self.context.read("fetch active messages") as session:
            records = (
                session.query(MotivationalMessageModel)
                .filter(MotivationalMessageModel.is_active.is_(True))
                .order_by(
                    MotivationalMessageModel.display_priority.desc(),
                    MotivationalMessageModel.created_at.desc(),
                )
                .all()
            )
            return [message_mapper.to_entity(record) for record in records]

    def fetch_by_category(self, category: MessageCategory) -> List[MotivationalMessageEntity]:
        with self.context.read("fetch messages by category") as session:
            records = (
                session.query(MotivationalMessageModel)
                .filter_by(category=category.value)
                .order_by(MotivationalMessageModel.created_at.desc())
                .all()
            )
            return [message_mapper.to_entity(record) for record in records]

    def get(self, message_id: UUID) -> Optional[MotivationalMessageEntity]:
        with self.context.read("get message") as session:
            record = session.query(MotivationalMessageModel).filter_by(id=message_id).first()
            if record is None:
                return None
            return message_mapper.to_entity(record)

    def delete(self, message_id: UUID) -> None:
        with self.context.transaction("delete message") as session:
            session.query(MotivationalMessageModel).filter(
                MotivationalMessageModel.id == message_id
            ).delete()

    def update(self, message: MotivationalMessageEntity) -> None:
        """
        Overwrite every mutable field of an existing message.

        Raises:
            NotFoundError: If no message has this id
        """
        with self.context.transaction("update message") as session:
            record = session.query(MotivationalMessageModel).filter_by(id=message.id).first()
            if record is None:
                raise NotFoundError("MotivationalMessage", message.id)
            message_mapper.apply(message, record)

    def count(self) -> int:
        with self.context.read("count messages") as session:
            return session.query(MotivationalMessageModel).count()

    def seed_default_messages_if_needed(self) -> int:
        """
        Insert the default messages if the store holds no messages at all.

        Check and insert run in one transaction under the context lock.

        Returns:
            Number of messages inserted
        """
        with self.context.transaction("seed default messages") as session:
            if session.query(MotivationalMessageModel).count() > 0:
                return 0
            messages = default_messages()
            for message in messages:
                session.add(message_mapper.to_model(message))
        logger.info(f"Seeded {len(messages)} default motivational messages")
        return len(messages)
