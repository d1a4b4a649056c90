"""IMessageRepository - data access contract for motivational messages."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from entities.motivational_message import MessageCategory, MotivationalMessageEntity


class IMessageRepository(ABC):

    @abstractmethod
    def save(self, message: MotivationalMessageEntity) -> None:
        pass

    @abstractmethod
    def fetch_all(self) -> List[MotivationalMessageEntity]:
        """All messages, newest first."""
        pass

    @abstractmethod
    def fetch_active(self) -> List[MotivationalMessageEntity]:
        """Active messages, highest display priority first."""
        pass

    @abstractmethod
    def fetch_by_category(self, category: MessageCategory) -> List[MotivationalMessageEntity]:
        pass

    @abstractmethod
    def get(self, message_id: UUID) -> Optional[MotivationalMessageEntity]:
        pass

    @abstractmethod
    def delete(self, message_id: UUID) -> None:
        pass

    @abstractmethod
    def update(self, message: MotivationalMessageEntity) -> None:
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def seed_default_messages_if_needed(self) -> int:
        """Insert the default messages into an empty store.

        Returns:
            Number of messages inserted (0 if any message already existed)
        """
        pass
