"""
ICravingRepository - data access contract for cravings.

Use cases depend on this interface only; CravingRepository is the
SQLAlchemy-backed implementation and tests substitute in-memory fakes.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from entities.craving import CravingEntity


class ICravingRepository(ABC):
    """Abstract base class for craving persistence.

    Failure semantics shared by every implementation:
        - storage faults raise PersistenceError
        - update() of an unknown id raises NotFoundError
        - delete() of an unknown id is a successful no-op
    """

    @abstractmethod
    def save(self, craving: CravingEntity) -> None:
        """Persist a new craving."""
        pass

    @abstractmethod
    def fetch_all(self) -> List[CravingEntity]:
        """All cravings, newest first."""
        pass

    @abstractmethod
    def fetch(self, start: datetime, end: datetime) -> List[CravingEntity]:
        """Cravings with start <= timestamp <= end, newest first."""
        pass

    @abstractmethod
    def get(self, craving_id: UUID) -> Optional[CravingEntity]:
        pass

    @abstractmethod
    def delete(self, craving_id: UUID) -> None:
        """Delete a craving and every recording it owns."""
        pass

    @abstractmethod
    def update(self, craving: CravingEntity) -> None:
        pass

    @abstractmethod
    def count(self) -> int:
        pass
