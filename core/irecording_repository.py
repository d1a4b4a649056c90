"""IRecordingRepository - data access contract for recordings."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from entities.recording import RecordingEntity, RecordingPurpose


class IRecordingRepository(ABC):
    """Abstract base class for recording persistence.

    Same failure semantics as ICravingRepository.
    """

    @abstractmethod
    def save(self, recording: RecordingEntity) -> None:
        pass

    @abstractmethod
    def fetch_all(self) -> List[RecordingEntity]:
        """All recordings, newest first."""
        pass

    @abstractmethod
    def fetch_by_purpose(self, purpose: RecordingPurpose) -> List[RecordingEntity]:
        pass

    @abstractmethod
    def fetch_by_craving(self, craving_id: UUID) -> List[RecordingEntity]:
        pass

    @abstractmethod
    def get(self, recording_id: UUID) -> Optional[RecordingEntity]:
        pass

    @abstractmethod
    def delete(self, recording_id: UUID) -> None:
        pass

    @abstractmethod
    def update(self, recording: RecordingEntity) -> None:
        """Overwrite a stored recording (e.g. after playback)."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass
