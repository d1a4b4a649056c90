"""
Use case: log a new craving episode.

Validates the intensity before anything is constructed or persisted.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from core.icraving_repository import ICravingRepository
from entities.craving import CravingEntity
from exceptions.invalid_intensity_error import InvalidIntensityError

logger = logging.getLogger(__name__)

MIN_INTENSITY = 1
MAX_INTENSITY = 10


class LogCravingUseCase(ABC):

    @abstractmethod
    def execute(
        self,
        intensity: int,
        triggers: Optional[Sequence[str]] = None,
        notes: Optional[str] = None,
        location: Optional[str] = None,
        was_managed_successfully: bool = False,
        duration: Optional[float] = None,
        management_strategy: Optional[str] = None,
    ) -> CravingEntity:
        pass


class DefaultLogCravingUseCase(LogCravingUseCase):
    def __init__(self, repository: ICravingRepository):
        self.repository = repository

    def execute(
        self,
        intensity: int,
        triggers: Optional[Sequence[str]] = None,
        notes: Optional[str] = None,
        location: Optional[str] = None,
        was_managed_successfully: bool = False,
        duration: Optional[float] = None,
        management_strategy: Optional[str] = None,
    ) -> CravingEntity:
        """
        Validate, build and persist a craving.

        Args:
            intensity: Self-reported strength; must be within 1-10
            triggers: Trigger labels in selection order
            notes: Optional free-text notes
            location: Optional location label
            was_managed_successfully: Whether the craving was resisted
            duration: Optional duration in seconds
            management_strategy: Optional strategy label

        Returns:
            The persisted craving, with its assigned id and timestamp

        Raises:
            InvalidIntensityError: If intensity is not an integer within range (nothing is saved)
            PersistenceError: If the repository fails to commit
        """
        # bool is an int subclass but never a valid intensity
        if (
            isinstance(intensity, bool)
            or not isinstance(intensity, int)
            or not MIN_INTENSITY <= intensity <= MAX_INTENSITY
        ):
            logger.debug(f"Rejected craving with intensity {intensity}")
            raise InvalidIntensityError(intensity)

        craving = CravingEntity(
            intensity=intensity,
            duration=duration,
            triggers=tuple(triggers or ()),
            notes=notes,
            location=location,
            management_strategy=management_strategy,
            was_managed_successfully=was_managed_successfully,
        )

        self.repository.save(craving)
        return craving
