"""Use case: list cravings, newest first."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from core.icraving_repository import ICravingRepository
from entities.craving import CravingEntity


class FetchCravingsUseCase(ABC):

    @abstractmethod
    def execute(self) -> List[CravingEntity]:
        pass

    @abstractmethod
    def execute_in_range(self, start: datetime, end: datetime) -> List[CravingEntity]:
        pass


def _newest_first(cravings: List[CravingEntity]) -> List[CravingEntity]:
    return sorted(cravings, key=lambda craving: craving.timestamp, reverse=True)


class DefaultFetchCravingsUseCase(FetchCravingsUseCase):
    """
    Delegates to the repository and re-sorts by timestamp descending, so
    the ordering holds whatever the repository implementation returns.
    """

    def __init__(self, repository: ICravingRepository):
        self.repository = repository

    def execute(self) -> List[CravingEntity]:
        return _newest_first(self.repository.fetch_all())

    def execute_in_range(self, start: datetime, end: datetime) -> List[CravingEntity]:
        return _newest_first(self.repository.fetch(start, end))
