"""
Unit tests for DefaultFetchCravingsUseCase.
"""

from conftest import InMemoryCravingRepository, at
from entities import CravingEntity
from use_cases.fetch_cravings_use_case import DefaultFetchCravingsUseCase


class TestFetchCravingsUseCase:
    """Tests for DefaultFetchCravingsUseCase"""

    def test_resorts_whatever_the_repository_returns(self):
        t1, t2, t3 = at(1), at(2), at(3)
        # The in-memory repository returns insertion order, not newest first
        repository = InMemoryCravingRepository([
            CravingEntity(intensity=2, timestamp=t2),
            CravingEntity(intensity=1, timestamp=t1),
            CravingEntity(intensity=3, timestamp=t3),
        ])

        result = DefaultFetchCravingsUseCase(repository).execute()

        assert [c.timestamp for c in result] == [t3, t2, t1]

    def test_range_is_sorted_and_filtered(self):
        repository = InMemoryCravingRepository([
            CravingEntity(intensity=day, timestamp=at(day)) for day in (4, 1, 3, 5, 2)
        ])

        result = DefaultFetchCravingsUseCase(repository).execute_in_range(at(2), at(4))

        assert [c.intensity for c in result] == [4, 3, 2]

    def test_empty(self):
        assert DefaultFetchCravingsUseCase(InMemoryCravingRepository()).execute() == []

    def test_against_sqlalchemy_repository(self, craving_repository):
        for day in (2, 3, 1):
            craving_repository.save(CravingEntity(intensity=day, timestamp=at(day)))

        result = DefaultFetchCravingsUseCase(craving_repository).execute()

        assert [c.intensity for c in result] == [3, 2, 1]
