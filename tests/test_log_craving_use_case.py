"""
Unit tests for DefaultLogCravingUseCase.

Business rules are tested in isolation with a list-backed repository.
"""

from unittest.mock import MagicMock

import pytest

from conftest import InMemoryCravingRepository
from core.icraving_repository import ICravingRepository
from exceptions.invalid_intensity_error import InvalidIntensityError
from exceptions.repository_error import PersistenceError
from use_cases.log_craving_use_case import DefaultLogCravingUseCase


@pytest.fixture
def repository():
    return InMemoryCravingRepository()


@pytest.fixture
def use_case(repository):
    return DefaultLogCravingUseCase(repository)


class TestLogCravingUseCase:
    """Tests for DefaultLogCravingUseCase"""

    def test_logs_valid_craving(self, use_case, repository):
        result = use_case.execute(
            intensity=5,
            triggers=["Anxious", "Bored"],
            notes="Test note",
            location="Office",
            was_managed_successfully=True,
        )

        assert result.intensity == 5
        assert result.triggers == ("Anxious", "Bored")
        assert result.location == "Office"
        assert repository.count() == 1
        assert repository.saved_cravings[0] == result

    @pytest.mark.parametrize("intensity", range(1, 11))
    def test_accepts_every_intensity_in_range(self, use_case, intensity):
        assert use_case.execute(intensity=intensity).intensity == intensity

    @pytest.mark.parametrize("intensity", [-5, 0, 11, 100])
    def test_rejects_out_of_range_intensity(self, use_case, repository, intensity):
        with pytest.raises(InvalidIntensityError) as exc_info:
            use_case.execute(intensity=intensity)

        assert exc_info.value.intensity == intensity
        assert str(exc_info.value) == "Intensity must be between 1 and 10"
        assert repository.count() == 0

    @pytest.mark.parametrize("intensity", [7.5, 5.0, True, "7", None])
    def test_rejects_non_integer_intensity(self, use_case, repository, intensity):
        with pytest.raises(InvalidIntensityError):
            use_case.execute(intensity=intensity)

        assert repository.count() == 0

    def test_triggers_are_stored_as_tuple(self, use_case):
        labels = ["Anxious"]
        result = use_case.execute(intensity=6, triggers=labels)
        labels.append("Bored")

        assert result.triggers == ("Anxious",)

    def test_invalid_intensity_never_reaches_repository(self):
        repository = MagicMock(spec=ICravingRepository)
        with pytest.raises(InvalidIntensityError):
            DefaultLogCravingUseCase(repository).execute(intensity=11)
        repository.save.assert_not_called()

    def test_assigns_id_and_timestamp(self, use_case):
        first = use_case.execute(intensity=3)
        second = use_case.execute(intensity=3)
        assert first.id != second.id
        assert first.timestamp.tzinfo is not None

    def test_optional_fields_default(self, use_case):
        result = use_case.execute(intensity=6)
        assert result.triggers == ()
        assert result.notes is None
        assert result.was_managed_successfully is False

    def test_persistence_error_propagates(self):
        repository = MagicMock(spec=ICravingRepository)
        repository.save.side_effect = PersistenceError("disk full")

        with pytest.raises(PersistenceError):
            DefaultLogCravingUseCase(repository).execute(intensity=4)
