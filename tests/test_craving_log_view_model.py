"""
Unit tests for CravingLogViewModel.

The log-craving use case is mocked so only the form logic is exercised.
"""

from unittest.mock import MagicMock

import pytest

from entities import CravingEntity
from exceptions.invalid_intensity_error import InvalidIntensityError
from exceptions.repository_error import PersistenceError
from presentation.craving_log_view_model import CravingLogState, CravingLogViewModel
from use_cases.log_craving_use_case import LogCravingUseCase


@pytest.fixture
def use_case():
    mock = MagicMock(spec=LogCravingUseCase)
    mock.execute.side_effect = lambda **kwargs: CravingEntity(
        intensity=kwargs["intensity"], triggers=kwargs["triggers"])
    return mock


@pytest.fixture
def view_model(use_case):
    return CravingLogViewModel(use_case)


class TestCravingLogViewModel:
    """Tests for CravingLogViewModel"""

    def test_initial_state(self, view_model):
        assert view_model.state == CravingLogState()
        assert view_model.can_submit is True

    def test_log_craving_success(self, view_model, use_case):
        view_model.set_intensity(7)
        view_model.toggle_trigger("Anxious")

        view_model.log_craving()

        assert view_model.state.show_success_alert is True
        assert view_model.state.error_message is None
        assert view_model.state.is_loading is False
        use_case.execute.assert_called_once_with(
            intensity=7,
            triggers=["Anxious"],
            notes=None,
            location=None,
            was_managed_successfully=False,
        )

    def test_form_resets_after_success(self, view_model):
        view_model.set_intensity(8)
        view_model.toggle_trigger("Bored")
        view_model.set_notes("after lunch")
        view_model.set_location("Kitchen")

        view_model.log_craving()

        assert view_model.state.intensity == 5
        assert view_model.state.selected_triggers == ()
        assert view_model.state.notes == ""
        assert view_model.state.location == ""

    def test_non_empty_text_is_passed_through(self, view_model, use_case):
        view_model.set_notes("after lunch")
        view_model.set_location("Kitchen")
        view_model.set_was_managed_successfully(True)

        view_model.log_craving()

        kwargs = use_case.execute.call_args.kwargs
        assert kwargs["notes"] == "after lunch"
        assert kwargs["location"] == "Kitchen"
        assert kwargs["was_managed_successfully"] is True

    def test_validation_error_is_surfaced(self, view_model, use_case):
        use_case.execute.side_effect = InvalidIntensityError(11)
        view_model.set_intensity(11)
        view_model.toggle_trigger("Stressed")

        view_model.log_craving()

        assert view_model.state.error_message == "Intensity must be between 1 and 10"
        assert view_model.state.show_success_alert is False
        assert view_model.state.is_loading is False
        # Form is kept for a retry
        assert view_model.state.selected_triggers == ("Stressed",)

    def test_persistence_error_is_surfaced(self, view_model, use_case):
        use_case.execute.side_effect = PersistenceError("Failed to save craving: disk I/O error")

        view_model.log_craving()

        assert view_model.state.error_message == "Failed to save craving: disk I/O error"

    def test_unexpected_error_clears_loading(self, view_model, use_case):
        use_case.execute.side_effect = RuntimeError("boom")
        view_model.toggle_trigger("Bored")

        view_model.log_craving()

        assert view_model.state.is_loading is False
        assert view_model.can_submit is True
        assert view_model.state.error_message == "Failed to log craving: boom"
        assert view_model.state.selected_triggers == ("Bored",)

    def test_toggle_trigger(self, view_model):
        view_model.toggle_trigger("Bored")
        view_model.toggle_trigger("Tired")
        view_model.toggle_trigger("Bored")
        assert view_model.state.selected_triggers == ("Tired",)

    def test_subscribers_receive_each_state(self, view_model):
        states = []
        unsubscribe = view_model.subscribe(states.append)

        view_model.set_intensity(9)
        view_model.log_craving()
        unsubscribe()
        view_model.set_intensity(2)

        assert states[0].intensity == 9
        assert any(s.is_loading for s in states)
        assert states[-1].show_success_alert is True
        assert states[-1].intensity == 5

    def test_dismiss_success_alert(self, view_model):
        view_model.log_craving()
        view_model.dismiss_success_alert()
        assert view_model.state.show_success_alert is False

    @pytest.mark.parametrize("intensity,color,description", [
        (2, "green", "Mild - Manageable discomfort"),
        (5, "orange", "Moderate - Noticeable urge"),
        (9, "red", "Intense - Strong urge"),
        (0, "gray", ""),
    ])
    def test_intensity_presentation(self, view_model, intensity, color, description):
        view_model.set_intensity(intensity)
        assert view_model.intensity_color == color
        assert view_model.intensity_description == description
