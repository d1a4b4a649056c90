"""
View-model for the craving log form.

Holds the editable form state as a plain dataclass and notifies
subscribers with the new state after every mutation.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple

from exceptions.invalid_intensity_error import InvalidIntensityError
from exceptions.repository_error import RepositoryError
from use_cases.log_craving_use_case import LogCravingUseCase

logger = logging.getLogger(__name__)

DEFAULT_INTENSITY = 5


@dataclass(frozen=True)
class CravingLogState:
    """Snapshot of the craving log form."""

    intensity: int = DEFAULT_INTENSITY
    selected_triggers: Tuple[str, ...] = ()
    notes: str = ""
    location: str = ""
    was_managed_successfully: bool = False
    is_loading: bool = False
    show_success_alert: bool = False
    error_message: Optional[str] = None


StateListener = Callable[[CravingLogState], None]


class CravingLogViewModel:
    def __init__(self, log_craving_use_case: LogCravingUseCase):
        self._log_craving_use_case = log_craving_use_case
        self._state = CravingLogState()
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> CravingLogState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with the new state after each change.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _update(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)

    # Form mutators

    def set_intensity(self, intensity: int) -> None:
        self._update(intensity=int(intensity))

    def toggle_trigger(self, trigger: str) -> None:
        triggers = list(self._state.selected_triggers)
        if trigger in triggers:
            triggers.remove(trigger)
        else:
            triggers.append(trigger)
        self._update(selected_triggers=tuple(triggers))

    def set_notes(self, notes: str) -> None:
        self._update(notes=notes)

    def set_location(self, location: str) -> None:
        self._update(location=location)

    def set_was_managed_successfully(self, value: bool) -> None:
        self._update(was_managed_successfully=value)

    def dismiss_success_alert(self) -> None:
        self._update(show_success_alert=False)

    # Actions

    def log_craving(self) -> None:
        """
        Submit the form through the log-craving use case.

        Validation and storage errors are surfaced in error_message; the form
        keeps its values so the user can retry.
        """
        self._update(is_loading=True, error_message=None)
        state = self._state

        try:
            self._log_craving_use_case.execute(
                intensity=state.intensity,
                triggers=list(state.selected_triggers),
                notes=state.notes or None,
                location=state.location or None,
                was_managed_successfully=state.was_managed_successfully,
            )
        except (InvalidIntensityError, RepositoryError) as e:
            logger.warning(f"Failed to log craving: {e}")
            self._update(is_loading=False, error_message=str(e))
            return
        except Exception as e:
            logger.exception("Unexpected error while logging craving")
            self._update(is_loading=False, error_message=f"Failed to log craving: {e}")
            return

        self._update(
            intensity=DEFAULT_INTENSITY,
            selected_triggers=(),
            notes="",
            location="",
            was_managed_successfully=False,
            is_loading=False,
            show_success_alert=True,
        )

    # Derived values for the UI

    @property
    def intensity_color(self) -> str:
        intensity = self._state.intensity
        if 1 <= intensity <= 3:
            return "green"
        if 4 <= intensity <= 6:
            return "orange"
        if 7 <= intensity <= 10:
            return "red"
        return "gray"

    @property
    def intensity_description(self) -> str:
        intensity = self._state.intensity
        if 1 <= intensity <= 3:
            return "Mild - Manageable discomfort"
        if 4 <= intensity <= 6:
            return "Moderate - Noticeable urge"
        if 7 <= intensity <= 10:
            return "Intense - Strong urge"
        return ""

    @property
    def can_submit(self) -> bool:
        return not self._state.is_loading
