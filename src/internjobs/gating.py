import logging
from enum import Enum

from internjobs.preferences import PreferenceStore

logger = logging.getLogger(__name__)


class GateState(str, Enum):
    UNKNOWN = "unknown"
    SATISFIED = "satisfied"
    AWAITING_CHOICE = "awaiting_choice"


class EducationLevelGate:
    """
    Decides whether first-time users must pick an education level before
    browsing. The choice is persisted in a PreferenceStore; whether the
    prompt is currently shown (`show_modal`) is session-only state.

    Nothing is read until evaluate() is called. Clearing the preference does
    not reopen the prompt by itself: the next evaluate() does.
    """

    def __init__(self, store: PreferenceStore) -> None:
        self.store = store
        self.state = GateState.UNKNOWN
        self._education_level: str | None = None
        self._show_modal = False

    @property
    def education_level(self) -> str | None:
        return self._education_level

    @property
    def is_education_level_set(self) -> bool:
        return bool(self._education_level)

    @property
    def show_modal(self) -> bool:
        return self._show_modal

    def evaluate(self) -> GateState:
        """Read the stored preference and open the prompt if there is none."""
        stored = self.store.read()
        if stored:
            self._education_level = stored
            self._show_modal = False
            self.state = GateState.SATISFIED
        else:
            self._education_level = None
            self._show_modal = True
            self.state = GateState.AWAITING_CHOICE
        logger.debug(f"Education level gate evaluated: {self.state.value}")
        return self.state

    def set_education_level(self, level: str | None) -> None:
        """
        Record the user's choice and close the prompt.
        An empty or None level clears the stored preference instead.
        """
        if not level:
            self.clear_education_level()
            return
        self.store.write(level)
        self._education_level = level
        self._show_modal = False
        self.state = GateState.SATISFIED
        logger.info(f"Education level set to '{level}'")

    def clear_education_level(self) -> None:
        self.store.clear()
        self._education_level = None
        self.state = GateState.UNKNOWN
        logger.info("Education level cleared")

    def open_modal(self) -> None:
        """Show the prompt again, e.g. when the user asks to change their choice."""
        self._show_modal = True
        self.state = GateState.AWAITING_CHOICE

    def set_show_modal(self, show: bool) -> None:
        if show:
            self.open_modal()
            return
        self._show_modal = False
        if self._education_level:
            self.state = GateState.SATISFIED
