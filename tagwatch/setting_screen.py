"""Behaviour of the settings screen."""

import logging
from typing import Callable, Protocol

from tagwatch.draw import Display
from tagwatch.index import update_index
from tagwatch.screen_state import ScreenState
from tagwatch.screens import SettingSelection, draw_setting_screen
from tagwatch.settings import SettingState

logger = logging.getLogger(__name__)

_SELECTIONS = (
    SettingSelection.BACK,
    SettingSelection.ALERT_TIME,
    SettingSelection.USER_CLOCK,
    SettingSelection.SCAN,
    SettingSelection.LIGHT,
)

_TOGGLED_FIELD = {
    SettingSelection.LIGHT: "light",
    SettingSelection.SCAN: "scan",
    SettingSelection.ALERT_TIME: "alert_time",
    SettingSelection.USER_CLOCK: "user_clock",
}


class _Encoder(Protocol):
    def difference(self) -> int: ...


class SettingScreen:
    """Lets the user toggle settings or go back to the main screen."""

    def __init__(self, display: Display, encoder: _Encoder, button: Callable[[], bool]):
        self._display = display
        self._encoder = encoder
        self._button = button
        self._selection_index = 0

    def step(self, state: SettingState, is_first: bool) -> ScreenState:
        """Run one tick, toggling ``state`` in place when an item is pressed."""
        next_screen = ScreenState.SETTING
        pressed = self._button()
        if pressed:
            logger.debug("Button was pressed")
            selection = _SELECTIONS[self._selection_index]
            if selection is SettingSelection.BACK:
                next_screen = ScreenState.MAIN
            else:
                field = _TOGGLED_FIELD[selection]
                setattr(state, field, not getattr(state, field))

        difference = self._encoder.difference()
        if not is_first and difference == 0 and not pressed:
            return next_screen
        self._selection_index = update_index(self._selection_index, len(_SELECTIONS) - 1, difference)
        if is_first:
            self._selection_index = 0
        draw_setting_screen(self._display, state, _SELECTIONS[self._selection_index])
        return next_screen