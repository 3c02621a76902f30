"""Behaviour of the main screen: presence checking and navigation."""

import logging
from typing import Callable, Dict, List, Protocol, Sequence

from tagwatch.draw import Display
from tagwatch.index import update_index
from tagwatch.reader import TagId
from tagwatch.screen_state import ScreenState
from tagwatch.screens import MainSelection, MainState, draw_main_screen

logger = logging.getLogger(__name__)

ALERT_COLOR = 0xFF0000

_SELECTIONS = (MainSelection.BELL, MainSelection.SETTING, MainSelection.ADD)
_NEXT_SCREEN = {
    MainSelection.BELL: ScreenState.MAIN,
    MainSelection.SETTING: ScreenState.SETTING,
    MainSelection.ADD: ScreenState.ADD,
}


class _Reader(Protocol):
    def read(self) -> Sequence[TagId]: ...


class _Encoder(Protocol):
    def difference(self) -> int: ...


class _Sender(Protocol):
    def send(self, data: List[int]) -> object: ...


class _Light(Protocol):
    def fill(self, color: int) -> None: ...

    def clear(self) -> None: ...

    def show(self) -> None: ...


class MainScreen:
    """Checks registered tags against the reader and drives the main menu."""

    def __init__(
        self,
        display: Display,
        reader: _Reader,
        encoder: _Encoder,
        button: Callable[[], bool],
        sender: _Sender,
        light: _Light,
    ):
        self._display = display
        self._reader = reader
        self._encoder = encoder
        self._button = button
        self._sender = sender
        self._light = light
        self._selection_index = 0
        self._previous_state = MainState.NOT_SCAN

    def _check_presence(self, tags: Dict[TagId, int], exist_ids: List[int]) -> MainState:
        state = MainState.NORMAL
        present = set(self._reader.read())
        current_ids = []
        for tag, category in sorted(tags.items()):
            if tag in present:
                current_ids.append(category)
            else:
                state = MainState.ALERT
        if current_ids != exist_ids:
            logger.info("Exist IDs changed, updating...")
            exist_ids[:] = current_ids
            self._sender.send(exist_ids)
        return state

    def step(
        self,
        is_scan: bool,
        is_first: bool,
        enable_light: bool,
        tags: Dict[TagId, int],
        exist_ids: List[int],
    ) -> ScreenState:
        """Run one tick; ``exist_ids`` is updated in place. Returns the next screen."""
        state = self._check_presence(tags, exist_ids) if is_scan else MainState.NOT_SCAN

        if state is MainState.ALERT and enable_light:
            self._light.fill(ALERT_COLOR)
        else:
            self._light.clear()
        self._light.show()

        next_screen = ScreenState.MAIN
        if self._button():
            next_screen = _NEXT_SCREEN[_SELECTIONS[self._selection_index]]

        difference = self._encoder.difference()
        self._selection_index = update_index(self._selection_index, len(_SELECTIONS) - 1, difference)
        if not is_first and difference == 0 and state is self._previous_state:
            return next_screen
        if is_first:
            self._selection_index = 0

        self._previous_state = state
        draw_main_screen(self._display, state, _SELECTIONS[self._selection_index])
        return next_screen