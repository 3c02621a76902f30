"""Behaviour of the tag-registration screen."""

import logging
from enum import Enum
from os import PathLike
from typing import Callable, Dict, List, Protocol, Sequence, Union

from tagwatch.draw import Display
from tagwatch.reader import TagId
from tagwatch.screen_state import ScreenState
from tagwatch.screens import (
    AddError,
    AddMessage,
    draw_add_error_screen,
    draw_add_message_screen,
    draw_add_selector_screen,
)
from tagwatch.tags import read_tags, write_tags

logger = logging.getLogger(__name__)

TICKS_PER_SECOND = 100
SCAN_TIMEOUT_SECONDS = 5
MESSAGE_SECONDS = 3

_Root = Union[str, "PathLike[str]"]


class AddState(Enum):
    """Steps of registering a tag."""

    SELECT_CATEGORY = "select_category"
    SCANNING = "scanning"
    COMPLETE = "complete"
    ERROR_DOUBLE = "error_double"
    ERROR_NOT_FOUND = "error_not_found"
    MAIN = "main"


class _Reader(Protocol):
    def read(self) -> Sequence[TagId]: ...


class _Encoder(Protocol):
    def difference(self) -> int: ...


class AddScreen:
    """Pick a category, scan exactly one tag and store it under that category."""

    def __init__(
        self,
        display: Display,
        reader: _Reader,
        encoder: _Encoder,
        button: Callable[[], bool],
        root: _Root,
    ):
        self._display = display
        self._reader = reader
        self._encoder = encoder
        self._button = button
        self._root = root
        self._state = AddState.SELECT_CATEGORY
        self._selection_index = 0
        self._wait_count = 0
        self._force_update = False

    @property
    def state(self) -> AddState:
        """The current registration step."""
        return self._state

    def _waited(self, seconds: int) -> bool:
        self._wait_count += 1
        return self._wait_count > seconds * TICKS_PER_SECOND

    def _select_category(self, categories: Sequence[str], is_first: bool) -> AddState:
        if is_first:
            draw_add_selector_screen(self._display, categories, self._selection_index)
            return AddState.SELECT_CATEGORY
        if self._button():
            return AddState.SCANNING
        difference = self._encoder.difference()
        if difference != 0:
            self._selection_index += difference
            if self._selection_index < 0:
                self._selection_index = len(categories) - 1
            elif self._selection_index >= len(categories):
                self._selection_index = 0
            draw_add_selector_screen(self._display, categories, self._selection_index)
        return AddState.SELECT_CATEGORY

    def _scan(self, tags: Dict[TagId, int], is_first: bool) -> AddState:
        if is_first:
            draw_add_message_screen(self._display, AddMessage.SCANNING)
            self._wait_count = 0
            return AddState.SCANNING
        found: List[TagId] = list(self._reader.read())
        if not found:
            return AddState.ERROR_NOT_FOUND if self._waited(SCAN_TIMEOUT_SECONDS) else AddState.SCANNING
        if len(found) > 1:
            return AddState.ERROR_DOUBLE
        tags[found[0]] = self._selection_index
        write_tags(self._root, tags)
        for tag, category in sorted(read_tags(self._root).items()):
            logger.debug("TagID: %s Category: %d", tag, category)
        return AddState.COMPLETE

    def _message(self, is_first: bool) -> AddState:
        if is_first:
            self._wait_count = 0
            if self._state is AddState.COMPLETE:
                draw_add_message_screen(self._display, AddMessage.COMPLETE)
                logger.info("Add complete")
            elif self._state is AddState.ERROR_DOUBLE:
                draw_add_error_screen(self._display, AddError.DOUBLE_DETECTED)
                logger.info("Add error: double detected")
            elif self._state is AddState.ERROR_NOT_FOUND:
                draw_add_error_screen(self._display, AddError.NOT_FOUND)
                logger.info("Add error: not found")
            else:
                return AddState.MAIN
        if self._waited(MESSAGE_SECONDS):
            return AddState.MAIN
        return self._state

    def step(self, is_first: bool, tags: Dict[TagId, int], categories: Sequence[str]) -> ScreenState:
        """Run one tick; ``tags`` is updated in place when a tag is registered."""
        if is_first:
            self._state = AddState.SELECT_CATEGORY
            self._selection_index = 0
            self._force_update = True
        old_state = self._state
        if self._state is AddState.SELECT_CATEGORY:
            self._state = self._select_category(categories, self._force_update)
        elif self._state is AddState.SCANNING:
            self._state = self._scan(tags, self._force_update)
        elif self._state in (AddState.COMPLETE, AddState.ERROR_DOUBLE, AddState.ERROR_NOT_FOUND):
            self._state = self._message(self._force_update)
        else:
            return ScreenState.MAIN
        self._force_update = old_state is not self._state
        return ScreenState.ADD