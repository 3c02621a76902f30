"""Top-level application: wires the screens together and runs the device loop."""

import logging
import time
from os import PathLike
from typing import Callable, Dict, List, Optional, Protocol, Sequence, Union

from tagwatch.add_screen import AddScreen
from tagwatch.draw import Display
from tagwatch.main_screen import MainScreen
from tagwatch.reader import TagId
from tagwatch.screen_state import ScreenState
from tagwatch.setting_screen import SettingScreen
from tagwatch.settings import SettingState, read_setting, save_setting
from tagwatch.tags import read_tags

logger = logging.getLogger(__name__)

SETTINGS_PATH = "/settings"
LOOP_DELAY = 0.01
STARTUP_COLOR = 0xFF0000
DEFAULT_CATEGORIES = ("サイフ", "名刺", "パスポート", "充電器", "常備薬")

_Root = Union[str, "PathLike[str]"]


class _Reader(Protocol):
    def read(self) -> Sequence[TagId]: ...

    def start(self) -> None: ...


class _Encoder(Protocol):
    def update(self) -> None: ...

    def difference(self) -> int: ...


class _Sender(Protocol):
    def send(self, data: List[int]) -> object: ...


class _Light(Protocol):
    def fill(self, color: int) -> None: ...

    def clear(self) -> None: ...

    def show(self) -> None: ...


class App:
    """Owns the device state and dispatches each tick to the active screen."""

    def __init__(
        self,
        display: Display,
        reader: _Reader,
        encoder: _Encoder,
        button: Callable[[], bool],
        sender: _Sender,
        light: _Light,
        root: _Root,
        *,
        settings_path: str = SETTINGS_PATH,
        categories: Sequence[str] = DEFAULT_CATEGORIES,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._reader = reader
        self._encoder = encoder
        self._sender = sender
        self._light = light
        self._root = root
        self._settings_path = settings_path
        self._default_categories = tuple(categories)
        self._sleep = sleep
        self._main = MainScreen(display, reader, encoder, button, sender, light)
        self._setting = SettingScreen(display, encoder, button)
        self._add = AddScreen(display, reader, encoder, button, root)

        self.state = ScreenState.MAIN
        self.is_first = True
        self.settings: Optional[SettingState] = None
        self.tags: Dict[TagId, int] = {}
        self.categories: List[str] = []
        self.exist_ids: List[int] = []

    def setup(self) -> None:
        """Load stored data, start the reader and announce an empty presence list."""
        logger.info("Start")
        self.settings = read_setting(self._root, self._settings_path)
        self.tags = read_tags(self._root)
        self._light.fill(STARTUP_COLOR)
        self._light.show()
        self._reader.start()
        self.categories = list(self._default_categories)
        self.exist_ids = []
        self._sender.send(self.exist_ids)

    def loop(self) -> ScreenState:
        """Run one tick of the active screen and return the screen now active."""
        if self.settings is None:
            raise RuntimeError("setup() must be called before loop()")
        self._encoder.update()
        logger.debug("diff: %d", self._encoder.difference())

        current = self.state
        if current is ScreenState.MAIN:
            next_state = self._main.step(
                self.settings.scan,
                self.is_first,
                self.settings.light,
                self.tags,
                self.exist_ids,
            )
        elif current is ScreenState.SETTING:
            next_state = self._setting.step(self.settings, self.is_first)
        elif current is ScreenState.ADD:
            next_state = self._add.step(self.is_first, self.tags, self.categories)
        else:
            next_state = current

        if current is ScreenState.SETTING and next_state is ScreenState.MAIN:
            save_setting(self._root, self._settings_path, self.settings)

        self.is_first = next_state is not current
        self.state = next_state
        self._sleep(LOOP_DELAY)
        return next_state