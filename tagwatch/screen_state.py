"""Which screen the device is currently showing."""

from enum import Enum


class ScreenState(Enum):
    """Top-level screens of the device."""

    SETTING = 0
    MAIN = 1
    ADD = 2