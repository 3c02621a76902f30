"""Rendering of the clock-setting and alarm-time screens."""

from dataclasses import dataclass
from enum import Enum

from tagwatch.draw import BACKGROUND_COLOR, Canvas, Coordinate, Datum, Display

_LARGE_FONT_DIR = "/font/36p"
_SMALL_FONT_DIR = "/font/32p"
_HEADER_ICON = Coordinate(0, 23)


@dataclass(frozen=True)
class Time:
    """A time of day shown as two two-digit fields."""

    hours: int
    minutes: int

    def __post_init__(self) -> None:
        for name, value in (("hours", self.hours), ("minutes", self.minutes)):
            if not 0 <= value <= 99:
                raise ValueError(f"{name} must fit in two digits, got {value!r}")


class SetTimeSelection(Enum):
    """Digit being edited on the clock-setting screen."""

    HOURS_TENS = "hours_tens"
    HOURS_UNITS = "hours_units"
    MINUTES_TENS = "minutes_tens"
    MINUTES_UNITS = "minutes_units"


class ChangeTimeSelection(Enum):
    """Digit being edited on the alarm-time screen."""

    HOURS_TENS = "hours_tens"
    HOURS_UNITS = "hours_units"
    MINUTES_TENS = "minutes_tens"
    MINUTES_UNITS = "minutes_units"


_SET_SELECTOR_X = {
    SetTimeSelection.HOURS_TENS: 68,
    SetTimeSelection.HOURS_UNITS: 91,
    SetTimeSelection.MINUTES_TENS: 137,
    SetTimeSelection.MINUTES_UNITS: 1600,
}

_CHANGE_SELECTOR_X = {
    ChangeTimeSelection.HOURS_TENS: 74,
    ChangeTimeSelection.HOURS_UNITS: 94,
    ChangeTimeSelection.MINUTES_TENS: 125,
    ChangeTimeSelection.MINUTES_UNITS: 147,
}

_CHANGE_SELECTOR_Y_UP = 80
_CHANGE_SELECTOR_Y_DOWN = 152


def _digits(time: Time) -> tuple:
    return (time.hours // 10, time.hours % 10, time.minutes // 10, time.minutes % 10)


def _draw_digits(canvas: Canvas, font_dir: str, time: Time, xs: tuple, y: int) -> None:
    for digit, x in zip(_digits(time), xs):
        canvas.draw_png(f"{font_dir}/{digit}.png", Coordinate(x, y), Datum.TOP_CENTER)


def _header(display: Display, icon: str) -> Canvas:
    canvas = display.new_canvas()
    canvas.fill(BACKGROUND_COLOR)
    canvas.draw_png("/status-set.png", Coordinate(0, 0), Datum.TOP_CENTER)
    canvas.draw_png(icon, _HEADER_ICON, Datum.TOP_CENTER)
    return canvas


def draw_set_time_screen(display: Display, selection: SetTimeSelection, time: Time) -> None:
    """Render the clock-setting screen with the selected digit marked."""
    canvas = _header(display, "/set-user-clock.png")
    canvas.draw_png("/time-selecter_L.png", Coordinate(_SET_SELECTOR_X[selection], 98), Datum.TOP_LEFT)
    _draw_digits(canvas, _LARGE_FONT_DIR, time, (66, 88, 133, 155), 116)
    canvas.draw_png(f"{_LARGE_FONT_DIR}/colon.png", Coordinate(110, 116), Datum.TOP_LEFT)
    display.present(canvas)


def draw_change_time_screen(
    display: Display, selection: ChangeTimeSelection, time: Time, is_up: bool
) -> None:
    """Render the alarm-time screen; ``is_up`` marks the upper row instead of the lower."""
    canvas = _header(display, "/set-alarm-time.png")
    selector_y = _CHANGE_SELECTOR_Y_UP if is_up else _CHANGE_SELECTOR_Y_DOWN
    canvas.draw_png(
        "/time-selecter_S.png", Coordinate(_CHANGE_SELECTOR_X[selection], selector_y), Datum.TOP_LEFT
    )
    xs = (73, 93, 133, 153)
    _draw_digits(canvas, _SMALL_FONT_DIR, time, xs, 93)
    _draw_digits(canvas, _SMALL_FONT_DIR, time, xs, 165)
    canvas.draw_png(f"{_SMALL_FONT_DIR}/colon.png", Coordinate(113, 93), Datum.TOP_LEFT)
    canvas.draw_png(f"{_SMALL_FONT_DIR}/colon.png", Coordinate(113, 165), Datum.TOP_LEFT)
    canvas.draw_png(f"{_SMALL_FONT_DIR}/row.png", Coordinate(110, 165), Datum.TOP_LEFT)
    display.present(canvas)