"""Rendering of the main, settings and tag-registration screens."""

from enum import Enum
from typing import Sequence

from tagwatch.draw import BACKGROUND_COLOR, Canvas, Coordinate, Datum, Display
from tagwatch.settings import SettingState

_SELECT_TEXT_COLOR = 0xFFFFFF
_PREVIEW_TEXT_COLOR = 0xC7C7C7
_PREVIEW_FONT_SIZE = 16
_SELECT_FONT_SIZE = 20
_CURRENT_TEXT_Y = 136
_PREVIOUS_TEXT_Y = 105
_NEXT_TEXT_Y = 173


class MainState(Enum):
    """Status shown on the main screen: green, red or grey."""

    NORMAL = "normal"
    ALERT = "alert"
    NOT_SCAN = "not_scan"


class MainSelection(Enum):
    """Item highlighted on the main screen."""

    ADD = "add"
    BELL = "bell"
    SETTING = "setting"


class SettingSelection(Enum):
    """Item highlighted on the settings screen."""

    LIGHT = "light"
    SCAN = "scan"
    ALERT_TIME = "alert_time"
    USER_CLOCK = "user_clock"
    BACK = "back"


class AddMessage(Enum):
    """Progress messages of tag registration."""

    SCANNING = "scanning"
    COMPLETE = "complete"


class AddError(Enum):
    """Failures of tag registration."""

    NOT_FOUND = "not_found"
    DOUBLE_DETECTED = "double_detected"


_STATUS_IMAGES = {
    MainState.NORMAL: "/status-nomal.png",
    MainState.ALERT: "/status-alert.png",
    MainState.NOT_SCAN: "/status-scan-off.png",
}

_MESSAGE_IMAGES = {
    AddMessage.SCANNING: "/add-scan.png",
    AddMessage.COMPLETE: "/add-complete.png",
}

_ERROR_IMAGES = {
    AddError.NOT_FOUND: "/add-E-not-found.png",
    AddError.DOUBLE_DETECTED: "/add-E-double.png",
}


def _blank(display: Display) -> Canvas:
    canvas = display.new_canvas()
    canvas.fill(BACKGROUND_COLOR)
    return canvas


def draw_main_screen(display: Display, state: MainState, selection: MainSelection) -> None:
    """Render the main screen with its status and highlighted item."""
    canvas = _blank(display)
    canvas.draw_png("/line.png", Coordinate(0, 0), Datum.TOP_CENTER)
    canvas.draw_png(_STATUS_IMAGES[state], Coordinate(0, 0), Datum.TOP_CENTER)
    canvas.draw_png("/add.png", Coordinate(38, 96), Datum.TOP_LEFT)
    canvas.draw_png("/setting.png", Coordinate(-40, 98), Datum.TOP_RIGHT)

    bell = Coordinate(0, 23)
    if selection is MainSelection.BELL:
        canvas.draw_png("/bell-sel.png", bell, Datum.TOP_CENTER)
        canvas.draw_png("/active-effect-up.png", Coordinate(0, 11), Datum.TOP_CENTER)
    elif selection is MainSelection.ADD:
        canvas.draw_png("/active-effect-L-white.png", Coordinate(20, 78), Datum.TOP_LEFT)
    elif selection is MainSelection.SETTING:
        canvas.draw_png("/active-effect-R-white.png", Coordinate(-16, 76), Datum.TOP_RIGHT)
    if selection is not MainSelection.BELL:
        canvas.draw_png("/bell.png", bell, Datum.TOP_CENTER)
    display.present(canvas)


def _setting_icon(canvas: Canvas, active: bool, coordinate: Coordinate, datum: Datum) -> None:
    path = "/set-icon-active.png" if active else "/set-icon-inactive.png"
    canvas.draw_png(path, coordinate, datum)


def _setting_item(
    canvas: Canvas,
    selected: bool,
    effect: str,
    effect_at: Coordinate,
    icon: str,
    icon_at: Coordinate,
    datum: Datum,
) -> None:
    if selected:
        canvas.draw_png(effect, effect_at, datum)
        canvas.draw_png(f"{icon}-sel.png", icon_at, datum)
    else:
        canvas.draw_png(f"{icon}.png", icon_at, datum)


def draw_setting_screen(display: Display, state: SettingState, selection: SettingSelection) -> None:
    """Render the settings screen showing each setting's state."""
    canvas = _blank(display)
    canvas.draw_png("/line.png", Coordinate(0, 0), Datum.TOP_CENTER)
    canvas.draw_png("/status-set.png", Coordinate(0, 0), Datum.TOP_CENTER)

    _setting_icon(canvas, state.light, Coordinate(31, 74), Datum.TOP_LEFT)
    _setting_icon(canvas, state.scan, Coordinate(31, 153), Datum.TOP_LEFT)
    _setting_icon(canvas, state.alert_time, Coordinate(-31, 74), Datum.TOP_RIGHT)
    _setting_icon(canvas, state.user_clock, Coordinate(-31, 153), Datum.TOP_RIGHT)

    canvas.draw_png("/back-icon.png", Coordinate(80, 28), Datum.TOP_LEFT)
    canvas.draw_png("/set-icon.png", Coordinate(0, 18), Datum.TOP_CENTER)

    if selection is SettingSelection.BACK:
        canvas.draw_png("/active-effect-L-white.png", Coordinate(56, 10), Datum.TOP_LEFT)

    left_effect = "/active-effect-L-orange.png"
    right_effect = "/active-effect-R-orange.png"
    _setting_item(canvas, selection is SettingSelection.LIGHT, left_effect, Coordinate(19, 63),
                  "/set-led", Coordinate(53, 92), Datum.TOP_LEFT)
    _setting_item(canvas, selection is SettingSelection.SCAN, left_effect, Coordinate(19, 142),
                  "/set-scan", Coordinate(58, 174), Datum.TOP_LEFT)
    _setting_item(canvas, selection is SettingSelection.ALERT_TIME, right_effect, Coordinate(-17, 63),
                  "/set-alert-time", Coordinate(-54, 94), Datum.TOP_RIGHT)
    _setting_item(canvas, selection is SettingSelection.USER_CLOCK, right_effect, Coordinate(-17, 142),
                  "/set-user-clock", Coordinate(-54, 174), Datum.TOP_RIGHT)
    display.present(canvas)


def _add_header(display: Display) -> Canvas:
    canvas = _blank(display)
    canvas.draw_png("/status-set.png", Coordinate(0, 0), Datum.TOP_CENTER)
    canvas.draw_png("/add-state.png", Coordinate(0, 22), Datum.TOP_CENTER)
    return canvas


def draw_add_selector_screen(display: Display, categories: Sequence[str], selection_index: int) -> None:
    """Render the category picker with its neighbours above and below."""
    if not categories:
        raise ValueError("no categories to choose from")
    if not 0 <= selection_index < len(categories):
        raise IndexError(f"selection index {selection_index} out of range")
    canvas = _add_header(display)
    middle = display.width // 2

    previous_text = categories[selection_index - 1] if selection_index > 0 else categories[-1]
    next_text = categories[(selection_index + 1) % len(categories)]
    canvas.draw_string(previous_text, middle, _PREVIOUS_TEXT_Y, _PREVIEW_TEXT_COLOR,
                       _PREVIEW_FONT_SIZE, Datum.TOP_CENTER)
    canvas.draw_string(next_text, middle, _NEXT_TEXT_Y, _PREVIEW_TEXT_COLOR,
                       _PREVIEW_FONT_SIZE, Datum.TOP_CENTER)

    current_text = categories[selection_index]
    canvas.draw_string(current_text, middle, _CURRENT_TEXT_Y, _SELECT_TEXT_COLOR,
                       _SELECT_FONT_SIZE, Datum.TOP_CENTER)

    marker_x = canvas.text_width(current_text, _SELECT_FONT_SIZE) // 2 + 16
    marker_y = _CURRENT_TEXT_Y + _SELECT_FONT_SIZE // 2 - 4
    canvas.draw_png("/add-s-R.png", Coordinate(marker_x, marker_y), Datum.TOP_CENTER)
    canvas.draw_png("/add-s-L.png", Coordinate(-marker_x, marker_y), Datum.TOP_CENTER)
    display.present(canvas)


def draw_add_message_screen(display: Display, message: AddMessage) -> None:
    """Render a registration progress message."""
    canvas = _add_header(display)
    canvas.draw_png(_MESSAGE_IMAGES[message], Coordinate(0, 120), Datum.TOP_CENTER)
    display.present(canvas)


def draw_add_error_screen(display: Display, error: AddError) -> None:
    """Render a registration failure."""
    canvas = _add_header(display)
    canvas.draw_png("/add-error.png", Coordinate(0, 91), Datum.TOP_CENTER)
    canvas.draw_png(_ERROR_IMAGES[error], Coordinate(0, 120), Datum.TOP_CENTER)
    display.present(canvas)