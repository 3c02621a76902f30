import pytest

from tagwatch.draw import BACKGROUND_COLOR, Datum, Display, DrawKind
from tagwatch.screens import (
    AddError,
    AddMessage,
    MainSelection,
    MainState,
    SettingSelection,
    draw_add_error_screen,
    draw_add_message_screen,
    draw_add_selector_screen,
    draw_main_screen,
    draw_setting_screen,
)
from tagwatch.settings import SettingState

CATEGORIES = ["サイフ", "名刺", "パスポート", "充電器", "常備薬"]


def _paths(frame):
    return [c.target for c in frame if c.kind is DrawKind.PNG]


def _texts(frame):
    return [c for c in frame if c.kind is DrawKind.TEXT]


def _png(frame, path):
    return next(c for c in frame if c.kind is DrawKind.PNG and c.target == path)


@pytest.mark.parametrize(
    "state,image",
    [
        (MainState.NORMAL, "/status-nomal.png"),
        (MainState.ALERT, "/status-alert.png"),
        (MainState.NOT_SCAN, "/status-scan-off.png"),
    ],
)
def test_main_screen_status_image(state, image):
    display = Display()
    draw_main_screen(display, state, MainSelection.ADD)
    frame = display.frames[-1]
    assert frame[0].color == BACKGROUND_COLOR
    assert image in _paths(frame)


def test_main_screen_bell_selected():
    display = Display()
    draw_main_screen(display, MainState.NORMAL, MainSelection.BELL)
    paths = _paths(display.frames[-1])
    assert "/bell-sel.png" in paths
    assert "/active-effect-up.png" in paths
    assert "/bell.png" not in paths


@pytest.mark.parametrize(
    "selection,effect",
    [
        (MainSelection.ADD, "/active-effect-L-white.png"),
        (MainSelection.SETTING, "/active-effect-R-white.png"),
    ],
)
def test_main_screen_other_selection(selection, effect):
    display = Display()
    draw_main_screen(display, MainState.ALERT, selection)
    paths = _paths(display.frames[-1])
    assert effect in paths
    assert paths[-1] == "/bell.png"
    assert "/bell-sel.png" not in paths


def test_setting_screen_icons_follow_state():
    display = Display()
    draw_setting_screen(display, SettingState(True, False, True, False), SettingSelection.BACK)
    paths = _paths(display.frames[-1])
    assert paths.count("/set-icon-active.png") == 2
    assert paths.count("/set-icon-inactive.png") == 2
    assert "/active-effect-L-white.png" in paths


@pytest.mark.parametrize(
    "selection,selected,unselected",
    [
        (SettingSelection.LIGHT, "/set-led-sel.png", "/set-scan.png"),
        (SettingSelection.SCAN, "/set-scan-sel.png", "/set-led.png"),
        (SettingSelection.ALERT_TIME, "/set-alert-time-sel.png", "/set-user-clock.png"),
        (SettingSelection.USER_CLOCK, "/set-user-clock-sel.png", "/set-alert-time.png"),
    ],
)
def test_setting_screen_selection(selection, selected, unselected):
    display = Display()
    draw_setting_screen(display, SettingState(), selection)
    paths = _paths(display.frames[-1])
    assert selected in paths
    assert unselected in paths
    assert "/active-effect-L-white.png" not in paths


def test_add_selector_shows_neighbours():
    display = Display()
    draw_add_selector_screen(display, CATEGORIES, 0)
    texts = _texts(display.frames[-1])
    assert [t.target for t in texts] == ["常備薬", "名刺", "サイフ"]
    assert texts[2].color == 0xFFFFFF
    assert texts[0].color == 0xC7C7C7


def test_add_selector_wraps_at_end():
    display = Display()
    draw_add_selector_screen(display, CATEGORIES, len(CATEGORIES) - 1)
    texts = _texts(display.frames[-1])
    assert texts[1].target == CATEGORIES[0]
    assert texts[0].target == CATEGORIES[-2]


def test_add_selector_markers_symmetric():
    display = Display()
    draw_add_selector_screen(display, CATEGORIES, 2)
    frame = display.frames[-1]
    right = _png(frame, "/add-s-R.png").coordinate
    left = _png(frame, "/add-s-L.png").coordinate
    assert right.x == -left.x
    assert right.y == left.y
    assert right.x > 16


def test_add_selector_marker_grows_with_text():
    short, long = Display(), Display()
    draw_add_selector_screen(short, ["名刺", "x"], 0)
    draw_add_selector_screen(long, ["パスポート", "x"], 0)
    assert _png(long.frames[-1], "/add-s-R.png").coordinate.x > _png(short.frames[-1], "/add-s-R.png").coordinate.x


def test_add_selector_errors():
    with pytest.raises(ValueError):
        draw_add_selector_screen(Display(), [], 0)
    with pytest.raises(IndexError):
        draw_add_selector_screen(Display(), CATEGORIES, 5)


@pytest.mark.parametrize(
    "message,image",
    [(AddMessage.SCANNING, "/add-scan.png"), (AddMessage.COMPLETE, "/add-complete.png")],
)
def test_add_message_screen(message, image):
    display = Display()
    draw_add_message_screen(display, message)
    assert _paths(display.frames[-1]) == ["/status-set.png", "/add-state.png", image]


@pytest.mark.parametrize(
    "error,image",
    [(AddError.NOT_FOUND, "/add-E-not-found.png"), (AddError.DOUBLE_DETECTED, "/add-E-double.png")],
)
def test_add_error_screen(error, image):
    display = Display()
    draw_add_error_screen(display, error)
    frame = display.frames[-1]
    assert _paths(frame)[-2:] == ["/add-error.png", image]
    assert _png(frame, image).datum is Datum.TOP_CENTER