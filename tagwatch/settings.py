"""User settings and their JSON storage."""

import json
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, Union

DEFAULT_FILE = "default.json"
USER_FILE = "user.json"

_Root = Union[str, "PathLike[str]"]


@dataclass
class SettingState:
    """On/off state of each user setting."""

    light: bool = False
    scan: bool = False
    alert_time: bool = False
    user_clock: bool = False


def _settings_dir(root: _Root, base_path: str) -> Path:
    return Path(root) / str(base_path).lstrip("/")


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return False


def read_setting(root: _Root, base_path: str) -> SettingState:
    """Load user settings, falling back to the defaults file; unreadable data reads as all off."""
    directory = _settings_dir(root, base_path)
    path = directory / USER_FILE
    if not path.exists():
        path = directory / DEFAULT_FILE
    try:
        doc = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        doc = {}
    if not isinstance(doc, dict):
        doc = {}
    return SettingState(
        light=_flag(doc.get("light")),
        scan=_flag(doc.get("scan")),
        alert_time=_flag(doc.get("alertTime")),
        user_clock=_flag(doc.get("userClock")),
    )


def save_setting(root: _Root, base_path: str, state: SettingState) -> None:
    """Write ``state`` as the user settings file."""
    directory = _settings_dir(root, base_path)
    directory.mkdir(parents=True, exist_ok=True)
    doc = {
        "light": state.light,
        "scan": state.scan,
        "alertTime": state.alert_time,
        "userClock": state.user_clock,
    }
    (directory / USER_FILE).write_text(json.dumps(doc, separators=(",", ":")), encoding="utf-8")