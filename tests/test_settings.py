import json

import pytest

from tagwatch.settings import DEFAULT_FILE, USER_FILE, SettingState, read_setting, save_setting

BASE = "/settings"


def write_json(tmp_path, name, doc):
    directory = tmp_path / "settings"
    directory.mkdir(exist_ok=True)
    (directory / name).write_text(json.dumps(doc), encoding="utf-8")


def test_missing_files_read_as_all_off(tmp_path):
    assert read_setting(tmp_path, BASE) == SettingState(False, False, False, False)


def test_default_file_used_without_user_file(tmp_path):
    write_json(tmp_path, DEFAULT_FILE, {"light": True, "scan": True, "alertTime": False, "userClock": True})
    assert read_setting(tmp_path, BASE) == SettingState(True, True, False, True)


def test_user_file_preferred(tmp_path):
    write_json(tmp_path, DEFAULT_FILE, {"light": True, "scan": True, "alertTime": True, "userClock": True})
    write_json(tmp_path, USER_FILE, {"light": False, "scan": True, "alertTime": False, "userClock": False})
    assert read_setting(tmp_path, BASE) == SettingState(False, True, False, False)


def test_missing_keys_read_as_off(tmp_path):
    write_json(tmp_path, DEFAULT_FILE, {"scan": True})
    assert read_setting(tmp_path, BASE) == SettingState(scan=True)


def test_invalid_json_reads_as_all_off(tmp_path):
    directory = tmp_path / "settings"
    directory.mkdir()
    (directory / USER_FILE).write_text("{not json", encoding="utf-8")
    assert read_setting(tmp_path, BASE) == SettingState()


@pytest.mark.parametrize(
    "state",
    [
        SettingState(True, False, True, False),
        SettingState(False, True, False, True),
        SettingState(True, True, True, True),
        SettingState(),
    ],
)
def test_round_trip(tmp_path, state):
    save_setting(tmp_path, BASE, state)
    assert read_setting(tmp_path, BASE) == state


def test_saved_document_keys(tmp_path):
    save_setting(tmp_path, BASE, SettingState(light=True, user_clock=True))
    doc = json.loads((tmp_path / "settings" / USER_FILE).read_text(encoding="utf-8"))
    assert doc == {"light": True, "scan": False, "alertTime": False, "userClock": True}


def test_save_overrides_default(tmp_path):
    write_json(tmp_path, DEFAULT_FILE, {"light": True, "scan": True, "alertTime": True, "userClock": True})
    save_setting(tmp_path, BASE, SettingState())
    assert read_setting(tmp_path, BASE) == SettingState()