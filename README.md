# tagwatch

tagwatch keeps track of the things you carry. An RFID reader reports the
tags it can see; each registered tag belongs to a category (by default
wallet, business cards, passport, charger and medicine). While scanning is
on, a missing registered tag puts the main screen into its alert state and
turns the light red if the light setting is on, and every change in the
set of present categories is posted to an HTTP endpoint as a JSON array.

There are no third-party dependencies.

## Modules

- `tagwatch.reader`: `TagReader` decodes a SLIP-framed byte stream into
  12-byte `TagId` values (`high`, `low`). `feed(data)` takes raw bytes;
  each SLIP END publishes the tags collected since the previous one, and
  `read()` returns that list. Given a port (any object with
  `read(size) -> bytes`), `update()` reads from it once and `start()` /
  `stop()` poll it on a background thread.
- `tagwatch.tags`: the binary tag registry. `encode_tags` packs each tag as
  a little-endian record of high id, low id and category, in key order;
  `write_tags(root, tags)` stores it as `tags.bin` below `root` and
  `read_tags(root)` loads it (an empty dict when the file is absent, a
  `ValueError` for a truncated file).
- `tagwatch.settings`: `SettingState` (`light`, `scan`, `alert_time`,
  `user_clock`) and its JSON storage. `read_setting(root, base_path)` reads
  `user.json`, falling back to `default.json`; missing or unreadable data
  reads as all off. `save_setting` writes `user.json`, creating the
  directory.
- `tagwatch.http_sender`: `encode_payload` builds the compact JSON array
  (values must be integers 0..255, else `ValueError`); `HttpSender(host,
  port).send(data)` POSTs it to `/` and returns `True` on 200 OK, `False`
  on any other status or a connection error.
- `tagwatch.encoder`: `Encoder` wraps a callable returning a raw count
  (four counts per detent); `update()` samples it and `difference()` gives
  the detents moved.
- `tagwatch.index`: `update_index`, the wrap-around selection index.
- `tagwatch.draw`: `Canvas` and `Display` record drawing as `DrawCommand`
  values; `Display.present` appends a frame to `Display.frames`.
- `tagwatch.screens`: `draw_main_screen`, `draw_setting_screen`,
  `draw_add_selector_screen`, `draw_add_message_screen` and
  `draw_add_error_screen`.
- `tagwatch.timer_screens`: `Time` and the clock-setting and alarm-time
  screens (`draw_set_time_screen`, `draw_change_time_screen`).
- `tagwatch.main_screen`, `tagwatch.setting_screen`,
  `tagwatch.add_screen`: `MainScreen`, `SettingScreen` and `AddScreen`,
  each advanced one tick with `step` and returning the next `ScreenState`.
- `tagwatch.app`: `App` wires these together; `setup()` loads settings and
  tags, starts the reader and sends an empty list, and each `loop()` call
  runs one tick of the active screen, saving settings when leaving the
  settings screen.

## Selection index

```python
from tagwatch.index import update_index

update_index(0, 2, -1)  # 2
update_index(2, 2, 1)   # 0
update_index(1, 2, 0)   # 1
```

## Settings

```python
from pathlib import Path
from tagwatch.settings import read_setting, save_setting

root = Path("data")
state = read_setting(root, "/settings")
state.light = not state.light
save_setting(root, "/settings", state)
```

## Tag registry

```python
from pathlib import Path
from tagwatch.reader import TagId
from tagwatch.tags import read_tags, write_tags

root = Path("data")
root.mkdir(exist_ok=True)
tags = read_tags(root)
tags[TagId(0x1122334455667788, 0x99AABBCC)] = 2
write_tags(root, tags)
```

## Decoding reader frames

```python
from tagwatch.reader import TagReader

reader = TagReader()
reader.feed(bytes(range(12)) + b"\xc0")
reader.read()  # [TagId(high=..., low=...)]
```

## What the package does not do

- There is no command to run; `App` is driven by calling `setup()` once
  and `loop()` repeatedly from your own code.
- It drives no real screen: `Display` only records the draw commands of
  each frame, and the images they name are not loaded or rendered.
- The button, the light and the encoder's raw count are supplied by the
  caller (a callable returning whether the button was pressed, an object
  with `fill`, `clear` and `show`, and a callable returning the count).
- It does not join a network; `HttpSender` assumes the host is reachable.
- The clock-setting and alarm-time screens can be drawn but no screen
  state machine leads to them.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.