# reginakit

Hardware-independent logic for a small handheld device with two rotary
dials, a buzzer, a power-management chip, an IMU and a BLE keyboard
link. Every piece that would touch hardware takes a callable or a bus
object instead, so it runs and tests anywhere.

## Install

    pip install .
    pip install ".[test]"   # with pytest

## Modules

- `reginakit.assets`: `Language` (`EN`, `CN`, `JP`), `LocalTextMap`
  and `text_map(language)` for localized strings; `ColorPool` with the
  theme's pop-up colours; `ImagePool` holding the 128x128 RGB565
  start-up image, checked for size and 16-bit pixel values.
- `reginakit.rtttl`: `parse_rtttl(text)` turns an RTTTL string into a
  list of `Note` (frequency in Hz, duration in ms; frequency 0 is a
  rest). It raises `ValueError` on a missing `:`, a zero tempo or a note
  outside the table. `RtttlPlayer(beep, delay)` plays a tune on a
  background thread and has `play`, `stop`, `is_playing` and `wait`;
  `play` returns `False` while a tune is already playing.
- `reginakit.dial`: `TwoDials(read_sample)` takes one byte per
  `update()` (dial A in the low nibble, dial B in the high one), picks
  the majority of every three samples and counts steps. `value`,
  `count`, `reset_count` and `set_pin_swapped` take a `DialId`. The
  helpers `swap_pin_bits`, `majority` and `step_increment` are public.
- `reginakit.pmu`: `AXP202(bus)` over an object with `read_register8`
  and `write_register8`: `begin`, `battery_percentage`, `is_charging`,
  `was_power_key_clicked`, `clear_irq` and `power_off`.
- `reginakit.imu`: `BMI270Reader(bus)` over an object with
  `read_register(reg, length)`: `accel()` in g, `gyro()` in deg/s and
  `temperature()` in degrees C. A short read raises `OSError`.
- `reginakit.desktop`: `DragEncoder(axis)` simulates a dial from
  pointer drags along `"x"` or `"y"` (20 pixels per step), and
  `dial_value(count)` maps a count to its low nibble.
- `reginakit.keyboard`: `BleKeyboard(send, ...)` keeps a `KeyReport`
  and media key state and calls `send(report_id, data)` while
  connected. It has `press`, `release`, `write`, `write_bytes`, the
  `*_media` variants, `release_all`, `on_connect`, `on_disconnect`,
  `set_battery_level` and `set_name`. `ascii_keycode(char)` looks up the
  HID usage for a character; key constants such as `KEY_RETURN` and
  `KEY_MEDIA_PLAY_PAUSE` are module attributes.

## Example

```python
from reginakit.rtttl import parse_rtttl

for note in parse_rtttl("tune:d=4,o=5,b=120:c,e,g"):
    print(note.frequency, note.duration)
```

```python
from reginakit.keyboard import BleKeyboard

sent = []
kb = BleKeyboard(lambda report_id, data: sent.append((report_id, data)))
kb.on_connect()
kb.write_bytes("Hi\n")
```

## What it does not do

The package does not store or load a system configuration file, and it
has no GATT service of its own for configuration, messages, audio frames
or input and IMU notifications. It does not talk to a Bluetooth stack,
I2C bus, GPIO pins or a display: callers supply those through the
callables and bus objects above. There is no command-line program.

## Tests

    pytest