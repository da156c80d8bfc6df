"""HID keyboard reports for a Bluetooth LE keyboard."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

KEYBOARD_REPORT_ID = 0x01
MEDIA_KEYS_REPORT_ID = 0x02

_SHIFT = 0x80
_LEFT_SHIFT_MODIFIER = 0x02
_MODIFIER_BASE = 128
_NON_PRINTING_BASE = 136
_KEY_SLOTS = 6
_NAME_LIMIT = 15

KEY_LEFT_CTRL = 0x80
KEY_LEFT_SHIFT = 0x81
KEY_LEFT_ALT = 0x82
KEY_LEFT_GUI = 0x83
KEY_RIGHT_CTRL = 0x84
KEY_RIGHT_SHIFT = 0x85
KEY_RIGHT_ALT = 0x86
KEY_RIGHT_GUI = 0x87

KEY_UP_ARROW = 0xDA
KEY_DOWN_ARROW = 0xD9
KEY_LEFT_ARROW = 0xD8
KEY_RIGHT_ARROW = 0xD7
KEY_BACKSPACE = 0xB2
KEY_TAB = 0xB3
KEY_RETURN = 0xB0
KEY_ESC = 0xB1
KEY_INSERT = 0xD1
KEY_PRTSC = 0xCE
KEY_DELETE = 0xD4
KEY_PAGE_UP = 0xD3
KEY_PAGE_DOWN = 0xD6
KEY_HOME = 0xD2
KEY_END = 0xD5
KEY_CAPS_LOCK = 0xC1
KEY_F1 = 0xC2
KEY_F2 = 0xC3
KEY_F3 = 0xC4
KEY_F4 = 0xC5
KEY_F5 = 0xC6
KEY_F6 = 0xC7
KEY_F7 = 0xC8
KEY_F8 = 0xC9
KEY_F9 = 0xCA
KEY_F10 = 0xCB
KEY_F11 = 0xCC
KEY_F12 = 0xCD
KEY_F13 = 0xF0
KEY_F14 = 0xF1
KEY_F15 = 0xF2
KEY_F16 = 0xF3
KEY_F17 = 0xF4
KEY_F18 = 0xF5
KEY_F19 = 0xF6
KEY_F20 = 0xF7
KEY_F21 = 0xF8
KEY_F22 = 0xF9
KEY_F23 = 0xFA
KEY_F24 = 0xFB

KEY_NUM_0 = 0xEA
KEY_NUM_1 = 0xE1
KEY_NUM_2 = 0xE2
KEY_NUM_3 = 0xE3
KEY_NUM_4 = 0xE4
KEY_NUM_5 = 0xE5
KEY_NUM_6 = 0xE6
KEY_NUM_7 = 0xE7
KEY_NUM_8 = 0xE8
KEY_NUM_9 = 0xE9
KEY_NUM_SLASH = 0xDC
KEY_NUM_ASTERISK = 0xDD
KEY_NUM_MINUS = 0xDE
KEY_NUM_PLUS = 0xDF
KEY_NUM_ENTER = 0xE0
KEY_NUM_PERIOD = 0xEB

KEY_MEDIA_NEXT_TRACK = (1, 0)
KEY_MEDIA_PREVIOUS_TRACK = (2, 0)
KEY_MEDIA_STOP = (4, 0)
KEY_MEDIA_PLAY_PAUSE = (8, 0)
KEY_MEDIA_MUTE = (16, 0)
KEY_MEDIA_VOLUME_UP = (32, 0)
KEY_MEDIA_VOLUME_DOWN = (64, 0)
KEY_MEDIA_WWW_HOME = (128, 0)
KEY_MEDIA_LOCAL_MACHINE_BROWSER = (0, 1)
KEY_MEDIA_CALCULATOR = (0, 2)
KEY_MEDIA_WWW_BOOKMARKS = (0, 4)
KEY_MEDIA_WWW_SEARCH = (0, 8)
KEY_MEDIA_WWW_STOP = (0, 16)
KEY_MEDIA_WWW_BACK = (0, 32)
KEY_MEDIA_CONSUMER_CONTROL_CONFIGURATION = (0, 64)
KEY_MEDIA_EMAIL_READER = (0, 128)


def _build_ascii_map() -> tuple[int, ...]:
    table = [0] * 128
    table[ord("\b")] = 0x2A
    table[ord("\t")] = 0x2B
    table[ord("\n")] = 0x28
    punctuation = {
        " ": 0x2C, "!": 0x1E | _SHIFT, '"': 0x34 | _SHIFT, "#": 0x20 | _SHIFT,
        "$": 0x21 | _SHIFT, "%": 0x22 | _SHIFT, "&": 0x24 | _SHIFT, "'": 0x34,
        "(": 0x26 | _SHIFT, ")": 0x27 | _SHIFT, "*": 0x25 | _SHIFT, "+": 0x2E | _SHIFT,
        ",": 0x36, "-": 0x2D, ".": 0x37, "/": 0x38,
        ":": 0x33 | _SHIFT, ";": 0x33, "<": 0x36 | _SHIFT, "=": 0x2E,
        ">": 0x37 | _SHIFT, "?": 0x38 | _SHIFT, "@": 0x1F | _SHIFT,
        "[": 0x2F, "\\": 0x31, "]": 0x30, "^": 0x23 | _SHIFT, "_": 0x2D | _SHIFT,
        "`": 0x35, "{": 0x2F | _SHIFT, "|": 0x31 | _SHIFT, "}": 0x30 | _SHIFT,
        "~": 0x35 | _SHIFT,
    }
    for char, code in punctuation.items():
        table[ord(char)] = code
    table[ord("0")] = 0x27
    for offset, char in enumerate("123456789"):
        table[ord(char)] = 0x1E + offset
    for offset, char in enumerate("abcdefghijklmnopqrstuvwxyz"):
        table[ord(char)] = 0x04 + offset
        table[ord(char.upper())] = (0x04 + offset) | _SHIFT
    return tuple(table)


_ASCII_MAP = _build_ascii_map()


def ascii_keycode(char: str | int) -> int:
    """Return the HID usage for an ASCII character, with bit 7 set if it needs shift.

    Characters with no key give 0.
    """
    code = ord(char) if isinstance(char, str) else char
    if isinstance(char, str) and len(char) != 1:
        raise ValueError("expected a single character")
    if not 0 <= code < 128:
        raise ValueError(f"not an ASCII character: {char!r}")
    return _ASCII_MAP[code]


@dataclass
class KeyReport:
    """Low level keyboard report: modifier bits and up to six pressed keys."""

    modifiers: int = 0
    reserved: int = 0
    keys: list[int] = field(default_factory=lambda: [0] * _KEY_SLOTS)

    def to_bytes(self) -> bytes:
        return bytes([self.modifiers, self.reserved, *self.keys])


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"key code out of range: {value}")
    return value


def _check_media(key: Sequence[int]) -> tuple[int, int]:
    if len(key) != 2:
        raise ValueError("media key must be two bytes")
    return _check_byte(key[0]), _check_byte(key[1])


class BleKeyboard:
    """Keeps keyboard and media key state and sends reports while connected.

    ``send`` receives the report id and the report bytes.
    """

    def __init__(
        self,
        send: Callable[[int, bytes], None],
        device_name: str = "ESP32 Keyboard",
        manufacturer: str = "Espressif",
        battery_level: int = 100,
    ) -> None:
        self._send = send
        self.device_name = device_name[:_NAME_LIMIT]
        self.manufacturer = manufacturer[:_NAME_LIMIT]
        self.battery_level = battery_level
        self.connected = False
        self.write_error = False
        self.report = KeyReport()
        self._media = [0, 0]

    @property
    def media_report(self) -> bytes:
        return bytes(self._media)

    def on_connect(self) -> None:
        self.connected = True

    def on_disconnect(self) -> None:
        self.connected = False

    def _send_keys(self) -> None:
        if self.connected:
            self._send(KEYBOARD_REPORT_ID, self.report.to_bytes())

    def _send_media(self) -> None:
        if self.connected:
            self._send(MEDIA_KEYS_REPORT_ID, self.media_report)

    def press(self, key: int) -> bool:
        """Add a key to the report and send it; return False if it could not be added."""
        k = _check_byte(key)
        if k >= _NON_PRINTING_BASE:
            k -= _NON_PRINTING_BASE
        elif k >= _MODIFIER_BASE:
            self.report.modifiers |= 1 << (k - _MODIFIER_BASE)
            k = 0
        else:
            k = _ASCII_MAP[k]
            if not k:
                self.write_error = True
                return False
            if k & _SHIFT:
                self.report.modifiers |= _LEFT_SHIFT_MODIFIER
                k &= 0x7F

        keys = self.report.keys
        if k not in keys:
            try:
                keys[keys.index(0)] = k
            except ValueError:
                self.write_error = True
                return False
        self._send_keys()
        return True

    def release(self, key: int) -> bool:
        """Take a key out of the report and send it; return False for unmapped keys."""
        k = _check_byte(key)
        if k >= _NON_PRINTING_BASE:
            k -= _NON_PRINTING_BASE
        elif k >= _MODIFIER_BASE:
            self.report.modifiers &= ~(1 << (k - _MODIFIER_BASE)) & 0xFF
            k = 0
        else:
            k = _ASCII_MAP[k]
            if not k:
                return False
            if k & _SHIFT:
                self.report.modifiers &= ~_LEFT_SHIFT_MODIFIER & 0xFF
                k &= 0x7F

        if k:
            self.report.keys = [0 if slot == k else slot for slot in self.report.keys]
        self._send_keys()
        return True

    def press_media(self, key: Sequence[int]) -> bool:
        high, low = _check_media(key)
        self._media = [self._media[0] | high, self._media[1] | low]
        self._send_media()
        return True

    def release_media(self, key: Sequence[int]) -> bool:
        high, low = _check_media(key)
        self._media = [self._media[0] & ~high & 0xFF, self._media[1] & ~low & 0xFF]
        self._send_media()
        return True

    def release_all(self) -> None:
        self.report = KeyReport()
        self._media = [0, 0]
        self._send_keys()
        self._send_media()

    def write(self, key: int) -> bool:
        """Press and release a key; the result is that of the press."""
        pressed = self.press(key)
        self.release(key)
        return pressed

    def write_media(self, key: Sequence[int]) -> bool:
        pressed = self.press_media(key)
        self.release_media(key)
        return pressed

    def write_bytes(self, data: bytes | str) -> int:
        """Type each byte, skipping carriage returns; stop at the first failure."""
        if isinstance(data, str):
            data = data.encode("ascii")
        written = 0
        for byte in data:
            if byte == ord("\r"):
                continue
            if not self.write(byte):
                break
            written += 1
        return written

    def set_battery_level(self, level: int) -> None:
        self.battery_level = level

    def set_name(self, name: str) -> None:
        self.device_name = name