"""Two 4-bit rotary dials read through a parallel-to-serial shift register."""

from __future__ import annotations

import enum
import threading
from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass

_SAMPLES_PER_RESULT = 3


class DialId(enum.Enum):
    """The two dials on the device."""

    A = "a"
    B = "b"


def swap_pin_bits(value: int) -> int:
    """Swap bit 0 with bit 1 and bit 2 with bit 3 of a dial reading.

    Used for dials whose pins were soldered the other way round.
    """
    high = (value & 0b1010) >> 1
    return ((value & 0b0101) << 1) | high


def majority(samples: Iterable[int]) -> int:
    """Return the most frequent sample; ties go to the one seen first."""
    counts = Counter(samples)
    if not counts:
        raise ValueError("no samples to choose from")
    return counts.most_common(1)[0][0]


def step_increment(new_value: int, last_value: int) -> int:
    """Return the counting step (-1, 0 or 1) between two dial readings.

    A jump of 15 either way is a wrap between 0 and 15 and counts as one
    step in the opposite direction; any larger jump is clamped to one step.
    """
    increment = new_value - last_value
    if increment == 15:
        increment -= 16
    elif increment == -15:
        increment += 16
    return max(-1, min(1, increment))


def _wrap_int16(value: int) -> int:
    return (value + 0x8000) % 0x10000 - 0x8000


@dataclass
class _DialState:
    last_value: int = 0
    new_value: int = 0
    count: int = 0
    pin_swapped: bool = False

    def apply(self, raw: int) -> None:
        self.new_value = swap_pin_bits(raw) if self.pin_swapped else raw
        if self.new_value != self.last_value:
            step = step_increment(self.new_value, self.last_value)
            self.count = _wrap_int16(self.count + step)
            self.last_value = self.new_value


class TwoDials:
    """Tracks value and step count of two dials from raw 8-bit samples.

    ``read_sample`` returns one byte from the shift register: dial A in the
    low nibble, dial B in the high nibble. Every three samples the most
    common one is taken as the reading, which filters out glitches.
    """

    def __init__(self, read_sample: Callable[[], int]) -> None:
        self._read_sample = read_sample
        self._lock = threading.Lock()
        self._dials = {DialId.A: _DialState(), DialId.B: _DialState()}
        self._samples = [0] * _SAMPLES_PER_RESULT
        self._sample_index = 0
        self._sample_result = 0

    def update(self) -> None:
        """Take one sample; every third sample refreshes both dials."""
        raw = self._read_sample() & 0xFF
        with self._lock:
            self._samples[self._sample_index] = raw
            self._sample_index += 1
            if self._sample_index < _SAMPLES_PER_RESULT:
                return
            self._sample_index = 0
            self._sample_result = majority(self._samples)
            self._dials[DialId.A].apply(self._sample_result & 0x0F)
            self._dials[DialId.B].apply((self._sample_result & 0xF0) >> 4)

    def value(self, dial_id: DialId) -> int:
        """Current 4-bit position of a dial."""
        with self._lock:
            return self._dials[DialId(dial_id)].new_value

    def count(self, dial_id: DialId) -> int:
        """Accumulated signed step count of a dial (16-bit, wrapping)."""
        with self._lock:
            return self._dials[DialId(dial_id)].count

    def reset_count(self, dial_id: DialId) -> None:
        with self._lock:
            self._dials[DialId(dial_id)].count = 0

    def set_pin_swapped(self, dial_id: DialId, swapped: bool) -> None:
        with self._lock:
            self._dials[DialId(dial_id)].pin_swapped = bool(swapped)