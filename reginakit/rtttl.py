"""RTTTL ringtone parsing and a background player."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

log = logging.getLogger(__name__)

_NOTES = (
    0,
    262, 277, 294, 311, 330, 349, 370, 392, 415, 440, 466, 494,
    523, 554, 587, 622, 659, 698, 740, 784, 831, 880, 932, 988,
    1047, 1109, 1175, 1245, 1319, 1397, 1480, 1568, 1661, 1760, 1865, 1976,
    2093, 2217, 2349, 2489, 2637, 2794, 2960, 3136, 3322, 3520, 3729, 3951,
)

_NOTE_INDEX = {"c": 1, "d": 3, "e": 5, "f": 6, "g": 8, "a": 10, "b": 12}
_OCTAVE_OFFSET = 0


@dataclass(frozen=True)
class Note:
    """One tone or rest; a frequency of 0 is a rest. Duration is in ms."""

    frequency: int
    duration: int

    @property
    def is_rest(self) -> bool:
        return self.frequency == 0


class _Cursor:
    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip(self, count: int = 1) -> None:
        self.pos += count

    def number(self) -> int:
        start = self.pos
        while self.peek().isdigit():
            self.pos += 1
        digits = self.text[start:self.pos]
        return int(digits) if digits else 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)


def parse_rtttl(text: str) -> list[Note]:
    """Parse an RTTTL string ``name:d=N,o=N,b=NNN:notes`` into notes."""
    colon = text.find(":")
    if colon < 0:
        raise ValueError("RTTTL string has no ':' after the name")
    cur = _Cursor(text, colon + 1)

    default_dur = 4
    default_oct = 6
    bpm = 63

    if cur.peek() == "d":
        cur.skip(2)
        num = cur.number()
        if num > 0:
            default_dur = num
        cur.skip()

    if cur.peek() == "o":
        cur.skip(2)
        digit = cur.peek()
        num = int(digit) if digit.isdigit() else -1
        cur.skip()
        if 3 <= num <= 7:
            default_oct = num
        cur.skip()

    if cur.peek() == "b":
        cur.skip(2)
        bpm = cur.number()
        cur.skip()

    if bpm <= 0:
        raise ValueError("RTTTL tempo must be positive")

    wholenote = (60 * 1000 // bpm) * 4

    notes: list[Note] = []
    while not cur.at_end():
        num = cur.number()
        duration = wholenote // (num if num else default_dur)

        note = _NOTE_INDEX.get(cur.peek(), 0)
        cur.skip()

        if cur.peek() == "#":
            note += 1
            cur.skip()

        if cur.peek() == ".":
            duration += duration // 2
            cur.skip()

        if cur.peek().isdigit():
            scale = int(cur.peek())
            cur.skip()
        else:
            scale = default_oct
        scale += _OCTAVE_OFFSET

        if cur.peek() == ",":
            cur.skip()

        if note:
            index = (scale - 4) * 12 + note
            if not 0 < index < len(_NOTES):
                raise ValueError(f"note out of range at octave {scale}")
            notes.append(Note(_NOTES[index], duration))
        else:
            notes.append(Note(0, duration))
    return notes


class RtttlPlayer:
    """Plays RTTTL melodies on a background thread through ``beep`` and ``delay``."""

    def __init__(
        self,
        beep: Callable[[int, int], None],
        delay: Callable[[int], None],
    ) -> None:
        self._beep = beep
        self._delay = delay
        self._lock = threading.Lock()
        self._playing = False
        self._kill = False
        self._thread: threading.Thread | None = None

    def play(self, text: str) -> bool:
        """Start playing ``text``; return False if a melody is already playing."""
        with self._lock:
            if self._playing:
                log.warning("player is playing")
                return False
            notes = parse_rtttl(text)
            self._playing = True
            self._kill = False
            self._thread = threading.Thread(target=self._run, args=(notes,), daemon=True)
        log.info("start rtttl player")
        self._thread.start()
        return True

    def _take_kill(self) -> bool:
        with self._lock:
            killed = self._kill
            self._kill = False
            return killed

    def _run(self, notes: list[Note]) -> None:
        try:
            for note in notes:
                if self._take_kill():
                    break
                if note.frequency:
                    self._beep(note.frequency, note.duration)
                self._delay(note.duration)
        finally:
            log.info("music play done")
            with self._lock:
                self._playing = False

    def stop(self) -> None:
        """Ask the current melody to stop before its next note."""
        with self._lock:
            if self._playing:
                self._kill = True

    def is_playing(self) -> bool:
        with self._lock:
            return self._playing

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for the current melody to end; return True if it has."""
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
        return not self.is_playing()