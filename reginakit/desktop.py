"""Desktop simulation helpers: mouse drags standing in for rotary dials."""

from __future__ import annotations

_PIXELS_PER_STEP = 20


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def dial_value(count: int) -> int:
    """Map a dial step count to the 4-bit dial position."""
    return count & 0xF


class DragEncoder:
    """Simulates an encoder by dragging along one axis of the touch panel.

    Every 20 pixels dragged is one step; the reported count is negated.
    """

    def __init__(self, axis: str = "x") -> None:
        if axis not in ("x", "y"):
            raise ValueError(f"axis must be 'x' or 'y', not {axis!r}")
        self._index = 0 if axis == "x" else 1
        self.count = 0
        self._last_count = 0
        self._start = 0
        self._last = 0
        self._touching = False

    def update(self, touching: bool, point: tuple[int, int]) -> int:
        """Feed the current touch state and return the encoder count."""
        position = point[self._index]
        if touching:
            if not self._touching:
                # The first touch reports the count as stored, without negation.
                self._touching = True
                self._start = position
                return self.count
            if position != self._last:
                self.count = (
                    _trunc_div(position - self._start, _PIXELS_PER_STEP)
                    + self._last_count
                )
            self._last = position
        elif self._touching:
            self._touching = False
            self._last_count = self.count
        return -self.count

    def reset(self, value: int = 0) -> None:
        self.count = value