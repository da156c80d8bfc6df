"""Minimal driver for the AXP202 power management unit."""

from __future__ import annotations

from typing import Protocol

AXP202_ADDRESS = 0x34
_CHIP_ID = 0x41

_REG_ID = 0x03
_REG_POWER_STATUS = 0x01
_REG_SHUTDOWN = 0x32
_REG_IRQ_STATUS_FIRST = 0x48
_REG_IRQ_STATUS_THIRD = 0x4A
_IRQ_STATUS_COUNT = 5
_REG_BATTERY_PERCENT = 0xB9


class RegisterBus(Protocol):
    """8-bit register access to one I2C device."""

    def read_register8(self, reg: int) -> int: ...

    def write_register8(self, reg: int, value: int) -> None: ...


class AXP202:
    """Battery level, charging state, power key and shutdown of an AXP202."""

    def __init__(self, bus: RegisterBus) -> None:
        self.bus = bus

    def begin(self) -> bool:
        """Return True if the chip answers with the AXP202 id."""
        return self.bus.read_register8(_REG_ID) == _CHIP_ID

    def power_off(self) -> None:
        value = self.bus.read_register8(_REG_SHUTDOWN)
        self.bus.write_register8(_REG_SHUTDOWN, (value | 0x80) & 0xFF)

    def battery_percentage(self) -> int:
        return self.bus.read_register8(_REG_BATTERY_PERCENT) & 0x7F

    def is_charging(self) -> bool:
        return bool(self.bus.read_register8(_REG_POWER_STATUS) & 0x40)

    def clear_irq(self) -> None:
        """Clear all five IRQ status registers."""
        for offset in range(_IRQ_STATUS_COUNT):
            self.bus.write_register8(_REG_IRQ_STATUS_FIRST + offset, 0xFF)

    def was_power_key_clicked(self) -> bool:
        """Return True on a short power key press, clearing the IRQ flags."""
        clicked = bool(self.bus.read_register8(_REG_IRQ_STATUS_THIRD) & 0x02)
        if clicked:
            self.clear_irq()
        return clicked