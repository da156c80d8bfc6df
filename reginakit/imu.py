"""Raw accelerometer, gyroscope and temperature reads from a BMI270."""

from __future__ import annotations

import struct
from typing import Protocol

BMI270_ADDRESS = 0x68

_ACCEL_SCALE = 8.0 / 32768.0
_GYRO_SCALE = 2000.0 / 32768.0


class BlockBus(Protocol):
    """Multi-byte register reads from one I2C device."""

    def read_register(self, reg: int, length: int) -> bytes: ...


class BMI270Reader:
    """Reads scaled sensor values: accel in g, gyro in deg/s, temperature in C."""

    ACC_X_LSB_ADDR = 0x0C
    GYR_X_LSB_ADDR = 0x12
    TEMPERATURE_0_ADDR = 0x22

    def __init__(self, bus: BlockBus) -> None:
        self.bus = bus

    def _read(self, reg: int, length: int) -> bytes:
        data = bytes(self.bus.read_register(reg, length))
        if len(data) != length:
            raise OSError(
                f"short read from register 0x{reg:02x}: {len(data)} of {length} bytes"
            )
        return data

    def _vector(self, reg: int, scale: float) -> tuple[float, float, float]:
        x, y, z = struct.unpack("<3h", self._read(reg, 6))
        return x * scale, y * scale, z * scale

    def accel(self) -> tuple[float, float, float]:
        return self._vector(self.ACC_X_LSB_ADDR, _ACCEL_SCALE)

    def gyro(self) -> tuple[float, float, float]:
        return self._vector(self.GYR_X_LSB_ADDR, _GYRO_SCALE)

    def temperature(self) -> float:
        (raw,) = struct.unpack("<h", self._read(self.TEMPERATURE_0_ADDR, 2))
        return 23.0 + raw / 512.0