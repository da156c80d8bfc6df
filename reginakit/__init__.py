"""Hardware-independent logic for a small handheld device: assets, RTTTL, dials, PMU, IMU and a BLE keyboard."""

__version__ = "0.1.0"