[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reginakit"
version = "0.1.0"
description = "Device logic for a small handheld gadget: localized assets, RTTTL playback, dial decoding, PMU/IMU register helpers and a BLE HID keyboard."
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "rtttl", "ble", "hid", "keyboard", "encoder", "pmu", "imu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reginakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
