"""Static asset descriptions: localized text, theme colours and image slots."""

from __future__ import annotations

import enum
from array import array
from dataclasses import dataclass, field

ZPIX_12_FONT_SIZE = 3227624
"""Size in bytes of the bundled 12 px zpix font blob."""

_WARMA_HALFTONE_WIDTH = 128
_WARMA_HALFTONE_HEIGHT = 128


class Language(enum.Enum):
    """Languages the text pool is available in."""

    EN = "en"
    CN = "cn"
    JP = "jp"


@dataclass(frozen=True)
class LocalTextMap:
    """The set of localized strings the app shows."""

    app_name_settings: str | None = None


_TEXT_POOL: dict[Language, LocalTextMap] = {
    Language.EN: LocalTextMap(app_name_settings="Settings"),
    Language.CN: LocalTextMap(app_name_settings="设置"),
    Language.JP: LocalTextMap(app_name_settings="設定"),
}


def text_map(language: Language | str) -> LocalTextMap:
    """Return the localized strings for ``language``."""
    return _TEXT_POOL[Language(language)]


@dataclass(frozen=True)
class ColorPool:
    """Theme colours as 24-bit RGB integers."""

    bg_pop_fatal_error: int = 0x0078D7
    bg_pop_warning: int = 0xFE8B00
    bg_pop_success: int = 0x009653


def _blank_halftone() -> array:
    return array("H", bytes(2 * _WARMA_HALFTONE_WIDTH * _WARMA_HALFTONE_HEIGHT))


@dataclass
class ImagePool:
    """RGB565 image data used by the start-up animation."""

    warma_halftone: array = field(default_factory=_blank_halftone)
    warma_halftone_width: int = _WARMA_HALFTONE_WIDTH
    warma_halftone_height: int = _WARMA_HALFTONE_HEIGHT

    def __post_init__(self) -> None:
        expected = self.warma_halftone_width * self.warma_halftone_height
        if len(self.warma_halftone) != expected:
            raise ValueError(
                f"image holds {len(self.warma_halftone)} pixels, expected {expected}"
            )
        if any(not 0 <= pixel <= 0xFFFF for pixel in self.warma_halftone):
            raise ValueError("pixel values must fit in 16 bits")