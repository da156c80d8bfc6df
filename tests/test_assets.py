from array import array

import pytest

from reginakit.assets import ColorPool, ImagePool, Language, LocalTextMap, text_map


@pytest.mark.parametrize(
    "language, expected",
    [(Language.EN, "Settings"), (Language.CN, "设置"), (Language.JP, "設定")],
)
def test_text_map_per_language(language, expected):
    assert text_map(language).app_name_settings == expected


def test_text_map_accepts_language_code():
    assert text_map("jp") == text_map(Language.JP)


def test_text_map_unknown_language():
    with pytest.raises(ValueError):
        text_map("fr")


def test_local_text_map_default_is_empty():
    assert LocalTextMap().app_name_settings is None


def test_color_pool_defaults():
    colors = ColorPool()
    assert colors.bg_pop_fatal_error == 0x0078D7
    assert colors.bg_pop_warning == 0xFE8B00
    assert colors.bg_pop_success == 0x009653


def test_image_pool_default_size_matches_dimensions():
    pool = ImagePool()
    assert pool.warma_halftone_width == 128
    assert pool.warma_halftone_height == 128
    assert len(pool.warma_halftone) == pool.warma_halftone_width * pool.warma_halftone_height
    assert set(pool.warma_halftone) == {0}


def test_image_pool_custom_dimensions():
    pool = ImagePool(array("H", [1, 2, 3, 4, 5, 6]), 3, 2)
    assert list(pool.warma_halftone) == [1, 2, 3, 4, 5, 6]


def test_image_pool_rejects_wrong_length():
    with pytest.raises(ValueError):
        ImagePool(array("H", [0] * 10), 4, 4)


def test_image_pool_rejects_wide_pixels():
    with pytest.raises(ValueError):
        ImagePool([0x10000], 1, 1)