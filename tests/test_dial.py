import itertools

import pytest

from reginakit.dial import DialId, TwoDials, majority, step_increment, swap_pin_bits


def _dials(samples):
    it = iter(samples)
    return TwoDials(lambda: next(it))


def test_swap_pin_bits_pins_value():
    assert swap_pin_bits(0b0001) == 0b0010
    assert swap_pin_bits(0b0100) == 0b1000


@pytest.mark.parametrize("value", range(16))
def test_swap_pin_bits_is_involution(value):
    assert swap_pin_bits(swap_pin_bits(value)) == value
    assert 0 <= swap_pin_bits(value) <= 15


def test_majority_picks_most_frequent():
    assert majority([5, 5, 9]) == 5
    assert majority([3, 7, 3]) == 3


def test_majority_tie_prefers_first_seen():
    assert majority([4, 8, 12]) == 4


def test_majority_empty_raises():
    with pytest.raises(ValueError):
        majority([])


@pytest.mark.parametrize("a,b", list(itertools.product(range(16), repeat=2)))
def test_step_increment_bounded_and_antisymmetric(a, b):
    step = step_increment(a, b)
    assert step in (-1, 0, 1)
    assert step == -step_increment(b, a)


def test_step_increment_wraps_direction():
    assert step_increment(0, 15) == step_increment(1, 0)
    assert step_increment(15, 0) == step_increment(0, 1)
    assert step_increment(7, 7) == 0


def test_no_result_before_three_samples():
    dials = _dials([0x21, 0x21])
    dials.update()
    dials.update()
    assert dials.value(DialId.A) == 0
    assert dials.value(DialId.B) == 0


def test_three_samples_set_values_and_count():
    sample = 0x21
    dials = _dials([sample] * 3)
    for _ in range(3):
        dials.update()
    assert dials.value(DialId.A) == sample & 0x0F
    assert dials.value(DialId.B) == sample >> 4
    assert dials.count(DialId.A) == step_increment(sample & 0x0F, 0)
    assert dials.count(DialId.B) == step_increment(sample >> 4, 0)


def test_glitch_sample_filtered():
    dials = _dials([0x01, 0xFF, 0x01])
    for _ in range(3):
        dials.update()
    assert dials.value(DialId.A) == 0x01
    assert dials.value(DialId.B) == 0


def test_counting_accumulates_over_turns():
    readings = [1, 2, 3, 4]
    dials = _dials([r for r in readings for _ in range(3)])
    for _ in range(len(readings) * 3):
        dials.update()
    assert dials.count(DialId.A) == len(readings)
    assert dials.value(DialId.A) == readings[-1]


def test_reset_count():
    dials = _dials([0x11] * 3)
    for _ in range(3):
        dials.update()
    dials.reset_count(DialId.A)
    assert dials.count(DialId.A) == 0
    assert dials.count(DialId.B) == step_increment(1, 0)


def test_pin_swapped_calibrates_value():
    dials = _dials([0x01] * 3)
    dials.set_pin_swapped(DialId.A, True)
    for _ in range(3):
        dials.update()
    assert dials.value(DialId.A) == swap_pin_bits(0x01)