import pytest

from tm1637hal.brightness import Brightness

LEVELS = [
    Brightness.L0,
    Brightness.L1,
    Brightness.L2,
    Brightness.L3,
    Brightness.L4,
    Brightness.L5,
    Brightness.L6,
    Brightness.L7,
]


def test_default_is_lowest_level():
    assert Brightness.default() is Brightness.L0


def test_documented_command_bytes():
    assert Brightness(0b10000000) is Brightness.OFF
    assert Brightness(0b10001000) is Brightness.L0
    assert Brightness(0b10001111) is Brightness.L7


@pytest.mark.parametrize("level, member", list(enumerate(LEVELS)))
def test_level_bits(level, member):
    assert Brightness(0b10001000 | level) is member


def test_off_has_display_bit_cleared():
    assert Brightness(int(Brightness.default()) & ~0b1000) is Brightness.OFF


def test_levels_are_ordered():
    assert [Brightness(0b10001000 + i) for i in range(8)] == sorted(LEVELS)
    assert all(Brightness(0b10000000) < level for level in LEVELS)