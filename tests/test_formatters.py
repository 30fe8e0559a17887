import pytest

from tm1637hal.characters import str_from_byte
from tm1637hal.formatters import (
    celsius_to_4digits,
    clock_to_4digits,
    degrees_to_4digits,
    f32_to_6digits,
    i16_to_4digits,
    i16_to_upside_down_4digits,
    i32_to_6digits,
)
from tm1637hal.mappings import SegmentBits, UpsideDownDigitBits

_UPSIDE_DOWN_TEXT = {int(d): str(i) for i, d in enumerate(UpsideDownDigitBits)}
_UPSIDE_DOWN_TEXT[0b01000000] = "-"
_UPSIDE_DOWN_TEXT[0] = ""


def _text(data):
    return "".join(str_from_byte(b) for b in data).strip()


def _unswizzle(b):
    return [b[2], b[1], b[0], b[5], b[4], b[3]]


def _upside_down_text(data):
    return "".join(_UPSIDE_DOWN_TEXT[b] for b in reversed(data))


def test_i16_to_4digits_example():
    assert i16_to_4digits(1234) == [0b00000110, 0b01011011, 0b01001111, 0b01100110]


@pytest.mark.parametrize("n", [-999, -100, -5, 0, 7, 42, 999, 1234, 9999])
def test_i16_to_4digits_reads_back(n):
    out = i16_to_4digits(n)
    assert len(out) == 4
    assert _text(out) == str(n)


def test_i16_to_4digits_clamps():
    assert i16_to_4digits(12000) == i16_to_4digits(9999)
    assert i16_to_4digits(-5000) == i16_to_4digits(-999)


def test_i32_to_6digits_example_order():
    assert i32_to_6digits(123456) == [
        0b01001111,
        0b01011011,
        0b00000110,
        0b01111101,
        0b01101101,
        0b01100110,
    ]


@pytest.mark.parametrize("n", [-99999, -1, 1, 42, 999999])
def test_i32_to_6digits_reads_back(n):
    assert _text(_unswizzle(i32_to_6digits(n))) == str(n)


def test_i32_to_6digits_zero_carries_minus():
    assert _text(_unswizzle(i32_to_6digits(0))) == "-0"


def test_i32_to_6digits_clamps():
    assert i32_to_6digits(5_000_000) == i32_to_6digits(999999)
    assert i32_to_6digits(-5_000_000) == i32_to_6digits(-99999)


@pytest.mark.parametrize("n", [-9, -1, 1, 25, 99])
def test_celsius_to_4digits(n):
    out = celsius_to_4digits(n)
    assert out[2:] == [0x63, 0x39]
    assert _text(out[:2]) == str(n)


def test_celsius_to_4digits_zero_and_clamp():
    assert _text(celsius_to_4digits(0)[:2]) == "-0"
    assert celsius_to_4digits(120) == celsius_to_4digits(99)
    assert celsius_to_4digits(-50) == celsius_to_4digits(-9)


@pytest.mark.parametrize("n", [-99, -5, 7, 360, 999])
def test_degrees_to_4digits(n):
    out = degrees_to_4digits(n)
    assert out[3] == 0x63
    assert _text(out[:3]) == str(n)


def test_degrees_to_4digits_clamps():
    assert degrees_to_4digits(5000) == degrees_to_4digits(999)
    assert degrees_to_4digits(-500) == degrees_to_4digits(-99)


def test_clock_to_4digits_without_colon():
    assert _text(clock_to_4digits(12, 34, False)) == "1234"


def test_clock_to_4digits_colon_is_dot_of_second_position():
    plain = clock_to_4digits(12, 34, False)
    colon = clock_to_4digits(12, 34, True)
    assert colon[1] == plain[1] | SegmentBits.DOT
    assert [colon[0], colon[2], colon[3]] == [plain[0], plain[2], plain[3]]


def test_clock_to_4digits_single_digit_hour():
    out = clock_to_4digits(9, 5, False)
    assert out[0] == 0
    assert _text(out) == f"{9}{5:02d}"


@pytest.mark.parametrize("n", [-999, -12, 1, 1234, 9999])
def test_i16_to_upside_down_4digits_reads_back(n):
    assert _upside_down_text(i16_to_upside_down_4digits(n)) == str(n)


def test_i16_to_upside_down_4digits_zero_and_clamp():
    assert _upside_down_text(i16_to_upside_down_4digits(0)) == "-0"
    assert i16_to_upside_down_4digits(30000) == i16_to_upside_down_4digits(9999)


@pytest.mark.parametrize(
    "n, decimals",
    [(12.5, 1), (0.25, 2), (-7.75, 2), (123.0, 3), (1.0, 5), (-3.5, 1)],
)
def test_f32_to_6digits_reads_back(n, decimals):
    assert _text(_unswizzle(f32_to_6digits(n, decimals))) == f"{n:.{decimals}f}"


def test_f32_to_6digits_no_decimals_dots_last_digit():
    assert _text(_unswizzle(f32_to_6digits(5.0, 0))) == f"{5.0:.0f}."


def test_f32_to_6digits_rounds_half_away_from_zero():
    assert f32_to_6digits(0.125, 2) == f32_to_6digits(0.13, 2)
    assert f32_to_6digits(-0.125, 2) == f32_to_6digits(-0.13, 2)


def test_f32_to_6digits_clamps():
    top = f32_to_6digits(999999.0, 0)
    assert f32_to_6digits(1e9, 0) == top
    assert f32_to_6digits(float("inf"), 0) == top
    assert f32_to_6digits(1e40, 0) == top


def test_f32_to_6digits_rejects_too_many_decimals():
    with pytest.raises(ValueError):
        f32_to_6digits(1.0, 6)


def test_f32_to_6digits_negative_without_room_for_sign():
    with pytest.raises(ValueError):
        f32_to_6digits(-1.0, 5)