"""Format numbers into segment bytes for 4- and 6-digit displays.

All numbers are aligned to the right. The 6-digit variants reorder the
bytes to match the wiring of 6-digit modules, where the byte order does
not follow the physical digit order.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable
from enum import IntEnum

from tm1637hal.mappings import DigitBits, SegmentBits, SpecialCharBits, UpsideDownDigitBits

__all__ = [
    "i16_to_4digits",
    "i32_to_6digits",
    "celsius_to_4digits",
    "degrees_to_4digits",
    "clock_to_4digits",
    "i16_to_upside_down_4digits",
    "f32_to_6digits",
]

_MINUS = int(SpecialCharBits.MINUS)
_DOT = int(SegmentBits.DOT)
_DEGREES = 0x63
_UPPER_C = 0x39


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _put_minus(out: list[int], index: int) -> None:
    if not 0 <= index < len(out):
        raise ValueError("no room left for the minus sign")
    out[index] = _MINUS


def _place_digits(
    out: list[int],
    magnitude: int,
    positions: Iterable[int],
    negative: bool,
    *,
    table: type[IntEnum] = DigitBits,
    sign_offset: int = -1,
) -> None:
    """Write ``magnitude`` digit by digit, least significant first."""
    for position in positions:
        out[position] = int(table.from_digit(magnitude % 10))
        magnitude //= 10
        if magnitude == 0:
            if negative:
                _put_minus(out, position + sign_offset)
            break


def _swizzle_6(b: list[int]) -> list[int]:
    return [b[2], b[1], b[0], b[5], b[4], b[3]]


def _to_f32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def i16_to_4digits(n: int) -> list[int]:
    """Format ``n`` clamped to -999..9999 for a 4-digit display."""
    out = [0] * 4
    _place_digits(out, abs(_clamp(n, -999, 9999)), range(3, -1, -1), n < 0)
    return out


def i32_to_6digits(n: int) -> list[int]:
    """Format ``n`` clamped to -99999..999999 for a 6-digit display."""
    out = [0] * 6
    _place_digits(out, abs(_clamp(n, -99999, 999999)), range(5, -1, -1), n <= 0)
    return _swizzle_6(out)


def celsius_to_4digits(n: int) -> list[int]:
    """Format ``n`` clamped to -9..99 followed by a degree sign and ``C``."""
    out = [0, 0, _DEGREES, _UPPER_C]
    _place_digits(out, abs(_clamp(n, -9, 99)), range(1, -1, -1), n <= 0)
    return out


def degrees_to_4digits(n: int) -> list[int]:
    """Format ``n`` clamped to -99..999 followed by a degree sign."""
    out = [0, 0, 0, _DEGREES]
    _place_digits(out, abs(_clamp(n, -99, 999)), range(2, -1, -1), n <= 0)
    return out


def clock_to_4digits(hour: int, minute: int, colon: bool) -> list[int]:
    """Format ``hour`` and ``minute`` (0-99 each), lighting the colon if asked.

    The colon is the dot of the second position, as wired on 4-digit
    clock displays.
    """
    out = [0, 0, 0, 0]
    if hour >= 10:
        out[0] = int(DigitBits.from_digit(hour // 10))
    out[1] = int(DigitBits.from_digit(hour % 10))
    if colon:
        out[1] |= _DOT
    out[2] = int(DigitBits.from_digit(minute // 10))
    out[3] = int(DigitBits.from_digit(minute % 10))
    return out


def i16_to_upside_down_4digits(n: int) -> list[int]:
    """Format ``n`` clamped to -999..9999 for a display mounted upside down."""
    out = [0] * 4
    _place_digits(
        out,
        abs(_clamp(n, -999, 9999)),
        range(4),
        n <= 0,
        table=UpsideDownDigitBits,
        sign_offset=1,
    )
    return out


def f32_to_6digits(n: float, decimals: int) -> list[int]:
    """Format ``n`` as a single-precision float with ``decimals`` decimals (0-5).

    Rounds half away from zero and clamps to -99999..999999 in units of
    the last decimal.
    """
    if not 0 <= decimals <= 5:
        raise ValueError(f"decimals must be between 0 and 5, got {decimals}")

    value = _to_f32(n)
    positive = math.copysign(1.0, value) > 0
    scaled = _to_f32(value * _to_f32(float(10**decimals)))
    total = _to_f32(scaled + (0.5 if positive else -0.5))
    if math.isnan(total):
        magnitude = 0
    else:
        magnitude = abs(math.trunc(max(-99999.0, min(999999.0, total))))

    out = [0] * 6
    decimal_position = 5 - decimals
    for position in range(5, -1, -1):
        out[position] = int(DigitBits.from_digit(magnitude % 10))
        magnitude //= 10
        if position == decimal_position:
            out[position] |= _DOT
        # The minus sign goes in only once the digit carrying the dot is done.
        if magnitude == 0 and position <= decimal_position:
            if not positive:
                _put_minus(out, position - 1)
            break

    return _swizzle_6(out)