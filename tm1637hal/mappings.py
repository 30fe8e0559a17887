"""Segment bit patterns for characters on a 7-segment display.

Segment layout::

         A
        ---
    F  |   |  B
        -G-
    E  |   |  C
        ---
         D
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "SegmentBits",
    "DigitBits",
    "HexDigitBits",
    "UpsideDownDigitBits",
    "UpCharBits",
    "LoCharBits",
    "SpecialCharBits",
]


class SegmentBits(IntEnum):
    """The bit driving each segment of one display position."""

    SEG_A = 0b00000001
    SEG_B = 0b00000010
    SEG_C = 0b00000100
    SEG_D = 0b00001000
    SEG_E = 0b00010000
    SEG_F = 0b00100000
    SEG_G = 0b01000000
    # OR it with a character to light the dot, or with the position
    # wired to the colon (often the second one on 4-digit displays).
    DOT = 0b10000000


class DigitBits(IntEnum):
    """Decimal digits."""

    ZERO = 0b00111111
    ONE = 0b00000110
    TWO = 0b01011011
    THREE = 0b01001111
    FOUR = 0b01100110
    FIVE = 0b01101101
    SIX = 0b01111101
    SEVEN = 0b00000111
    EIGHT = 0b01111111
    NINE = 0b01101111

    @classmethod
    def from_digit(cls, digit: int) -> DigitBits:
        """Return the pattern for ``digit``; anything outside 0-9 gives ``ZERO``."""
        members = list(cls)
        return members[digit] if 0 <= digit < len(members) else cls.ZERO


class UpCharBits(IntEnum):
    """Uppercase letters that a 7-segment display can show."""

    UP_A = 0x77
    UP_B = 0x7F
    UP_C = 0x39
    UP_E = 0x79
    UP_F = SegmentBits.SEG_A | SegmentBits.SEG_F | SegmentBits.SEG_E | SegmentBits.SEG_G
    UP_G = 0x3D
    UP_H = 0x76
    UP_I = 0x30
    UP_J = 0x1E
    UP_L = 0x38
    UP_O = 0x3F
    UP_P = 0x73
    UP_S = 0x6D
    UP_U = 0x3E
    UP_Z = 0x5B


class LoCharBits(IntEnum):
    """Lowercase letters that a 7-segment display can show."""

    LO_A = 0x5F
    LO_B = 0x7C
    LO_C = 0x58
    LO_D = 0x5E
    LO_E = 0x7B
    LO_G = 0x6F
    LO_H = 0x74
    LO_I = 0x10
    LO_N = 0x54
    LO_O = 0x5C
    LO_Q = 0x67
    LO_R = 0x50
    LO_T = 0x78
    LO_U = 0x1C
    LO_Y = 0x6E


class HexDigitBits(IntEnum):
    """Hexadecimal digits."""

    ZERO = DigitBits.ZERO
    ONE = DigitBits.ONE
    TWO = DigitBits.TWO
    THREE = DigitBits.THREE
    FOUR = DigitBits.FOUR
    FIVE = DigitBits.FIVE
    SIX = DigitBits.SIX
    SEVEN = DigitBits.SEVEN
    EIGHT = DigitBits.EIGHT
    NINE = DigitBits.NINE
    A = UpCharBits.UP_A
    B = LoCharBits.LO_B
    C = UpCharBits.UP_C
    D = LoCharBits.LO_D
    E = UpCharBits.UP_E
    F = UpCharBits.UP_F

    @classmethod
    def from_digit(cls, digit: int) -> HexDigitBits:
        """Return the pattern for ``digit``; anything outside 0-15 gives ``ZERO``."""
        members = list(cls)
        return members[digit] if 0 <= digit < len(members) else cls.ZERO


class UpsideDownDigitBits(IntEnum):
    """Decimal digits as they appear on a display mounted upside down."""

    ZERO = 0b00111111
    ONE = 0b00110000
    TWO = 0b01011011
    THREE = 0b01111001
    FOUR = 0b01110100
    FIVE = 0b01101101
    SIX = 0b01101111
    SEVEN = 0b00111000
    EIGHT = 0b01111111
    NINE = 0b01111101

    @classmethod
    def from_digit(cls, digit: int) -> UpsideDownDigitBits:
        """Return the pattern for ``digit``; anything outside 0-9 gives ``ZERO``."""
        members = list(cls)
        return members[digit] if 0 <= digit < len(members) else cls.ZERO


class SpecialCharBits(IntEnum):
    """Punctuation and blank."""

    SPACE = 0
    MINUS = SegmentBits.SEG_G
    UNDERSCORE = SegmentBits.SEG_D
    EQUALS = SegmentBits.SEG_G | SegmentBits.SEG_D
    QUESTION_MARK = (
        SegmentBits.SEG_A | SegmentBits.SEG_B | SegmentBits.SEG_G | SegmentBits.SEG_E
    )