"""Conversions between text and segment bytes, and segment transformations."""

from __future__ import annotations

from tm1637hal.mappings import (
    DigitBits,
    LoCharBits,
    SegmentBits,
    SpecialCharBits,
    UpCharBits,
)

__all__ = [
    "flip",
    "mirror",
    "flip_mirror",
    "from_ascii_byte",
    "from_char",
    "str_from_byte",
]

_DIGITS: list[tuple[str, int]] = [(str(i), int(d)) for i, d in enumerate(DigitBits)]
_UPPER: list[tuple[str, int]] = [(m.name[-1], int(m)) for m in UpCharBits]
_LOWER: list[tuple[str, int]] = [(m.name[-1].lower(), int(m)) for m in LoCharBits]
_SPECIAL: list[tuple[str, int]] = [
    (" ", int(SpecialCharBits.SPACE)),
    ("-", int(SpecialCharBits.MINUS)),
    ("_", int(SpecialCharBits.UNDERSCORE)),
    ("=", int(SpecialCharBits.EQUALS)),
    ("?", int(SpecialCharBits.QUESTION_MARK)),
]

_FROM_ASCII: dict[int, int] = {
    ord(text): byte for text, byte in _DIGITS + _UPPER + _LOWER + _SPECIAL
}


def _build_text_table() -> dict[int, str]:
    # O, S and Z share their patterns with digits and are never produced.
    upper = [(t, b) for t, b in _UPPER if t not in "OSZ"]
    dot = int(SegmentBits.DOT)
    plain = [(".", dot)] + _DIGITS + upper + _LOWER + _SPECIAL
    dotted = [
        (text + ".", byte | dot)
        for text, byte in _DIGITS + upper + _LOWER + _SPECIAL[1:]
    ]
    table: dict[int, str] = {}
    for text, byte in plain + dotted:
        # The first match wins where patterns collide.
        table.setdefault(byte, text)
    return table


_TO_TEXT = _build_text_table()


def flip(byte: int) -> int:
    """Turn a segment byte upside down: swaps A/D, B/C and E/F."""
    a_d = ((byte & 0b00001000) >> 3) | ((byte & 0b00000001) << 3)
    b_c = ((byte & 0b00000100) >> 1) | ((byte & 0b00000010) << 1)
    e_f = ((byte & 0b00100000) >> 1) | ((byte & 0b00010000) << 1)
    return (byte & 0b11000000) | a_d | b_c | e_f


def mirror(byte: int) -> int:
    """Mirror a segment byte left to right: swaps B/F and C/E."""
    b_f = ((byte & 0b00100000) >> 4) | ((byte & 0b00000010) << 4)
    c_e = ((byte & 0b00010000) >> 2) | ((byte & 0b00000100) << 2)
    return (byte & 0b11001001) | b_f | c_e


def flip_mirror(byte: int) -> int:
    """Flip and mirror a segment byte."""
    return mirror(flip(byte))


def from_ascii_byte(byte: int) -> int:
    """Segment byte for an ASCII code; unknown characters give 0 (all off)."""
    return _FROM_ASCII.get(byte, 0)


def from_char(c: str) -> int:
    """Segment byte for a character, using the low byte of its code point."""
    return from_ascii_byte(ord(c) & 0xFF)


def str_from_byte(byte: int) -> str:
    """Text shown by a segment byte, or an empty string if it is unknown."""
    return _TO_TEXT.get(byte, "")