import pytest

from tm1637hal.characters import (
    flip,
    flip_mirror,
    from_ascii_byte,
    from_char,
    mirror,
    str_from_byte,
)
from tm1637hal.mappings import DigitBits, SegmentBits, SpecialCharBits, UpCharBits

ROUND_TRIP_CHARS = "0123456789ACEFGHIJLPUabcdehinoqrtuy-_=?"


def test_flipped_four():
    expected = (
        SegmentBits.SEG_B | SegmentBits.SEG_C | SegmentBits.SEG_E | SegmentBits.SEG_G
    )
    assert flip(DigitBits.FOUR) == expected


def test_flipped_e():
    assert flip(UpCharBits.UP_E) == UpCharBits.UP_E


def test_mirrored_four():
    expected = (
        SegmentBits.SEG_B | SegmentBits.SEG_E | SegmentBits.SEG_F | SegmentBits.SEG_G
    )
    assert mirror(DigitBits.FOUR) == expected


def test_mirrored_e():
    expected = (
        SegmentBits.SEG_A
        | SegmentBits.SEG_B
        | SegmentBits.SEG_C
        | SegmentBits.SEG_D
        | SegmentBits.SEG_G
    )
    assert mirror(UpCharBits.UP_E) == expected


def test_flipped_mirrored_four():
    expected = (
        SegmentBits.SEG_C | SegmentBits.SEG_E | SegmentBits.SEG_F | SegmentBits.SEG_G
    )
    assert flip_mirror(DigitBits.FOUR) == expected


def test_mirrored_flipped_is_flipped_mirrored():
    assert mirror(flip(DigitBits.FOUR)) == flip(mirror(DigitBits.FOUR))


def test_flipped_flipped_is_original():
    assert flip(flip(DigitBits.SEVEN)) == DigitBits.SEVEN


def test_mirrored_mirrored_is_original():
    assert mirror(mirror(DigitBits.FIVE)) == DigitBits.FIVE


@pytest.mark.parametrize("byte", range(256))
def test_flip_and_mirror_are_involutions(byte):
    assert flip(flip(byte)) == byte
    assert mirror(mirror(byte)) == byte
    assert flip_mirror(flip_mirror(byte)) == byte


def test_dot_survives_transformations():
    assert flip(SegmentBits.DOT) == SegmentBits.DOT
    assert mirror(SegmentBits.DOT) == SegmentBits.DOT


def test_from_ascii_byte_known_values():
    assert from_ascii_byte(ord("E")) == UpCharBits.UP_E
    assert from_ascii_byte(ord("7")) == DigitBits.SEVEN
    assert from_ascii_byte(ord("?")) == SpecialCharBits.QUESTION_MARK


def test_from_ascii_byte_unknown_is_blank():
    assert from_ascii_byte(ord("#")) == 0
    assert from_ascii_byte(ord("X")) == 0


def test_from_char_uses_low_byte_of_code_point():
    assert from_char(chr(0x141)) == from_char("A")
    assert from_char(chr(0x100)) == 0


@pytest.mark.parametrize("c", ROUND_TRIP_CHARS)
def test_char_round_trip(c):
    assert str_from_byte(from_char(c)) == c


@pytest.mark.parametrize("c", ROUND_TRIP_CHARS)
def test_dotted_char_round_trip(c):
    assert str_from_byte(from_char(c) | SegmentBits.DOT) == c + "."


def test_space_and_dot():
    assert str_from_byte(from_char(" ")) == " "
    assert str_from_byte(SegmentBits.DOT) == "."


def test_shared_patterns_decode_as_digits():
    assert str_from_byte(from_char("B")) == "8"
    assert str_from_byte(from_char("O")) == "0"
    assert str_from_byte(from_char("S")) == "5"
    assert str_from_byte(from_char("g")) == "9"