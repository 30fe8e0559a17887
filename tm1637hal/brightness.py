"""Brightness levels of the display."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["Brightness"]


class Brightness(IntEnum):
    """A brightness command byte, sent as is to the controller.

    Bits 0-2 hold the level (0-7), bit 3 switches the display on,
    and the upper bits carry the command base.
    """

    OFF = 0b10000000
    L0 = 0b10001000
    L1 = 0b10001001
    L2 = 0b10001010
    L3 = 0b10001011
    L4 = 0b10001100
    L5 = 0b10001101
    L6 = 0b10001110
    L7 = 0b10001111

    @classmethod
    def default(cls) -> Brightness:
        """The default level, ``L0``."""
        return cls.L0