"""Recalculate position and bytes for a display that may be mounted upside down."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from tm1637hal.characters import flip_mirror

__all__ = ["Orientation"]


class Orientation(Enum):
    """Whether the display is mounted normally or turned upside down."""

    NOT_FLIPPED = "not_flipped"
    FLIPPED = "flipped"

    def calculate(
        self, num_positions: int, position: int, data: Iterable[int]
    ) -> tuple[int, list[int]]:
        """Return the start address and bytes to write for ``data`` at ``position``."""
        items = list(data)
        if self is Orientation.NOT_FLIPPED:
            return position, items

        new_position = self.position(num_positions, position, len(items))
        if position > num_positions:
            shown: list[int] = []
        elif len(items) + position > num_positions:
            shown = items[: num_positions - position][::-1]
        else:
            shown = items[::-1]
        return new_position, [flip_mirror(byte) for byte in shown]

    def position(self, num_positions: int, position: int, length: int) -> int:
        """Start address for ``length`` bytes placed at ``position``."""
        if self is Orientation.NOT_FLIPPED:
            return position
        if length + position > num_positions:
            return 0
        return num_positions - length - position

    def flip(self) -> Orientation:
        """The opposite orientation."""
        if self is Orientation.NOT_FLIPPED:
            return Orientation.FLIPPED
        return Orientation.NOT_FLIPPED