"""Align human-readable byte sequences to the way a display is addressed.

On 4-digit modules the byte order follows the digit order. On 6-digit
modules it does not: the bytes are written reversed from address 3, and
shorter sequences are padded with blanks so that every digit lines up.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

__all__ = ["align", "align_position", "pad_6"]


def pad_6(data: Iterable[int]) -> list[int]:
    """Pad ``data`` with blanks (zeros) up to six bytes.

    The padding is written to the display too, overwriting whatever was
    shown there before.
    """
    items = list(data)
    return items + [0] * (6 - len(items)) if len(items) < 6 else items


def align_position(num_positions: int, position: int) -> int:
    """The address at which writing starts for a display of ``num_positions``."""
    return 3 if num_positions == 6 else position


def align(num_positions: int, position: int, data: Iterable[int]) -> tuple[int, list[int]]:
    """Return the start address and the bytes to send for ``data`` at ``position``.

    Bytes that would fall past the last digit are dropped.
    """
    if num_positions == 4:
        if position > 3:
            return position, []
        return position, list(islice(data, 4 - position))

    if num_positions == 6:
        if position > 5:
            return 3, []
        # Reversed sequences of at most six bytes line up when written from 3.
        return 3, pad_6(data)[: 6 - position][::-1]

    return position, list(data)