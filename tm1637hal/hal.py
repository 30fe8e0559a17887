"""Interfaces the driver expects from pins and delay providers."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

__all__ = ["OutputPin", "InputPin", "DelayNs", "AsyncDelayNs", "Mode", "dio_is_low"]


@runtime_checkable
class OutputPin(Protocol):
    """A digital pin that can be driven low or high.

    Any exception raised by these methods is reported by the driver as a
    digital error.
    """

    def set_low(self) -> None: ...

    def set_high(self) -> None: ...


@runtime_checkable
class InputPin(Protocol):
    """A digital pin that can be read."""

    def is_high(self) -> bool: ...

    def is_low(self) -> bool: ...


@runtime_checkable
class DelayNs(Protocol):
    """A blocking delay provider."""

    def delay_ns(self, ns: int) -> None: ...

    def delay_us(self, us: int) -> None: ...

    def delay_ms(self, ms: int) -> None: ...


@runtime_checkable
class AsyncDelayNs(Protocol):
    """An asynchronous delay provider."""

    async def delay_ns(self, ns: int) -> None: ...

    async def delay_us(self, us: int) -> None: ...

    async def delay_ms(self, ms: int) -> None: ...


class Mode(Enum):
    """Whether the driver blocks or runs as coroutines."""

    ASYNC = "async"
    BLOCKING = "blocking"


def dio_is_low(pin: object, ack: bool) -> bool:
    """Read the data pin when acknowledgement is enabled.

    Without acknowledgement the pin is never read and the answer is ``False``,
    so output-only pins work as the data line.
    """
    if not ack:
        return False
    return bool(pin.is_low())  # type: ignore[attr-defined]