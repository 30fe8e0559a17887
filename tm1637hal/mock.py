"""Pins and delays that do nothing on hardware, for trying the driver without it."""

from __future__ import annotations

__all__ = ["Noop", "AsyncNoop"]


class Noop:
    """A pin and a blocking delay provider that touch no hardware.

    It records the last level driven and the total delay requested, and
    never actually waits. As an input the pin always reads high.
    """

    def __init__(self) -> None:
        self.level: bool | None = None
        self.elapsed_ns = 0

    def set_low(self) -> None:
        """Record a low level."""
        self.level = False

    def set_high(self) -> None:
        """Record a high level."""
        self.level = True

    def is_high(self) -> bool:
        """Always ``True``."""
        return True

    def is_low(self) -> bool:
        """Always ``False``."""
        return False

    def delay_ns(self, ns: int) -> None:
        """Add ``ns`` to the recorded delay and return at once."""
        self.elapsed_ns += ns

    def delay_us(self, us: int) -> None:
        """Add ``us`` microseconds to the recorded delay."""
        self.delay_ns(us * 1_000)

    def delay_ms(self, ms: int) -> None:
        """Add ``ms`` milliseconds to the recorded delay."""
        self.delay_ns(ms * 1_000_000)


class AsyncNoop:
    """An asynchronous delay provider that records delays without waiting."""

    def __init__(self) -> None:
        self.elapsed_ns = 0

    async def delay_ns(self, ns: int) -> None:
        """Add ``ns`` to the recorded delay and return at once."""
        self.elapsed_ns += ns

    async def delay_us(self, us: int) -> None:
        """Add ``us`` microseconds to the recorded delay."""
        await self.delay_ns(us * 1_000)

    async def delay_ms(self, ms: int) -> None:
        """Add ``ms`` milliseconds to the recorded delay."""
        await self.delay_ns(ms * 1_000_000)