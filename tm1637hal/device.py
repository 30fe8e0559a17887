"""Driver for the TM1637 7-segment LED display controller."""

from __future__ import annotations

from collections.abc import AsyncIterator, Generator, Iterable, Iterator
from enum import Enum, auto

from tm1637hal.brightness import Brightness
from tm1637hal.errors import AckError, DigitalError, TM1637Error
from tm1637hal.hal import Mode, dio_is_low

__all__ = ["TM1637", "AsyncTM1637", "TM1637Builder"]

_START_DISPLAY = 0x40
_ADDRESS_BASE = 0xC0
_ACK_CYCLES = 255


class _Op(Enum):
    CLK_LOW = auto()
    CLK_HIGH = auto()
    DIO_LOW = auto()
    DIO_HIGH = auto()
    DELAY = auto()
    READ_DIO = auto()


# A sequence of bus operations; a READ_DIO step is answered through send().
_Steps = Generator[_Op, "bool | None", None]


def _start() -> _Steps:
    yield _Op.DIO_HIGH
    yield _Op.CLK_HIGH
    yield _Op.DELAY
    yield _Op.DIO_LOW
    yield _Op.DELAY


def _stop() -> _Steps:
    yield _Op.DIO_LOW
    yield _Op.CLK_HIGH
    yield _Op.DELAY
    yield _Op.DIO_HIGH
    yield _Op.DELAY


def _write_byte(byte: int, ack: bool) -> _Steps:
    for bit in range(8):
        yield _Op.CLK_LOW
        yield _Op.DIO_HIGH if (byte >> bit) & 1 else _Op.DIO_LOW
        yield _Op.DELAY
        yield _Op.CLK_HIGH
        yield _Op.DELAY

    yield _Op.CLK_LOW
    yield _Op.DIO_LOW
    yield _Op.DELAY
    yield _Op.CLK_HIGH
    yield _Op.DELAY

    acked = True
    if ack:
        acked = False
        for _ in range(_ACK_CYCLES):
            if (yield _Op.READ_DIO):
                acked = True
                break
            yield _Op.DELAY

    yield _Op.CLK_LOW
    yield _Op.DIO_LOW
    yield _Op.DELAY

    if not acked:
        raise AckError()


def _write_cmd(cmd: int, ack: bool) -> _Steps:
    yield from _start()
    yield from _write_byte(cmd, ack)
    yield from _stop()


def _display(position: int, data: Iterable[int], ack: bool) -> _Steps:
    yield from _write_cmd(_START_DISPLAY, ack)
    yield from _start()
    yield from _write_byte(_ADDRESS_BASE | (position & 0x03), ack)
    for byte in data:
        yield from _write_byte(int(byte), ack)
    yield from _stop()


class _Driver:
    """State and pin handling shared by the blocking and async drivers."""

    def _setup(
        self,
        clk: object,
        dio: object,
        delay: object,
        brightness: Brightness,
        delay_us: int,
        num_positions: int,
        ack: bool,
    ) -> None:
        self.clk = clk
        self.dio = dio
        self.delay = delay
        self._brightness = Brightness(brightness)
        self.delay_us = delay_us
        self.num_positions = num_positions
        self.ack = ack

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_positions={self.num_positions}, "
            f"brightness={self._brightness.name}, delay_us={self.delay_us}, ack={self.ack})"
        )

    @property
    def brightness(self) -> Brightness:
        """The current brightness level."""
        return self._brightness

    def _pin_step(self, op: _Op) -> bool | None:
        try:
            if op is _Op.CLK_LOW:
                self.clk.set_low()  # type: ignore[attr-defined]
            elif op is _Op.CLK_HIGH:
                self.clk.set_high()  # type: ignore[attr-defined]
            elif op is _Op.DIO_LOW:
                self.dio.set_low()  # type: ignore[attr-defined]
            elif op is _Op.DIO_HIGH:
                self.dio.set_high()  # type: ignore[attr-defined]
            elif op is _Op.READ_DIO:
                return dio_is_low(self.dio, self.ack)
        except TM1637Error:
            raise
        except Exception as exc:
            raise DigitalError(exc) from exc
        return None

    def _clear_steps(self) -> _Steps:
        return _display(0, [0] * self.num_positions, self.ack)


class TM1637(_Driver):
    """Blocking driver.

    Pin failures raise :class:`DigitalError`; a missing acknowledgement,
    when enabled, raises :class:`AckError`.
    """

    def __init__(
        self,
        clk: object,
        dio: object,
        delay: object,
        brightness: Brightness = Brightness.L0,
        delay_us: int = 100,
        num_positions: int = 4,
        ack: bool = False,
    ) -> None:
        self._setup(clk, dio, delay, brightness, delay_us, num_positions, ack)

    @classmethod
    def builder(cls, clk: object, dio: object, delay: object) -> TM1637Builder:
        """Start a builder with default settings."""
        return TM1637Builder(clk, dio, delay)

    def into_parts(self) -> tuple[object, object, object]:
        """Return the clock pin, data pin and delay provider."""
        return self.clk, self.dio, self.delay

    def _run(self, steps: _Steps) -> None:
        reply: bool | None = None
        try:
            while True:
                op = steps.send(reply)
                if op is _Op.DELAY:
                    self.delay.delay_us(self.delay_us)  # type: ignore[attr-defined]
                    reply = None
                else:
                    reply = self._pin_step(op)
        except StopIteration:
            pass

    def init(self) -> None:
        """Clear the display and send the brightness level."""
        self.clear()
        self._run(_write_cmd(int(self._brightness), self.ack))

    def on(self) -> None:
        """Turn the display on at the current brightness."""
        self._run(_write_cmd(int(self._brightness), self.ack))

    def off(self) -> None:
        """Turn the display off."""
        self._run(_write_cmd(int(Brightness.OFF), self.ack))

    def clear(self) -> None:
        """Blank every position."""
        self._run(self._clear_steps())

    def set_brightness(self, brightness: Brightness) -> None:
        """Store ``brightness`` and send it to the display."""
        self._brightness = Brightness(brightness)
        self._run(_write_cmd(int(self._brightness), self.ack))

    def display(self, position: int, data: Iterable[int]) -> None:
        """Write segment bytes starting at ``position``.

        The brightness is not resent; use :meth:`init` or :meth:`set_brightness`.
        """
        self._run(_display(position, data, self.ack))

    def display_slice(self, position: int, data: bytes | list[int]) -> None:
        """Write a sequence of segment bytes starting at ``position``."""
        self.display(position, list(data))

    def scroll(
        self, position: int, delay_ms: int, windows: Iterable[Iterable[int]]
    ) -> Iterator[TM1637Error | None]:
        """Show each window in turn, pausing ``delay_ms`` after each one shown.

        Yields ``None`` for each window shown, or the error that stopped it;
        an error does not end the scroll.
        """
        for window in windows:
            try:
                self.display(position, window)
            except TM1637Error as exc:
                yield exc
                continue
            self.delay.delay_ms(delay_ms)  # type: ignore[attr-defined]
            yield None


class AsyncTM1637(_Driver):
    """Asynchronous driver; the delay provider's methods are awaited."""

    def __init__(
        self,
        clk: object,
        dio: object,
        delay: object,
        brightness: Brightness = Brightness.L0,
        delay_us: int = 100,
        num_positions: int = 4,
        ack: bool = False,
    ) -> None:
        self._setup(clk, dio, delay, brightness, delay_us, num_positions, ack)

    @classmethod
    def builder(cls, clk: object, dio: object, delay: object) -> TM1637Builder:
        """Start a builder with default settings."""
        return TM1637Builder(clk, dio, delay)

    def into_parts(self) -> tuple[object, object, object]:
        """Return the clock pin, data pin and delay provider."""
        return self.clk, self.dio, self.delay

    async def _run(self, steps: _Steps) -> None:
        reply: bool | None = None
        try:
            while True:
                op = steps.send(reply)
                if op is _Op.DELAY:
                    await self.delay.delay_us(self.delay_us)  # type: ignore[attr-defined]
                    reply = None
                else:
                    reply = self._pin_step(op)
        except StopIteration:
            pass

    async def init(self) -> None:
        """Clear the display and send the brightness level."""
        await self.clear()
        await self._run(_write_cmd(int(self._brightness), self.ack))

    async def on(self) -> None:
        """Turn the display on at the current brightness."""
        await self._run(_write_cmd(int(self._brightness), self.ack))

    async def off(self) -> None:
        """Turn the display off."""
        await self._run(_write_cmd(int(Brightness.OFF), self.ack))

    async def clear(self) -> None:
        """Blank every position."""
        await self._run(self._clear_steps())

    async def set_brightness(self, brightness: Brightness) -> None:
        """Store ``brightness`` and send it to the display."""
        self._brightness = Brightness(brightness)
        await self._run(_write_cmd(int(self._brightness), self.ack))

    async def display(self, position: int, data: Iterable[int]) -> None:
        """Write segment bytes starting at ``position``."""
        await self._run(_display(position, data, self.ack))

    async def display_slice(self, position: int, data: bytes | list[int]) -> None:
        """Write a sequence of segment bytes starting at ``position``."""
        await self.display(position, list(data))

    async def scroll(
        self, position: int, delay_ms: int, windows: Iterable[Iterable[int]]
    ) -> AsyncIterator[TM1637Error | None]:
        """Show each window in turn; yields ``None`` or the error, never stopping on one."""
        for window in windows:
            try:
                await self.display(position, window)
            except TM1637Error as exc:
                yield exc
                continue
            await self.delay.delay_ms(delay_ms)  # type: ignore[attr-defined]
            yield None


class TM1637Builder:
    """Builder for the drivers; defaults to brightness ``L0`` and 100 µs per bit."""

    def __init__(self, clk: object, dio: object, delay: object) -> None:
        self._clk = clk
        self._dio = dio
        self._delay = delay
        self._brightness = Brightness.L0
        self._delay_us = 100
        self._ack = False

    def brightness(self, brightness: Brightness) -> TM1637Builder:
        """Set the brightness level."""
        self._brightness = Brightness(brightness)
        return self

    def delay_us(self, delay_us: int) -> TM1637Builder:
        """Set the delay between bus transitions, in microseconds."""
        self._delay_us = delay_us
        return self

    def ack(self, enabled: bool) -> TM1637Builder:
        """Wait for the display to acknowledge each byte (needs a readable data pin)."""
        self._ack = enabled
        return self

    def build(self, num_positions: int, mode: Mode) -> TM1637 | AsyncTM1637:
        """Build a driver for ``num_positions`` digits in the given mode."""
        if Mode(mode) is Mode.ASYNC:
            return self.build_async(num_positions)
        return self.build_blocking(num_positions)

    def build_async(self, num_positions: int) -> AsyncTM1637:
        """Build an asynchronous driver."""
        return AsyncTM1637(
            self._clk,
            self._dio,
            self._delay,
            self._brightness,
            self._delay_us,
            num_positions,
            self._ack,
        )

    def build_blocking(self, num_positions: int) -> TM1637:
        """Build a blocking driver."""
        return TM1637(
            self._clk,
            self._dio,
            self._delay,
            self._brightness,
            self._delay_us,
            num_positions,
            self._ack,
        )