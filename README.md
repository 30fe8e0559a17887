# tm1637hal

A driver for the TM1637 7-segment LED display controller. The chip uses two
lines, clock (`CLK`) and data (`DIO`). You supply the pins and a delay
provider, so the driver works with any GPIO backend. It can run in a blocking
mode or an asyncio mode. The package has no dependencies outside the standard
library.

## Installation

```
pip install tm1637hal
```

To install the test tools as well:

```
pip install "tm1637hal[test]"
```

## Pins and delays

The driver is not tied to any hardware library. A pin is any object with
`set_low()` and `set_high()`. A delay provider has `delay_ns`, `delay_us` and
`delay_ms`. In async mode these three are coroutines. The protocols that
describe these objects are in `tm1637hal.hal`: `OutputPin`, `InputPin`,
`DelayNs` and `AsyncDelayNs`.

The driver reads `DIO` only when acknowledgement checking is on. You turn it
on with `TM1637Builder.ack(True)` or by passing `ack=True` to the constructor.
The data pin then also needs `is_low()`. For each byte the driver polls it for
up to 255 cycles and raises `AckError` if the display does not answer.

`tm1637hal.mock.Noop` is a pin and a blocking delay provider that does nothing.
It records the last level it was set to in `level`, and the total delay it was
asked for in `elapsed_ns`. It never actually sleeps. As an input it always reads
high, so it cannot serve as the data pin with acknowledgement checking on.
`tm1637hal.mock.AsyncNoop` is the asynchronous delay provider that matches it.

## Blocking use

```python
from tm1637hal.brightness import Brightness
from tm1637hal.device import TM1637Builder
from tm1637hal.formatters import clock_to_4digits, i16_to_4digits
from tm1637hal.mock import Noop

tm = (
    TM1637Builder(Noop(), Noop(), Noop())
    .brightness(Brightness.L3)
    .delay_us(100)
    .build_blocking(4)
)

tm.init()                                            # clear, then send brightness
tm.display_slice(0, i16_to_4digits(1234))            # "1234"
tm.display_slice(0, clock_to_4digits(12, 34, True))  # "12:34"
tm.set_brightness(Brightness.L7)
tm.off()
tm.on()
tm.clear()
```

`display(position, data)` takes any iterable of segment bytes and writes them
starting at `position`. The brightness is not resent with each write. Send it
with `init()`, `on()` or `set_brightness()`.

`scroll(position, delay_ms, windows)` shows each window in turn and pauses
`delay_ms` after each one. It returns a generator that yields `None` for each
window shown, or the error raised while showing it. An error does not stop
the scroll:

```python
windows = [[0x06, 0x5B, 0x4F, 0x66], [0x5B, 0x4F, 0x66, 0x6D]]
for result in tm.scroll(0, 300, windows):
    if result is not None:
        print("failed:", result)
```

`TM1637.builder(clk, dio, delay)` returns a `TM1637Builder`, and
`into_parts()` gives back the clock pin, data pin and delay provider.

## Async use

```python
import asyncio

from tm1637hal.device import TM1637Builder
from tm1637hal.mock import AsyncNoop, Noop


async def main():
    tm = TM1637Builder(Noop(), Noop(), AsyncNoop()).build_async(4)
    await tm.init()
    await tm.display_slice(0, [0x06, 0x5B, 0x4F, 0x66])  # "1234"
    async for result in tm.scroll(0, 200, [[0x3F] * 4, [0x06] * 4]):
        pass

asyncio.run(main())
```

`TM1637Builder.build(num_positions, mode)` takes a `tm1637hal.hal.Mode`
(`Mode.BLOCKING` or `Mode.ASYNC`) and returns a `TM1637` or an `AsyncTM1637`.

## Characters and formatting

- `tm1637hal.mappings` holds the segment bit patterns as `IntEnum`s:
  `SegmentBits`, `DigitBits`, `HexDigitBits`, `UpsideDownDigitBits`,
  `UpCharBits`, `LoCharBits` and `SpecialCharBits`. The digit enums have
  `from_digit()`, which returns `ZERO` for values out of range.
- `tm1637hal.characters` converts ASCII to segment bytes (`from_char`,
  `from_ascii_byte`) and segment bytes back to text (`str_from_byte`).
  Unknown characters give `0`, and unknown bytes give `""`. It can also
  transform segments: `flip` turns a byte upside down, `mirror` mirrors it
  left to right, and `flip_mirror` does both.
- `tm1637hal.formatters` turns numbers into display bytes:
  - `i16_to_4digits`, `i32_to_6digits` and `i16_to_upside_down_4digits` format
    integers.
  - `celsius_to_4digits` and `degrees_to_4digits` format temperatures.
  - `clock_to_4digits` formats a time.
  - `f32_to_6digits` formats a float with 0 to 5 decimals. Any other number of
    decimals raises `ValueError`.

  Values are clamped to what fits on the display. The 6-digit versions
  reorder the bytes to match how 6-digit modules wire their digits.
- `tm1637hal.brightness.Brightness` lists the brightness command bytes: `OFF`
  and `L0` to `L7`. The default is `L0`.

## Positioning helpers

- `tm1637hal.align.align(num_positions, position, data)` returns the start
  address and the bytes to send for text placed at `position`. It drops bytes
  that would fall past the last digit. For 6-digit modules it pads the text
  with blanks (`pad_6`), reverses it and writes it from address 3.
  `align_position` gives the start address alone.
- `tm1637hal.maybe_flipped.Orientation` (`NOT_FLIPPED`, `FLIPPED`) works out
  the position and bytes for a display mounted upside down. `calculate()`
  returns them, and `flip()` gives the opposite orientation.

## Errors

A pin that raises is reported as `tm1637hal.errors.DigitalError`. The original
exception is kept in `cause`. A missing acknowledgement raises
`tm1637hal.errors.AckError`. Both derive from `tm1637hal.errors.TM1637Error`.

## What it does not do

The package has no command-line tool. It has no higher-level text API that
takes a string, places the dots, aligns the text and scrolls it in one call.
It also has no loading-spinner animation. You build these from the pieces
above: `from_char`, `align`, `Orientation` and `scroll`.

## Running the tests

```
pytest
```