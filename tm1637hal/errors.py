"""Errors raised by the display driver."""

from __future__ import annotations

__all__ = ["TM1637Error", "AckError", "DigitalError"]


class TM1637Error(Exception):
    """Base class of every error the driver raises."""


class AckError(TM1637Error):
    """The display did not acknowledge a sent byte."""

    def __init__(self) -> None:
        super().__init__("the display did not acknowledge the sent byte")


class DigitalError(TM1637Error):
    """A pin operation failed; ``cause`` holds the pin's own error."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"digital pin error: {cause}")
        self.cause = cause
        self.__cause__ = cause