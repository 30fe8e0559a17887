"""Blocking and asyncio driver for the TM1637 7-segment LED display controller, with segment mappings, number formatters and positioning helpers."""

__version__ = "0.5.2"