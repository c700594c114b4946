"""Unit helpers for absolute temperatures and temperature differences.

All quantities in this package are plain floats in SI units. Absolute
temperatures are in kelvin. Temperature differences are also in kelvin, and a
difference of one kelvin equals a difference of one degree Celsius.
"""

from __future__ import annotations

_CELSIUS_OFFSET = 273.15
_FAHRENHEIT_SCALE = 5.0 / 9.0
_FAHRENHEIT_OFFSET = 459.67


def temperature_difference(t1: float, t2: float) -> float:
    """Return the temperature interval ``t1 - t2`` for absolute temperatures in kelvin."""
    return t1 - t2


def celsius_to_kelvin(value: float) -> float:
    """Convert an absolute temperature from degrees Celsius to kelvin."""
    return value + _CELSIUS_OFFSET


def fahrenheit_to_kelvin(value: float) -> float:
    """Convert an absolute temperature from degrees Fahrenheit to kelvin."""
    return (value + _FAHRENHEIT_OFFSET) * _FAHRENHEIT_SCALE