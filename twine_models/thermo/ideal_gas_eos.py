"""Ideal gas equation of state, ``p = rho * R * T``.

Pressure in Pa, density in kg/m^3, temperature in K and the specific gas
constant in J/(kg*K).
"""

from __future__ import annotations


def pressure(temperature: float, density: float, gas_constant: float) -> float:
    """Return the pressure of an ideal gas."""
    return density * gas_constant * temperature


def density(temperature: float, pressure: float, gas_constant: float) -> float:
    """Return the density of an ideal gas."""
    return pressure / (gas_constant * temperature)


def temperature(pressure: float, density: float, gas_constant: float) -> float:
    """Return the absolute temperature of an ideal gas."""
    return pressure / (density * gas_constant)