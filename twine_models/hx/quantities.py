"""Constrained heat exchanger quantities and effectiveness-NTU helpers.

Values are plain floats in SI units: capacitance rates and conductances in
W/K, ratios dimensionless.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence


class ConstraintError(ValueError):
    """A value violates the constraint placed on it."""


class NotANumberError(ConstraintError):
    """The value is NaN."""


class BelowMinimumError(ConstraintError):
    """The value lies below the allowed minimum."""


class AboveMaximumError(ConstraintError):
    """The value lies above the allowed maximum."""


def _check_not_nan(value: float) -> None:
    if math.isnan(value):
        raise NotANumberError("value is not a number")


def _check_strictly_positive(value: float) -> None:
    _check_not_nan(value)
    if value <= 0.0:
        raise BelowMinimumError(f"value must be strictly positive, got {value}")


def _check_non_negative(value: float) -> None:
    _check_not_nan(value)
    if value < 0.0:
        raise BelowMinimumError(f"value must be non-negative, got {value}")


def _check_unit_interval(value: float) -> None:
    _check_not_nan(value)
    if value < 0.0:
        raise BelowMinimumError(f"value must be at least 0, got {value}")
    if value > 1.0:
        raise AboveMaximumError(f"value must be at most 1, got {value}")


@dataclass(frozen=True, order=True)
class CapacitanceRate:
    """Capacitance rate (mass rate times specific heat) in W/K; strictly positive."""

    value: float

    def __post_init__(self) -> None:
        _check_strictly_positive(self.value)

    def __float__(self) -> float:
        return self.value

    @classmethod
    def from_mass_rate_and_specific_heat(
        cls, mass_rate: float, specific_heat: float
    ) -> CapacitanceRate:
        """Build from a mass rate in kg/s and a specific heat in J/(kg*K)."""
        return cls(mass_rate * specific_heat)


@dataclass(frozen=True)
class CapacityRatio:
    """Capacity ratio ``C_min / C_max``, within the closed interval [0, 1]."""

    value: float

    def __post_init__(self) -> None:
        _check_unit_interval(self.value)

    def __float__(self) -> float:
        return self.value

    @classmethod
    def from_capacitance_rates(
        cls, capacitance_rates: Sequence[CapacitanceRate]
    ) -> CapacityRatio:
        """Build from the capacitance rates of the two streams."""
        first, second = capacitance_rates
        low = min(first.value, second.value)
        high = max(first.value, second.value)
        return cls(low / high)


@dataclass(frozen=True)
class Effectiveness:
    """Heat exchanger effectiveness, within the closed interval [0, 1]."""

    value: float

    def __post_init__(self) -> None:
        _check_unit_interval(self.value)

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True, order=True)
class Ntu:
    """Number of transfer units; non-negative."""

    value: float

    def __post_init__(self) -> None:
        _check_non_negative(self.value)

    def __float__(self) -> float:
        return self.value

    @classmethod
    def from_conductance_and_capacitance_rates(
        cls, ua: float, capacitance_rates: Sequence[CapacitanceRate]
    ) -> Ntu:
        """Build from a conductance ``ua`` in W/K and both streams' capacitance rates."""
        first, second = capacitance_rates
        return cls(ua / min(first.value, second.value))


def _ln(x: float) -> float:
    if x == 0.0:
        return -math.inf
    if x < 0.0:
        return math.nan
    return math.log(x)


def effectiveness_via(
    ntu: Ntu,
    capacitance_rates: Sequence[CapacitanceRate],
    fn_raw: Callable[[float, float], float],
) -> Effectiveness:
    """Compute effectiveness with ``fn_raw(ntu, cr)``, handling ``cr == 0`` generically."""
    cr = CapacityRatio.from_capacitance_rates(capacitance_rates).value
    if cr == 0.0:
        return Effectiveness(1.0 - math.exp(-ntu.value))
    return Effectiveness(fn_raw(ntu.value, cr))


def ntu_via(
    effectiveness: Effectiveness,
    capacitance_rates: Sequence[CapacitanceRate],
    fn_raw: Callable[[float, float], float],
) -> Ntu:
    """Compute NTU with ``fn_raw(effectiveness, cr)``, handling ``cr == 0`` generically."""
    cr = CapacityRatio.from_capacitance_rates(capacitance_rates).value
    if cr == 0.0:
        return Ntu(-_ln(1.0 - effectiveness.value))
    return Ntu(fn_raw(effectiveness.value, cr))