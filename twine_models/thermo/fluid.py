"""Canonical fluid identifiers.

A fluid type names a substance; each model decides how that name is
interpreted, for instance through the constants returned by ``parameters()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from twine_models.thermo.incompressible import IncompressibleParameters
from twine_models.thermo.perfect_gas import PerfectGasParameters


@dataclass(frozen=True)
class Air:
    """Dry air."""

    @classmethod
    def parameters(cls) -> PerfectGasParameters:
        """Perfect gas constants: R = 287.053 J/(kg*K), cp = 1005 J/(kg*K)."""
        return PerfectGasParameters.standard(287.053, 1005.0)


@dataclass(frozen=True)
class CarbonDioxide:
    """Carbon dioxide."""

    @classmethod
    def parameters(cls) -> PerfectGasParameters:
        """Perfect gas constants: R = 188.92 J/(kg*K), cp = 844 J/(kg*K)."""
        return PerfectGasParameters.standard(188.92, 844.0)


@dataclass(frozen=True)
class Water:
    """Liquid water."""

    @classmethod
    def parameters(cls) -> IncompressibleParameters:
        """Incompressible constants: cp = 4184 J/(kg*K), rho = 997.047 kg/m^3."""
        return IncompressibleParameters.standard(4184.0, 997.047)