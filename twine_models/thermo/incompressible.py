"""Incompressible liquid model with constant heat capacity.

Density is constant, ``cp`` is constant and ``cv`` is taken equal to ``cp``.
Pressure effects are not modelled. Enthalpy and entropy are reported relative
to a configurable reference state (``T_ref``, ``rho_ref``, ``h_ref``,
``s_ref``).

Units are SI: temperature in K, density in kg/m^3, specific enthalpy and
internal energy in J/kg, specific entropy and heat capacities in J/(kg*K).
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from twine_models.thermo.capability import (
    HasCp,
    HasCv,
    HasEnthalpy,
    HasEntropy,
    HasInternalEnergy,
)
from twine_models.thermo.state import State
from twine_models.units import celsius_to_kelvin, temperature_difference


def _ln(x: float) -> float:
    if x == 0.0:
        return -math.inf
    if x < 0.0 or math.isnan(x):
        return math.nan
    return math.log(x)


def _is_strictly_positive(value: float) -> bool:
    return value > 0.0


class IncompressibleParametersError(ValueError):
    """The constants given for an incompressible liquid are invalid.

    ``field`` names the offending parameter (``"cp"``,
    ``"reference_temperature"`` or ``"reference_density"``) and ``values``
    holds the quantity involved.
    """

    def __init__(self, message: str, field: str, **values: float) -> None:
        super().__init__(message)
        self.field = field
        self.values = values


@dataclass(frozen=True)
class IncompressibleReference:
    """Reference values that fix the enthalpy and entropy offsets."""

    temperature: float
    density: float
    enthalpy: float = 0.0
    entropy: float = 0.0

    @classmethod
    def standard(cls, density: float) -> IncompressibleReference:
        """Return 25 degC with zero enthalpy and entropy at the given density."""
        return cls(
            temperature=celsius_to_kelvin(25.0),
            density=density,
            enthalpy=0.0,
            entropy=0.0,
        )


@dataclass(frozen=True)
class IncompressibleParameters:
    """Constant parameters of an incompressible liquid."""

    cp: float
    reference: IncompressibleReference

    @classmethod
    def standard(cls, cp: float, reference_density: float) -> IncompressibleParameters:
        """Parameters with the standard reference state at ``reference_density``."""
        return cls(cp, IncompressibleReference.standard(reference_density))

    def with_reference(
        self, reference: IncompressibleReference
    ) -> IncompressibleParameters:
        """Return a copy using ``reference`` as the reference state."""
        return dataclasses.replace(self, reference=reference)


class _IncompressibleFluid(Protocol):
    @classmethod
    def parameters(cls) -> IncompressibleParameters: ...


class Incompressible(HasInternalEnergy, HasEnthalpy, HasEntropy, HasCp, HasCv):
    """Incompressible liquid with constant density and constant heat capacity.

    ``fluid_type`` is a fluid class whose ``parameters()`` gives the liquid's
    constants; an instance made with no arguments is the default fluid.
    """

    def __init__(self, fluid_type: type[_IncompressibleFluid]) -> None:
        parameters = fluid_type.parameters()

        cp = parameters.cp
        if not _is_strictly_positive(cp):
            raise IncompressibleParametersError(f"invalid cp: {cp}", "cp", cp=cp)

        t_ref = parameters.reference.temperature
        if not _is_strictly_positive(t_ref):
            raise IncompressibleParametersError(
                f"invalid reference temperature: {t_ref}",
                "reference_temperature",
                t_ref=t_ref,
            )

        rho_ref = parameters.reference.density
        if not _is_strictly_positive(rho_ref):
            raise IncompressibleParametersError(
                f"invalid reference density: {rho_ref}",
                "reference_density",
                rho_ref=rho_ref,
            )

        self._fluid_type = fluid_type
        self._cp = cp
        self._t_ref = t_ref
        self._rho_ref = rho_ref
        self._h_ref = parameters.reference.enthalpy
        self._s_ref = parameters.reference.entropy

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fluid_type.__name__})"

    def _default_fluid(self) -> Any:
        return self._fluid_type()

    @property
    def reference_density(self) -> float:
        """The constant density used by this model."""
        return self._rho_ref

    def reference_state(self, fluid: Any) -> State:
        """Return a state at the reference temperature and density."""
        return State(temperature=self._t_ref, density=self._rho_ref, fluid=fluid)

    def internal_energy(self, state: State) -> float:
        """Internal energy, equal to enthalpy for an incompressible liquid."""
        return self.enthalpy(state)

    def enthalpy(self, state: State) -> float:
        """Enthalpy from ``h = h_ref + c * (T - T_ref)``."""
        return self._h_ref + self._cp * temperature_difference(
            state.temperature, self._t_ref
        )

    def entropy(self, state: State) -> float:
        """Entropy from ``s = s_ref + c * ln(T / T_ref)``."""
        return self._s_ref + self._cp * _ln(state.temperature / self._t_ref)

    def cp(self, state: State) -> float:
        """The constant specific heat."""
        return self._cp

    def cv(self, state: State) -> float:
        """The constant specific heat, equal to cp."""
        return self._cp

    def state_from(self, temperature: float, fluid: Optional[Any] = None) -> State:
        """Create a state at ``temperature`` and the reference density.

        When ``fluid`` is omitted the model's default fluid is used.
        """
        if fluid is None:
            fluid = self._default_fluid()
        return State(temperature=temperature, density=self._rho_ref, fluid=fluid)