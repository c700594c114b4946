"""Calorically perfect gas model.

An ideal gas equation of state, ``p = rho * R * T``, with constant heat
capacities. Enthalpy and entropy are reported relative to a configurable
reference state (``T_ref``, ``p_ref``, ``h_ref``, ``s_ref``).

Units are SI: temperature in K, pressure in Pa, density in kg/m^3, specific
enthalpy and internal energy in J/kg, specific entropy, heat capacities and
the gas constant in J/(kg*K).
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from twine_models.thermo import ideal_gas_eos
from twine_models.thermo.capability import (
    HasCp,
    HasCv,
    HasEnthalpy,
    HasEntropy,
    HasInternalEnergy,
    HasPressure,
    StateFrom,
)
from twine_models.thermo.state import State
from twine_models.units import celsius_to_kelvin, temperature_difference

_STANDARD_ATMOSPHERE = 101_325.0


def _ln(x: float) -> float:
    if x == 0.0:
        return -math.inf
    if x < 0.0 or math.isnan(x):
        return math.nan
    return math.log(x)


def _is_strictly_positive(value: float) -> bool:
    return value > 0.0


class PerfectGasParametersError(ValueError):
    """The constants given for a perfect gas are invalid or non-physical.

    ``field`` names the offending parameter (``"gas_constant"``, ``"cp"``,
    ``"reference_temperature"``, ``"reference_pressure"`` or ``"cv"``) and
    ``values`` holds the quantities involved.
    """

    def __init__(self, message: str, field: str, **values: float) -> None:
        super().__init__(message)
        self.field = field
        self.values = values


@dataclass(frozen=True)
class PerfectGasReference:
    """Reference values that fix the enthalpy and entropy offsets."""

    temperature: float
    pressure: float
    enthalpy: float = 0.0
    entropy: float = 0.0

    @classmethod
    def standard(cls) -> PerfectGasReference:
        """Return 0 degC, 1 atm, with zero reference enthalpy and entropy."""
        return cls(
            temperature=celsius_to_kelvin(0.0),
            pressure=_STANDARD_ATMOSPHERE,
            enthalpy=0.0,
            entropy=0.0,
        )


@dataclass(frozen=True)
class PerfectGasParameters:
    """Constant parameters of a perfect gas."""

    gas_constant: float
    cp: float
    reference: PerfectGasReference = dataclasses.field(
        default_factory=PerfectGasReference.standard
    )

    @classmethod
    def standard(cls, gas_constant: float, cp: float) -> PerfectGasParameters:
        """Parameters with the standard reference state."""
        return cls(gas_constant, cp, PerfectGasReference.standard())

    def with_reference(self, reference: PerfectGasReference) -> PerfectGasParameters:
        """Return a copy using ``reference`` as the reference state."""
        return dataclasses.replace(self, reference=reference)


class _PerfectGasFluid(Protocol):
    @classmethod
    def parameters(cls) -> PerfectGasParameters: ...


class PerfectGas(
    HasPressure, HasInternalEnergy, HasEnthalpy, HasEntropy, HasCp, HasCv, StateFrom
):
    """Perfect gas model (constant cp and cv) using the ideal gas law.

    ``fluid_type`` is a fluid class whose ``parameters()`` gives the gas
    constants; an instance made with no arguments is the default fluid.
    """

    supported_inputs = frozenset(
        frozenset(pair)
        for pair in (
            ("temperature", "density"),
            ("temperature", "pressure"),
            ("pressure", "density"),
            ("pressure", "enthalpy"),
            ("pressure", "entropy"),
            ("enthalpy", "entropy"),
        )
    )

    def __init__(self, fluid_type: type[_PerfectGasFluid]) -> None:
        parameters = fluid_type.parameters()

        r = parameters.gas_constant
        if not _is_strictly_positive(r):
            raise PerfectGasParametersError(
                f"invalid gas constant R: {r}", "gas_constant", r=r
            )

        cp = parameters.cp
        if not _is_strictly_positive(cp):
            raise PerfectGasParametersError(f"invalid cp: {cp}", "cp", cp=cp)

        t_ref = parameters.reference.temperature
        if not _is_strictly_positive(t_ref):
            raise PerfectGasParametersError(
                f"invalid reference temperature: {t_ref}",
                "reference_temperature",
                t_ref=t_ref,
            )

        p_ref = parameters.reference.pressure
        if not _is_strictly_positive(p_ref):
            raise PerfectGasParametersError(
                f"invalid reference pressure: {p_ref}",
                "reference_pressure",
                p_ref=p_ref,
            )

        cv = cp - r
        if not _is_strictly_positive(cv):
            raise PerfectGasParametersError(
                "non-physical heat capacities: cv = cp - R must be > 0; "
                f"cp={cp}, R={r}, cv={cv}",
                "cv",
                r=r,
                cp=cp,
                cv=cv,
            )

        self._fluid_type = fluid_type
        self._r = r
        self._cp = cp
        self._cv = cv
        self._t_ref = t_ref
        self._p_ref = p_ref
        self._h_ref = parameters.reference.enthalpy
        self._s_ref = parameters.reference.entropy

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fluid_type.__name__})"

    def _default_fluid(self) -> Any:
        return self._fluid_type()

    def reference_state(self, fluid: Any) -> State:
        """Return a state at the reference temperature and pressure."""
        density = ideal_gas_eos.density(self._t_ref, self._p_ref, self._r)
        return State(temperature=self._t_ref, density=density, fluid=fluid)

    def pressure(self, state: State) -> float:
        """Pressure from ``p = rho * R * T``."""
        return ideal_gas_eos.pressure(state.temperature, state.density, self._r)

    def internal_energy(self, state: State) -> float:
        """Internal energy from ``u = h - R * T``."""
        return self.enthalpy(state) - self._r * state.temperature

    def enthalpy(self, state: State) -> float:
        """Enthalpy from ``h = h_ref + cp * (T - T_ref)``."""
        return self._h_ref + self._cp * temperature_difference(
            state.temperature, self._t_ref
        )

    def entropy(self, state: State) -> float:
        """Entropy from ``s = s_ref + cp * ln(T / T_ref) - R * ln(p / p_ref)``."""
        p = self.pressure(state)
        return (
            self._s_ref
            + self._cp * _ln(state.temperature / self._t_ref)
            - self._r * _ln(p / self._p_ref)
        )

    def cp(self, state: State) -> float:
        """The constant specific heat at constant pressure."""
        return self._cp

    def cv(self, state: State) -> float:
        """The constant specific heat at constant volume."""
        return self._cv

    def state_from(
        self,
        *,
        fluid: Any = None,
        temperature: Optional[float] = None,
        density: Optional[float] = None,
        pressure: Optional[float] = None,
        enthalpy: Optional[float] = None,
        entropy: Optional[float] = None,
    ) -> State:
        """Create a state from two inputs.

        Supported pairs are temperature and density, temperature and
        pressure, pressure and density, pressure and enthalpy, pressure and
        entropy, and enthalpy and entropy. Raises ``TypeError`` otherwise.
        """
        return super().state_from(
            fluid=fluid,
            temperature=temperature,
            density=density,
            pressure=pressure,
            enthalpy=enthalpy,
            entropy=entropy,
        )

    def _temperature_from_enthalpy(self, enthalpy: float) -> float:
        return self._t_ref + (enthalpy - self._h_ref) / self._cp

    def _state_from(self, fluid: Any, **inputs: float) -> State:
        keys = frozenset(inputs)
        r = self._r

        if keys == {"temperature", "density"}:
            temperature = inputs["temperature"]
            density = inputs["density"]
        elif keys == {"temperature", "pressure"}:
            temperature = inputs["temperature"]
            density = ideal_gas_eos.density(temperature, inputs["pressure"], r)
        elif keys == {"pressure", "density"}:
            density = inputs["density"]
            temperature = ideal_gas_eos.temperature(inputs["pressure"], density, r)
        elif keys == {"pressure", "enthalpy"}:
            pressure = inputs["pressure"]
            temperature = self._temperature_from_enthalpy(inputs["enthalpy"])
            density = ideal_gas_eos.density(temperature, pressure, r)
        elif keys == {"pressure", "entropy"}:
            pressure = inputs["pressure"]
            exponent = (
                (inputs["entropy"] - self._s_ref) + r * _ln(pressure / self._p_ref)
            ) / self._cp
            temperature = self._t_ref * math.exp(exponent)
            density = ideal_gas_eos.density(temperature, pressure, r)
        else:
            temperature = self._temperature_from_enthalpy(inputs["enthalpy"])
            exponent = (
                self._cp * _ln(temperature / self._t_ref)
                + self._s_ref
                - inputs["entropy"]
            ) / r
            pressure = self._p_ref * math.exp(exponent)
            density = ideal_gas_eos.density(temperature, pressure, r)

        return State(temperature=temperature, density=density, fluid=fluid)