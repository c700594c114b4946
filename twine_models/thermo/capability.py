"""Capabilities used to query and construct thermodynamic states.

A model advertises what it can compute by deriving from these base classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Optional

from twine_models.thermo.state import State

_INPUT_NAMES = ("temperature", "density", "pressure", "enthalpy", "entropy")


class ThermoModel(ABC):
    """Base of all thermodynamic property models."""

    def _default_fluid(self) -> Any:
        """Return the fluid used when none is given; models with a default override this."""
        raise TypeError(f"{type(self).__name__} needs an explicit fluid")


class HasPressure(ThermoModel):
    """Models that can compute pressure in Pa."""

    @abstractmethod
    def pressure(self, state: State) -> float:
        """Return the pressure for ``state``; raises ``PropertyError`` on failure."""


class HasInternalEnergy(ThermoModel):
    """Models that can compute specific internal energy in J/kg."""

    @abstractmethod
    def internal_energy(self, state: State) -> float:
        """Return the specific internal energy; raises ``PropertyError`` on failure."""


class HasEnthalpy(ThermoModel):
    """Models that can compute specific enthalpy in J/kg."""

    @abstractmethod
    def enthalpy(self, state: State) -> float:
        """Return the specific enthalpy; raises ``PropertyError`` on failure."""


class HasEntropy(ThermoModel):
    """Models that can compute specific entropy in J/(kg*K)."""

    @abstractmethod
    def entropy(self, state: State) -> float:
        """Return the specific entropy; raises ``PropertyError`` on failure."""


class HasCp(ThermoModel):
    """Models that can compute the specific heat at constant pressure in J/(kg*K)."""

    @abstractmethod
    def cp(self, state: State) -> float:
        """Return cp for ``state``; raises ``PropertyError`` on failure."""


class HasCv(ThermoModel):
    """Models that can compute the specific heat at constant volume in J/(kg*K)."""

    @abstractmethod
    def cv(self, state: State) -> float:
        """Return cv for ``state``; raises ``PropertyError`` on failure."""


class StateFrom(ThermoModel):
    """Models that can build a :class:`State` from a combination of inputs.

    ``supported_inputs`` lists the accepted combinations of input names. When
    no fluid is given, the model's default fluid is used.
    """

    supported_inputs: FrozenSet[FrozenSet[str]] = frozenset()

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
        """Create a state from the given inputs.

        Raises ``TypeError`` if the combination of inputs is not supported.
        """
        values = (temperature, density, pressure, enthalpy, entropy)
        given = {
            name: value
            for name, value in zip(_INPUT_NAMES, values)
            if value is not None
        }
        if frozenset(given) not in self.supported_inputs:
            names = ", ".join(sorted(given)) or "no inputs"
            raise TypeError(
                f"{type(self).__name__} cannot create a state from {names}"
            )
        if fluid is None:
            fluid = self._default_fluid()
        return self._state_from(fluid, **given)

    @abstractmethod
    def _state_from(self, fluid: Any, **inputs: float) -> State:
        """Build the state from a supported combination of inputs."""