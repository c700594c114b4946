"""The thermodynamic state of a fluid.

Temperature is absolute, in kelvin; density is in kg/m^3.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

FluidT = TypeVar("FluidT")


@dataclass(frozen=True)
class State(Generic[FluidT]):
    """Temperature, density and fluid that together fix a thermodynamic state.

    The fluid may be a plain marker such as ``Air()`` or carry state-defining
    data such as a mixture composition.
    """

    temperature: float
    density: float
    fluid: Any

    def with_temperature(self, temperature: float) -> State[FluidT]:
        """Return a copy with a new temperature."""
        return dataclasses.replace(self, temperature=temperature)

    def with_density(self, density: float) -> State[FluidT]:
        """Return a copy with a new density."""
        return dataclasses.replace(self, density=density)

    def with_fluid(self, fluid: Any) -> State[FluidT]:
        """Return a copy with a new fluid."""
        return dataclasses.replace(self, fluid=fluid)