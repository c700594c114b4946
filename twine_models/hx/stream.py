"""Inlet and fully resolved streams of a heat exchanger.

Temperatures are absolute, in kelvin; heat rates are in watts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from twine_models.hx.flow import FlowDirection, HeatFlow
from twine_models.hx.quantities import CapacitanceRate
from twine_models.units import temperature_difference


@dataclass(frozen=True)
class StreamInlet:
    """Inlet state of a stream; the fluid's specific heat is taken as constant."""

    capacitance_rate: CapacitanceRate
    temperature: float

    def with_heat_flow(self, heat_flow: HeatFlow) -> Stream:
        """Resolve this inlet into a full stream carrying ``heat_flow``."""
        return Stream.from_heat_flow(self.capacitance_rate, self.temperature, heat_flow)


@dataclass(frozen=True)
class Stream:
    """A fully resolved heat exchanger stream."""

    capacitance_rate: CapacitanceRate
    inlet_temperature: float
    outlet_temperature: float
    heat_flow: HeatFlow

    @classmethod
    def from_heat_flow(
        cls,
        capacitance_rate: CapacitanceRate,
        inlet_temperature: float,
        heat_flow: HeatFlow,
    ) -> Stream:
        """Build a stream from a known heat flow, using ``Q = C * (T_out - T_in)``."""
        change = heat_flow.magnitude / capacitance_rate.value
        if heat_flow.direction is FlowDirection.IN:
            outlet = inlet_temperature + change
        elif heat_flow.direction is FlowDirection.OUT:
            outlet = inlet_temperature - change
        else:
            outlet = inlet_temperature
        return cls(capacitance_rate, inlet_temperature, outlet, heat_flow)

    @classmethod
    def from_outlet_temperature(
        cls,
        capacitance_rate: CapacitanceRate,
        inlet_temperature: float,
        outlet_temperature: float,
    ) -> Stream:
        """Build a stream from known inlet and outlet temperatures.

        Raises ``ValueError`` if either temperature is NaN.
        """
        if math.isnan(inlet_temperature) or math.isnan(outlet_temperature):
            raise ValueError("temperatures must be comparable numbers")
        magnitude = capacitance_rate.value * abs(
            temperature_difference(inlet_temperature, outlet_temperature)
        )
        if inlet_temperature < outlet_temperature:
            heat_flow = HeatFlow.incoming(magnitude)
        elif inlet_temperature > outlet_temperature:
            heat_flow = HeatFlow.outgoing(magnitude)
        else:
            heat_flow = HeatFlow.none()
        return cls(capacitance_rate, inlet_temperature, outlet_temperature, heat_flow)

    def inlet(self) -> StreamInlet:
        """Return the inlet conditions of this stream."""
        return StreamInlet(self.capacitance_rate, self.inlet_temperature)