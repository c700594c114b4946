"""Functional helpers for common heat exchanger calculations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple

from twine_models.hx.flow import HeatFlow
from twine_models.hx.quantities import (
    AboveMaximumError,
    CapacitanceRate,
    Effectiveness,
    NotANumberError,
    Ntu,
)
from twine_models.hx.stream import Stream, StreamInlet
from twine_models.units import temperature_difference


class _EffectivenessRelation(Protocol):
    def effectiveness(
        self, ntu: Ntu, capacitance_rates: Sequence[CapacitanceRate]
    ) -> Effectiveness: ...


class _NtuRelation(Protocol):
    def ntu(
        self, effectiveness: Effectiveness, capacitance_rates: Sequence[CapacitanceRate]
    ) -> Ntu: ...


@dataclass(frozen=True)
class KnownConductanceResult:
    """Resolved exchanger state from :func:`known_conductance_and_inlets`."""

    streams: Tuple[Stream, Stream]
    effectiveness: Effectiveness


@dataclass(frozen=True)
class KnownConditionsResult:
    """Resolved exchanger state and required UA from :func:`known_conditions_and_inlets`."""

    streams: Tuple[Stream, Stream]
    ua: float
    ntu: Ntu


def _max_heat_flow(inlets: Sequence[StreamInlet]) -> Tuple[Stream, Stream]:
    first, second = inlets
    c_min = min(first.capacitance_rate.value, second.capacitance_rate.value)
    q_max = c_min * temperature_difference(first.temperature, second.temperature)
    if math.isnan(q_max):
        raise NotANumberError("maximum heat flow is not a number")
    if q_max < 0.0:
        return (
            first.with_heat_flow(HeatFlow.incoming(-q_max)),
            second.with_heat_flow(HeatFlow.outgoing(-q_max)),
        )
    if q_max > 0.0:
        return (
            first.with_heat_flow(HeatFlow.outgoing(q_max)),
            second.with_heat_flow(HeatFlow.incoming(q_max)),
        )
    return (
        first.with_heat_flow(HeatFlow.none()),
        second.with_heat_flow(HeatFlow.none()),
    )


def known_conductance_and_inlets(
    arrangement: _EffectivenessRelation,
    ua: float,
    inlets: Sequence[StreamInlet],
) -> KnownConductanceResult:
    """Resolve both streams given the conductance ``ua`` (W/K) and both inlets.

    Raises a ``ConstraintError`` if any quantity violates its constraints.
    """
    first, second = inlets
    max_streams = _max_heat_flow((first, second))
    rates = (first.capacitance_rate, second.capacitance_rate)
    effectiveness = arrangement.effectiveness(
        Ntu.from_conductance_and_capacitance_rates(ua, rates), rates
    )
    streams = tuple(
        inlet.with_heat_flow(
            HeatFlow.from_signed(effectiveness.value * resolved.heat_flow.signed())
        )
        for inlet, resolved in zip((first, second), max_streams)
    )
    return KnownConductanceResult(streams=streams, effectiveness=effectiveness)


def known_conditions_and_inlets(
    arrangement: _NtuRelation,
    streams: Tuple[StreamInlet, Stream],
) -> KnownConditionsResult:
    """Find the UA and NTU needed for one inlet and one fully resolved stream.

    Raises ``AboveMaximumError`` if the resolved stream's heat flow exceeds the
    maximum possible, including any heat flow when both inlets are equally hot.
    """
    inlet, resolved = streams
    max_streams = _max_heat_flow((inlet, resolved.inlet()))
    rates = (inlet.capacitance_rate, resolved.capacitance_rate)

    max_heat = abs(max_streams[0].heat_flow.signed())
    actual_heat = abs(resolved.heat_flow.signed())

    if max_heat == 0.0:
        if actual_heat != 0.0:
            raise AboveMaximumError(
                "non-zero heat flow is impossible between inlets at equal temperature"
            )
        return KnownConditionsResult(
            streams=(inlet.with_heat_flow(HeatFlow.none()), resolved),
            ua=0.0,
            ntu=Ntu(0.0),
        )

    effectiveness = Effectiveness(actual_heat / max_heat)
    ntu = arrangement.ntu(effectiveness, rates)
    first = inlet.with_heat_flow(
        HeatFlow.from_signed(effectiveness.value * max_streams[0].heat_flow.signed())
    )
    c_min = min(rates[0].value, rates[1].value)
    return KnownConditionsResult(
        streams=(first, resolved),
        ua=ntu.value * c_min,
        ntu=ntu,
    )