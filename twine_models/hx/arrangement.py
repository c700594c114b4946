"""Flow arrangements and their effectiveness-NTU relationships."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Sequence

from twine_models.hx.quantities import (
    CapacitanceRate,
    Effectiveness,
    Ntu,
    effectiveness_via,
    ntu_via,
)

_U16_MAX = 65535


def _ln(x: float) -> float:
    if x == 0.0:
        return -math.inf
    if x < 0.0:
        return math.nan
    return math.log(x)


@dataclass(frozen=True)
class CounterFlow:
    """Counter-flow heat exchanger arrangement."""

    def effectiveness(
        self, ntu: Ntu, capacitance_rates: Sequence[CapacitanceRate]
    ) -> Effectiveness:
        """Effectiveness for the given NTU and stream capacitance rates."""

        def raw(n: float, cr: float) -> float:
            if cr < 1.0:
                decay = math.exp(-n * (1.0 - cr))
                return (1.0 - decay) / (1.0 - cr * decay)
            return n / (1.0 + n)

        return effectiveness_via(ntu, capacitance_rates, raw)

    def ntu(
        self, effectiveness: Effectiveness, capacitance_rates: Sequence[CapacitanceRate]
    ) -> Ntu:
        """NTU for the given effectiveness and stream capacitance rates."""

        def raw(eff: float, cr: float) -> float:
            if cr < 1.0:
                return _ln((1.0 - eff * cr) / (1.0 - eff)) / (1.0 - cr)
            return eff / (1.0 - eff)

        return ntu_via(effectiveness, capacitance_rates, raw)


@dataclass(frozen=True)
class ParallelFlow:
    """Parallel-flow heat exchanger arrangement."""

    def effectiveness(
        self, ntu: Ntu, capacitance_rates: Sequence[CapacitanceRate]
    ) -> Effectiveness:
        """Effectiveness for the given NTU and stream capacitance rates."""
        return effectiveness_via(
            ntu,
            capacitance_rates,
            lambda n, cr: (1.0 - math.exp(-n * (1.0 + cr))) / (1.0 + cr),
        )

    def ntu(
        self, effectiveness: Effectiveness, capacitance_rates: Sequence[CapacitanceRate]
    ) -> Ntu:
        """NTU for the given effectiveness and stream capacitance rates."""
        return ntu_via(
            effectiveness,
            capacitance_rates,
            lambda eff, cr: -_ln(1.0 - eff * (1.0 + cr)) / (1.0 + cr),
        )


class Mixing(enum.Enum):
    """Whether a cross-flow stream is mixed across its flow channel."""

    MIXED = "mixed"
    UNMIXED = "unmixed"


@dataclass(frozen=True)
class CrossFlow:
    """Cross-flow heat exchanger arrangement.

    ``first`` and ``second`` give the mixing state of the first and second
    stream, in the same order as the capacitance rates passed to the methods.
    """

    first: Mixing
    second: Mixing

    def effectiveness(
        self, ntu: Ntu, capacitance_rates: Sequence[CapacitanceRate]
    ) -> Effectiveness:
        """Effectiveness for the given NTU and stream capacitance rates."""
        pair = (self.first, self.second)
        if pair == (Mixing.UNMIXED, Mixing.UNMIXED):
            return effectiveness_via(
                ntu,
                capacitance_rates,
                lambda n, cr: 1.0
                - math.exp((n**0.22 / cr) * (math.exp(-cr * n**0.78) - 1.0)),
            )
        if pair == (Mixing.MIXED, Mixing.MIXED):
            return effectiveness_via(
                ntu,
                capacitance_rates,
                lambda n, cr: 1.0
                / (
                    1.0 / (1.0 - math.exp(-n))
                    + cr / (1.0 - math.exp(-cr * n))
                    - 1.0 / n
                ),
            )
        first, second = capacitance_rates
        if pair == (Mixing.UNMIXED, Mixing.MIXED):
            first, second = second, first
        if first.value >= second.value:
            return effectiveness_via(
                ntu,
                (first, second),
                lambda n, cr: (1.0 - math.exp(cr * (math.exp(-n) - 1.0))) / cr,
            )
        return effectiveness_via(
            ntu,
            (first, second),
            lambda n, cr: 1.0 - math.exp(-((1.0 - math.exp(-cr * n)) / cr)),
        )

    def ntu(
        self, effectiveness: Effectiveness, capacitance_rates: Sequence[CapacitanceRate]
    ) -> Ntu:
        """NTU for the given effectiveness; only one-mixed, one-unmixed arrangements."""
        pair = (self.first, self.second)
        if self.first is self.second:
            raise ValueError(
                f"no NTU relation for cross flow with both streams {self.first.value}"
            )
        first, second = capacitance_rates
        if pair == (Mixing.UNMIXED, Mixing.MIXED):
            first, second = second, first
        if first.value >= second.value:
            return ntu_via(
                effectiveness,
                (first, second),
                lambda eff, cr: -_ln(1.0 + _ln(1.0 - eff * cr) / cr),
            )
        return ntu_via(
            effectiveness,
            (first, second),
            lambda eff, cr: -_ln(cr * _ln(1.0 - eff) + 1.0) / cr,
        )


class ShellAndTubeConfigIssue(enum.Enum):
    """Reasons a shell-and-tube pass configuration is rejected."""

    ZERO_SHELL_PASSES = "shell pass count must be at least 1"
    SHELL_PASS_OVERFLOW = "shell pass count is too large"
    INSUFFICIENT_TUBE_PASSES = "tube passes must be at least twice the shell passes"
    TUBE_PASSES_NOT_MULTIPLE = "tube passes must be an even multiple of shell passes"


class ShellAndTubeConfigError(ValueError):
    """An invalid shell-and-tube pass configuration."""

    def __init__(self, issue: ShellAndTubeConfigIssue) -> None:
        super().__init__(issue.value)
        self.issue = issue


def _eff_single_shell(ntu_1: float, cr: float) -> float:
    root = math.sqrt(1.0 + cr**2)
    decay = math.exp(-ntu_1 * root)
    return 2.0 / (1.0 + cr + root * (1.0 + decay) / (1.0 - decay))


def _ntu_single_shell(eff_1: float, cr: float) -> float:
    root = math.sqrt(1.0 + cr**2)
    e = (2.0 - eff_1 * (1.0 + cr)) / (eff_1 * root)
    return _ln((e + 1.0) / (e - 1.0)) / root


@dataclass(frozen=True)
class ShellAndTube:
    """Shell-and-tube arrangement with ``shell_passes`` shells and ``tube_passes`` tube passes.

    Supported are one shell pass with any even number of tube passes, or N
    shell passes with a tube pass count that is an even multiple of N.
    """

    shell_passes: int
    tube_passes: int

    def __post_init__(self) -> None:
        s, t = self.shell_passes, self.tube_passes
        for name, value in (("shell_passes", s), ("tube_passes", t)):
            if not 0 <= value <= _U16_MAX:
                raise ValueError(f"{name} must lie in [0, {_U16_MAX}], got {value}")
        if s == 0:
            raise ShellAndTubeConfigError(ShellAndTubeConfigIssue.ZERO_SHELL_PASSES)
        if s > _U16_MAX // 2:
            raise ShellAndTubeConfigError(ShellAndTubeConfigIssue.SHELL_PASS_OVERFLOW)
        if t < 2 * s:
            raise ShellAndTubeConfigError(
                ShellAndTubeConfigIssue.INSUFFICIENT_TUBE_PASSES
            )
        if t % (2 * s) != 0:
            raise ShellAndTubeConfigError(
                ShellAndTubeConfigIssue.TUBE_PASSES_NOT_MULTIPLE
            )

    def effectiveness(
        self, ntu: Ntu, capacitance_rates: Sequence[CapacitanceRate]
    ) -> Effectiveness:
        """Effectiveness for the given NTU and stream capacitance rates."""
        shells = self.shell_passes
        if shells == 1:
            return effectiveness_via(ntu, capacitance_rates, _eff_single_shell)

        def raw(ntu_1: float, cr: float) -> float:
            eff_1 = _eff_single_shell(ntu_1, cr)
            if cr < 1.0:
                factor = ((1.0 - eff_1 * cr) / (1.0 - eff_1)) ** shells
                return (factor - 1.0) / (factor - cr)
            return (shells * eff_1) / (1.0 + eff_1 * (shells - 1.0))

        return effectiveness_via(ntu, capacitance_rates, raw)

    def ntu(
        self, effectiveness: Effectiveness, capacitance_rates: Sequence[CapacitanceRate]
    ) -> Ntu:
        """NTU for the given effectiveness and stream capacitance rates."""
        shells = self.shell_passes
        if shells == 1:
            return ntu_via(effectiveness, capacitance_rates, _ntu_single_shell)

        def raw(eff: float, cr: float) -> float:
            if cr < 1.0:
                base = (eff * cr - 1.0) / (eff - 1.0)
                f = math.pow(base, 1.0 / shells) if base >= 0.0 else math.nan
                eff_1 = (f - 1.0) / (f - cr)
            else:
                eff_1 = eff / (shells - eff * (shells - 1.0))
            return _ntu_single_shell(eff_1, cr)

        return ntu_via(effectiveness, capacitance_rates, raw)