"""Heat flow across a system boundary."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from twine_models.hx.quantities import (
    BelowMinimumError,
    ConstraintError,
    NotANumberError,
)


class FlowDirection(enum.Enum):
    """Direction of heat flow relative to the system."""

    IN = "in"
    OUT = "out"
    NONE = "none"


@dataclass(frozen=True)
class HeatFlow:
    """Heat flow with a direction and a non-negative magnitude in watts."""

    direction: FlowDirection
    magnitude: float = 0.0

    def __post_init__(self) -> None:
        if self.direction is FlowDirection.NONE:
            if self.magnitude != 0.0:
                raise ConstraintError("a heat flow of NONE must have zero magnitude")
            return
        if math.isnan(self.magnitude):
            raise NotANumberError("heat rate is not a number")
        if self.magnitude <= 0.0:
            raise BelowMinimumError(
                f"heat rate must be strictly positive, got {self.magnitude}"
            )

    @classmethod
    def incoming(cls, heat_rate: float) -> HeatFlow:
        """Heat flowing into the system; ``heat_rate`` must be strictly positive."""
        return cls(FlowDirection.IN, heat_rate)

    @classmethod
    def outgoing(cls, heat_rate: float) -> HeatFlow:
        """Heat flowing out of the system; ``heat_rate`` must be strictly positive."""
        return cls(FlowDirection.OUT, heat_rate)

    @classmethod
    def none(cls) -> HeatFlow:
        """No heat flow."""
        return cls(FlowDirection.NONE, 0.0)

    @classmethod
    def from_signed(cls, heat_rate: float) -> HeatFlow:
        """Classify a signed heat rate: positive is in, negative is out, zero is none."""
        if math.isnan(heat_rate):
            raise NotANumberError("heat rate is not a number")
        if heat_rate > 0.0:
            return cls.incoming(heat_rate)
        if heat_rate < 0.0:
            return cls.outgoing(-heat_rate)
        return cls.none()

    def signed(self) -> float:
        """Return the signed heat rate: positive in, negative out, zero for none."""
        if self.direction is FlowDirection.IN:
            return self.magnitude
        if self.direction is FlowDirection.OUT:
            return -self.magnitude
        return 0.0