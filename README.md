# twine-models

Building blocks for engineering models of heat exchangers and working fluids.
All quantities are plain floats in SI units: temperatures in kelvin, heat
rates in W, capacitance rates and conductances in W/K, density in kg/m³,
pressure in Pa, specific enthalpy in J/kg, specific entropy and heat
capacities in J/(kg·K).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Units

`twine_models.units` has `temperature_difference(t1, t2)`, which returns the
interval `t1 - t2` between two absolute temperatures, and the conversions
`celsius_to_kelvin` and `fahrenheit_to_kelvin`.

## Heat exchangers

The `twine_models.hx` package implements the effectiveness-NTU method.

- `twine_models.hx.quantities`: `CapacitanceRate` (strictly positive),
  `CapacityRatio` and `Effectiveness` (both within [0, 1]) and `Ntu`
  (non-negative). Each holds its number in `.value`; building one outside its
  range raises a `ConstraintError` subclass: `NotANumberError`,
  `BelowMinimumError` or `AboveMaximumError`. Helpers:
  `CapacitanceRate.from_mass_rate_and_specific_heat`,
  `CapacityRatio.from_capacitance_rates` and
  `Ntu.from_conductance_and_capacitance_rates`.
- `twine_models.hx.flow`: `HeatFlow`, a direction (`FlowDirection.IN`, `OUT`
  or `NONE`) with a magnitude, built with `HeatFlow.incoming`,
  `HeatFlow.outgoing`, `HeatFlow.none` or `HeatFlow.from_signed`;
  `signed()` gives the signed heat rate.
- `twine_models.hx.arrangement`: `CounterFlow`, `ParallelFlow`,
  `CrossFlow(first, second)` with a `Mixing` value for each stream, and
  `ShellAndTube(shell_passes, tube_passes)`, whose invalid pass counts raise
  `ShellAndTubeConfigError` carrying a `ShellAndTubeConfigIssue`. Each offers
  `effectiveness(ntu, capacitance_rates)` and `ntu(effectiveness,
  capacitance_rates)`. `CrossFlow.ntu` exists only when one stream is mixed
  and the other unmixed; otherwise it raises `ValueError`.
- `twine_models.hx.stream`: `StreamInlet` and the fully resolved `Stream`,
  built with `Stream.from_heat_flow` or `Stream.from_outlet_temperature`.

`twine_models.hx.functional` solves the two common problems:

```python
import math

from twine_models.hx.arrangement import CounterFlow
from twine_models.hx.functional import known_conductance_and_inlets
from twine_models.hx.quantities import CapacitanceRate
from twine_models.hx.stream import StreamInlet
from twine_models.units import celsius_to_kelvin

result = known_conductance_and_inlets(
    CounterFlow(),
    3000.0 * math.log(4.0),
    (
        StreamInlet(CapacitanceRate(3000.0), celsius_to_kelvin(50.0)),
        StreamInlet(CapacitanceRate(6000.0), celsius_to_kelvin(80.0)),
    ),
)
print(result.effectiveness.value)  # about 2/3
for stream in result.streams:
    print(stream.outlet_temperature)  # about 343.15 K
```

`known_conditions_and_inlets(arrangement, (inlet, stream))` solves the
inverse problem: given one inlet and one fully known `Stream`, it returns a
`KnownConditionsResult` with the resolved streams, the required conductance
`ua` and the `ntu`. It raises `AboveMaximumError` when the known heat flow
cannot be reached.

## Thermodynamic properties

The `twine_models.thermo` package provides:

- `state.State`: temperature, density and fluid, with `with_temperature`,
  `with_density` and `with_fluid`.
- `capability`: the base classes `ThermoModel`, `HasPressure`,
  `HasInternalEnergy`, `HasEnthalpy`, `HasEntropy`, `HasCp`, `HasCv` and
  `StateFrom`.
- `ideal_gas_eos`: `pressure`, `density` and `temperature` from `p = ρ·R·T`.
- `perfect_gas.PerfectGas`: ideal gas with constant `cp` and `cv`. Its
  `state_from` takes any of these keyword pairs: temperature and density,
  temperature and pressure, pressure and density, pressure and enthalpy,
  pressure and entropy, enthalpy and entropy; other combinations raise
  `TypeError`. Invalid constants raise `PerfectGasParametersError`.
- `incompressible.Incompressible`: constant density and heat capacity;
  `state_from(temperature, fluid=None)` uses the reference density. Invalid
  constants raise `IncompressibleParametersError`.
- `fluid`: `Air` and `CarbonDioxide` (perfect gas parameters) and `Water`
  (incompressible parameters).

```python
from twine_models.thermo.fluid import Air
from twine_models.thermo.perfect_gas import PerfectGas

air = PerfectGas(Air)
state = air.state_from(temperature=300.0, pressure=101_325.0)
print(state.density, air.enthalpy(state))
```

## What this package does not do

It has no real-fluid property model: no phase change and no temperature- or
pressure-dependent properties, only the perfect gas and incompressible
approximations. It has no command-line tool.