import math

import pytest

from twine_models.hx.quantities import (
    AboveMaximumError,
    BelowMinimumError,
    CapacitanceRate,
    CapacityRatio,
    ConstraintError,
    Effectiveness,
    NotANumberError,
    Ntu,
    effectiveness_via,
    ntu_via,
)


def test_capacitance_rate_from_mass_rate_and_specific_heat():
    rate = CapacitanceRate.from_mass_rate_and_specific_heat(10.0, 4000.0)
    assert rate.value == pytest.approx(40000.0)


def test_capacitance_rate_rejects_zero():
    with pytest.raises(BelowMinimumError):
        CapacitanceRate(0.0)


def test_capacitance_rate_rejects_nan():
    with pytest.raises(NotANumberError):
        CapacitanceRate(math.nan)


def test_capacitance_rate_rejects_negative_product():
    with pytest.raises(ConstraintError):
        CapacitanceRate.from_mass_rate_and_specific_heat(-1.0, 4000.0)


def test_capacitance_rate_accepts_infinity():
    assert CapacitanceRate(math.inf).value == math.inf


def test_capacitance_rates_are_ordered():
    assert CapacitanceRate(1.0) < CapacitanceRate(2.0)
    assert max(CapacitanceRate(3.0), CapacitanceRate(2.0)) == CapacitanceRate(3.0)


def test_capacity_ratio_from_capacitance_rates():
    ratio = CapacityRatio.from_capacitance_rates(
        [CapacitanceRate(10.0), CapacitanceRate(20.0)]
    )
    assert ratio.value == pytest.approx(0.5)


def test_capacity_ratio_is_order_independent():
    ratio = CapacityRatio.from_capacitance_rates(
        [CapacitanceRate(20.0), CapacitanceRate(10.0)]
    )
    assert ratio.value == pytest.approx(0.5)


def test_capacity_ratio_with_infinite_rate_is_zero():
    ratio = CapacityRatio.from_capacitance_rates(
        [CapacitanceRate(1.0), CapacitanceRate(math.inf)]
    )
    assert ratio.value == 0.0


def test_capacity_ratio_rejects_values_above_one():
    with pytest.raises(AboveMaximumError):
        CapacityRatio(1.5)


def test_effectiveness_bounds():
    with pytest.raises(BelowMinimumError):
        Effectiveness(-0.1)
    with pytest.raises(AboveMaximumError):
        Effectiveness(1.1)
    assert Effectiveness(1.0).value == 1.0


def test_ntu_rejects_negative():
    with pytest.raises(BelowMinimumError):
        Ntu(-1.0)


def test_ntu_from_conductance_and_capacitance_rates():
    ntu = Ntu.from_conductance_and_capacitance_rates(
        10.0, [CapacitanceRate(10.0), CapacitanceRate(20.0)]
    )
    assert ntu.value == pytest.approx(1.0)


def test_ntu_from_negative_conductance_is_rejected():
    with pytest.raises(BelowMinimumError):
        Ntu.from_conductance_and_capacitance_rates(
            -10.0, [CapacitanceRate(10.0), CapacitanceRate(20.0)]
        )


def test_effectiveness_via_zero_capacity_ratio():
    rates = [CapacitanceRate(1.0), CapacitanceRate(math.inf)]
    eff = effectiveness_via(Ntu(1.0), rates, lambda ntu, cr: 0.0)
    assert eff.value == pytest.approx(1.0 - math.exp(-1.0))


def test_effectiveness_via_passes_capacity_ratio_to_relation():
    rates = [CapacitanceRate(1.0), CapacitanceRate(2.0)]
    eff = effectiveness_via(Ntu(3.0), rates, lambda ntu, cr: cr)
    assert eff.value == pytest.approx(0.5)


def test_effectiveness_via_rejects_invalid_result():
    rates = [CapacitanceRate(1.0), CapacitanceRate(2.0)]
    with pytest.raises(AboveMaximumError):
        effectiveness_via(Ntu(1.0), rates, lambda ntu, cr: 2.0)


def test_ntu_via_zero_capacity_ratio_roundtrip():
    rates = [CapacitanceRate(1.0), CapacitanceRate(math.inf)]
    eff = effectiveness_via(Ntu(0.5), rates, lambda ntu, cr: 0.0)
    back = ntu_via(eff, rates, lambda e, cr: 0.0)
    assert back.value == pytest.approx(0.5, rel=1e-12)


def test_ntu_via_full_effectiveness_is_infinite():
    rates = [CapacitanceRate(1.0), CapacitanceRate(math.inf)]
    assert ntu_via(Effectiveness(1.0), rates, lambda e, cr: 0.0).value == math.inf


def test_ntu_via_passes_effectiveness_to_relation():
    rates = [CapacitanceRate(4.0), CapacitanceRate(1.0)]
    ntu = ntu_via(Effectiveness(0.3), rates, lambda e, cr: e + cr)
    assert ntu.value == pytest.approx(0.55)