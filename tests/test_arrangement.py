import math

import pytest

from twine_models.hx.arrangement import (
    CounterFlow,
    CrossFlow,
    Mixing,
    ParallelFlow,
    ShellAndTube,
    ShellAndTubeConfigError,
    ShellAndTubeConfigIssue,
)
from twine_models.hx.quantities import CapacitanceRate, Effectiveness, Ntu

NTUS = [0.0, 0.1, 0.5, 1.0, 5.0]
PAIRS = [
    (1.0, math.inf),
    (1.0, 4.0),
    (1.0, 2.0),
    (1.0, 1.0),
]
CROSS_PAIRS = PAIRS + [(2.0, 1.0), (4.0, 1.0), (math.inf, 1.0)]


def _rates(pair):
    return (CapacitanceRate(pair[0]), CapacitanceRate(pair[1]))


@pytest.mark.parametrize("ntu", NTUS)
@pytest.mark.parametrize("pair", PAIRS)
def test_counter_flow_roundtrip(ntu, pair):
    rates = _rates(pair)
    eff = CounterFlow().effectiveness(Ntu(ntu), rates)
    back = CounterFlow().ntu(eff, rates)
    assert back.value == pytest.approx(ntu, rel=1e-12)


@pytest.mark.parametrize("ntu", NTUS)
@pytest.mark.parametrize("pair", PAIRS)
def test_parallel_flow_roundtrip(ntu, pair):
    rates = _rates(pair)
    eff = ParallelFlow().effectiveness(Ntu(ntu), rates)
    back = ParallelFlow().ntu(eff, rates)
    assert back.value == pytest.approx(ntu, rel=1e-12)


@pytest.mark.parametrize("ntu", NTUS)
@pytest.mark.parametrize("pair", CROSS_PAIRS)
def test_cross_flow_mixed_unmixed_roundtrip(ntu, pair):
    rates = _rates(pair)
    arrangement = CrossFlow(Mixing.MIXED, Mixing.UNMIXED)
    eff = arrangement.effectiveness(Ntu(ntu), rates)
    back = arrangement.ntu(eff, rates)
    assert back.value == pytest.approx(ntu, rel=1e-12)


@pytest.mark.parametrize("ntu", [0.1, 0.5, 1.0, 5.0])
@pytest.mark.parametrize("pair", [(1.0, 2.0), (2.0, 1.0), (1.0, 4.0)])
def test_cross_flow_unmixed_mixed_is_swapped_mixed_unmixed(ntu, pair):
    rates = _rates(pair)
    swapped = (rates[1], rates[0])
    a = CrossFlow(Mixing.UNMIXED, Mixing.MIXED).effectiveness(Ntu(ntu), rates)
    b = CrossFlow(Mixing.MIXED, Mixing.UNMIXED).effectiveness(Ntu(ntu), swapped)
    assert a.value == b.value
    back = CrossFlow(Mixing.UNMIXED, Mixing.MIXED).ntu(a, rates)
    assert back.value == pytest.approx(ntu, rel=1e-12)


@pytest.mark.parametrize("first", list(Mixing))
def test_cross_flow_same_mixing_has_no_ntu_relation(first):
    arrangement = CrossFlow(first, first)
    with pytest.raises(ValueError):
        arrangement.ntu(Effectiveness(0.5), _rates((1.0, 2.0)))


@pytest.mark.parametrize("first", list(Mixing))
def test_cross_flow_zero_capacity_ratio_uses_generic_limit(first):
    eff = CrossFlow(first, first).effectiveness(Ntu(1.0), _rates((1.0, math.inf)))
    assert eff.value == pytest.approx(1.0 - math.exp(-1.0))


def test_counter_flow_balanced_value():
    eff = CounterFlow().effectiveness(Ntu(1.0), _rates((1.0, 1.0)))
    assert eff.value == pytest.approx(0.5)


def test_counter_flow_known_value():
    eff = CounterFlow().effectiveness(Ntu(math.log(4.0)), _rates((3.0, 6.0)))
    assert eff.value == pytest.approx(2.0 / 3.0)


def test_parallel_flow_balanced_value():
    eff = ParallelFlow().effectiveness(Ntu(1.0), _rates((1.0, 1.0)))
    assert eff.value == pytest.approx((1.0 - math.exp(-2.0)) / 2.0)


@pytest.mark.parametrize(
    "shells, tubes, issue",
    [
        (0, 2, ShellAndTubeConfigIssue.ZERO_SHELL_PASSES),
        (65535, 2, ShellAndTubeConfigIssue.SHELL_PASS_OVERFLOW),
        (3, 4, ShellAndTubeConfigIssue.INSUFFICIENT_TUBE_PASSES),
        (3, 8, ShellAndTubeConfigIssue.TUBE_PASSES_NOT_MULTIPLE),
    ],
)
def test_shell_and_tube_validation(shells, tubes, issue):
    with pytest.raises(ShellAndTubeConfigError) as info:
        ShellAndTube(shells, tubes)
    assert info.value.issue is issue
    assert str(info.value) == issue.value


def test_shell_and_tube_valid_configuration():
    arrangement = ShellAndTube(1, 2)
    assert (arrangement.shell_passes, arrangement.tube_passes) == (1, 2)


def test_shell_and_tube_rejects_out_of_range_counts():
    with pytest.raises(ValueError):
        ShellAndTube(1, 70000)


@pytest.mark.parametrize("shells, tubes", [(1, 2), (1, 4), (2, 4), (3, 12)])
@pytest.mark.parametrize("ntu", [0.1, 0.5, 1.0, 5.0])
@pytest.mark.parametrize("pair", [(1.0, 1.0), (1.0, 2.0), (2.0, 1.0), (1.0, 4.0)])
def test_shell_and_tube_roundtrip(shells, tubes, ntu, pair):
    arrangement = ShellAndTube(shells, tubes)
    rates = _rates(pair)
    eff = arrangement.effectiveness(Ntu(ntu), rates)
    back = arrangement.ntu(eff, rates)
    assert back.value == pytest.approx(ntu, rel=1e-12)


def test_more_shell_passes_increase_effectiveness():
    rates = _rates((1.0, 2.0))
    one = ShellAndTube(1, 2).effectiveness(Ntu(2.0), rates)
    two = ShellAndTube(2, 4).effectiveness(Ntu(2.0), rates)
    assert two.value > one.value