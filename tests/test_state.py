import dataclasses

import pytest

from twine_models.thermo.state import State


def make_state():
    return State(temperature=300.0, density=1.0, fluid="air")


def test_fields_are_stored():
    state = make_state()
    assert state.temperature == 300.0
    assert state.density == 1.0
    assert state.fluid == "air"


def test_with_temperature_changes_only_temperature():
    state = make_state()
    updated = state.with_temperature(350.0)
    assert updated.temperature == 350.0
    assert updated.density == state.density
    assert updated.fluid == state.fluid
    assert state.temperature == 300.0


def test_with_density_changes_only_density():
    state = make_state()
    updated = state.with_density(2.5)
    assert updated.density == 2.5
    assert updated.temperature == state.temperature
    assert updated.fluid == state.fluid


def test_with_fluid_changes_only_fluid():
    state = make_state()
    updated = state.with_fluid("water")
    assert updated.fluid == "water"
    assert updated.temperature == state.temperature
    assert updated.density == state.density


def test_equality_and_roundtrip():
    state = make_state()
    assert state.with_temperature(400.0).with_temperature(300.0) == state
    assert state.with_density(5.0) != state


def test_state_is_immutable():
    state = make_state()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.temperature = 10.0
    assert state.temperature == 300.0
    assert state == State(temperature=300.0, density=1.0, fluid="air")