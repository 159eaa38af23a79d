"""
Property-based tests using Hypothesis.

Fill, clear and vessel-loading rules checked over generated inputs.
"""

from hypothesis import given, strategies as st

from dockside.models.results import CargoError
from dockside.models.transport_unit import (
    clear_load,
    cool_unit,
    fill,
    fluid_unit,
    gas_unit,
    permissible_load,
)
from dockside.models.vessel import Vessel

max_loads = st.floats(min_value=1, max_value=1e6, allow_nan=False)
fractions = st.floats(min_value=0, max_value=1, allow_nan=False)
overshoots = st.floats(min_value=1.001, max_value=10, allow_nan=False)


def _any_unit(kind, max_load, hazardous=False):
    if kind == "fluid":
        return fluid_unit("U", height=1, base_weight=0, depth=1, maximum_load=max_load, hazardous=hazardous)
    if kind == "gas":
        return gas_unit("U", height=1, base_weight=0, depth=1, maximum_load=max_load)
    return cool_unit("U", height=1, base_weight=0, depth=1, maximum_load=max_load)


kinds = st.sampled_from(["fluid", "gas", "cool"])


class TestFillProperties:
    @given(kind=kinds, hazardous=st.booleans(), max_load=max_loads, frac=fractions)
    def test_fill_within_permissible_succeeds(self, kind, hazardous, max_load, frac):
        unit = _any_unit(kind, max_load, hazardous)
        weight = permissible_load(unit) * frac
        assert fill(unit, weight).ok
        assert unit.load_weight == weight

    @given(kind=kinds, hazardous=st.booleans(), max_load=max_loads, over=overshoots)
    def test_fill_above_permissible_fails_unchanged(self, kind, hazardous, max_load, over):
        unit = _any_unit(kind, max_load, hazardous)
        result = fill(unit, permissible_load(unit) * over)
        assert result.error == CargoError.CAPACITY_EXCEEDED
        assert unit.load_weight == 0

    @given(hazardous=st.booleans(), max_load=max_loads)
    def test_fluid_permissible_ratio(self, hazardous, max_load):
        unit = _any_unit("fluid", max_load, hazardous)
        ratio = 0.5 if hazardous else 0.9
        assert permissible_load(unit) == max_load * ratio

    @given(kind=st.sampled_from(["gas", "cool"]), max_load=max_loads, frac=fractions)
    def test_gas_and_cool_accept_up_to_maximum(self, kind, max_load, frac):
        assert fill(_any_unit(kind, max_load), max_load * frac).ok


class TestClearProperties:
    @given(max_load=max_loads, frac=fractions)
    def test_gas_keeps_five_percent(self, max_load, frac):
        unit = _any_unit("gas", max_load)
        fill(unit, max_load * frac)
        before = unit.load_weight
        clear_load(unit)
        assert unit.load_weight == before * 0.05

    @given(kind=st.sampled_from(["fluid", "cool"]), max_load=max_loads, frac=fractions)
    def test_fluid_and_cool_empty(self, kind, max_load, frac):
        unit = _any_unit(kind, max_load)
        fill(unit, permissible_load(unit) * frac)
        clear_load(unit)
        assert unit.load_weight == 0


class TestVesselProperties:
    @given(capacity=st.integers(min_value=0, max_value=15))
    def test_full_after_capacity_adds(self, capacity):
        vessel = Vessel(speed_limit=10, capacity=capacity, weight_limit=1e9)
        for i in range(capacity):
            assert vessel.add_unit(cool_unit(f"U{i}", 1, 0, 1, 10)).ok
        result = vessel.add_unit(cool_unit("extra", 1, 0, 1, 10))
        assert result.error == CargoError.VESSEL_FULL
        assert len(vessel.units) == capacity

    @given(
        limit_tons=st.integers(min_value=1, max_value=50),
        quarters=st.lists(st.integers(min_value=0, max_value=40), min_size=1, max_size=20),
    )
    def test_weight_limit_never_exceeded(self, limit_tons, quarters):
        """Units weighing multiples of 250 kg are accepted exactly while the total stays within limit."""
        vessel = Vessel(speed_limit=10, capacity=len(quarters), weight_limit=limit_tons)
        total_kg = 0
        for i, q in enumerate(quarters):
            weight = q * 250
            result = vessel.add_unit(cool_unit(f"U{i}", 1, weight, 1, 10))
            if total_kg + weight <= limit_tons * 1000:
                assert result.ok
                total_kg += weight
            else:
                assert result.error == CargoError.VESSEL_OVERWEIGHT
        assert vessel.total_weight_tons() <= limit_tons

    @given(ids=st.lists(st.text(min_size=1, max_size=5).filter(str.strip), min_size=1, max_size=8, unique=True))
    def test_remove_unknown_leaves_units(self, ids):
        vessel = Vessel(speed_limit=10, capacity=len(ids), weight_limit=1e9)
        for uid in ids:
            vessel.add_unit(cool_unit(uid, 1, 0, 1, 10))
        before = list(vessel.units)
        result = vessel.remove_unit("\x00missing")
        assert result.error == CargoError.UNIT_NOT_FOUND
        assert vessel.units == before
