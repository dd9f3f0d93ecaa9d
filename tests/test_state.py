"""Tests for the explorer state: clamping rules and delegation to the core."""
import numpy as np
import pytest

from pahvapor import config
from pahvapor.core.antoine import PressureUnit, boiling_temperature
from pahvapor.core.compounds import DEFAULT_REGISTRY
from pahvapor.core.errors import CompoundNotFoundError, InvalidArgumentError
from pahvapor.core.sampling import Phase
from pahvapor.model.state import ExplorerState


@pytest.fixture
def state():
    return ExplorerState()


class TestDefaults:

    def test_initial_selection(self, state):
        assert state.selected_names() == [
            "Naphthalene", "Phenanthrene", "Pyrene", "Fluoranthene", "Benzo[ghi]perylene"
        ]

    def test_initial_values(self, state):
        assert (state.temperature_min, state.temperature_max, state.temperature) == (-80, 600, 150)
        assert (state.pressure_ref_min, state.pressure_ref_max, state.pressure_ref) == (0.05, 100, 10)
        assert state.axis_min == 0.05
        assert state.axis_max is None
        assert state.unit == PressureUnit.TORR
        assert state.log_scale is True
        assert state.show_table is True

    def test_unknown_initial_selection_rejected(self):
        with pytest.raises(CompoundNotFoundError):
            ExplorerState(selected={"Benzene"})

    def test_selection_not_shared_between_instances(self):
        a, b = ExplorerState(), ExplorerState()
        a.toggle("Naphthalene")
        assert "Naphthalene" in b.selected


class TestSelection:

    def test_toggle_removes_and_adds(self, state):
        assert state.toggle("Naphthalene") is False
        assert "Naphthalene" not in state.selected
        assert state.toggle("Naphthalene") is True
        assert "Naphthalene" in state.selected

    def test_toggle_unknown(self, state):
        with pytest.raises(CompoundNotFoundError):
            state.toggle("Benzene")

    def test_select_all_and_none(self, state):
        state.set_all_selected(True)
        assert state.selected_names() == DEFAULT_REGISTRY.names()
        state.set_all_selected(False)
        assert state.selected_names() == []


class TestTemperatureClamping:

    def test_min_cannot_reach_max(self, state):
        assert state.set_temperature_min(700) == 599
        assert state.temperature == 599

    def test_min_below_cursor_keeps_cursor(self, state):
        state.set_temperature_min(-100)
        assert state.temperature_min == -100
        assert state.temperature == 150

    def test_max_cannot_reach_min(self, state):
        assert state.set_temperature_max(-200) == -79
        assert state.temperature == -79

    def test_cursor_clamped_to_bounds(self, state):
        assert state.set_temperature(1000) == 600
        assert state.set_temperature(-1000) == -80
        assert state.set_temperature(42) == 42

    def test_min_stops_at_floor(self, state):
        assert state.set_temperature_min(-1e6) == config.TEMPERATURE_FLOOR
        assert state.set_temperature_min(-250) == config.TEMPERATURE_FLOOR

    def test_max_stops_at_ceiling(self, state):
        assert state.set_temperature_max(1e6) == config.TEMPERATURE_CEILING

    def test_floor_keeps_every_denominator_positive(self):
        assert all(config.TEMPERATURE_FLOOR + record.C > 0 for record in DEFAULT_REGISTRY)

    def test_widest_range_stays_plottable(self, state):
        state.set_temperature_min(-1e6)
        state.set_temperature_max(1e6)
        grid = state.curve_grid()
        assert len(grid) <= 1000
        for name in grid.names:
            assert np.nanmax(grid.series(name)) < 1e12


class TestPressureClamping:

    def test_min_has_positive_floor(self, state):
        assert state.set_pressure_ref_min(-5) == config.PRESSURE_REF_FLOOR

    def test_min_stays_below_max(self, state):
        assert state.set_pressure_ref_min(200) == pytest.approx(99.999)
        assert state.pressure_ref == pytest.approx(99.999)

    def test_max_stays_above_min(self, state):
        assert state.set_pressure_ref_max(0) == pytest.approx(0.051)
        assert state.pressure_ref == pytest.approx(0.051)

    def test_cursor_clamped_to_bounds(self, state):
        assert state.set_pressure_ref(0) == 0.05
        assert state.set_pressure_ref(500) == 100

    def test_slider_step(self, state):
        assert state.pressure_ref_step() == pytest.approx((100 - 0.05) / 2000)
        state.set_pressure_ref_max(0.5)
        state.set_pressure_ref_min(0.4)
        assert state.pressure_ref_step() == pytest.approx(0.001)

    def test_axis_min_floor(self, state):
        assert state.set_axis_min(0) == config.AXIS_MIN_FLOOR
        assert state.set_axis_min(1.5) == 1.5

    def test_axis_max_auto(self, state):
        state.set_axis_max(500.0)
        assert state.axis_domain() == (0.05, 500.0)
        state.set_axis_max(None)
        assert state.axis_domain() == (0.05, None)


class TestUnits:

    def test_set_unit_accepts_strings(self, state):
        assert state.set_unit("atm") == PressureUnit.ATM

    def test_set_unit_rejects_unknown(self, state):
        with pytest.raises(InvalidArgumentError):
            state.set_unit("psi")

    def test_display_round_trip(self, state):
        state.set_unit("Pa")
        assert state.from_display(state.to_display(10)) == pytest.approx(10)

    def test_unit_change_does_not_move_boiling_points(self, state):
        before = {row.name: row.boiling_point_c for row in state.summary()}
        state.set_unit("bar")
        after = {row.name: row.boiling_point_c for row in state.summary()}
        assert after == pytest.approx(before)

    def test_reference_line_follows_unit(self, state):
        state.set_unit("atm")
        assert state.reference_line() == pytest.approx(10 / 760)


class TestDerivedData:

    def test_curve_grid_uses_current_fields(self, state):
        grid = state.curve_grid()
        assert len(grid) == 137
        assert grid.names == tuple(state.selected_names())

    def test_curve_grid_follows_bounds(self, state):
        state.set_temperature_max(20)
        grid = state.curve_grid()
        assert grid.step == 2
        assert grid.points[-1].temperature_c == 20

    def test_summary_boiling_point_at_reference_pressure(self, state):
        row = state.summary()[0]
        record = DEFAULT_REGISTRY.get("Naphthalene")
        assert row.name == "Naphthalene"
        assert row.boiling_point_c == pytest.approx(boiling_temperature(*record.coefficients, 10))
        assert row.phase == Phase.VAPOR

    def test_reset(self, state):
        state.toggle("Anthracene")
        state.set_unit("Pa")
        state.set_temperature(0)
        state.reset()
        assert state == ExplorerState()
