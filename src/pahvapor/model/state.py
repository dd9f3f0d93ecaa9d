"""
Explorer State (Data Model)
===========================
This module defines the mutable state behind the explorer window.

Why is this file needed?
------------------------
1. State Management: It holds the selection, slider bounds, cursors and
   display options in one place.
2. Clamping: Every setter keeps the cursors inside their slider bounds and
   the bounds ordered, so the pure core never sees an inverted range or a
   non-positive pressure.
3. Decoupling: Views read from this object and call its setters; the core
   functions receive its fields as plain arguments.

Classes:
    ExplorerState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from pahvapor import config
from pahvapor.core.antoine import PressureUnit, resolve_unit, convert_pressure, to_mmhg
from pahvapor.core.compounds import CompoundRegistry, DEFAULT_REGISTRY
from pahvapor.core.sampling import (
    SampleGrid, SummaryRow, build_curve_grid, summarize, reference_line, axis_domain
)
from pahvapor.core.errors import CompoundNotFoundError

logger = logging.getLogger(__name__)

# Minimum gap kept between the lower and upper bound of each slider
TEMPERATURE_GAP = 1.0
PRESSURE_GAP = 0.001


@dataclass
class ExplorerState:
    """
    Holds everything the user can change. Pressures are stored in Torr (the
    model's native unit) so switching the display unit never moves a cursor.
    """
    registry: CompoundRegistry = field(default=DEFAULT_REGISTRY, repr=False)
    selected: set[str] = field(default_factory=lambda: set(config.DEFAULT_SELECTION))

    temperature_min: float = config.DEFAULT_TEMPERATURE_MIN
    temperature_max: float = config.DEFAULT_TEMPERATURE_MAX
    temperature: float = config.DEFAULT_TEMPERATURE

    pressure_ref_min: float = config.DEFAULT_PRESSURE_REF_MIN
    pressure_ref_max: float = config.DEFAULT_PRESSURE_REF_MAX
    pressure_ref: float = config.DEFAULT_PRESSURE_REF

    axis_min: float = config.DEFAULT_AXIS_MIN
    axis_max: float | None = config.DEFAULT_AXIS_MAX

    unit: PressureUnit = config.DEFAULT_UNIT
    log_scale: bool = config.DEFAULT_LOG_SCALE
    show_table: bool = True

    def __post_init__(self) -> None:
        for name in self.selected:
            if name not in self.registry:
                raise CompoundNotFoundError(name)
        self.unit = resolve_unit(self.unit)

    # ---- selection ----

    def toggle(self, name: str) -> bool:
        """Add or remove a compound. Returns True if it is selected afterwards."""
        if name not in self.registry:
            raise CompoundNotFoundError(name)
        if name in self.selected:
            self.selected.discard(name)
            logger.info(f"Deselected '{name}'.")
            return False
        self.selected.add(name)
        logger.info(f"Selected '{name}'.")
        return True

    def set_all_selected(self, selected: bool) -> None:
        self.selected = set(self.registry.names()) if selected else set()
        logger.info(f"{'Selected' if selected else 'Deselected'} all compounds.")

    def selected_names(self) -> list[str]:
        """Selected names in registry order."""
        return [name for name in self.registry.names() if name in self.selected]

    # ---- temperature slider ----

    def set_temperature_min(self, value: float) -> float:
        self.temperature_min = max(
            config.TEMPERATURE_FLOOR, min(value, self.temperature_max - TEMPERATURE_GAP)
        )
        if self.temperature < self.temperature_min:
            self.temperature = self.temperature_min
        return self.temperature_min

    def set_temperature_max(self, value: float) -> float:
        self.temperature_max = min(
            config.TEMPERATURE_CEILING, max(value, self.temperature_min + TEMPERATURE_GAP)
        )
        if self.temperature > self.temperature_max:
            self.temperature = self.temperature_max
        return self.temperature_max

    def set_temperature(self, value: float) -> float:
        self.temperature = max(self.temperature_min, min(value, self.temperature_max))
        return self.temperature

    # ---- reference pressure slider (Torr) ----

    def set_pressure_ref_min(self, value: float) -> float:
        self.pressure_ref_min = max(
            config.PRESSURE_REF_FLOOR, min(value, self.pressure_ref_max - PRESSURE_GAP)
        )
        if self.pressure_ref < self.pressure_ref_min:
            self.pressure_ref = self.pressure_ref_min
        return self.pressure_ref_min

    def set_pressure_ref_max(self, value: float) -> float:
        self.pressure_ref_max = max(self.pressure_ref_min + PRESSURE_GAP, value)
        if self.pressure_ref > self.pressure_ref_max:
            self.pressure_ref = self.pressure_ref_max
        return self.pressure_ref_max

    def set_pressure_ref(self, value: float) -> float:
        self.pressure_ref = max(self.pressure_ref_min, min(value, self.pressure_ref_max))
        return self.pressure_ref

    def pressure_ref_step(self) -> float:
        """Slider resolution: 2000 steps across the range, never finer than the floor."""
        return max(PRESSURE_GAP, (self.pressure_ref_max - self.pressure_ref_min) / 2000)

    # ---- pressure axis (Torr) ----

    def set_axis_min(self, value: float) -> float:
        self.axis_min = max(config.AXIS_MIN_FLOOR, value)
        return self.axis_min

    def set_axis_max(self, value: float | None) -> float | None:
        self.axis_max = value
        return self.axis_max

    # ---- display options ----

    def set_unit(self, unit: PressureUnit | str) -> PressureUnit:
        unit = resolve_unit(unit)
        if unit != self.unit:
            logger.info(f"Pressure unit changed from {self.unit} to {unit}.")
        self.unit = unit
        return self.unit

    def to_display(self, value_torr: float) -> float:
        return convert_pressure(value_torr, self.unit)

    def from_display(self, value: float) -> float:
        return to_mmhg(value, self.unit)

    # ---- derived data ----

    def curve_grid(self) -> SampleGrid:
        return build_curve_grid(
            self.selected, self.temperature_min, self.temperature_max, self.unit, self.registry
        )

    def summary(self) -> list[SummaryRow]:
        return summarize(
            self.selected, self.temperature, self.to_display(self.pressure_ref), self.unit, self.registry
        )

    def reference_line(self) -> float:
        return reference_line(self.pressure_ref, self.unit)

    def axis_domain(self) -> tuple[float, float | None]:
        return axis_domain(self.axis_min, self.axis_max, self.unit)

    def reset(self) -> None:
        """Restore every setting to its default."""
        defaults = ExplorerState(registry=self.registry)
        self.__dict__.update(defaults.__dict__)
        logger.info("Explorer state has been reset.")
