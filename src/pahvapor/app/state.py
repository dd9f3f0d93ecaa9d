from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from pahvapor.core.antoine import PressureUnit
from pahvapor.model.state import ExplorerState


class Store(QObject):
    """
    Qt wrapper around ExplorerState. Every mutation goes through here so
    panels, chart and table stay in sync via signals.
    """
    selection_changed = Signal()
    temperature_changed = Signal()  # cursor or bounds
    pressure_changed = Signal()  # reference cursor or bounds
    display_changed = Signal()  # unit, scale, axis bounds, table visibility

    def __init__(self, state: ExplorerState | None = None) -> None:
        super().__init__()
        self.state = state or ExplorerState()

    # ---- selection ----

    def toggle(self, name: str) -> None:
        self.state.toggle(name)
        self.selection_changed.emit()

    def set_all_selected(self, selected: bool) -> None:
        self.state.set_all_selected(selected)
        self.selection_changed.emit()

    # ---- temperature ----

    def set_temperature(self, value: float) -> None:
        self.state.set_temperature(value)
        self.temperature_changed.emit()

    def set_temperature_min(self, value: float) -> None:
        self.state.set_temperature_min(value)
        self.temperature_changed.emit()

    def set_temperature_max(self, value: float) -> None:
        self.state.set_temperature_max(value)
        self.temperature_changed.emit()

    # ---- reference pressure (display unit in, Torr stored) ----

    def set_pressure_ref(self, value: float) -> None:
        self.state.set_pressure_ref(self.state.from_display(value))
        self.pressure_changed.emit()

    def set_pressure_ref_min(self, value: float) -> None:
        self.state.set_pressure_ref_min(self.state.from_display(value))
        self.pressure_changed.emit()

    def set_pressure_ref_max(self, value: float) -> None:
        self.state.set_pressure_ref_max(self.state.from_display(value))
        self.pressure_changed.emit()

    # ---- display ----

    def set_unit(self, unit: PressureUnit | str) -> None:
        self.state.set_unit(unit)
        self.display_changed.emit()

    def set_log_scale(self, log_scale: bool) -> None:
        self.state.log_scale = log_scale
        self.display_changed.emit()

    def set_axis_min(self, value: float) -> None:
        self.state.set_axis_min(self.state.from_display(value))
        self.display_changed.emit()

    def set_axis_max(self, value: float | None) -> None:
        self.state.set_axis_max(self.state.from_display(value) if value is not None else None)
        self.display_changed.emit()

    def set_show_table(self, show: bool) -> None:
        self.state.show_table = show
        self.display_changed.emit()
