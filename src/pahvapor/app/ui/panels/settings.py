from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QComboBox, QPushButton, QButtonGroup, QLabel
)

from pahvapor import config
from pahvapor.app.state import Store
from pahvapor.app.ui.panels.base import BasePanel
from pahvapor.app.ui.widgets.editable_slider import BoundInput, EditableSlider
from pahvapor.core.antoine import PressureUnit, UNIT_METADATA


class SettingsPanel(BasePanel):
    """
    Pressure unit, y-axis scale and bounds, and the reference pressure slider.
    All pressures shown here are in the current display unit.
    """
    TITLE = "Settings"

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        form = QFormLayout()

        self.unit_combo = QComboBox(self)
        for unit in PressureUnit:
            self.unit_combo.addItem(UNIT_METADATA[unit].label, unit)
        self.unit_combo.currentIndexChanged.connect(
            lambda _index: self.store.set_unit(self.unit_combo.currentData())
        )
        form.addRow(self.tr("Pressure Units:"), self.unit_combo)

        scale_row = QHBoxLayout()
        self.scale_group = QButtonGroup(self)
        self.log_btn = QPushButton(self.tr("log"), self)
        self.linear_btn = QPushButton(self.tr("linear"), self)
        for button in (self.log_btn, self.linear_btn):
            button.setCheckable(True)
            self.scale_group.addButton(button)
            scale_row.addWidget(button)
        self.log_btn.clicked.connect(lambda: self.store.set_log_scale(True))
        self.linear_btn.clicked.connect(lambda: self.store.set_log_scale(False))
        form.addRow(self.tr("Y-Axis Scale:"), scale_row)

        bounds_row = QHBoxLayout()
        self.axis_min_input = BoundInput(parent=self)
        self.axis_max_input = BoundInput(allow_auto=True, parent=self)
        self.axis_max_input.setToolTip(self.tr("Leave blank for auto"))
        bounds_row.addWidget(self.axis_min_input)
        bounds_row.addWidget(QLabel("→", self))
        bounds_row.addWidget(self.axis_max_input)
        self.axis_label = QLabel(self)
        form.addRow(self.axis_label, bounds_row)
        self.axis_min_input.value_committed.connect(self.store.set_axis_min)
        self.axis_max_input.value_committed.connect(self.store.set_axis_max)

        root.addLayout(form)

        self.pressure_slider = EditableSlider(
            self.tr("Reference Pressure"),
            badge=lambda v: f"{v:.2f} {self.store.state.unit}",
            accent_color=config.REFERENCE_COLOR,
            parent=self
        )
        self.pressure_slider.value_changed.connect(self.store.set_pressure_ref)
        self.pressure_slider.min_changed.connect(self.store.set_pressure_ref_min)
        self.pressure_slider.max_changed.connect(self.store.set_pressure_ref_max)
        root.addWidget(self.pressure_slider)
        root.addStretch()

        self.store.display_changed.connect(self._sync)
        self.store.pressure_changed.connect(self._sync_slider)
        self._sync()

    @Slot()
    def _sync(self) -> None:
        state = self.store.state
        self.unit_combo.blockSignals(True)
        self.unit_combo.setCurrentIndex(self.unit_combo.findData(state.unit))
        self.unit_combo.blockSignals(False)

        (self.log_btn if state.log_scale else self.linear_btn).setChecked(True)

        lo, hi = state.axis_domain()
        self.axis_label.setText(self.tr("Pressure Axis ({unit}):").format(unit=state.unit))
        self.axis_min_input.set_value(lo)
        self.axis_max_input.set_value(hi)
        self._sync_slider()

    @Slot()
    def _sync_slider(self) -> None:
        state = self.store.state
        self.pressure_slider.set_label(self.tr("Reference Pressure ({unit})").format(unit=state.unit))
        self.pressure_slider.set_range(
            state.to_display(state.pressure_ref_min),
            state.to_display(state.pressure_ref_max),
            state.to_display(state.pressure_ref_step()),
            state.to_display(state.pressure_ref),
        )
