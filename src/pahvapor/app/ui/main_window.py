"""
Main Window
===========
Sidebar (compound selection, settings) on the left; temperature slider,
chart and summary table on the right.

Every store signal triggers a recompute of only what depends on it:
    selection_changed   -> curves + table
    temperature_changed -> curves (bounds) + cursor line + table
    pressure_changed    -> reference line + table
    display_changed     -> everything
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QMainWindow, QSplitter, QWidget, QVBoxLayout, QHBoxLayout, QScrollArea, QLabel, QPushButton
)

from pahvapor import config
from pahvapor.app.state import Store
from pahvapor.app.ui.panels.compounds import CompoundPanel
from pahvapor.app.ui.panels.settings import SettingsPanel
from pahvapor.app.ui.widgets.chart import VaporPressureChart
from pahvapor.app.ui.widgets.editable_slider import EditableSlider
from pahvapor.app.ui.widgets.summary_table import SummaryTable

logger = logging.getLogger(__name__)


def compound_colors(names: list[str]) -> dict[str, str]:
    """Palette color of each compound, by registry position."""
    palette = config.COMPOUND_COLORS
    return {name: palette[i % len(palette)] for i, name in enumerate(names)}


class MainWindow(QMainWindow):
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.store = store
        self._curve_bounds: tuple[float, float] | None = None
        self.setWindowTitle(config.VISIBLE_APP_NAME)
        self.resize(1400, 900)

        colors = compound_colors(store.state.registry.names())

        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)

        # ---- Sidebar ----
        sidebar = QWidget()
        side_layout = QVBoxLayout(sidebar)
        title = QLabel(self.tr("<h3>PAH VAPOR PRESSURE EXPLORER</h3>"
                               "<small>log₁₀(P/mmHg) = A − B/(C + T°C)</small>"))
        side_layout.addWidget(title)
        self.compound_panel = CompoundPanel(store, colors, parent=sidebar)
        self.settings_panel = SettingsPanel(store, parent=sidebar)
        side_layout.addWidget(self.compound_panel)
        side_layout.addWidget(self.settings_panel)
        side_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setWidget(sidebar)
        scroll.setMinimumWidth(320)
        split.addWidget(scroll)

        # ---- Main content ----
        content = QWidget()
        content_layout = QVBoxLayout(content)

        self.temperature_slider = EditableSlider(
            self.tr("Cursor Temperature"),
            badge=lambda v: f"{v:g} °C",
            accent_color=config.CURSOR_COLOR,
            parent=content
        )
        self.temperature_slider.value_changed.connect(self.store.set_temperature)
        self.temperature_slider.min_changed.connect(self.store.set_temperature_min)
        self.temperature_slider.max_changed.connect(self.store.set_temperature_max)
        content_layout.addWidget(self.temperature_slider)

        self.chart = VaporPressureChart(colors, parent=content)
        content_layout.addWidget(self.chart, 3)

        table_header = QHBoxLayout()
        self.cursor_label = QLabel(content)
        self.export_btn = QPushButton(self.tr("Export chart…"), content)
        self.export_btn.clicked.connect(self.chart.export_image)
        self.table_btn = QPushButton(content)
        self.table_btn.clicked.connect(lambda: self.store.set_show_table(not self.store.state.show_table))
        table_header.addWidget(self.cursor_label)
        table_header.addStretch()
        table_header.addWidget(self.export_btn)
        table_header.addWidget(self.table_btn)
        content_layout.addLayout(table_header)

        self.table = SummaryTable(colors, parent=content)
        content_layout.addWidget(self.table, 2)

        split.addWidget(content)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
        self.setCentralWidget(split)

        self.store.selection_changed.connect(self._refresh_curves)
        self.store.selection_changed.connect(self._refresh_table)
        self.store.temperature_changed.connect(self._refresh_temperature)
        self.store.pressure_changed.connect(self._refresh_reference)
        self.store.display_changed.connect(self._refresh_all)

        self._refresh_all()

    @Slot()
    def _refresh_all(self) -> None:
        state = self.store.state
        self.chart.set_log_scale(state.log_scale)
        self.chart.set_y_domain(*state.axis_domain())
        self.table.set_unit(state.unit)
        self.table.setVisible(state.show_table)
        self.table_btn.setText(self.tr("hide") if state.show_table else self.tr("show"))
        self._refresh_curves()
        self._refresh_temperature()
        self._refresh_reference()

    @Slot()
    def _refresh_curves(self) -> None:
        state = self.store.state
        self._curve_bounds = (state.temperature_min, state.temperature_max)
        self.chart.set_curves(state.curve_grid())

    @Slot()
    def _refresh_temperature(self) -> None:
        state = self.store.state
        bounds = (state.temperature_min, state.temperature_max)
        if bounds != self._curve_bounds:
            self._refresh_curves()
        self.temperature_slider.set_range(state.temperature_min, state.temperature_max, 1.0, state.temperature)
        self.chart.set_temperature(state.temperature)
        self._refresh_table()

    @Slot()
    def _refresh_reference(self) -> None:
        self.chart.set_reference(self.store.state.reference_line())
        self._refresh_table()

    @Slot()
    def _refresh_table(self) -> None:
        state = self.store.state
        self.cursor_label.setText(
            f"T = {state.temperature:g} °C  |  P = {state.to_display(state.pressure_ref):.2f} {state.unit}"
        )
        if state.show_table:
            self.table.set_rows(state.summary())
