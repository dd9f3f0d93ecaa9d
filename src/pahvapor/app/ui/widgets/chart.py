"""Vapor pressure chart (pyqtgraph)."""
from __future__ import annotations

import logging
import math

import numpy as np
import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QFileDialog, QMessageBox

from pahvapor import config
from pahvapor.core.sampling import SampleGrid
from pahvapor.model.formatting import format_hover_value

logger = logging.getLogger(__name__)

# Curves listed in the hover readout
MAX_HOVER_SERIES = 8


class VaporPressureChart(pg.PlotWidget):
    """
    Plots one curve per selected compound plus two guide lines: a vertical
    one at the cursor temperature and a horizontal one at the reference
    pressure. Hovering shows the nearest sample of every curve.

    In log mode pyqtgraph works with log10 coordinates internally, so every
    y position we set by hand (guide line, range) is transformed first.
    """
    def __init__(self, colors: dict[str, str], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._colors = colors
        self._log_scale = True
        self._grid: SampleGrid | None = None
        self._reference = 1.0
        self._y_domain: tuple[float, float | None] = (0.05, None)

        self.showGrid(x=True, y=True, alpha=0.15)
        self.setLabel("bottom", self.tr("Temperature (°C)"))
        self.setMouseEnabled(x=False, y=False)
        self.legend = self.addLegend(offset=(10, 10))

        self.temperature_line = pg.InfiniteLine(
            angle=90,
            pen=pg.mkPen(config.CURSOR_COLOR, width=1.5, style=Qt.PenStyle.DashLine)
        )
        self.reference_line = pg.InfiniteLine(
            angle=0,
            pen=pg.mkPen(config.REFERENCE_COLOR, width=1.2, style=Qt.PenStyle.DashLine)
        )
        self._curves: dict[str, pg.PlotDataItem] = {}

        self.hover_label = pg.TextItem(
            anchor=(0, 1),
            fill=pg.mkBrush(8, 11, 20, 245),
            border=pg.mkPen(255, 255, 255, 30)
        )
        self.hover_label.setZValue(100)
        self._mouse_proxy = pg.SignalProxy(
            self.scene().sigMouseMoved, rateLimit=30, slot=self._on_mouse_moved
        )

    def _y(self, value: float) -> float:
        return math.log10(value) if self._log_scale else value

    def set_curves(self, grid: SampleGrid) -> None:
        """Replace all curves with those of `grid`."""
        self._grid = grid
        self.plotItem.clear()
        self.legend.clear()
        self._curves.clear()

        self.setLabel("left", self.tr("Vapor Pressure ({unit})").format(unit=grid.unit))
        temperatures = grid.temperatures()
        for name in grid.names:
            pen = pg.mkPen(self._colors.get(name, "w"), width=2)
            self._curves[name] = self.plot(
                temperatures, grid.series(name), pen=pen, name=name, connect="finite"
            )

        self.addItem(self.temperature_line, ignoreBounds=True)
        self.addItem(self.reference_line, ignoreBounds=True)
        self.addItem(self.hover_label, ignoreBounds=True)
        self.hover_label.hide()
        if len(temperatures):
            self.setXRange(temperatures[0], temperatures[-1], padding=0.01)
        self._apply_y_range()

    def set_log_scale(self, log_scale: bool) -> None:
        self._log_scale = log_scale
        self.setLogMode(x=False, y=log_scale)
        self.reference_line.setPos(self._y(self._reference))
        self._apply_y_range()

    def set_temperature(self, temperature_c: float) -> None:
        self.temperature_line.setPos(temperature_c)

    def set_reference(self, pressure: float) -> None:
        self._reference = pressure
        self.reference_line.setPos(self._y(pressure))

    def set_y_domain(self, lo: float, hi: float | None) -> None:
        self._y_domain = (lo, hi)
        self._apply_y_range()

    def _apply_y_range(self) -> None:
        lo, hi = self._y_domain
        if hi is None:
            hi = self._data_max()
        if hi is None or hi <= lo:
            # Nothing to plot above the floor; show one decade
            hi = lo * 10 if self._log_scale else lo + 1
        self.setYRange(self._y(lo), self._y(hi), padding=0)

    def _data_max(self) -> float | None:
        if self._grid is None or not self._grid.names:
            return None
        values = np.concatenate([self._grid.series(name) for name in self._grid.names])
        if np.all(np.isnan(values)):
            return None
        return float(np.nanmax(values))

    def _on_mouse_moved(self, event: tuple) -> None:
        pos = event[0]
        view_box = self.plotItem.vb
        if self._grid is None or not view_box.sceneBoundingRect().contains(pos):
            self.hover_label.hide()
            return

        point = view_box.mapSceneToView(pos)
        sample = self._grid.nearest(point.x())
        if sample is None or not sample.pressures:
            self.hover_label.hide()
            return

        unit = self._grid.unit
        lines = [f"<span style=\"color:#aaa\">T = {sample.temperature_c:g} °C</span>"]
        shown = [name for name in self._grid.names if name in sample.pressures][:MAX_HOVER_SERIES]
        for name in shown:
            color = self._colors.get(name, "#ffffff")
            value = format_hover_value(sample.pressures[name])
            lines.append(f"<span style=\"color:{color}\">{name}: {value} {unit}</span>")
        self.hover_label.setHtml("<br>".join(lines))
        self.hover_label.setPos(point.x(), point.y())
        self.hover_label.show()

    def export_image(self) -> None:
        """Ask for a path and save the chart as an image."""
        file_path, _selected_filter = QFileDialog.getSaveFileName(
            self,
            self.tr("Save chart as image"),
            "vapor_pressure.png",
            self.tr("PNG image (*.png);;JPEG image (*.jpg)")
        )
        if not file_path:
            return

        try:
            exporter = ImageExporter(self.plotItem)
            exporter.parameters()["width"] = 1920
            exporter.export(file_path)
            logger.info(f"Chart exported to {file_path}")
        except Exception as e:
            logger.exception("Failed to export chart")
            QMessageBox.critical(self, self.tr("Export error"), self.tr("Could not export chart:\n{e}").format(e=e))
