from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QTableWidget, QTableWidgetItem, QHeaderView, QAbstractItemView, QWidget

from pahvapor.core.antoine import PressureUnit
from pahvapor.core.sampling import Phase, SummaryRow
from pahvapor.model.formatting import format_pressure, format_boiling_point

VAPOR_COLOR = "#f15bb5"
LIQUID_COLOR = "#555555"


class SummaryTable(QTableWidget):
    """Vapor pressure, boiling point and phase of each selected compound."""
    def __init__(self, colors: dict[str, str], parent: QWidget | None = None) -> None:
        super().__init__(0, 4, parent)
        self._colors = colors
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.verticalHeader().setVisible(False)
        header = self.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        for column in range(1, 4):
            header.setSectionResizeMode(column, QHeaderView.ResizeMode.ResizeToContents)
        self.set_unit(PressureUnit.TORR)

    def set_unit(self, unit: PressureUnit) -> None:
        self.setHorizontalHeaderLabels(
            [self.tr("Compound"), self.tr("VP ({unit})").format(unit=unit), self.tr("BP (°C)"), self.tr("Phase")]
        )

    def set_rows(self, rows: list[SummaryRow]) -> None:
        self.setRowCount(len(rows))
        for i, row in enumerate(rows):
            name_item = QTableWidgetItem(f"● {row.name}")
            name_item.setForeground(QColor(self._colors.get(row.name, "#cccccc")))
            self.setItem(i, 0, name_item)

            self.setItem(i, 1, self._number_item(format_pressure(row.vapor_pressure)))
            self.setItem(i, 2, self._number_item(format_boiling_point(row.boiling_point_c)))

            is_vapor = row.phase == Phase.VAPOR
            phase_item = self._number_item(self.tr("vapor ↑") if is_vapor else self.tr("liquid"))
            phase_item.setForeground(QColor(VAPOR_COLOR if is_vapor else LIQUID_COLOR))
            self.setItem(i, 3, phase_item)

    @staticmethod
    def _number_item(text: str) -> QTableWidgetItem:
        item = QTableWidgetItem(text)
        item.setTextAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        return item
