from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QGridLayout

from pahvapor.app.state import Store
from pahvapor.app.ui.panels.base import BasePanel


class CompoundPanel(BasePanel):
    """One checkable, color-coded button per compound plus a toggle-all button."""
    TITLE = "Select Compounds"
    COLUMNS = 2

    def __init__(self, store: Store, colors: dict[str, str], parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        self.buttons: dict[str, QPushButton] = {}

        root = QVBoxLayout(self)

        header = QHBoxLayout()
        self.toggle_all_btn = QPushButton(self)
        self.toggle_all_btn.clicked.connect(self._toggle_all)
        header.addStretch()
        header.addWidget(self.toggle_all_btn)
        root.addLayout(header)

        grid = QGridLayout()
        grid.setSpacing(4)
        for i, name in enumerate(store.state.registry.names()):
            color = colors[name]
            button = QPushButton(name, self)
            button.setCheckable(True)
            button.setStyleSheet(
                f"QPushButton {{ border: 1.5px solid {color}; border-radius: 5px; padding: 4px 8px;"
                f" color: {color}; background: transparent; }}"
                f"QPushButton:checked {{ background: {color}; color: #111; }}"
            )
            button.clicked.connect(lambda _checked=False, n=name: self.store.toggle(n))
            grid.addWidget(button, i // self.COLUMNS, i % self.COLUMNS)
            self.buttons[name] = button
        root.addLayout(grid)

        self.store.selection_changed.connect(self._sync)
        self._sync()

    @Slot()
    def _sync(self) -> None:
        selected = self.store.state.selected
        for name, button in self.buttons.items():
            button.blockSignals(True)
            button.setChecked(name in selected)
            button.blockSignals(False)
        all_selected = len(selected) == len(self.buttons)
        self.toggle_all_btn.setText(self.tr("Deselect all") if all_selected else self.tr("Select all"))

    @Slot()
    def _toggle_all(self) -> None:
        # If any are unselected, select all; otherwise clear the selection
        any_unselected = len(self.store.state.selected) < len(self.buttons)
        self.store.set_all_selected(any_unselected)
