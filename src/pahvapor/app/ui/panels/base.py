from __future__ import annotations

from PySide6.QtWidgets import QWidget, QGroupBox

from pahvapor.app.state import Store


class BasePanel(QGroupBox):
    """Base class for sidebar panels. Holds a reference to the global store."""
    TITLE: str = ""  # Override in subclass

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.setTitle(self.tr(self.TITLE))
