from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QSlider, QSizePolicy
)

from pahvapor.model.formatting import parse_bound, format_bound


class BoundInput(QLineEdit):
    """
    Inline-editable number. Non-numeric input is ignored and the previous
    value is restored. With `allow_auto`, an empty field or "auto" commits None.
    """
    value_committed = Signal(object)

    def __init__(self, value: float | None = None, allow_auto: bool = False, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._value = value
        self._allow_auto = allow_auto
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setMaximumWidth(80)
        self.setToolTip(self.tr("Click to edit"))
        self.setText(format_bound(value))
        self.editingFinished.connect(self._commit)

    def set_value(self, value: float | None) -> None:
        self._value = value
        if not self.hasFocus():
            self.setText(format_bound(value))

    def keyPressEvent(self, event) -> None:
        if event.key() == Qt.Key.Key_Escape:
            self.setText(format_bound(self._value))
            self.clearFocus()
            return
        super().keyPressEvent(event)

    @Slot()
    def _commit(self) -> None:
        text = self.text().strip()
        if self._allow_auto and text.lower() in ("", "auto"):
            self.value_committed.emit(None)
            return
        value = parse_bound(text)
        if value is None:
            self.setText(format_bound(self._value))
            return
        self.value_committed.emit(value)


class EditableSlider(QWidget):
    """
    Float slider with a value badge and editable min/max bounds underneath.

    QSlider only works with integers, so the float range is mapped onto
    integer positions `round((value - min) / step)`.
    """
    value_changed = Signal(float)
    min_changed = Signal(float)
    max_changed = Signal(float)

    def __init__(
        self,
        label: str,
        badge: Callable[[float], str] = lambda v: f"{v:g}",
        accent_color: str = "#00f5d4",
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._badge = badge
        self._min = 0.0
        self._max = 1.0
        self._step = 1.0
        self._value = 0.0

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        header = QHBoxLayout()
        self.title = QLabel(label.upper(), self)
        self.title.setStyleSheet("color: #777; font-size: 10px; letter-spacing: 1px;")
        self.badge = QLabel(self)
        self.badge.setStyleSheet(f"color: {accent_color}; font-size: 18px; font-weight: bold;")
        header.addWidget(self.title)
        header.addStretch()
        header.addWidget(self.badge)
        root.addLayout(header)

        self.slider = QSlider(Qt.Orientation.Horizontal, self)
        self.slider.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.slider.setStyleSheet(f"QSlider::handle:horizontal {{ background: {accent_color}; }}")
        self.slider.valueChanged.connect(self._on_slider_moved)
        root.addWidget(self.slider)

        bounds = QHBoxLayout()
        self.min_input = BoundInput(parent=self)
        self.max_input = BoundInput(parent=self)
        hint = QLabel(self.tr("CLICK TO EDIT BOUNDS"), self)
        hint.setStyleSheet("color: #555; font-size: 9px;")
        bounds.addWidget(self.min_input)
        bounds.addStretch()
        bounds.addWidget(hint)
        bounds.addStretch()
        bounds.addWidget(self.max_input)
        root.addLayout(bounds)

        self.min_input.value_committed.connect(self.min_changed.emit)
        self.max_input.value_committed.connect(self.max_changed.emit)

    def set_label(self, label: str) -> None:
        self.title.setText(label.upper())

    def set_range(self, minimum: float, maximum: float, step: float, value: float) -> None:
        """Update bounds, resolution and value without emitting `value_changed`."""
        self._min, self._max, self._step, self._value = minimum, maximum, step, value
        self.min_input.set_value(minimum)
        self.max_input.set_value(maximum)

        self.slider.blockSignals(True)
        self.slider.setRange(0, max(1, round((maximum - minimum) / step)))
        self.slider.setValue(round((value - minimum) / step))
        self.slider.blockSignals(False)
        self.badge.setText(self._badge(value))

    @Slot(int)
    def _on_slider_moved(self, position: int) -> None:
        self._value = min(self._max, self._min + position * self._step)
        self.badge.setText(self._badge(self._value))
        self.value_changed.emit(self._value)
