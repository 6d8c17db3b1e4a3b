"""
Slider + text field pair for one diffraction input.
"""
from __future__ import annotations

from PySide6.QtWidgets import QWidget, QHBoxLayout, QSlider, QLineEdit, QPushButton, QLabel
from PySide6.QtCore import Qt, Signal

from slitdiffraction.model.parameters import ParameterRange


class ParameterInput(QWidget):
    """
    Keeps a slider and a line edit in sync for one ParameterRange.

    The slider works in integer steps of 10**-decimals. Text is validated with
    ParameterRange.parse() when Enter is pressed or the button is clicked.
    """
    value_changed = Signal(float)

    def __init__(self, parameter: ParameterRange, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.parameter = parameter
        self._scale = 10 ** parameter.decimals
        # Last emitted value, may be finer than a slider step
        self._value: float = parameter.default

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(self._to_slider(parameter.minimum), self._to_slider(parameter.maximum))
        self.slider.setValue(self._to_slider(parameter.default))
        self.slider.valueChanged.connect(self._on_slider_changed)
        layout.addWidget(self.slider, stretch=3)

        self.line_edit = QLineEdit(parameter.format(parameter.default))
        self.line_edit.setMaximumWidth(80)
        self.line_edit.returnPressed.connect(self._on_text_entered)
        layout.addWidget(self.line_edit)

        layout.addWidget(QLabel(parameter.unit))

        self.btn_enter = QPushButton("Enter")
        self.btn_enter.clicked.connect(self._on_text_entered)
        layout.addWidget(self.btn_enter)

    # --- PROPERTIES ---

    @property
    def value(self) -> float:
        return self._value

    # --- HELPERS ---

    def _to_slider(self, value: float) -> int:
        return int(round(value * self._scale))

    # --- SLOTS ---

    def _on_slider_changed(self, position: int) -> None:
        self._value = position / self._scale
        self.line_edit.setText(self.parameter.format(self._value))
        self.value_changed.emit(self._value)

    def _on_text_entered(self) -> None:
        value, text = self.parameter.parse(self.line_edit.text())
        self.line_edit.setText(text)

        # Move the slider without a second emit, the text may be finer than a slider step
        self.slider.blockSignals(True)
        self.slider.setValue(self._to_slider(value))
        self.slider.blockSignals(False)
        self._value = value
        self.value_changed.emit(value)
