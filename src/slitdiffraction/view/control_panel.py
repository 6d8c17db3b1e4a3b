"""
Diffraction Inputs Control Panel
"""
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QFormLayout, QRadioButton, QButtonGroup,
    QPushButton, QLabel
)
from PySide6.QtCore import Signal, Qt

from slitdiffraction.model.calculator import SlitCount
from slitdiffraction.model.parameters import PARAMETER_RANGES, ParameterKey
from slitdiffraction.view.widgets.parameter_input import ParameterInput


class ControlPanel(QWidget):
    # (parameter key, value in GUI units)
    parameter_changed = Signal(str, float)
    slit_count_changed = Signal(int)
    export_requested = Signal()

    def __init__(self) -> None:
        super().__init__()
        layout = QVBoxLayout(self)

        # --- Inputs ---
        grp_inputs = QGroupBox("Inputs")
        form = QFormLayout(grp_inputs)

        self.inputs: dict[ParameterKey, ParameterInput] = {}
        for key, parameter in PARAMETER_RANGES.items():
            widget = ParameterInput(parameter)
            # Bind the key now, the loop variable would be late-bound
            widget.value_changed.connect(lambda value, k=key: self.parameter_changed.emit(str(k), value))
            self.inputs[key] = widget
            form.addRow(f"{parameter.label}:", widget)

        layout.addWidget(grp_inputs)

        # --- Slits ---
        grp_slits = QGroupBox("Number of Slits")
        slits_layout = QHBoxLayout(grp_slits)

        self.btn_single = QRadioButton("Single")
        self.btn_double = QRadioButton("Double")
        self.btn_single.setChecked(True)

        self.slit_group = QButtonGroup(self)
        self.slit_group.addButton(self.btn_single, int(SlitCount.SINGLE))
        self.slit_group.addButton(self.btn_double, int(SlitCount.DOUBLE))
        self.slit_group.idToggled.connect(self._on_slit_toggled)

        slits_layout.addWidget(self.btn_single)
        slits_layout.addWidget(self.btn_double)
        layout.addWidget(grp_slits)

        self._set_separation_enabled(False)

        # --- Result ---
        self.lbl_peak_distance = QLabel("")
        self.lbl_peak_distance.setAlignment(Qt.AlignCenter)
        self.lbl_peak_distance.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.lbl_peak_distance)

        # --- Actions ---
        self.btn_export = QPushButton("Export Parameters...")
        self.btn_export.setMinimumHeight(40)
        self.btn_export.clicked.connect(self.export_requested.emit)
        layout.addWidget(self.btn_export)

        layout.addStretch()

    # --- PROPERTIES ---

    @property
    def slit_count(self) -> SlitCount:
        return SlitCount(self.slit_group.checkedId())

    def value(self, key: ParameterKey) -> float:
        return self.inputs[key].value

    def set_peak_distance_text(self, text: str) -> None:
        self.lbl_peak_distance.setText(text)

    # --- SLOTS ---

    def _set_separation_enabled(self, enabled: bool) -> None:
        # Separation means nothing for a single slit
        self.inputs[ParameterKey.SLIT_SEPARATION].setEnabled(enabled)

    def _on_slit_toggled(self, button_id: int, checked: bool) -> None:
        if not checked:
            return
        self._set_separation_enabled(button_id == int(SlitCount.DOUBLE))
        self.slit_count_changed.emit(button_id)
