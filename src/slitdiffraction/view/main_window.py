"""
Main Application Window
=======================
The primary GUI container: input panel on the left, the three plots on the
right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It pushes input changes into the DiffractionCalculator and
   redraws the plots from the recomputed pattern.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QSplitter, QFileDialog, QMessageBox
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from slitdiffraction.config import VISIBLE_APP_NAME, DEFAULT_WINDOW_SIZE
from slitdiffraction.model.calculator import DiffractionCalculator, SlitCount
from slitdiffraction.model.io import ExportManager
from slitdiffraction.model.parameters import (
    ParameterKey, PARAMETER_RANGES, nm_to_model_units, color_band_for_wavelength, aperture_layout,
    format_peak_distance
)
from slitdiffraction.view.control_panel import ControlPanel
from slitdiffraction.view.widgets.plots import IntensityPlot, IntensityMap, ApertureView, APERTURE_PANE_WIDTH

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*DEFAULT_WINDOW_SIZE)

        self.controls = ControlPanel()
        self.calculator: DiffractionCalculator = self._calculator_from_controls()

        # --- LAYOUT ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)
        splitter.addWidget(self.controls)

        plots = QWidget()
        plots_layout = QVBoxLayout(plots)
        self.intensity_plot = IntensityPlot()
        self.intensity_map = IntensityMap()
        self.aperture_view = ApertureView()
        plots_layout.addWidget(self.intensity_plot, stretch=3)
        plots_layout.addWidget(self.intensity_map, stretch=1)
        plots_layout.addWidget(self.aperture_view, stretch=1)
        splitter.addWidget(plots)

        splitter.setSizes([350, 850])

        # --- SIGNAL CONNECTIONS ---
        self.controls.parameter_changed.connect(self.on_parameter_changed)
        self.controls.slit_count_changed.connect(self.on_slit_count_changed)
        self.controls.export_requested.connect(self.on_export)

        # Resizing changes the pixel extents the pattern is mapped into
        self.intensity_plot.getViewBox().sigResized.connect(lambda *_: self.draw_graphs())
        self.intensity_map.getViewBox().sigResized.connect(lambda *_: self.draw_graphs())

        self._create_actions()
        self._create_menus()

        self.draw_graphs()

    def _calculator_from_controls(self) -> DiffractionCalculator:
        return DiffractionCalculator(
            slit_width=self.controls.value(ParameterKey.SLIT_WIDTH),
            distance_from_screen=self.controls.value(ParameterKey.DISTANCE_FROM_SCREEN),
            wavelength=nm_to_model_units(self.controls.value(ParameterKey.WAVELENGTH)),
            slit_count=self.controls.slit_count,
            slit_separation=self.controls.value(ParameterKey.SLIT_SEPARATION),
        )

    def _create_actions(self) -> None:
        self.act_export = QAction("Export Parameters...", self)
        self.act_export.setShortcut("Ctrl+E")
        self.act_export.triggered.connect(self.on_export)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.act_export)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- DRAWING ---

    def draw_graphs(self) -> None:
        """Recompute the pattern and redraw every plot."""
        calc = self.calculator
        calc.compute_output()

        band = color_band_for_wavelength(self.controls.value(ParameterKey.WAVELENGTH))

        width, height = self.intensity_plot.display_size()
        self.intensity_plot.update_pattern(calc.map_values(width, height), band)

        width, height = self.intensity_map.display_size()
        self.intensity_map.update_pattern(calc.map_values(width, height), band)

        layout = aperture_layout(APERTURE_PANE_WIDTH, calc.slit_count, calc.slit_width, calc.slit_separation)
        self.aperture_view.update_aperture(layout, band)

        self.controls.set_peak_distance_text(format_peak_distance(calc.get_first_diffraction_distance()))

    # --- SLOTS ---

    def on_parameter_changed(self, key: str, value: float) -> None:
        calc = self.calculator
        match ParameterKey(key):
            case ParameterKey.WAVELENGTH:
                calc.wavelength = nm_to_model_units(value)
            case ParameterKey.SLIT_WIDTH:
                calc.slit_width = value
            case ParameterKey.DISTANCE_FROM_SCREEN:
                calc.distance_from_screen = value
            case ParameterKey.SLIT_SEPARATION:
                calc.slit_separation = value
        logger.debug(f"{PARAMETER_RANGES[ParameterKey(key)].label} set to {value}")
        self.draw_graphs()

    def on_slit_count_changed(self, slit_count: int) -> None:
        self.calculator.slit_count = SlitCount(slit_count)
        self.draw_graphs()

    def on_export(self) -> None:
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Export Parameters", "diffraction.txt", "Text files (*.txt)"
        )
        if not file_path:
            return

        if ExportManager.export_parameters(self.calculator, file_path):
            self.statusBar().showMessage(f"Parameters exported to {file_path}", 5000)
        else:
            QMessageBox.warning(self, "Export Error", f"Could not write {file_path}.")
