"""
pyqtgraph widgets showing the diffraction pattern.

All three plots draw in display coordinates with a top-left origin, the same
coordinates produced by DiffractionCalculator.map_values().
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from PySide6.QtWidgets import QWidget, QFileDialog, QMessageBox
from PySide6.QtGui import QPainter
from PySide6.QtPrintSupport import QPrinter, QPrintDialog

from slitdiffraction.model.calculator import MappedValues
from slitdiffraction.model.parameters import ColorBand, ApertureLayout

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

APERTURE_PANE_WIDTH = 300.0
APERTURE_PANE_HEIGHT = 100.0


class PatternPlotWidget(pg.PlotWidget):
    """
    Base plot: white background, no axes, y pointing down, with
    "Save Image..." and "Print..." in the right-click menu.
    """

    def __init__(self, title: str, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self.setBackground('w')
        self.setTitle(title, color='black', size='11pt')
        self.setMouseEnabled(x=False, y=False)
        self.hideButtons()
        for axis in ('left', 'bottom'):
            self.getPlotItem().hideAxis(axis)
        self.getViewBox().invertY(True)

        menu = self.getViewBox().menu
        menu.addSeparator()
        act_save = menu.addAction("Save Image...")
        act_save.triggered.connect(self.save_image)
        act_print = menu.addAction("Print...")
        act_print.triggered.connect(self.print_plot)

    def display_size(self) -> tuple[float, float]:
        """Current size of the drawing area in pixels."""
        rect = self.getViewBox().boundingRect()
        return max(rect.width(), 1.0), max(rect.height(), 1.0)

    def set_display_range(self, width: float, height: float) -> None:
        self.getViewBox().setRange(xRange=(0.0, width), yRange=(0.0, height), padding=0.0)

    def save_image(self) -> None:
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save Image",
            "diffraction.png",
            "PNG files (*.png);;BMP files (*.bmp);;JPEG files (*.jpg)"
        )
        if not file_path:
            return

        try:
            exporter = ImageExporter(self.getPlotItem())
            exporter.export(file_path)
            logger.info(f"Plot exported to {file_path}")
        except Exception as e:
            logger.exception("Failed to export plot")
            QMessageBox.critical(self, "Export Error", f"Could not save the image:\n{str(e)}")

    def print_plot(self) -> None:
        printer = QPrinter(QPrinter.HighResolution)
        dialog = QPrintDialog(printer, self)
        if dialog.exec() != QPrintDialog.Accepted:
            return

        painter = QPainter()
        if not painter.begin(printer):
            logger.warning("Printer could not be started.")
            return
        try:
            self.render(painter)
        finally:
            painter.end()
        logger.info("Plot sent to printer.")


class IntensityPlot(PatternPlotWidget):
    """Intensity curve over the screen."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Intensity", parent)
        self.curve = self.plot([], [], pen=pg.mkPen(color=ColorBand.BLUE.rgb, width=1))

    def update_pattern(self, mapped: MappedValues, band: ColorBand) -> None:
        width, height = self.display_size()
        self.curve.setData(mapped.x, mapped.y)
        self.curve.setPen(pg.mkPen(color=band.rgb, width=1))
        self.set_display_range(width, height)


class IntensityMap(PatternPlotWidget):
    """What the screen looks like: one colour stripe per sample."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Intensity Map", parent)
        self.image = pg.ImageItem(axisOrder='row-major')
        self.addItem(self.image)

    def update_pattern(self, mapped: MappedValues, band: ColorBand) -> None:
        width, height = self.display_size()
        colors: npt.NDArray[np.uint8] = band.channel_colors(mapped.color)

        # One row of stripes, stretched over the whole area
        stripes = colors[np.newaxis, :, :]
        self.image.setImage(stripes, levels=(0, 255), autoLevels=False)
        self.image.setRect(0.0, 0.0, width, height)
        self.set_display_range(width, height)


class ApertureView(PatternPlotWidget):
    """Sketch of the slit(s) in a fixed logical pane."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Aperture", parent)
        self.bars: pg.BarGraphItem | None = None

    def update_aperture(self, layout: ApertureLayout, band: ColorBand) -> None:
        if self.bars is not None:
            self.removeItem(self.bars)

        self.bars = pg.BarGraphItem(
            x=np.array(layout.centers),
            height=APERTURE_PANE_HEIGHT,
            y0=0.0,
            width=layout.stroke_width,
            brush=pg.mkBrush(band.rgb),
            pen=pg.mkPen(None)
        )
        self.addItem(self.bars)
        self.set_display_range(APERTURE_PANE_WIDTH, APERTURE_PANE_HEIGHT)
