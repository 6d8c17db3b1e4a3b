"""
Input Parameters & Presentation Policy
======================================
Everything the GUI needs to turn raw user input into model parameters, and
model results into display decisions, without knowing about Qt.

Why is this file needed?
------------------------
1. Range policy: The accepted range of each input, clamping, and the
   fallback-to-minimum rule for unparseable text live here, not in widgets.
2. Unit contract: The GUI shows the wavelength in nm, the model stores mm.
3. Presentation: Colour band selection from the wavelength, the aperture
   sketch layout and the peak distance label.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, TYPE_CHECKING

import numpy as np

from slitdiffraction.config import NM_PER_MODEL_UNIT, COLOR_CHANNEL_MAX, PEAK_DISTANCE_FORMAT
from slitdiffraction.model.calculator import SlitCount

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Input ranges
# ------------------------------------------------------------------------------
class ParameterKey(StrEnum):
    WAVELENGTH = "wavelength"
    SLIT_WIDTH = "slit_width"
    DISTANCE_FROM_SCREEN = "distance_from_screen"
    SLIT_SEPARATION = "slit_separation"


@dataclass(frozen=True)
class ParameterRange:
    """
    Accepted range of one user input (in GUI units).
    """
    label: str
    unit: str
    minimum: float
    maximum: float
    default: float
    decimals: int = 1

    def clamp(self, value: float) -> float:
        return min(max(value, self.minimum), self.maximum)

    def format(self, value: float) -> str:
        return f"{value:g}"

    def parse(self, text: str) -> tuple[float, str]:
        """
        Convert text typed by the user into a value inside the range.

        Values outside the range are clamped and the text is replaced by the
        bound. Text that is not a plain finite number (NaN, inf, "1_000") falls
        back to the minimum.

        Args:
            text: Raw text from an input field.

        Returns:
            (value, text to show in the field)
        """
        stripped = text.strip()
        try:
            # float() also takes digit separators, which a field should not
            value = float(stripped) if "_" not in stripped else math.nan
        except ValueError:
            value = math.nan

        if not math.isfinite(value):
            logger.warning(f"Invalid {self.label.lower()} '{text}', using minimum {self.format(self.minimum)}")
            return self.minimum, self.format(self.minimum)

        clamped = self.clamp(value)
        if clamped != value:
            logger.debug(f"{self.label} {stripped} clamped to {self.format(clamped)}")
            return clamped, self.format(clamped)
        return value, stripped


PARAMETER_RANGES: Dict[ParameterKey, ParameterRange] = {
    ParameterKey.WAVELENGTH: ParameterRange(
        label="Wavelength", unit="nm", minimum=400.0, maximum=700.0, default=500.0, decimals=0
    ),
    ParameterKey.SLIT_WIDTH: ParameterRange(
        label="Slit Width", unit="mm", minimum=0.5, maximum=3.0, default=1.0, decimals=1
    ),
    ParameterKey.DISTANCE_FROM_SCREEN: ParameterRange(
        label="Distance to Screen", unit="mm", minimum=500.0, maximum=1000.0, default=1000.0, decimals=0
    ),
    ParameterKey.SLIT_SEPARATION: ParameterRange(
        label="Slit Separation", unit="mm", minimum=0.0, maximum=10.0, default=2.0, decimals=1
    ),
}


def nm_to_model_units(nanometres: float) -> float:
    """Wavelength typed in nm -> model length unit (mm)."""
    return nanometres / NM_PER_MODEL_UNIT


# ------------------------------------------------------------------------------
# Colour band
# ------------------------------------------------------------------------------
class ColorBand(StrEnum):
    """Display colour chosen from the wavelength."""
    BLUE = "blue"
    GREEN = "green"
    RED = "red"

    @property
    def channel(self) -> int:
        """Index of the RGB channel driven by the intensity."""
        match self:
            case ColorBand.RED:
                return 0
            case ColorBand.GREEN:
                return 1
            case _:
                return 2

    @property
    def rgb(self) -> tuple[int, int, int]:
        rgb = [0, 0, 0]
        rgb[self.channel] = int(COLOR_CHANNEL_MAX)
        return rgb[0], rgb[1], rgb[2]

    def channel_colors(self, color_values: npt.NDArray[np.float64]) -> npt.NDArray[np.uint8]:
        """
        Build (n, 3) 8-bit colours with the mapped intensity in this band's channel.

        Values are clamped to 0..255 and truncated; NaN becomes 0.
        """
        values = np.nan_to_num(np.asarray(color_values, dtype=np.float64), nan=0.0)
        channel_values = np.clip(values, 0.0, COLOR_CHANNEL_MAX).astype(np.uint8)

        colors = np.zeros((channel_values.size, 3), dtype=np.uint8)
        colors[:, self.channel] = channel_values
        return colors


def color_band_for_wavelength(nanometres: float) -> ColorBand:
    """400-500 nm blue, above 500 up to 600 nm green, anything else red."""
    if 400.0 <= nanometres <= 500.0:
        return ColorBand.BLUE
    if 500.0 < nanometres <= 600.0:
        return ColorBand.GREEN
    return ColorBand.RED


# ------------------------------------------------------------------------------
# Aperture sketch & labels
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class ApertureLayout:
    """Horizontal centres of the slit bars and their stroke width (pane units)."""
    centers: tuple[float, ...]
    stroke_width: float


def aperture_layout(
    pane_width: float,
    slit_count: SlitCount | int,
    slit_width: float,
    slit_separation: float
) -> ApertureLayout:
    """
    Lay out the slit sketch in a pane of the given width.

    The stroke is pane_width/30 per unit of slit width; two slits sit
    pane_width/20 per unit of separation apart, around the pane centre.
    """
    middle = pane_width / 2.0
    stroke_width = pane_width / 30.0 * slit_width

    if SlitCount(slit_count) is SlitCount.SINGLE:
        return ApertureLayout(centers=(middle,), stroke_width=stroke_width)

    offset = pane_width / 20.0 * slit_separation / 2.0
    return ApertureLayout(centers=(middle - offset, middle + offset), stroke_width=stroke_width)


def format_peak_distance(distance: float) -> str:
    return PEAK_DISTANCE_FORMAT.format(distance)
