"""
Diffraction Calculator (Numeric Model)
======================================
This module holds the Fraunhofer single/double-slit diffraction model.

Why is this file needed?
------------------------
1. Physics: It evaluates the diffraction intensity over a fixed set of screen
   positions and the closed-form spacing of the first diffraction peak.
2. Display mapping: It projects the sampled intensities into pixel coordinates
   and an 8-bit colour channel, so the View never touches the physics.

Units:
    All lengths share one unit (millimetres). The wavelength is therefore
    stored in mm as well; a GUI working in nanometres must divide by 1e6
    (see `slitdiffraction.model.parameters.nm_to_model_units`) before calling
    the setter.

Classes:
    SlitCount: Single or double slit.
    MappedValues: Display projection of the sampled pattern.
    DiffractionCalculator: The model.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import NamedTuple, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from slitdiffraction.config import (
    SAMPLE_COUNT, SAMPLE_SCALE, DOMAIN_HALF_WIDTH, BETA_EPSILON, COLOR_CHANNEL_MAX
)

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class SlitCount(IntEnum):
    """Number of slits in the aperture."""
    SINGLE = 1
    DOUBLE = 2


class MappedValues(NamedTuple):
    """Parallel arrays ready for drawing: pixel x, pixel y and colour channel."""
    x: npt.NDArray[np.float64]
    y: npt.NDArray[np.float64]
    color: npt.NDArray[np.float64]


def build_sample_domain(count: int = SAMPLE_COUNT, scale: float = SAMPLE_SCALE) -> npt.NDArray[np.float64]:
    """
    Build the fixed, symmetric set of screen positions.

    The positions are `±(count - 2*i) / scale` for `i < count // 2` plus an
    exact zero in the middle, so for the default 1501 samples the domain runs
    from -1.501 to 1.501 over the odd thousandths.

    Args:
        count: Number of samples (odd).
        scale: Divisor turning the integer offsets into positions.

    Returns:
        Strictly increasing array of length `count`.
    """
    half = count // 2
    offsets = count - 2 * np.arange(half, dtype=np.float64)
    right = offsets[::-1] / scale
    # Mirrored from the same values so that input[i] == -input[-1 - i] exactly
    return np.concatenate((-right[::-1], [0.0], right))


class DiffractionCalculator:
    """
    Fraunhofer diffraction model for one or two slits.

    Setting a parameter only stores it. Call `compute_output()` afterwards to
    refresh `output_values`, then `map_values()` to get drawable data.
    """

    def __init__(
        self,
        slit_width: float,
        distance_from_screen: float,
        wavelength: float,
        slit_count: SlitCount | int,
        slit_separation: float
    ) -> None:
        """
        Args:
            slit_width: Width of the slit (or of each slit).
            distance_from_screen: Distance from the slits to the screen.
            wavelength: Wavelength of the light, in the same unit as the distances.
            slit_count: 1 or 2.
            slit_separation: Distance between the two slits, used for SlitCount.DOUBLE only.
        """
        self.slit_width: float = slit_width
        self.distance_from_screen: float = distance_from_screen
        self.wavelength: float = wavelength
        self.slit_count = slit_count
        self.slit_separation: float = slit_separation

        self._input_values: npt.NDArray[np.float64] = build_sample_domain()
        self._input_values.setflags(write=False)
        self._output_values: npt.NDArray[np.float64] = np.zeros(SAMPLE_COUNT, dtype=np.float64)

    # --- PARAMETERS ---

    @property
    def slit_count(self) -> SlitCount:
        return self._slit_count

    @slit_count.setter
    def slit_count(self, value: SlitCount | int) -> None:
        # Raises ValueError for anything but 1 or 2
        self._slit_count = SlitCount(value)

    # --- SAMPLES ---

    @property
    def input_values(self) -> npt.NDArray[np.float64]:
        """Screen positions (read-only view)."""
        return self._input_values

    @property
    def output_values(self) -> npt.NDArray[np.float64]:
        """Intensities from the last `compute_output()` call."""
        return self._output_values

    @property
    def input_length(self) -> int:
        return len(self._input_values)

    # --- CALCULATION ---

    def calculate_intensity(self, x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Relative intensity at screen position(s) x.

        Single slit: (sin(beta) / beta)^2 with
        beta = pi * x * slit_width / (wavelength * distance_from_screen).
        Double slit: additionally multiplied by
        cos(pi * slit_separation * x / (wavelength * distance_from_screen))^2.

        Args:
            x: Screen position or array of positions.

        Returns:
            Intensity in [0, 1] for valid parameters; NaN/inf for degenerate ones.
        """
        # The pattern is even in x; evaluating on |x| keeps it exactly symmetric
        x_abs = np.abs(np.atleast_1d(np.asarray(x, dtype=np.float64)))
        scale = self.wavelength * self.distance_from_screen

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            beta = np.pi * x_abs * self.slit_width / scale
            singular = np.abs(beta) < BETA_EPSILON
            # lim sin(beta)/beta = 1 at beta -> 0
            term = np.where(singular, 1.0, np.sin(beta) / np.where(singular, 1.0, beta))
            intensity = term * term

            if self.slit_count is SlitCount.DOUBLE:
                modulation = np.cos(np.pi * self.slit_separation * x_abs / scale)
                intensity = intensity * (modulation * modulation)

        if np.ndim(x) == 0:
            return float(intensity[0])
        return intensity

    def compute_output(self) -> npt.NDArray[np.float64]:
        """
        Recompute the intensity at every sample position.

        Returns:
            The refreshed `output_values` array.
        """
        # Refilled in place, references from `output_values` stay current
        self._output_values[:] = self.calculate_intensity(self._input_values)
        logger.debug(
            f"Computed {self.input_length} samples "
            f"(slits={int(self.slit_count)}, width={self.slit_width}, "
            f"distance={self.distance_from_screen}, wavelength={self.wavelength})"
        )
        return self._output_values

    def map_values(self, width: float, height: float) -> MappedValues:
        """
        Project the last computed pattern onto a display area.

        x is rescaled linearly from [-1.501, 1.501] to [0, width]. y is flipped
        for a top-left origin: intensity 1 maps to row 0, intensity 0 to row
        `height`. The colour channel is intensity * 255 and is NOT clamped.

        Args:
            width: Width of the drawing area.
            height: Height of the drawing area.

        Returns:
            MappedValues with three arrays of length `input_length`.
        """
        x_min, x_max = -DOMAIN_HALF_WIDTH, DOMAIN_HALF_WIDTH
        out = self._output_values

        # Ratio first, so the domain ends land exactly on 0 and width
        mapped_x = (self._input_values - x_min) / (x_max - x_min) * width
        mapped_y = height - (out * height)
        mapped_color = out * COLOR_CHANNEL_MAX
        return MappedValues(mapped_x, mapped_y, mapped_color)

    def get_first_diffraction_distance(self) -> float:
        """
        Closed-form distance between the central maximum and the first
        adjacent peak.

        Returns:
            D * lambda / a for a single slit, 0.5 * D * lambda / d for two slits.
            A zero width or separation gives inf (nan for 0/0), no exception.
        """
        if self.slit_count is SlitCount.DOUBLE:
            numerator, divisor = 0.5 * self.distance_from_screen * self.wavelength, self.slit_separation
        else:
            numerator, divisor = self.distance_from_screen * self.wavelength, self.slit_width

        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.divide(np.float64(numerator), divisor))

    def plot(self) -> None:
        """
        Quick-look matplotlib figure of the current pattern.
        """
        intensities = self.calculate_intensity(self._input_values)

        plt.rcParams["figure.constrained_layout.use"] = True
        plt.figure(figsize=(7, 5))

        plt.plot(self._input_values, intensities, 'b', lw=1.5)

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        label = "Single" if self.slit_count is SlitCount.SINGLE else "Double"
        plt.title(f"{label} Slit Diffraction Pattern")
        plt.xlabel("Screen position (mm)")
        plt.ylabel("Relative intensity (-)")

        plt.xlim(-DOMAIN_HALF_WIDTH, DOMAIN_HALF_WIDTH)
        plt.show()
