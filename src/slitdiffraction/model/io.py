"""
Input/Output Manager (Plain Text)
Writes the five diffraction inputs to a flat, human-readable text file.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slitdiffraction.model.calculator import DiffractionCalculator

logger = logging.getLogger(__name__)

# Fixed order of the export lines
EXPORT_LABELS: tuple[str, ...] = (
    "Wavelength",
    "Slit Width",
    "Distance to Screen",
    "Number of Slits",
    "Slit Separation",
)
SEPARATOR = ": "


def format_parameters(calculator: DiffractionCalculator) -> str:
    """
    One 'Label: value' line per input, wavelength in model units (mm).
    """
    values = (
        calculator.wavelength,
        calculator.slit_width,
        calculator.distance_from_screen,
        int(calculator.slit_count),
        calculator.slit_separation,
    )
    lines = [f"{label}{SEPARATOR}{value}" for label, value in zip(EXPORT_LABELS, values)]
    return "\n".join(lines) + "\n"


class ExportManager:

    @staticmethod
    def export_parameters(calculator: DiffractionCalculator, filepath: str) -> bool:
        """
        Save the current inputs to `filepath`. Best effort: failures are
        logged, never raised.

        Returns:
            True if the file was written.
        """
        logger.info(f"Exporting parameters to: {filepath}")
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                f.write(format_parameters(calculator))
        except OSError as e:
            logger.exception(f"Failed to export parameters: {e}")
            return False

        logger.info(f"Parameters exported to: {filepath}")
        return True
