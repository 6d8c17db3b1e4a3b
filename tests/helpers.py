"""Shared constants and builders for the slitdiffraction tests."""
import numpy as np

from slitdiffraction.model.calculator import DiffractionCalculator, SlitCount

# Reference set: lambda * D = 0.5, so beta = pi * x * slit_width / 0.5
WAVELENGTH = 0.0005
SLIT_WIDTH = 1.0
DISTANCE = 1000.0
SEPARATION = 2.0


def make_calculator(slit_count=SlitCount.SINGLE, **overrides):
    """Return a DiffractionCalculator with the reference parameters."""
    params = dict(
        slit_width=SLIT_WIDTH,
        distance_from_screen=DISTANCE,
        wavelength=WAVELENGTH,
        slit_count=slit_count,
        slit_separation=SEPARATION,
    )
    params.update(overrides)
    return DiffractionCalculator(**params)


def count_local_maxima(values):
    """Number of samples strictly larger than both neighbours."""
    inner = values[1:-1]
    return int(np.count_nonzero((inner > values[:-2]) & (inner > values[2:])))
