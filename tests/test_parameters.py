"""Tests for input ranges and presentation helpers in slitdiffraction.model.parameters."""

import logging

import numpy as np
import pytest

from slitdiffraction.model.calculator import SlitCount
from slitdiffraction.model.parameters import (
    PARAMETER_RANGES, ColorBand, ParameterKey, ParameterRange, aperture_layout,
    color_band_for_wavelength, format_peak_distance, nm_to_model_units
)

WAVELENGTH_RANGE = PARAMETER_RANGES[ParameterKey.WAVELENGTH]


def test_documented_ranges():
    expected = {
        ParameterKey.WAVELENGTH: (400.0, 700.0),
        ParameterKey.SLIT_SEPARATION: (0.0, 10.0),
        ParameterKey.SLIT_WIDTH: (0.5, 3.0),
        ParameterKey.DISTANCE_FROM_SCREEN: (500.0, 1000.0),
    }
    for key, (minimum, maximum) in expected.items():
        parameter = PARAMETER_RANGES[key]
        assert (parameter.minimum, parameter.maximum) == (minimum, maximum)
        assert minimum <= parameter.default <= maximum


@pytest.mark.parametrize("text, expected", [
    ("550", (550.0, "550")),
    (" 612.5 ", (612.5, "612.5")),
    ("700", (700.0, "700")),
    ("800", (700.0, "700")),
    ("100", (400.0, "400")),
    ("-3", (400.0, "400")),
])
def test_parse_clamps(text, expected):
    assert WAVELENGTH_RANGE.parse(text) == expected


@pytest.mark.parametrize("text", ["abc", "", "nan", "5,5", "inf", "-inf", "infinity", "1_000"])
def test_parse_falls_back_to_minimum(text, caplog):
    with caplog.at_level(logging.WARNING, logger="slitdiffraction"):
        assert WAVELENGTH_RANGE.parse(text) == (400.0, "400")
    assert any("using minimum" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("key, text, expected", [
    (ParameterKey.SLIT_WIDTH, "0.1", (0.5, "0.5")),
    (ParameterKey.SLIT_WIDTH, "x", (0.5, "0.5")),
    (ParameterKey.SLIT_SEPARATION, "-1", (0.0, "0")),
    (ParameterKey.SLIT_SEPARATION, "12", (10.0, "10")),
    (ParameterKey.DISTANCE_FROM_SCREEN, "1200", (1000.0, "1000")),
    (ParameterKey.DISTANCE_FROM_SCREEN, "?", (500.0, "500")),
])
def test_parse_other_parameters(key, text, expected):
    assert PARAMETER_RANGES[key].parse(text) == expected


def test_clamp():
    parameter = ParameterRange(label="Test", unit="-", minimum=1.0, maximum=2.0, default=1.5)
    assert parameter.clamp(0.0) == 1.0
    assert parameter.clamp(1.25) == 1.25
    assert parameter.clamp(3.0) == 2.0


def test_unit_conversion():
    assert nm_to_model_units(500.0) == pytest.approx(0.0005)
    assert nm_to_model_units(700.0) == pytest.approx(0.0007)


@pytest.mark.parametrize("nanometres, band", [
    (400.0, ColorBand.BLUE),
    (450.0, ColorBand.BLUE),
    (500.0, ColorBand.BLUE),
    (500.5, ColorBand.GREEN),
    (600.0, ColorBand.GREEN),
    (600.1, ColorBand.RED),
    (700.0, ColorBand.RED),
    (350.0, ColorBand.RED),
])
def test_color_band_for_wavelength(nanometres, band):
    assert color_band_for_wavelength(nanometres) is band


def test_color_band_rgb():
    assert ColorBand.RED.rgb == (255, 0, 0)
    assert ColorBand.GREEN.rgb == (0, 255, 0)
    assert ColorBand.BLUE.rgb == (0, 0, 255)


def test_channel_colors_clamped_and_truncated():
    colors = ColorBand.GREEN.channel_colors(np.array([0.0, 127.9, 255.0, 300.0, -5.0, np.nan]))
    assert colors.dtype == np.uint8
    assert colors.shape == (6, 3)
    assert colors[:, 1].tolist() == [0, 127, 255, 255, 0, 0]
    assert not colors[:, [0, 2]].any()


def test_aperture_layout_single():
    layout = aperture_layout(300.0, SlitCount.SINGLE, 1.0, 2.0)
    assert layout.centers == (150.0,)
    assert layout.stroke_width == pytest.approx(10.0)


def test_aperture_layout_double():
    layout = aperture_layout(300.0, SlitCount.DOUBLE, 0.5, 2.0)
    assert layout.centers == pytest.approx((135.0, 165.0))
    assert layout.stroke_width == pytest.approx(5.0)


def test_aperture_layout_rejects_invalid_count():
    with pytest.raises(ValueError):
        aperture_layout(300.0, 3, 1.0, 2.0)


def test_format_peak_distance():
    assert format_peak_distance(0.5) == "Diffraction Peak Distance: 0.500000"
    assert format_peak_distance(0.125) == "Diffraction Peak Distance: 0.125000"
