"""Tests for the flat text export in slitdiffraction.model.io."""

import logging

from slitdiffraction.model.calculator import SlitCount
from slitdiffraction.model.io import EXPORT_LABELS, ExportManager, format_parameters

from .helpers import make_calculator

EXPECTED_EXPORT = (
    "Wavelength: 0.0005\n"
    "Slit Width: 1.0\n"
    "Distance to Screen: 1000.0\n"
    "Number of Slits: 1\n"
    "Slit Separation: 2.0\n"
)


def test_format_parameters():
    assert format_parameters(make_calculator()) == EXPECTED_EXPORT


def test_format_parameters_double_slit():
    text = format_parameters(make_calculator(SlitCount.DOUBLE, slit_separation=7.5))
    lines = text.splitlines()
    assert [line.split(": ")[0] for line in lines] == list(EXPORT_LABELS)
    assert lines[3] == "Number of Slits: 2"
    assert lines[4] == "Slit Separation: 7.5"


def test_export_parameters(tmp_path):
    target = tmp_path / "params.txt"
    assert ExportManager.export_parameters(make_calculator(), str(target)) is True
    assert target.read_text(encoding="utf-8") == EXPECTED_EXPORT


def test_export_double_slit(tmp_path):
    target = tmp_path / "params.txt"
    calc = make_calculator(SlitCount.DOUBLE, wavelength=0.00065, slit_width=2.5)
    assert ExportManager.export_parameters(calc, str(target)) is True
    assert target.read_text(encoding="utf-8").splitlines() == [
        "Wavelength: 0.00065",
        "Slit Width: 2.5",
        "Distance to Screen: 1000.0",
        "Number of Slits: 2",
        "Slit Separation: 2.0",
    ]


def test_export_failure_is_logged_not_raised(tmp_path, caplog):
    target = tmp_path / "missing" / "params.txt"
    with caplog.at_level(logging.ERROR, logger="slitdiffraction"):
        assert ExportManager.export_parameters(make_calculator(), str(target)) is False
    assert not target.exists()
    assert any("Failed to export parameters" in r.getMessage() for r in caplog.records)
