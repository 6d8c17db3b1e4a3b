"""Test configuration for slitdiffraction.

Fixtures
--------
calculator
    Single-slit model with the reference parameters, already computed.
double_calculator
    Same parameters with two slits, already computed.
qapp
    Shared QApplication on the offscreen platform, for widget tests.
"""
import os

import matplotlib

# No display during tests; must run before pyplot is imported
matplotlib.use("Agg")

import pytest
from PySide6.QtWidgets import QApplication

from slitdiffraction.model.calculator import SlitCount

from .helpers import make_calculator


@pytest.fixture
def calculator():
    calc = make_calculator()
    calc.compute_output()
    return calc


@pytest.fixture
def double_calculator():
    calc = make_calculator(SlitCount.DOUBLE)
    calc.compute_output()
    return calc


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    return QApplication.instance() or QApplication([])
