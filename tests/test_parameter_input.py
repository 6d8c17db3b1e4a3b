"""Tests for the slider + text field widget in slitdiffraction.view.widgets."""

import pytest

from slitdiffraction.model.parameters import PARAMETER_RANGES, ParameterKey
from slitdiffraction.view.widgets.parameter_input import ParameterInput


@pytest.fixture
def wavelength_input(qapp):
    widget = ParameterInput(PARAMETER_RANGES[ParameterKey.WAVELENGTH])
    yield widget
    widget.deleteLater()


def test_initial_value_is_default(wavelength_input):
    assert wavelength_input.value == 500.0
    assert wavelength_input.line_edit.text() == "500"


def test_typed_value_finer_than_slider_step(wavelength_input):
    emitted = []
    wavelength_input.value_changed.connect(emitted.append)
    wavelength_input.line_edit.setText("612.5")
    wavelength_input.btn_enter.click()

    assert emitted == [612.5]
    assert wavelength_input.value == 612.5
    # Slider steps are whole nanometres
    assert wavelength_input.slider.value() in (612, 613)


def test_typed_value_clamped(wavelength_input):
    wavelength_input.line_edit.setText("900")
    wavelength_input.btn_enter.click()
    assert wavelength_input.value == 700.0
    assert wavelength_input.line_edit.text() == "700"
    assert wavelength_input.slider.value() == 700


def test_slider_move_updates_value(wavelength_input):
    emitted = []
    wavelength_input.value_changed.connect(emitted.append)
    wavelength_input.slider.setValue(450)
    assert emitted == [450.0]
    assert wavelength_input.value == 450.0
    assert wavelength_input.line_edit.text() == "450"
