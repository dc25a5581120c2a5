'''Unit tests for conversions between control positions and transformation parameters'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest
import numpy as np

from transviz.controls import (
    ROTATION_SLIDER,
    SCALE_SLIDER,
    TRANSLATE_SLIDER,
    SliderRange,
    SliderValues,
    params_from_slider_values,
    slider_values_from_params,
)
from transviz.parameters import TransformParams, IDENTITY_PARAMS


def test_initial_positions_give_identity() -> None:
    '''Test that controls at their starting positions describe the identity transformation'''
    assert params_from_slider_values(SliderValues()) == IDENTITY_PARAMS

def test_slider_ranges() -> None:
    assert (SCALE_SLIDER.minimum, SCALE_SLIDER.maximum) == (1, 300)
    assert (ROTATION_SLIDER.minimum, ROTATION_SLIDER.maximum) == (0, 360)
    assert (TRANSLATE_SLIDER.minimum, TRANSLATE_SLIDER.maximum) == (-200, 200)

def test_params_from_slider_values() -> None:
    '''Test the unit conversion of each control: hundredths, degrees, and whole units'''
    params = params_from_slider_values(SliderValues(150, 1, 90, -200, 37))
    assert params.scale_x == 1.5
    assert params.scale_y == 0.01
    assert params.rotation_rad == pytest.approx(np.pi/2)
    assert params.translation == (-200.0, 37.0)

@pytest.mark.parametrize(
    'values',
    [
        SliderValues(),
        SliderValues(50, 249, 359, -100, 99),
        SliderValues(300, 1, 360, 200, -200),
    ]
)
def test_slider_values_recovered(values : SliderValues) -> None:
    '''Test that control positions survive conversion to parameters and back'''
    assert slider_values_from_params(params_from_slider_values(values)) == values

def test_slider_values_are_rounded_not_clamped() -> None:
    values = slider_values_from_params(TransformParams(scale_x=5.004, translate_y=-512.6))
    assert values.scale_x == 500
    assert values.translate_y == -513

@pytest.mark.parametrize(
    'position, expected',
    [
        (-500, -200),
        (0, 0),
        (200, 200),
        (201, 200),
    ]
)
def test_clamp(position : int, expected : int) -> None:
    assert TRANSLATE_SLIDER.clamp(position) == expected

@pytest.mark.parametrize(
    'minimum, maximum, initial',
    [
        (10, 0, 5),   # inverted bounds
        (0, 10, 11),  # initial above range
    ]
)
def test_invalid_slider_range(minimum : int, maximum : int, initial : int) -> None:
    with pytest.raises(ValueError):
        SliderRange(minimum, maximum, initial)
