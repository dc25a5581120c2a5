'''Unit tests for matrix display formatting'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest
import numpy as np

from transviz.display import format_matrices
from transviz.parameters import TransformParams


def test_identity_text() -> None:
    '''Test the layout of the display text for the identity transformation'''
    assert format_matrices(TransformParams()) == '\n'.join([
        'Scaling Matrix:',
        '[1.0, 0]',
        '[0, 1.0]',
        '',
        'Rotation Matrix:',
        '[1.00, -0.00]',
        '[0.00, 1.00]',
    ])

def test_scale_shown_unrounded() -> None:
    '''Test that scale entries keep full precision while rotation entries are cut to 2 decimals'''
    text = format_matrices(TransformParams(scale_x=1.2345, scale_y=0.07, rotation_rad=np.pi/6))
    assert '[1.2345, 0]' in text
    assert '[0, 0.07]' in text
    assert '[0.87, -0.50]' in text
    assert '[0.50, 0.87]' in text

def test_integer_scale_shown_as_float() -> None:
    assert '[2.0, 0]' in format_matrices(TransformParams(scale_x=2))

def test_html_markup() -> None:
    '''Test the rich-text variant used for HTML-capable labels'''
    text = format_matrices(TransformParams(rotation_rad=np.pi/2), markup='html')
    assert text == (
        '<html>Scaling Matrix:<br>[1.0, 0]<br>[0, 1.0]<br><br>'
        'Rotation Matrix:<br>[0.00, -1.00]<br>[1.00, 0.00]</html>'
    )

def test_unknown_markup() -> None:
    with pytest.raises(ValueError):
        format_matrices(TransformParams(), markup='latex')

@pytest.mark.parametrize(
    'scale, expected_entry',
    [
        (1e-4, '0.0001'),
        (1e7, '10000000.0'),
        (0.01, '0.01'),
    ]
)
def test_scale_uses_python_float_repr(scale : float, expected_entry : str) -> None:
    '''Test that scale entries follow Python's float repr, including values outside of any control range'''
    assert f'[{expected_entry}, 0]' in format_matrices(TransformParams(scale_x=scale))
