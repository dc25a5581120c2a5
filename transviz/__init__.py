'''Engine behind an interactive visualizer of 2D affine transformations applied to a square'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .parameters import TransformParams, IDENTITY_PARAMS
from .state import TransformState, UnknownParameterError
from .geometry.shapes import Point2D, BASE_SQUARE, closed_path
from .geometry.transforms import (
    build_scale_matrix,
    build_rotation_matrix,
    transform_point,
    transform_shape,
    transform_positions,
)
from .display import format_matrices
from .randomize import randomize_params, randomize_slider_values, RandomizationRanges
