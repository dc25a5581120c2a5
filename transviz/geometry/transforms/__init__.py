'''
Utilities for building the scaling and rotation operators and applying
the scale -> rotate -> translate pipeline to points in the plane
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .linear import (
    scaling,
    rotation,
    build_scale_matrix,
    build_rotation_matrix,
    apply_matrix,
)
from .pipeline import (
    transform_point,
    transform_shape,
    transform_positions,
)
