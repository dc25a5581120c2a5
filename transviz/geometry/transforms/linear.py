'''Construction and application of the 2x2 linear operators used by the transformation pipeline'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Iterable, Union

import numpy as np

from ..arraytypes import Array2x2, Vector2
from ...parameters import TransformParams


def scaling(sx : float=1.0, sy : float=1.0, dtype : Union[str, type]='float64') -> Array2x2:
    '''
    Generates a linear operator which scales the basis by factors
    of (sx, sy) along the x and y axes, respectively

    Parameters
    ----------
    sx : float, default 1.0
        The scaling factor in the x-direction
    sy : float, default 1.0
        The scaling factor in the y-direction
    dtype : type, default 'float64'
        The data type of the output matrix

    Returns
    -------
    scaling_matrix : Array[[2, 2], float]
        The matrix representing the scaling
        With no arguments, returns the Identity matrix
    '''
    return np.array([
        [sx,  0],
        [ 0, sy],
    ], dtype=dtype)

def rotation(angle_rad : float=0.0, dtype : Union[str, type]='float64') -> Array2x2:
    '''
    Generates a linear operator which rotates counterclockwise about the origin by "angle_rad" radians

    Parameters
    ----------
    angle_rad : float, default 0.0
        The angle of rotation, in radians
        Not wrapped into [0, 2pi); periodicity of sine and cosine takes care of any real angle
    dtype : type, default 'float64'
        The data type of the output matrix

    Returns
    -------
    rotation_matrix : Array[[2, 2], float]
        The matrix representing the rotation
        With no arguments, returns the Identity matrix
    '''
    s = np.sin(angle_rad)
    c = np.cos(angle_rad)

    return np.array([
        [c, -s],
        [s,  c],
    ], dtype=dtype)

def build_scale_matrix(params : TransformParams) -> Array2x2:
    '''The scaling operator [[scale_x, 0], [0, scale_y]] described by a parameter snapshot'''
    return scaling(params.scale_x, params.scale_y)

def build_rotation_matrix(params : TransformParams) -> Array2x2:
    '''The rotation operator [[cos, -sin], [sin, cos]] described by a parameter snapshot'''
    return rotation(params.rotation_rad)

def apply_matrix(matrix : Array2x2, point : Union[Vector2, Iterable[float]]) -> Vector2:
    '''
    Row-major matrix-vector product of a 2x2 operator with a single planar point, i.e.
    (m[0][0]*x + m[0][1]*y, m[1][0]*x + m[1][1]*y)
    '''
    (x, y) = point # implicitly enforce planarity of the point
    return np.array([
        matrix[0, 0]*x + matrix[0, 1]*y,
        matrix[1, 0]*x + matrix[1, 1]*y,
    ], dtype=float)
