'''
Application of the fixed scale -> rotate -> translate pipeline to points and shapes

Operation order is part of the contract: scaling acts in the shape's local frame, rotation
then acts about the origin, and translation is added last in the target frame. Scaling and
rotation do not commute whenever scale_x != scale_y, so the order must never be rearranged
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Iterable, Union

import numpy as np

from .linear import apply_matrix, build_rotation_matrix, build_scale_matrix
from ..arraytypes import Array2x2, ArrayNx2
from ..shapes import Point2D, Shape
from ...parameters import TransformParams


def transform_point(
        point : Union[Point2D, Iterable[float]],
        scale_matrix : Array2x2,
        rotation_matrix : Array2x2,
        tx : float=0.0,
        ty : float=0.0,
    ) -> Point2D:
    '''
    Compute rotation_matrix . (scale_matrix . point) + (tx, ty)

    Parameters
    ----------
    point : Point2D
        The point to transform, in the shape's local frame
    scale_matrix : Array[[2, 2], float]
        Linear operator applied first
    rotation_matrix : Array[[2, 2], float]
        Linear operator applied to the already-scaled point
    tx, ty : float, default 0.0
        Offset added after both linear operators

    Returns
    -------
    Point2D
        The transformed point
    '''
    scaled_point = apply_matrix(scale_matrix, point)
    rotated_point = apply_matrix(rotation_matrix, scaled_point)

    return Point2D(
        float(rotated_point[0] + tx),
        float(rotated_point[1] + ty),
    )

def transform_shape(shape : Shape, params : TransformParams) -> Shape:
    '''
    Apply the transformation described by "params" to every vertex of a shape

    Both matrices are built exactly once per call; output vertices appear in
    the same order as the input ones, so edges connect identically after the transform
    '''
    scale_matrix = build_scale_matrix(params)
    rotation_matrix = build_rotation_matrix(params)
    (tx, ty) = params.translation

    return tuple(
        transform_point(vertex, scale_matrix, rotation_matrix, tx, ty)
            for vertex in shape
    )

def transform_positions(positions : ArrayNx2[np.float64], params : TransformParams) -> ArrayNx2[np.float64]:
    '''
    Vectorized counterpart to transform_shape() for an (N, 2) array of row-vector coordinates

    Results agree with transform_shape() up to floating point rounding, since
    numpy is free to reorder the sums within each matrix product
    '''
    positions = np.asarray(positions, dtype=float)
    if positions.shape[-1] != 2:
        raise ValueError(f'Expected planar coordinates along the last axis, not array of shape {positions.shape}')

    scale_matrix = build_scale_matrix(params)
    rotation_matrix = build_rotation_matrix(params)

    # row-vector convention: (R S p)^T = p^T S^T R^T
    return (positions @ scale_matrix.T) @ rotation_matrix.T + np.array(params.translation, dtype=float)
