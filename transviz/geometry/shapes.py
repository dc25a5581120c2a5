'''For encoding planar points and the closed polygons built from them'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Iterable, NamedTuple

import numpy as np

from .arraytypes import ArrayNx2


class Point2D(NamedTuple):
    '''An immutable (x, y) coordinate pair in the plane'''
    x : float
    y : float

type Shape = tuple[Point2D, ...] # vertices of a closed polygon; order defines the edges, last vertex joins back to first

BASE_SQUARE : Shape = (
    Point2D(-50.0, -50.0),
    Point2D( 50.0, -50.0),
    Point2D( 50.0,  50.0),
    Point2D(-50.0,  50.0),
) # square of side 100 centered at the origin, listed counterclockwise (in y-up axes)


def make_shape(vertices : Iterable[Iterable[float]]) -> Shape:
    '''Build a Shape from any iterable of coordinate pairs, coercing coordinates to float'''
    shape = []
    for vertex in vertices:
        (x, y) = vertex # implicitly enforce exactly 2 coordinates per vertex
        shape.append(Point2D(float(x), float(y)))

    return tuple(shape)

def as_positions(shape : Shape) -> ArrayNx2[np.float64]:
    '''Stack the vertices of a Shape into an (N, 2) array, preserving vertex order'''
    return np.array(shape, dtype=float).reshape(-1, 2) # reshape keeps the empty polygon 2-dimensional

def from_positions(positions : ArrayNx2[np.float64]) -> Shape:
    '''Convert an (N, 2) array of coordinates back into a Shape'''
    positions = np.asarray(positions, dtype=float)
    if (positions.ndim != 2) or (positions.shape[-1] != 2):
        raise ValueError(f'Expected an (N, 2) array of planar coordinates, not one of shape {positions.shape}')

    return make_shape(positions.tolist())

def closed_path(shape : Shape) -> Shape:
    '''
    The vertex sequence a renderer should stroke to outline the polygon,
    i.e. the vertices in order with the first vertex repeated at the end
    '''
    if not shape:
        return ()
    return tuple(shape) + (shape[0],)
