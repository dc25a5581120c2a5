'''Single source of truth for the live transformation parameters and the shape they act on'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from threading import Lock

from .parameters import TransformParams, IDENTITY_PARAMS
from .geometry.shapes import Shape, BASE_SQUARE, make_shape
from .geometry.transforms.pipeline import transform_shape


class UnknownParameterError(KeyError):
    '''Raised when attempting to set a field which is not one of the transformation parameters'''
    pass


class TransformState:
    '''
    Holds the current TransformParams alongside the (immutable) base shape

    The UI layer is the only writer; readers receive immutable snapshots, so no caller
    can reach the internal state through a returned value. Every read and write goes through
    a lock so that a snapshot is never assembled from a half-applied update
    '''
    def __init__(self, params : TransformParams=IDENTITY_PARAMS, base_shape : Shape=BASE_SQUARE) -> None:
        self._lock = Lock()
        self._params = params
        self._base_shape = make_shape(base_shape) # every vertex becomes an immutable Point2D

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.get()!r})'

    # reading
    def get(self) -> TransformParams:
        '''Current parameter snapshot'''
        with self._lock:
            return self._params

    def base_shape(self) -> Shape:
        '''The untransformed polygon; constant for the lifetime of the state'''
        return self._base_shape

    def transformed_shape(self) -> Shape:
        '''The base shape with the current parameters applied, computed from one consistent snapshot'''
        return transform_shape(self._base_shape, self.get())

    # writing
    def set(self, field_name : str, value : float) -> None:
        '''
        Set a single parameter by name

        No range checks are performed (clamping is up to whichever input mechanism supplied the value);
        raises UnknownParameterError for names which are not fields of TransformParams, and lets the
        ValueError or TypeError from float() propagate for values which are not numbers
        '''
        if field_name not in TransformParams.field_names():
            raise UnknownParameterError(f'"{field_name}" is not a transformation parameter; expected one of {TransformParams.field_names()}')

        with self._lock:
            self._params = self._params.with_value(field_name, value)
        LOGGER.debug(f'Set {field_name}={value}')

    def update(self, params : TransformParams) -> None:
        '''Replace all parameters at once'''
        if not isinstance(params, TransformParams):
            raise TypeError(f'Expected {TransformParams.__name__}, not {type(params).__name__}')

        with self._lock:
            self._params = params
        LOGGER.debug(f'Replaced parameters with {params}')

    def reset(self) -> None:
        '''Return to the identity transformation'''
        self.update(IDENTITY_PARAMS)
