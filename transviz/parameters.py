'''Value type bundling the five parameters of the scale-rotate-translate pipeline'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from dataclasses import dataclass, fields, replace
from typing import Self


@dataclass(frozen=True)
class TransformParams:
    '''
    Snapshot of the transformation applied to the base shape

    Parameters
    ----------
    scale_x : float, default 1.0
        Scaling factor along the x-axis of the shape's local frame
    scale_y : float, default 1.0
        Scaling factor along the y-axis of the shape's local frame
    rotation_rad : float, default 0.0
        Counterclockwise rotation about the origin, in radians
        Not normalized; any real value is a valid angle
    translate_x : float, default 0.0
        Offset along x applied after scaling and rotation
    translate_y : float, default 0.0
        Offset along y applied after scaling and rotation

    No range is enforced on any field: zero or negative scales
    collapse or mirror the shape, which is valid output
    '''
    scale_x : float = 1.0
    scale_y : float = 1.0
    rotation_rad : float = 0.0
    translate_x : float = 0.0
    translate_y : float = 0.0

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        '''Names of the settable parameters, in declaration order'''
        return tuple(field.name for field in fields(cls))

    @property
    def translation(self) -> tuple[float, float]:
        '''The (translate_x, translate_y) offset as a pair'''
        return (self.translate_x, self.translate_y)

    def with_value(self, field_name : str, value : float) -> Self:
        '''Return a copy of these parameters with a single field replaced'''
        return replace(self, **{field_name : float(value)})

IDENTITY_PARAMS = TransformParams()
