'''
Conversions between the integer positions of input controls (e.g. sliders) and transformation parameters

Controls work in integer units: hundredths for scale factors, whole degrees for rotation,
and whole units for translation. Converting at this boundary keeps the engine free of
any notion of how its parameters were entered
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from .parameters import TransformParams


@dataclass(frozen=True)
class SliderRange:
    '''Inclusive integer range of a single control, along with its starting position'''
    minimum : int
    maximum : int
    initial : int

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(f'Control minimum ({self.minimum}) cannot exceed its maximum ({self.maximum})')
        if not (self.minimum <= self.initial <= self.maximum):
            raise ValueError(f'Initial position {self.initial} lies outside of [{self.minimum}, {self.maximum}]')

    def clamp(self, position : int) -> int:
        '''Pin an arbitrary position into this range'''
        return min(max(int(position), self.minimum), self.maximum)

SCALE_DIVISOR : float = 100.0 # scale controls are positioned in hundredths
SCALE_SLIDER     = SliderRange(1, 300, 100)   # 0.01 to 3.0
ROTATION_SLIDER  = SliderRange(0, 360, 0)     # degrees
TRANSLATE_SLIDER = SliderRange(-200, 200, 0)


class SliderValues(NamedTuple):
    '''Raw integer positions of the five controls'''
    scale_x : int = SCALE_SLIDER.initial
    scale_y : int = SCALE_SLIDER.initial
    rotation_deg : int = ROTATION_SLIDER.initial
    translate_x : int = TRANSLATE_SLIDER.initial
    translate_y : int = TRANSLATE_SLIDER.initial

def degrees_to_radians(degrees : float) -> float:
    '''Convert an angle in degrees to radians (degrees * pi / 180)'''
    return float(np.deg2rad(degrees))

def params_from_slider_values(values : SliderValues) -> TransformParams:
    '''Translate control positions into a parameter snapshot; no clamping is applied'''
    return TransformParams(
        scale_x=values.scale_x / SCALE_DIVISOR,
        scale_y=values.scale_y / SCALE_DIVISOR,
        rotation_rad=degrees_to_radians(values.rotation_deg),
        translate_x=float(values.translate_x),
        translate_y=float(values.translate_y),
    )

def slider_values_from_params(params : TransformParams) -> SliderValues:
    '''
    Nearest control positions for a parameter snapshot, e.g. for syncing widgets to the current state
    Values are rounded but NOT clamped, so out-of-range parameters map to out-of-range positions
    '''
    return SliderValues(
        scale_x=round(params.scale_x * SCALE_DIVISOR),
        scale_y=round(params.scale_y * SCALE_DIVISOR),
        rotation_deg=round(float(np.rad2deg(params.rotation_rad))),
        translate_x=round(params.translate_x),
        translate_y=round(params.translate_y),
    )
