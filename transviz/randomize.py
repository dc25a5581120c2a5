'''Randomized exploration of transformation parameters'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .controls import SliderValues, params_from_slider_values
from .parameters import TransformParams

type RandomSource = Optional[Union[int, np.random.Generator]] # anything accepted by numpy.random.default_rng()


@dataclass(frozen=True)
class RandomizationRanges:
    '''
    Inclusive integer ranges, in control units, from which random parameters are drawn uniformly

    Scale bounds are in hundredths (50-249 -> 0.50-2.49) and rotation bounds are in degrees
    '''
    scale : tuple[int, int] = (50, 249)
    rotation_deg : tuple[int, int] = (0, 359)
    translate : tuple[int, int] = (-100, 99)

    def __post_init__(self) -> None:
        for (name, (low, high)) in (('scale', self.scale), ('rotation_deg', self.rotation_deg), ('translate', self.translate)):
            if low > high:
                raise ValueError(f'Lower bound of {name} range ({low}) cannot exceed its upper bound ({high})')

DEFAULT_RANGES = RandomizationRanges()


def _draw(rng : np.random.Generator, bounds : tuple[int, int]) -> int:
    '''Draw a single integer uniformly from an inclusive range'''
    (low, high) = bounds
    return int(rng.integers(low, high, endpoint=True))

def randomize_slider_values(rng : RandomSource=None, ranges : RandomizationRanges=DEFAULT_RANGES) -> SliderValues:
    '''
    Draw a random set of control positions

    Parameters
    ----------
    rng : numpy.random.Generator, int, or None
        Source of randomness; seeds and None are resolved through numpy.random.default_rng()
        (a Generator passed in is used as-is, and is the only state this function modifies)
    ranges : RandomizationRanges
        Inclusive ranges to draw each control position from

    Returns
    -------
    SliderValues
        Integer positions, drawn in the order scale_x, scale_y, rotation, translate_x, translate_y
    '''
    rng = np.random.default_rng(rng)
    values = SliderValues(
        scale_x=_draw(rng, ranges.scale),
        scale_y=_draw(rng, ranges.scale),
        rotation_deg=_draw(rng, ranges.rotation_deg),
        translate_x=_draw(rng, ranges.translate),
        translate_y=_draw(rng, ranges.translate),
    )
    LOGGER.debug(f'Drew random control positions {values}')

    return values

def randomize_params(rng : RandomSource=None, ranges : RandomizationRanges=DEFAULT_RANGES) -> TransformParams:
    '''Draw a random parameter snapshot, with rotation converted from degrees to radians'''
    return params_from_slider_values(randomize_slider_values(rng, ranges=ranges))
