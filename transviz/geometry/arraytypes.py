'''Typehints specific to numpy and other array-related functionality'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Annotated, TypeVar

import numpy as np
import numpy.typing as npt


# Numpy array type annotations
Shape = tuple # the shape field of a numpy array (NOT the polygon type from .shapes)
DType = TypeVar('DType', bound=np.generic) # the data type of a numpy array
N = TypeVar('N', bound=int) # typehint the size of a given dimension

# Fixed-size vector and array type annotations
## DEV: planar-only subset; everything in this package lives in 2D
Vector2  = Annotated[npt.NDArray[DType], Shape[2]]
Array2x2 = Annotated[npt.NDArray[DType], Shape[2, 2]]
ArrayNx2 = Annotated[npt.NDArray[DType], Shape[N, 2]]
