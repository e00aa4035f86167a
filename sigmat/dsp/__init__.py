"""Signal processing on Matrix values.

- Integer-factor resampling: upsample, downsample
- Difference-equation filtering: filter (alias lfilter)
- Convolution and convolution matrices: conv, convmtx
- Toeplitz construction: toeplitz

Every function accepts a Matrix or an array-like and returns a new Matrix.
"""

from .conv import conv, convmtx
from .filters import filter, lfilter
from .resample import downsample, upsample
from .toeplitz import toeplitz
from .utils import as_matrix

__all__ = [
    "as_matrix",
    "upsample",
    "downsample",
    "filter",
    "lfilter",
    "conv",
    "convmtx",
    "toeplitz",
]
