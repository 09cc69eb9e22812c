"""Grayscale map: a 2D map of 8-bit unsigned intensities."""

from .datamap import DataMap
from .traits import UINT8


class GrayscaleMap(DataMap[int]):
    """A 2D array of intensities in 0..255, e.g. a rendered texture channel."""

    trait = UINT8
