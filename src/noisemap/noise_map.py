"""Noise map: a 2D map of 32-bit floats with an extrema query."""

import math
from typing import NamedTuple

import numpy as np

from .datamap import DataMap
from .traits import FLOAT32


class MinMax(NamedTuple):
    """Lowest and highest value held by a map."""

    minimum: float
    maximum: float


class NoiseMap(DataMap[float]):
    """
    A 2D array of floating-point values.

    Designed to hold coherent-noise values, though it can store values from
    any source. Typically used as a terrain heightmap or a grayscale texture.
    """

    trait = FLOAT32

    def min_max(self) -> MinMax:
        """Find the lowest and highest value in the map.

        The scan is seeded with the first cell and skips any later cell that
        compares neither lower nor higher, so NaN cells after the first are
        ignored while a NaN first cell yields (nan, nan).

        Returns:
            MinMax of the stored cells, or (0.0, 0.0) for an empty map.
        """
        if self.is_empty:
            return MinMax(0.0, 0.0)

        first = float(self._data.flat[0])
        if math.isnan(first):
            return MinMax(first, first)
        return MinMax(float(np.nanmin(self._data)), float(np.nanmax(self._data)))
