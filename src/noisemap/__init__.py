"""Bounds-checked 2D scalar maps for procedurally generated field data."""

from .config import Config, MapConfig, WritePolicy, load_config
from .datamap import DataMap
from .exceptions import (
    AllocationLimitExceededError,
    InvalidDimensionError,
    MapError,
    OutOfRangeError,
)
from .grayscale_map import GrayscaleMap
from .log import configure_logging
from .noise_map import MinMax, NoiseMap
from .protocols import Map2D
from .traits import FLOAT32, FLOAT64, INT32, UINT8, NumericTrait

__all__ = [
    # Maps
    "DataMap",
    "NoiseMap",
    "GrayscaleMap",
    "MinMax",
    "Map2D",
    # Traits
    "NumericTrait",
    "FLOAT32",
    "FLOAT64",
    "UINT8",
    "INT32",
    # Config
    "Config",
    "MapConfig",
    "WritePolicy",
    "load_config",
    # Logging
    "configure_logging",
    # Exceptions
    "MapError",
    "InvalidDimensionError",
    "AllocationLimitExceededError",
    "OutOfRangeError",
]
