"""Shared test fixtures for noisemap tests."""

import pytest

from noisemap.config import MapConfig, WritePolicy
from noisemap.grayscale_map import GrayscaleMap
from noisemap.noise_map import NoiseMap


@pytest.fixture
def empty_map() -> NoiseMap:
    """NoiseMap with no storage."""
    return NoiseMap()


@pytest.fixture
def noise_map() -> NoiseMap:
    """4x3 NoiseMap where cell (x, y) holds x + 10 * y.

        0   1   2   3
        10  11  12  13
        20  21  22  23
    """
    noise_map = NoiseMap(4, 3, border_value=-1.0)
    for y in range(3):
        for x in range(4):
            noise_map.set(x, y, x + 10 * y)
    return noise_map


@pytest.fixture
def clamp_map() -> NoiseMap:
    """3x3 zeroed NoiseMap that clamps out-of-range writes."""
    return NoiseMap(3, 3, config=MapConfig(write_policy=WritePolicy.CLAMP))


@pytest.fixture
def strict_map() -> NoiseMap:
    """3x3 zeroed NoiseMap that rejects out-of-range writes."""
    return NoiseMap(3, 3, config=MapConfig(write_policy=WritePolicy.RAISE))


@pytest.fixture
def grayscale_map() -> GrayscaleMap:
    """2x2 GrayscaleMap with a white border."""
    return GrayscaleMap(2, 2, border_value=255)
