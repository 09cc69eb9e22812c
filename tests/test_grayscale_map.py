"""Tests for GrayscaleMap."""

import numpy as np
import pytest

from noisemap.grayscale_map import GrayscaleMap
from noisemap.noise_map import NoiseMap


class TestGrayscaleMap:
    """Tests for the 8-bit specialization."""

    def test_traits(self, grayscale_map: GrayscaleMap) -> None:
        """Cells are 8-bit unsigned."""
        assert grayscale_map.size_bits() == 8
        assert grayscale_map.max_value() == 255
        assert grayscale_map.min_value() == 0

    def test_default_border_is_zero(self) -> None:
        """Border defaults to black."""
        assert GrayscaleMap().border_value == 0

    def test_get_and_set(self, grayscale_map: GrayscaleMap) -> None:
        """Cells read back as ints."""
        grayscale_map.set(1, 0, 128)
        value = grayscale_map.get(1, 0)
        assert value == 128
        assert type(value) is int

    def test_border_read(self, grayscale_map: GrayscaleMap) -> None:
        """Out-of-range reads return the border."""
        assert grayscale_map.get(2, 0) == 255
        assert grayscale_map.get(0, -1) == 255

    def test_out_of_range_value_rejected(self, grayscale_map: GrayscaleMap) -> None:
        """Values outside 0..255 never wrap around."""
        with pytest.raises(ValueError, match="out of range"):
            grayscale_map.set(0, 0, 256)
        with pytest.raises(ValueError, match="out of range"):
            grayscale_map.set(0, 0, -1)
        assert grayscale_map.get(0, 0) == 0

    def test_infinite_value_rejected(self, grayscale_map: GrayscaleMap) -> None:
        """Infinite writes and borders raise ValueError."""
        with pytest.raises(ValueError, match="out of range"):
            grayscale_map.set(0, 0, float("inf"))
        with pytest.raises(ValueError, match="out of range"):
            grayscale_map.border_value = float("-inf")
        assert grayscale_map.get(0, 0) == 0
        assert grayscale_map.border_value == 255

    def test_out_of_range_border_rejected(self, grayscale_map: GrayscaleMap) -> None:
        """The border must fit the scalar type too."""
        with pytest.raises(ValueError):
            grayscale_map.border_value = 300
        assert grayscale_map.border_value == 255

    def test_clone_keeps_type(self, grayscale_map: GrayscaleMap) -> None:
        """Clones are GrayscaleMaps with uint8 storage."""
        clone = grayscale_map.clone()
        assert type(clone) is GrayscaleMap
        assert clone.to_array().dtype == np.uint8

    def test_from_normalized_noise(self) -> None:
        """A noise map normalized with its extrema fills the full 0..255 range."""
        noise = NoiseMap.from_array(np.array([[-2.0, 0.0], [2.0, 1.0]]))
        low, high = noise.min_max()
        scaled = np.rint((noise.to_array() - low) / (high - low) * 255)

        gray = GrayscaleMap.from_array(scaled)
        assert gray.get(0, 0) == 0
        assert gray.get(0, 1) == 255
        assert gray.get(1, 0) == 128
