"""Generic 2D data map with bounds-checked access."""

from typing import ClassVar, Generic, TypeVar

import numpy as np
import structlog
from numpy.typing import ArrayLike, NDArray

from .config import MapConfig, WritePolicy
from .exceptions import (
    AllocationLimitExceededError,
    InvalidDimensionError,
    MapError,
    OutOfRangeError,
)
from .traits import NumericTrait

logger = structlog.get_logger()

T = TypeVar("T", int, float)


class DataMap(Generic[T]):
    """
    A dense 2D grid of scalar values.

    Cells are stored row-major in a numpy array of shape (height, width), so
    cell (x, y) sits at linear offset y * width + x. Reads outside the grid
    return the border value; writes outside it follow the configured
    WritePolicy and never touch the store.

    Subclasses bind the scalar type by setting ``trait``.
    """

    trait: ClassVar[NumericTrait]

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        *,
        border_value: T | None = None,
        config: MapConfig | None = None,
    ):
        """Create a map, empty unless both dimensions are given.

        Args:
            width: Width in cells.
            height: Height in cells.
            border_value: Value returned for out-of-range reads (default zero).
            config: Allocation limits and write policy.

        Raises:
            InvalidDimensionError: If the dimensions are invalid.
            AllocationLimitExceededError: If the map would be too large.
        """
        if getattr(type(self), "trait", None) is None:
            raise TypeError(f"{type(self).__name__} does not bind a numeric trait")

        self.config = config if config is not None else MapConfig()
        self._border_value: T = (
            self.trait.zero if border_value is None else self.trait.coerce(border_value)
        )
        self._data: NDArray = np.zeros((0, 0), dtype=self.trait.dtype)
        if width is not None or height is not None:
            self.allocate(width, height)

    # --- Trait facts ---

    def size_bits(self) -> int:
        """Size of one cell in bits."""
        return self.trait.size_bits

    def max_value(self) -> T:
        """Largest value a cell can hold."""
        return self.trait.max_value

    def min_value(self) -> T:
        """Smallest value a cell can hold."""
        return self.trait.min_value

    def max_cell_count(self) -> int:
        """Largest cell count this map may allocate."""
        return self.trait.max_cell_count(self.config.address_bits)

    # --- Dimensions ---

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def dimensions(self) -> tuple[int, int]:
        """(width, height), (0, 0) when empty."""
        return (self.width, self.height)

    @property
    def cell_count(self) -> int:
        return self._data.size

    @property
    def is_empty(self) -> bool:
        return self._data.size == 0

    @property
    def has_max_dimension(self) -> bool:
        """Whether max_width / max_height from the config are enforced."""
        return self.config.has_max_dimension

    @property
    def memory_usage(self) -> int:
        """Bytes held by the backing store."""
        return self._data.nbytes

    @property
    def border_value(self) -> T:
        return self._border_value

    @border_value.setter
    def border_value(self, value: T) -> None:
        self._border_value = self.trait.coerce(value)

    # --- Allocation ---

    def allocate(self, width: int | None = None, height: int | None = None) -> None:
        """Replace the store with a zero-filled one of the given size.

        With no arguments the map becomes empty. Previous contents are
        discarded. On failure the map keeps its previous state.

        Raises:
            InvalidDimensionError: If only one dimension is given, either is
                not positive, or either exceeds the configured maximum.
            AllocationLimitExceededError: If width * height exceeds the
                allocation limit.
        """
        if width is None and height is None:
            self._data = np.zeros((0, 0), dtype=self.trait.dtype)
            logger.debug("map_reset", map_type=type(self).__name__)
            return
        if width is None or height is None:
            raise self._rejected(
                InvalidDimensionError,
                "Both width and height are required to allocate a map",
                width=width,
                height=height,
            )

        self._check_dimensions(width, height)
        try:
            data = np.zeros((height, width), dtype=self.trait.dtype)
        except MemoryError as e:
            raise self._rejected(
                AllocationLimitExceededError,
                f"Out of memory allocating {width}x{height} map",
                width=width,
                height=height,
            ) from e

        self._data = data
        logger.debug(
            "map_allocated",
            map_type=type(self).__name__,
            width=width,
            height=height,
            bytes=self.memory_usage,
        )

    def _check_dimensions(self, width: int, height: int) -> None:
        """Validate dimensions against positivity, max sides and cell limits."""
        if width <= 0 or height <= 0:
            raise self._rejected(
                InvalidDimensionError,
                f"Map dimensions must be positive, got {width}x{height}",
                width=width,
                height=height,
            )

        if self.has_max_dimension and (
            width > self.config.max_width or height > self.config.max_height
        ):
            raise self._rejected(
                InvalidDimensionError,
                f"Map dimensions {width}x{height} exceed maximum "
                f"{self.config.max_width}x{self.config.max_height}",
                width=width,
                height=height,
            )

        cell_count = width * height
        limit = self.max_cell_count()
        if cell_count > limit:
            raise self._rejected(
                AllocationLimitExceededError,
                f"{width}x{height} map needs {cell_count} cells, limit is {limit}",
                width=width,
                height=height,
            )

        max_bytes = self.config.max_bytes
        if max_bytes is not None and cell_count * self.size_bits() // 8 > max_bytes:
            raise self._rejected(
                AllocationLimitExceededError,
                f"{width}x{height} map exceeds byte budget of {max_bytes}",
                width=width,
                height=height,
            )

    def _rejected(self, error: type[MapError], message: str, **context) -> MapError:
        logger.warning(
            "allocation_rejected",
            map_type=type(self).__name__,
            reason=message,
            **context,
        )
        return error(message)

    def _converted(self, array: ArrayLike) -> NDArray:
        """Validate a 2D array and return it as an independent store."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise self._rejected(
                InvalidDimensionError,
                f"Expected a 2D array, got shape {array.shape}",
            )
        height, width = array.shape
        self._check_dimensions(width, height)
        return self.trait.cast_array(array)

    # --- Copying ---

    def copy_from(self, other: "DataMap") -> None:
        """Deep-copy dimensions, border value and cells from another map.

        Cells are converted to this map's scalar type. The store is never
        shared with ``other``. On failure this map is unchanged.

        Raises:
            InvalidDimensionError: If other's dimensions break this map's limits.
            AllocationLimitExceededError: If other is too large for this map.
            ValueError: If other's values do not fit this map's scalar type.
        """
        border_value = self.trait.coerce(other.border_value)
        if other.is_empty:
            data = np.zeros((0, 0), dtype=self.trait.dtype)
        else:
            data = self._converted(other._data)

        self._data = data
        self._border_value = border_value
        logger.debug(
            "map_copied",
            map_type=type(self).__name__,
            source_type=type(other).__name__,
            width=self.width,
            height=self.height,
        )

    def clone(self) -> "DataMap[T]":
        """Return an independent deep copy of this map."""
        copy = type(self)(config=self.config.model_copy())
        copy.copy_from(self)
        return copy

    @classmethod
    def from_array(
        cls,
        array: ArrayLike,
        *,
        border_value: T | None = None,
        config: MapConfig | None = None,
    ) -> "DataMap[T]":
        """Build a map from a 2D array shaped (height, width).

        The array is copied; later changes to it do not affect the map.

        Raises:
            InvalidDimensionError: If the array is not 2D or has an empty side.
            AllocationLimitExceededError: If the array is too large.
            ValueError: If the values do not fit the scalar type.
        """
        data_map = cls(border_value=border_value, config=config)
        data_map._data = data_map._converted(array)
        logger.debug(
            "map_loaded",
            map_type=cls.__name__,
            width=data_map.width,
            height=data_map.height,
        )
        return data_map

    def to_array(self) -> NDArray:
        """Return an independent copy of the store, shaped (height, width)."""
        return self._data.copy()

    # --- Cell access ---

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether (x, y) addresses a stored cell."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> T:
        """Return the cell at (x, y), or the border value outside the map."""
        if self.in_bounds(x, y):
            return self._data[y, x].item()
        return self._border_value

    def set(self, x: int, y: int, value: T) -> None:
        """Write the cell at (x, y).

        Out-of-range writes are ignored, clamped onto the nearest edge cell,
        or rejected depending on ``config.write_policy``. Clamping an empty
        map writes nothing.

        Raises:
            OutOfRangeError: If out of range under WritePolicy.RAISE.
            ValueError: If value does not fit the scalar type.
        """
        value = self.trait.coerce(value)
        if not self.in_bounds(x, y):
            policy = self.config.write_policy
            if policy is WritePolicy.RAISE:
                raise OutOfRangeError(
                    f"({x}, {y}) is outside {self.width}x{self.height} map"
                )
            if policy is WritePolicy.IGNORE or self.is_empty:
                return
            clamped_x = min(max(x, 0), self.width - 1)
            clamped_y = min(max(y, 0), self.height - 1)
            logger.debug(
                "write_clamped",
                map_type=type(self).__name__,
                x=x,
                y=y,
                clamped_x=clamped_x,
                clamped_y=clamped_y,
            )
            x, y = clamped_x, clamped_y
        self._data[y, x] = value

    def row(self, y: int) -> NDArray:
        """Return a copy of row y, border-filled when y is out of range."""
        if 0 <= y < self.height:
            return self._data[y].copy()
        return np.full(self.width, self._border_value, dtype=self.trait.dtype)

    def clear(self, value: T) -> None:
        """Set every cell to value."""
        self._data.fill(self.trait.coerce(value))
        logger.debug("map_cleared", map_type=type(self).__name__, value=value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(width={self.width}, height={self.height}, "
            f"border_value={self._border_value!r})"
        )
