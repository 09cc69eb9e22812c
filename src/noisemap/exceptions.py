"""Custom exceptions for data maps."""


class MapError(Exception):
    """Base exception for map errors."""

    pass


class InvalidDimensionError(MapError, ValueError):
    """Raised when map dimensions are non-positive or above the maximum."""

    pass


class AllocationLimitExceededError(MapError, MemoryError):
    """Raised when a requested cell count exceeds the allocation limit."""

    pass


class OutOfRangeError(MapError, IndexError):
    """Raised when writing outside the map under the raise policy."""

    pass
