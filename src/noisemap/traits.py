"""Numeric traits: per-scalar-type facts used to bound and seed maps."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike, NDArray

# Addressable index range of a single store, in bits (signed 32-bit offsets)
DEFAULT_ADDRESS_BITS = 31


@dataclass(frozen=True)
class NumericTrait:
    """Bit size and value range of the scalar type backing a map.

    A trait is bound to a map class, never looked up from the values it
    stores. All facts are derived from the numpy dtype of the store so they
    always agree with what the store can hold.
    """

    name: str
    dtype: np.dtype
    size_bits: int
    max_value: float | int
    min_value: float | int
    is_floating: bool

    @classmethod
    def from_dtype(cls, dtype: DTypeLike) -> "NumericTrait":
        """Build the trait for a numpy scalar dtype.

        Args:
            dtype: Floating or integral numpy dtype.

        Returns:
            Trait with size and range taken from np.finfo / np.iinfo.
        """
        dtype = np.dtype(dtype)
        is_floating = bool(np.issubdtype(dtype, np.floating))
        if is_floating:
            info = np.finfo(dtype)
            max_value: float | int = float(info.max)
            min_value: float | int = float(info.min)
        elif np.issubdtype(dtype, np.integer):
            iinfo = np.iinfo(dtype)
            max_value = int(iinfo.max)
            min_value = int(iinfo.min)
        else:
            raise TypeError(f"No numeric trait for dtype {dtype}")

        return cls(
            name=dtype.name,
            dtype=dtype,
            size_bits=dtype.itemsize * 8,
            max_value=max_value,
            min_value=min_value,
            is_floating=is_floating,
        )

    @property
    def zero(self) -> float | int:
        """Zero of the scalar type, the default border value."""
        return 0.0 if self.is_floating else 0

    def max_cell_count(self, address_bits: int = DEFAULT_ADDRESS_BITS) -> int:
        """Largest cell count whose store fits the addressable byte range.

        Args:
            address_bits: Width of the addressable index range in bits.

        Returns:
            Maximum number of cells a single map may allocate.
        """
        addressable_bytes = (1 << address_bits) - 1
        return (addressable_bytes * 8) // self.size_bits

    def coerce(self, value: float | int) -> float | int:
        """Convert a value to the scalar type as it will be stored.

        Floating values are rounded to the store's precision. Integral values
        must fit the type's range.

        Raises:
            ValueError: If an integral value is out of range or not integral.
        """
        if self.is_floating:
            return float(self.dtype.type(value))

        try:
            as_int = int(value)
        except OverflowError as e:
            raise ValueError(
                f"{value!r} out of range for {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            ) from e
        if as_int != value:
            raise ValueError(f"{value!r} is not an integral {self.name} value")
        if as_int < self.min_value or as_int > self.max_value:
            raise ValueError(
                f"{value!r} out of range for {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return as_int

    def cast_array(self, array: NDArray) -> NDArray:
        """Return an independent copy of array in the trait's dtype.

        Raises:
            ValueError: If an integral trait cannot hold every value, including
                NaN, infinities and fractions.
        """
        if not self.is_floating and array.size:
            if np.issubdtype(array.dtype, np.floating) and not (
                np.isfinite(array).all() and np.array_equal(array, np.trunc(array))
            ):
                raise ValueError(
                    f"Array holds non-finite or fractional values, "
                    f"not representable as {self.name}"
                )
            low, high = array.min(), array.max()
            if low < self.min_value or high > self.max_value:
                raise ValueError(
                    f"Values in [{low}, {high}] out of range for {self.name} "
                    f"[{self.min_value}, {self.max_value}]"
                )
        return np.array(array, dtype=self.dtype, copy=True)


FLOAT32 = NumericTrait.from_dtype(np.float32)
FLOAT64 = NumericTrait.from_dtype(np.float64)
UINT8 = NumericTrait.from_dtype(np.uint8)
INT32 = NumericTrait.from_dtype(np.int32)
