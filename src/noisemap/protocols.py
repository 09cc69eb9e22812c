"""Capability contract shared by every 2D map."""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Map2D(Protocol[T]):
    """
    Minimal operations a 2D map exposes to builders and exporters.

    Code written against Map2D works for any scalar specialization, e.g. a
    NoiseMap of floats or a GrayscaleMap of intensities.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    @property
    def border_value(self) -> T: ...

    @border_value.setter
    def border_value(self, value: T) -> None: ...

    def get(self, x: int, y: int) -> T: ...

    def set(self, x: int, y: int, value: T) -> None: ...

    def allocate(self, width: int | None = None, height: int | None = None) -> None: ...
