#!/usr/bin/env python3
# src/molkit/core/domain/models/point.py

"""
Domain model representing a point in 3-D space.
"""

from dataclasses import dataclass
from typing import Callable, Sequence, Union
import numpy as np


@dataclass(frozen=True)
class Point:
    """Represents a point (or vector) in 3-D space.

    All operations return a new Point. Division by zero follows IEEE
    floating-point semantics and yields inf or nan.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_array(self) -> np.ndarray:
        """Get the coordinates as a float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Point":
        """
        Build a Point from a length-3 sequence.

        Args:
            values: x, y and z coordinates

        Returns:
            New Point

        Raises:
            ValueError: If values does not hold exactly three numbers
        """
        coords = np.asarray(values, dtype=np.float64).reshape(-1)
        if coords.shape != (3,):
            raise ValueError(f"Expected 3 coordinates, got shape {coords.shape}")
        return cls(float(coords[0]), float(coords[1]), float(coords[2]))

    def _apply(
        self,
        func: Callable[[np.ndarray, Union[float, np.ndarray]], np.ndarray],
        other: Union[float, np.ndarray],
    ) -> "Point":
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return Point.from_array(func(self.to_array(), other))

    def add(self, v: float) -> "Point":
        return self._apply(np.add, v)

    def sub(self, v: float) -> "Point":
        return self._apply(np.subtract, v)

    def mul(self, v: float) -> "Point":
        return self._apply(np.multiply, v)

    def div(self, v: float) -> "Point":
        return self._apply(np.divide, np.float64(v))

    def add_point(self, pt: "Point") -> "Point":
        return self._apply(np.add, pt.to_array())

    def sub_point(self, pt: "Point") -> "Point":
        return self._apply(np.subtract, pt.to_array())

    def mul_point(self, pt: "Point") -> "Point":
        return self._apply(np.multiply, pt.to_array())

    def div_point(self, pt: "Point") -> "Point":
        return self._apply(np.divide, pt.to_array())

    def sqr_point(self) -> "Point":
        """Element-wise square."""
        return self.mul_point(self)

    def distance_from(self, pt: "Point") -> float:
        """Euclidean distance between this point and pt."""
        diff = self.sub_point(pt).sqr_point()
        return float(np.sqrt(diff.x + diff.y + diff.z))
