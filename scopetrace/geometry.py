"""
geometry.py - 2-D value types for the mirror engine

Coordinate convention:
    - The parabola vertex sits at the origin
    - The optical axis is the line y = 0
    - x increases along the axis toward the focus

All types are frozen; every engine call builds new instances.

Project: Parabolic Mirror Ray Tracer
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import InvalidParameter


@dataclass(frozen=True)
class Point:
    """
    A point in the meridional plane.

    Attributes
    ----------
    x : float
        Position along the optical axis in mm
    y : float
        Height above the optical axis in mm
    """
    x: float
    y: float

    def as_array(self) -> np.ndarray:
        """Return the point as a float64 array [x, y]."""
        return np.array([self.x, self.y], dtype=np.float64)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class AngledPoint(Point):
    """
    A point tagged with the polar angle of the ray leaving it.

    Attributes
    ----------
    angle : float
        Direction angle in radians, measured from the +x axis
    """
    angle: float = 0.0

    def as_array(self) -> np.ndarray:
        """Return [x, y, angle]."""
        return np.array([self.x, self.y, self.angle], dtype=np.float64)

    @property
    def point(self) -> Point:
        """The untagged position."""
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Segment:
    """
    A directed line from `a` to `b`.

    Used both as a drawing primitive and, through `b - a`, as a vector
    for angle computations.
    """
    a: Point
    b: Point

    def delta(self) -> Point:
        """Direction vector b - a."""
        return self.b - self.a

    def angle(self) -> float:
        """Polar angle of b - a with respect to the +x axis, in radians."""
        d = self.delta()
        return float(np.arctan2(d.y, d.x))

    def length(self) -> float:
        """Euclidean length in mm."""
        d = self.delta()
        return float(np.hypot(d.x, d.y))

    def as_array(self) -> np.ndarray:
        """Return the endpoints as a (2, 2) array [[ax, ay], [bx, by]]."""
        return np.array([[self.a.x, self.a.y], [self.b.x, self.b.y]], dtype=np.float64)


def normalize(vector: np.ndarray) -> np.ndarray:
    """
    Normalize a vector to unit length.

    Parameters
    ----------
    vector : np.ndarray
        Input vector of any dimension

    Returns
    -------
    np.ndarray
        Unit vector in same direction

    Raises
    ------
    InvalidParameter
        If vector has zero magnitude
    """
    magnitude = np.linalg.norm(vector)
    if magnitude < 1e-15:
        raise InvalidParameter("Cannot normalize zero vector")
    return vector / magnitude
