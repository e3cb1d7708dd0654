"""
surfaces.py - Local differential geometry of the parabolic mirror

At a surface point (x, y) with x = y²/(4f) the construction uses

    dx = -2x
    dy = -y

(dx, dy) lies along the tangent (the slope dx/dy = 2x/y scaled by -y),
so the normal and tangent lines follow without a division:

    normal:  a = (x - dy, y + dx),  b = (x + dy, y - dx)
    tangent: a = (-x, 0),           b = (x - dx, y - dy)

The tangent line meets the optical axis at x = -x_surface, the standard
subtangent property of a parabola. The normal segment is a directional
reference for reflection and is not drawn to scale.

At the vertex (y = 0) both segments collapse onto the axis.

Project: Parabolic Mirror Ray Tracer
"""

import numpy as np

from .geometry import Point, Segment, normalize
from .parabola import surface_x


def _differentials(focal_length: float, y: float):
    x = surface_x(focal_length, y)
    return x, -2 * x, -y


def normal(focal_length: float, y: float) -> Segment:
    """
    Normal line through the surface point at height y.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    y : float
        Height of the surface point in mm

    Returns
    -------
    Segment
        Line through (x, y) perpendicular to the surface
    """
    x, dx, dy = _differentials(focal_length, y)
    return Segment(
        a=Point(x - dy, y + dx),
        b=Point(x + dy, y - dx),
    )


def tangent(focal_length: float, y: float) -> Segment:
    """
    Tangent line at the surface point at height y.

    The segment starts where the tangent crosses the optical axis,
    (-x, 0), and ends one construction step beyond the surface point.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    y : float
        Height of the surface point in mm

    Returns
    -------
    Segment
        Tangent line segment
    """
    x, dx, dy = _differentials(focal_length, y)
    return Segment(
        a=Point(-x, 0.0),
        b=Point(x - dx, y - dy),
    )


def unit_normal(focal_length: float, y: float) -> np.ndarray:
    """
    Unit vector along the normal segment at height y.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    y : float
        Height of the surface point in mm

    Returns
    -------
    np.ndarray
        Unit normal [nx, ny]; at the vertex, [-1, 0] (back along the axis)
    """
    d = normal(focal_length, y).delta()
    if d.x == 0.0 and d.y == 0.0:
        # At vertex, normal is along the axis
        return np.array([-1.0, 0.0])
    return normalize(np.array([d.x, d.y], dtype=np.float64))
