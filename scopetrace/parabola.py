"""
parabola.py - Closed-form parabolic mirror profile

The mirror is the meridional section of a paraboloid with its vertex at
the origin and its focus at (f, 0):

    x(y) = y² / (4f)

This is the exact conic sag for k = -1, so no paraxial approximation is
involved and every sampled point lies on the curve.

Project: Parabolic Mirror Ray Tracer
"""

import logging
from typing import List

import numpy as np

from .errors import InvalidParameter, checked_result, require_finite, require_positive
from .geometry import Point

logger = logging.getLogger(__name__)


def surface_x(focal_length: float, y: float) -> float:
    """
    Axial position of the mirror surface at height y.

    Parameters
    ----------
    focal_length : float
        Focal length f in mm (must be positive)
    y : float
        Height above the optical axis in mm

    Returns
    -------
    float
        x = y² / (4f) in mm

    Raises
    ------
    InvalidParameter
        If f <= 0, y is not finite or x overflows
    """
    require_positive("focal_length", focal_length)
    require_finite("y", y)
    return checked_result("surface x", y * y / 4 / focal_length)


def surface_x_array(focal_length: float, y: np.ndarray) -> np.ndarray:
    """
    Vectorized surface position for an array of heights.

    Parameters
    ----------
    focal_length : float
        Focal length f in mm (must be positive)
    y : np.ndarray
        Heights in mm

    Returns
    -------
    np.ndarray
        x values in mm, same shape as y
    """
    require_positive("focal_length", focal_length)
    y = np.asarray(y, dtype=np.float64)
    if not np.all(np.isfinite(y)):
        raise InvalidParameter("heights must be finite")
    with np.errstate(over="ignore"):
        x = y * y / 4 / focal_length
    return checked_result("surface x", x)


def focal_point(focal_length: float) -> Point:
    """Ideal focus (f, 0) of the paraboloid."""
    require_positive("focal_length", focal_length)
    return Point(float(focal_length), 0.0)


def curve_array(radius: float, focal_length: float, step: float = 1.0) -> np.ndarray:
    """
    Sample the mirror profile as an (N, 2) array of [x, y] rows.

    Heights run from -radius up to, but not including, +radius.

    Parameters
    ----------
    radius : float
        Mirror semi-aperture in mm
    focal_length : float
        Focal length in mm
    step : float, optional
        Height increment in mm (default: 1.0)

    Returns
    -------
    np.ndarray
        Array of shape (ceil(2 * radius / step), 2)
    """
    require_positive("radius", radius)
    require_positive("step", step)
    heights = np.arange(-radius, radius, step, dtype=np.float64)
    return np.column_stack([surface_x_array(focal_length, heights), heights])


def curve(radius: float, focal_length: float) -> List[Point]:
    """
    Sample the mirror profile in unit height steps.

    Heights run from -radius up to, but not including, +radius, so an
    integral radius yields exactly 2 * radius points with strictly
    increasing y.

    Parameters
    ----------
    radius : float
        Mirror semi-aperture in mm (must be positive)
    focal_length : float
        Focal length in mm (must be positive)

    Returns
    -------
    List[Point]
        Surface points ordered by height

    Raises
    ------
    InvalidParameter
        If radius <= 0 or f <= 0
    """
    samples = curve_array(radius, focal_length)
    logger.debug("Sampled %d profile points (radius=%s, f=%s)", len(samples), radius, focal_length)
    return [Point(float(x), float(y)) for x, y in samples]
