"""
reflection.py - Law of reflection at the parabolic mirror

For an incident segment v1 running from the source to the surface point
and the normal segment at that point:

    θ_out = angle(v1) + 2 * (angle(normal) - angle(v1))

i.e. the incident direction mirrored about the normal line. θ_out is
defined modulo π as far as the reflected line is concerned, so it can be
used directly for the axis intersection. The fixed-length output fixes
the travel direction explicitly (+x, back toward the focal side).

Two output representations:
    - INTERSECTION: the reflected ray ends where it crosses the axis
    - FIXED_LENGTH: the reflected ray is drawn with length 2.5f, which
      stays meaningful for off-axis sources

Project: Parabolic Mirror Ray Tracer
"""

import logging
from enum import Enum
from typing import Optional

import numpy as np

from .constants import REFLECTED_RAY_LENGTH_FACTOR
from .errors import InvalidParameter, checked_result, require_finite
from .geometry import AngledPoint, Point, Segment
from .parabola import surface_x
from .surfaces import normal

logger = logging.getLogger(__name__)

# |cos θ| below this is treated as a vertical ray
_VERTICAL_TOLERANCE = 1e-15


class ReflectionMode(Enum):
    """How the reflected ray is terminated."""
    INTERSECTION = "intersection"
    FIXED_LENGTH = "fixed_length"


def angle_of(segment: Segment) -> float:
    """Angle of segment.b - segment.a with the +x axis, in radians."""
    return segment.angle()


def angle_between(a: Segment, b: Segment) -> float:
    """Signed angle that rotates segment a onto segment b, in radians."""
    return angle_of(b) - angle_of(a)


def incident_segment(
    focal_length: float,
    y: float,
    source_distance: float,
    source_height: float = 0.0
) -> Segment:
    """
    Incident ray from the source point to the mirror surface at height y.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    y : float
        Height of the surface point in mm
    source_distance : float
        Axial position of the point source in mm
    source_height : float, optional
        Height of the point source above the axis in mm (default: 0)

    Returns
    -------
    Segment
        Segment from (source_distance, source_height) to (x, y)
    """
    require_finite("source_distance", source_distance)
    require_finite("source_height", source_height)
    x = surface_x(focal_length, y)
    return Segment(
        a=Point(source_distance, source_height),
        b=Point(x, y),
    )


def reflection_angle(
    focal_length: float,
    y: float,
    source_distance: float,
    source_height: float = 0.0
) -> float:
    """
    Direction angle of the reflected ray at height y.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    y : float
        Height of the surface point in mm
    source_distance : float
        Axial position of the point source in mm
    source_height : float, optional
        Height of the point source in mm (default: 0)

    Returns
    -------
    float
        Output angle in radians relative to the +x axis
    """
    v1 = incident_segment(focal_length, y, source_distance, source_height)
    theta = angle_between(v1, normal(focal_length, y))
    return angle_of(v1) + 2 * theta


def axis_crossing(p: Point, angle: float) -> float:
    """
    Axial position where a ray through p at the given angle meets y = 0.

    x = (tan(θ) * p.x - p.y) / tan(θ)

    Parameters
    ----------
    p : Point
        A point on the ray
    angle : float
        Ray direction in radians

    Returns
    -------
    float
        x coordinate of the crossing in mm

    Raises
    ------
    InvalidParameter
        If the ray is vertical or parallel to the axis, so that no finite
        crossing exists
    """
    require_finite("angle", angle)
    if abs(np.cos(angle)) < _VERTICAL_TOLERANCE:
        raise InvalidParameter(f"Ray at angle {angle} is vertical, slope undefined")
    slope = np.tan(angle)
    if slope == 0.0:
        raise InvalidParameter(f"Ray through ({p.x}, {p.y}) is parallel to the axis")
    with np.errstate(over="ignore", invalid="ignore"):
        x = ((slope * p.x) - p.y) / slope
    if not np.isfinite(x):
        raise InvalidParameter(f"Axis crossing is not finite for angle {angle}")
    return x


def _fixed_length_end(p: Point, angle: float, length: float) -> Point:
    with np.errstate(over="ignore", invalid="ignore"):
        x = p.x + abs(length * np.cos(angle))
        y = p.y + length * np.sin(-angle)
    return Point(checked_result("reflected ray end x", x), checked_result("reflected ray end y", y))


def reflect(
    focal_length: float,
    y: float,
    source_distance: float,
    source_height: float = 0.0,
    mode: Optional[ReflectionMode] = None
) -> Segment:
    """
    Solve the reflected ray at height y.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    y : float
        Height of the surface point in mm
    source_distance : float
        Axial position of the point source in mm
    source_height : float, optional
        Height of the point source in mm (default: 0)
    mode : ReflectionMode, optional
        Output representation. Defaults to INTERSECTION for an on-axis
        source and FIXED_LENGTH otherwise.

    Returns
    -------
    Segment
        Reflected ray starting at the surface point

    Raises
    ------
    InvalidParameter
        On invalid geometry, or in INTERSECTION mode when the reflected
        ray never crosses the axis
    """
    if mode is None:
        mode = ReflectionMode.INTERSECTION if source_height == 0 else ReflectionMode.FIXED_LENGTH

    angle = reflection_angle(focal_length, y, source_distance, source_height)
    p = Point(surface_x(focal_length, y), y)

    if mode is ReflectionMode.INTERSECTION:
        try:
            end = Point(axis_crossing(p, angle), 0.0)
        except InvalidParameter:
            logger.warning(
                "Reflected ray at y=%s (f=%s, source=(%s, %s)) has no axis crossing",
                y, focal_length, source_distance, source_height
            )
            raise
    elif mode is ReflectionMode.FIXED_LENGTH:
        end = _fixed_length_end(p, angle, REFLECTED_RAY_LENGTH_FACTOR * focal_length)
    else:
        raise InvalidParameter(f"Unknown reflection mode: {mode!r}")

    return Segment(a=p, b=end)


def reflect_on_axis(focal_length: float, y: float, source_distance: float) -> Segment:
    """
    Reflected ray for an on-axis point source, ending on the axis.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    y : float
        Height of the surface point in mm
    source_distance : float
        Axial position of the point source in mm

    Returns
    -------
    Segment
        From the surface point to (x_crossing, 0)
    """
    return reflect(focal_length, y, source_distance, 0.0, ReflectionMode.INTERSECTION)


def reflection_point(
    focal_length: float,
    y: float,
    source_distance: float,
    source_height: float = 0.0
) -> AngledPoint:
    """Surface point at height y tagged with its reflected-ray angle."""
    angle = reflection_angle(focal_length, y, source_distance, source_height)
    return AngledPoint(surface_x(focal_length, y), y, angle)
