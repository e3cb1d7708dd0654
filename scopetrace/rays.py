"""
rays.py - Ray fan generation for the parabolic mirror

A ray fan samples ray_count + 1 evenly spaced heights across the full
aperture [-radius, +radius] and emits one or more segments per height:

    - parallel_fan: collimated source (object at infinity)
    - point_source_fan: incident rays from a point source
    - reflected_fan: the solved reflection of each point-source ray

Every returned list is ordered by increasing height.

Project: Parabolic Mirror Ray Tracer
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .constants import FAR_FIELD_X
from .errors import require_count, require_finite, require_positive
from .geometry import AngledPoint, Point, Segment
from .parabola import focal_point, surface_x
from .reflection import ReflectionMode, incident_segment, reflect, reflection_point

logger = logging.getLogger(__name__)


def fan_heights(radius: float, ray_count: int) -> np.ndarray:
    """
    Evenly spaced sample heights across the mirror aperture.

    Parameters
    ----------
    radius : float
        Mirror semi-aperture in mm
    ray_count : int
        Number of intervals; ray_count + 1 heights are produced

    Returns
    -------
    np.ndarray
        Heights from -radius to +radius inclusive

    Raises
    ------
    InvalidParameter
        If radius <= 0, or ray_count is not a positive integer
    """
    require_positive("radius", radius)
    count = require_count("ray_count", ray_count)
    return np.linspace(-radius, radius, count + 1)


def parallel_fan(radius: float, focal_length: float, ray_count: int) -> List[Segment]:
    """
    Ray fan for a collimated source on the optical axis.

    Two segments per height:
        1. the incoming ray, drawn from the surface point out to
           FAR_FIELD_X at the same height
        2. the ideal convergence line from the surface point to the
           focus (f, 0); for a paraboloid and a source at infinity this
           is exact, so no reflection is solved here

    Parameters
    ----------
    radius : float
        Mirror semi-aperture in mm
    focal_length : float
        Focal length in mm
    ray_count : int
        Number of intervals across the aperture

    Returns
    -------
    List[Segment]
        2 * (ray_count + 1) segments, incoming/converging pairs
    """
    focus = focal_point(focal_length)
    out = []
    for y in fan_heights(radius, ray_count):
        y = float(y)
        p = Point(surface_x(focal_length, y), y)
        out.append(Segment(a=p, b=Point(FAR_FIELD_X, y)))
        out.append(Segment(a=p, b=focus))
    logger.debug("Parallel fan: %d segments (radius=%s, f=%s)", len(out), radius, focal_length)
    return out


def point_source_fan(
    focal_length: float,
    radius: float,
    source_distance: float,
    source_height: float,
    ray_count: int
) -> List[Segment]:
    """
    Incident rays from a point source to the mirror.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    radius : float
        Mirror semi-aperture in mm
    source_distance : float
        Axial position of the source in mm
    source_height : float
        Height of the source above the axis in mm
    ray_count : int
        Number of intervals across the aperture

    Returns
    -------
    List[Segment]
        ray_count + 1 segments, each from the surface point to the source
    """
    require_finite("source_distance", source_distance)
    require_finite("source_height", source_height)
    source = Point(source_distance, source_height)
    out = []
    for y in fan_heights(radius, ray_count):
        # surface point first, the same orientation the drawing layer uses
        hit = incident_segment(focal_length, float(y), source_distance, source_height).b
        out.append(Segment(a=hit, b=source))
    return out


def reflected_fan(
    focal_length: float,
    radius: float,
    source_distance: float,
    source_height: float,
    ray_count: int,
    mode: Optional[ReflectionMode] = None
) -> List[Segment]:
    """
    Reflected rays matching point_source_fan, in the same order.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    radius : float
        Mirror semi-aperture in mm
    source_distance : float
        Axial position of the source in mm
    source_height : float
        Height of the source in mm
    ray_count : int
        Number of intervals across the aperture
    mode : ReflectionMode, optional
        Passed to reflect(); FIXED_LENGTH for off-axis sources by default

    Returns
    -------
    List[Segment]
        ray_count + 1 reflected segments
    """
    out = [
        reflect(focal_length, float(y), source_distance, source_height, mode)
        for y in fan_heights(radius, ray_count)
    ]
    logger.debug(
        "Reflected fan: %d rays (f=%s, source=(%s, %s), mode=%s)",
        len(out), focal_length, source_distance, source_height, mode
    )
    return out


def traced_fan(
    focal_length: float,
    radius: float,
    source_distance: float,
    source_height: float,
    ray_count: int,
    mode: Optional[ReflectionMode] = None
) -> List[Tuple[Segment, Segment]]:
    """
    Incident and reflected segments paired per sampled height.

    Returns
    -------
    List[Tuple[Segment, Segment]]
        (incident, reflected) pairs sharing their surface point
    """
    incident = point_source_fan(focal_length, radius, source_distance, source_height, ray_count)
    reflected = reflected_fan(focal_length, radius, source_distance, source_height, ray_count, mode)
    return list(zip(incident, reflected))


def reflection_points(
    focal_length: float,
    radius: float,
    source_distance: float,
    source_height: float,
    ray_count: int
) -> List[AngledPoint]:
    """Surface hit points of the fan, each tagged with its reflected-ray angle."""
    return [
        reflection_point(focal_length, float(y), source_distance, source_height)
        for y in fan_heights(radius, ray_count)
    ]
