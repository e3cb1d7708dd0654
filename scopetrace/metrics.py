"""
metrics.py - Scalar optical performance figures for the mirror

All figures are derived on-axis (source height 0) from the reflection
solver and the parabola profile:

    - effective focal length and longitudinal spread (spherical
      aberration proxy for a finite source distance)
    - horizontal/vertical field of view and its linear footprint
    - defocus blur at a given sensor position
    - Airy disk diameter and Dawes resolution limit

Units: lengths in mm, angles in radians, Dawes limit in arcseconds.

Project: Parabolic Mirror Ray Tracer
"""

import logging

import numpy as np

from .constants import (
    AIRY_DIAMETER_FACTOR,
    ARCSEC2RAD,
    BLUR_SPREAD_WEIGHT,
    DAWES_CONSTANT,
    WAVELENGTH_VISIBLE,
)
from .errors import InvalidParameter, checked_result, require_finite, require_positive
from .reflection import reflect_on_axis

logger = logging.getLogger(__name__)

# Height of the near-paraxial reference ray [mm]
PARAXIAL_HEIGHT = 1.0


def _crossings(focal_length: float, radius: float, source_distance: float):
    require_positive("focal_length", focal_length)
    require_positive("radius", radius)
    paraxial = reflect_on_axis(focal_length, PARAXIAL_HEIGHT, source_distance).b.x
    marginal = reflect_on_axis(focal_length, radius, source_distance).b.x
    return paraxial, marginal


def effective_focal_length(focal_length: float, radius: float, source_distance: float) -> float:
    """
    Blended convergence distance of marginal and near-paraxial rays.

    The average of where the reflected rays from y = radius and y = 1
    cross the optical axis. For a finite source distance this differs
    from f, and the two crossings bracket it.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    radius : float
        Mirror semi-aperture in mm
    source_distance : float
        Axial position of the on-axis source in mm

    Returns
    -------
    float
        Effective focal length in mm

    Raises
    ------
    InvalidParameter
        If f <= 0, radius <= 0 or a ray has no axis crossing
    """
    paraxial, marginal = _crossings(focal_length, radius, source_distance)
    efl = (marginal + paraxial) / 2
    logger.debug("EFL %.6f mm (paraxial %.6f, marginal %.6f)", efl, paraxial, marginal)
    return checked_result("effective focal length", efl)


def spread(focal_length: float, radius: float, source_distance: float) -> float:
    """
    Longitudinal spread between near-paraxial and marginal focus.

    crossing(y=1) - crossing(y=radius); negative when marginal rays
    cross the axis beyond the paraxial ones.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    radius : float
        Mirror semi-aperture in mm
    source_distance : float
        Axial position of the on-axis source in mm

    Returns
    -------
    float
        Spread in mm
    """
    paraxial, marginal = _crossings(focal_length, radius, source_distance)
    return checked_result("spread", paraxial - marginal)


def _fov(extent: float, efl: float, name: str) -> float:
    require_positive(name, extent)
    require_positive("efl", efl)
    return float(2 * np.arctan(extent / 2 / efl))


def vertical_fov(sensor_height: float, efl: float) -> float:
    """Full vertical field of view, 2·atan(h / 2 / efl), in radians."""
    return _fov(sensor_height, efl, "sensor_height")


def horizontal_fov(sensor_width: float, efl: float) -> float:
    """Full horizontal field of view, 2·atan(w / 2 / efl), in radians."""
    return _fov(sensor_width, efl, "sensor_width")


def projected_height(fov: float, distance: float) -> float:
    """
    Linear footprint of an angular field at a given distance.

    tan(fov) * distance; used for both the horizontal and the vertical
    field.

    Parameters
    ----------
    fov : float
        Field of view in radians
    distance : float
        Distance to the object plane in mm

    Returns
    -------
    float
        Footprint in mm

    Raises
    ------
    InvalidParameter
        If tan(fov) is undefined
    """
    require_finite("fov", fov)
    require_finite("distance", distance)
    if abs(np.cos(fov)) < 1e-15:
        raise InvalidParameter(f"tan({fov}) is undefined")
    return checked_result("projected height", np.tan(fov) * distance)


projected_width = projected_height


def blur(radius: float, efl: float, sensor_distance: float, lspread: float) -> float:
    """
    Approximate defocus blur diameter at the sensor.

        sin(tan(radius / efl)) * (efl - (sensor_distance + 0.66 * lspread)) * 2

    The marginal cone half-angle times the distance between the blended
    focus and the sensor, doubled for a diameter. The sign follows the
    side of focus the sensor is on.

    Parameters
    ----------
    radius : float
        Mirror semi-aperture in mm
    efl : float
        Effective focal length in mm
    sensor_distance : float
        Axial sensor position in mm
    lspread : float
        Longitudinal spread in mm (see spread())

    Returns
    -------
    float
        Blur diameter in mm
    """
    require_positive("radius", radius)
    require_positive("efl", efl)
    require_finite("sensor_distance", sensor_distance)
    require_finite("lspread", lspread)
    angle = np.tan(radius / efl)
    pos = efl - (sensor_distance + BLUR_SPREAD_WEIGHT * lspread)
    return checked_result("blur", np.sin(angle) * pos * 2)


def focal_ratio(focal_length: float, radius: float) -> float:
    """Focal ratio N = f / D."""
    require_positive("focal_length", focal_length)
    require_positive("radius", radius)
    return checked_result("focal ratio", focal_length / (2 * radius))


def airy(focal_length: float, radius: float) -> float:
    """
    Airy disk diameter at 550 nm.

    2.44 * λ * f / D, with λ = 550e-6 mm.

    Parameters
    ----------
    focal_length : float
        Focal length in mm
    radius : float
        Mirror semi-aperture in mm

    Returns
    -------
    float
        Diameter of the first dark ring in mm
    """
    return checked_result(
        "airy diameter",
        AIRY_DIAMETER_FACTOR * WAVELENGTH_VISIBLE * focal_ratio(focal_length, radius)
    )


def dawes(radius: float) -> float:
    """
    Dawes resolution limit, 11.6 / D[cm], in arcseconds.

    Parameters
    ----------
    radius : float
        Mirror semi-aperture in mm

    Returns
    -------
    float
        Resolvable separation in arcseconds
    """
    require_positive("radius", radius)
    return checked_result("dawes limit", DAWES_CONSTANT / (radius * 2 / 10))


def dawes_radians(radius: float) -> float:
    """Dawes resolution limit converted to radians."""
    return checked_result("dawes limit", dawes(radius) * ARCSEC2RAD)
