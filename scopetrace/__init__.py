"""
scopetrace - Parabolic telescope mirror ray geometry in Python

A 2-D, axis-symmetric model of light reflecting off a parabolic primary
mirror, with the optical figures derived from it: effective focal length,
longitudinal spread, field of view, defocus blur and diffraction limits.
"""

from .errors import InvalidParameter
from .geometry import Point, Segment, AngledPoint, normalize

from .parabola import surface_x, surface_x_array, curve, curve_array, focal_point
from .surfaces import normal, tangent, unit_normal
from .reflection import ReflectionMode
from .reflection import angle_of, angle_between, axis_crossing
from .reflection import reflection_angle, reflect, reflect_on_axis, reflection_point
from .rays import fan_heights, parallel_fan, point_source_fan
from .rays import reflected_fan, traced_fan, reflection_points
from .metrics import effective_focal_length, spread, focal_ratio
from .metrics import vertical_fov, horizontal_fov, projected_height, projected_width
from .metrics import blur, airy, dawes, dawes_radians
from .config import ScopeConfig, MirrorConfig, SourceConfig, SensorConfig, ScopeReport
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Errors
    "InvalidParameter",
    # Value types
    "Point",
    "Segment",
    "AngledPoint",
    "normalize",
    # Parabola
    "surface_x",
    "surface_x_array",
    "curve",
    "curve_array",
    "focal_point",
    # Surface differentials
    "normal",
    "tangent",
    "unit_normal",
    # Reflection
    "ReflectionMode",
    "angle_of",
    "angle_between",
    "axis_crossing",
    "reflection_angle",
    "reflect",
    "reflect_on_axis",
    "reflection_point",
    # Ray fans
    "fan_heights",
    "parallel_fan",
    "point_source_fan",
    "reflected_fan",
    "traced_fan",
    "reflection_points",
    # Metrics
    "effective_focal_length",
    "spread",
    "focal_ratio",
    "vertical_fov",
    "horizontal_fov",
    "projected_height",
    "projected_width",
    "blur",
    "airy",
    "dawes",
    "dawes_radians",
    # Configuration
    "ScopeConfig",
    "MirrorConfig",
    "SourceConfig",
    "SensorConfig",
    "ScopeReport",
    "setup_logging",
]
