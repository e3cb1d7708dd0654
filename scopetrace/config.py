"""
Telescope configuration.

Groups the numeric inputs a display layer collects (mirror, source,
sensor, ray count) and evaluates everything that layer draws or prints
in one call.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Optional

from .errors import require_count, require_finite, require_positive
from .metrics import (
    airy,
    blur,
    dawes,
    effective_focal_length,
    focal_ratio,
    horizontal_fov,
    projected_height,
    projected_width,
    spread,
    vertical_fov,
)
from .parabola import curve
from .rays import parallel_fan, point_source_fan, reflected_fan
from .reflection import ReflectionMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MirrorConfig:
    """
    Primary mirror.

    Attributes
    ----------
    focal_length : float
        Focal length f in mm
    radius : float
        Semi-aperture in mm
    """
    focal_length: float = 500.0
    radius: float = 100.0


@dataclass(frozen=True)
class SourceConfig:
    """Point source. Height 0 puts it on the optical axis."""
    distance: float = 100000.0      # mm
    height: float = 0.0             # mm


@dataclass(frozen=True)
class SensorConfig:
    """
    Image sensor.

    Attributes
    ----------
    width : float
        Sensor width in mm
    height : float
        Sensor height in mm
    distance : float
        Axial position of the sensor plane in mm
    """
    width: float = 36.0
    height: float = 24.0
    distance: float = 502.5


@dataclass(frozen=True)
class ScopeReport:
    """Scalar figures for display. Lengths in mm, angles in rad."""
    effective_focal_length: float
    spread: float
    vertical_fov: float
    horizontal_fov: float
    projected_height: float
    projected_width: float
    blur: float
    airy: float
    dawes: float
    focal_ratio: float

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ScopeConfig:
    """Top-level telescope configuration."""
    mirror: MirrorConfig = field(default_factory=MirrorConfig)
    source: SourceConfig = field(default_factory=SourceConfig)
    sensor: SensorConfig = field(default_factory=SensorConfig)
    ray_count: int = 8

    def validate(self) -> ScopeConfig:
        """
        Check every value against the model's domain.

        Returns
        -------
        ScopeConfig
            self, so the call can be chained

        Raises
        ------
        InvalidParameter
            If a length is non-positive or non-finite, or ray_count is
            not a positive integer
        """
        require_positive("focal_length", self.mirror.focal_length)
        require_positive("radius", self.mirror.radius)
        require_finite("source distance", self.source.distance)
        require_finite("source height", self.source.height)
        require_positive("sensor width", self.sensor.width)
        require_positive("sensor height", self.sensor.height)
        require_finite("sensor distance", self.sensor.distance)
        require_count("ray_count", self.ray_count)
        return self

    def describe(self) -> str:
        """Human-readable summary of the configuration."""
        m, s, c = self.mirror, self.source, self.sensor
        return (
            f"f={m.focal_length:g} mm, D={2 * m.radius:g} mm, "
            f"source=({s.distance:g}, {s.height:g}) mm, "
            f"sensor={c.width:g}x{c.height:g} mm at {c.distance:g} mm, "
            f"{self.ray_count} rays"
        )

    def report(self) -> ScopeReport:
        """Evaluate every on-axis metric for this configuration."""
        self.validate()
        f, r = self.mirror.focal_length, self.mirror.radius
        efl = effective_focal_length(f, r, self.source.distance)
        lspread = spread(f, r, self.source.distance)
        vfov = vertical_fov(self.sensor.height, efl)
        hfov = horizontal_fov(self.sensor.width, efl)
        report = ScopeReport(
            effective_focal_length=efl,
            spread=lspread,
            vertical_fov=vfov,
            horizontal_fov=hfov,
            projected_height=projected_height(vfov, self.source.distance),
            projected_width=projected_width(hfov, self.source.distance),
            blur=blur(r, efl, self.sensor.distance, lspread),
            airy=airy(f, r),
            dawes=dawes(r),
            focal_ratio=focal_ratio(f, r),
        )
        logger.info("Report for %s: EFL %.3f mm, spread %.4f mm", self.describe(), efl, lspread)
        return report

    def geometry(self, mode: Optional[ReflectionMode] = None) -> dict:
        """
        Points and segments for drawing the mirror and its ray fans.

        Parameters
        ----------
        mode : ReflectionMode, optional
            Output representation of the reflected fan; see reflect()

        Returns
        -------
        dict
            Keys 'curve', 'parallel_fan', 'incident_fan' and
            'reflected_fan'
        """
        self.validate()
        f, r = self.mirror.focal_length, self.mirror.radius
        s = self.source
        return {
            'curve': curve(r, f),
            'parallel_fan': parallel_fan(r, f, self.ray_count),
            'incident_fan': point_source_fan(f, r, s.distance, s.height, self.ray_count),
            'reflected_fan': reflected_fan(f, r, s.distance, s.height, self.ray_count, mode),
        }
