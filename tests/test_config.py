import dataclasses

import numpy as np
import pytest

from scopetrace import (
    InvalidParameter,
    MirrorConfig,
    ScopeConfig,
    ScopeReport,
    SensorConfig,
    SourceConfig,
    airy,
    blur,
    dawes,
    effective_focal_length,
    spread,
    vertical_fov,
)
from scopetrace.reflection import ReflectionMode


@pytest.fixture
def config():
    return ScopeConfig()


def test_defaults_are_valid(config):
    assert config.validate() is config
    assert config.mirror == MirrorConfig(focal_length=500.0, radius=100.0)
    assert config.source == SourceConfig(distance=100000.0, height=0.0)
    assert config.sensor.height == 24.0


def test_describe(config):
    text = config.describe()
    assert "f=500 mm" in text
    assert "D=200 mm" in text
    assert "8 rays" in text


@pytest.mark.parametrize("bad", [
    ScopeConfig(mirror=MirrorConfig(focal_length=0.0)),
    ScopeConfig(mirror=MirrorConfig(radius=-1.0)),
    ScopeConfig(source=SourceConfig(distance=float("inf"))),
    ScopeConfig(sensor=SensorConfig(width=0.0)),
    ScopeConfig(ray_count=0),
    ScopeConfig(ray_count=2.5),
    ScopeConfig(ray_count=True),
])
def test_validate_rejects_out_of_domain_values(bad):
    with pytest.raises(InvalidParameter):
        bad.validate()


def test_validate_accepts_numpy_integer_ray_count():
    config = ScopeConfig(ray_count=np.int64(8))
    assert config.validate() is config
    assert len(config.geometry()["parallel_fan"]) == 18


def test_report_matches_metric_functions(config):
    report = config.report()
    assert isinstance(report, ScopeReport)

    efl = effective_focal_length(500.0, 100.0, 100000.0)
    lspread = spread(500.0, 100.0, 100000.0)
    assert report.effective_focal_length == efl
    assert report.spread == lspread
    assert report.vertical_fov == vertical_fov(24.0, efl)
    assert report.blur == blur(100.0, efl, 502.5, lspread)
    assert report.airy == airy(500.0, 100.0)
    assert report.dawes == dawes(100.0)
    assert report.focal_ratio == 2.5


def test_report_as_dict(config):
    values = config.report().as_dict()
    assert set(values) == {f.name for f in dataclasses.fields(ScopeReport)}
    assert values["focal_ratio"] == 2.5


def test_report_rejects_invalid_config():
    with pytest.raises(InvalidParameter):
        ScopeConfig(mirror=MirrorConfig(radius=0.0)).report()


def test_geometry_on_axis(config):
    drawing = config.geometry()
    assert len(drawing["curve"]) == 200
    assert len(drawing["parallel_fan"]) == 18
    assert len(drawing["incident_fan"]) == 9
    assert len(drawing["reflected_fan"]) == 9
    assert all(seg.b.y == 0.0 for seg in drawing["reflected_fan"])


def test_geometry_off_axis_uses_fixed_length_rays():
    config = ScopeConfig(source=SourceConfig(distance=100000.0, height=2000.0), ray_count=4)
    for seg in config.geometry()["reflected_fan"]:
        assert seg.length() == pytest.approx(1250.0)


def test_geometry_explicit_mode(config):
    fan = config.geometry(ReflectionMode.FIXED_LENGTH)["reflected_fan"]
    assert all(seg.length() == pytest.approx(1250.0) for seg in fan)
