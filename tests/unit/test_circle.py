import math

import numpy as np
import pytest
from motionpath.motion import circle
from motionpath.utils.errors import ErrorKind, InvalidRadiusError, SampleLimitError


def test_quarter_arc_endpoints():
    path = circle.interpolate_circular((0.0, 0.0), 5.0, True, 90.0)
    assert path.shape == (19, 2)
    assert np.allclose(path[0], [5.0, 0.0])
    assert np.allclose(path[-1], [0.0, 5.0], atol=1e-9)


@pytest.mark.parametrize(
    "center,radius,stop",
    [
        ((0.0, 0.0), 5.0, 90.0),
        ((12.5, -3.0), 0.75, 360.0),
        ((-1.0, 2.0), 100.0, 33.3),
    ],
)
def test_all_points_lie_on_circle(center, radius, stop):
    path = circle.interpolate_circular(center, radius, False, stop)
    distances = np.hypot(path[:, 0] - center[0], path[:, 1] - center[1])
    assert np.allclose(distances, radius, atol=1e-9)


def test_last_sample_does_not_exceed_stop_angle():
    path = circle.interpolate_circular((0.0, 0.0), 1.0, False, 33.3)
    # 0, 5, ..., 30
    assert len(path) == 7
    last_angle = math.degrees(math.atan2(path[-1][1], path[-1][0]))
    assert last_angle == pytest.approx(30.0)


@pytest.mark.parametrize("stop", [0.0, 4.9, -90.0])
def test_small_or_negative_stop_angle_yields_start_point(stop):
    path = circle.interpolate_circular((1.0, 1.0), 2.0, True, stop)
    assert path.shape == (1, 2)
    assert np.allclose(path[0], [3.0, 1.0])


def test_direction_flag_does_not_change_sampling():
    cw = circle.interpolate_circular((0.0, 0.0), 3.0, True, 45.0)
    ccw = circle.interpolate_circular((0.0, 0.0), 3.0, False, 45.0)
    assert np.array_equal(cw, ccw)


@pytest.mark.parametrize("radius", [0.0, -1.0, math.nan])
def test_non_positive_radius_is_rejected(radius):
    with pytest.raises(InvalidRadiusError) as excinfo:
        circle.interpolate_circular((0.0, 0.0), radius, False, 90.0)
    assert excinfo.value.kind is ErrorKind.INVALID_RADIUS


def test_custom_step():
    path = circle.interpolate_circular((0.0, 0.0), 1.0, False, 90.0, step_deg=30.0)
    assert len(path) == 4


@pytest.mark.parametrize("vec", [(3.0, 4.0, 0.0), (0.0, 0.0, -2.0), (1e-3, 2e-3, 5e-4), (1.0, 1.0, 1.0)])
def test_normalize_orientation_unit_length(vec):
    axis = circle.normalize_orientation(vec)
    assert np.linalg.norm(axis) == pytest.approx(1.0)
    assert np.allclose(axis * np.linalg.norm(vec), vec)


@pytest.mark.parametrize("vec", [None, (0.0, 0.0, 0.0)])
def test_normalize_orientation_default_axis(vec):
    assert np.array_equal(circle.normalize_orientation(vec), [1.0, 0.0, 0.0])


def test_normalize_orientation_rejects_wrong_shape():
    with pytest.raises(ValueError):
        circle.normalize_orientation((1.0, 0.0))


def test_orientation_does_not_change_points():
    plain = circle.interpolate_circular((0.0, 0.0), 2.0, False, 60.0)
    oriented = circle.interpolate_circular((0.0, 0.0), 2.0, False, 60.0, orientation=(0.0, 0.0, 9.0))
    assert np.array_equal(plain, oriented)


def test_samples_never_exceed_stop_angle():
    degrees = circle.sample_degrees(89.9999999999)
    assert degrees[-1] == 85.0
    assert np.all(degrees <= 89.9999999999)
    assert circle.sample_degrees(90.0)[-1] == 90.0


@pytest.mark.parametrize("stop,step", [(0.3, 0.1), (1.0, 0.1), (360.0, 7.2)])
def test_fractional_steps_stay_within_stop(stop, step):
    degrees = circle.sample_degrees(stop, step)
    assert np.all(degrees <= stop)
    assert len(degrees) * step > stop


@pytest.mark.parametrize("stop", [1e15, 5e6 + 5.0])
def test_arc_beyond_sample_limit_is_rejected(stop):
    with pytest.raises(SampleLimitError) as excinfo:
        circle.interpolate_circular((0.0, 0.0), 1.0, False, stop, max_samples=1_000_000)
    assert excinfo.value.kind is ErrorKind.SAMPLE_LIMIT


def test_arc_at_sample_limit_is_allowed():
    path = circle.interpolate_circular((0.0, 0.0), 1.0, False, 45.0, max_samples=10)
    assert len(path) == 10
