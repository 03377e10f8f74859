"""Unit tests for the geometry primitives in unistroke.utils.gesture_utils."""

import math

import pytest

from unistroke.utils.gesture_utils import (
    DataValidator,
    GeometryUtils,
    InvalidStrokeError,
    PathUtils,
    Point,
    Rect,
)


def test_point_is_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5
    assert isinstance(p.x, float)


def test_centroid_is_mean_of_coordinates():
    c = GeometryUtils.calculate_centroid([Point(0, 0), Point(4, 0), Point(4, 2), Point(0, 2)])
    assert c == Point(2, 1)


def test_centroid_of_empty_stroke_raises():
    with pytest.raises(InvalidStrokeError):
        GeometryUtils.calculate_centroid([])


def test_bounding_box():
    box = GeometryUtils.calculate_bounding_box([Point(3, -1), Point(-2, 4), Point(1, 1)])
    assert box == Rect(-2, -1, 5, 5)


def test_path_length_sums_segments():
    points = [Point(0, 0), Point(3, 4), Point(3, 10)]
    assert GeometryUtils.calculate_path_length(points) == pytest.approx(11.0)


def test_path_length_of_single_point_is_zero():
    assert GeometryUtils.calculate_path_length([Point(1, 1)]) == 0.0


def test_path_distance_is_mean_pointwise_distance():
    a = [Point(0, 0), Point(1, 0)]
    b = [Point(0, 3), Point(1, 1)]
    assert GeometryUtils.calculate_path_distance(a, b) == pytest.approx(2.0)


def test_path_distance_requires_equal_lengths():
    with pytest.raises(ValueError):
        GeometryUtils.calculate_path_distance([Point(0, 0)], [Point(0, 0), Point(1, 1)])


def test_rotate_points_about_centroid():
    rotated = GeometryUtils.rotate_points([Point(-1, 0), Point(1, 0)], math.pi / 2)
    assert rotated[0].x == pytest.approx(0.0, abs=1e-12)
    assert rotated[0].y == pytest.approx(-1.0)
    assert rotated[1].y == pytest.approx(1.0)


def test_rect_half_diagonal():
    assert Rect(0, 0, 30, 40).half_diagonal == pytest.approx(25.0)


def test_to_points_accepts_mixed_representations():
    points = PathUtils.to_points([Point(1, 2), (3, 4), {'x': 5, 'y': 6, 't': 7}])
    assert points == [Point(1, 2), Point(3, 4), Point(5, 6)]


def test_to_points_rejects_garbage():
    with pytest.raises(InvalidStrokeError):
        PathUtils.to_points([{'x': 1}])
    with pytest.raises(InvalidStrokeError):
        PathUtils.to_points([('a', 'b')])


def test_to_dicts():
    assert PathUtils.to_dicts([Point(1, 2)]) == [{'x': 1.0, 'y': 2.0}]


def test_validate_stroke():
    DataValidator.validate_stroke([Point(0, 0), Point(1, 1)])
    with pytest.raises(InvalidStrokeError):
        DataValidator.validate_stroke([Point(0, 0)])
    with pytest.raises(InvalidStrokeError):
        DataValidator.validate_stroke([Point(0, 0), Point(float('nan'), 1)])
