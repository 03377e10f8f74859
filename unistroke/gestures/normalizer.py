"""
$1 normalization pipeline.

Every stroke, template or query, goes through the same four steps so that
path distances between them are comparable:

1. resample to a fixed number of points spaced evenly by arc length
2. rotate about the centroid so the indicative angle is zero
3. scale non-uniformly to the reference square
4. translate so the centroid sits on the origin

Reference: https://depts.washington.edu/acelab/proj/dollar/index.html
"""

import math
from typing import List, Sequence, Tuple

from ..config.settings import RecognizerSettings
from ..utils.gesture_utils import Point, GeometryUtils, DataValidator

# An axis whose extent is this small relative to the other axis is flat
DEGENERATE_EXTENT_RATIO = 1e-9


def resample(points: Sequence[Point], num_points: int = RecognizerSettings.NUM_POINTS) -> List[Point]:
    """Resample points to have equal spacing along the path."""
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")

    # Interpolated points are spliced into a working copy, never the caller's list
    points = list(points)
    total_length = GeometryUtils.calculate_path_length(points)
    if total_length == 0:
        return [points[0]] * num_points

    interval = total_length / (num_points - 1)
    D = 0.0
    resampled = [points[0]]
    i = 1
    while i < len(points):
        prev_point = points[i-1]
        curr_point = points[i]
        d = GeometryUtils.calculate_distance(prev_point, curr_point)
        if d > 0 and D + d >= interval:
            ratio = (interval - D) / d
            qx = prev_point.x + ratio * (curr_point.x - prev_point.x)
            qy = prev_point.y + ratio * (curr_point.y - prev_point.y)
            q = Point(qx, qy)
            resampled.append(q)
            points.insert(i, q)
            D = 0.0
        else:
            D += d
        i += 1

    # Rounding can leave us one short of the last point, or one over
    while len(resampled) < num_points:
        resampled.append(points[-1])

    return resampled[:num_points]


def indicative_angle(points: Sequence[Point]) -> float:
    """Angle from the centroid to the first point."""
    centroid = GeometryUtils.calculate_centroid(points)
    return math.atan2(points[0].y - centroid.y, points[0].x - centroid.x)


def rotate_to_zero(points: Sequence[Point]) -> List[Point]:
    """Rotate points so the first point lies on the centroid's positive x-axis."""
    return GeometryUtils.rotate_points(points, -indicative_angle(points))


def _axis_scale(extent: float, target: float, limit: float) -> float:
    if extent <= limit:
        return 1.0
    return target / extent


def scale_to_square(points: Sequence[Point], size: Tuple[float, float]) -> List[Point]:
    """
    Scale points non-uniformly so their bounding box matches ``size``.

    An axis with no extent (a perfectly straight horizontal or vertical
    stroke) keeps a scale factor of 1.
    """
    width, height = size
    box = GeometryUtils.calculate_bounding_box(points)
    limit = DEGENERATE_EXTENT_RATIO * max(box.width, box.height)

    scale_x = _axis_scale(box.width, width, limit)
    scale_y = _axis_scale(box.height, height, limit)

    return [Point(p.x * scale_x, p.y * scale_y) for p in points]


def translate_to_origin(points: Sequence[Point]) -> List[Point]:
    """Translate points so centroid is at origin."""
    centroid = GeometryUtils.calculate_centroid(points)
    return [Point(p.x - centroid.x, p.y - centroid.y) for p in points]


def normalize(points: Sequence[Point], size: Tuple[float, float],
              num_points: int = RecognizerSettings.NUM_POINTS) -> List[Point]:
    """Run the full pipeline on a raw stroke."""
    DataValidator.validate_stroke(points, RecognizerSettings.MIN_STROKE_POINTS)

    normalized = resample(points, num_points)
    normalized = rotate_to_zero(normalized)
    normalized = scale_to_square(normalized, size)
    return translate_to_origin(normalized)
