"""
Shared geometry utilities for unistroke recognition.

This module provides the point and rectangle value types together with the
geometric primitives used by both the normalization pipeline and the matcher.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence


class InvalidStrokeError(ValueError):
    """Raised when a stroke cannot be normalized or registered."""


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""
    x: float
    y: float

    def __post_init__(self):
        # frozen dataclass, so coerce through object.__setattr__
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its origin and size."""
    x: float
    y: float
    width: float
    height: float

    @property
    def half_diagonal(self) -> float:
        return 0.5 * math.sqrt(self.width ** 2 + self.height ** 2)

    @property
    def size(self):
        return self.width, self.height


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def calculate_centroid(points: Sequence[Point]) -> Point:
        """Calculate the centroid of a list of points."""
        if not points:
            raise InvalidStrokeError("centroid of an empty stroke is undefined")
        sum_x = sum(p.x for p in points)
        sum_y = sum(p.y for p in points)
        return Point(sum_x / len(points), sum_y / len(points))

    @staticmethod
    def calculate_bounding_box(points: Sequence[Point]) -> Rect:
        """Get the minimal axis-aligned rectangle containing all points."""
        if not points:
            raise InvalidStrokeError("bounding box of an empty stroke is undefined")

        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)

        return Rect(min_x, min_y, max_x - min_x, max_y - min_y)

    @staticmethod
    def rotate_points(points: Sequence[Point], angle: float, centroid: Optional[Point] = None) -> List[Point]:
        """Rotate points around a centroid."""
        if centroid is None:
            centroid = GeometryUtils.calculate_centroid(points)

        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        rotated = []
        for point in points:
            dx = point.x - centroid.x
            dy = point.y - centroid.y

            new_x = dx * cos_a - dy * sin_a + centroid.x
            new_y = dx * sin_a + dy * cos_a + centroid.y

            rotated.append(Point(new_x, new_y))

        return rotated

    @staticmethod
    def calculate_distance(p1: Point, p2: Point) -> float:
        """Calculate Euclidean distance between two points."""
        return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)

    @staticmethod
    def calculate_path_length(points: Sequence[Point]) -> float:
        """Calculate total path length."""
        if len(points) < 2:
            return 0.0

        length = 0.0
        for i in range(1, len(points)):
            length += GeometryUtils.calculate_distance(points[i-1], points[i])
        return length

    @staticmethod
    def calculate_path_distance(points1: Sequence[Point], points2: Sequence[Point]) -> float:
        """Mean pointwise distance between two index-aligned strokes."""
        if len(points1) != len(points2):
            raise ValueError(
                f"path distance needs equal point counts, got {len(points1)} and {len(points2)}"
            )
        if not points1:
            return 0.0

        distance = 0.0
        for p1, p2 in zip(points1, points2):
            distance += GeometryUtils.calculate_distance(p1, p2)

        return distance / len(points1)


class PathUtils:
    """Utility class for converting caller point data."""

    @staticmethod
    def to_point(item: Any) -> Point:
        """Convert a Point, an (x, y) pair or an {'x', 'y'} dict to a Point."""
        if isinstance(item, Point):
            return item
        try:
            if isinstance(item, dict):
                return Point(item['x'], item['y'])
            x, y = item
            return Point(x, y)
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidStrokeError(f"cannot interpret {item!r} as a point") from e

    @staticmethod
    def to_points(path: Iterable[Any]) -> List[Point]:
        """Convert a path of mixed point representations to Point objects."""
        return [PathUtils.to_point(p) for p in path]

    @staticmethod
    def to_dicts(points: Iterable[Point]) -> List[Dict[str, float]]:
        """Convert Point objects to dict format."""
        return [{'x': p.x, 'y': p.y} for p in points]


class DataValidator:
    """Utility class for validating stroke data."""

    @staticmethod
    def validate_stroke(points: Sequence[Point], min_points: int = 2) -> None:
        """Raise InvalidStrokeError unless the stroke can be normalized."""
        if len(points) < min_points:
            raise InvalidStrokeError(
                f"stroke needs at least {min_points} points, got {len(points)}"
            )
        for point in points:
            if not (math.isfinite(point.x) and math.isfinite(point.y)):
                raise InvalidStrokeError(f"stroke contains non-finite point {point!r}")
