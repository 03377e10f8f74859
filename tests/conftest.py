"""Shared pytest fixtures for the unistroke test suite.

Fixtures:
    circle_points: Closed circle drawn counter-clockwise from the right
    triangle_points: Triangle drawn from its top vertex
    check_points: Check mark drawn left to right
    zigzag_points: Four-segment zigzag
    shape_templates: Mapping of the shapes above by name
    recognizer: DollarRecognizer loaded with shape_templates on a 200x200 region
"""

import math

import pytest

from unistroke.gestures.dollar_recognizer import DollarRecognizer
from unistroke.utils.gesture_utils import Point, Rect


def make_circle(cx=100.0, cy=100.0, radius=50.0, num_points=40):
    points = []
    for i in range(num_points + 1):
        angle = 2 * math.pi * i / num_points
        points.append(Point(cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points


def transform(points, angle=0.0, scale=1.0, dx=0.0, dy=0.0):
    """Rotate about the origin, scale uniformly, then translate."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return [
        Point((p.x * cos_a - p.y * sin_a) * scale + dx,
              (p.x * sin_a + p.y * cos_a) * scale + dy)
        for p in points
    ]


@pytest.fixture
def circle_points():
    return make_circle()


@pytest.fixture
def triangle_points():
    return [Point(100, 20), Point(30, 150), Point(170, 150), Point(100, 20)]


@pytest.fixture
def check_points():
    return [Point(20, 90), Point(40, 110), Point(60, 130), Point(100, 80),
            Point(140, 30), Point(160, 10)]


@pytest.fixture
def zigzag_points():
    return [Point(0, 0), Point(40, 60), Point(80, 0), Point(120, 60), Point(160, 0)]


@pytest.fixture
def shape_templates(circle_points, triangle_points, check_points, zigzag_points):
    return {
        'circle': circle_points,
        'triangle': triangle_points,
        'check': check_points,
        'zigzag': zigzag_points,
    }


@pytest.fixture
def recognizer(shape_templates):
    return DollarRecognizer.create(shape_templates, Rect(0, 0, 200, 200))
