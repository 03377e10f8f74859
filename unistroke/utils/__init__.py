"""
Utilities package for unistroke recognition.

This package provides the point types and geometry helpers shared by the
normalization pipeline and the matcher.
"""

from .gesture_utils import (
    Point,
    Rect,
    GeometryUtils,
    PathUtils,
    DataValidator,
    InvalidStrokeError
)

__all__ = [
    'Point',
    'Rect',
    'GeometryUtils',
    'PathUtils',
    'DataValidator',
    'InvalidStrokeError'
]
