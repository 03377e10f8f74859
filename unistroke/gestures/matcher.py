"""
Rotation-invariant matching for the $1 recognizer.

Indicative-angle rotation leaves some residual misalignment, so each template
comparison searches a bounded rotation range with golden-section search for
the angle that minimizes path distance.
"""

from typing import Callable, Sequence, Tuple

import numpy as np

from ..config.settings import RecognizerSettings
from ..utils.gesture_utils import Point


def to_array(points: Sequence[Point]) -> np.ndarray:
    """Convert points to an (n, 2) float array."""
    return np.array([(p.x, p.y) for p in points], dtype=float)


def golden_section_search(objective: Callable[[float], float], lower: float, upper: float,
                          precision: float = RecognizerSettings.ANGLE_PRECISION,
                          phi: float = RecognizerSettings.PHI) -> Tuple[float, float]:
    """
    Minimize a unimodal function on [lower, upper] without derivatives.

    Args:
        objective: Function of one variable to minimize
        lower: Lower end of the search bracket
        upper: Upper end of the search bracket
        precision: Stop once the bracket is narrower than this
        phi: Golden ratio conjugate used to place the probes

    Returns:
        Tuple of (argument, value) of the best probe
    """
    if upper < lower:
        lower, upper = upper, lower

    x1 = phi * lower + (1 - phi) * upper
    f1 = objective(x1)

    x2 = (1 - phi) * lower + phi * upper
    f2 = objective(x2)

    while abs(upper - lower) > precision:
        if f1 < f2:
            upper = x2
            x2 = x1
            f2 = f1
            x1 = phi * lower + (1 - phi) * upper
            f1 = objective(x1)
        else:
            lower = x1
            x1 = x2
            f1 = f2
            x2 = (1 - phi) * lower + phi * upper
            f2 = objective(x2)

    if f1 < f2:
        return x1, f1
    return x2, f2


def path_distance(points: np.ndarray, template_points: np.ndarray) -> float:
    """Mean pointwise Euclidean distance between two index-aligned arrays."""
    if points.shape != template_points.shape:
        raise ValueError(
            f"path distance needs equal point counts, got {len(points)} and {len(template_points)}"
        )
    diff = points - template_points
    return float(np.mean(np.hypot(diff[:, 0], diff[:, 1])))


def rotate(points: np.ndarray, angle: float) -> np.ndarray:
    """Rotate an (n, 2) array about its centroid."""
    centroid = points.mean(axis=0)
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    rotation = np.array([[cos_a, -sin_a], [sin_a, cos_a]])
    return (points - centroid) @ rotation.T + centroid


def distance_at_angle(points: np.ndarray, template_points: np.ndarray, angle: float) -> float:
    """Calculate distance after rotating the query by ``angle``."""
    return path_distance(rotate(points, angle), template_points)


def distance_at_best_angle(points: np.ndarray, template_points: np.ndarray,
                           angle_range: float = RecognizerSettings.ANGLE_RANGE,
                           precision: float = RecognizerSettings.ANGLE_PRECISION,
                           phi: float = RecognizerSettings.PHI) -> float:
    """Find the smallest distance over rotations in [-angle_range, +angle_range]."""
    _, distance = golden_section_search(
        lambda angle: distance_at_angle(points, template_points, angle),
        -angle_range, angle_range, precision, phi
    )
    return distance
