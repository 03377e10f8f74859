"""
Configuration settings for the unistroke recognizer.
"""

import math


class RecognizerSettings:
    """Default constants for $1 unistroke recognition."""

    # Every normalized stroke is resampled to this many points
    NUM_POINTS = 64

    # Rotation search bracket and stopping width (radians)
    ANGLE_RANGE = 45.0 / 180 * math.pi
    ANGLE_PRECISION = 2.0 / 180 * math.pi

    # Golden ratio conjugate
    PHI = 0.61803399

    # Reference square used when the caller supplies no region
    DEFAULT_REGION_WIDTH = 250.0
    DEFAULT_REGION_HEIGHT = 250.0

    MIN_STROKE_POINTS = 2
