"""
$1 Unistroke Recognizer Implementation

This implements the $1 Unistroke Recognizer algorithm: a stroke is
normalized (resampled, rotated, scaled and translated) and compared against
every stored template with a golden-section search over a bounded rotation
range. The closest template wins.

Reference: https://depts.washington.edu/acelab/proj/dollar/index.html
"""

import logging
import threading
import time
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..config.settings import RecognizerSettings
from ..utils.gesture_utils import Point, Rect, PathUtils, DataValidator, InvalidStrokeError
from .matcher import to_array, distance_at_best_angle
from .normalizer import normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecognitionResult:
    """Result of $1 recognition with name, score, distance and timing."""
    name: str
    score: float
    distance: float
    time_ms: float


@dataclass(frozen=True)
class NoMatch:
    """Outcome of recognizing against a store with no templates."""
    reason: str = "no templates"

    def __bool__(self):
        return False


NO_MATCH = NoMatch()


class RecognitionConfig:
    """Per-recognizer algorithm parameters."""

    def __init__(self,
                 num_points: int = RecognizerSettings.NUM_POINTS,
                 angle_range: float = RecognizerSettings.ANGLE_RANGE,
                 angle_precision: float = RecognizerSettings.ANGLE_PRECISION,
                 phi: float = RecognizerSettings.PHI):
        if num_points < 2:
            raise ValueError(f"num_points must be at least 2, got {num_points}")
        if angle_range < 0:
            raise ValueError(f"angle_range must not be negative, got {angle_range}")
        if angle_precision <= 0:
            raise ValueError(f"angle_precision must be positive, got {angle_precision}")
        if not 0.5 < phi < 1.0:
            raise ValueError(f"phi must lie in (0.5, 1), got {phi}")

        self.num_points = num_points
        self.angle_range = angle_range
        self.angle_precision = angle_precision
        self.phi = phi

    def __repr__(self):
        return (f"RecognitionConfig(num_points={self.num_points}, angle_range={self.angle_range:.4f}, "
                f"angle_precision={self.angle_precision:.4f}, phi={self.phi})")


class GestureTemplate:
    """A named template: the raw stroke plus its normalized form for one reference size."""

    def __init__(self, name: str, points: Iterable[Point], size: Tuple[float, float],
                 num_points: int = RecognizerSettings.NUM_POINTS):
        self.name = name
        self.raw_points = tuple(points)
        self.size = tuple(size)
        self.num_points = num_points
        self.points = tuple(normalize(self.raw_points, self.size, num_points))
        self.vector = to_array(self.points)
        self.vector.setflags(write=False)

    def renormalized(self, size: Tuple[float, float]) -> 'GestureTemplate':
        """Return this template normalized against a different reference size."""
        return GestureTemplate(self.name, self.raw_points, size, self.num_points)

    def __repr__(self):
        return f"GestureTemplate({self.name!r}, {len(self.raw_points)} points)"


def _validate_region(region: Any) -> Rect:
    if not isinstance(region, Rect):
        raise ValueError(f"region must be a Rect, got {type(region).__name__}")
    if region.width <= 0 or region.height <= 0:
        raise ValueError(f"region must have a positive size, got {region.width}x{region.height}")
    return region


class DollarRecognizer:
    """
    $1 Unistroke Recognizer for gesture classification.

    Templates are normalized once against the current region size. When the
    region size changes, stale templates are renormalized from their raw
    points on the next recognition, so templates and queries always share
    the same reference square.
    """

    def __init__(self, templates: Optional[Mapping[str, Iterable[Any]]] = None,
                 region: Optional[Rect] = None,
                 config: Optional[RecognitionConfig] = None):
        self.config = config or RecognitionConfig()
        self._region = _validate_region(region or Rect(
            0.0, 0.0,
            RecognizerSettings.DEFAULT_REGION_WIDTH,
            RecognizerSettings.DEFAULT_REGION_HEIGHT
        ))
        self._templates: Dict[str, GestureTemplate] = {}
        self._lock = threading.Lock()

        for name, points in (templates or {}).items():
            self.add_template(name, points)

    @classmethod
    def create(cls, templates: Optional[Mapping[str, Iterable[Any]]] = None,
               region: Optional[Rect] = None,
               config: Optional[RecognitionConfig] = None) -> 'DollarRecognizer':
        """Build a recognizer from raw templates and a normalization region."""
        return cls(templates, region, config)

    @property
    def region(self) -> Rect:
        return self._region

    @region.setter
    def region(self, region: Rect):
        region = _validate_region(region)
        with self._lock:
            self._region = region
        logger.info(f"Region set to {region.width}x{region.height}")

    @property
    def templates(self) -> Mapping[str, Tuple[Point, ...]]:
        """Read-only view of the raw template points, keyed by name."""
        with self._lock:
            return MappingProxyType({name: t.raw_points for name, t in self._templates.items()})

    def __len__(self):
        return len(self._templates)

    def __contains__(self, name):
        return name in self._templates

    def add_template(self, name: str, points: Iterable[Any]):
        """Add a gesture template, replacing any template with the same name."""
        if not name:
            raise InvalidStrokeError("template name must not be empty")

        raw_points = PathUtils.to_points(points)
        with self._lock:
            template = GestureTemplate(name, raw_points, self._region.size, self.config.num_points)
            replaced = name in self._templates
            self._templates[name] = template

        logger.info(f"{'Replaced' if replaced else 'Added'} template '{name}' ({len(raw_points)} points)")

    def remove_template(self, name: str):
        """Remove a template by name; unknown names are ignored."""
        with self._lock:
            removed = self._templates.pop(name, None)

        if removed is not None:
            logger.info(f"Removed template '{name}'")

    def _current_templates(self, size: Tuple[float, float]) -> List[GestureTemplate]:
        # Caller holds the lock
        for name, template in self._templates.items():
            if template.size != size:
                logger.debug(f"Renormalizing template '{name}' for region {size[0]}x{size[1]}")
                self._templates[name] = template.renormalized(size)
        return list(self._templates.values())

    def recognize(self, points: Iterable[Any]) -> Union[RecognitionResult, NoMatch]:
        """
        Classify a stroke against every stored template.

        Args:
            points: Stroke as Points, (x, y) pairs or dicts with 'x' and 'y' keys

        Returns:
            RecognitionResult for the closest template, or NO_MATCH when the
            store is empty
        """
        start_time = time.time()
        query = PathUtils.to_points(points)
        DataValidator.validate_stroke(query, RecognizerSettings.MIN_STROKE_POINTS)

        with self._lock:
            region = self._region
            templates = self._current_templates(region.size)

        if not templates:
            logger.debug("No templates stored, nothing to match against")
            return NO_MATCH

        candidate = to_array(normalize(query, region.size, self.config.num_points))

        best_distance = float('inf')
        best_template = None
        for template in templates:
            distance = distance_at_best_angle(
                candidate, template.vector,
                self.config.angle_range, self.config.angle_precision, self.config.phi
            )
            logger.debug(f"Template {template.name}: distance {distance:.4f}")
            if distance < best_distance:
                best_distance = distance
                best_template = template

        # Not clamped, very poor matches score below zero
        score = 1.0 - best_distance / region.half_diagonal
        time_ms = (time.time() - start_time) * 1000
        logger.debug(f"Best template: {best_template.name} with distance {best_distance:.4f} "
                     f"(score {score:.3f}, {time_ms:.2f}ms)")

        return RecognitionResult(best_template.name, score, best_distance, time_ms)
