"""
Unistroke Package
A $1 recognizer that maps single-stroke gestures to named templates.
"""

from .gestures.dollar_recognizer import DollarRecognizer, RecognitionResult, NO_MATCH
from .utils.gesture_utils import Point, Rect, InvalidStrokeError

__version__ = "1.0.0"
__all__ = ["DollarRecognizer", "RecognitionResult", "NO_MATCH", "Point", "Rect", "InvalidStrokeError"]
