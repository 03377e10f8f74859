"""
Gesture recognition for single-stroke input.

This module provides the $1 normalization pipeline, the rotation-invariant
matcher and the recognizer that keeps the template store.
"""

from .dollar_recognizer import (
    DollarRecognizer,
    GestureTemplate,
    RecognitionConfig,
    RecognitionResult,
    NoMatch,
    NO_MATCH
)

__all__ = [
    'DollarRecognizer',
    'GestureTemplate',
    'RecognitionConfig',
    'RecognitionResult',
    'NoMatch',
    'NO_MATCH'
]
