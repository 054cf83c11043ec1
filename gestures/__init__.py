"""
Detectores de gestos individuales
"""

from .base import Gesture
from .drag import DragGesture
from .place import PlaceGesture
from .erase import EraseGesture
from .clear import ClearGesture

__all__ = [
    'Gesture',
    'DragGesture',
    'PlaceGesture',
    'EraseGesture',
    'ClearGesture',
]
