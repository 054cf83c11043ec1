"""
Utilidades compartidas: geometría, constantes de landmarks y reloj.
"""

from .constants import *
from .geometry import dist, clamp, mirror_x
from .clock import Clock, monotonic_ms

__all__ = [
    'dist',
    'clamp',
    'mirror_x',
    'Clock',
    'monotonic_ms',
    'NUM_LANDMARKS',
    'PINCH_THRESHOLD',
    'THUMB_TUCK_THRESHOLD',
    'PLACE_COOLDOWN_MS',
    'ERASE_COOLDOWN_MS',
    'CLEAR_COOLDOWN_MS',
    'GRID_W',
    'GRID_H',
    'INSET_X',
    'INSET_Y',
]
