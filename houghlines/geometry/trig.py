# houghlines/geometry/trig.py
from __future__ import annotations
import math
import numpy as np

CANONICAL_AXIS = 180

def round_half_away(value):
    """
    Round to nearest, ties away from zero (np.round / round() use banker's rounding).
    Works on scalars and numpy arrays; scalars come back as int.
    """
    if isinstance(value, np.ndarray):
        return np.sign(value) * np.floor(np.abs(value) + 0.5)
    return int(math.copysign(math.floor(abs(value) + 0.5), value))

def degrees_to_radians(deg, axis_size: int):
    """
    Map a position on a theta axis of `axis_size` bins onto radians.
    The axis covers [0, pi) whatever its size, so axis_size=360 means half-degree bins.
    """
    return deg * np.pi / axis_size

def max_line_length(width: int, height: int) -> int:
    return int(math.ceil(math.hypot(width, height)))

def calculate_rho(theta, axis_size: int, x, y):
    """Normal-form distance x*cos(t) + y*sin(t); y is measured upward from the bottom edge."""
    rad = degrees_to_radians(theta, axis_size)
    return x * np.cos(rad) + y * np.sin(rad)
