# houghlines/geometry/reconstruct.py
"""
Peak -> line segment.

A Hough cell (theta, rho) describes an infinite line. We turn it into two endpoints on the
image border with closed-form right-triangle trigonometry (law of sines). The general formulas
divide by sin(alpha) or sin(90 - alpha), so axis-aligned angles get their own regime.

All angles here are canonical degrees in [0, 180]; oversampled theta bins must be descaled first.
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Tuple
import numpy as np
from houghlines.geometry.trig import CANONICAL_AXIS, degrees_to_radians, round_half_away

Point = Tuple[int, int]
Segment = Tuple[Point, Point]

class AngleRegime(str, Enum):
    VERTICAL = "vertical"      # theta == 0 or 180
    HORIZONTAL = "horizontal"  # theta == 90
    RISING = "rising"          # 0 < theta < 90, normal points into the first quadrant
    FALLING = "falling"        # 90 < theta < 180

def classify_angle(theta_degrees: int) -> AngleRegime:
    if theta_degrees < 0 or theta_degrees > CANONICAL_AXIS:
        raise ValueError(f"theta {theta_degrees} outside [0, {CANONICAL_AXIS}]")
    if theta_degrees in (0, CANONICAL_AXIS):
        return AngleRegime.VERTICAL
    if theta_degrees == 90:
        return AngleRegime.HORIZONTAL
    if theta_degrees < 90:
        return AngleRegime.RISING
    return AngleRegime.FALLING

def _sin(deg: float) -> float:
    return float(np.sin(degrees_to_radians(deg, CANONICAL_AXIS)))

def _vertical(theta, rho, width, height):
    return (abs(rho), height), (abs(rho), 0)

def _horizontal(theta, rho, width, height):
    return (0, abs(rho)), (width, abs(rho))

def _rising(theta, rho, width, height):
    alpha = theta
    beta = 90 - alpha
    return (0, abs(rho) / _sin(alpha)), (abs(rho) / _sin(beta), 0)

def _falling(theta, rho, width, height):
    alpha = theta % 90
    beta = 90 - alpha
    if rho < 0:
        x1 = abs(rho) / _sin(alpha)
        y2 = (width - abs(x1)) * _sin(alpha) / _sin(beta)
    else:
        x1 = -abs(rho) / _sin(alpha)
        y2 = (width + abs(x1)) * _sin(alpha) / _sin(beta)
    return (x1, 0), (width, y2)

_REGIMES: Dict[AngleRegime, Callable] = {
    AngleRegime.VERTICAL: _vertical,
    AngleRegime.HORIZONTAL: _horizontal,
    AngleRegime.RISING: _rising,
    AngleRegime.FALLING: _falling,
}

def line_from_rho_theta(theta_degrees: int, rho: float, width: int, height: int) -> Segment:
    """
    Endpoints of the line (theta_degrees, rho) in bottom-up image coordinates, rounded.
    The segment may run past the image; clip it afterwards.
    """
    regime = classify_angle(theta_degrees)
    p1, p2 = _REGIMES[regime](theta_degrees, rho, width, height)
    return ((round_half_away(p1[0]), round_half_away(p1[1])),
            (round_half_away(p2[0]), round_half_away(p2[1])))

def descale_rho(rho_bin: int, rho_axis_half: int, max_line_length: int) -> float:
    # rho_axis_half is the accumulator's floored half (rho_axis_size // 2), same as when voting
    return (rho_bin - rho_axis_half) * max_line_length / rho_axis_half

def descale_theta(theta: int, theta_axis_scale_factor: int) -> int:
    return round_half_away(theta / theta_axis_scale_factor)
