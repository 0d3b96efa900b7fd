# houghlines/geometry/clip.py
from __future__ import annotations
from typing import Optional, Tuple
from houghlines.geometry.trig import round_half_away

Point = Tuple[int, int]
Segment = Tuple[Point, Point]
Rect = Tuple[float, float, float, float]  # left, right, bottom, top

def image_rect(width: int, height: int) -> Rect:
    return (0, width - 1, 0, height - 1)

def clip_line_liang_barsky(rect: Rect, segment: Segment) -> Optional[Segment]:
    """
    Liang-Barsky clip of `segment` against `rect` (left, right, bottom, top).
    Returns the visible part with rounded endpoints, or None when nothing is visible.
    """
    left, right, bottom, top = rect
    (x0, y0), (x1, y1) = segment
    dx = x1 - x0
    dy = y1 - y0

    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - left), (dx, right - x0),
                 (-dy, y0 - bottom), (dy, top - y0)):
        if p == 0:
            # parallel to this edge
            if q < 0:
                return None
            continue
        r = q / p
        if p < 0:
            if r > t1:
                return None
            if r > t0:
                t0 = r
        else:
            if r < t0:
                return None
            if r < t1:
                t1 = r

    return ((round_half_away(x0 + t0 * dx), round_half_away(y0 + t0 * dy)),
            (round_half_away(x0 + t1 * dx), round_half_away(y0 + t1 * dy)))
