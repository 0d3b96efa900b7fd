# houghlines/cv/render.py
from __future__ import annotations
from typing import Iterable, Iterator, Sequence, Tuple
import cv2
import numpy as np
from houghlines.cv.accumulator import HoughAccumulator
from houghlines.geometry.trig import round_half_away

Point = Tuple[int, int]
Segment = Tuple[Point, Point]

def hough_space_image(acc: HoughAccumulator) -> np.ndarray:
    """
    Greyscale view of the accumulator: width = theta bins, height = rho bins,
    rho bin 0 on the bottom row. Cells scale linearly so the peak is 255.
    """
    mx = acc.max_votes
    if mx == 0:
        return np.zeros((acc.rho_axis_size, acc.theta_axis_size), dtype=np.uint8)
    scaled = round_half_away(acc.votes.astype(np.float64) * 255.0 / mx)
    grey = np.minimum(scaled, 255).astype(np.uint8)
    return grey.T[::-1, :].copy()

def bresenham(p0: Point, p1: Point) -> Iterator[Point]:
    x0, y0 = p0; x1, y1 = p1
    dx = abs(x1 - x0); dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy; x0 += sx
        if e2 <= dx:
            err += dx; y0 += sy

def to_image_coords(segment: Segment, height: int) -> Segment:
    """Bottom-up cartesian -> top-down pixel rows."""
    (x0, y0), (x1, y1) = segment
    return (x0, height - 1 - y0), (x1, height - 1 - y1)

def draw_segments(pixels: np.ndarray, segments: Iterable[Segment],
                  color: Sequence[int] = (255, 0, 0), antialias: bool = False) -> np.ndarray:
    """
    Copy of `pixels` with every segment (top-down image coordinates) drawn over it.
    Pixels falling outside the image are skipped.
    """
    out = pixels.copy()
    H, W = out.shape[:2]
    col = tuple(int(c) for c in color)
    for p0, p1 in segments:
        if antialias:
            cv2.line(out, tuple(map(int, p0)), tuple(map(int, p1)), col, 1, cv2.LINE_AA)
            continue
        for x, y in bresenham(p0, p1):
            if 0 <= x < W and 0 <= y < H:
                out[y, x, :3] = col[:3]
    return out
