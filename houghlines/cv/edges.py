# houghlines/cv/edges.py
"""
Per-pixel vote predicates.

`dark` is the stock detector: a pixel votes when its mean RGB intensity is below a
threshold (1 by default, i.e. pure black). `contrast` votes when any 8-neighbour differs
from the pixel by at least `min_contrast`. Neither is a gradient edge detector.
"""
from __future__ import annotations
from typing import Iterator, Tuple
import numpy as np
from houghlines.errors import InvalidConfigurationError
from houghlines.geometry.trig import round_half_away

EDGE_MODES = ("dark", "contrast")

def pixel_intensity(pixels: np.ndarray, x: int, y: int) -> int:
    r, g, b = (int(c) for c in pixels[y, x, :3])
    return round_half_away((r + g + b) / 3.0)

def intensity_map(pixels: np.ndarray) -> np.ndarray:
    s = pixels[..., :3].astype(np.float64).sum(axis=-1)
    return round_half_away(s / 3.0).astype(np.int32)

def is_edge(pixels: np.ndarray, x: int, y: int, threshold: int = 1) -> bool:
    return pixel_intensity(pixels, x, y) < threshold

def _neighbour_offsets() -> Iterator[Tuple[int, int]]:
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx or dy:
                yield dx, dy

def is_contrast_edge(intensity: np.ndarray, x: int, y: int, min_contrast: int) -> bool:
    H, W = intensity.shape
    centre = int(intensity[y, x])
    for dx, dy in _neighbour_offsets():
        nx, ny = x + dx, y + dy
        if nx < 0 or nx >= W or ny < 0 or ny >= H:
            continue
        if abs(int(intensity[ny, nx]) - centre) >= min_contrast:
            return True
    return False

def _contrast_mask(intensity: np.ndarray, min_contrast: int) -> np.ndarray:
    H, W = intensity.shape
    mask = np.zeros((H, W), dtype=bool)
    for dx, dy in _neighbour_offsets():
        # centre window whose (dx, dy) neighbour is still inside the image
        y0, y1 = max(0, -dy), H - max(0, dy)
        x0, x1 = max(0, -dx), W - max(0, dx)
        if y1 <= y0 or x1 <= x0:
            continue
        c = intensity[y0:y1, x0:x1]
        n = intensity[y0 + dy:y1 + dy, x0 + dx:x1 + dx]
        mask[y0:y1, x0:x1] |= np.abs(n - c) >= min_contrast
    return mask

def edge_mask(pixels: np.ndarray, mode: str = "dark",
              threshold: int = 1, min_contrast: int = 85) -> np.ndarray:
    """Boolean (H, W) mask, equal to the per-pixel predicate evaluated everywhere."""
    if mode not in EDGE_MODES:
        raise InvalidConfigurationError(f"unknown edge mode {mode!r}; expected one of {EDGE_MODES}")
    intensity = intensity_map(pixels)
    if mode == "dark":
        return intensity < threshold
    return _contrast_mask(intensity, min_contrast)
