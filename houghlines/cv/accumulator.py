# houghlines/cv/accumulator.py
from __future__ import annotations
from dataclasses import dataclass
import numpy as np
from loguru import logger
from houghlines.cv.edges import edge_mask
from houghlines.errors import AccumulatorIndexError, InvalidConfigurationError
from houghlines.geometry.trig import calculate_rho, max_line_length, round_half_away
from houghlines.schema.types import HoughParams

# votes per chunk = pixels * theta bins; keeps the temporaries around 32 MB
_CHUNK_VOTES = 4_000_000

@dataclass
class HoughAccumulator:
    """
    Vote histogram over (theta bin, rho bin). votes has shape (theta_axis_size, rho_axis_size).
    Rho bin `rho_axis_half` is rho == 0; lower bins are negative distances.
    """
    votes: np.ndarray
    width: int
    height: int
    theta_axis_scale_factor: int
    rho_axis_scale_factor: int
    max_line_length: int
    rho_axis_half: int

    @property
    def theta_axis_size(self) -> int:
        return self.votes.shape[0]

    @property
    def rho_axis_size(self) -> int:
        return self.votes.shape[1]

    @property
    def total_votes(self) -> int:
        return int(self.votes.sum())

    @property
    def max_votes(self) -> int:
        return int(self.votes.max()) if self.votes.size else 0

    def rho_bin(self, rho):
        """Continuous rho -> bin index (array or scalar)."""
        return round_half_away(rho * self.rho_axis_half / self.max_line_length) + self.rho_axis_half

def allocate(width: int, height: int, params: HoughParams) -> HoughAccumulator:
    if params.theta_axis_scale_factor < 1 or params.rho_axis_scale_factor < 1:
        raise InvalidConfigurationError(
            f"scale factors must be >= 1 (theta={params.theta_axis_scale_factor}, "
            f"rho={params.rho_axis_scale_factor})")
    if width < 1 or height < 1:
        raise InvalidConfigurationError(f"image must be non-empty (got {width}x{height})")
    max_len = max_line_length(width, height)
    rho_axis_size = max_len * params.rho_axis_scale_factor
    return HoughAccumulator(
        votes=np.zeros((params.theta_axis_size, rho_axis_size), dtype=np.uint32),
        width=width, height=height,
        theta_axis_scale_factor=params.theta_axis_scale_factor,
        rho_axis_scale_factor=params.rho_axis_scale_factor,
        max_line_length=max_len,
        # floor, not round: an odd axis would otherwise put the top bin at rho_axis_size
        rho_axis_half=rho_axis_size // 2,
    )

def accumulate(acc: HoughAccumulator, xs: np.ndarray, ys: np.ndarray) -> None:
    """
    Cast theta_axis_size votes for every pixel (xs[i], ys[i]), ys in top-down image rows.
    """
    T, R = acc.theta_axis_size, acc.rho_axis_size
    thetas = np.arange(T, dtype=np.float64)[None, :]
    theta_idx = np.arange(T, dtype=np.int64)[None, :]
    chunk = max(1, _CHUNK_VOTES // T)

    for start in range(0, len(xs), chunk):
        x = xs[start:start + chunk].astype(np.float64)[:, None]
        y_inverted = (acc.height - 1 - ys[start:start + chunk]).astype(np.float64)[:, None]
        r = calculate_rho(thetas, T, x, y_inverted)
        rho_scaled = acc.rho_bin(r).astype(np.int64)

        lo, hi = int(rho_scaled.min()), int(rho_scaled.max())
        if lo < 0 or hi >= R:
            raise AccumulatorIndexError(
                f"rho bin out of range [0, {R}): got [{lo}, {hi}] "
                f"(max_line_length={acc.max_line_length}, rho_axis_half={acc.rho_axis_half})")

        flat = (theta_idx * R + rho_scaled).ravel()
        acc.votes += np.bincount(flat, minlength=T * R).reshape(T, R).astype(np.uint32)

def build_accumulator(pixels: np.ndarray, params: HoughParams) -> HoughAccumulator:
    """Scan the image and vote for every edge pixel over the whole theta axis."""
    H, W = pixels.shape[:2]
    acc = allocate(W, H, params)
    mask = edge_mask(pixels, params.edge_mode, params.edge_threshold, params.min_contrast)
    ys, xs = np.nonzero(mask)
    accumulate(acc, xs, ys)
    logger.info(f"[hough] accumulator {acc.theta_axis_size}x{acc.rho_axis_size}: "
                f"edge_pixels={len(xs)} votes={acc.total_votes} max={acc.max_votes}")
    return acc
