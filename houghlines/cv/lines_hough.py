# houghlines/cv/lines_hough.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence
import numpy as np
from loguru import logger
from houghlines.cv.accumulator import HoughAccumulator, build_accumulator
from houghlines.cv.peaks import cell_line, cells_over_threshold
from houghlines.cv.render import draw_segments, hough_space_image, to_image_coords
from houghlines.errors import ReconstructionError
from houghlines.geometry.clip import clip_line_liang_barsky, image_rect
from houghlines.geometry.reconstruct import line_from_rho_theta
from houghlines.schema.types import DetectedLine, HoughParams

@dataclass
class DetectionResult:
    accumulator: HoughAccumulator
    lines: List[DetectedLine] = field(default_factory=list)
    rejected: int = 0

    @property
    def visible(self) -> List[DetectedLine]:
        return [line for line in self.lines if line.clipped is not None]

    def hough_image(self) -> np.ndarray:
        return hough_space_image(self.accumulator)

    def overlay(self, pixels: np.ndarray, color: Sequence[int] = (255, 0, 0),
                antialias: bool = False) -> np.ndarray:
        H = self.accumulator.height
        segs = [to_image_coords(line.clipped, H) for line in self.visible]
        return draw_segments(pixels, segs, color=color, antialias=antialias)

def detect_lines(pixels: np.ndarray, params: HoughParams) -> DetectionResult:
    """
    Hough line detection on an (H, W, 3) RGB array.
    Every cell with votes >= houghspace_filter_threshold becomes a DetectedLine;
    segments are in bottom-up coordinates, clipped to [0, W-1] x [0, H-1].
    """
    acc = build_accumulator(pixels, params)
    res = DetectionResult(accumulator=acc)
    rect = image_rect(acc.width, acc.height)
    threshold = params.houghspace_filter_threshold
    if threshold == 0:
        logger.warning("[hough] threshold 0 selects every cell, including empty ones")

    for theta, rho_bin, votes in cells_over_threshold(acc, threshold):
        theta_degrees, rho = cell_line(acc, theta, rho_bin)
        seg = line_from_rho_theta(theta_degrees, rho, acc.width, acc.height)
        clipped = clip_line_liang_barsky(rect, seg)
        if clipped is None:
            # lines come from in-image votes, so a miss points at reconstruction or descaling
            msg = (f"[hough] line theta={theta} ({theta_degrees} deg) rho_bin={rho_bin} "
                   f"rho={rho:.2f} votes={votes} -> {seg} misses the image")
            if params.strict_clipping:
                raise ReconstructionError(msg)
            logger.warning(msg)
            res.rejected += 1
        res.lines.append(DetectedLine(theta=theta, theta_degrees=theta_degrees,
                                      rho_bin=rho_bin, rho=rho, votes=votes,
                                      segment=seg, clipped=clipped))

    logger.info(f"[hough] threshold={threshold}: lines={len(res.lines)} "
                f"visible={len(res.visible)} rejected={res.rejected}")
    return res
