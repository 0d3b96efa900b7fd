# houghlines/cv/peaks.py
from __future__ import annotations
from typing import Iterator, Tuple
import numpy as np
from houghlines.cv.accumulator import HoughAccumulator
from houghlines.geometry.reconstruct import descale_rho, descale_theta, line_from_rho_theta

Cell = Tuple[int, int, int]  # theta bin, rho bin, votes

def cells_over_threshold(acc: HoughAccumulator, threshold: int) -> Iterator[Cell]:
    """
    Cells with votes >= threshold, scanned bottom-left to top-right of the Hough-space
    image: rho bins ascending, theta ascending within each rho bin.
    """
    rho_idx, theta_idx = np.nonzero(acc.votes.T >= threshold)
    for r, t in zip(rho_idx, theta_idx):
        yield int(t), int(r), int(acc.votes[t, r])

def global_peak(acc: HoughAccumulator) -> Cell:
    # argmax over the transposed grid keeps the same scan order on ties
    r, t = np.unravel_index(int(np.argmax(acc.votes.T)), acc.votes.T.shape)
    return int(t), int(r), int(acc.votes[t, r])

def cell_line(acc: HoughAccumulator, theta: int, rho_bin: int):
    """(canonical degrees, continuous rho) for a cell."""
    rho = descale_rho(rho_bin, acc.rho_axis_half, acc.max_line_length)
    return descale_theta(theta, acc.theta_axis_scale_factor), rho

def cell_to_segment(acc: HoughAccumulator, theta: int, rho_bin: int):
    theta_degrees, rho = cell_line(acc, theta, rho_bin)
    return line_from_rho_theta(theta_degrees, rho, acc.width, acc.height)
