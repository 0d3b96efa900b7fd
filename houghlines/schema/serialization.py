# houghlines/schema/serialization.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List
import pandas as pd
from houghlines.cv.lines_hough import DetectionResult
from houghlines.cv.render import to_image_coords
from houghlines.schema.types import DetectedLine, HoughParams

LINE_COLUMNS = ["theta", "theta_degrees", "rho_bin", "rho", "votes",
                "x0", "y0", "x1", "y1", "visible",
                "img_x0", "img_y0", "img_x1", "img_y1"]

def lines_frame(lines: List[DetectedLine], height: int) -> pd.DataFrame:
    """One row per detected line; x0..y1 bottom-up reconstruction, img_* clipped top-down pixels."""
    rows = []
    for line in lines:
        (x0, y0), (x1, y1) = line.segment
        row = {
            "theta": line.theta, "theta_degrees": line.theta_degrees,
            "rho_bin": line.rho_bin, "rho": round(line.rho, 3), "votes": line.votes,
            "x0": x0, "y0": y0, "x1": x1, "y1": y1,
            "visible": line.clipped is not None,
            "img_x0": None, "img_y0": None, "img_x1": None, "img_y1": None,
        }
        if line.clipped is not None:
            (a0, b0), (a1, b1) = to_image_coords(line.clipped, height)
            row.update(img_x0=a0, img_y0=b0, img_x1=a1, img_y1=b1)
        rows.append(row)
    return pd.DataFrame(rows, columns=LINE_COLUMNS)

def export_lines_csv(result: DetectionResult, path) -> str:
    df = lines_frame(result.lines, result.accumulator.height)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out, index=False)
    return str(out)

def lines_summary(result: DetectionResult, params: HoughParams) -> Dict[str, Any]:
    acc = result.accumulator
    return {
        "image": {"width": acc.width, "height": acc.height},
        "params": params.model_dump(),
        "accumulator": {
            "theta_axis_size": acc.theta_axis_size,
            "rho_axis_size": acc.rho_axis_size,
            "rho_axis_half": acc.rho_axis_half,
            "max_line_length": acc.max_line_length,
            "total_votes": acc.total_votes,
            "max_votes": acc.max_votes,
        },
        "n_lines": len(result.lines),
        "n_visible": len(result.visible),
        "n_rejected": result.rejected,
        "lines": [line.model_dump() for line in result.lines],
    }
